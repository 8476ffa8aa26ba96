"""
Module: test_batch_helpers.py
Description: Unit tests for batch validation, entry builders and id generation.
"""

import random
import string

import pytest

from simple_sqs.models.message import Message
from simple_sqs.utils.batch_helpers import (
    build_delete_entries,
    build_send_entries,
    validate_batch_size
)
from simple_sqs.utils.ids import ID_ALPHABET, RandomIdGenerator, random_id


class TestValidateBatchSize:
    """Test cases for validate_batch_size."""

    def test_accepts_sizes_within_limit(self):
        """Test that 1 to max_size items pass."""
        validate_batch_size([1], 10)
        validate_batch_size(list(range(10)), 10)

    def test_rejects_oversized_batch(self):
        """Test that more than max_size items fail."""
        with pytest.raises(ValueError, match="batch size cannot exceed 10 items"):
            validate_batch_size(list(range(11)), 10)

    def test_rejects_empty_batch(self):
        """Test that an empty batch fails."""
        with pytest.raises(ValueError, match="at least one item"):
            validate_batch_size([], 10)

    def test_rejects_non_list(self):
        """Test that only lists are accepted."""
        with pytest.raises(ValueError, match="items must be a list"):
            validate_batch_size(("a", "b"), 10)


class TestBuildEntries:
    """Test cases for the batch entry builders."""

    def test_send_entries_pair_bodies_with_generated_ids(self):
        """Test that each body gets the next generated id, in order."""
        ids = iter(["id1", "id2", "id3"])

        entries = build_send_entries(["a", "b", "c"], lambda: next(ids))

        assert [(entry.id, entry.body) for entry in entries] == [
            ("id1", "a"),
            ("id2", "b"),
            ("id3", "c"),
        ]

    def test_send_entries_default_ids(self):
        """Test that default ids are 15 alphanumeric characters."""
        entries = build_send_entries(["a", "b"])

        for entry in entries:
            assert len(entry.id) == 15
            assert set(entry.id) <= set(ID_ALPHABET)

    def test_send_entries_reject_non_strings(self):
        """Test that bodies must be strings."""
        with pytest.raises(ValueError, match="message body must be a string"):
            build_send_entries(["a", 1])

    def test_delete_entries_reuse_message_ids(self):
        """Test that delete entries carry each message's own id and handle."""
        messages = [
            Message(body="a", receipt_handle="rh-1", message_id="m-1"),
            Message(body="b", receipt_handle="rh-2", message_id="m-2"),
        ]

        entries = build_delete_entries(messages)

        assert [(entry.id, entry.receipt_handle) for entry in entries] == [
            ("m-1", "rh-1"),
            ("m-2", "rh-2"),
        ]


class TestIdGeneration:
    """Test cases for random ids."""

    def test_random_id_length_and_alphabet(self):
        """Test the shape of generated ids."""
        value = random_id(20)

        assert len(value) == 20
        assert set(value) <= set(string.ascii_letters + string.digits)

    def test_random_id_uses_given_source(self):
        """Test that an explicit random source makes ids reproducible."""
        assert random_id(rng=random.Random(1)) == random_id(rng=random.Random(1))

    def test_random_id_rejects_non_positive_length(self):
        """Test that the length must be positive."""
        with pytest.raises(ValueError, match="length must be positive"):
            random_id(0)

    def test_seeded_generator_is_deterministic(self):
        """Test that equal seeds produce equal id sequences."""
        first = RandomIdGenerator(seed=42)
        second = RandomIdGenerator(seed=42)

        assert [first() for _ in range(5)] == [second() for _ in range(5)]

    def test_generator_length(self):
        """Test a custom id length."""
        assert len(RandomIdGenerator(length=8)()) == 8
