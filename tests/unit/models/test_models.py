"""
Module: test_models.py
Description: Unit tests for message, config and batch models.
"""

import pytest
from pydantic import ValidationError

from simple_sqs.config.settings import Settings
from simple_sqs.errors import ConfigurationError, PartialBatchError
from simple_sqs.models.batch import BatchEntryFailure, BatchResult, DeleteEntry, SendEntry
from simple_sqs.models.config import QueueConfig
from simple_sqs.models.message import Message


class TestMessage:
    """Test cases for the Message model."""

    def test_from_sqs(self):
        """Test conversion from a ReceiveMessage response entry."""
        raw = {
            'MessageId': 'msg_test123',
            'ReceiptHandle': 'receipt_test123',
            'MD5OfBody': 'abc',
            'Body': 'payload',
            'Attributes': {'SentTimestamp': '1700000000000'},
            'MessageAttributes': {'EventId': {'StringValue': 'evt_1', 'DataType': 'String'}},
        }

        message = Message.from_sqs(raw)

        assert message.body == 'payload'
        assert message.receipt_handle == 'receipt_test123'
        assert message.message_id == 'msg_test123'
        assert message.attributes == {'SentTimestamp': '1700000000000'}
        assert message.message_attributes['EventId']['StringValue'] == 'evt_1'

    def test_from_sqs_without_attributes(self):
        """Test that missing attribute maps default to empty."""
        message = Message.from_sqs({'MessageId': 'm', 'ReceiptHandle': 'r', 'Body': 'b'})

        assert message.attributes == {}
        assert message.message_attributes == {}

    def test_message_is_immutable(self):
        """Test that received messages cannot be modified."""
        message = Message(body='b', receipt_handle='r', message_id='m')

        with pytest.raises(ValidationError):
            message.body = 'changed'


class TestQueueConfig:
    """Test cases for QueueConfig."""

    def test_valid_config(self):
        """Test creating a valid configuration."""
        config = QueueConfig(visibility_timeout_seconds=5, name="TEST_QUEUE", region="us-west-2")

        assert config.visibility_timeout_seconds == 5
        assert config.name == "TEST_QUEUE"
        assert config.region == "us-west-2"

    def test_empty_name_accepted(self):
        """Test that the name is left for the backend to validate."""
        config = QueueConfig(visibility_timeout_seconds=0, name="  ", region="")

        assert config.name == ""
        assert config.region == ""

    def test_config_is_frozen(self):
        """Test that configuration is immutable after construction."""
        config = QueueConfig(visibility_timeout_seconds=5, name="q", region="us-west-2")

        with pytest.raises(ValidationError):
            config.visibility_timeout_seconds = 10

    def test_from_settings(self, test_settings):
        """Test building a configuration from settings."""
        config = QueueConfig.from_settings(test_settings)

        assert config.name == test_settings.queue_name
        assert config.region == test_settings.aws_region
        assert config.visibility_timeout_seconds == test_settings.visibility_timeout_seconds

    def test_from_settings_requires_queue_name(self):
        """Test that settings without a queue name are rejected."""
        with pytest.raises(ConfigurationError, match="SIMPLE_SQS_QUEUE_NAME"):
            QueueConfig.from_settings(Settings(_env_file=None, queue_name=None))


class TestBatchModels:
    """Test cases for batch entries and results."""

    def test_entries_render_sqs_shapes(self):
        """Test the boto3 dictionaries produced by batch entries."""
        assert SendEntry(id="a", body="x").to_sqs() == {'Id': 'a', 'MessageBody': 'x'}
        assert DeleteEntry(id="a", receipt_handle="r").to_sqs() == {'Id': 'a', 'ReceiptHandle': 'r'}

    def test_entry_requires_id(self):
        """Test that entries need a non-empty id."""
        with pytest.raises(ValidationError):
            SendEntry(id="", body="x")

    def test_result_from_full_success(self):
        """Test parsing a response without failures."""
        result = BatchResult.from_sqs({'Successful': [{'Id': 'a'}, {'Id': 'b'}]})

        assert result.successful == ['a', 'b']
        assert result.failed == []
        assert result.ok
        assert result.raise_for_failures() is result

    def test_result_with_failures(self):
        """Test that failures are parsed and raised on request."""
        result = BatchResult.from_sqs({
            'Successful': [{'Id': 'a'}],
            'Failed': [{'Id': 'b', 'SenderFault': True, 'Code': 'InvalidParameterValue'}],
        })

        assert not result.ok
        assert result.failed == [
            BatchEntryFailure(id='b', code='InvalidParameterValue', message='', sender_fault=True)
        ]

        with pytest.raises(PartialBatchError, match="1 of 2 batch entries failed: b") as exc_info:
            result.raise_for_failures()

        assert exc_info.value.result is result
