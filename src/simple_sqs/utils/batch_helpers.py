"""
Module: batch_helpers.py
Description: Utility functions for batch queue operations.

Validates batch sizes and translates client inputs into the entry shapes
required by batch backend calls.

Key Components:
- validate_batch_size(): Validate batch size constraints
- build_send_entries(): Pair message bodies with generated entry ids
- build_delete_entries(): Pair received messages with their receipt handles

Dependencies: typing, models
Author: Simple SQS Team
"""

from typing import Any, List

from simple_sqs.models.batch import DeleteEntry, SendEntry
from simple_sqs.models.message import Message
from simple_sqs.utils.ids import IdGenerator, random_id


def validate_batch_size(items: List[Any], max_size: int) -> None:
    """
    Validate that a batch is non-empty and doesn't exceed the maximum size.

    Args:
        items: List of items to validate
        max_size: Maximum allowed batch size

    Raises:
        ValueError: If items is not a list, is empty or exceeds max_size

    Example:
        >>> validate_batch_size([1, 2, 3], 5)  # OK
        >>> validate_batch_size([1, 2, 3], 2)  # Raises ValueError
    """
    if not isinstance(items, list):
        raise ValueError("items must be a list")
    if not items:
        raise ValueError("batch must contain at least one item")
    if len(items) > max_size:
        raise ValueError(f"batch size cannot exceed {max_size} items")


def build_send_entries(bodies: List[str], id_generator: IdGenerator = random_id) -> List[SendEntry]:
    """
    Build send batch entries, attaching a freshly generated id to each body.

    Args:
        bodies: Message bodies in insertion order
        id_generator: Callable returning a new entry id

    Returns:
        One SendEntry per body, in the same order

    Raises:
        ValueError: If a body is not a string
    """
    entries = []
    for body in bodies:
        if not isinstance(body, str):
            raise ValueError("message body must be a string")
        entries.append(SendEntry(id=id_generator(), body=body))

    return entries


def build_delete_entries(messages: List[Message]) -> List[DeleteEntry]:
    """
    Build delete batch entries from previously received messages.

    Each entry reuses the message's own id, no new ids are generated.

    Args:
        messages: Messages returned by a receive call

    Returns:
        One DeleteEntry per message, in the same order
    """
    return [
        DeleteEntry(id=message.message_id, receipt_handle=message.receipt_handle)
        for message in messages
    ]
