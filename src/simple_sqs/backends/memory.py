"""
Module: backends/memory.py
Description: In-memory queue backend for tests and local development.

Emulates the call shapes of the SQS backend without network I/O. It is a
stronger contract than SQS, not an equivalent one:

- receive returns messages from the head without hiding them, so there is
  no visibility timeout and the same message can be received repeatedly
  until it is deleted
- delete removes from the head regardless of the receipt handle, which only
  matches SQS when callers delete in the order they received
- length and purge are exact and immediate

Tests that only run against this backend cannot catch timeout or
eventual-consistency bugs.

Key Components:
- InMemoryBackend: QueueBackend over a Python list
- InMemoryQueueManager: Named in-memory queues with memory:// addresses

Dependencies: botocore, uuid, typing
Author: Simple SQS Team
"""

import uuid
from typing import Dict, List, NamedTuple

from botocore.exceptions import ClientError

from simple_sqs.backends.base import QueueBackend, QueueManager
from simple_sqs.models.batch import MAX_BATCH_SIZE, BatchResult, DeleteEntry, SendEntry
from simple_sqs.models.message import Message
from simple_sqs.utils.logger import get_logger

logger = get_logger(__name__)


def _client_error(code: str, message: str, operation: str) -> ClientError:
    """Build a ClientError shaped like the ones botocore raises for SQS."""
    return ClientError(
        error_response={'Error': {'Code': code, 'Message': message}},
        operation_name=operation
    )


class _StoredMessage(NamedTuple):
    message_id: str
    body: str


class InMemoryBackend(QueueBackend):
    """
    QueueBackend backed by an ordered list of pending messages.

    Example:
        >>> backend = InMemoryBackend()
        >>> backend.send_message("a")
        >>> backend.approximate_size()
        1
    """

    def __init__(self, queue_url: str = "memory://local/queue"):
        self._queue_url = queue_url
        self._messages: List[_StoredMessage] = []

    @property
    def queue_url(self) -> str:
        return self._queue_url

    def send_message(self, body: str) -> None:
        self._messages.append(_StoredMessage(str(uuid.uuid4()), body))

    def send_message_batch(self, entries: List[SendEntry]) -> BatchResult:
        self._check_batch(entries, 'SendMessageBatch')

        for entry in entries:
            self._messages.append(_StoredMessage(str(uuid.uuid4()), entry.body))

        return BatchResult(successful=[entry.id for entry in entries])

    def delete_message(self, receipt_handle: str) -> None:
        if not self._messages:
            raise _client_error(
                'ReceiptHandleIsInvalid',
                f"The input receipt handle \"{receipt_handle}\" is not valid.",
                'DeleteMessage'
            )

        del self._messages[0]

    def delete_message_batch(self, entries: List[DeleteEntry]) -> BatchResult:
        self._check_batch(entries, 'DeleteMessageBatch')

        if len(entries) > len(self._messages):
            raise _client_error(
                'ReceiptHandleIsInvalid',
                f"Cannot delete {len(entries)} messages from a queue holding {len(self._messages)}.",
                'DeleteMessageBatch'
            )

        del self._messages[:len(entries)]
        return BatchResult(successful=[entry.id for entry in entries])

    def approximate_size(self) -> int:
        return len(self._messages)

    def purge(self) -> None:
        self._messages.clear()

        logger.debug("In-memory queue purged", queue_url=self._queue_url)

    def receive_messages(self, max_messages: int, visibility_timeout: int) -> List[Message]:
        if not 1 <= max_messages <= MAX_BATCH_SIZE:
            raise _client_error(
                'InvalidParameterValue',
                f"Value {max_messages} for parameter MaxNumberOfMessages is invalid.",
                'ReceiveMessage'
            )

        return [
            Message(
                body=stored.body,
                receipt_handle=uuid.uuid4().hex,
                message_id=stored.message_id
            )
            for stored in self._messages[:max_messages]
        ]

    @staticmethod
    def _check_batch(entries: list, operation: str) -> None:
        """Reject batches the way SQS does."""
        if not entries:
            raise _client_error(
                'AWS.SimpleQueueService.EmptyBatchRequest',
                "There should be at least one entry in the request.",
                operation
            )
        if len(entries) > MAX_BATCH_SIZE:
            raise _client_error(
                'AWS.SimpleQueueService.TooManyEntriesInBatchRequest',
                f"Maximum number of entries per request are {MAX_BATCH_SIZE}.",
                operation
            )
        if len({entry.id for entry in entries}) != len(entries):
            raise _client_error(
                'AWS.SimpleQueueService.BatchEntryIdsNotDistinct',
                "Two or more batch entries in the request have the same Id.",
                operation
            )


class InMemoryQueueManager(QueueManager):
    """
    Named in-memory queues for one pseudo-region.

    Queues live as long as the manager. create_queue is idempotent, like
    SQS create_queue with unchanged attributes.
    """

    def __init__(self, region: str = "local"):
        self.region = region
        self._queues: Dict[str, InMemoryBackend] = {}

    def _address(self, name: str) -> str:
        return f"memory://{self.region}/{name}"

    def create_queue(self, name: str) -> str:
        if not name or not isinstance(name, str):
            raise ValueError("name must be a non-empty string")

        url = self._address(name)
        if url not in self._queues:
            self._queues[url] = InMemoryBackend(url)
        return url

    def delete_queue(self, name: str) -> None:
        url = self.resolve_address(name)
        del self._queues[url]

    def resolve_address(self, name: str) -> str:
        url = self._address(name)
        if url not in self._queues:
            raise _client_error(
                'AWS.SimpleQueueService.NonExistentQueue',
                "The specified queue does not exist.",
                'GetQueueUrl'
            )
        return url

    def queue_exists(self, name: str) -> bool:
        return self._address(name) in self._queues

    def bind(self, queue_url: str) -> InMemoryBackend:
        try:
            return self._queues[queue_url]
        except KeyError:
            raise _client_error(
                'AWS.SimpleQueueService.NonExistentQueue',
                "The specified queue does not exist.",
                'GetQueueAttributes'
            ) from None
