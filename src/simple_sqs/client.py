"""
Module: client.py
Description: Simplified client for an unordered, at-least-once queue.

QueueClient hides the request/response envelopes of the queue API behind
insert, peek, pop, delete, clear and approximate length verbs, each in
single and batch (up to 10 items) form.

Messages are received without being removed. A received message is hidden
for the configured visibility timeout; if it is not deleted in that window
it becomes visible again and can be received by anyone. Pop is a receive
followed by a separate delete, so a failure between the two never loses the
message, it only delays it.

Key Components:
- QueueClient: Public queue verbs over a bound QueueBackend

Dependencies: typing, backends, models, utils
Author: Simple SQS Team
"""

from typing import List, Optional, Union

from simple_sqs.backends.base import QueueBackend, QueueManager
from simple_sqs.backends.sqs import SQSQueueManager
from simple_sqs.config.settings import Settings
from simple_sqs.config.settings import settings as default_settings
from simple_sqs.errors import ConfigurationError, PartialBatchError
from simple_sqs.models.batch import MAX_BATCH_SIZE, BatchResult
from simple_sqs.models.config import QueueConfig
from simple_sqs.models.message import Message
from simple_sqs.utils.batch_helpers import (
    build_delete_entries,
    build_send_entries,
    validate_batch_size
)
from simple_sqs.utils.ids import IdGenerator, random_id
from simple_sqs.utils.logger import get_logger
from simple_sqs.utils.polling import wait_until_empty

logger = get_logger(__name__)

_SETTINGS_TIMEOUT = object()


class QueueClient:
    """
    Queue client bound to one queue.

    The queue address is resolved once at construction and cached. Backend
    errors (botocore ClientError) propagate unchanged from every method;
    nothing is retried locally. A client holds no locks, so sharing one
    instance between threads is the caller's responsibility.

    Attributes:
        config: Client configuration
        queue_url: Resolved address of the queue
        backend: Backend every call is forwarded to

    Example:
        >>> config = QueueConfig(visibility_timeout_seconds=30, name="jobs", region="us-west-2")
        >>> client = QueueClient(config)
        >>> client.insert("hello")
        >>> message = client.pop()
        >>> message.body
        'hello'
    """

    def __init__(
        self,
        config: QueueConfig,
        backend: Optional[QueueBackend] = None,
        manager: Optional[QueueManager] = None,
        id_generator: IdGenerator = random_id,
        settings: Optional[Settings] = None,
        create_if_missing: bool = False
    ):
        """
        Initialize queue client.

        Args:
            config: Client configuration
            backend: Already bound backend. When given, no address
                resolution happens and manager is ignored.
            manager: Queue manager used to resolve and bind the queue
                (defaults to SQSQueueManager for config.region)
            id_generator: Callable producing batch entry ids
            settings: Settings supplying receive and purge defaults
            create_if_missing: Create the queue before resolving it

        Raises:
            ConfigurationError: If the visibility timeout is not positive
            ClientError: If the queue cannot be created or resolved
        """
        if config.visibility_timeout_seconds <= 0:
            raise ConfigurationError("visibility timeout must be greater than 0")

        self.config = config
        self.settings = settings or default_settings
        self._id_generator = id_generator

        if backend is None:
            manager = manager or SQSQueueManager(
                config.region,
                receive_wait_seconds=self.settings.receive_wait_seconds
            )
            if create_if_missing:
                manager.create_queue(config.name)
            backend = manager.bind(manager.resolve_address(config.name))

        self.backend = backend
        self.queue_url = backend.queue_url

        logger.info(
            "Queue client initialized",
            queue_name=config.name,
            queue_url=self.queue_url,
            visibility_timeout_seconds=config.visibility_timeout_seconds
        )

    def insert(self, body: str) -> None:
        """
        Insert a message into the queue.

        Raises:
            ValueError: If body is not a string
        """
        if not isinstance(body, str):
            raise ValueError("message body must be a string")

        self.backend.send_message(body)

    def insert_batch(self, bodies: List[str]) -> BatchResult:
        """
        Insert up to 10 messages in one request.

        The batch is not atomic: check the result (or call
        raise_for_failures() on it) to find entries the backend rejected.

        Args:
            bodies: 1 to 10 message bodies

        Returns:
            Per-entry outcome of the request

        Raises:
            ValueError: If the batch is empty, too large or holds non-strings
        """
        validate_batch_size(bodies, MAX_BATCH_SIZE)
        entries = build_send_entries(bodies, self._id_generator)
        return self.backend.send_message_batch(entries)

    def peek(self) -> Optional[Message]:
        """
        Receive a message without deleting it.

        The message stays hidden for the visibility timeout. If it is not
        deleted in that window it can be received again, by this or another
        client.

        Returns:
            A message, or None if the queue is empty
        """
        messages = self._receive(1)
        if not messages:
            return None

        return messages[0]

    def peek_batch(self) -> List[Message]:
        """
        Receive up to 10 messages without deleting them.

        Returns:
            0 to 10 messages; fewer than 10 does not mean the queue is drained
        """
        return self._receive(MAX_BATCH_SIZE)

    def pop(self) -> Optional[Message]:
        """
        Receive a message and delete it.

        If the delete fails the error propagates and the message stays in
        the queue, visible again after the timeout.

        Returns:
            The removed message, or None if the queue is empty
        """
        message = self.peek()
        if message is None:
            return None

        self.delete(message)
        return message

    def pop_batch(self) -> List[Message]:
        """
        Receive up to 10 messages and delete them in one batch.

        Returns:
            The received messages (empty if the queue is empty)

        Raises:
            PartialBatchError: If some deletes failed. Its messages attribute
                holds every received message and its result names the ids
                still in the queue.
        """
        messages = self.peek_batch()
        if not messages:
            return messages

        result = self.delete_batch(messages)
        if not result.ok:
            logger.warning(
                "Some popped messages were not deleted",
                queue_url=self.queue_url,
                failed_ids=[failure.id for failure in result.failed]
            )
            raise PartialBatchError(result, messages)
        return messages

    def delete(self, message: Message) -> None:
        """
        Delete a received message using its receipt handle.

        Must be called within the visibility timeout of the receive that
        produced the message.
        """
        self.backend.delete_message(message.receipt_handle)

    def delete_batch(self, messages: List[Message]) -> BatchResult:
        """
        Delete up to 10 received messages in one request.

        Args:
            messages: 1 to 10 messages from earlier receives

        Returns:
            Per-entry outcome of the request

        Raises:
            ValueError: If the batch is empty or too large
        """
        validate_batch_size(messages, MAX_BATCH_SIZE)
        entries = build_delete_entries(messages)
        return self.backend.delete_message_batch(entries)

    def purge(self) -> None:
        """
        Request removal of every message without waiting for it to finish.

        SQS allows one purge per queue every 60 seconds; a second request
        within that window fails with PurgeQueueInProgress.
        """
        self.backend.purge()

    def clear(self, timeout: Union[float, None, object] = _SETTINGS_TIMEOUT) -> None:
        """
        Purge the queue and block until its length is reported as 0.

        Args:
            timeout: Seconds to wait for the queue to drain, or None to wait
                indefinitely. Omitted, settings.purge_timeout_seconds applies.

        Raises:
            PurgeTimeoutError: If the queue is not empty before the timeout
        """
        if timeout is _SETTINGS_TIMEOUT:
            timeout = self.settings.purge_timeout_seconds

        self.purge()
        wait_until_empty(
            self.approximate_len,
            interval=self.settings.purge_poll_interval_seconds,
            timeout=timeout
        )

        logger.info("Queue cleared", queue_url=self.queue_url)

    def approximate_len(self) -> int:
        """
        Approximate number of visible messages.

        On SQS this can lag the real state by up to 30 seconds and excludes
        messages currently in flight; never rely on it for exact counts.
        """
        return self.backend.approximate_size()

    def _receive(self, max_messages: int) -> List[Message]:
        return self.backend.receive_messages(
            max_messages=max_messages,
            visibility_timeout=self.config.visibility_timeout_seconds
        )
