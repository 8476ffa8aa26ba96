"""
Module: backends/base.py
Description: Capability interfaces implemented by queue backends.

QueueBackend is the message-flow seam between QueueClient and a concrete
queue service; QueueManager is the management plane used to create, find and
bind queues. Both speak in terms of simple-sqs models only, never transport
objects.
"""

import abc
from typing import List

from simple_sqs.models.batch import BatchResult, DeleteEntry, SendEntry
from simple_sqs.models.message import Message


class QueueBackend(abc.ABC):
    """
    Message operations on one queue, bound to its address.

    Implementations raise botocore.exceptions.ClientError for backend
    failures and never retry locally.
    """

    @property
    @abc.abstractmethod
    def queue_url(self) -> str:
        """Address of the bound queue"""

    @abc.abstractmethod
    def send_message(self, body: str) -> None:
        """Send a single message"""

    @abc.abstractmethod
    def send_message_batch(self, entries: List[SendEntry]) -> BatchResult:
        """Send up to 10 messages in one request"""

    @abc.abstractmethod
    def delete_message(self, receipt_handle: str) -> None:
        """Delete a received message"""

    @abc.abstractmethod
    def delete_message_batch(self, entries: List[DeleteEntry]) -> BatchResult:
        """Delete up to 10 received messages in one request"""

    @abc.abstractmethod
    def approximate_size(self) -> int:
        """Approximate number of visible messages"""

    @abc.abstractmethod
    def purge(self) -> None:
        """Delete every message in the queue"""

    @abc.abstractmethod
    def receive_messages(self, max_messages: int, visibility_timeout: int) -> List[Message]:
        """Receive up to max_messages (1-10) without deleting them"""


class QueueManager(abc.ABC):
    """Queue lifecycle operations and backend construction for one region."""

    @abc.abstractmethod
    def create_queue(self, name: str) -> str:
        """Create a queue if needed and return its address"""

    @abc.abstractmethod
    def delete_queue(self, name: str) -> None:
        """Delete a queue"""

    @abc.abstractmethod
    def resolve_address(self, name: str) -> str:
        """Return the address of an existing queue"""

    @abc.abstractmethod
    def queue_exists(self, name: str) -> bool:
        """Check whether a queue with exactly this name exists"""

    @abc.abstractmethod
    def bind(self, queue_url: str) -> QueueBackend:
        """Return a backend bound to the queue at queue_url"""
