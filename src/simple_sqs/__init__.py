"""
Package: simple_sqs
Description: Simplified synchronous client for Amazon SQS.

Wraps the SQS message API in a small set of queue verbs (insert, peek, pop,
delete, clear, approximate length) and lets the same client run against an
in-memory backend for tests.
"""

from .backends import (
    InMemoryBackend,
    InMemoryQueueManager,
    QueueBackend,
    QueueManager,
    SQSBackend,
    SQSQueueManager
)
from .client import QueueClient
from .errors import ConfigurationError, PartialBatchError, PurgeTimeoutError, QueueError
from .models import BatchEntryFailure, BatchResult, Message, QueueConfig
from .utils.ids import RandomIdGenerator

__version__ = "0.1.0"

__all__ = [
    "QueueClient",
    "QueueConfig",
    "Message",
    "BatchResult",
    "BatchEntryFailure",
    "QueueBackend",
    "QueueManager",
    "SQSBackend",
    "SQSQueueManager",
    "InMemoryBackend",
    "InMemoryQueueManager",
    "RandomIdGenerator",
    "QueueError",
    "ConfigurationError",
    "PartialBatchError",
    "PurgeTimeoutError",
]
