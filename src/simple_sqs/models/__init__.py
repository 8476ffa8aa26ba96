"""
Package: models
Description: Pydantic value types used by the queue client.

- QueueConfig: Immutable client configuration
- Message: Received message
- SendEntry, DeleteEntry, BatchEntryFailure, BatchResult: Batch requests and results

All models are exported here for convenient importing.
"""

from .batch import MAX_BATCH_SIZE, BatchEntryFailure, BatchResult, DeleteEntry, SendEntry
from .config import QueueConfig
from .message import Message

__all__ = [
    "MAX_BATCH_SIZE",
    "BatchEntryFailure",
    "BatchResult",
    "DeleteEntry",
    "Message",
    "QueueConfig",
    "SendEntry",
]
