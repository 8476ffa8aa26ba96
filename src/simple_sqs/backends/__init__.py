"""
Package: backends
Description: Interchangeable queue backends.

- QueueBackend / QueueManager: Capability interfaces
- SQSBackend / SQSQueueManager: Amazon SQS through boto3
- InMemoryBackend / InMemoryQueueManager: Process-local test double
"""

from .base import QueueBackend, QueueManager
from .memory import InMemoryBackend, InMemoryQueueManager
from .sqs import SQSBackend, SQSQueueManager

__all__ = [
    "QueueBackend",
    "QueueManager",
    "InMemoryBackend",
    "InMemoryQueueManager",
    "SQSBackend",
    "SQSQueueManager",
]
