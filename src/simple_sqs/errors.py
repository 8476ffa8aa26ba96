"""
Module: errors.py
Description: Exception types raised by simple-sqs.

Backend failures are not wrapped: botocore ClientError propagates as-is from
both the SQS and the in-memory backends. The types here cover what the
library itself detects.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from simple_sqs.models.batch import BatchResult
    from simple_sqs.models.message import Message


class QueueError(Exception):
    """Base class for errors raised by simple-sqs."""


class ConfigurationError(QueueError, ValueError):
    """Raised when a queue client is constructed with an invalid configuration."""


class PartialBatchError(QueueError):
    """
    Raised when some entries of a batch request failed.

    Attributes:
        result: The BatchResult with the successful and failed entries
        messages: Messages received by a pop whose delete partly failed,
            or None for other batch requests
    """

    def __init__(self, result: "BatchResult", messages: Optional[List["Message"]] = None):
        self.result = result
        self.messages = messages
        failed_ids = ", ".join(failure.id for failure in result.failed)
        super().__init__(
            f"{len(result.failed)} of {len(result.successful) + len(result.failed)} "
            f"batch entries failed: {failed_ids}"
        )


class PurgeTimeoutError(QueueError, TimeoutError):
    """
    Raised when the queue was not observed empty before the purge deadline.

    Attributes:
        remaining: Last approximate length read before giving up
    """

    def __init__(self, timeout: float, remaining: Optional[int]):
        self.timeout = timeout
        self.remaining = remaining
        super().__init__(
            f"queue not empty {timeout}s after purge (approximate length {remaining})"
        )
