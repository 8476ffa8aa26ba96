"""
Module: batch.py
Description: Request entries and results for batch queue operations.

Key Components:
- SendEntry / DeleteEntry: Request-only entries of a batch call
- BatchEntryFailure: Per-entry error reported by the backend
- BatchResult: Successful ids and failures of one batch call

Dependencies: pydantic, typing
Author: Simple SQS Team
"""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field

from simple_sqs.errors import PartialBatchError

# SQS accepts at most 10 entries per batch request
MAX_BATCH_SIZE = 10


class SendEntry(BaseModel):
    """
    Entry of a send batch.

    The id is generated locally and only identifies the entry within this
    one request. It is unrelated to the message id the backend assigns.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Entry id, unique within the batch")
    body: str = Field(..., description="Message body")

    def to_sqs(self) -> Dict[str, str]:
        return {'Id': self.id, 'MessageBody': self.body}


class DeleteEntry(BaseModel):
    """Entry of a delete batch: a received message's id and receipt handle."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Entry id, unique within the batch")
    receipt_handle: str = Field(..., description="Receipt handle from a receive")

    def to_sqs(self) -> Dict[str, str]:
        return {'Id': self.id, 'ReceiptHandle': self.receipt_handle}


class BatchEntryFailure(BaseModel):
    """
    Error information for one failed batch entry.

    Attributes:
        id: Id of the entry that failed
        code: Backend error code
        message: Human-readable error message
        sender_fault: True if the request was at fault rather than the service
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Id of the failed entry")
    code: str = Field(..., description="Error code")
    message: str = Field(default="", description="Error message")
    sender_fault: bool = Field(default=True, description="Whether the caller caused the failure")


class BatchResult(BaseModel):
    """
    Outcome of a send or delete batch.

    A batch is not all-or-nothing: the backend may accept some entries and
    reject others. The whole call only raises when the request itself fails.

    Attributes:
        successful: Ids of the entries that succeeded
        failed: Failures of the entries that did not
    """

    successful: List[str] = Field(default_factory=list, description="Ids of successful entries")
    failed: List[BatchEntryFailure] = Field(default_factory=list, description="Failed entries")

    @property
    def ok(self) -> bool:
        """True when no entry failed."""
        return not self.failed

    def raise_for_failures(self) -> "BatchResult":
        """
        Raise if any entry failed.

        Returns:
            self, so calls can be chained

        Raises:
            PartialBatchError: If at least one entry failed
        """
        if self.failed:
            raise PartialBatchError(self)
        return self

    @classmethod
    def from_sqs(cls, response: Dict[str, Any]) -> "BatchResult":
        """Parse a SendMessageBatch or DeleteMessageBatch response."""
        return cls(
            successful=[entry['Id'] for entry in response.get('Successful', [])],
            failed=[
                BatchEntryFailure(
                    id=entry['Id'],
                    code=entry['Code'],
                    message=entry.get('Message', ''),
                    sender_fault=entry.get('SenderFault', True),
                )
                for entry in response.get('Failed', [])
            ],
        )
