"""
Module: message.py
Description: Message model returned by receive operations.

Wraps one received queue message so the client's public surface does not
depend on the boto3 response dictionaries.

Key Components:
- Message: Immutable received message (body, receipt handle, id)
- Message.from_sqs(): Conversion from a ReceiveMessage response entry

Dependencies: pydantic, typing
Author: Simple SQS Team
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """
    A message received from a queue.

    The receipt handle is only valid while the message is in flight, i.e.
    until it is deleted or its visibility timeout elapses. Every receive of
    the same message yields a new receipt handle.

    Attributes:
        body: Message body as inserted
        receipt_handle: Token required to delete this received instance
        message_id: Identifier assigned by the backend
        attributes: System attributes (e.g. SentTimestamp)
        message_attributes: User-defined message attributes
    """

    model_config = ConfigDict(frozen=True)

    body: str = Field(..., description="Message body")
    receipt_handle: str = Field(..., description="Receipt handle of this receive")
    message_id: str = Field(..., description="Backend-assigned message identifier")
    attributes: Dict[str, str] = Field(
        default_factory=dict,
        description="System attributes returned with the message"
    )
    message_attributes: Dict[str, Any] = Field(
        default_factory=dict,
        description="User-defined message attributes"
    )

    @classmethod
    def from_sqs(cls, raw: Dict[str, Any]) -> "Message":
        """
        Build a Message from one entry of a ReceiveMessage response.

        Args:
            raw: Entry of response['Messages']

        Returns:
            Message instance
        """
        return cls(
            body=raw['Body'],
            receipt_handle=raw['ReceiptHandle'],
            message_id=raw['MessageId'],
            attributes=raw.get('Attributes', {}),
            message_attributes=raw.get('MessageAttributes', {}),
        )
