"""
Module: config.py
Description: Queue configuration supplied when a client is constructed.
"""

from pydantic import BaseModel, ConfigDict, Field

from simple_sqs.config.settings import Settings
from simple_sqs.errors import ConfigurationError


class QueueConfig(BaseModel):
    """
    Immutable parameters of a queue client.

    No field is constrained here. QueueClient checks the visibility timeout
    so that a non-positive value always surfaces as ConfigurationError,
    whatever the name and region hold.

    Attributes:
        visibility_timeout_seconds: Time a received message stays hidden.
            Must be greater than 0 for the client to accept it.
        name: Name of the queue
        region: AWS region the queue lives in, e.g. 'us-west-2'
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    visibility_timeout_seconds: int = Field(
        ...,
        description="Seconds a received message is hidden from other receivers"
    )
    name: str = Field(..., description="Queue name")
    region: str = Field(..., description="AWS region of the queue")

    @classmethod
    def from_settings(cls, settings: Settings) -> "QueueConfig":
        """
        Build a configuration from environment settings.

        Raises:
            ConfigurationError: If settings.queue_name is not set
        """
        if not settings.queue_name:
            raise ConfigurationError("SIMPLE_SQS_QUEUE_NAME must be set")

        return cls(
            visibility_timeout_seconds=settings.visibility_timeout_seconds,
            name=settings.queue_name,
            region=settings.aws_region,
        )
