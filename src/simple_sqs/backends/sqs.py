"""
Module: backends/sqs.py
Description: Amazon SQS backend and queue manager.

Forwards queue operations to SQS through a boto3 client. Every call is a
single blocking request; failures are logged and re-raised unchanged.

Key Components:
- SQSBackend: QueueBackend bound to one queue URL
- SQSQueueManager: Creates, deletes, resolves and binds queues in a region

Dependencies: boto3, botocore, typing
Author: Simple SQS Team
"""

from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from simple_sqs.backends.base import QueueBackend, QueueManager
from simple_sqs.models.batch import BatchResult, DeleteEntry, SendEntry
from simple_sqs.models.message import Message
from simple_sqs.utils.logger import get_logger

logger = get_logger(__name__)

APPROXIMATE_LENGTH_ATTRIBUTE = 'ApproximateNumberOfMessages'
MAX_WAIT_TIME_SECONDS = 20


class SQSBackend(QueueBackend):
    """
    QueueBackend backed by an SQS queue.

    Attributes:
        sqs: boto3 SQS client
        wait_time_seconds: Long-poll wait applied to every receive

    Example:
        >>> backend = SQSBackend(boto3.client('sqs'), queue_url)
        >>> backend.send_message("hello")
        >>> backend.receive_messages(max_messages=1, visibility_timeout=30)
    """

    def __init__(self, sqs_client: Any, queue_url: str, wait_time_seconds: int = MAX_WAIT_TIME_SECONDS):
        """
        Initialize SQS backend.

        Args:
            sqs_client: boto3 SQS client
            queue_url: URL of the SQS queue
            wait_time_seconds: Long-poll wait for receive calls (0-20)

        Raises:
            ValueError: If parameters are invalid
        """
        if not queue_url or not isinstance(queue_url, str):
            raise ValueError("queue_url must be a non-empty string")
        if not 0 <= wait_time_seconds <= MAX_WAIT_TIME_SECONDS:
            raise ValueError(f"wait_time_seconds must be between 0 and {MAX_WAIT_TIME_SECONDS}")

        self.sqs = sqs_client
        self._queue_url = queue_url
        self.wait_time_seconds = wait_time_seconds

    @property
    def queue_url(self) -> str:
        return self._queue_url

    def _call(self, operation: str, **kwargs: Any) -> Dict[str, Any]:
        """Invoke an SQS operation against the bound queue, logging failures."""
        try:
            return getattr(self.sqs, operation)(QueueUrl=self._queue_url, **kwargs)

        except ClientError as e:
            logger.error(
                "SQS request failed",
                operation=operation,
                queue_url=self._queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

    def send_message(self, body: str) -> None:
        response = self._call('send_message', MessageBody=body)

        logger.debug(
            "Message sent to SQS",
            message_id=response.get('MessageId'),
            queue_url=self._queue_url
        )

    def send_message_batch(self, entries: List[SendEntry]) -> BatchResult:
        response = self._call(
            'send_message_batch',
            Entries=[entry.to_sqs() for entry in entries]
        )
        return self._batch_result('send_message_batch', response)

    def delete_message(self, receipt_handle: str) -> None:
        self._call('delete_message', ReceiptHandle=receipt_handle)

    def delete_message_batch(self, entries: List[DeleteEntry]) -> BatchResult:
        response = self._call(
            'delete_message_batch',
            Entries=[entry.to_sqs() for entry in entries]
        )
        return self._batch_result('delete_message_batch', response)

    def approximate_size(self) -> int:
        response = self._call(
            'get_queue_attributes',
            AttributeNames=[APPROXIMATE_LENGTH_ATTRIBUTE]
        )
        return int(response['Attributes'][APPROXIMATE_LENGTH_ATTRIBUTE])

    def purge(self) -> None:
        self._call('purge_queue')

        logger.info("SQS purge requested", queue_url=self._queue_url)

    def receive_messages(self, max_messages: int, visibility_timeout: int) -> List[Message]:
        response = self._call(
            'receive_message',
            AttributeNames=['SentTimestamp'],
            MessageAttributeNames=['All'],
            MaxNumberOfMessages=max_messages,
            VisibilityTimeout=visibility_timeout,
            WaitTimeSeconds=self.wait_time_seconds
        )
        return [Message.from_sqs(raw) for raw in response.get('Messages', [])]

    def _batch_result(self, operation: str, response: Dict[str, Any]) -> BatchResult:
        result = BatchResult.from_sqs(response)
        if not result.ok:
            logger.warning(
                "SQS batch partially failed",
                operation=operation,
                queue_url=self._queue_url,
                failed_ids=[failure.id for failure in result.failed],
                error_codes=sorted({failure.code for failure in result.failed})
            )
        return result


class SQSQueueManager(QueueManager):
    """
    Queue lifecycle operations for one AWS region.

    Also acts as the backend factory: bind() returns an SQSBackend that
    shares this manager's boto3 client.

    Example:
        >>> manager = SQSQueueManager("us-west-2")
        >>> url = manager.create_queue("jobs")
        >>> backend = manager.bind(url)
    """

    def __init__(
        self,
        region: str,
        receive_wait_seconds: int = MAX_WAIT_TIME_SECONDS,
        sqs_client: Optional[Any] = None
    ):
        """
        Initialize SQS queue manager.

        Args:
            region: AWS region, e.g. 'us-west-2'
            receive_wait_seconds: Long-poll wait for backends created by bind()
            sqs_client: Existing boto3 SQS client (created for region if omitted)
        """
        if not region or not isinstance(region, str):
            raise ValueError("region must be a non-empty string")

        self.region = region
        self.receive_wait_seconds = receive_wait_seconds
        self.sqs = sqs_client or boto3.client('sqs', region_name=region)

    def create_queue(self, name: str) -> str:
        try:
            response = self.sqs.create_queue(QueueName=name)

        except ClientError as e:
            logger.error(
                "Failed to create SQS queue",
                queue_name=name,
                region=self.region,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        logger.info("SQS queue created", queue_name=name, queue_url=response['QueueUrl'])
        return response['QueueUrl']

    def delete_queue(self, name: str) -> None:
        queue_url = self.resolve_address(name)

        try:
            self.sqs.delete_queue(QueueUrl=queue_url)

        except ClientError as e:
            logger.error(
                "Failed to delete SQS queue",
                queue_name=name,
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        logger.info("SQS queue deleted", queue_name=name, queue_url=queue_url)

    def resolve_address(self, name: str) -> str:
        try:
            return self.sqs.get_queue_url(QueueName=name)['QueueUrl']

        except ClientError as e:
            logger.error(
                "Failed to resolve SQS queue URL",
                queue_name=name,
                region=self.region,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

    def queue_exists(self, name: str) -> bool:
        try:
            response = self.sqs.list_queues(QueueNamePrefix=name)

        except ClientError as e:
            logger.error(
                "Failed to list SQS queues",
                queue_name=name,
                region=self.region,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        # The prefix filter also matches longer names
        return any(
            url.rstrip('/').rsplit('/', 1)[-1] == name
            for url in response.get('QueueUrls', [])
        )

    def bind(self, queue_url: str) -> SQSBackend:
        return SQSBackend(self.sqs, queue_url, wait_time_seconds=self.receive_wait_seconds)
