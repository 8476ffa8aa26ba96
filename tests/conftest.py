"""
Module: conftest.py
Description: Shared pytest fixtures for simple-sqs tests.

Provides queue configurations, in-memory backends and moto-mocked SQS
queues. moto keeps the SQS tests fast and isolated from AWS.
"""

import boto3
import pytest
from moto import mock_aws

from simple_sqs.backends.memory import InMemoryBackend, InMemoryQueueManager
from simple_sqs.backends.sqs import SQSQueueManager
from simple_sqs.client import QueueClient
from simple_sqs.config.settings import Settings
from simple_sqs.models.config import QueueConfig
from simple_sqs.utils.ids import RandomIdGenerator

REGION = "us-east-1"
QUEUE_NAME = "test-queue"
VISIBILITY_TIMEOUT = 5


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Disables .env loading, turns off long polling and bounds purge waits so
    tests never block.
    """
    return Settings(
        _env_file=None,
        log_level="DEBUG",
        aws_region=REGION,
        queue_name=QUEUE_NAME,
        visibility_timeout_seconds=VISIBILITY_TIMEOUT,
        receive_wait_seconds=0,
        purge_poll_interval_seconds=0.01,
        purge_timeout_seconds=5
    )


@pytest.fixture
def queue_config():
    """Provide a valid queue configuration."""
    return QueueConfig(
        visibility_timeout_seconds=VISIBILITY_TIMEOUT,
        name=QUEUE_NAME,
        region=REGION
    )


@pytest.fixture
def memory_backend():
    """Provide an empty in-memory backend."""
    return InMemoryBackend()


@pytest.fixture
def memory_manager():
    """Provide an in-memory queue manager holding the test queue."""
    manager = InMemoryQueueManager()
    manager.create_queue(QUEUE_NAME)
    return manager


@pytest.fixture
def memory_client(queue_config, memory_backend, test_settings):
    """Provide a QueueClient bound to an in-memory backend."""
    return QueueClient(
        queue_config,
        backend=memory_backend,
        id_generator=RandomIdGenerator(seed=7),
        settings=test_settings
    )


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never reaches real accounts."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def sqs_client(aws_credentials):
    """Provide a boto3 SQS client inside a moto mock."""
    with mock_aws():
        yield boto3.client('sqs', region_name=REGION)


@pytest.fixture
def sqs_queue_url(sqs_client):
    """Create the mock test queue and return its URL."""
    return sqs_client.create_queue(QueueName=QUEUE_NAME)['QueueUrl']


@pytest.fixture
def sqs_manager(sqs_client):
    """Provide an SQSQueueManager using the mocked client without long polling."""
    return SQSQueueManager(REGION, receive_wait_seconds=0, sqs_client=sqs_client)


@pytest.fixture
def sqs_queue_client(queue_config, sqs_manager, sqs_queue_url, test_settings):
    """Provide a QueueClient resolved against the mocked SQS queue."""
    return QueueClient(
        queue_config,
        manager=sqs_manager,
        id_generator=RandomIdGenerator(seed=7),
        settings=test_settings
    )


@pytest.fixture(params=["memory", "sqs"])
def queue_client(request):
    """Provide a QueueClient for each backend, for contract tests."""
    if request.param == "memory":
        return request.getfixturevalue("memory_client")
    return request.getfixturevalue("sqs_queue_client")
