"""Shared test fixtures"""
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from app.core.bootstrap import ServiceContext
from app.core.config import Config
from app.db.dynamodb import DynamoDBClientStore
from app.main import create_app
from app.messaging.i_event_publisher import IEventPublisher, PublishResult


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake AWS credentials so no test can reach a real account"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-2")


@pytest.fixture
def test_config():
    """Configuration with defaults only (no .env file)"""
    return Config(_env_file=None)


@pytest.fixture
def sample_client():
    """Client body used throughout the tests"""
    return {
        "ci": "1726647066",
        "firstName": "Christopher",
        "lastName": "Pallo",
        "phone": "0995312828",
        "address": "Condado",
    }


@pytest.fixture
def mock_store():
    """Mock DynamoDB store"""
    return Mock(spec=DynamoDBClientStore)


@pytest.fixture
def mock_publisher():
    """Mock event publisher that reports every event as published"""
    publisher = Mock(spec=IEventPublisher)
    publisher.publish.side_effect = lambda event_type, data: PublishResult(
        event={"eventType": event_type, "data": data}, published=True
    )
    return publisher


@pytest.fixture
def service_context(test_config, mock_store, mock_publisher):
    """Service context wired with mocks"""
    return ServiceContext(
        config=test_config,
        store=mock_store,
        publisher=mock_publisher,
        broker_connected=True,
    )


@pytest.fixture
def client(service_context):
    """HTTP test client for the application"""
    return TestClient(create_app(service_context))
