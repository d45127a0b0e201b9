"""
HTTP tests for POST /clients.
"""

import json
from decimal import Decimal
from unittest.mock import patch

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from app.core.errors import StoreWriteFailure
from app.db.dynamodb import DynamoDBClientStore
from app.main import create_app
from app.messaging.rabbitmq_publisher import RabbitMQPublisher


class TestCreateClientEndpoint:
    """Tests for POST /clients endpoint."""

    def test_create_client_echoes_body(self, client, sample_client, mock_store, mock_publisher):
        response = client.post("/clients", json=sample_client)

        assert response.status_code == 201
        assert response.json() == sample_client
        mock_store.put.assert_called_once_with(sample_client)
        mock_publisher.publish.assert_called_once_with("ClientCreated", sample_client)

    def test_create_same_client_twice(self, client, sample_client, mock_store, mock_publisher):
        first = client.post("/clients", json=sample_client)
        second = client.post("/clients", json=sample_client)

        assert first.status_code == 201
        assert second.status_code == 201
        assert mock_store.put.call_count == 2
        assert mock_publisher.publish.call_count == 2

    def test_store_failure_returns_500(self, client, sample_client, mock_store, mock_publisher):
        mock_store.put.side_effect = StoreWriteFailure(
            "Requested resource not found",
            details={"code": "ResourceNotFoundException", "table": "Clients_gr8"},
        )

        response = client.post("/clients", json=sample_client)

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Error creating client"
        assert body["error"]["code"] == "ResourceNotFoundException"
        assert body["error"]["message"] == "Requested resource not found"
        mock_publisher.publish.assert_not_called()

    def test_unexpected_error_returns_500(self, client, sample_client, mock_store):
        mock_store.put.side_effect = RuntimeError("socket closed")

        response = client.post("/clients", json=sample_client)

        assert response.status_code == 500
        assert response.json() == {
            "message": "Error creating client",
            "error": {"type": "RuntimeError", "message": "socket closed"},
        }

    def test_disconnected_broker_still_creates(self, service_context, sample_client, mock_store):
        service_context.publisher = RabbitMQPublisher("amqp://localhost:5672/", "client-events")
        service_context.broker_connected = False
        client = TestClient(create_app(service_context))

        response = client.post("/clients", json=sample_client)

        assert response.status_code == 201
        assert response.json() == sample_client
        mock_store.put.assert_called_once_with(sample_client)

    def test_body_is_not_validated(self, client, mock_store):
        body = {"ci": 1726647066, "firstName": "Christopher"}

        response = client.post("/clients", json=body)

        assert response.status_code == 201
        assert response.json() == body
        mock_store.put.assert_called_once_with(body)

    def test_non_object_body_stored_as_empty_item(self, client, mock_store, mock_publisher):
        mock_store.put.side_effect = StoreWriteFailure(
            "One or more parameter values were invalid: Missing the key ci in the item",
            details={"code": "ValidationException", "table": "Clients_gr8"},
        )

        response = client.post("/clients", json=["1726647066"])

        assert response.status_code == 500
        assert response.json()["message"] == "Error creating client"
        assert response.json()["error"]["code"] == "ValidationException"
        mock_store.put.assert_called_once_with({})
        mock_publisher.publish.assert_not_called()

    def test_null_body_stored_as_empty_item(self, client, mock_store):
        client.post("/clients", content="null", headers={"Content-Type": "application/json"})

        mock_store.put.assert_called_once_with({})

    def test_missing_body_stored_as_empty_item(self, client, mock_store):
        mock_store.put.side_effect = StoreWriteFailure("Missing the key ci in the item", details={"code": "ValidationException"})

        response = client.post("/clients")

        assert response.status_code == 500
        assert response.json()["message"] == "Error creating client"
        mock_store.put.assert_called_once_with({})

    def test_text_body_stored_as_empty_item(self, client, mock_store):
        mock_store.put.side_effect = StoreWriteFailure("Missing the key ci in the item", details={"code": "ValidationException"})

        response = client.post("/clients", content="ci=1", headers={"Content-Type": "text/plain"})

        assert response.status_code == 500
        assert response.json()["message"] == "Error creating client"
        mock_store.put.assert_called_once_with({})

    def test_float_values_reach_store_as_decimal(self, client, mock_store, mock_publisher):
        response = client.post("/clients", json={"ci": "1726647066", "phone": 9.5})

        assert response.status_code == 201
        assert response.json() == {"ci": "1726647066", "phone": 9.5}
        mock_store.put.assert_called_once_with({"ci": "1726647066", "phone": Decimal("9.5")})

    def test_correlation_id_echoed(self, client, sample_client):
        response = client.post(
            "/clients", json=sample_client, headers={"X-Correlation-ID": "req-42"}
        )

        assert response.headers["X-Correlation-ID"] == "req-42"


class TestClientCreatedScenario:
    """End to end through the real publisher with a mocked broker connection."""

    def test_event_enqueued_as_persistent_message(self, service_context, sample_client, mock_store):
        with patch('app.messaging.rabbitmq_publisher.pika.BlockingConnection') as mock_cls:
            publisher = RabbitMQPublisher("amqp://localhost:5672/", "client-events")
            publisher.connect()
            service_context.publisher = publisher
            client = TestClient(create_app(service_context))

            response = client.post("/clients", json=sample_client)

        assert response.status_code == 201
        assert response.json() == sample_client

        channel = mock_cls.return_value.channel.return_value
        kwargs = channel.basic_publish.call_args.kwargs
        assert kwargs["routing_key"] == "client-events"
        assert json.loads(kwargs["body"]) == {"eventType": "ClientCreated", "data": sample_client}
        assert kwargs["properties"].delivery_mode == 2
        assert kwargs["properties"].correlation_id == response.headers["X-Correlation-ID"]


@pytest.fixture
def dynamodb_client(service_context):
    """HTTP client whose store writes to a mocked clients table"""
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-2")
        resource.create_table(
            TableName="Clients_gr8",
            KeySchema=[{"AttributeName": "ci", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "ci", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        service_context.store = DynamoDBClientStore("Clients_gr8", "us-east-2", resource=resource)
        yield TestClient(create_app(service_context)), resource.Table("Clients_gr8")


class TestCreateClientWithTable:
    """POST /clients against a mocked DynamoDB table"""

    def test_float_stored_as_number(self, dynamodb_client, mock_publisher):
        client, table = dynamodb_client

        response = client.post("/clients", json={"ci": "1726647066", "phone": 9.5})

        assert response.status_code == 201
        assert table.get_item(Key={"ci": "1726647066"})["Item"] == {"ci": "1726647066", "phone": Decimal("9.5")}
        mock_publisher.publish.assert_called_once()

    def test_missing_body_rejected_by_table(self, dynamodb_client, mock_publisher):
        client, _ = dynamodb_client

        response = client.post("/clients")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Error creating client"
        assert body["error"]["type"] == "StoreWriteFailure"
        assert body["error"]["code"] == "ValidationException"
        mock_publisher.publish.assert_not_called()

    def test_text_body_rejected_by_table(self, dynamodb_client):
        client, _ = dynamodb_client

        response = client.post("/clients", content="ci=1", headers={"Content-Type": "text/plain"})

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "ValidationException"
