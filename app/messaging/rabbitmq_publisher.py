"""
RabbitMQ Publisher Implementation
Implements IEventPublisher on top of a pika BlockingConnection
"""

import json
import threading
from decimal import Decimal
from typing import Any, Dict, Optional

import pika

from app.core.context import get_correlation_id
from app.core.errors import BrokerConnectFailure, PublishFailure
from app.core.logger import logger
from .i_event_publisher import IEventPublisher, PublishResult

PERSISTENT_DELIVERY_MODE = 2


def encode_number(value: Any) -> Any:
    """JSON encoding for the Decimal numbers request bodies are parsed into"""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RabbitMQPublisher(IEventPublisher):
    """Publishes events as persistent messages on a single durable queue"""

    def __init__(self, rabbitmq_url: str, queue_name: str):
        """
        Initialize RabbitMQ publisher

        Args:
            rabbitmq_url: RabbitMQ connection URL
            queue_name: Name of the queue events are sent to
        """
        self.rabbitmq_url = rabbitmq_url
        self.queue_name = queue_name
        self.connection: Optional[pika.BlockingConnection] = None
        self.channel = None
        # BlockingConnection channels are not thread-safe and sync routes
        # run in a thread pool
        self._lock = threading.Lock()

    def connect(self) -> None:
        """Connect to RabbitMQ and declare the events queue"""
        try:
            logger.info("Connecting to RabbitMQ...", metadata={"queue": self.queue_name})

            parameters = pika.URLParameters(self.rabbitmq_url)
            parameters.heartbeat = 600
            parameters.blocked_connection_timeout = 300

            connection = pika.BlockingConnection(parameters)
            channel = connection.channel()

            # Declare queue (idempotent)
            channel.queue_declare(queue=self.queue_name, durable=True)

            self.connection = connection
            self.channel = channel
            logger.info("Connected to RabbitMQ", metadata={"queue": self.queue_name})

        except Exception as e:
            self.connection = None
            self.channel = None
            logger.error(
                "Error connecting to RabbitMQ",
                error=e,
                metadata={"event": "rabbitmq_connect_error", "queue": self.queue_name},
            )
            raise BrokerConnectFailure(
                f"Could not connect to RabbitMQ: {e}",
                details={"queue": self.queue_name},
            ) from e

    def publish(self, event_type: str, data: Dict[str, Any]) -> PublishResult:
        """Send an event to the queue; failures are logged and returned, never raised"""
        event = {"eventType": event_type, "data": data}

        if self.channel is None:
            logger.error(
                "Channel is not initialized",
                metadata={"event": "rabbitmq_publish_skipped", "eventType": event_type},
            )
            return PublishResult(event=event, published=False, error="Channel is not initialized")

        try:
            body = json.dumps(event, default=encode_number)
            properties = pika.BasicProperties(
                content_type="application/json",
                delivery_mode=PERSISTENT_DELIVERY_MODE,
                correlation_id=get_correlation_id(),
            )
            with self._lock:
                self.channel.basic_publish(
                    exchange="",
                    routing_key=self.queue_name,
                    body=body,
                    properties=properties,
                )
        except Exception as e:
            failure = PublishFailure(str(e), details={"eventType": event_type})
            logger.error(
                "Error publishing event to RabbitMQ",
                error=e,
                metadata={"event": "rabbitmq_publish_error", "eventType": event_type},
            )
            return PublishResult(event=event, published=False, error=failure.message)

        logger.info(
            "Event published to RabbitMQ",
            metadata={"event": "rabbitmq_published", "queue": self.queue_name, "payload": event},
        )
        return PublishResult(event=event, published=True)

    def close(self) -> None:
        """Close RabbitMQ connection"""
        try:
            if self.connection is not None and self.connection.is_open:
                self.connection.close()
                logger.info("RabbitMQ connection closed")
        except Exception as e:
            logger.error("Error closing RabbitMQ connection", error=e)
        finally:
            self.connection = None
            self.channel = None

    @property
    def is_connected(self) -> bool:
        return self.channel is not None
