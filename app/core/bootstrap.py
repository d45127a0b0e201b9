"""
Service startup pipeline

Startup runs in a fixed order:
1. Fetch secrets (blocking - must pass)
2. Configure the DynamoDB store with the fetched credentials
3. Connect to RabbitMQ (non-blocking - failure degrades the service)

The result is a ServiceContext holding every process-wide collaborator the
request handlers need.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from app.clients.lambda_secret_client import LambdaSecretClient, require_store_credentials
from app.core.config import Config
from app.core.errors import BrokerConnectFailure
from app.core.logger import logger
from app.db.dynamodb import DynamoDBClientStore
from app.messaging.i_event_publisher import IEventPublisher
from app.messaging.rabbitmq_publisher import RabbitMQPublisher

StoreFactory = Callable[[Config, Dict[str, str]], DynamoDBClientStore]


@dataclass
class ServiceContext:
    """Collaborators shared by all request handlers"""

    config: Config
    store: DynamoDBClientStore
    publisher: IEventPublisher
    broker_connected: bool

    @property
    def degraded(self) -> bool:
        return not self.broker_connected


def default_store_factory(config: Config, credentials: Dict[str, str]) -> DynamoDBClientStore:
    return DynamoDBClientStore(
        table_name=config.clients_table_name,
        region=config.aws_region,
        access_key_id=credentials["AWS_ACCESS_KEY_ID"],
        secret_access_key=credentials["AWS_SECRET_ACCESS_KEY"],
    )


def bootstrap(
    config: Config,
    secret_client: Optional[LambdaSecretClient] = None,
    store_factory: Optional[StoreFactory] = None,
    publisher: Optional[IEventPublisher] = None,
) -> ServiceContext:
    """
    Build the service context.

    Raises:
        SecretsUnavailable: if store credentials cannot be obtained; the
            service must not start serving in that case
    """
    logger.info(
        "Starting Client Service...",
        metadata={"service_name": config.service_name, "environment": config.environment},
    )

    # STEP 1: Secrets (BLOCKING)
    if secret_client is None:
        secret_client = LambdaSecretClient(config.secrets_function_name, config.aws_region)
    credentials = require_store_credentials(secret_client.fetch_secrets())

    # STEP 2: Store
    store = (store_factory or default_store_factory)(config, credentials)

    # STEP 3: Broker (NON-BLOCKING)
    if publisher is None:
        publisher = RabbitMQPublisher(config.rabbitmq_url, config.client_events_queue)
    broker_connected = True
    try:
        publisher.connect()
    except BrokerConnectFailure as e:
        broker_connected = False
        logger.warning(
            "RabbitMQ unavailable, events will not be published",
            metadata={"event": "degraded_mode", "error": e.message},
        )

    return ServiceContext(
        config=config,
        store=store,
        publisher=publisher,
        broker_connected=broker_connected,
    )
