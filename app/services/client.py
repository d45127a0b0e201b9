"""
Client service containing business logic layer
"""

from typing import Any, Dict

from app.core.logger import logger
from app.db.dynamodb import DynamoDBClientStore
from app.messaging.i_event_publisher import IEventPublisher
from app.schemas.client import ClientCreate

CLIENT_CREATED = "ClientCreated"


class ClientService:
    """Creates client records and announces them to other services"""

    def __init__(self, store: DynamoDBClientStore, publisher: IEventPublisher):
        self.store = store
        self.publisher = publisher

    def create_client(self, client: ClientCreate) -> Dict[str, Any]:
        """
        Store the client and publish a ClientCreated event.

        The write is an upsert: creating the same ``ci`` twice overwrites the
        record and emits a second event. StoreWriteFailure propagates and no
        event is published.
        """
        item = client.to_item()
        self.store.put(item)

        logger.info(
            "Client stored",
            metadata={"event": "create_client", "ci": item.get("ci")},
        )

        result = self.publisher.publish(CLIENT_CREATED, item)
        if not result.published:
            logger.warning(
                "ClientCreated event not published",
                metadata={"event": "create_client", "ci": item.get("ci"), "reason": result.error},
            )

        return item
