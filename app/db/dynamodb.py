"""
DynamoDB store for client records
"""

from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.errors import StoreWriteFailure
from app.core.logger import logger


class DynamoDBClientStore:
    """Handle to the clients table, configured once with fetched credentials"""

    def __init__(
        self,
        table_name: str,
        region: str,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        resource: Any = None,
    ):
        self.table_name = table_name
        self.region = region

        if resource is None:
            resource = boto3.resource(
                "dynamodb",
                region_name=region,
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key,
            )
        self.table = resource.Table(table_name)

        logger.info(
            "DynamoDB store configured",
            metadata={"event": "dynamodb_configured", "table": table_name, "region": region},
        )

    def put(self, item: Dict[str, Any]) -> None:
        """
        Write an item, replacing any existing item with the same key.

        Raises:
            StoreWriteFailure: if DynamoDB rejects the write or the item
                cannot be serialized
        """
        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            error = e.response.get("Error", {})
            raise self._failure(
                e,
                code=error.get("Code", "ClientError"),
                message=error.get("Message", str(e)),
            ) from e
        except BotoCoreError as e:
            raise self._failure(e, code=type(e).__name__, message=str(e)) from e
        except TypeError as e:
            # boto3's serializer rejects types DynamoDB has no mapping for
            raise self._failure(e, code="SerializationError", message=str(e)) from e

        logger.debug(
            "Item written",
            metadata={"event": "dynamodb_put", "table": self.table_name},
        )

    def _failure(self, exc: Exception, code: str, message: str) -> StoreWriteFailure:
        logger.error(
            f"Could not write item to {self.table_name}",
            error=exc,
            metadata={"event": "dynamodb_put_error", "table": self.table_name, "code": code},
        )
        return StoreWriteFailure(message, details={"code": code, "table": self.table_name})
