"""
Lambda Secret Client
Obtains the service's store credentials by invoking a secrets-providing
AWS Lambda function once at startup.

The function answers with an API-Gateway style envelope:

    {"statusCode": 200, "body": "{\"secret\": \"{\\\"AWS_ACCESS_KEY_ID\\\": ...}\"}"}

``body`` is a JSON string and ``body.secret`` is itself a JSON string holding
the flat credential mapping.
"""

import json
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.errors import SecretsUnavailable
from app.core.logger import logger

REQUIRED_STORE_SECRETS = ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY")


class LambdaSecretClient:
    """
    Secret client backed by a Lambda function invocation.
    """

    def __init__(self, function_name: str, region: str, lambda_client: Any = None):
        self.function_name = function_name
        self.region = region
        self._lambda = lambda_client or boto3.client("lambda", region_name=region)

        logger.info(
            "Secret client initialized",
            metadata={
                "event": "secret_client_init",
                "function_name": self.function_name,
                "region": self.region,
            },
        )

    def fetch_secrets(self) -> Dict[str, str]:
        """
        Invoke the secrets function and unwrap its response.

        Returns:
            Flat mapping of credential names to values

        Raises:
            SecretsUnavailable: if the invocation fails, the function reports
                an error, or any layer of the envelope cannot be parsed
        """
        try:
            response = self._lambda.invoke(FunctionName=self.function_name)
            payload = json.loads(response["Payload"].read())

            error_message = self._function_error(response, payload)
            if error_message:
                raise SecretsUnavailable(
                    error_message,
                    details={"function_name": self.function_name},
                )

            body = json.loads(payload["body"])
            secrets = json.loads(body["secret"])
            if not isinstance(secrets, dict):
                raise SecretsUnavailable(
                    "Secret payload is not a mapping",
                    details={"function_name": self.function_name},
                )

        except SecretsUnavailable as e:
            logger.error(
                "Error invoking Lambda function",
                error=e,
                metadata={"event": "secret_retrieval_error", "function_name": self.function_name},
            )
            raise
        except (BotoCoreError, ClientError, KeyError, TypeError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(
                "Error invoking Lambda function",
                error=e,
                metadata={"event": "secret_retrieval_error", "function_name": self.function_name},
            )
            raise SecretsUnavailable(
                f"Could not fetch secrets from {self.function_name}: {e}",
                details={"function_name": self.function_name},
            ) from e

        logger.info(
            "Secrets retrieved",
            metadata={
                "event": "secret_retrieved",
                "function_name": self.function_name,
                "keys": sorted(secrets.keys()),
            },
        )
        return secrets

    @staticmethod
    def _function_error(response: Dict[str, Any], payload: Any) -> Optional[str]:
        """Error message reported by the function itself, if any"""
        if isinstance(payload, dict) and payload.get("errorMessage"):
            return str(payload["errorMessage"])
        if response.get("FunctionError"):
            return f"Lambda function error: {response['FunctionError']}"
        return None


def require_store_credentials(secrets: Dict[str, str]) -> Dict[str, str]:
    """Pick the store credentials out of the secret mapping"""
    missing = [name for name in REQUIRED_STORE_SECRETS if not secrets.get(name)]
    if missing:
        raise SecretsUnavailable(
            "Store credentials missing from secrets",
            details={"missing": missing},
        )
    return {name: secrets[name] for name in REQUIRED_STORE_SECRETS}
