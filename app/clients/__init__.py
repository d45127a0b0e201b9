"""
Clients Package
Clients for remote collaborators called at startup.
"""

from .lambda_secret_client import LambdaSecretClient, require_store_credentials

__all__ = [
    "LambdaSecretClient",
    "require_store_credentials",
]
