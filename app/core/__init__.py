"""
Core module initialization
"""

from .config import config
from .errors import (
    BrokerConnectFailure,
    PublishFailure,
    SecretsUnavailable,
    ServiceError,
    StoreWriteFailure,
)
from .logger import logger

__all__ = [
    "config",
    "ServiceError",
    "SecretsUnavailable",
    "BrokerConnectFailure",
    "StoreWriteFailure",
    "PublishFailure",
    "logger",
]
