"""
Services module initialization
"""

from .client import CLIENT_CREATED, ClientService

__all__ = [
    "CLIENT_CREATED",
    "ClientService",
]
