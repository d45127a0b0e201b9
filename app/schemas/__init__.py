"""
Schemas module initialization
"""

from .client import CLIENT_FIELDS, ClientCreate, ClientResponse

__all__ = [
    "CLIENT_FIELDS",
    "ClientCreate",
    "ClientResponse",
]
