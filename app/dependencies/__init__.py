"""
Dependencies module initialization
"""

from .client import get_client_service, get_service_context

__all__ = [
    "get_client_service",
    "get_service_context",
]
