"""
Database module initialization
"""

from .dynamodb import DynamoDBClientStore

__all__ = [
    "DynamoDBClientStore",
]
