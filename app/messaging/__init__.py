"""
Messaging module initialization
"""

from .i_event_publisher import IEventPublisher, PublishResult
from .rabbitmq_publisher import RabbitMQPublisher

__all__ = [
    "IEventPublisher",
    "PublishResult",
    "RabbitMQPublisher",
]
