"""
Event Publisher Interface
Contract for publishing domain events to a message broker.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PublishResult:
    """
    Outcome of a best-effort publish.

    Publishing never raises; callers inspect (or knowingly ignore) this value.
    """

    event: Dict[str, Any]
    published: bool
    error: Optional[str] = None


class IEventPublisher(ABC):
    """Abstract base class for event publishers"""

    @abstractmethod
    def connect(self) -> None:
        """
        Establish connection to the message broker

        Raises:
            BrokerConnectFailure: if the broker cannot be reached
        """

    @abstractmethod
    def publish(self, event_type: str, data: Dict[str, Any]) -> PublishResult:
        """
        Publish ``{"eventType": event_type, "data": data}``

        Args:
            event_type: Name of the domain event (e.g. ``ClientCreated``)
            data: Event payload
        """

    @abstractmethod
    def close(self) -> None:
        """Close the broker connection"""

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """True when a channel is available for publishing"""
