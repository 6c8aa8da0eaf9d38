"""
Inbound port for the device-management platform feed.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

MessageCallback = Callable[[str], None]


class UpstreamFeed(ABC):
    """
    Subscription-based message source.

    Delivered messages are pushed through the callback given to the
    implementation at construction time.
    """

    @abstractmethod
    def connect_and_subscribe(self) -> None:
        """Connect and start delivering messages."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Stop delivery. Safe to call when not connected."""
        ...
