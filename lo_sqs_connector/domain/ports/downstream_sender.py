"""
Outbound port for the downstream message queue.

Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod


class DownstreamSender(ABC):
    """Transmits ordered batches of messages to the cloud queue."""

    @abstractmethod
    def resolve_queue(self) -> str | None:
        """
        Resolve the destination queue address.

        Implementations record the outcome on the health gate.

        Returns:
            The queue URL, or None when it could not be resolved
        """
        ...

    @abstractmethod
    def send(self, messages: list[str]) -> None:
        """
        Send one batch in a single call.

        Args:
            messages: Non-empty ordered list of message bodies

        Raises:
            Any transport error, unchanged. No retry is attempted.
        """
        ...
