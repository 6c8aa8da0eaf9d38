from abc import ABC, abstractmethod


class HealthGate(ABC):
    """Reports link status for the upstream feed and the downstream queue."""

    @abstractmethod
    def is_upstream_up(self) -> bool: ...

    @abstractmethod
    def is_downstream_up(self) -> bool: ...
