"""
In-memory FIFO of messages waiting to be forwarded to SQS.

The MQTT network thread appends; the scheduler thread drains. Both
operations hold the same lock so a drain never observes a partial append.
"""

import threading
from collections import deque

import structlog

logger = structlog.get_logger()


class MessageQueue:
    """Thread-safe FIFO of opaque string messages."""

    def __init__(self, capacity: int | None = None) -> None:
        """
        Args:
            capacity: Maximum number of pending messages. When reached, the
                oldest message is evicted to make room. None means unbounded.
        """
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._messages: deque[str] = deque()
        self._lock = threading.Lock()
        self._evicted = 0

    def append(self, message: str) -> None:
        """Add a message to the tail. Never blocks."""
        with self._lock:
            if self._capacity is not None and len(self._messages) >= self._capacity:
                self._messages.popleft()
                self._evicted += 1
                evicted = self._evicted
            else:
                evicted = 0
            self._messages.append(message)

        if evicted:
            logger.warning(
                "Message queue full, evicted oldest message",
                capacity=self._capacity,
                evicted_total=evicted,
            )

    def drain_up_to(self, n: int) -> list[str]:
        """
        Remove and return the first min(n, len) messages in FIFO order.

        Returns an empty list when the queue is empty or n <= 0.
        """
        if n <= 0:
            return []
        with self._lock:
            count = min(n, len(self._messages))
            return [self._messages.popleft() for _ in range(count)]

    def is_empty(self) -> bool:
        with self._lock:
            return not self._messages

    @property
    def evicted(self) -> int:
        """Number of messages dropped because the queue was full."""
        with self._lock:
            return self._evicted

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)
