from .exceptions import ConnectorError, UnhealthyConnectionError
from .message_queue import MessageQueue

__all__ = [
    "ConnectorError",
    "MessageQueue",
    "UnhealthyConnectionError",
]
