from .downstream_sender import DownstreamSender
from .health_gate import HealthGate
from .upstream_feed import MessageCallback, UpstreamFeed

__all__ = [
    "DownstreamSender",
    "HealthGate",
    "MessageCallback",
    "UpstreamFeed",
]
