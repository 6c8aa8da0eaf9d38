from .mqtt_fifo_feed import MqttFifoFeed
from .sqs_sender import SqsSender

__all__ = [
    "MqttFifoFeed",
    "SqsSender",
]
