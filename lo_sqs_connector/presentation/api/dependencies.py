from ...application.services import BatchDispatcher, ConnectorService
from ...config import settings
from ...domain.message_queue import MessageQueue
from ...infrastructure.adapters import MqttFifoFeed, SqsSender
from ...infrastructure.health import ConnectorHealth

# Process-wide singletons
_health: ConnectorHealth | None = None
_message_queue: MessageQueue | None = None
_connector: ConnectorService | None = None


def get_connector_health() -> ConnectorHealth:
    global _health
    if _health is None:
        _health = ConnectorHealth()
    return _health


def get_message_queue() -> MessageQueue:
    global _message_queue
    if _message_queue is None:
        _message_queue = MessageQueue(capacity=settings.message_queue_capacity)
    return _message_queue


def get_connector_service() -> ConnectorService:
    """Wire up the connector (composition root)."""
    global _connector
    if _connector is None:
        health = get_connector_health()
        queue = get_message_queue()

        sender = SqsSender(
            queue_name=settings.sqs_queue_name,
            health=health,
            region=settings.aws_region,
            endpoint_url=settings.aws_endpoint_url,
        )
        feed = MqttFifoFeed(
            on_message=queue.append,
            health=health,
            hostname=settings.lo_hostname,
            api_key=settings.lo_api_key,
            fifos=settings.lo_topics,
            port=settings.lo_port,
            use_tls=settings.lo_use_tls,
            client_id=settings.lo_client_id,
            qos=settings.lo_message_qos,
            keep_alive=settings.lo_keep_alive_seconds,
        )
        dispatcher = BatchDispatcher(
            queue=queue,
            sender=sender,
            max_batch_size=settings.lo_message_batch_size,
        )
        _connector = ConnectorService(
            feed=feed,
            sender=sender,
            health=health,
            dispatcher=dispatcher,
        )
    return _connector
