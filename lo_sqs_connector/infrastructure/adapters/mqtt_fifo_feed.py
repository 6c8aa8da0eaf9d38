"""
Live Objects FIFO subscription over MQTT.

Live Objects exposes each FIFO as the MQTT topic ``fifo/<name>``. The
application connects with the fixed username ``application`` and an API key
as password. Messages are acknowledged by the broker protocol (QoS 1) and
handed to the message callback from the paho network thread.
"""

from typing import Any

import paho.mqtt.client as mqtt
import structlog

from ...domain.ports import MessageCallback, UpstreamFeed
from ..health import ConnectorHealth
from ..logging import mask_secret

logger = structlog.get_logger()

LO_MQTT_USERNAME = "application"
FIFO_TOPIC_PREFIX = "fifo/"


def fifo_topic(name: str) -> str:
    return f"{FIFO_TOPIC_PREFIX}{name}"


class MqttFifoFeed(UpstreamFeed):
    """paho-mqtt adapter implementing the UpstreamFeed port."""

    def __init__(
        self,
        on_message: MessageCallback,
        health: ConnectorHealth,
        hostname: str,
        api_key: str,
        fifos: list[str],
        port: int = 8883,
        use_tls: bool = True,
        client_id: str = "",
        qos: int = 1,
        keep_alive: int = 30,
        client: Any = None,
    ) -> None:
        """
        Args:
            on_message: Called with every decoded payload
            health: Shared link status, upstream side is written here
            hostname: MQTT broker host
            api_key: Live Objects API key used as MQTT password
            fifos: FIFO names to subscribe to
            client: Pre-built paho client (tests)
        """
        self._on_message = on_message
        self._health = health
        self._hostname = hostname
        self._port = port
        self._fifos = list(fifos)
        self._qos = qos
        self._keep_alive = keep_alive

        if client is None:
            client = mqtt.Client(
                mqtt.CallbackAPIVersion.VERSION2,
                client_id=client_id,
            )
            client.username_pw_set(LO_MQTT_USERNAME, api_key)
            if use_tls:
                client.tls_set()
            client.reconnect_delay_set(min_delay=1, max_delay=60)
        self._client = client

        self._client.on_connect = self._handle_connect
        self._client.on_disconnect = self._handle_disconnect
        self._client.on_message = self._handle_message

        logger.debug(
            "MQTT feed configured",
            hostname=hostname,
            port=port,
            fifos=self._fifos,
            api_key=mask_secret(api_key),
        )

    def connect_and_subscribe(self) -> None:
        """Connect to the broker; subscriptions are made on CONNACK."""
        logger.info("Connecting to Live Objects", hostname=self._hostname, port=self._port)
        self._client.connect(self._hostname, self._port, keepalive=self._keep_alive)
        self._client.loop_start()

    def disconnect(self) -> None:
        """Disconnect and stop the network loop."""
        logger.info("Disconnecting from Live Objects")
        self._client.disconnect()
        self._client.loop_stop()

    def _handle_connect(self, client, userdata, flags, reason_code, properties) -> None:
        if reason_code.is_failure:
            logger.error("MQTT connection refused", reason=str(reason_code))
            self._health.set_upstream(False)
            return

        self._health.set_upstream(True)
        if not self._fifos:
            logger.warning("No FIFO configured, nothing to subscribe to")
            return

        client.subscribe([(fifo_topic(name), self._qos) for name in self._fifos])
        logger.info("Subscribed to FIFOs", fifos=self._fifos, qos=self._qos)

    def _handle_disconnect(self, client, userdata, flags, reason_code, properties) -> None:
        if reason_code == 0:
            logger.info("MQTT disconnected")
            return
        # paho keeps reconnecting while the loop runs
        logger.warning("MQTT connection lost", reason=str(reason_code))
        self._health.set_upstream(False)

    def _handle_message(self, client, userdata, message) -> None:
        payload = message.payload.decode("utf-8", errors="replace")
        self._on_message(payload)
