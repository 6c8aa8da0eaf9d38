"""
Connector lifecycle: gated startup, shutdown and the scheduled send.

Following hexagonal architecture, every collaborator is injected.
"""

from enum import Enum

import structlog

from ...domain.exceptions import UnhealthyConnectionError
from ...domain.ports import DownstreamSender, HealthGate, UpstreamFeed
from .batch_dispatcher import BatchDispatcher

logger = structlog.get_logger()


class ConnectorState(str, Enum):
    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"


class ConnectorService:
    """
    Orchestrates the upstream feed, the downstream queue and the dispatcher.

    start() subscribes to the feed only when both links report healthy.
    stop() always disconnects the feed. send() runs a dispatch cycle and may
    be called in any state.
    """

    def __init__(
        self,
        feed: UpstreamFeed,
        sender: DownstreamSender,
        health: HealthGate,
        dispatcher: BatchDispatcher,
    ) -> None:
        """
        Initialize with injected dependencies.

        Args:
            feed: UpstreamFeed implementation pushing into the message queue
            sender: DownstreamSender implementation
            health: HealthGate reporting both link statuses
            dispatcher: BatchDispatcher draining the same message queue
        """
        self._feed = feed
        self._sender = sender
        self._health = health
        self._dispatcher = dispatcher
        self._state = ConnectorState.STOPPED

    @property
    def state(self) -> ConnectorState:
        return self._state

    def start(self) -> None:
        """
        Verify the downstream queue and both links, then subscribe.

        Raises:
            UnhealthyConnectionError: If either link is down. The feed is
                not subscribed in that case.
        """
        self._state = ConnectorState.STARTING
        logger.info("Starting connector")

        try:
            self._sender.resolve_queue()

            upstream_up = self._health.is_upstream_up()
            downstream_up = self._health.is_downstream_up()
            if not (upstream_up and downstream_up):
                raise UnhealthyConnectionError(upstream_up, downstream_up)

            self._feed.connect_and_subscribe()
        except Exception:
            self._state = ConnectorState.STOPPED
            logger.error("Connector start failed", exc_info=True)
            raise

        self._state = ConnectorState.RUNNING
        logger.info("Connector running")

    def stop(self) -> None:
        """Disconnect the feed. Safe to call repeatedly."""
        logger.info("Stopping connector", state=self._state.value)
        self._feed.disconnect()
        self._state = ConnectorState.STOPPED

    def send(self) -> int:
        """Forward everything currently queued. See BatchDispatcher.dispatch."""
        return self._dispatcher.dispatch()
