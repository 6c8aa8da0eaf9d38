import threading

import structlog

from ..domain.ports import HealthGate

logger = structlog.get_logger()


class ConnectorHealth(HealthGate):
    """
    Link status shared by the adapters, the lifecycle and the HTTP health checks.

    Upstream starts up (no loss observed yet); downstream starts down until
    the queue URL has been resolved.
    """

    def __init__(self, upstream: bool = True, downstream: bool = False) -> None:
        self._lock = threading.Lock()
        self._upstream = upstream
        self._downstream = downstream

    def is_upstream_up(self) -> bool:
        with self._lock:
            return self._upstream

    def is_downstream_up(self) -> bool:
        with self._lock:
            return self._downstream

    def set_upstream(self, up: bool) -> None:
        with self._lock:
            changed = self._upstream != up
            self._upstream = up
        if changed:
            logger.info("Upstream connection status changed", up=up)

    def set_downstream(self, up: bool) -> None:
        with self._lock:
            changed = self._downstream != up
            self._downstream = up
        if changed:
            logger.info("Downstream connection status changed", up=up)

    def snapshot(self) -> dict[str, bool]:
        with self._lock:
            return {"upstream": self._upstream, "downstream": self._downstream}
