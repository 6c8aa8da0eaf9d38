"""
Structured logging for the connector.

Log lines are JSON on stdout. Lines emitted inside a dispatch cycle carry
that cycle's ``cycle_id`` so the batches of one cycle can be grouped.
"""

import logging
import sys
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

import structlog

cycle_id: ContextVar[str] = ContextVar("cycle_id", default="")


class _ServiceTag:
    """Processor stamping every event with the service name."""

    def __init__(self, service_name: str) -> None:
        self._service_name = service_name

    def __call__(self, logger, method_name, event_dict):
        event_dict.setdefault("service", self._service_name)
        return event_dict


def _tag_cycle(logger, method_name, event_dict):
    current = cycle_id.get()
    if current:
        event_dict["cycle_id"] = current
    return event_dict


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Route structlog through stdlib logging and render JSON.

    Args:
        service_name: Value of the ``service`` field on every line
        level: Root log level name (DEBUG, INFO, ...)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _ServiceTag(service_name),
            _tag_cycle,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


@contextmanager
def dispatch_cycle() -> Iterator[str]:
    """
    Tag log lines with a fresh cycle ID for the duration of the block.

    The previous value is restored on exit, also when the block raises, so
    a reused scheduler thread never logs a finished cycle's ID.
    """
    token = cycle_id.set(uuid.uuid4().hex[:12])
    try:
        yield cycle_id.get()
    finally:
        cycle_id.reset(token)


def get_cycle_id() -> str:
    return cycle_id.get()


class Timer:
    """Measures a block in milliseconds: ``with Timer() as t: ...; t.duration_ms``."""

    def __init__(self) -> None:
        self._started = 0.0
        self.duration_ms = 0.0

    def __enter__(self) -> "Timer":
        self._started = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        self.duration_ms = round((time.perf_counter() - self._started) * 1000, 2)


def mask_secret(secret: str, visible: int = 4) -> str:
    """Keep the first ``visible`` characters of an API key, hide the rest."""
    if len(secret) <= visible:
        return secret
    return f"{secret[:visible]}..."
