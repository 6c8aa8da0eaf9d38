"""
Application service that drains the message queue into SQS-sized batches.

Depends on the DownstreamSender port, not on boto3.
"""

import structlog

from ...domain.message_queue import MessageQueue
from ...domain.ports import DownstreamSender
from ...infrastructure.logging import Timer, dispatch_cycle

logger = structlog.get_logger()

DEFAULT_BATCH_SIZE = 10


def resolve_batch_size(configured: int | None) -> int:
    """Return the configured batch size when positive, else the default."""
    if configured is None or configured <= 0:
        return DEFAULT_BATCH_SIZE
    return configured


class BatchDispatcher:
    """
    Forwards queued messages downstream in batches of at most max_batch_size.

    One dispatch() call is a cycle. It covers the messages queued when the
    cycle begins; later arrivals wait for the next cycle. Delivery is
    at-most-once: a batch whose send fails is not re-queued.
    """

    def __init__(
        self,
        queue: MessageQueue,
        sender: DownstreamSender,
        max_batch_size: int | None = None,
    ) -> None:
        self._queue = queue
        self._sender = sender
        self._max_batch_size = resolve_batch_size(max_batch_size)

    @property
    def max_batch_size(self) -> int:
        return self._max_batch_size

    def dispatch(self) -> int:
        """
        Run one dispatch cycle.

        Every batch of the cycle is attempted even if an earlier one fails;
        the first failure is then re-raised.

        Returns:
            Number of batches sent successfully
        """
        pending = len(self._queue)
        if pending == 0:
            logger.debug("No queued messages to dispatch")
            return 0

        with dispatch_cycle():
            return self._run_cycle(pending)

    def _run_cycle(self, pending: int) -> int:
        logger.info(
            "Dispatching queued messages",
            pending=pending,
            batch_size=self._max_batch_size,
        )

        sent = 0
        failures: list[Exception] = []
        while pending > 0:
            batch = self._queue.drain_up_to(min(self._max_batch_size, pending))
            if not batch:
                break
            pending -= len(batch)

            try:
                with Timer() as t:
                    self._sender.send(batch)
            except Exception as e:
                # Batch is dropped; the rest of the cycle still runs
                logger.error(
                    "Failed to send batch",
                    size=len(batch),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                failures.append(e)
                continue

            sent += 1
            logger.debug("Batch sent", size=len(batch), duration_ms=t.duration_ms)

        logger.info("Dispatch cycle finished", batches_sent=sent, batches_failed=len(failures))

        if failures:
            raise failures[0]
        return sent
