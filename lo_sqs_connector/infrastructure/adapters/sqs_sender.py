from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from ...config import SQS_MAX_BATCH_ENTRIES
from ...domain.exceptions import ConnectorError
from ...domain.ports import DownstreamSender
from ..health import ConnectorHealth

logger = structlog.get_logger()


class SqsSender(DownstreamSender):
    """SQS adapter implementing the DownstreamSender port."""

    def __init__(
        self,
        queue_name: str,
        health: ConnectorHealth,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        client: Any = None,
    ) -> None:
        self._queue_name = queue_name
        self._health = health
        self._queue_url: str | None = None

        if client is None:
            client_kwargs = {"region_name": region}
            if endpoint_url:
                client_kwargs["endpoint_url"] = endpoint_url
            client = boto3.client("sqs", **client_kwargs)
        self._client = client

    @property
    def queue_url(self) -> str | None:
        return self._queue_url

    def resolve_queue(self) -> str | None:
        """Look up the queue URL and record downstream health."""
        try:
            response = self._client.get_queue_url(QueueName=self._queue_name)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Cannot resolve SQS queue",
                queue_name=self._queue_name,
                error=str(e),
            )
            self._health.set_downstream(False)
            return None

        self._queue_url = response["QueueUrl"]
        self._health.set_downstream(True)
        logger.info("Resolved SQS queue", queue_url=self._queue_url)
        return self._queue_url

    def send(self, messages: list[str]) -> None:
        """Send one batch with a single SendMessageBatch call."""
        if not messages:
            return
        if len(messages) > SQS_MAX_BATCH_ENTRIES:
            raise ValueError(
                f"SQS batch holds at most {SQS_MAX_BATCH_ENTRIES} entries, got {len(messages)}"
            )
        if self._queue_url is None and self.resolve_queue() is None:
            raise ConnectorError(f"SQS queue {self._queue_name!r} is not resolvable")

        entries = [
            {"Id": str(index), "MessageBody": body} for index, body in enumerate(messages)
        ]

        try:
            response = self._client.send_message_batch(
                QueueUrl=self._queue_url,
                Entries=entries,
            )
        except (ClientError, BotoCoreError):
            self._health.set_downstream(False)
            raise

        self._health.set_downstream(True)

        failed = response.get("Failed", [])
        for failure in failed:
            logger.error(
                "SQS rejected message",
                entry_id=failure.get("Id"),
                code=failure.get("Code"),
                sender_fault=failure.get("SenderFault"),
                error=failure.get("Message"),
            )

        logger.info(
            "Sent batch to SQS",
            delivered=len(response.get("Successful", [])),
            failed=len(failed),
        )
