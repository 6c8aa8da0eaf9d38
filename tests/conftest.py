from unittest.mock import MagicMock

import pytest

from lo_sqs_connector.domain.message_queue import MessageQueue
from lo_sqs_connector.domain.ports import DownstreamSender, HealthGate, UpstreamFeed


def _example_messages(count: int) -> list[str]:
    return [f"Message {i}" for i in range(1, count + 1)]


def _queue_of(messages: list[str]) -> MessageQueue:
    queue = MessageQueue()
    for message in messages:
        queue.append(message)
    return queue


@pytest.fixture
def make_messages():
    return _example_messages


@pytest.fixture
def make_queue():
    return _queue_of


@pytest.fixture
def sender() -> MagicMock:
    mock = MagicMock(spec=DownstreamSender)
    # Copy each batch so later mutation cannot change what was recorded
    mock.sent = []
    mock.send.side_effect = lambda batch: mock.sent.append(list(batch))
    return mock


@pytest.fixture
def feed() -> MagicMock:
    return MagicMock(spec=UpstreamFeed)


@pytest.fixture
def health() -> MagicMock:
    gate = MagicMock(spec=HealthGate)
    gate.is_upstream_up.return_value = True
    gate.is_downstream_up.return_value = True
    return gate
