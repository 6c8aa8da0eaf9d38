"""Tests for the in-memory message queue."""

import threading

import pytest

from lo_sqs_connector.domain.message_queue import MessageQueue


class TestMessageQueue:
    def setup_method(self) -> None:
        self.queue = MessageQueue()

    def test_new_queue_is_empty(self) -> None:
        assert self.queue.is_empty()
        assert len(self.queue) == 0

    def test_drain_returns_messages_in_fifo_order(self) -> None:
        for message in ("a", "b", "c"):
            self.queue.append(message)

        assert self.queue.drain_up_to(10) == ["a", "b", "c"]
        assert self.queue.is_empty()

    def test_drain_up_to_takes_only_the_front(self) -> None:
        for message in ("a", "b", "c"):
            self.queue.append(message)

        assert self.queue.drain_up_to(2) == ["a", "b"]
        assert self.queue.drain_up_to(2) == ["c"]

    def test_drain_empty_queue_returns_empty_list(self) -> None:
        assert self.queue.drain_up_to(5) == []

    def test_drain_non_positive_count_removes_nothing(self) -> None:
        self.queue.append("a")

        assert self.queue.drain_up_to(0) == []
        assert self.queue.drain_up_to(-1) == []
        assert len(self.queue) == 1

    def test_message_never_returned_twice(self) -> None:
        self.queue.append("a")
        self.queue.append("b")

        first = self.queue.drain_up_to(1)
        second = self.queue.drain_up_to(1)

        assert first == ["a"]
        assert second == ["b"]

    def test_invalid_capacity_rejected(self) -> None:
        with pytest.raises(ValueError):
            MessageQueue(capacity=0)

    def test_full_bounded_queue_evicts_oldest(self) -> None:
        queue = MessageQueue(capacity=2)
        queue.append("a")
        queue.append("b")
        queue.append("c")

        assert queue.evicted == 1
        assert queue.drain_up_to(10) == ["b", "c"]


class TestMessageQueueConcurrency:
    def test_concurrent_append_and_drain_loses_nothing(self) -> None:
        queue = MessageQueue()
        total = 5000
        drained: list[str] = []
        done = threading.Event()

        def produce() -> None:
            for i in range(total):
                queue.append(f"m{i}")
            done.set()

        def consume() -> None:
            while not (done.is_set() and queue.is_empty()):
                drained.extend(queue.drain_up_to(7))

        producer = threading.Thread(target=produce)
        consumer = threading.Thread(target=consume)
        producer.start()
        consumer.start()
        producer.join()
        consumer.join()

        assert drained == [f"m{i}" for i in range(total)]

    def test_eviction_count_consistent_under_concurrent_appends(self) -> None:
        queue = MessageQueue(capacity=10)
        per_thread = 500
        threads = [
            threading.Thread(target=lambda: [queue.append("m") for _ in range(per_thread)])
            for _ in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(queue) == 10
        assert queue.evicted == 4 * per_thread - 10
