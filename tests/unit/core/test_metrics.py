"""Unit tests for the metrics sinks."""

from __future__ import annotations

import threading

import pytest

from modules.core.metrics import IMetrics, InMemoryMetrics, NullMetrics

pytestmark = pytest.mark.unit


class TestInMemoryMetrics:
    def test_unknown_counter_is_zero(self):
        assert InMemoryMetrics().get("missing") == 0

    def test_increment(self):
        sink = InMemoryMetrics()
        sink.increment("customer.creation.requests")
        sink.increment("customer.creation.requests", amount=2)
        assert sink.get("customer.creation.requests") == 3

    def test_snapshot_is_a_copy(self):
        sink = InMemoryMetrics()
        sink.increment("a")
        snap = sink.snapshot()
        snap["a"] = 100
        assert sink.get("a") == 1

    def test_reset(self):
        sink = InMemoryMetrics()
        sink.increment("a")
        sink.reset()
        assert sink.snapshot() == {}

    def test_concurrent_increments(self):
        sink = InMemoryMetrics()

        def work():
            for _ in range(500):
                sink.increment("hits")

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sink.get("hits") == 4000


class TestNullMetrics:
    def test_is_a_sink(self):
        assert isinstance(NullMetrics(), IMetrics)

    def test_increment_is_noop(self):
        assert NullMetrics().increment("anything") is None
