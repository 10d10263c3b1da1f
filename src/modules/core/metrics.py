"""Pluggable metrics sink.

Services receive an ``IMetrics`` through their constructor and only ever
call ``increment``.  ``InMemoryMetrics`` keeps process-local counters
that the ``/metrics`` endpoint exposes as JSON; ``NullMetrics`` is the
default when no sink is wired in.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict

import structlog

logger = structlog.get_logger(__name__)


class IMetrics(ABC):
    """Counter sink contract."""

    @abstractmethod
    def increment(self, name: str, amount: int = 1) -> None:
        """Add ``amount`` to the counter called ``name``."""


class NullMetrics(IMetrics):
    """Sink that discards every increment."""

    def increment(self, name: str, amount: int = 1) -> None:
        return None


class InMemoryMetrics(IMetrics):
    """Thread-safe in-process counters."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, name: str, amount: int = 1) -> None:
        with self._lock:
            value = self._counters.get(name, 0) + amount
            self._counters[name] = value
        logger.debug("metrics.increment", metric=name, value=value)

    def get(self, name: str) -> int:
        with self._lock:
            return self._counters.get(name, 0)

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of every counter."""
        with self._lock:
            return dict(self._counters)

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()


# Process-wide sink (singleton)

metrics = InMemoryMetrics()
