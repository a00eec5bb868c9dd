# src/novelizer/observability/base.py

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MetricsHook(Protocol):
    """Sink for pipeline metrics. Implementations must never raise."""

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric to the log at DEBUG level.

    Used by the CLI so a `--log-level debug` run shows timings and token usage
    without a metrics backend.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.debug("metric %s=%.1fms labels=%s", name, value_ms, labels or {})

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        logger.debug("metric %s+=%d labels=%s", name, value, labels or {})
