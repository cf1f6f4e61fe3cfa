import logging
from typing import Protocol


class MetricsHook(Protocol):
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

    def record_gauge(
        self,
        name: str,
        value: float,
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

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """
    Writes every metric as a single log record.

    Handy for local runs and for tracing why a document produced fewer
    questions than expected, without wiring a metrics backend.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._emit("latency", name, f"{value_ms:.3f}ms", labels)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._emit("counter", name, f"+{value}", labels)

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self._emit("gauge", name, str(value), labels)

    def _emit(
        self, kind: str, name: str, value: str, labels: dict[str, str] | None
    ) -> None:
        rendered = ",".join(f"{k}={v}" for k, v in sorted((labels or {}).items()))
        self.logger.log(self.level, "metric %s %s=%s {%s}", kind, name, value, rendered)
