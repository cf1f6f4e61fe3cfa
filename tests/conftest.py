import pytest


class RecordingMetricsHook:
    """Collects every metric call as (kind, name, value, labels)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, float, dict[str, str]]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.calls.append(("latency", name, value_ms, labels or {}))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.calls.append(("counter", name, value, labels or {}))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.calls.append(("gauge", name, value, labels or {}))

    def named(self, name: str) -> list[tuple[str, str, float, dict[str, str]]]:
        return [call for call in self.calls if call[1] == name]


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
