"""
Prometheus metrics for Auth operations.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator

from prometheus_client import Counter, Gauge, Histogram

from shared.logging import get_logger
from shared.metrics import MetricsCollector

from ..operations import OperationKind
from ..timeouts.registry import TimeoutRegistry


_DESCRIPTIONS = {
    OperationKind.SET_TIMEOUT: "установки таймаута",
    OperationKind.REGISTER: "регистрации",
    OperationKind.LOGIN: "авторизации",
    OperationKind.LOGOUT: "выхода из системы",
    OperationKind.LOGGED_USER: "получения текущего пользователя",
    OperationKind.IS_LOGGED: "проверки статуса авторизации",
    OperationKind.LIST_CLIENTS: "получения списка пользователей",
}


class AuthMetrics:
    """Per-operation call counters, duration histograms and delay gauges.

    Metrics live on the service collector's registry, so they are exported
    by the same ``/metrics`` endpoint as the HTTP metrics. Delay gauges are
    callbacks into the TimeoutRegistry and report its value at collection
    time. Recording never raises: a failure is logged and dropped.
    """

    def __init__(self, collector: MetricsCollector, timeouts: TimeoutRegistry, namespace: str = "bankapp"):
        self.logger = get_logger("auth.metrics")
        self._collector = collector
        self._timeouts = timeouts
        self._prefix = f"{namespace}_auth"
        self._calls: Dict[OperationKind, Counter] = {}
        self._durations: Dict[OperationKind, Histogram] = {}
        self._gauges: Dict[OperationKind, Gauge] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        registry = self._collector.registry

        for op in OperationKind:
            description = _DESCRIPTIONS[op]
            self._calls[op] = self._collector.register(
                self.calls_name(op),
                Counter(
                    self._name(op, "calls"),
                    f"Количество вызовов {description}",
                    registry=registry
                )
            )
            self._durations[op] = self._collector.register(
                self.duration_name(op),
                Histogram(
                    self._name(op, "duration_seconds"),
                    f"Время выполнения запроса {description}",
                    registry=registry
                )
            )

        for op in OperationKind.delayed():
            gauge = Gauge(
                self.gauge_name(op),
                f"Текущий таймаут для {op.value} (в секундах)",
                registry=registry
            )
            gauge.set_function(lambda op=op: self._timeouts.get(op) / 1000.0)
            self._gauges[op] = self._collector.register(self.gauge_name(op), gauge)

    def _name(self, op: OperationKind, suffix: str) -> str:
        return f"{self._prefix}_{op.metric_stem}_{suffix}"

    def calls_name(self, op: OperationKind) -> str:
        return self._name(op, "calls_total")

    def duration_name(self, op: OperationKind) -> str:
        return self._name(op, "duration_seconds")

    def gauge_name(self, op: OperationKind) -> str:
        return f"{self._prefix}_timeout_{op.metric_stem}_seconds"

    def increment_calls(self, op: OperationKind):
        try:
            self._calls[op].inc()
        except Exception as e:
            self.logger.warning("Failed to increment call counter", operation=op.value, error=str(e))

    def record_duration(self, op: OperationKind, seconds: float):
        try:
            self._durations[op].observe(seconds)
        except Exception as e:
            self.logger.warning("Failed to record duration", operation=op.value, error=str(e))

    @contextmanager
    def track(self, op: OperationKind) -> Iterator[None]:
        """Count one call of ``op`` and time the enclosed block, whatever its outcome."""
        self.increment_calls(op)
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.record_duration(op, time.perf_counter() - start_time)

    def calls(self, op: OperationKind) -> float:
        return self._collector.sample_value(self.calls_name(op)) or 0.0

    def duration_count(self, op: OperationKind) -> float:
        return self._collector.sample_value(f"{self.duration_name(op)}_count") or 0.0

    def duration_sum(self, op: OperationKind) -> float:
        return self._collector.sample_value(f"{self.duration_name(op)}_sum") or 0.0

    def gauge_value(self, op: OperationKind) -> float:
        """Delay gauge for ``op`` in seconds, as a scrape would see it."""
        return self._collector.sample_value(self.gauge_name(op)) or 0.0
