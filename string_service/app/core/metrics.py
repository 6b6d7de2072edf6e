"""
Metrics sink backed by ``prometheus_client``.

Counters and histograms are declared with a fixed label schema and
addressed with flat key/value pairs, in the order the caller likes::

    request_count.with_labels("method", "count", "error", "false").add(1)
    request_latency.with_labels("method", "count", "error", "false").observe(0.002)
    count_result.observe(5)

Passing an odd number of arguments, an unknown key, a duplicate key or
omitting a declared key raises :class:`LabelSchemaError`.  Value
updates are thread‑safe; ``prometheus_client`` guards each child with
its own lock.

A :class:`MetricsSink` is created once at startup and injected into the
instrumenting service decorator.  It owns a ``CollectorRegistry`` so
that several applications (e.g. in tests) can live in one process.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import prometheus_client
from prometheus_client import CollectorRegistry

from .errors import LabelSchemaError


COUNT_RESULT_BUCKETS = (0, 1, 2, 5, 10, 20, 50, 100, 200, 500, 1000, float("inf"))


class _Metric:
    """Common label handling for the wrapped Prometheus metric."""

    _metric_class = None

    def __init__(
        self,
        name: str,
        documentation: str,
        label_names: Sequence[str] = (),
        *,
        namespace: str = "",
        subsystem: str = "",
        registry: Optional[CollectorRegistry] = prometheus_client.REGISTRY,
        **kwargs,
    ) -> None:
        self.label_names: Tuple[str, ...] = tuple(label_names)
        self._metric = self._metric_class(
            name,
            documentation,
            labelnames=self.label_names,
            namespace=namespace,
            subsystem=subsystem,
            registry=registry,
            **kwargs,
        )

    def _child(self, label_values: Sequence[str]):
        if len(label_values) % 2:
            raise LabelSchemaError(
                f"label values must come in key/value pairs, got {len(label_values)} arguments"
            )
        labels = {}
        for key, value in zip(label_values[::2], label_values[1::2]):
            if key not in self.label_names:
                raise LabelSchemaError(f"unknown label {key!r}; expected {self.label_names}")
            if key in labels:
                raise LabelSchemaError(f"label {key!r} given twice")
            labels[key] = str(value)
        missing = set(self.label_names) - set(labels)
        if missing:
            raise LabelSchemaError(f"missing labels {sorted(missing)}")
        if not labels:
            return self._metric
        return self._metric.labels(**labels)


class Counter(_Metric):
    """A monotonically increasing counter."""

    _metric_class = prometheus_client.Counter

    def with_labels(self, *label_values: str) -> "_CounterChild":
        return _CounterChild(self._child(label_values))

    def add(self, delta: float) -> None:
        """Increment the unlabeled counter."""
        self.with_labels().add(delta)


class _CounterChild:
    def __init__(self, child) -> None:
        self._child = child

    def add(self, delta: float) -> None:
        if delta < 0:
            raise ValueError("Counter can only increase")
        self._child.inc(delta)


class Histogram(_Metric):
    """A distribution of observed values."""

    _metric_class = prometheus_client.Histogram

    def with_labels(self, *label_values: str) -> "_HistogramChild":
        return _HistogramChild(self._child(label_values))

    def observe(self, value: float) -> None:
        """Record into the unlabeled histogram."""
        self.with_labels().observe(value)


class _HistogramChild:
    def __init__(self, child) -> None:
        self._child = child

    def observe(self, value: float) -> None:
        self._child.observe(value)


@dataclass
class MetricsSink:
    """The metrics consulted by the instrumenting service decorator."""

    registry: CollectorRegistry
    request_count: Counter
    request_latency: Histogram
    count_result: Histogram

    @classmethod
    def create(
        cls,
        namespace: str = "my_group",
        subsystem: str = "string_service",
        registry: Optional[CollectorRegistry] = None,
    ) -> "MetricsSink":
        """Declare all service metrics in ``registry`` (a fresh one by default)."""
        if registry is None:
            registry = CollectorRegistry()
        field_keys = ["method", "error"]
        return cls(
            registry=registry,
            request_count=Counter(
                "request_count",
                "Number of requests received.",
                field_keys,
                namespace=namespace,
                subsystem=subsystem,
                registry=registry,
            ),
            request_latency=Histogram(
                "request_latency_seconds",
                "Total duration of requests in seconds.",
                field_keys,
                namespace=namespace,
                subsystem=subsystem,
                registry=registry,
            ),
            count_result=Histogram(
                "count_result",
                "The result of each count method.",
                namespace=namespace,
                subsystem=subsystem,
                registry=registry,
                buckets=COUNT_RESULT_BUCKETS,
            ),
        )

    @classmethod
    def from_settings(cls, settings, registry: Optional[CollectorRegistry] = None) -> "MetricsSink":
        return cls.create(settings.metrics_namespace, settings.metrics_subsystem, registry)

    def render(self) -> bytes:
        """Return the registry in the Prometheus text exposition format."""
        return prometheus_client.generate_latest(self.registry)
