"""Tests for the metrics sink."""

import pytest

from string_service.app.core.errors import LabelSchemaError
from string_service.app.core.metrics import Counter, Histogram, MetricsSink

from .conftest import COUNT_RESULT_COUNT, REQUEST_COUNT, sample


def test_labels_accepted_in_any_order(metrics, registry):
    metrics.request_count.with_labels("method", "count", "error", "false").add(1)
    metrics.request_count.with_labels("error", "false", "method", "count").add(2)

    assert sample(registry, REQUEST_COUNT, method="count", error="false") == 3


@pytest.mark.parametrize(
    "label_values",
    [
        ("method", "count", "error"),
        ("method", "count", "status", "false"),
        ("method", "count"),
        ("method", "count", "method", "upper"),
        (),
    ],
)
def test_label_schema_violations(metrics, label_values):
    with pytest.raises(LabelSchemaError):
        metrics.request_count.with_labels(*label_values)


def test_unlabeled_histogram_rejects_labels(metrics):
    with pytest.raises(LabelSchemaError):
        metrics.count_result.with_labels("method", "count")


def test_unlabeled_observe_on_labeled_histogram_fails(metrics):
    with pytest.raises(LabelSchemaError):
        metrics.request_latency.observe(0.1)


def test_counter_cannot_decrease(metrics):
    with pytest.raises(ValueError):
        metrics.request_count.with_labels("method", "count", "error", "false").add(-1)


def test_unlabeled_metrics(registry):
    counter = Counter("things", "Things seen.", registry=registry)
    histogram = Histogram("sizes", "Sizes seen.", registry=registry)

    counter.add(2)
    histogram.observe(3)

    assert sample(registry, "things_total") == 2
    assert sample(registry, "sizes_sum") == 3


def test_render_exposes_metric_names(metrics):
    metrics.count_result.observe(5)

    body = metrics.render().decode()

    assert "my_group_string_service_request_count" in body
    assert COUNT_RESULT_COUNT in body


def test_custom_namespace_and_subsystem(registry):
    sink = MetricsSink.create(namespace="acme", subsystem="strings", registry=registry)
    sink.request_count.with_labels("method", "count", "error", "false").add(1)

    assert sample(registry, "acme_strings_request_count_total", method="count", error="false") == 1


def test_sinks_with_own_registries_coexist():
    first = MetricsSink.create()
    second = MetricsSink.create()

    assert first.registry is not second.registry
