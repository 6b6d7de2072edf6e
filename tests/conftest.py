"""Shared fixtures for the String Service tests."""

import logging

import pytest
from prometheus_client import CollectorRegistry

from string_service.app.core.metrics import MetricsSink
from string_service.app.services.string_service import BasicStringService


REQUEST_COUNT = "my_group_string_service_request_count_total"
REQUEST_LATENCY_COUNT = "my_group_string_service_request_latency_seconds_count"
COUNT_RESULT_SUM = "my_group_string_service_count_result_sum"
COUNT_RESULT_COUNT = "my_group_string_service_count_result_count"


@pytest.fixture()
def registry():
    return CollectorRegistry()


@pytest.fixture()
def metrics(registry):
    return MetricsSink.create(registry=registry)


@pytest.fixture()
def base_service():
    return BasicStringService()


@pytest.fixture()
def test_logger():
    return logging.getLogger("tests.string_service")


def sample(registry, name, **labels):
    """Return a sample value from ``registry``, treating absent samples as 0."""
    value = registry.get_sample_value(name, labels)
    return 0.0 if value is None else value


class BrokenSinkHandler(logging.Handler):
    """Handler standing in for an unavailable log destination."""

    def emit(self, record):
        raise OSError("log sink unavailable")


@pytest.fixture()
def broken_sink_logger():
    logger = logging.getLogger("tests.string_service.broken_sink")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    handler = BrokenSinkHandler()
    logger.addHandler(handler)
    yield logger
    logger.removeHandler(handler)
