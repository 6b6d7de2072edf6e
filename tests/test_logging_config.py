"""Tests for the key/value log formatting helpers."""

import logging

from string_service.app.core.logging_config import FieldsAdapter, KeyValueFormatter, with_fields


def _record(fields=None):
    record = logging.LogRecord("svc", logging.INFO, __file__, 1, "method call", None, None)
    if fields is not None:
        record.fields = fields
    return record


def test_formatter_appends_fields():
    formatter = KeyValueFormatter("%(message)s")

    line = formatter.format(_record({"method": "count", "input": "hello world", "output": 11, "err": None}))

    assert line == 'method call method=count input="hello world" output=11 err=null'


def test_formatter_quotes_empty_and_formats_floats():
    formatter = KeyValueFormatter("%(message)s")

    line = formatter.format(_record({"input": "", "took": 0.5}))

    assert line == 'method call input="" took=0.500000'


def test_formatter_without_fields():
    assert KeyValueFormatter("%(message)s").format(_record()) == "method call"


def test_with_fields_merges_bindings(caplog):
    base = logging.getLogger("tests.fields")
    caplog.set_level(logging.INFO, logger=base.name)

    logger = with_fields(with_fields(base, method="count"), route="/count")
    logger.info("hi", extra={"fields": {"route": "override"}})

    assert isinstance(logger, FieldsAdapter)
    assert logger.logger is base
    assert caplog.records[0].fields == {"method": "count", "route": "override"}
