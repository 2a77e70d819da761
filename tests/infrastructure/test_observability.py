"""Structured Logging — JSON formatter surfaces store extras."""

import json
import logging

from storefront.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "storefront.core.store", logging.INFO, __file__, 1,
        "Order %s created", ("1",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_entity_extras():
    out = json.loads(JSONFormatter().format(
        _record(entity="Order", entity_id="1", operation="create"),
    ))
    assert out["message"] == "Order 1 created"
    assert out["level"] == "INFO"
    assert out["entity"] == "Order"
    assert out["entity_id"] == "1"
    assert out["operation"] == "create"


def test_json_formatter_omits_absent_extras():
    out = json.loads(JSONFormatter().format(_record()))
    assert "entity" not in out
    assert "error_code" not in out


def test_setup_logging_installs_handler():
    previous = logging.root.level
    handler = setup_logging("warning", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous)
