"""Log formatting and handler setup."""

import json
import logging
import sys

import pytest

from formservice.infrastructure.observability import (
    ContextTextFormatter, JSONFormatter, setup_logging,
)


def _record(msg="Form created", exc_info=None, **extra):
    record = logging.LogRecord(
        "formservice.test", logging.INFO, __file__, 1, msg, None, exc_info,
    )
    record.__dict__.update(extra)
    return record


@pytest.fixture
def restore_root():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    noisy = {name: logging.getLogger(name).level for name in ("sqlalchemy.engine", "uvicorn.access")}
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
    for name, lvl in noisy.items():
        logging.getLogger(name).setLevel(lvl)


def test_json_carries_context_fields():
    line = JSONFormatter().format(_record(tenant_id="t1", form_id="f1", path="/api/forms"))
    log = json.loads(line)
    assert log["message"] == "Form created"
    assert log["level"] == "INFO"
    assert log["tenant_id"] == "t1"
    assert log["form_id"] == "f1"
    assert log["path"] == "/api/forms"
    assert "error_code" not in log


def test_json_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record(exc_info=sys.exc_info())
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


def test_text_appends_context_as_key_value():
    line = ContextTextFormatter().format(_record(tenant_id="t1", error_code="NOT_FOUND"))
    assert "INFO formservice.test: Form created" in line
    assert line.endswith("[tenant_id=t1 error_code=NOT_FOUND]")


def test_text_without_context_has_no_suffix():
    line = ContextTextFormatter().format(_record())
    assert line.endswith("Form created")


def test_setup_is_idempotent(restore_root):
    setup_logging("INFO", "json")
    handler = setup_logging("DEBUG", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "formservice"]
    assert ours == [handler]
    assert isinstance(handler.formatter, ContextTextFormatter)
    assert logging.root.level == logging.DEBUG


def test_setup_quiets_sql_and_access_logs(restore_root):
    setup_logging("INFO", "json")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING

    setup_logging("DEBUG", "json")
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG
