from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from payments_query.infrastructure.logging import (
    JsonFormatter,
    _json_formatter,
    configure_logging,
)


def _record(msg: str = "hello", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_renders_core_fields() -> None:
    payload = json.loads(_json_formatter(_record()))

    assert payload == {"level": "INFO", "logger": "test.logger", "message": "hello"}


def test_json_formatter_promotes_extra_fields() -> None:
    payload = json.loads(_json_formatter(_record(query="for_given_month", result_size=3)))

    assert payload["query"] == "for_given_month"
    assert payload["result_size"] == 3


def test_json_formatter_stringifies_unserializable_values() -> None:
    payload = json.loads(_json_formatter(_record(path=object())))

    assert payload["path"].startswith("<object object")


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "test.logger", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_sets_level_and_formatter(restore_root_logger: None) -> None:
    configure_logging(level="debug", json_logs=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_logging_without_force_keeps_existing_setup(
    restore_root_logger: None,
) -> None:
    configure_logging(level="WARNING")
    handler = logging.getLogger().handlers[0]

    configure_logging(level="DEBUG", json_logs=True, force=False)

    assert logging.getLogger().handlers == [handler]
    assert logging.getLogger().level == logging.WARNING
