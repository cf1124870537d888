"""Tests for logging configuration (utils/logging.py)."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from grocno.exceptions import ValidationError
from grocno.utils.logging import JsonFormatter, _json_formatter, configure_logging, get_logger


def _record(msg: str = "hello", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="grocno.test",
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
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonFormatter:
    def test_core_fields(self) -> None:
        payload = json.loads(_json_formatter(_record()))
        assert payload == {"level": "INFO", "logger": "grocno.test", "message": "hello"}

    def test_promotes_extra_fields(self) -> None:
        payload = json.loads(_json_formatter(_record(product_id=10, key="price")))
        assert payload["product_id"] == 10
        assert payload["key"] == "price"

    def test_non_json_values_are_stringified(self) -> None:
        payload = json.loads(JsonFormatter().format(_record(path=object())))
        assert isinstance(payload["path"], str)

    def test_includes_exception_text(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        payload = json.loads(_json_formatter(record))
        assert "ValueError: boom" in payload["exc_info"]


class TestConfigureLogging:
    @pytest.mark.usefixtures("restore_root_logging")
    def test_sets_root_level(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.usefixtures("restore_root_logging")
    def test_json_handler(self) -> None:
        configure_logging(level="INFO", json_logs=True)
        formatters = [h.formatter for h in logging.getLogger().handlers]
        assert any(isinstance(f, JsonFormatter) for f in formatters)

    @pytest.mark.usefixtures("restore_root_logging")
    def test_rejects_unknown_level(self) -> None:
        root = logging.getLogger()
        handlers = root.handlers[:]
        with pytest.raises(ValidationError, match="LOUD") as exc_info:
            configure_logging(level="loud")
        assert "WARNING" in (exc_info.value.hint or "")
        assert root.handlers == handlers

    def test_get_logger_returns_named_logger(self) -> None:
        assert get_logger("grocno.core").name == "grocno.core"
