import logging
import time
from datetime import datetime

import pytest

from prefixed_formatter.context import FormatterContext


@pytest.fixture
def fixed_time():
    return datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def terminal_context():
    return FormatterContext(base_time=time.monotonic(), is_terminal=True)


@pytest.fixture
def pipe_context():
    return FormatterContext(base_time=time.monotonic(), is_terminal=False)


@pytest.fixture
def make_record():
    def _make(msg="Test message", level=logging.INFO, **ctx):
        record = logging.LogRecord(
            name="test_logger",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=None,
        )
        for key, value in ctx.items():
            setattr(record, f"ctx_{key}", value)
        return record

    return _make


@pytest.fixture(autouse=True)
def reset_defaults(monkeypatch):
    monkeypatch.setattr("prefixed_formatter.config._default_config", None)
    monkeypatch.setattr("prefixed_formatter.context._default_context", None)
