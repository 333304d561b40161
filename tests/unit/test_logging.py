from __future__ import annotations

import logging

from trendiwear_api.common.logging import (
    ConsoleLogFormatter,
    bind_request_context,
    clear_request_context,
    log_context,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="trendiwear_api.tests",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="cart.add.success",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_log_context_skips_unset_identifiers() -> None:
    assert log_context(user_id="u-1", quantity=2) == {"user_id": "u-1", "quantity": 2}


def test_formatter_renders_extras_and_correlation_id() -> None:
    bind_request_context("cid-123")
    try:
        line = ConsoleLogFormatter().format(_record(user_id="u-1", merged=False, note=None))
    finally:
        clear_request_context()

    assert "[cid=cid-123]" in line
    assert "cart.add.success" in line
    assert "user_id=u-1" in line
    assert "merged=False" in line
    assert "note=null" in line


def test_formatter_without_request_context_uses_dash() -> None:
    line = ConsoleLogFormatter().format(_record())

    assert "[cid=-]" in line
