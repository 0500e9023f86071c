"""Tests for the ``RequestRichHandler`` dispatch rendering and logger setup."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from rich.text import Text

from setlistfm.platform.logging import LOGGER_NAME, RequestRichHandler, reset_logger, setup_logger


def _make_handler() -> RequestRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return RequestRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with dispatch extras for testing."""

    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.WARNING,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_logger() -> Iterator[None]:
    yield
    _ = reset_logger()


def test_render_message_summarizes_failed_request() -> None:
    handler = _make_handler()
    record = _build_record(
        dispatch_event="dispatch.transport_error",
        method="GET",
        url="https://api.setlist.fm/rest/1.0/artist/x",
        status=404,
    )

    rendered = handler.render_message(record, "ignored")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "GET https://api.setlist.fm/rest/1.0/artist/x" in plain
    assert "status=404" in plain
    assert "ignored" not in plain


def test_render_message_appends_error_message() -> None:
    handler = _make_handler()
    record = _build_record(
        dispatch_event="dispatch.decode_error",
        method="GET",
        url="https://api.setlist.fm/rest/1.0/search/countries",
        status=200,
        error_message="1 validation error for CountriesResult",
    )

    plain = handler.render_message(record, "").plain  # type: ignore[union-attr]

    assert "status=200, 1 validation error for CountriesResult" in plain


def test_render_message_without_url_uses_message() -> None:
    handler = _make_handler()
    record = _build_record(dispatch_event="dispatch.invalid_endpoint", error_message="Provided endpoint is not valid")

    rendered = handler.render_message(record, "Rejected endpoint 'bad path'")
    assert isinstance(rendered, Text)

    assert "Rejected endpoint 'bad path'" in rendered.plain
    assert "Provided endpoint is not valid" in rendered.plain


def test_render_message_falls_back_for_plain_records() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record("Configuration loaded"), "Configuration loaded")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration loaded"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path, restore_logger: None) -> None:
    _ = restore_logger
    log_file = tmp_path / "nested" / "setlistfm.log"

    configured = setup_logger(log_file=log_file)
    configured.debug("hello from the test suite")
    for handler in configured.handlers:
        handler.flush()

    file_handlers = [h for h in configured.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert "hello from the test suite" in log_file.read_text(encoding="utf-8")


def test_setup_logger_owns_console_output(restore_logger: None) -> None:
    _ = restore_logger

    configured = setup_logger()

    assert configured.name == LOGGER_NAME
    assert configured.propagate is False
    assert [type(h) for h in configured.handlers] == [RequestRichHandler]
    assert configured.handlers[0].level == logging.WARNING


def test_library_logger_defers_to_host_configuration(restore_logger: None) -> None:
    _ = restore_logger

    configured = reset_logger()

    assert configured.propagate is True
    assert [type(h) for h in configured.handlers] == [logging.NullHandler]


def test_file_only_setup_keeps_propagating(tmp_path: Path, restore_logger: None) -> None:
    _ = restore_logger

    configured = setup_logger(log_file=tmp_path / "setlistfm.log", console=False)

    assert configured.propagate is True
    assert [type(h) for h in configured.handlers] == [logging.handlers.RotatingFileHandler]


def test_dispatch_warnings_reach_host_handlers(
    caplog: pytest.LogCaptureFixture, restore_logger: None
) -> None:
    _ = restore_logger
    _ = reset_logger()

    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        logging.getLogger(LOGGER_NAME).warning(
            "GET %s failed with code %s",
            "https://api.setlist.fm/rest/1.0/search/artists",
            404,
            extra={"dispatch_event": "dispatch.transport_error"},
        )

    assert [record.getMessage() for record in caplog.records] == [
        "GET https://api.setlist.fm/rest/1.0/search/artists failed with code 404"
    ]
