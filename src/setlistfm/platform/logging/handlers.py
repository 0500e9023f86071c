"""Rich console handler for request dispatch events.

Where: platform/logging/handlers.py
What: Render ``dispatch_event`` log records as compact one-line summaries.
Why: Keep request tracing readable without teaching call sites about Rich.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from typing_extensions import override


class RequestRichHandler(RichHandler):
    """Rich handler that styles dispatch lifecycle records."""

    _DISPATCH_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "dispatch.built": ("🔗", "cyan"),
        "dispatch.success": ("✅", "green"),
        "dispatch.invalid_endpoint": ("⛔", "red"),
        "dispatch.transport_error": ("❌", "red"),
        "dispatch.decode_error": ("⚠️", "yellow"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_dispatch_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured dispatch events with dedicated styling."""

        event = getattr(record, "dispatch_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._DISPATCH_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        method = getattr(record, "method", None)
        url = getattr(record, "url", None)
        if method and url:
            _ = body.append(f"{method} ")
            _ = body.append(str(url), style=Style(color="white"))
        else:
            _ = body.append(message)

        details: list[str] = []
        status = getattr(record, "status", None)
        if isinstance(status, int):
            details.append(f"status={status}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for dispatch events."""

        dispatch_text = self._render_dispatch_message(record, message)
        if dispatch_text is not None:
            return dispatch_text

        return super().render_message(record, message)


__all__ = ["RequestRichHandler"]
