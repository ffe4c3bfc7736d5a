"""Rich console handler for name events.

Where: platform/logging/handlers.py
What: Render dotted name events with an icon and highlight masking characters.
Why: Escape sequences are unreadable in plain log output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

from maskedname.config.settings import ESCAPE_CHARACTER


class NameRichHandler(RichHandler):
    """Rich handler that highlights delimiter and escape characters."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "name.parse": ("🔎", "cyan"),
        "name.mask.rejected": ("⛔", "red"),
        "name.index.rejected": ("⛔", "red"),
        "name.argument.rejected": ("⛔", "red"),
        "name.invariant.violated": ("❌", "bold red"),
    }
    _LEVEL_STYLES: ClassVar[dict[int, str]] = {
        logging.DEBUG: "dim",
        logging.INFO: "white",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bold red",
    }
    _ESCAPE_STYLE: ClassVar[str] = "magenta"
    _DELIMITER_STYLE: ClassVar[str] = "bold cyan"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _style_name(self, name: str, delimiter: str | None) -> Text:
        """Style a masked name string.

        Escape sequences are rendered as one styled unit so an escaped
        delimiter is not mistaken for a separator.

        Args:
            name: Masked name or component text.
            delimiter: Delimiter to highlight, if known.

        Returns:
            Text: Styled text.
        """
        text = Text()
        index = 0
        while index < len(name):
            char = name[index]
            if char == ESCAPE_CHARACTER:
                _ = text.append(name[index : index + 2], style=self._ESCAPE_STYLE)
                index += 2
                continue
            if delimiter is not None and char == delimiter:
                _ = text.append(char, style=self._DELIMITER_STYLE)
            else:
                _ = text.append(char)
            index += 1
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render a log message, decorating dotted name events.

        Records may carry ``event``, ``name_text`` and ``delimiter`` extras.
        """
        event = getattr(record, "event", None)
        name_text = getattr(record, "name_text", None)
        delimiter = getattr(record, "delimiter", None)

        level_style = self._LEVEL_STYLES.get(record.levelno, "white")
        if event not in self._EVENT_STYLES:
            return Text(message, style=level_style)

        icon, style = self._EVENT_STYLES[event]
        text = Text()
        _ = text.append(f"{icon} ", style=style)
        _ = text.append(message, style=level_style)
        if isinstance(name_text, str):
            _ = text.append(" ")
            _ = text.append_text(self._style_name(name_text, delimiter))
        return text


__all__ = ["NameRichHandler"]
