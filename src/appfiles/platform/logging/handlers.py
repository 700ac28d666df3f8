"""Rich console handler for file operation events.

Where: platform/logging/handlers.py
What: Render ``fs.*`` log records with icons, colors and compact paths.
Why: Keep console output readable when paths are long and deeply nested.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FileEventRichHandler(RichHandler):
    """Rich handler that understands the structured ``fs_event`` extras."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "fs.write": ("📝", "green", "Wrote"),
        "fs.read": ("📖", "blue", "Read"),
        "fs.delete": ("🗑️", "red", "Deleted"),
        "fs.rename": ("✏️", "magenta", "Renamed"),
        "fs.move": ("📦", "magenta", "Moved"),
        "fs.copy": ("📄", "cyan", "Copied"),
        "fs.list": ("📂", "blue", "Listed"),
        "fs.mkdir": ("📁", "green", "Created directory"),
        "fs.error": ("⛔", "red", "Failed"),
    }
    _TWO_PATH_EVENTS: ClassVar[frozenset[str]] = frozenset({"fs.rename", "fs.move", "fs.copy"})
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format ``path`` relative to ``base`` with the leading segments elided."""

        pure_path = self._to_pure_path(path)
        if base:
            base_path = self._to_pure_path(base)
            if pure_path != base_path and pure_path.is_relative_to(base_path):
                pure_path = pure_path.relative_to(base_path)

        windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if windows else "/"
        anchor = pure_path.anchor
        parts = [part for part in pure_path.parts if part and part != anchor]

        elided = len(parts) > self._PATH_SEGMENT_LIMIT
        if elided:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]

        prefix = ""
        if anchor:
            prefix = anchor.rstrip("\\/") + separator if windows else separator
        if elided:
            prefix += "…" + separator

        rendered = prefix + separator.join(parts)
        return self._style_path(rendered or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            color = "magenta" if char in {separator, "/", "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_file_event(self, record: logging.LogRecord) -> Text | None:
        """Render a record carrying an ``fs_event`` extra, or return None."""

        event = getattr(record, "fs_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", event))
        base = getattr(record, "base_path", None)
        base = str(base) if base else None

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))
        _ = body.append(f"{label} ")

        path = getattr(record, "path", None)
        if path:
            _ = body.append_text(self._format_path(str(path), base=base))

        target_path = getattr(record, "target_path", None)
        if event in self._TWO_PATH_EVENTS and target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path), base=base))

        details: list[str] = []
        size = getattr(record, "size", None)
        if isinstance(size, int):
            details.append(f"{size} bytes")
        entries = getattr(record, "entries", None)
        if isinstance(entries, int):
            details.append(f"{entries} entries")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = self._render_file_event(record)
        if rendered is not None:
            return rendered
        return super().render_message(record, message)


__all__ = ["FileEventRichHandler"]
