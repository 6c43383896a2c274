"""Holds source texts and renders snippets for diagnostics."""

from __future__ import annotations

from permc.span import Span


class SourceManager:
    """Keeps named sources and a default source indexed by line."""

    def __init__(self) -> None:
        self.sources: dict[str, str] = {}
        self._default_source = ""
        self._line_starts: list[int] = [0]

    def add_source(self, name: str, content: str) -> None:
        """Register ``content`` under ``name``."""
        self.sources[name] = content

    def set_default_source(self, content: str) -> None:
        """Make ``content`` the source that lines and snippets are taken from."""
        self._default_source = content
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, c in enumerate(content) if c == "\n")

    def get_line(self, line_number: int) -> str | None:
        """Return a 1-based line of the default source, newline included."""
        if line_number < 1 or line_number > len(self._line_starts):
            return None
        start = self._line_starts[line_number - 1]
        if line_number < len(self._line_starts):
            end = self._line_starts[line_number]
        else:
            end = len(self._default_source)
        return self._default_source[start:end]

    def get_snippet(self, span: Span) -> str:
        """Render the line of ``span`` with a caret under its start column."""
        line = self.get_line(span.start_line)
        if line is None:
            return "<invalid line number>"

        indent_size = len(line) - len(line.lstrip())
        padding = max(span.start_column - indent_size, 0) + 4
        return f"    {line.rstrip().lstrip()}\n{' ' * padding}^"