"""Source regions and locations used by diagnostics."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Protocol, Union


@dataclass(frozen=True)
class Span:
    """A region of source code, with 1-based lines and columns."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int
    source_file: str | None = None

    @classmethod
    def point(cls, line: int, column: int) -> Span:
        """Return a span that covers a single position."""
        return cls(line, column, line, column)

    def with_file(self, file: str) -> Span:
        """Return a copy of this span attached to ``file``."""
        return dataclasses.replace(self, source_file=file)

    def combine(self, other: Span) -> Span:
        """Return the smallest span that covers both spans.

        The source file is taken from ``self``.
        """
        start_line = min(self.start_line, other.start_line)
        if self.start_line < other.start_line:
            start_column = self.start_column
        elif self.start_line > other.start_line:
            start_column = other.start_column
        else:
            start_column = min(self.start_column, other.start_column)

        end_line = max(self.end_line, other.end_line)
        if self.end_line > other.end_line:
            end_column = self.end_column
        elif self.end_line < other.end_line:
            end_column = other.end_column
        else:
            end_column = max(self.end_column, other.end_column)

        return Span(start_line, start_column, end_line, end_column, self.source_file)


@dataclass(frozen=True)
class Location:
    """A line and column, optionally with the span they came from."""

    line: int
    column: int
    span: Span | None = None

    @classmethod
    def from_span(cls, span: Span) -> Location:
        """Return the location at the start of ``span``."""
        return cls(span.start_line, span.start_column, span)


class HasSpan(Protocol):
    """Anything that can report the source region it occupies."""

    def span(self) -> Span: ...


SpanLike = Union[Span, HasSpan]


def _span_of(item: SpanLike) -> Span:
    return item if isinstance(item, Span) else item.span()


def combine_spans(first: SpanLike, second: SpanLike) -> Span:
    """Combine the spans of two located items (spans or objects with ``span()``)."""
    return _span_of(first).combine(_span_of(second))