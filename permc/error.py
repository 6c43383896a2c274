"""Errors reported by the compiler front end."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from permc.span import Span


def _place(span: Span) -> str:
    if span.source_file is not None:
        return f" at {span.source_file}:{span.start_line}:{span.start_column}"
    return f" at line {span.start_line}:{span.start_column}"


class CompileError(Exception):
    """Base of all compiler errors.

    Raised directly with a resolution error as its argument, it reads as
    that error.
    """


@dataclass
class ParseError(CompileError):
    """A syntax error at a place in the source."""

    span: Span
    message: str
    error_code: Optional[str] = None

    def __str__(self) -> str:
        if self.error_code is not None:
            head = f"error[{self.error_code}]: {self.message}"
        else:
            head = f"error: {self.message}"
        return head + _place(self.span)

    def with_code(self, code: str) -> ParseError:
        """Return a copy carrying the error code ``code``."""
        return dataclasses.replace(self, error_code=code)

    @classmethod
    def unexpected_token(cls, span: Span, message: str) -> ParseError:
        """A token that does not fit the grammar here."""
        return cls(span, message, "E0001")

    @classmethod
    def invalid_expression(cls, span: Span, message: str) -> ParseError:
        """An expression that cannot be formed."""
        return cls(span, message, "E0002")

    @classmethod
    def syntax_error(cls, span: Span, message: str) -> ParseError:
        """Any other syntax error."""
        return cls(span, message, "E0003")


@dataclass
class TypeCheckError(CompileError):
    """A type error at a place in the source."""

    message: str
    span: Span

    def __str__(self) -> str:
        return f"type error: {self.message}{_place(self.span)}"


@dataclass
class CompileIOError(CompileError):
    """A failure to read or write a file."""

    message: str

    def __str__(self) -> str:
        return f"io error: {self.message}"