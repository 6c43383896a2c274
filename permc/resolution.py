"""Errors found while resolving names and permissions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from permc.span import Span


def _place(span: Span, prefix: str = " at") -> str:
    if span.source_file is not None:
        return f"{prefix} {span.source_file}:{span.start_line}:{span.start_column}"
    return f"{prefix} line {span.start_line}:{span.start_column}"


class ResolutionError(Exception):
    """Base of all name and permission resolution errors."""


@dataclass
class DuplicateSymbol(ResolutionError):
    """A name defined twice in the same scope."""

    name: str
    first: Span
    second: Span

    def __str__(self) -> str:
        first = (
            f" in {self.first.source_file}:{self.first.start_line}:{self.first.start_column}"
            if self.first.source_file is not None
            else _place(self.first)
        )
        second = (
            f" in {self.second.source_file}:{self.second.start_line}:{self.second.start_column}"
            if self.second.source_file is not None
            else _place(self.second)
        )
        return (
            f"Error: Variable '{self.name}' already defined{first}, but redeclared{second}"
        )


@dataclass
class UndefinedSymbol(ResolutionError):
    """A name used where no definition is visible."""

    name: str
    span: Span

    def __str__(self) -> str:
        span = self.span
        if span.source_file is not None:
            where = f" ({span.source_file}:{span.start_line}:{span.start_column})"
        else:
            where = f" (line {span.start_line}:{span.start_column})"
        return f"Error: Variable '{self.name}' not defined in this scope{where}"


@dataclass
class ImmutableAssignment(ResolutionError):
    """An assignment to a variable declared without write permission."""

    name: str
    span: Span
    declaration_span: Optional[Span] = None

    def __str__(self) -> str:
        text = f"Error: Cannot assign to immutable variable '{self.name}'{_place(self.span)}"
        if self.declaration_span is not None:
            text += (
                f"\nNote: '{self.name}' was declared as immutable"
                f"{_place(self.declaration_span)}"
            )
        return text


@dataclass
class PermissionViolation(ResolutionError):
    """A use that needs a permission the variable does not have."""

    name: str
    required: str
    provided: str
    span: Span
    declaration_span: Optional[Span] = None

    def __str__(self) -> str:
        text = (
            f"Error: Variable '{self.name}' requires permission '{self.required}' "
            f"but has '{self.provided}'{_place(self.span)}"
        )
        if self.declaration_span is not None:
            text += (
                f"\nNote: '{self.name}' was declared with permission '{self.provided}'"
                f"{_place(self.declaration_span)}"
            )
        return text


@dataclass
class ReadAccessViolation(ResolutionError):
    """A ``reads`` variable assigned directly, without ``clone`` or ``peak``."""

    name: str
    span: Span
    declaration_span: Optional[Span] = None
    target_permission: str = "reads"

    def __str__(self) -> str:
        text = (
            f"error[E0005]: cannot directly assign reads variable '{self.name}' "
            f"to {self.target_permission} variable{_place(self.span)}"
        )
        if self.declaration_span is not None:
            text += (
                f"\nNote: '{self.name}' was declared with 'reads' permission"
                f"{_place(self.declaration_span)}"
            )
        return text


@dataclass
class TypeMismatch(ResolutionError):
    """A value whose type differs from the one expected."""

    expected: str
    found: str
    span: Span
    context: str

    def __str__(self) -> str:
        return (
            f"error[E0006]: type mismatch {self.context}\n"
            f"--> {self.span.start_line}:{self.span.start_column}\n"
            "   |\n"
            f"   | expected `{self.expected}`, found `{self.found}`\n"
            "   |\n"
            "help: ensure that all return values match the function's return type"
        )