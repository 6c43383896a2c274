"""Renders resolution errors as multi-line reports with source snippets."""

from __future__ import annotations

from permc.resolution import (
    DuplicateSymbol,
    ImmutableAssignment,
    PermissionViolation,
    ReadAccessViolation,
    ResolutionError,
    TypeMismatch,
    UndefinedSymbol,
)
from permc.source_manager import SourceManager
from permc.span import Span


class DiagnosticReporter:
    """Formats errors against the default source of a source manager."""

    def __init__(self, source_manager: SourceManager) -> None:
        self.source_manager = source_manager

    def _located(self, span: Span) -> str:
        snippet = self.source_manager.get_snippet(span)
        return f"--> {span.start_line}:{span.start_column}\n{snippet}\n"

    def _section(self, span: Span, note: str) -> str:
        return f"{self._located(span)}{note}\n\n"

    def report_error(self, error: ResolutionError) -> str:
        """Return the full report for ``error``."""
        match error:
            case DuplicateSymbol(name=name, first=first, second=second):
                return (
                    f"error[E0001]: duplicate definition of `{name}`\n"
                    + self._section(first, " | first definition here")
                    + self._section(second, " | redefinition here")
                    + "note: each variable must be defined only once per scope"
                )
            case UndefinedSymbol(name=name, span=span):
                return (
                    f"error[E0002]: undefined variable `{name}`\n"
                    + self._section(span, " | variable not found in this scope")
                    + "help: consider declaring the variable before using it"
                )
            case ImmutableAssignment(name=name, span=span, declaration_span=decl):
                out = f"error[E0003]: cannot assign to immutable variable `{name}`\n"
                out += self._section(span, " | cannot assign to immutable variable")
                if decl is not None:
                    out += self._section(decl, " | variable declared here without write permission")
                return out + "help: add 'write' or 'writes' permission to make the variable mutable"
            case PermissionViolation(
                name=name, required=required, provided=provided, span=span, declaration_span=decl
            ):
                out = f"error[E0004]: permission violation for variable `{name}`\n"
                out += self._section(span, f" | requires permission '{required}' but found '{provided}'")
                if decl is not None:
                    out += self._section(decl, f" | variable declared with '{provided}' permission")
                return out + f"help: update the variable declaration to include '{required}' permission"
            case ReadAccessViolation(
                name=name, span=span, declaration_span=decl, target_permission=target
            ):
                out = (
                    f"error[E0005]: cannot directly assign reads variable `{name}` "
                    f"to {target} variable\n"
                )
                out += self._section(span, " | cannot directly assign reads variable without clone or peak")
                if decl is not None:
                    out += self._section(decl, " | variable declared with 'reads' permission")
                return (
                    out
                    + "help: you have two options to fix this issue:\n\n"
                    + "Option 1: use 'clone' to create a deep copy of the variable\n"
                    + f"  reads c = clone {name}\n\n"
                    + "Option 2: use 'peak' with 'read' permission to create a read-only reference\n"
                    + f"  read c = peak {name}\n"
                )
            case TypeMismatch(expected=expected, found=found, span=span, context=context):
                out = f"error[E0006]: type mismatch {context}\n"
                out += self._located(span)
                out += f"   | expected type `{expected}`, found `{found}`\n\n"
                if "return" in context:
                    return out + "help: ensure the expression's type matches the function's return type"
                return out + "help: ensure the types match with what is expected"
        raise TypeError(f"not a resolution error: {error!r}")