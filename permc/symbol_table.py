"""Scoped symbol table that resolves names and checks permissions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Mapping, Optional, Sequence

from permc.ast import Assignment, Binary, Call, Declaration, Expression, Statement, Variable
from permc.resolution import (
    DuplicateSymbol,
    ImmutableAssignment,
    PermissionViolation,
    ReadAccessViolation,
    ResolutionError,
    UndefinedSymbol,
)
from permc.span import Location, Span
from permc.token import Permission

_NO_LOCATION = Location(0, 0, None)
_ORIGIN = Span.point(0, 0)


class SymbolKind(Enum):
    """What a symbol names."""

    VARIABLE = auto()
    PARAMETER = auto()
    FUNCTION = auto()


@dataclass(frozen=True)
class Symbol:
    """A named variable, parameter or function and where it was declared."""

    name: str
    typ: Any
    kind: SymbolKind
    span: Span


@dataclass
class _Scope:
    symbols: dict[str, Symbol] = field(default_factory=dict)
    parent: Optional[int] = None


def _span_of(location: Location) -> Span:
    return location.span if location.span is not None else _ORIGIN


class SymbolTable:
    """Nested lexical scopes plus the resolution errors found so far."""

    def __init__(self) -> None:
        self._scopes: list[_Scope] = [_Scope()]
        self._current = 0
        self._errors: list[ResolutionError] = []

    @property
    def current_scope(self) -> int:
        """Index of the scope new symbols are defined in."""
        return self._current

    @property
    def errors(self) -> tuple[ResolutionError, ...]:
        """Errors recorded so far, in the order they were found."""
        return tuple(self._errors)

    def begin_scope(self) -> int:
        """Open a scope nested in the current one and return its index."""
        self._scopes.append(_Scope(parent=self._current))
        self._current = len(self._scopes) - 1
        return self._current

    def end_scope(self) -> None:
        """Return to the parent scope; the global scope is never left."""
        parent = self._scopes[self._current].parent
        if parent is not None:
            self._current = parent

    def define(self, symbol: Symbol) -> None:
        """Add ``symbol`` to the current scope, recording a duplicate as an error."""
        symbols = self._scopes[self._current].symbols
        existing = symbols.get(symbol.name)
        if existing is not None:
            self._errors.append(DuplicateSymbol(symbol.name, existing.span, symbol.span))
            return
        symbols[symbol.name] = symbol

    def resolve(self, name: str, span: Span) -> Optional[Symbol]:
        """Find ``name`` in the current scope or its ancestors.

        An unknown name is recorded as an error and ``None`` returned.
        """
        index: Optional[int] = self._current
        while index is not None:
            scope = self._scopes[index]
            symbol = scope.symbols.get(name)
            if symbol is not None:
                return symbol
            index = scope.parent
        self._errors.append(UndefinedSymbol(name, span))
        return None

    def check_assignment(self, name: str, span: Span) -> None:
        """Raise unless ``name`` exists and carries a write permission."""
        symbol = self.resolve(name, span)
        if symbol is None:
            raise UndefinedSymbol(name, span)
        permissions = symbol.typ.permissions
        if Permission.WRITE in permissions or Permission.WRITES in permissions:
            return
        raise ImmutableAssignment(name, span, symbol.span)

    def check_permission_compatibility(
        self, source_name: str, target_permissions: Sequence[Permission], span: Span
    ) -> None:
        """Raise if the variable ``source_name`` may not initialise a target with these permissions."""
        symbol = self.resolve(source_name, span)
        if symbol is None:
            raise UndefinedSymbol(source_name, span)

        source_permissions = symbol.typ.permissions
        if Permission.WRITE in source_permissions and Permission.WRITE in target_permissions:
            raise PermissionViolation(
                name=source_name,
                required="writes",
                provided="write",
                span=span,
                declaration_span=symbol.span,
            )

        target_reads = Permission.READS in target_permissions
        target_read = Permission.READ in target_permissions
        if (target_reads or target_read) and Permission.READS in source_permissions:
            raise ReadAccessViolation(
                name=source_name,
                span=span,
                declaration_span=symbol.span,
                target_permission="reads" if target_reads else "read",
            )

    def process_statement(self, stmt: Statement, token_locations: Mapping[int, Location]) -> None:
        """Define and resolve the names a statement introduces and uses."""
        location = token_locations.get(self._current, _NO_LOCATION)
        if isinstance(stmt, Declaration):
            if isinstance(stmt.initializer, Variable):
                try:
                    self.check_permission_compatibility(
                        stmt.initializer.name, stmt.typ.permissions, _span_of(location)
                    )
                except ResolutionError as err:
                    self.add_error(err)
            self.define(Symbol(stmt.name, stmt.typ, SymbolKind.VARIABLE, _span_of(location)))
            if stmt.initializer is not None:
                self.process_expression(stmt.initializer, token_locations)
        elif isinstance(stmt, Assignment):
            try:
                self.check_assignment(stmt.target, _span_of(location))
            except ResolutionError:
                pass
            self.process_expression(stmt.value, token_locations)

    def process_expression(self, expr: Expression, token_locations: Mapping[int, Location]) -> None:
        """Resolve every variable an expression refers to."""
        match expr:
            case Variable(name=name):
                location = token_locations.get(self._current, _NO_LOCATION)
                self.resolve(name, _span_of(location))
            case Binary(left=left, right=right):
                self.process_expression(left, token_locations)
                self.process_expression(right, token_locations)
            case Call(arguments=arguments):
                for argument in arguments:
                    self.process_expression(argument, token_locations)

    def add_error(self, error: ResolutionError) -> None:
        """Record ``error``."""
        self._errors.append(error)