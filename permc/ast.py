"""Syntax tree nodes for expressions and statements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Optional, Protocol, Sequence, Tuple, TypeVar, Union

from permc.token import Permission, TokenType

T = TypeVar("T")


class _PermissionedType(Protocol):
    """A declared type: a base type together with its permissions."""

    base_type: object
    permissions: Sequence[Permission]


class _ExpressionNode:
    """Common base of all expression nodes."""


class _StatementNode:
    """Common base of all statement nodes."""


def _freeze(node: object, *names: str) -> None:
    for name in names:
        object.__setattr__(node, name, tuple(getattr(node, name)))


# Expressions


@dataclass(frozen=True)
class Number(_ExpressionNode):
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class Variable(_ExpressionNode):
    """A reference to a named variable."""

    name: str


@dataclass(frozen=True)
class Binary(_ExpressionNode):
    """A binary operation such as ``a + b``."""

    left: Expression
    operator: TokenType
    right: Expression


@dataclass(frozen=True)
class Clone(_ExpressionNode):
    """A deep copy of the value of an expression."""

    expression: Expression


@dataclass(frozen=True)
class Peak(_ExpressionNode):
    """A read-only view of the value of an expression."""

    expression: Expression


@dataclass(frozen=True)
class Call(_ExpressionNode):
    """A call of a named function."""

    function: str
    arguments: Tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "arguments")


Expression = Union[Number, Variable, Binary, Clone, Peak, Call]


# Statements


@dataclass(frozen=True)
class Declaration(_StatementNode):
    """A variable declaration with an optional initializer."""

    name: str
    typ: _PermissionedType
    initializer: Optional[Expression] = None


@dataclass(frozen=True)
class Assignment(_StatementNode):
    """An assignment to an existing variable."""

    target: str
    value: Expression
    target_type: _PermissionedType


@dataclass(frozen=True)
class ExpressionStatement(_StatementNode):
    """An expression evaluated for its effect."""

    expression: Expression


@dataclass(frozen=True)
class Print(_StatementNode):
    """Output of the value of an expression."""

    expression: Expression


@dataclass(frozen=True)
class Block(_StatementNode):
    """A sequence of statements."""

    statements: Tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")


@dataclass(frozen=True)
class Return(_StatementNode):
    """A return from the enclosing function."""

    expression: Expression


@dataclass(frozen=True)
class Actor(_StatementNode):
    """An actor with its state, methods and behaviours."""

    name: str
    state: Tuple[Statement, ...] = ()
    methods: Tuple[Statement, ...] = ()
    behaviors: Tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "state", "methods", "behaviors")


@dataclass(frozen=True)
class Function(_StatementNode):
    """A function or behaviour definition."""

    name: str
    params: Tuple[Tuple[str, _PermissionedType], ...] = ()
    body: Tuple[Statement, ...] = ()
    return_type: Optional[_PermissionedType] = None
    is_behavior: bool = field(default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(tuple(p) for p in self.params))
        _freeze(self, "body")


@dataclass(frozen=True)
class AtomicBlock(_StatementNode):
    """A sequence of statements executed atomically."""

    statements: Tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")


Statement = Union[
    Declaration,
    Assignment,
    ExpressionStatement,
    Print,
    Block,
    Return,
    Actor,
    Function,
    AtomicBlock,
]


class Visitor(ABC, Generic[T]):
    """Walks syntax tree nodes, producing a value of type ``T`` per node."""

    @abstractmethod
    def visit_expression(self, expr: Expression) -> T:
        """Handle an expression node."""

    @abstractmethod
    def visit_statement(self, stmt: Statement) -> T:
        """Handle a statement node."""


def accept(node: Union[Expression, Statement], visitor: Visitor[T]) -> T:
    """Dispatch ``node`` to the matching method of ``visitor``."""
    if isinstance(node, _ExpressionNode):
        return visitor.visit_expression(node)  # type: ignore[arg-type]
    if isinstance(node, _StatementNode):
        return visitor.visit_statement(node)  # type: ignore[arg-type]
    raise TypeError(f"not a syntax tree node: {node!r}")