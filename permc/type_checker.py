"""Infers expression types and checks function return values."""

from __future__ import annotations

from permc.ast import Binary, Call, Clone, Expression, Function, Number, Peak, Return, Statement, Variable
from permc.resolution import TypeMismatch
from permc.span import Span
from permc.token import TokenType

_INT = "Int"
_BOOL = "Bool"

_ARITHMETIC = frozenset({TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH})
_COMPARISON = frozenset(
    {
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.BANG_EQUAL,
    }
)


class TypeChecker:
    """Checks types against a symbol table without changing it.

    Base types are compared by name, so ``Int`` and ``Bool`` are the
    names inferred for expressions.
    """

    def __init__(self, symbol_table: object) -> None:
        self.symbol_table = symbol_table

    def check_function(self, function: Statement, span: Span) -> list[TypeMismatch]:
        """Return a mismatch for each top-level return that differs from the declared type."""
        if not isinstance(function, Function) or function.return_type is None:
            return []

        expected = str(function.return_type.base_type)
        errors: list[TypeMismatch] = []
        for stmt in function.body:
            if not isinstance(stmt, Return):
                continue
            found = self.infer_expression_type(stmt.expression)
            if found != expected:
                errors.append(
                    TypeMismatch(
                        expected=expected,
                        found=found,
                        span=span,
                        context=f"in return value of function '{function.name}'",
                    )
                )
        return errors

    def infer_expression_type(self, expr: Expression) -> str:
        """Return the name of the type ``expr`` evaluates to."""
        match expr:
            case Number() | Variable() | Call():
                return _INT
            case Binary(operator=op):
                if op in _COMPARISON:
                    return _BOOL
                return _INT
            case Clone(expression=inner) | Peak(expression=inner):
                return self.infer_expression_type(inner)
        raise TypeError(f"not an expression: {expr!r}")