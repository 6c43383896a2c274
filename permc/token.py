"""Tokens produced by the lexer and the permission keywords they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from permc.span import Span


class TokenType(Enum):
    """Kinds of token the language knows."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    COLON = auto()
    SEMICOLON = auto()

    # One or two character tokens
    PLUS = auto()
    PLUS_EQUAL = auto()
    MINUS = auto()
    MINUS_EQUAL = auto()
    ARROW = auto()
    STAR = auto()
    STAR_EQUAL = auto()
    SLASH = auto()
    SLASH_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    BANG = auto()
    BANG_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()

    # Permission keywords
    READ = auto()
    WRITE = auto()
    READS = auto()
    WRITES = auto()

    # Permission operations
    PEAK = auto()
    CLONE = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    FN = auto()
    ON = auto()
    ACTOR = auto()
    RETURN = auto()
    PRINT = auto()

    # Types
    TYPE_INT = auto()
    TYPE_INT8 = auto()
    TYPE_INT16 = auto()
    TYPE_INT32 = auto()
    TYPE_INT64 = auto()
    TYPE_UINT = auto()
    TYPE_UINT8 = auto()
    TYPE_UINT16 = auto()
    TYPE_UINT32 = auto()
    TYPE_UINT64 = auto()
    TYPE_FLOAT = auto()
    TYPE_FLOAT32 = auto()
    TYPE_FLOAT64 = auto()
    TYPE_BOOL = auto()
    TYPE_STRING = auto()
    TYPE_UNIT = auto()

    # Special
    ERROR = auto()
    EOF = auto()


class Permission(str, Enum):
    """Access permissions a declaration can carry."""

    READ = "read"
    WRITE = "write"
    READS = "reads"
    WRITES = "writes"

    def __str__(self) -> str:
        return self.value


Literal = Union[int, str, None]


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind and 1-based position.

    ``literal`` holds the parsed value of a number, or the message of an
    error token.
    """

    token_type: TokenType
    lexeme: str
    line: int
    column: int
    literal: Literal = None

    @property
    def length(self) -> int:
        """Number of characters in the lexeme."""
        return len(self.lexeme)

    def span(self) -> Span:
        """Return the source region the token occupies on its line."""
        return Span(self.line, self.column, self.line, self.column + self.length - 1)