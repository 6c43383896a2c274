"""Turns source text into a list of tokens."""

from __future__ import annotations

from permc.token import Literal, Token, TokenType

_KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FN,
    "on": TokenType.ON,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "print": TokenType.PRINT,
    "reads": TokenType.READS,
    "writes": TokenType.WRITES,
    "read": TokenType.READ,
    "write": TokenType.WRITE,
    "return": TokenType.RETURN,
    "peak": TokenType.PEAK,
    "clone": TokenType.CLONE,
    "Int": TokenType.TYPE_INT,
    "Int8": TokenType.TYPE_INT8,
    "Int16": TokenType.TYPE_INT16,
    "Int32": TokenType.TYPE_INT32,
    "Int64": TokenType.TYPE_INT64,
    "UInt": TokenType.TYPE_UINT,
    "UInt8": TokenType.TYPE_UINT8,
    "UInt16": TokenType.TYPE_UINT16,
    "UInt32": TokenType.TYPE_UINT32,
    "UInt64": TokenType.TYPE_UINT64,
    "Float": TokenType.TYPE_FLOAT,
    "Float32": TokenType.TYPE_FLOAT32,
    "Float64": TokenType.TYPE_FLOAT64,
    "Bool": TokenType.TYPE_BOOL,
    "String": TokenType.TYPE_STRING,
}

_SINGLE: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
}

# Operator start -> (plain kind, [(following char, combined kind), ...]) tried in order.
_COMPOUND: dict[str, tuple[TokenType, tuple[tuple[str, TokenType], ...]]] = {
    "+": (TokenType.PLUS, (("=", TokenType.PLUS_EQUAL),)),
    "-": (TokenType.MINUS, ((">", TokenType.ARROW), ("=", TokenType.MINUS_EQUAL))),
    "*": (TokenType.STAR, (("=", TokenType.STAR_EQUAL),)),
    "/": (TokenType.SLASH, (("=", TokenType.SLASH_EQUAL),)),
    "=": (TokenType.EQUAL, (("=", TokenType.EQUAL_EQUAL),)),
    "!": (TokenType.BANG, (("=", TokenType.BANG_EQUAL),)),
    "<": (TokenType.LESS, (("=", TokenType.LESS_EQUAL),)),
    ">": (TokenType.GREATER, (("=", TokenType.GREATER_EQUAL),)),
}

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_END = "\0"


def _is_identifier_start(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalpha())


def _is_identifier_part(c: str) -> bool:
    return c == "_" or c.isalnum()


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class Lexer:
    """Scanner over a single source text.

    Characters the language does not know become ``ERROR`` tokens rather
    than stopping the scan.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._reset()

    def _reset(self) -> None:
        self._start = 0
        self._current = 0
        self._line = 1
        self._column = 1
        self._start_column = 1

    @property
    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        index = self._current + offset
        return self._source[index] if index < len(self._source) else _END

    def _advance(self) -> str:
        if self._at_end:
            return _END
        c = self._source[self._current]
        self._current += 1
        self._column += 1
        if c == "\n":
            self._line += 1
            self._column = 1
        return c

    def _match(self, expected: str) -> bool:
        if self._at_end or self._peek() != expected:
            return False
        self._current += 1
        self._column += 1
        return True

    def _text(self) -> str:
        return self._source[self._start : self._current]

    def _make(self, kind: TokenType, literal: Literal = None) -> Token:
        return Token(kind, self._text(), self._line, self._start_column, literal)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the list always ends with one ``EOF`` token."""
        self._reset()
        tokens: list[Token] = []
        while not self._at_end:
            self._start = self._current
            self._start_column = self._column
            tokens.append(self._scan_token())
        if not tokens or tokens[-1].token_type is not TokenType.EOF:
            tokens.append(Token(TokenType.EOF, "", self._line, self._start_column))
        return tokens

    def _scan_token(self) -> Token:
        self._skip_whitespace()
        self._start = self._current
        self._start_column = self._column

        if self._at_end:
            return Token(TokenType.EOF, "", self._line, self._start_column)

        c = self._advance()
        if c in _SINGLE:
            return self._make(_SINGLE[c])
        if c in _COMPOUND:
            plain, combined = _COMPOUND[c]
            for follower, kind in combined:
                if self._match(follower):
                    return self._make(kind)
            return self._make(plain)
        if _is_digit(c):
            return self._scan_number()
        if _is_identifier_start(c):
            return self._scan_identifier()
        return self._make(TokenType.ERROR, f"Unexpected character: {c}")

    def _scan_identifier(self) -> Token:
        while _is_identifier_part(self._peek()):
            self._advance()
        return self._make(_KEYWORDS.get(self._text(), TokenType.IDENTIFIER))

    def _scan_number(self) -> Token:
        while _is_digit(self._peek()):
            self._advance()
        text = self._text()
        value = int(text)
        if not _INT64_MIN <= value <= _INT64_MAX:
            return self._make(TokenType.ERROR, f"Invalid number: {text}")
        return self._make(TokenType.NUMBER, value)

    def _skip_whitespace(self) -> None:
        while True:
            c = self._peek()
            if c in " \r\t\n" and c != _END:
                self._advance()
            elif c == "/" and self._peek(1) == "/":
                while self._peek() != "\n" and not self._at_end:
                    self._advance()
            else:
                return


def tokenize(source: str) -> list[Token]:
    """Scan ``source`` and return its tokens, ending with ``EOF``."""
    return Lexer(source).scan_tokens()