"""Lexer, syntax tree, symbol table, type checks and diagnostics for a small permission-typed language."""

__version__ = "0.18.1"