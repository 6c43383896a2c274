# permc

`permc` provides the front-end building blocks for a small language whose
variables carry access permissions (`read`, `write`, `reads`, `writes`):

- a lexer that turns source text into tokens,
- syntax tree node classes for expressions and statements,
- a scoped symbol table that checks assignments and copies against
  permissions,
- a simple type checker for function return values,
- diagnostics that render errors with a snippet of the source and a caret.

## Installation

```
pip install .
```

Install with the `test` extra to get the test runner:

```
pip install ".[test]"
```

## The language in brief

```
reads write counter: Int = 10
read r = peak counter
reads copy = clone counter

fn increment(reads amount: Int) -> Int {
    counter = counter + amount
    return counter
}
```

- `write` and `writes` make a variable assignable. Copying from a `write`
  variable into another `write` variable is reported as a permission
  violation; `writes` is the permission meant for sharing.
- A `reads` variable cannot be copied directly into a `read` or `reads`
  variable; `clone` makes a deep copy and `peak` a read-only reference.
- `//` starts a comment that runs to the end of the line.

## Usage

### Tokens (`permc.lexer`, `permc.token`)

```python
from permc.lexer import Lexer, tokenize
from permc.token import TokenType

tokens = tokenize("reads x: Int = 42")
assert tokens[0].token_type is TokenType.READS
assert tokens[5].literal == 42
assert tokens[-1].token_type is TokenType.EOF

for token in Lexer("fn add() -> Bool { return 1 }").scan_tokens():
    print(token.token_type, token.lexeme, token.line, token.column)
```

Keywords, permission words and the type names `Int`, `Int8` … `UInt64`,
`Float`, `Float32`, `Float64`, `Bool` and `String` get their own token
types; other names are `IDENTIFIER`. A `NUMBER` token carries its integer
value in `literal`. Characters the lexer does not know, and numbers outside
the signed 64-bit range, become `ERROR` tokens whose `literal` is the
message; scanning carries on after them. The list always ends with a single
`EOF` token.

Each `Token` has a `length` and a `span()` covering its lexeme.
`permc.token.Permission` lists the four permissions; `str()` of one gives
its keyword.

### Spans and source snippets (`permc.span`, `permc.source_manager`)

```python
from permc.span import Span, combine_spans
from permc.source_manager import SourceManager

manager = SourceManager()
manager.set_default_source("reads x: Int = 5\nx = 10\n")
print(manager.get_line(2))                     # "x = 10\n"
print(manager.get_snippet(Span.point(2, 1)))   # the line, then a caret
```

`Span` is immutable: `with_file` returns a copy tied to a file name, and
`Span.combine` / `combine_spans` return a span covering both inputs
(`combine_spans` also accepts anything with a `span()` method, such as a
token). `Location` pairs a line and column with an optional span.

`get_line` returns `None` for a line that does not exist; `get_snippet`
returns `<invalid line number>` in that case. `add_source` stores further
named texts in `manager.sources`; lines and snippets always come from the
default source.

### Syntax tree (`permc.ast`)

Expressions are `Number`, `Variable`, `Binary`, `Clone`, `Peak` and `Call`;
statements are `Declaration`, `Assignment`, `ExpressionStatement`, `Print`,
`Block`, `Return`, `Actor`, `Function` and `AtomicBlock`. All are frozen
dataclasses, and sequences given to them are stored as tuples.

A declared type is any object with a `base_type` and a `permissions`
sequence. `accept(node, visitor)` calls `visit_expression` or
`visit_statement` on a `Visitor` subclass.

### Scopes and permission checks (`permc.symbol_table`)

```python
from types import SimpleNamespace

from permc.resolution import ReadAccessViolation
from permc.span import Span
from permc.symbol_table import Symbol, SymbolKind, SymbolTable
from permc.token import Permission

counter_type = SimpleNamespace(base_type="Int", permissions=(Permission.READS, Permission.WRITE))

table = SymbolTable()
table.define(Symbol("counter", counter_type, SymbolKind.VARIABLE, Span.point(1, 1)))
table.check_assignment("counter", Span.point(2, 1))   # has write: passes

try:
    table.check_permission_compatibility("counter", [Permission.READ], Span.point(3, 1))
except ReadAccessViolation as err:
    print(err)
```

`define` records a `DuplicateSymbol` in `table.errors` instead of
replacing a symbol; `resolve` records an `UndefinedSymbol` and returns
`None`. `check_assignment` and `check_permission_compatibility` raise their
error. `begin_scope` / `end_scope` nest and leave scopes.

`process_statement` and `process_expression` walk `Declaration` and
`Assignment` statements and the variables used in expressions, collecting
errors in `table.errors`. Their `token_locations` argument maps a scope
index to the `Location` used for errors found in that scope.

The error classes live in `permc.resolution`: `DuplicateSymbol`,
`UndefinedSymbol`, `ImmutableAssignment`, `PermissionViolation`,
`ReadAccessViolation` and `TypeMismatch`, all subclasses of
`ResolutionError`, each with a one-line (or short) `str()`.

### Types (`permc.type_checker`)

`TypeChecker.infer_expression_type` returns `"Bool"` for comparisons and
`"Int"` for numbers, variables, calls and other binary operators;
`clone` and `peak` keep the type of what they wrap.
`TypeChecker.check_function` returns a `TypeMismatch` for every top-level
`Return` in a `Function` whose inferred type differs from
`str(return_type.base_type)`.

### Diagnostics (`permc.diagnostics`)

```python
from permc.diagnostics import DiagnosticReporter

reporter = DiagnosticReporter(manager)
for error in table.errors:
    print(reporter.report_error(error))
```

A report gives the error code (`E0001`–`E0006`), points at line and column
with a caret under the source line, and ends with a hint on how to fix it.

### Compiler errors (`permc.error`)

`ParseError` (with the constructors `unexpected_token`,
`invalid_expression` and `syntax_error`, and `with_code`),
`TypeCheckError` and `CompileIOError` are exceptions deriving from
`CompileError`.

## What is not included

There is no parser: syntax trees are built from the node classes directly,
and the symbol table works on those nodes. There is also no interpreter,
code generation or command-line program; the package is a library only.

## Running the tests

```
pytest
```