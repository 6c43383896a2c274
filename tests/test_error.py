import pytest

from permc.error import CompileError, CompileIOError, ParseError, TypeCheckError
from permc.resolution import UndefinedSymbol
from permc.span import Span


@pytest.mark.parametrize(
    "factory, code",
    [
        (ParseError.unexpected_token, "E0001"),
        (ParseError.invalid_expression, "E0002"),
        (ParseError.syntax_error, "E0003"),
    ],
)
def test_constructors_set_codes(factory, code):
    err = factory(Span.point(1, 1), "message")
    assert err.error_code == code
    assert str(err).startswith(f"error[{code}]: message")


def test_parse_error_with_code_and_line():
    err = ParseError.syntax_error(Span.point(2, 5), "missing brace")
    assert str(err) == "error[E0003]: missing brace at line 2:5"


def test_parse_error_without_code_in_file():
    err = ParseError(Span.point(1, 2).with_file("main.pc"), "oops")
    assert err.error_code is None
    assert str(err) == "error: oops at main.pc:1:2"


def test_with_code_returns_copy():
    original = ParseError(Span.point(1, 1), "m")
    coded = original.with_code("E0042")
    assert coded.error_code == "E0042"
    assert original.error_code is None
    assert coded.span == original.span and coded.message == original.message


def test_parse_error_is_caught_as_compile_error():
    err = ParseError.unexpected_token(Span.point(3, 3), "unexpected")
    assert err.error_code == "E0001"
    assert str(err) == "error[E0001]: unexpected at line 3:3"
    with pytest.raises(CompileError) as info:
        raise err
    assert info.value is err


def test_type_check_error_text():
    err = TypeCheckError("bad", Span.point(4, 1))
    assert str(err) == "type error: bad at line 4:1"


def test_type_check_error_in_file_names_file():
    err = TypeCheckError("bad", Span.point(4, 1).with_file("lib.pc"))
    assert str(err).endswith(" at lib.pc:4:1")


def test_io_error_text():
    message = "cannot open input"
    assert str(CompileIOError(message)) == "io error: " + message


def test_wrapped_resolution_error_reads_as_itself():
    inner = UndefinedSymbol("z", Span.point(2, 3))
    err = CompileError(inner)
    assert str(err) == str(inner)
    assert err.args[0] is inner