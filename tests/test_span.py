import pytest

from permc.span import Location, Span, combine_spans
from permc.token import Token, TokenType


def test_point_covers_single_position():
    span = Span.point(3, 7)
    assert span == Span(3, 7, 3, 7)
    assert span.source_file is None


def test_with_file_returns_copy_with_file():
    span = Span(1, 2, 3, 4)
    named = span.with_file("main.pc")
    assert named.source_file == "main.pc"
    assert span.source_file is None
    assert (named.start_line, named.start_column, named.end_line, named.end_column) == (1, 2, 3, 4)


def test_combine_same_line_takes_extremes():
    combined = Span(2, 5, 2, 8).combine(Span(2, 3, 2, 6))
    assert combined == Span(2, 3, 2, 8)


def test_combine_different_lines_uses_outer_columns():
    first = Span(1, 10, 1, 12)
    second = Span(3, 2, 3, 4)
    assert first.combine(second) == Span(1, 10, 3, 4)
    assert second.combine(first) == Span(1, 10, 3, 4)


def test_combine_keeps_file_of_receiver():
    first = Span.point(1, 1).with_file("a.pc")
    second = Span.point(2, 2).with_file("b.pc")
    assert first.combine(second).source_file == "a.pc"
    assert second.combine(first).source_file == "b.pc"


@pytest.mark.parametrize(
    "first, second",
    [
        (Span(1, 1, 1, 5), Span(1, 3, 1, 9)),
        (Span(4, 2, 6, 1), Span(5, 8, 5, 9)),
        (Span(2, 7, 2, 7), Span(2, 7, 2, 7)),
    ],
)
def test_combine_contains_both(first, second):
    combined = first.combine(second)
    for part in (first, second):
        assert (combined.start_line, combined.start_column) <= (part.start_line, part.start_column)
        assert (combined.end_line, combined.end_column) >= (part.end_line, part.end_column)


def test_location_from_span():
    span = Span(4, 9, 5, 2)
    location = Location.from_span(span)
    assert location.line == 4
    assert location.column == 9
    assert location.span == span


def test_location_without_span_defaults_to_none():
    assert Location(1, 1).span is None


def test_combine_spans_of_tokens():
    left = Token(TokenType.IDENTIFIER, "counter", 2, 5)
    right = Token(TokenType.NUMBER, "10", 2, 15, 10)
    combined = combine_spans(left, right)
    assert combined.start_column == left.column
    assert combined.end_column == right.span().end_column
    assert combined.start_line == combined.end_line == 2


def test_combine_spans_accepts_spans():
    first = Span(1, 4, 1, 6)
    second = Span(2, 1, 2, 3)
    assert combine_spans(first, second) == first.combine(second)