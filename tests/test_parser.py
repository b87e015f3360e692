import string

import pytest
from hypothesis import given, strategies as st

from urlisp import INT_MAX, INT_MIN
from urlisp.errors import UrLispLexError, UrLispSyntaxError
from urlisp.reader.parser import Parser, parse_one
from urlisp.types.lisp_list import LispList, NIL
from urlisp.types.symbol import Symbol

S = Symbol
L = LispList.of


@pytest.mark.parametrize(
    "source, expected",
    [
        ("foo", S("foo")),
        ("123", 123),
        ("-45", -45),
        ("()", NIL),
        ("'foo", L(S("quote"), S("foo"))),
        ("''a", L(S("quote"), L(S("quote"), S("a")))),
        ("'(a b)", L(S("quote"), L(S("a"), S("b")))),
        ("(a 'b)", L(S("a"), L(S("quote"), S("b")))),
        ("(a (b c) 12)", L(S("a"), L(S("b"), S("c")), 12)),
        ("((a) ())", L(L(S("a")), NIL)),
        ("'()", L(S("quote"), NIL)),
        ("(quote foo)", L(S("quote"), S("foo"))),
    ]
)
def test_parser(source, expected):
    expr, _ = parse_one(source)
    assert expr == expected


def test_quote_desugars_to_two_element_list():
    expr, _ = parse_one("'foo")
    assert isinstance(expr, LispList)
    assert len(expr) == 2
    assert expr[0] == Symbol("quote")
    assert expr[1] == Symbol("foo")


@pytest.mark.parametrize(
    "source, consumed",
    [
        ("(plus 1 2) trailing junk", "(plus 1 2)"),
        ("  foo bar", "  foo"),
        ("'(a b)(c)", "'(a b)"),
        ("42", "42"),
        ("(a) %", "(a)"),
    ]
)
def test_consumed_text(source, consumed):
    _, text = parse_one(source)
    assert text == consumed


def test_parser_reads_one_expression_per_call():
    parser = Parser("a (b) 3")
    assert parser.parse_expr() == Symbol("a")
    assert parser.consumed == "a"
    assert parser.parse_expr() == L(S("b"))
    assert parser.parse_expr() == 3
    assert parser.consumed == "a (b) 3"


@pytest.mark.parametrize(
    "source, fragment",
    [
        ("(a b", "interrupted by end of input"),
        ("", "interrupted by end of input"),
        ("'", "interrupted by end of input"),
        (")", "Unbalanced ')'"),
        ("(a ')", "has nothing to quote"),
        ("9223372036854775808", "out of range"),
    ]
)
def test_parse_errors(source, fragment):
    with pytest.raises(UrLispSyntaxError) as excinfo:
        parse_one(source)
    assert fragment in str(excinfo.value)
    assert str(excinfo.value).startswith("Parse Error: ")


def test_lex_errors_propagate_as_parse_errors():
    with pytest.raises(UrLispLexError) as excinfo:
        parse_one("(a 1b)")
    err = excinfo.value
    assert isinstance(err, UrLispSyntaxError)
    assert err.char == "b"
    assert str(err) == "Parse Error: Lex error at character 4: Bad input 'b' while lexing integer"


def test_integer_range_bounds():
    assert parse_one(str(INT_MAX))[0] == INT_MAX
    assert parse_one(str(INT_MIN))[0] == INT_MIN


# ------------------------------------------------------------
# Printing and parsing are inverses
# ------------------------------------------------------------

symbols = st.text(alphabet=string.ascii_letters, min_size=1, max_size=8).map(Symbol)
integers = st.integers(min_value=INT_MIN, max_value=INT_MAX)
values = st.recursive(
    symbols | integers,
    lambda children: st.lists(children, max_size=4).map(LispList),
    max_leaves=20,
)


@given(values)
def test_print_then_parse_round_trip(value):
    expr, consumed = parse_one(str(value))
    assert expr == value
    assert consumed == str(value)


@pytest.mark.parametrize(
    "source",
    ["(a   b\n c)", "'x", "(a '(b 'c) -3)", "  ( ( ) )  ", "''(x)"],
)
def test_reparse_printed_form(source):
    expr, _ = parse_one(source)
    again, _ = parse_one(str(expr))
    assert again == expr
