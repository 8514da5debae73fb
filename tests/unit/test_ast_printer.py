"""Printing programs back to source and re-parsing the result."""

import pytest

from rucky.parser import parse_source
from rucky.rucky_ast import (
    BlankStatement,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    StringLiteral,
)


def test_program_string():
    program = Program([
        LetStatement(Identifier("myVar"), Identifier("anotherVar")),
        ReturnStatement(PrefixExpression("-", IntegerLiteral(1))),
        BlankStatement(),
        ExpressionStatement(InfixExpression(IntegerLiteral(1), "+", StringLiteral("a"))),
    ])
    assert str(program) == 'let myVar = anotherVar;\nreturn -1;\n;\n1 + "a";'


def test_string_literal_escapes_on_print():
    assert str(StringLiteral('say "hi"\n\\')) == r'"say \"hi\"\n\\"'


def test_structural_equality():
    assert Identifier("x") == Identifier("x")
    assert Identifier("x") != Identifier("y")
    assert IntegerLiteral(5) != StringLiteral(5)
    assert InfixExpression(IntegerLiteral(1), "+", IntegerLiteral(2)) == \
        InfixExpression(IntegerLiteral(1), "+", IntegerLiteral(2))
    assert InfixExpression(IntegerLiteral(1), "+", IntegerLiteral(2)) != \
        InfixExpression(IntegerLiteral(1), "-", IntegerLiteral(2))


@pytest.mark.parametrize("source", [
    "let x = 5;",
    "return 1 + 2 * 3;",
    "a + b * c + d / e - f;",
    "-(5 + 5) == !x;",
    'let greeting = "hello\\tworld\\"";',
    "; foo; let y = (1 < 2) != (3 > 4);",
    "+-!a / b",
    "a - (b - c) * -(d + e);",
    "(a == b) == (c != d);",
])
def test_reparse_of_printed_program_is_equal(source):
    program, errors = parse_source(source)
    assert errors == []

    reparsed, errors = parse_source(str(program))
    assert errors == []
    assert reparsed == program


@pytest.mark.parametrize("source,printed", [
    ("(1 + 2) * 3;", "(1 + 2) * 3;"),
    ("1 + (2 * 3);", "1 + 2 * 3;"),
    ("((a - b) - c);", "a - b - c;"),
    ("a - (b - c);", "a - (b - c);"),
    ("-(a + b);", "-(a + b);"),
    ("(-a) * b;", "-a * b;"),
    ("!(-5);", "!-5;"),
])
def test_printer_keeps_only_needed_parentheses(source, printed):
    program, errors = parse_source(source)
    assert errors == []
    assert str(program) == printed


def _chain(terms):
    expression = Identifier("a0")
    for i in range(1, terms):
        expression = InfixExpression(expression, "+", Identifier(f"a{i}"))
    return expression


def test_long_chain_prints_and_compares():
    program = Program([ExpressionStatement(_chain(2000))])
    text = str(program)
    assert text.startswith("a0 + a1 + a2")
    assert text.endswith("a1998 + a1999;")

    assert program == Program([ExpressionStatement(_chain(2000))])
    assert program != Program([ExpressionStatement(_chain(1999))])


def test_long_chain_round_trip():
    program, errors = parse_source(" + ".join(["a"] * 2000) + ";")
    assert errors == []

    reparsed, errors = parse_source(str(program))
    assert errors == []
    assert reparsed == program
