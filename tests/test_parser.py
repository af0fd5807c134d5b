import pytest

from pylox import expressions
from pylox.ast_parser import Parser
from pylox.printer import read, render
from pylox.scanner import Scanner
from pylox.tokens import TokenType


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 + 2 * 3", ["+", "1", ["*", "2", "3"]]),
        ("1 - 2 - 3", ["-", ["-", "1", "2"], "3"]),
        ("8 / 4 / 2", ["/", ["/", "8", "4"], "2"]),
        ("1 < 2 == 3 >= 4", ["==", ["<", "1", "2"], [">=", "3", "4"]]),
        ("--1", ["-", ["-", "1"]]),
        ("!!true", ["!", ["!", "true"]]),
        ("-1 * (2 + 3)", ["*", ["-", "1"], ["group", ["+", "2", "3"]]]),
        ("1 != nil", ["!=", "1", "nil"]),
    ],
)
def test_precedence_and_associativity(parse, reporter, source, expected):
    expr = parse(source)
    assert not reporter.had_error
    assert read(render(expr)) == expected


def test_literal_nodes(parse):
    assert parse("nil") == expressions.Literal(None)
    assert parse('"hi"') == expressions.Literal("hi")
    assert parse("false").value is False


def test_binary_holds_operator_token(parse):
    expr = parse("1 + 2")
    assert isinstance(expr, expressions.Binary)
    assert expr.operator.ttype == TokenType.PLUS
    assert expr.operator.line == 1


def test_missing_right_paren_reports_at_end(parse, reporter):
    assert parse("(1 + 2") is None
    assert [str(d) for d in reporter.diagnostics] == [
        "[line 1] Error at end: Expect ')' after expression.",
    ]


def test_unexpected_token_reports_lexeme(parse, reporter):
    assert parse("1 + ;") is None
    assert str(reporter.diagnostics[0]) == "[line 1] Error at ';': Expect expression."


def test_empty_input_is_an_error(parse, reporter):
    assert parse("") is None
    assert str(reporter.diagnostics[0]) == "[line 1] Error at end: Expect expression."


def test_synchronize_stops_after_semicolon(reporter):
    tokens = Scanner("1 + ) 2 3; 4", reporter).scan()
    parser = Parser(tokens, reporter)
    assert parser.parse() is None
    assert parser.peek().lexeme == "4"
    assert parser.parse() == expressions.Literal(4.0)


@pytest.mark.parametrize("keyword", ["class", "fun", "var", "for", "if", "while", "print", "return"])
def test_synchronize_stops_at_statement_keyword(reporter, keyword):
    tokens = Scanner(f"* 1 2 {keyword} 3", reporter).scan()
    parser = Parser(tokens, reporter)
    assert parser.parse() is None
    assert parser.peek().lexeme == keyword


def test_synchronize_always_advances(reporter):
    tokens = Scanner("print", reporter).scan()
    parser = Parser(tokens, reporter)
    assert parser.parse() is None
    assert parser.is_at_end()


def test_deep_nesting_is_reported(parse, reporter):
    depth = Parser.MAX_DEPTH + 1
    assert parse("(" * depth + "1" + ")" * depth) is None
    assert reporter.diagnostics[-1].message == "Expression nests too deeply."


def test_nesting_within_limit(parse, reporter):
    depth = Parser.MAX_DEPTH
    expr = parse("-" * (depth - 1) + "1")
    assert not reporter.had_error
    assert isinstance(expr, expressions.Unary)
