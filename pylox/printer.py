"""Renders an expression tree as a parenthesized prefix form.

``render(parse("-1 * (2 + 3)"))`` gives ``(* (- 1) (group (+ 2 3)))``.
String literals print raw unless ``quote_strings`` is set; quoted output
can be turned back into nested lists with ``read`` so tree shapes can be
compared as data.
"""
from typing import List, Union

import pyparsing as pp

from . import expressions
from .expressions import Expression
from .typedefs import stringify

LPAREN, RPAREN = map(pp.Suppress, "()")

# Lox strings have no escapes, so a quoted atom ends at the next '"'
atom = pp.QuotedString('"', multiline=True, unquote_results=False) | pp.Regex(r'[^\s()"]+')
sexpr = pp.Forward()
sexpr <<= pp.Group(LPAREN + pp.ZeroOrMore(sexpr) + RPAREN) | atom

SExpr = Union[str, List['SExpr']]


class AstPrinter:
    def __init__(self, quote_strings: bool = False):
        self.quote_strings = quote_strings

    def render(self, expr: Expression) -> str:
        if isinstance(expr, expressions.Binary):
            return self.render_binary(expr)
        if isinstance(expr, expressions.Grouping):
            return self.parenthesize('group', expr.expression)
        if isinstance(expr, expressions.Literal):
            if self.quote_strings and isinstance(expr.value, str):
                return f'"{expr.value}"'
            return stringify(expr.value)
        if isinstance(expr, expressions.Unary):
            return self.parenthesize(expr.operator.lexeme, expr.right)
        raise TypeError(f'Not an expression: {expr!r}')

    def render_binary(self, expr: expressions.Binary) -> str:
        spine = []
        while isinstance(expr, expressions.Binary):
            spine.append(expr)
            expr = expr.left
        text = self.render(expr)
        for node in reversed(spine):
            text = f'({node.operator.lexeme} {text} {self.render(node.right)})'
        return text

    def parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = ''.join(' ' + self.render(expr) for expr in exprs)
        return f'({name}{parts})'


def render(expr: Expression, quote_strings: bool = False) -> str:
    return AstPrinter(quote_strings).render(expr)


def read(text: str) -> SExpr:
    """Parse ``render(expr, quote_strings=True)`` output into nested lists.

    String literals come back as atoms that keep their quotes.
    """
    return sexpr.parse_string(text, parse_all=True).as_list()[0]
