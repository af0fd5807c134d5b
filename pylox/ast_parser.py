import logging
from typing import List, Optional

from . import expressions
from .diagnostics import ErrorReporter
from .expressions import Expression
from .tokens import TokenType, Token

logger = logging.getLogger(__name__)

class ParseException(Exception):
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


# tokens that begin a statement; synchronize stops in front of these
STATEMENT_STARTS = frozenset((
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
))


class Parser:
    MAX_DEPTH = 64

    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0
        self.depth = 0

    def peek(self, offset: int = 0) -> Token:
        return self.tokens[self.current + offset]

    def is_at_end(self) -> bool:
        return self.peek().ttype == TokenType.EOF

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def check(self, *types: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().ttype in types

    def match(self, *types: TokenType) -> bool:
        if self.check(*types):
            self.advance()
            return True
        return False

    def error(self, token: Token, message: str) -> ParseException:
        self.reporter.error_at(token, message)
        return ParseException(token, message)

    def consume(self, ttype: TokenType, message: str) -> Token:
        if self.check(ttype):
            return self.advance()
        raise self.error(self.peek(), message)

    def nest(self) -> None:
        self.depth += 1
        if self.depth > self.MAX_DEPTH:
            raise self.error(self.peek(), 'Expression nests too deeply.')

    def primary(self) -> Expression:
        if self.match(TokenType.FALSE):
            return expressions.Literal(False)
        if self.match(TokenType.TRUE):
            return expressions.Literal(True)
        if self.match(TokenType.NIL):
            return expressions.Literal(None)

        # match literals
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return expressions.Literal(self.previous().literal)

        # match grouping
        if self.match(TokenType.LEFT_PAREN):
            self.nest()
            try:
                expr = self.expression()
            finally:
                self.depth -= 1
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return expressions.Grouping(expr)

        raise self.error(self.peek(), 'Expect expression.')

    def unary(self) -> Expression:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            self.nest()
            try:
                right = self.unary()
            finally:
                self.depth -= 1
            return expressions.Unary(operator, right)
        return self.primary()

    def factor(self) -> Expression:
        expr = self.unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = expressions.Binary(expr, operator, right)
        return expr

    def term(self) -> Expression:
        expr = self.factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = expressions.Binary(expr, operator, right)
        return expr

    def comparison(self) -> Expression:
        expr = self.term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.previous()
            right = self.term()
            expr = expressions.Binary(expr, operator, right)
        return expr

    def equality(self) -> Expression:
        expr = self.comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = expressions.Binary(expr, operator, right)
        return expr

    def expression(self) -> Expression:
        return self.equality()

    def synchronize(self) -> None:
        self.advance()
        while not self.is_at_end():
            if self.previous().ttype == TokenType.SEMICOLON:
                return
            if self.peek().ttype in STATEMENT_STARTS:
                return
            self.advance()

    def parse(self) -> Optional[Expression]:
        """Parse a single expression.

        Returns None if a syntax error was reported; the diagnostic is on
        ``self.reporter`` and the cursor has been resynchronized.
        """
        try:
            expr = self.expression()
        except ParseException:
            self.synchronize()
            return None
        logger.debug('parsed expression ending at token %d', self.current)
        return expr
