import logging
from typing import List, Mapping, Optional

from .diagnostics import ErrorReporter
from .tokens import EQUAL_SUFFIXED, SINGLE_TOKENS, KEYWORDS, TokenType, Token
from .typedefs import Object

logger = logging.getLogger(__name__)


def is_digit(char: str) -> bool:
    return '0' <= char <= '9'

def is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'

def is_alnum(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    def __init__(
            self,
            source: str,
            reporter: Optional[ErrorReporter] = None,
            keywords: Mapping[str, TokenType] = KEYWORDS,
    ):
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.keywords = keywords
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def is_at_end(self, offset: int = 0) -> bool:
        return (self.current + offset) >= len(self.source)

    def advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def match_next(self, expected: str) -> bool:
        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self, offset: int = 0) -> str:
        if self.is_at_end(offset):
            return '\0'
        return self.source[self.current + offset]

    def scan_string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.advance() == '\n':
                self.line += 1
        if self.is_at_end():
            self.reporter.error(self.line, 'Unterminated string.')
            return
        # closing quote
        self.advance()

        value = self.source[self.start+1:self.current-1]
        self.add_token(TokenType.STRING, value)

    def scan_number(self):
        while is_digit(self.peek()):
            self.advance()
        # a trailing '.' is left for member access
        if self.peek() == '.' and is_digit(self.peek(1)):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        value = self.source[self.start:self.current]
        self.add_token(TokenType.NUMBER, float(value))

    def scan_identifier(self):
        while is_alnum(self.peek()):
            self.advance()
        value = self.source[self.start:self.current]
        ttype = self.keywords.get(value, TokenType.IDENTIFIER)
        self.add_token(ttype)

    def skip_comment(self):
        while self.peek() != '\n' and not self.is_at_end():
            self.advance()

    def add_token(self, ttype: TokenType, literal: Optional[Object] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(ttype, text, literal, self.line))

    def scan_token(self):
        char = self.advance()

        # match one-or-two-character operators
        pair = EQUAL_SUFFIXED.get(char)
        if pair is not None:
            alone, with_equal = pair
            self.add_token(with_equal if self.match_next('=') else alone)
            return

        if char == '/':
            if self.match_next('/'):
                self.skip_comment()
            else:
                self.add_token(TokenType.SLASH)
            return

        # match one-character tokens
        ttype = SINGLE_TOKENS.get(char)
        if ttype is not None:
            self.add_token(ttype)
            return

        # handle whitespace
        if char in ' \r\t':
            return
        if char == '\n':
            self.line += 1
            return

        # handle literals
        if char == '"':
            self.scan_string()
            return
        if is_digit(char):
            self.scan_number()
            return
        if is_alpha(char):
            self.scan_identifier()
            return

        self.reporter.error(self.line, 'Unexpected character.')

    def scan(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        logger.debug('scanned %d tokens over %d lines', len(self.tokens), self.line)
        return self.tokens
