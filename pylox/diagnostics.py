from dataclasses import dataclass
import logging
from typing import List

from .tokens import TokenType, Token

logger = logging.getLogger(__name__)

class LoxRuntimeError(Exception):
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


@dataclass(frozen=True)
class Diagnostic:
    kind: str  # 'syntax' or 'runtime'
    line: int
    where: str
    message: str

    def __str__(self):
        if self.kind == 'runtime':
            return f'{self.message}\n[line {self.line}]'
        return f'[line {self.line}] Error{self.where}: {self.message}'


class ErrorReporter:
    """Collects the diagnostics of one run.

    Lexical and syntax errors are both recorded as ``syntax`` diagnostics;
    ``reset`` forgets them so an interactive session can carry on after a
    bad line.
    """

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return any(d.kind == 'syntax' for d in self.diagnostics)

    @property
    def had_runtime_error(self) -> bool:
        return any(d.kind == 'runtime' for d in self.diagnostics)

    def error(self, line: int, message: str) -> None:
        self.report(line, '', message)

    def error_at(self, token: Token, message: str) -> None:
        if token.ttype == TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str) -> None:
        self._add(Diagnostic('syntax', line, where, message))

    def runtime_error(self, error: LoxRuntimeError) -> None:
        self._add(Diagnostic('runtime', error.token.line, '', error.message))

    def reset(self) -> None:
        self.diagnostics = [d for d in self.diagnostics if d.kind != 'syntax']

    def _add(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        logger.error('%s', diagnostic)
