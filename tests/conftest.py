"""Shared fixtures for the pylox test suite."""

import pytest

from pylox.ast_parser import Parser
from pylox.diagnostics import ErrorReporter
from pylox.scanner import Scanner


@pytest.fixture
def reporter() -> ErrorReporter:
    """Return a fresh error reporter."""
    return ErrorReporter()


@pytest.fixture
def parse(reporter):
    """Return a helper that scans and parses source into an expression."""

    def _parse(source: str):
        tokens = Scanner(source, reporter).scan()
        return Parser(tokens, reporter).parse()

    return _parse
