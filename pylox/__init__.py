import logging
from typing import Optional

from .ast_parser import Parser
from .diagnostics import ErrorReporter, LoxRuntimeError
from .interpreter import Interpreter
from .printer import render
from .scanner import Scanner
from .typedefs import Object

logger = logging.getLogger(__name__)

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70

def run(source: str, reporter: Optional[ErrorReporter] = None, verbose: bool = False) -> Optional[Object]:
    if reporter is None:
        reporter = ErrorReporter()
    tokens = Scanner(source, reporter).scan()
    expr = Parser(tokens, reporter).parse()
    if expr is None or reporter.had_error:
        return None
    if verbose:
        print(render(expr))
    return Interpreter(reporter).interpret(expr)

def run_file(path: str, verbose: bool = False) -> int:
    logger.debug('running %s', path)
    try:
        with open(path, encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error('%s', e)
        return 1

    reporter = ErrorReporter()
    run(source, reporter, verbose=verbose)
    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return 0

def run_prompt(verbose: bool = False) -> int:
    reporter = ErrorReporter()
    while True:
        try:
            line = input('> ')
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        run(line, reporter, verbose=verbose)
        reporter.reset()
