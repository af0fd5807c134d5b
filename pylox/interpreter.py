import logging
import math
from typing import Optional, Tuple

from . import expressions
from .diagnostics import ErrorReporter, LoxRuntimeError
from .expressions import Expression
from .tokens import TokenType, Token
from .typedefs import Object, is_equal, is_truthy, stringify

logger = logging.getLogger(__name__)


def check_number_operand(operator: Token, operand: Optional[Object]) -> float:
    if isinstance(operand, float):
        return operand
    raise LoxRuntimeError(operator, 'Operand must be a number.')

def check_number_operands(
        operator: Token,
        left: Optional[Object],
        right: Optional[Object],
) -> Tuple[float, float]:
    if isinstance(left, float) and isinstance(right, float):
        return left, right
    raise LoxRuntimeError(operator, 'Operands must be numbers.')


def divide(left: float, right: float) -> float:
    # IEEE semantics: x/0 is a signed infinity and 0/0 is NaN
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


ARITHMETIC = {
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: divide,
}

COMPARISON = {
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATER_EQUAL: lambda a, b: a >= b,
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESS_EQUAL: lambda a, b: a <= b,
}


class Interpreter:
    def __init__(self, reporter: Optional[ErrorReporter] = None):
        self.reporter = reporter if reporter is not None else ErrorReporter()

    def interpret(self, expr: Expression) -> Optional[Object]:
        """Evaluate ``expr`` and print the result.

        A runtime error is handed to the reporter instead of propagating.
        """
        try:
            value = self.evaluate(expr)
        except LoxRuntimeError as e:
            self.reporter.runtime_error(e)
            return None
        logger.debug('evaluated to %s', stringify(value))
        print(stringify(value))
        return value

    def evaluate(self, expr: Expression) -> Optional[Object]:
        if isinstance(expr, expressions.Literal):
            return expr.value
        if isinstance(expr, expressions.Grouping):
            return self.evaluate(expr.expression)
        if isinstance(expr, expressions.Unary):
            return self.evaluate_unary(expr)
        if isinstance(expr, expressions.Binary):
            return self.evaluate_binary(expr)
        raise TypeError(f'Not an expression: {expr!r}')

    def evaluate_unary(self, expr: expressions.Unary) -> Optional[Object]:
        right = self.evaluate(expr.right)

        if expr.operator.ttype == TokenType.BANG:
            return not is_truthy(right)
        if expr.operator.ttype == TokenType.MINUS:
            return -check_number_operand(expr.operator, right)
        raise ValueError(f'Unknown unary operator {expr.operator.lexeme!r}')

    def evaluate_binary(self, expr: expressions.Binary) -> Optional[Object]:
        # left spine is walked iteratively; flat chains can outgrow the stack
        spine = []
        while isinstance(expr, expressions.Binary):
            spine.append(expr)
            expr = expr.left
        left = self.evaluate(expr)
        for node in reversed(spine):
            right = self.evaluate(node.right)
            left = self.apply_binary(node.operator, left, right)
        return left

    def apply_binary(self, operator: Token, left: Optional[Object], right: Optional[Object]) -> Optional[Object]:
        ttype = operator.ttype

        if ttype == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if ttype == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if ttype in COMPARISON:
            left, right = check_number_operands(operator, left, right)
            return COMPARISON[ttype](left, right)
        if ttype in ARITHMETIC:
            left, right = check_number_operands(operator, left, right)
            return ARITHMETIC[ttype](left, right)

        if ttype == TokenType.PLUS:
            if isinstance(left, float) and isinstance(right, float):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(operator, 'Operands must be two numbers or two strings.')

        raise ValueError(f'Unknown binary operator {operator.lexeme!r}')
