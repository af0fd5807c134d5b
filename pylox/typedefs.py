"""Runtime values.

A value is a ``float``, ``str`` or ``bool``; nil is ``None``. The helpers
here encode the dynamic-typing rules shared by the interpreter and printer.
"""
from decimal import Decimal
import math
from typing import Optional, Union

Object = Union[float, str, bool]


def is_truthy(value: Optional[Object]) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Optional[Object], b: Optional[Object]) -> bool:
    # True == 1.0 in Python, so the variants must match first
    if type(a) is not type(b):
        return False
    return a == b


def stringify(value: Optional[Object]) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'inf' if value > 0 else '-inf'
        # shortest round-trip digits, written out without an exponent
        text = format(Decimal(repr(value)), 'f')
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        return text
    return value
