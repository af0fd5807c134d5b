"""Expression tree.

The variant set is closed: ``Binary``, ``Grouping``, ``Literal`` and
``Unary``. Nodes are frozen and own their children, so a tree can be
evaluated or rendered any number of times.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .tokens import Token
from .typedefs import Object

@dataclass(frozen=True)
class Binary:
    left: 'Expression'
    operator: Token
    right: 'Expression'

@dataclass(frozen=True)
class Grouping:
    expression: 'Expression'

@dataclass(frozen=True)
class Literal:
    value: Optional[Object]

@dataclass(frozen=True)
class Unary:
    operator: Token
    right: 'Expression'


Expression = Union[Binary, Grouping, Literal, Unary]
