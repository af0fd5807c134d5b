import math

import pytest

from pylox.typedefs import is_equal, is_truthy, stringify


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (7.0, "7"),
        (100.0, "100"),
        (-0.0, "-0"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (1e-07, "0.0000001"),
        (1.5e-10, "0.00000000015"),
        (1e21, "1" + "0" * 21),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
        ("a b", "a b"),
    ],
)
def test_stringify(value, expected):
    assert stringify(value) == expected


def test_truthiness_of_zero_and_empty_string():
    assert is_truthy(0.0)
    assert is_truthy("")
    assert not is_truthy(None)


def test_equality_never_crosses_variants():
    assert not is_equal(1.0, True)
    assert not is_equal(0.0, False)
    assert is_equal(None, None)
