"""
Runtime kind classification.

Every Python value falls into at most one Kind. Integers are split on the
IEEE-754 safe-integer bound: those a double represents exactly are numbers,
the rest are bigints.
"""

from collections.abc import Mapping
from enum import Enum, auto
from typing import Any

from .types import UNDEFINED, Symbol

MAX_SAFE_INTEGER = 2**53 - 1


class Kind(Enum):
    NUMBER = auto()
    BIGINT = auto()
    STRING = auto()
    BOOLEAN = auto()
    NULL = auto()
    UNDEFINED = auto()
    SYMBOL = auto()
    ARRAY = auto()
    OBJECT = auto()
    OTHER = auto()


# Kinds a Const() may be built from
SCALAR_KINDS = frozenset(
    {
        Kind.NUMBER,
        Kind.BIGINT,
        Kind.STRING,
        Kind.BOOLEAN,
        Kind.NULL,
        Kind.UNDEFINED,
        Kind.SYMBOL,
    }
)


def kind_of(value: Any) -> Kind:
    """Return the structural kind of a value."""
    if value is None:
        return Kind.NULL
    if value is UNDEFINED:
        return Kind.UNDEFINED
    # bool before int: True is not 1
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return Kind.NUMBER
        return Kind.BIGINT
    if isinstance(value, float):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, Symbol):
        return Kind.SYMBOL
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.OBJECT
    return Kind.OTHER
