"""
Type definitions for shapeguard.

Provides the check function alias and the two value types the Python host
lacks natively: the UNDEFINED sentinel and identity-compared Symbols.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class UndefinedType(Enum):
    """
    Sentinel type for "no value at all", as distinct from None.

    Object validators read missing keys as UNDEFINED, so a field validator
    can tell an absent key apart from a key explicitly set to None.
    """

    UNDEFINED = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = UndefinedType.UNDEFINED


class Symbol:
    """
    A unique value with an optional description.

    Symbols compare by identity: two Symbols built from the same
    description are different values.

    Examples:
        Symbol("token") == Symbol("token")   # False
        s = Symbol("token"); s == s          # True
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description!r})"


# Type aliases
CheckFn = Callable[[Any], bool]
