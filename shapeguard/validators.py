"""
Built-in leaf validators for shapeguard.

Provides the atomic kind checks as ready-made V instances, plus factory
functions for literals, regular expressions and numeric ranges.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Literal

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .core import V
from .kinds import SCALAR_KINDS, Kind, kind_of
from .types import Symbol, UndefinedType

logger = logging.getLogger(__name__)


def _kind_validator(kind: Kind, type_hint: Any) -> V:
    def check(x: Any) -> bool:
        return kind_of(x) is kind

    return V(check=check, type_hint=type_hint)


IsNumber = _kind_validator(Kind.NUMBER, int | float)
IsString = _kind_validator(Kind.STRING, str)
IsBoolean = _kind_validator(Kind.BOOLEAN, bool)
IsNull = _kind_validator(Kind.NULL, None)
IsUndefined = _kind_validator(Kind.UNDEFINED, UndefinedType)
IsSymbol = _kind_validator(Kind.SYMBOL, Symbol)
IsBigInt = _kind_validator(Kind.BIGINT, int)
IsAny = V(check=lambda _: True, type_hint=Any)


def Const(value: Any) -> V:
    """
    Validate strict equality with a scalar constant.

    Numbers, bigints and strings must match in kind and value, so
    Const(1) accepts 1.0 but never True. Everything else (booleans, None,
    UNDEFINED, Symbols) must be the very same object.

    Usage:
        Const("active")
        Const(42)
        Const(UNDEFINED)
    """
    kind = kind_of(value)
    if kind not in SCALAR_KINDS:
        raise TypeError(f"Const() requires a scalar value, got {type(value).__name__}")

    if kind in (Kind.NUMBER, Kind.BIGINT, Kind.STRING):

        def check(x: Any) -> bool:
            return kind_of(x) is kind and x == value

    else:

        def check(x: Any) -> bool:
            return x is value

    if isinstance(value, (str, int, UndefinedType)) or value is None:
        type_hint: Any = Literal[value]
    else:
        type_hint = type(value)

    return V(check=check, type_hint=type_hint)


def Regexp(pattern: str | re.Pattern[str]) -> V:
    """
    Validate string contains a match for a regex pattern.

    The pattern may match anywhere in the string; anchor it to require a
    full-string match.

    Usage:
        Regexp(r"test")          # "a test case" passes
        Regexp(r"^[a-z]+$")      # lowercase letters only
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> bool:
        return isinstance(x, str) and compiled.search(x) is not None

    return V(check=check, type_hint=str)


# Whitespace and line terminators as ECMAScript defines them; narrower than
# Python's \s, which also covers \x1c-\x1f and \x85.
_WS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

IsEmail = Regexp(rf"^[^{_WS}@]+@[^{_WS}@]+\.[^{_WS}@]+\Z")

# Unanchored: a longer string containing a UUID also passes
IsUuid = Regexp(r"([0-9a-f]{8})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{12})")

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _is_url(x: Any) -> bool:
    if not isinstance(x, str):
        return False
    try:
        _URL_ADAPTER.validate_python(x)
    except ValidationError:
        logger.debug("Rejecting unparseable URL %r", x)
        return False
    return True


IsUrl = V(check=_is_url, type_hint=str)

# Leading integer, as an integer-prefix parse reads it: optional whitespace
# and sign, then a decimal digit or a 0x-prefixed hex digit.
_INTEGER_PREFIX = re.compile(rf"[{_WS}]*[+-]?(?:0[xX][0-9a-fA-F]|(?!0[xX])[0-9])")


def _is_numeric_string(x: Any) -> bool:
    return isinstance(x, str) and _INTEGER_PREFIX.match(x) is not None


IsNumericString = V(check=_is_numeric_string, type_hint=str)


def NumberRange(*, min: float | None = None, max: float | None = None) -> V:
    """
    Validate a number within bounds (inclusive).

    Usage:
        NumberRange(min=10, max=20)   # 10 to 20
        NumberRange(min=0)            # Non-negative
        NumberRange()                 # Any number
    """

    def check(x: Any) -> bool:
        if kind_of(x) is not Kind.NUMBER:
            return False
        # NaN fails both comparisons
        if min is not None and not min <= x:
            return False
        if max is not None and not x <= max:
            return False
        return True

    return V(check=check, type_hint=int | float)


def IsType(t: type) -> V:
    """
    Validate that value is an instance of type.

    Usage:
        IsType(str)
        IsType(datetime) | IsNull
    """

    def check(x: Any) -> bool:
        return isinstance(x, t)

    return V(check=check, type_hint=t)


def Predicate(fn: Any, type_hint: Any = Any) -> V:
    """
    Create validator from arbitrary predicate function.

    Usage:
        Predicate(lambda x: x > 0)
        Predicate(str.isalpha, str)
    """
    return V(check=fn, type_hint=type_hint)
