"""
Core validator class for shapeguard.

Provides the V dataclass with functional composition, and to_validator()
for turning shorthand schemas into validators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .types import CheckFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class V:
    """
    Immutable validator node.

    The fundamental building block. Wraps a check function together with
    the type hint describing what the check accepts.

    Calling a V never raises: an exception escaping the check function is
    treated as a rejection.
    """

    check: CheckFn
    type_hint: Any = Any

    def __call__(self, value: Any) -> bool:
        """Return True if value conforms, False otherwise."""
        try:
            return bool(self.check(value))
        except Exception as e:
            logger.debug("Check %r raised %s; rejecting value", self.check, type(e).__name__)
            return False

    def __and__(self, other: V | type | Any) -> V:
        """
        Combine with AND logic: both must pass.

        Usage:
            IsString & Regexp(r"^[a-z]+$")
            Object({"name": str}) & Object({"age": int})
        """
        from .combinators import Intersection

        return Intersection([self, other])

    def __rand__(self, other: type | Any) -> V:
        """Support `str & IsString` where str comes first."""
        from .combinators import Intersection

        return Intersection([other, self])

    def __or__(self, other: V | type | Any) -> V:
        """
        Combine with OR logic: at least one must pass.

        Usage:
            IsString | IsNumber
            Const("on") | Const("off")
        """
        from .combinators import Union

        return Union([self, other])

    def __ror__(self, other: type | Any) -> V:
        """Support `str | IsNumber` where str comes first."""
        from .combinators import Union

        return Union([other, self])


def to_validator(v: Any) -> V:
    """
    Coerce a value to a validator.

    Conversion rules:
        V -> pass through
        type -> IsType(type)
        dict -> Object(dict), extra keys allowed
        list -> Array(list[0]); several items -> Array(Union(items))
        tuple -> Tuple(items)
        Callable -> Predicate(callable)
    """
    from .combinators import Array, Object, Tuple, Union
    from .validators import IsType, Predicate

    if isinstance(v, V):
        return v

    if isinstance(v, type):
        return IsType(v)

    if isinstance(v, dict):
        return Object(v)

    if isinstance(v, list):
        if len(v) == 0:
            raise ValueError("Empty list cannot be converted to validator")
        if len(v) == 1:
            return Array(v[0])
        # Multiple items = OR logic for item types
        return Array(Union(v))

    if isinstance(v, tuple):
        return Tuple(v)

    if callable(v):
        return Predicate(v)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
