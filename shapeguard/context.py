"""
Context manager for validation configuration (e.g., maximum depth).

Also holds the recursion guard used by the structural combinators. The set
of containers currently being validated lives in a ContextVar, so each
thread and each asyncio task walks its own stack.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from functools import wraps
from typing import Any

from .types import CheckFn

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

_max_depth: ContextVar[int | None] = ContextVar("max_depth", default=DEFAULT_MAX_DEPTH)

# ids of the containers on the current validation stack
_active: ContextVar[tuple[int, ...]] = ContextVar("active_containers", default=())


def current_max_depth() -> int | None:
    """Return the container nesting limit currently in effect."""
    return _max_depth.get()


@contextmanager
def validation_context(*, max_depth: int | None = DEFAULT_MAX_DEPTH):
    """
    Context manager for validation configuration.

    Args:
        max_depth: Maximum number of nested containers (objects, arrays,
                   tuples, records) a structural validator descends into.
                   Deeper values are rejected. None removes the limit;
                   self-containing values are rejected either way.

    Example:
        from shapeguard import Array, IsNumber, validation_context

        nested = Array(Array(IsNumber))

        nested([[1, 2]])                 # True
        with validation_context(max_depth=1):
            nested([[1, 2]])             # False, two levels deep
    """
    token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(token)


def guard_recursion(check: CheckFn) -> CheckFn:
    """
    Wrap a container check so it rejects cycles and excessive nesting.

    The wrapped check must only be called with a container value; the
    container is pushed onto the active stack for the duration of the call.
    """

    @wraps(check)
    def guarded(value: Any) -> bool:
        active = _active.get()
        if id(value) in active:
            logger.debug("Rejecting self-referential %s", type(value).__name__)
            return False

        limit = _max_depth.get()
        if limit is not None and len(active) >= limit:
            logger.debug("Rejecting %s nested deeper than %d", type(value).__name__, limit)
            return False

        token = _active.set((*active, id(value)))
        try:
            return check(value)
        finally:
            _active.reset(token)

    return guarded
