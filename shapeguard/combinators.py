"""
Combinators for shapeguard.

Factory functions that build validators out of child validators. Children
may be given in any form to_validator() accepts.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal

from typing_extensions import Never

from .context import guard_recursion
from .core import V, to_validator
from .hints import Fields, intersection_hint, object_hint, union_hint
from .kinds import Kind, kind_of
from .types import UNDEFINED, Symbol

# Never validated, neither as a declared object key nor as a record key
PROTO_KEY = "__proto__"

_RECORD_KEY_KINDS = frozenset({Kind.STRING, Kind.NUMBER, Kind.BIGINT, Kind.SYMBOL})


def Optional(v: Any) -> V:
    """
    Allow None or UNDEFINED, validate anything else.

    Usage:
        Optional(IsString)    # None, UNDEFINED or a string
    """
    inner = to_validator(v)

    def check(x: Any) -> bool:
        return x is None or x is UNDEFINED or inner(x)

    return V(check=check, type_hint=union_hint([inner.type_hint, None]))


def Nullable(v: Any) -> V:
    """
    Allow None, validate anything else.

    Unlike Optional, UNDEFINED is only accepted if the inner validator
    accepts it.

    Usage:
        Nullable(IsString)    # None or a string
    """
    inner = to_validator(v)

    def check(x: Any) -> bool:
        return x is None or inner(x)

    return V(check=check, type_hint=union_hint([inner.type_hint, None]))


def Union(validators: Iterable[Any]) -> V:
    """
    Pass if any validator passes.

    Validators run in order and stop at the first acceptance. An empty
    union rejects everything.

    Usage:
        Union([IsString, IsNumber])
        IsString | IsNumber          # Same as above
    """
    children = [to_validator(v) for v in validators]

    def check(x: Any) -> bool:
        return any(child(x) for child in children)

    return V(check=check, type_hint=union_hint([child.type_hint for child in children]))


def Intersection(validators: Iterable[Any]) -> V:
    """
    Pass only if every validator passes.

    Validators run in order and stop at the first rejection. An empty
    intersection accepts everything.

    Usage:
        Intersection([Object({"name": IsString}), Object({"age": IsNumber})])
        IsString & Regexp(r"^\\d+$")   # Same idea, with operators
    """
    children = [to_validator(v) for v in validators]

    def check(x: Any) -> bool:
        return all(child(x) for child in children)

    return V(check=check, type_hint=intersection_hint([child.type_hint for child in children]))


def Object(shape: Mapping[Any, Any], exact: bool = False) -> V:
    """
    Validate a mapping against a shape of per-key validators.

    A missing key is validated as UNDEFINED, so only validators accepting
    UNDEFINED (e.g. Optional) allow a key to be absent. With exact=True,
    keys beyond the declared ones are rejected.

    The "__proto__" key is dropped from the shape: it is never validated
    and never counts as declared.

    Usage:
        Object({"name": IsString, "age": IsNumber})
        Object({"id": IsUuid}, exact=True)
    """
    fields = {key: to_validator(v) for key, v in shape.items() if key != PROTO_KEY}

    @guard_recursion
    def check_fields(x: Mapping[Any, Any]) -> bool:
        # .get() so mappings with a __missing__ hook are never written to
        for key, validator in fields.items():
            if not validator(x.get(key, UNDEFINED)):
                return False
        if exact:
            return all(key in fields for key in x.keys())
        return True

    def check(x: Any) -> bool:
        return isinstance(x, Mapping) and check_fields(x)

    if all(isinstance(key, str) for key in fields):
        hint_fields: Fields = {
            key: (validator.type_hint, not validator(UNDEFINED)) for key, validator in fields.items()
        }
        type_hint: Any = object_hint(hint_fields, exact)
    else:
        type_hint = dict

    return V(check=check, type_hint=type_hint)


def Array(child: Any) -> V:
    """
    Validate a list or tuple whose items all pass.

    Usage:
        Array(IsNumber)       # [1, 2, 3] passes, [] passes
    """
    item = to_validator(child)

    @guard_recursion
    def check_items(x: list[Any] | tuple[Any, ...]) -> bool:
        return all(item(value) for value in x)

    def check(x: Any) -> bool:
        return isinstance(x, (list, tuple)) and check_items(x)

    return V(check=check, type_hint=list[item.type_hint])  # type: ignore[valid-type]


def ArrayLength(child: Any, *, min: int | None = None, max: int | None = None) -> V:
    """
    Validate an array whose items all pass and whose length is within
    bounds (inclusive).

    Usage:
        ArrayLength(IsNumber, min=2, max=4)
        ArrayLength(IsString, min=1)      # Non-empty
    """
    array = Array(child)

    def check(x: Any) -> bool:
        if not array(x):
            return False
        if min is not None and len(x) < min:
            return False
        if max is not None and len(x) > max:
            return False
        return True

    return V(check=check, type_hint=array.type_hint)


def Tuple(children: Iterable[Any]) -> V:
    """
    Validate a fixed-length list or tuple, position by position.

    Usage:
        Tuple([IsString, IsNumber, IsBoolean])    # ["x", 1, True] passes
    """
    positions = [to_validator(v) for v in children]

    @guard_recursion
    def check_items(x: list[Any] | tuple[Any, ...]) -> bool:
        return all(validator(value) for validator, value in zip(positions, x))

    def check(x: Any) -> bool:
        return isinstance(x, (list, tuple)) and len(x) == len(positions) and check_items(x)

    type_hint = tuple[tuple(validator.type_hint for validator in positions)]  # type: ignore[valid-type]
    return V(check=check, type_hint=type_hint)


def Record(value_validator: Any) -> V:
    """
    Validate a mapping whose keys are strings, numbers (of any size) or
    Symbols and whose values all pass.

    The "__proto__" key is skipped.

    Usage:
        Record(IsString)      # {"k": "v"} passes, {"k": 1} fails
    """
    inner = to_validator(value_validator)

    @guard_recursion
    def check_entries(x: Mapping[Any, Any]) -> bool:
        for key, value in x.items():
            if key == PROTO_KEY:
                continue
            if kind_of(key) not in _RECORD_KEY_KINDS:
                return False
            if not inner(value):
                return False
        return True

    def check(x: Any) -> bool:
        return isinstance(x, Mapping) and check_entries(x)

    return V(check=check, type_hint=dict[str | int | float | Symbol, inner.type_hint])  # type: ignore[valid-type]


def Enum(values: Iterable[str]) -> V:
    """
    Validate a string from a fixed set.

    Usage:
        Enum(["red", "green", "blue"])
    """
    ordered = list(dict.fromkeys(values))
    container = frozenset(ordered)

    def check(x: Any) -> bool:
        return isinstance(x, str) and x in container

    type_hint = Literal[tuple(ordered)] if ordered else Never
    return V(check=check, type_hint=type_hint)
