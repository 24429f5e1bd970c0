"""
Type hint construction for shapeguard validators.

Each combinator derives its hint from its children's hints, so infer()
on any validator describes exactly what that validator accepts.
"""

from __future__ import annotations

from typing import Any
from typing import Union as TypingUnion

from pydantic import ConfigDict, with_config
from typing_extensions import Never, NotRequired, TypedDict, get_type_hints, is_typeddict

# (hint, required) per object key
Fields = dict[str, tuple[Any, bool]]


def union_hint(hints: list[Any]) -> Any:
    """Union of hints; Never when there are none."""
    if not hints:
        return Never
    return TypingUnion[tuple(hints)]


def object_hint(fields: Fields, exact: bool) -> Any:
    """
    Build a TypedDict describing an object shape.

    Optional keys become NotRequired. The pydantic config attached to the
    TypedDict carries exactness: extra keys are forbidden or ignored.
    """
    annotations = {
        key: hint if required else NotRequired[hint] for key, (hint, required) in fields.items()
    }
    typed = TypedDict("Object", annotations)  # type: ignore[misc]
    config = ConfigDict(extra="forbid" if exact else "ignore", arbitrary_types_allowed=True)
    return with_config(config)(typed)


def object_fields(hint: Any) -> Fields:
    """Extract (hint, required) per key from a TypedDict built by object_hint()."""
    required = hint.__required_keys__
    return {key: (field_type, key in required) for key, field_type in get_type_hints(hint).items()}


def is_exact(hint: Any) -> bool:
    config = getattr(hint, "__pydantic_config__", {})
    return config.get("extra") == "forbid"


def intersection_hint(hints: list[Any]) -> Any:
    """
    Intersect hints.

    Object hints merge into one TypedDict (a key is required if any side
    requires it; a key typed Any on one side takes the other side's type).
    Otherwise the first informative hint wins.
    """
    if hints and all(is_typeddict(hint) for hint in hints):
        merged: Fields = {}
        for hint in hints:
            for key, (field_type, required) in object_fields(hint).items():
                if key in merged:
                    first_type, first_required = merged[key]
                    # the informative side wins over Any
                    narrowed = field_type if first_type is Any else first_type
                    merged[key] = (narrowed, first_required or required)
                else:
                    merged[key] = (field_type, required)
        return object_hint(merged, exact=any(is_exact(hint) for hint in hints))

    for hint in hints:
        if hint is not Any:
            return hint
    return Any
