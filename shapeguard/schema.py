"""
Schema operations for shapeguard.

Provides conforms(), infer() and to_pydantic() functions.
"""

from __future__ import annotations

import keyword
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, create_model
from typing_extensions import is_typeddict

from .core import to_validator
from .hints import is_exact, object_fields


def conforms(value: Any, schema: Any) -> bool:
    """
    Check a value against a schema.

    Args:
        value: The value to check
        schema: A validator, or any shorthand to_validator() accepts

    Returns:
        True if the value conforms, False otherwise

    Usage:
        conforms({"name": "Alice"}, {"name": IsString})
        conforms([1, 2], [int])
    """
    return to_validator(schema)(value)


def infer(schema: Any) -> Any:
    """
    Return the type hint describing what a validator accepts.

    Usage:
        infer(Object({"name": IsString, "tags": Optional([IsString])}))
        # -> TypedDict with name: str, tags: NotRequired[list[str] | None]
    """
    return to_validator(schema).type_hint


def to_pydantic(name: str, schema: Any) -> type[BaseModel]:
    """
    Compile an object validator to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: An Object validator, or a dict shorthand

    Returns:
        A Pydantic BaseModel subclass. Keys that may be absent become
        fields defaulting to None; exact objects forbid extra fields.
        Every field is aliased to its object key, so keys that cannot be
        attribute names (e.g. "_id", "copy") still validate and dump
        under the original key.

    Usage:
        User = to_pydantic("User", Object({
            "name": IsString,
            "email": Optional(IsEmail),
        }, exact=True))
        user = User(name="Alice")
    """
    hint = to_validator(schema).type_hint
    if not is_typeddict(hint):
        raise TypeError("Schema must be an object validator")

    keys = object_fields(hint)
    fields: dict[str, Any] = {}
    for index, (key, (field_type, required)) in enumerate(keys.items()):
        default = ... if required else None
        fields[_field_name(key, index, keys)] = (field_type, Field(default, alias=key))

    config = ConfigDict(
        extra="forbid" if is_exact(hint) else "ignore",
        arbitrary_types_allowed=True,
    )
    return create_model(name, __config__=config, **fields)


def _field_name(key: str, index: int, keys: Any) -> str:
    """Attribute name for a model field; the object key itself when pydantic allows it."""
    if (
        key.isidentifier()
        and not keyword.iskeyword(key)
        and not key.startswith("_")
        and not hasattr(BaseModel, key)
    ):
        return key
    candidate = f"field_{index}"
    while candidate in keys or hasattr(BaseModel, candidate):
        candidate += "_"
    return candidate
