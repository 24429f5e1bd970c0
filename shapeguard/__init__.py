"""
shapeguard - Composable runtime validators for untrusted data.

Usage:
    from shapeguard import IsEmail, IsNumber, IsString, Object, Optional

    user = Object({
        "name": IsString,
        "age": IsNumber,
        "email": Optional(IsEmail),
    })

    user({"name": "Alice", "age": 30})   # True
    user({"name": "Alice"})              # False
"""

from .combinators import (
    PROTO_KEY,
    Array,
    ArrayLength,
    Enum,
    Intersection,
    Nullable,
    Object,
    Optional,
    Record,
    Tuple,
    Union,
)
from .context import DEFAULT_MAX_DEPTH, current_max_depth, validation_context
from .core import V, to_validator
from .kinds import MAX_SAFE_INTEGER, Kind, kind_of
from .schema import conforms, infer, to_pydantic
from .types import UNDEFINED, Symbol, UndefinedType
from .validators import (
    Const,
    IsAny,
    IsBigInt,
    IsBoolean,
    IsEmail,
    IsNull,
    IsNumber,
    IsNumericString,
    IsString,
    IsSymbol,
    IsType,
    IsUndefined,
    IsUrl,
    IsUuid,
    NumberRange,
    Predicate,
    Regexp,
)

__all__ = [
    # Values
    "UNDEFINED",
    "UndefinedType",
    "Symbol",
    "Kind",
    "kind_of",
    "MAX_SAFE_INTEGER",
    # Core
    "V",
    "to_validator",
    # Atomic validators
    "IsAny",
    "IsBigInt",
    "IsBoolean",
    "IsNull",
    "IsNumber",
    "IsString",
    "IsSymbol",
    "IsUndefined",
    # Leaf factories
    "Const",
    "Regexp",
    "IsEmail",
    "IsUuid",
    "IsUrl",
    "IsNumericString",
    "NumberRange",
    "IsType",
    "Predicate",
    # Combinators
    "Optional",
    "Nullable",
    "Union",
    "Intersection",
    "Object",
    "Array",
    "ArrayLength",
    "Tuple",
    "Record",
    "Enum",
    "PROTO_KEY",
    # Configuration
    "validation_context",
    "current_max_depth",
    "DEFAULT_MAX_DEPTH",
    # Schema
    "conforms",
    "infer",
    "to_pydantic",
]
