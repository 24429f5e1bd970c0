"""
Tests for conforms(), infer() and to_pydantic().
"""

import typing
from typing import Any, Literal

import pytest
from pydantic import ValidationError
from typing_extensions import Never, get_type_hints, is_typeddict

from shapeguard import (
    UNDEFINED,
    Array,
    ArrayLength,
    Const,
    Enum,
    Intersection,
    IsAny,
    IsEmail,
    IsNumber,
    IsString,
    IsSymbol,
    Nullable,
    Object,
    Optional,
    Record,
    Symbol,
    Tuple,
    Union,
    conforms,
    infer,
    to_pydantic,
)


class TestConforms:
    def test_validator(self):
        assert conforms("a", IsString)
        assert not conforms(1, IsString)

    def test_shorthand(self):
        schema = {"name": str, "tags": [str]}
        assert conforms({"name": "Alice", "tags": ["a"]}, schema)
        assert not conforms({"name": "Alice", "tags": [1]}, schema)


class TestInfer:
    def test_kinds(self):
        assert infer(IsString) is str
        assert infer(IsNumber) == int | float
        assert infer(IsSymbol) is Symbol
        assert infer(IsAny) is Any

    def test_const(self):
        assert infer(Const("x")) == Literal["x"]
        assert infer(Const(3)) == Literal[3]
        assert infer(Const(UNDEFINED)) == Literal[UNDEFINED]
        assert infer(Const(1.5)) is float

    def test_enum(self):
        assert infer(Enum(["a", "b"])) == Literal["a", "b"]
        assert infer(Enum([])) is Never

    def test_optional_and_nullable(self):
        assert infer(Optional(IsString)) == typing.Optional[str]
        assert infer(Nullable(IsString)) == typing.Optional[str]

    def test_union(self):
        assert infer(Union([IsString, Const(1)])) == typing.Union[str, Literal[1]]
        assert infer(Union([])) is Never

    def test_sequences(self):
        assert infer(Array(IsString)) == list[str]
        assert infer(ArrayLength(IsString, min=1)) == list[str]
        assert infer(Tuple([IsString, IsNumber])) == tuple[str, int | float]

    def test_record(self):
        assert infer(Record(IsString)) == dict[str | int | float | Symbol, str]

    def test_object(self):
        hint = infer(Object({"name": IsString, "email": Optional(IsEmail)}))
        assert is_typeddict(hint)
        assert hint.__required_keys__ == frozenset({"name"})
        assert hint.__optional_keys__ == frozenset({"email"})

    def test_intersection_of_objects(self):
        hint = infer(
            Intersection(
                [
                    Object({"name": IsString}),
                    Object({"age": IsNumber, "nick": Optional(IsString)}),
                ]
            )
        )
        assert is_typeddict(hint)
        assert hint.__required_keys__ == frozenset({"name", "age"})
        assert hint.__optional_keys__ == frozenset({"nick"})

    def test_intersection_prefers_informative_field_type(self):
        left_any = infer(Intersection([Object({"a": IsAny}), Object({"a": IsString})]))
        right_any = infer(Intersection([Object({"a": IsString}), Object({"a": IsAny})]))
        assert get_type_hints(left_any)["a"] is str
        assert get_type_hints(right_any)["a"] is str

    def test_intersection_of_scalars(self):
        assert infer(IsAny & IsString) is str
        assert infer(Intersection([])) is Any

    def test_shorthand(self):
        assert infer([str]) == list[str]


class TestToPydantic:
    def test_simple_model(self):
        User = to_pydantic("User", Object({"name": IsString, "age": IsNumber}))
        user = User(name="Alice", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_optional_fields(self):
        User = to_pydantic("User", Object({"name": IsString, "email": Optional(IsString)}))
        user = User(name="Alice")
        assert user.name == "Alice"
        assert user.email is None

    def test_pydantic_validation(self):
        User = to_pydantic("User", Object({"name": IsString}))
        with pytest.raises(ValidationError):
            User()

    def test_literal_fields(self):
        Light = to_pydantic("Light", Object({"color": Enum(["red", "green"])}))
        assert Light(color="red").color == "red"
        with pytest.raises(ValidationError):
            Light(color="blue")

    def test_exact_forbids_extra(self):
        Strict = to_pydantic("Strict", Object({"name": IsString}, exact=True))
        assert Strict(name="Alice").name == "Alice"
        with pytest.raises(ValidationError):
            Strict(name="Alice", extra=1)

    def test_not_exact_ignores_extra(self):
        Loose = to_pydantic("Loose", Object({"name": IsString}))
        assert Loose(name="Alice", extra=1).name == "Alice"

    def test_dict_shorthand(self):
        Tagged = to_pydantic("Tagged", {"tags": [str]})
        assert Tagged(tags=["a", "b"]).tags == ["a", "b"]

    def test_undefined_field(self):
        Marker = to_pydantic("Marker", Object({"flag": Const(UNDEFINED)}))
        assert Marker().flag is None
        assert "flag" in Marker.model_fields

    def test_keys_that_are_not_attribute_names(self):
        Doc = to_pydantic("Doc", Object({"_id": IsString, "name": IsString}, exact=True))
        assert set(Doc.model_fields) == {"field_0", "name"}
        doc = Doc.model_validate({"_id": "x", "name": "a"})
        assert doc.model_dump(by_alias=True) == {"_id": "x", "name": "a"}
        with pytest.raises(ValidationError):
            Doc.model_validate({"name": "a"})

    def test_keys_shadowing_model_attributes(self):
        shape = {"copy": IsString, "schema": Optional(IsString), "class": IsNumber}
        Doc = to_pydantic("Doc", Object(shape))
        doc = Doc.model_validate({"copy": "c", "class": 1})
        assert doc.model_dump(by_alias=True) == {"copy": "c", "schema": None, "class": 1}
        assert callable(doc.copy)

    def test_non_object_schema(self):
        with pytest.raises(TypeError):
            to_pydantic("Name", IsString)
        with pytest.raises(TypeError):
            to_pydantic("Names", [str])
