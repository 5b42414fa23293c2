"""Tests for field_validators, validate_at and to_pydantic."""

import pytest
from pydantic import ValidationError as PydanticValidationError
from schemas import ForeignPrice, Positive

from structval import (
    MISSING,
    DescriptorError,
    Dict,
    Enum,
    Int,
    List,
    Maybe,
    Num,
    Str,
    Struct,
    Tuple,
    field_validators,
    to_pydantic,
    validate_at,
)


class TestFieldValidators:
    def test_one_per_field(self, person):
        checks = field_validators(person)
        assert list(checks) == ["name", "age", "tags", "status"]

    def test_field_path_and_messages(self, person):
        checks = field_validators(person, messages={"name": "bad name"})
        result = checks["name"](42)
        assert result.first_error().path == ("name",)
        assert result.first_error().message == "bad name"
        assert checks["name"]("Ada").is_valid()

    def test_messages_follow_seeded_path(self, person):
        messages = {"people": {0: {"tags": {1: "bad tag"}, "name": "bad name"}}}
        checks = field_validators(person, messages=messages, path=("people", 0))
        assert checks["tags"](["a", 2]).messages == ["bad tag"]
        assert checks["name"](None).messages == ["bad name"]
        assert checks["status"]("gone").messages == [
            'people[0].status is "gone", should be a Status'
        ]

    def test_nested_field_paths(self, person):
        checks = field_validators(person, path=("people", 0))
        result = checks["tags"](["a", 2])
        assert result.first_error().path == ("people", 0, "tags", 1)

    def test_requires_struct(self):
        with pytest.raises(DescriptorError):
            field_validators(List(Str))

    def test_dict_shorthand(self):
        checks = field_validators({"x": int})
        assert checks["x"]("a").first_error().message == 'x is "a", should be a Int'


class TestValidateAt:
    def test_sub_value(self):
        doc = {"order": {"items": [{"qty": 1}, {"qty": "many"}]}}
        result = validate_at(doc, Int, "order.items[1].qty")
        error = result.first_error()
        assert error.path == ("order", "items", 1, "qty")
        assert error.message == 'order.items[1].qty is "many", should be a Int'

    def test_absent_path(self):
        result = validate_at({"a": {}}, Str, ("a", "b"))
        assert result.first_error().value is MISSING
        assert validate_at({"a": {}}, Maybe(Str), ("a", "b")).is_valid()


class TestToPydantic:
    def test_simple_model(self):
        User = to_pydantic("User", Struct({"name": Str, "age": Int}))
        user = User(name="Alice", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_optional_fields(self):
        User = to_pydantic("User", Struct({"name": Str, "email": Maybe(Str)}))
        user = User(name="Alice")
        assert user.email is None

    def test_required_field(self):
        User = to_pydantic("User", Struct({"name": Str}))
        with pytest.raises(PydanticValidationError):
            User()

    def test_subtype_predicate(self):
        Item = to_pydantic("Item", Struct({"qty": Positive}))
        assert Item(qty=2).qty == 2
        with pytest.raises(PydanticValidationError):
            Item(qty=-1)

    def test_enum_literal(self):
        Light = to_pydantic("Light", Struct({"color": Enum(("red", "green"), "Color")}))
        assert Light(color="red").color == "red"
        with pytest.raises(PydanticValidationError):
            Light(color="blue")

    def test_nested_and_containers(self):
        Order = to_pydantic(
            "Order",
            Struct(
                {
                    "price": ForeignPrice,
                    "tags": List(Str),
                    "pos": Tuple((Num, Num)),
                    "stock": Dict(Str, Int),
                }
            ),
        )
        order = Order(
            price={"currency": "USD", "amount": 5},
            tags=["a"],
            pos=(1.0, 2.0),
            stock={"a": 1},
        )
        assert order.price.currency == "USD"
        assert order.tags == ["a"]
        assert order.pos == (1.0, 2.0)
        assert order.stock == {"a": 1}

    def test_requires_struct(self):
        with pytest.raises(DescriptorError):
            to_pydantic("Bad", Str)
