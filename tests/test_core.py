"""
Tests for validator resolution and the composite validators.
"""

from dataclasses import dataclass

import pytest

from shapeguard import (
    ErrorResult,
    create_array_validator,
    create_context_path,
    create_equality_validator,
    create_one_of_validator,
    create_shape_validator,
    create_union_of_validator,
    ensure_validator,
    validation_context,
)


class TestEnsureValidator:
    def test_string_is_type_name(self):
        v = ensure_validator("string")
        assert v("hello") is None
        # Never an equality check, even for a matching literal
        assert ensure_validator("number")("number") is not None

    def test_class_is_instance_check(self):
        v = ensure_validator(int)
        assert v(3) is None
        assert v("3").message == 'Expected value to be an instance of int but received "3"'

    def test_callable_passes_through(self):
        def validator(value, context=None):
            return None

        assert ensure_validator(validator) is validator

    def test_mapping_is_shape(self):
        v = ensure_validator({"a": "number"})
        assert v({"a": 1}) is None
        assert v({"a": "x"}).path == "a"

    def test_single_item_list_is_array(self):
        v = ensure_validator(["number"])
        assert v([1, 2]) is None
        assert v([1, "x"]).path == "1"

    def test_literal_is_equality(self):
        assert ensure_validator(42)(42) is None
        assert ensure_validator(42)(43) is not None
        assert ensure_validator(None)(None) is None

    def test_multi_item_list_is_literal(self):
        spec = ["a", "b"]
        v = ensure_validator(spec)
        assert v(spec) is None
        assert v(["a", "b"]) is not None


class TestShapeValidator:
    def test_valid(self):
        v = create_shape_validator({"name": "string", "age": "number"})
        assert v({"name": "Ada", "age": 36}) is None

    def test_extra_keys_ignored(self):
        v = create_shape_validator({"name": "string"})
        assert v({"name": "Ada", "role": "admin"}) is None

    def test_first_failing_field_only(self):
        v = create_shape_validator({"a": "number", "b": "string"})
        error = v({"a": "x", "b": 1})
        assert error.path == "a"
        assert error.message == "Expected type number but received string"

    def test_missing_field_reads_as_null(self):
        error = create_shape_validator({"name": "string"})({})
        assert error.path == "name"
        assert error.message == "Expected type string but received null"

    def test_rejects_null(self):
        error = create_shape_validator({"a": "number"})(None)
        assert error.message == "Expected value to be a non-null object but received null"
        assert error.path == ""

    def test_rejects_primitive(self):
        error = create_shape_validator({"a": "number"})(5)
        assert error.message == "Expected type object but received number"

    def test_reads_attributes(self):
        @dataclass
        class User:
            name: str
            age: int

        v = create_shape_validator({"name": "string", "age": "number"})
        assert v(User("Ada", 36)) is None
        assert v(User("Ada", "old")).path == "age"

    def test_nested_path(self):
        v = ensure_validator({"a": {"b": ["number"]}})
        error = v({"a": {"b": [1, "x"]}})
        assert error.path == "a.b.1"

    def test_path_extends_given_context(self):
        v = create_shape_validator({"id": "number"})
        error = v({"id": None}, create_context_path("payload"))
        assert error.path == "payload.id"

    def test_validator_function_field(self):
        v = create_shape_validator({"status": create_one_of_validator(["on", "off"])})
        assert v({"status": "on"}) is None
        error = v({"status": "dim"})
        assert error.path == "status"
        assert error.message == 'Expected the value to be one of "on", "off" but received "dim"'


class TestArrayValidator:
    def test_valid(self):
        assert create_array_validator("number")([1, 2, 3]) is None
        assert create_array_validator("number")((1, 2)) is None
        assert create_array_validator("number")([]) is None

    def test_reports_index(self):
        error = create_array_validator("number")([1, 2, "x"])
        assert error.path == "2"

    def test_first_failing_index(self):
        error = create_array_validator("number")(["a", 2, "b"])
        assert error.path == "0"

    def test_rejects_non_array(self):
        error = create_array_validator("number")({"0": 1})
        assert error.message == "Expected type array but received object"
        assert create_array_validator("string")("abc").message == (
            "Expected type array but received string"
        )

    def test_array_of_shapes(self):
        v = create_array_validator({"name": "string"})
        error = v([{"name": "a"}, {"name": 2}], create_context_path("users"))
        assert error.path == "users.1.name"


class TestUnionOfValidator:
    def test_first_match_wins(self):
        v = create_union_of_validator(["string", "number"])
        assert v("x") is None
        assert v(1) is None

    def test_short_circuits(self):
        calls = []

        def first(value, context=None):
            calls.append("first")
            return None

        def second(value, context=None):
            calls.append("second")
            return None

        assert create_union_of_validator([first, second])(1) is None
        assert calls == ["first"]

    def test_combined_message(self):
        v = create_union_of_validator(
            [
                {"kind": create_equality_validator("a")},
                {"kind": create_equality_validator("b")},
            ]
        )
        error = v({"kind": "c"}, create_context_path("shape"))
        assert error.path == "shape"
        assert error.message == (
            "Expected the value to pass one of the provided validators:\n"
            'shape.kind |> Expected value to equal "a" but received "c"\n'
            'shape.kind |> Expected value to equal "b" but received "c"'
        )

    def test_reported_at_union_position(self):
        v = ensure_validator({"pet": create_union_of_validator([{"legs": "number"}, "null"])})
        error = v({"pet": {"legs": "four"}})
        assert error.path == "pet"
        lines = error.message.splitlines()
        assert lines[1] == "pet.legs |> Expected type number but received string"
        assert lines[2] == "pet |> Expected type null but received object"

    def test_rejects_non_sequence(self):
        with pytest.raises(TypeError):
            create_union_of_validator("string")


class TestRecursionGuard:
    def test_self_referential_spec_and_value(self):
        spec = {}
        spec["child"] = spec
        value = {}
        value["child"] = value

        with validation_context(max_depth=5):
            error = ensure_validator(spec)(value)

        assert isinstance(error, ErrorResult)
        assert error.message == "Maximum validation depth of 5 exceeded"
        assert error.path == "child.child.child.child.child"

    def test_within_depth(self):
        spec = {"a": {"b": {"c": "number"}}}
        with validation_context(max_depth=3):
            assert ensure_validator(spec)({"a": {"b": {"c": 1}}}) is None

    def test_nested_arrays(self):
        with validation_context(max_depth=2):
            error = ensure_validator([[["number"]]])([[[1]]])
        assert error.message == "Maximum validation depth of 2 exceeded"
        assert error.path == "0.0"
