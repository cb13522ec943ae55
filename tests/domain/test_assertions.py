"""Tests for assert_type / assert_argument and caller attribution."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from offspring.domain import assertions
from offspring.domain.enums import EnumRegistry
from offspring.domain.errors import ArgumentError, TypeMismatchError
from offspring.domain.predicates import TypeChecker
from offspring.system import TypeSystem

THIS_FILE = Path(__file__).name


@pytest.fixture
def checker() -> TypeChecker:
    return TypeChecker(EnumRegistry())


class TestAssertType:
    def test_returns_value_unchanged(self, checker: TypeChecker) -> None:
        payload = {"a": 1}
        assert assertions.assert_type(checker, payload, "table") is payload
        assert assertions.assert_type(checker, 5, "string|number") == 5

    def test_message_without_label(self, checker: TypeChecker) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            assertions.assert_type(checker, "5", "number")
        assert str(exc_info.value) == "The type should be 'number' but was 'string'"
        assert exc_info.value.expected == "number"
        assert exc_info.value.actual == "string"
        assert exc_info.value.label is None

    def test_message_with_label(self, checker: TypeChecker) -> None:
        message = "^The type of width should be 'number' but was 'nil'$"
        with pytest.raises(TypeMismatchError, match=message):
            assertions.assert_type(checker, None, "number", "width")

    def test_is_a_type_error(self, checker: TypeChecker) -> None:
        with pytest.raises(TypeError):
            assertions.assert_type(checker, [], "string")

    def test_location_points_at_caller(self, checker: TypeChecker) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            assertions.assert_type(checker, 1, "string")
        location = exc_info.value.location
        assert location is not None
        assert THIS_FILE in location
        assert location.endswith(" in test_location_points_at_caller")

    def test_depth_moves_attribution_outward(self, checker: TypeChecker) -> None:
        def validate(value: Any) -> Any:
            return assertions.assert_type(checker, value, "string", depth=2)

        with pytest.raises(TypeMismatchError) as exc_info:
            validate(1)
        assert exc_info.value.location.endswith(" in test_depth_moves_attribution_outward")

    def test_location_none_when_stack_too_shallow(self, checker: TypeChecker) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            assertions.assert_type(checker, 1, "string", depth=100_000)
        assert exc_info.value.location is None


class TestAssertArgument:
    def test_returns_value_unchanged(self, checker: TypeChecker) -> None:
        assert assertions.assert_argument(checker, 1, "x", "string") == "x"

    def test_message(self, checker: TypeChecker) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            assertions.assert_argument(checker, 1, "x", "number")
        assert str(exc_info.value) == (
            "The type of argument #1 was expected to be 'number' but was 'string'"
        )
        assert exc_info.value.index == 1

    def test_attributed_to_callers_caller(self, checker: TypeChecker) -> None:
        def scale(factor: Any) -> Any:
            assertions.assert_argument(checker, 1, factor, "number")
            return factor

        with pytest.raises(ArgumentError) as exc_info:
            scale("big")
        assert exc_info.value.location.endswith(" in test_attributed_to_callers_caller")


class TestSystemAssertions:
    def test_assert_type_attribution(self, system: TypeSystem) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            system.assert_type({}, "string", "name")
        assert str(exc_info.value) == "The type of name should be 'string' but was 'table'"
        assert exc_info.value.location.endswith(" in test_assert_type_attribution")

    def test_assert_argument_attribution(self, system: TypeSystem) -> None:
        def resize(width: Any) -> Any:
            return system.assert_argument(1, width, "number")

        assert resize(3) == 3
        with pytest.raises(ArgumentError) as exc_info:
            resize(None)
        assert exc_info.value.location.endswith(" in test_assert_argument_attribution")

    def test_understands_classes_and_enums(self, system: TypeSystem) -> None:
        shape_cls = system.define_class("Shape")
        system.define_enum("Mode", {"ON": 1, "OFF": 0})
        shape = shape_cls()
        assert system.assert_type(shape, "Shape") is shape
        assert system.assert_type(1, "Mode") == 1
        with pytest.raises(TypeMismatchError, match="but was 'boolean'"):
            system.assert_type(True, "Mode")
        with pytest.raises(TypeMismatchError, match="but was 'Shape'"):
            system.assert_type(shape, "Mode")
