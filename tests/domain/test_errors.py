"""Tests for the exception taxonomy."""

import pytest

from offspring.domain.errors import (
    ArgumentError,
    DuplicateDefinitionError,
    EnumAccessError,
    OffspringError,
    TypeMismatchError,
)


class TestHierarchy:
    def test_argument_error_is_type_error(self) -> None:
        assert issubclass(ArgumentError, TypeError)
        assert issubclass(ArgumentError, OffspringError)

    def test_type_mismatch_is_type_error(self) -> None:
        assert issubclass(TypeMismatchError, TypeError)

    def test_duplicate_is_value_error(self) -> None:
        assert issubclass(DuplicateDefinitionError, ValueError)

    def test_enum_access_is_key_and_attribute_error(self) -> None:
        assert issubclass(EnumAccessError, KeyError)
        assert issubclass(EnumAccessError, AttributeError)


class TestMessages:
    def test_duplicate_names_enum(self) -> None:
        err = DuplicateDefinitionError("Color")
        assert str(err) == "Enum Color is already defined!"
        assert err.name == "Color"

    def test_enum_access_message_not_quoted(self) -> None:
        err = EnumAccessError("Key X does not exist in enum Color", enum_name="Color", key="X")
        assert str(err) == "Key X does not exist in enum Color"
        assert err.enum_name == "Color"
        assert err.key == "X"

    def test_type_mismatch_carries_diagnostics(self) -> None:
        err = TypeMismatchError("msg", expected="number", actual="string", label="width")
        assert err.expected == "number"
        assert err.actual == "string"
        assert err.label == "width"
        assert err.location is None

    def test_enum_access_caught_as_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise EnumAccessError("boom", enum_name="E", key="k")
