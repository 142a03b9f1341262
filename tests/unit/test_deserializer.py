"""
Unit tests for deserializer.py
"""

import json

import pytest

from errserial import deserialize_error, ErrorObject, NonError, RestoredError
from errserial.core.constants import CIRCULAR_SENTINEL, NON_ERROR_NAME
from errserial.core.fields import FieldMap


def assert_non_error(value):
    deserialized = deserialize_error(value)
    assert isinstance(deserialized, Exception)
    assert isinstance(deserialized, NonError)
    assert deserialized.name == NON_ERROR_NAME
    assert deserialized.message == json.dumps(value, separators=(",", ":"))
    return deserialized


class TestNonErrorWrapping:
    """Test values that are not mappings are wrapped."""

    def test_deserialize_null(self):
        assert_non_error(None)

    def test_deserialize_number(self):
        assert_non_error(1)

    def test_deserialize_boolean(self):
        assert_non_error(True)

    def test_deserialize_string(self):
        assert_non_error("123")

    def test_deserialize_array(self):
        error = assert_non_error([1])
        assert error.message == "[1]"

    def test_compact_json_text(self):
        """Test JSON text uses no spaces."""
        assert deserialize_error([1, {"a": 2}]).message == '[1,{"a":2}]'

    def test_unrenderable_value_falls_back_to_str(self):
        """Test values json cannot render use str()."""
        assert deserialize_error(float("nan")).message == "nan"
        assert deserialize_error(set).message == str(set)

    def test_wrapped_value_kept(self):
        """Test the original value is reachable."""
        assert deserialize_error([1]).value == [1]


class TestPassthrough:
    """Test existing errors are returned as they are."""

    def test_deserialize_error(self):
        """Test identity passthrough."""
        error = ValueError("test")
        deserialized = deserialize_error(error)

        assert deserialized is error
        assert str(deserialized) == "test"

    def test_restored_error_passthrough(self):
        """Test a restored error is not rebuilt."""
        restored = deserialize_error({"message": "m"})
        assert deserialize_error(restored) is restored


class TestRestore:
    """Test rebuilding errors from mappings."""

    def test_preserves_existing_properties(self):
        """Test custom fields survive."""
        deserialized = deserialize_error({"message": "foo", "custom_property": True})

        assert isinstance(deserialized, Exception)
        assert isinstance(deserialized, RestoredError)
        assert deserialized.message == "foo"
        assert deserialized.custom_property is True

    def test_plain_object(self, plain_error_data):
        """Test reserved fields are restored."""
        deserialized = deserialize_error(plain_error_data)

        assert deserialized.message == "error message"
        assert deserialized.stack == "at <anonymous>:1:13"
        assert deserialized.name == "name"
        assert deserialized.code == "code"

    def test_visibility(self, plain_error_data):
        """Test name, stack and message hidden, other fields visible."""
        deserialized = deserialize_error(plain_error_data)
        visible = list(deserialized.fields())

        for prop in ("message", "stack", "name"):
            assert prop not in visible
            assert not deserialized.is_visible(prop)

        for prop in ("code", "path", "errno", "syscall", "random_property"):
            assert prop in visible

    def test_defaults_without_reserved_fields(self):
        """Test a mapping without reserved fields."""
        deserialized = deserialize_error({"detail": "x"})

        assert deserialized.name == "Error"
        assert deserialized.message == ""
        assert deserialized.fields() == {"detail": "x"}

    def test_does_not_mutate_input(self, plain_error_data):
        """Test input mapping is left as it was."""
        before = dict(plain_error_data)
        deserialize_error(plain_error_data)
        assert plain_error_data == before

    def test_nested_reserved_fields_hidden(self):
        """Test nested mappings carry visibility too."""
        deserialized = deserialize_error({
            "message": "outer",
            "inner": {"message": "x", "name": "Inner", "k": 1},
        })

        inner = deserialized.inner
        assert isinstance(inner, FieldMap)
        assert inner["message"] == "x"
        assert inner["name"] == "Inner"
        assert dict(inner) == {"k": 1}

    def test_circular_input(self):
        """Test cycles collapse during deserialization."""
        data = {"message": "m"}
        data["loop"] = data

        deserialized = deserialize_error(data)

        assert deserialized.loop == CIRCULAR_SENTINEL
        assert data["loop"] is data

    def test_drops_functions(self):
        """Test callables are not copied onto the error."""
        deserialized = deserialize_error({"message": "m", "fn": print})
        assert "fn" not in deserialized

    def test_field_colliding_with_exception_attribute(self):
        """Test item access reaches fields shadowed by Exception attributes."""
        deserialized = deserialize_error({"args": [1, 2]})
        assert deserialized["args"] == [1, 2]

    def test_object_input(self):
        """Test plain objects are restored like mappings."""
        class Payload:
            def __init__(self):
                self.message = "from object"
                self.status = 503

        deserialized = deserialize_error(Payload())

        assert isinstance(deserialized, RestoredError)
        assert deserialized.message == "from object"
        assert deserialized.fields() == {"status": 503}

    def test_error_object_input(self):
        """Test pydantic ErrorObject input skips unset fields."""
        deserialized = deserialize_error(ErrorObject(message="m", code="E1", detail="d"))

        assert deserialized.message == "m"
        assert deserialized.code == "E1"
        assert deserialized.detail == "d"
        assert deserialized.name == "Error"
        assert deserialized.fields() == {"code": "E1", "detail": "d"}

    def test_raise_restored(self):
        """Test restored errors can be raised and matched by message."""
        with pytest.raises(RestoredError, match="boom"):
            raise deserialize_error({"message": "boom"})
