"""
Unit tests for errors/taxonomy.py
"""

import json

from errserial import serialize_error, deserialize_error
from errserial.errors.taxonomy import (
    ConfigError,
    DepthLimitError,
    ErrorCode,
    ErrserialError,
    SchemaError,
)


class TestErrorCodes:
    """Test error code values."""

    def test_code_values(self):
        assert ErrorCode.TRAVERSAL_DEPTH.value == 1001
        assert ErrorCode.SCHEMA_INVALID.value == 2001
        assert ErrorCode.CONFIG_INVALID.value == 3001


class TestErrserialErrors:
    """Test library exceptions."""

    def test_depth_limit_error(self):
        error = DepthLimitError(depth=12, max_depth=10)

        assert isinstance(error, ErrserialError)
        assert error.error_code is ErrorCode.TRAVERSAL_DEPTH
        assert error.code == "TRAVERSAL_DEPTH"
        assert error.details == {"depth": 12, "max_depth": 10}
        assert "12" in str(error)

    def test_default_codes(self):
        assert SchemaError("x").code == "SCHEMA_INVALID"
        assert ConfigError("x").code == "CONFIG_INVALID"

    def test_explicit_code(self):
        error = ErrserialError("x", code=ErrorCode.CONFIG_INVALID)
        assert error.error_code is ErrorCode.CONFIG_INVALID

    def test_to_dict(self):
        d = ConfigError("bad", details={"field": "f"}).to_dict()

        assert d == {
            "code": "CONFIG_INVALID",
            "number": 3001,
            "message": "bad",
            "details": {"field": "f"},
        }

    def test_serializes_to_plain_data(self):
        """Test library errors cross a JSON boundary."""
        serialized = serialize_error(DepthLimitError(depth=3, max_depth=2))
        data = json.loads(json.dumps(serialized))

        assert data["name"] == "DepthLimitError"
        assert data["code"] == "TRAVERSAL_DEPTH"
        assert data["details"] == {"depth": 3, "max_depth": 2}
        assert data["depth"] == 3

        restored = deserialize_error(data)
        assert restored.name == "DepthLimitError"
        assert restored.code == "TRAVERSAL_DEPTH"
        assert restored.message == str(DepthLimitError(depth=3, max_depth=2))
