"""
errserial/schema.py - Plain error data shape

ErrorObject describes what serialize_error produces for an error and what
deserialize_error consumes: optional string name, stack, message and code,
plus any number of extra fields.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from errserial.errors.taxonomy import SchemaError


class ErrorObject(BaseModel):
    """Plain-data error record."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    stack: Optional[str] = None
    message: Optional[str] = None
    code: Optional[str] = None

    @property
    def extra_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


def validate_error_object(data: Any) -> ErrorObject:
    """
    Validate serialized data against the ErrorObject shape.

    Raises:
        SchemaError: If data is not a mapping or a reserved field has the
            wrong type.
    """
    if not isinstance(data, dict):
        raise SchemaError(
            f"Serialized error must be a mapping, got {type(data).__name__}",
            details={"value": data if isinstance(data, (str, int, float, bool)) else repr(data)},
        )
    try:
        return ErrorObject.model_validate(data)
    except PydanticValidationError as e:
        raise SchemaError(
            f"Serialized error doesn't match ErrorObject: {e}",
            details={"errors": [
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
            ]},
        ) from e
