"""
Base class for request body models.

Request models forbid unknown keys and use strict types, so a body is
accepted only when it has exactly the expected shape.  ``parse``
validates a decoded JSON body and turns pydantic's error list into a
single ``ValidationError`` message: missing required properties are
reported first, then disallowed keys by name, then type mismatches.
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo

from ..core.errors import ValidationError


TYPE_MESSAGES = {
    "string_type": "must be a string",
    "int_type": "must be a string",
    "bool_type": "must be a boolean",
}


class RequestModel(BaseModel):
    """Strict request body; wire names only."""

    model_config = ConfigDict(extra="forbid")

    # Reported when a required property is absent or empty.
    missing_message: ClassVar[str] = "Request body missing a required property"

    @classmethod
    def wire_names(cls) -> List[str]:
        return [info.alias or name for name, info in cls.model_fields.items()]

    @classmethod
    def parse(cls, payload: Any):
        if isinstance(payload, cls):
            return payload
        try:
            return cls.model_validate(payload or {})
        except PydanticValidationError as exc:
            raise ValidationError(cls.describe_errors(exc.errors())) from exc

    @classmethod
    def describe_errors(cls, errors: List[Dict[str, Any]]) -> str:
        if any(cls._is_missing(err) for err in errors):
            return cls.missing_message

        extra = [str(err["loc"][0]) for err in errors if err["type"] == "extra_forbidden"]
        if extra:
            return (
                f"Request body contains more than allowed properties ({', '.join(cls.wire_names())}). "
                f"The request also contains these extra keys that are not allowed: {', '.join(extra)}"
            )

        err = errors[0]
        if not err["loc"]:
            return "Request body must be a JSON object"
        detail = TYPE_MESSAGES.get(err["type"], "is invalid")
        return f"Property {err['loc'][0]} {detail}"

    @classmethod
    def _field(cls, key: Any) -> Optional[FieldInfo]:
        for name, info in cls.model_fields.items():
            if (info.alias or name) == key:
                return info
        return None

    @classmethod
    def _is_missing(cls, err: Dict[str, Any]) -> bool:
        if err["type"] == "missing":
            return True
        if not err["loc"]:
            return False
        info = cls._field(err["loc"][0])
        # null and "" count as absent for required properties
        return info is not None and info.is_required() and err.get("input") in (None, "")
