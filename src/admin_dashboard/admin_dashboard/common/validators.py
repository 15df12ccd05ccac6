from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_YEAR_MONTH = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{field_name} must not be empty")
    return str(value).strip()


def require_hhmm(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _HHMM.match(value):
        raise ValueError(f"{field_name} must be HH:MM")
    return value


def require_year_month(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _YEAR_MONTH.match(value):
        raise ValueError(f"{field_name} must be YYYY-MM")
    return value


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
        msg = str(err.get("msg", "invalid value"))
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid payload"


def validate(schema: Type[M], payload: Optional[Mapping[str, Any]]) -> M:
    """Validate ``payload`` against ``schema``.

    Raises the domain ValidationError so callers only ever see one error type.
    """

    if payload is None:
        raise ValidationError("request body is required")
    if not isinstance(payload, Mapping):
        raise ValidationError("request body must be a JSON object")
    try:
        return schema.model_validate(dict(payload))
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e
