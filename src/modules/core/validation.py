"""Request validation against pydantic schemas.

``Validator.validate_struct`` takes a decoded mapping (JSON body or query
string) and a schema class, and either returns the validated, immutable
schema instance or raises ``RequestValidationError`` with one entry per
violated constraint::

    [{"field": "price", "message": "...", "type": "value_error"}]

The validator keeps no state and never mutates the input mapping, so a
single instance can be shared by concurrent requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

S = TypeVar("S", bound=BaseModel)


class RequestValidationError(Exception):
    """One or more declared constraints were violated."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        super().__init__(
            "; ".join(f"{err['field']}: {err['message']}" for err in errors)
        )


def field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten a pydantic ``ValidationError`` into field-level entries."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "__root__",
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


class Validator:
    def validate_struct(self, schema: type[S], data: Mapping[str, Any]) -> S:
        if not isinstance(data, Mapping):
            raise RequestValidationError(
                [
                    {
                        "field": "__root__",
                        "message": "Input should be an object",
                        "type": "dict_type",
                    }
                ]
            )
        try:
            return schema.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise RequestValidationError(field_errors(exc)) from exc
