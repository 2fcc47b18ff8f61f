"""Uniform JSON envelope for every API response.

Every body has the same three keys::

    {"data": <payload | null>, "message": <str>, "error": <detail | null>}

``prepare_response`` builds the raw dict; ``json_response`` and
``error_response`` wrap it in a DRF ``Response`` with a status code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from rest_framework import status
from rest_framework.response import Response

from modules.core.validation import RequestValidationError


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [_dump(item) for item in data]
    return data


def prepare_response(data: Any = None, message: str = "", error: Any = None) -> dict[str, Any]:
    return {"data": _dump(data), "message": message, "error": error}


def json_response(
    data: Any,
    status_code: int = status.HTTP_200_OK,
    message: str = "OK",
) -> Response:
    return Response(prepare_response(data, message), status=status_code)


def error_response(status_code: int, error: Exception | None, message: str) -> Response:
    """Build an error envelope.

    Validation errors expose their field list; any other exception is
    rendered as its string.
    """
    if error is None:
        detail = None
    elif isinstance(error, RequestValidationError):
        detail = error.errors
    else:
        detail = str(error)
    return Response(prepare_response(None, message, detail), status=status_code)
