"""Decoding of request bodies and query strings into plain mappings.

Decoding is kept apart from validation: a body that is empty, is not
JSON, or is not a JSON object fails here with ``RequestDecodeError``
before any constraint is checked.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request


class RequestDecodeError(Exception):
    """The request body or query string could not be decoded."""


def bind_json(request: Request) -> dict[str, Any]:
    """Return a copy of the JSON object sent in the request body."""
    try:
        content_length = int(request.META.get("CONTENT_LENGTH") or 0)
    except (ValueError, TypeError):
        content_length = 0
    if content_length <= 0:
        raise RequestDecodeError("Request body is empty.")

    try:
        data = request.data
    except (ParseError, UnsupportedMediaType) as exc:
        raise RequestDecodeError(str(exc.detail)) from exc

    if not isinstance(data, Mapping):
        raise RequestDecodeError("Request body must be a JSON object.")
    return dict(data)


def bind_query(request: Request) -> dict[str, str]:
    """Return the query string as a flat mapping (last value wins)."""
    return request.query_params.dict()
