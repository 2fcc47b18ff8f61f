"""Shared exception types and the DRF exception handler.

``ServiceError`` is the base of every business-rule violation raised by a
service.  Views catch it (together with ``DatabaseError``) and pick the
status code for the operation; anything else propagates.
"""

from __future__ import annotations

import structlog
from django.db import DatabaseError
from rest_framework.views import exception_handler

from modules.core.responses import prepare_response

logger = structlog.get_logger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class RequestCancelled(ServiceError):
    """The request context was cancelled or its deadline passed."""


SERVICE_ERRORS = (ServiceError, DatabaseError)


def envelope_exception_handler(exc, context):
    """Render DRF-raised errors (405, 415, throttling...) in the envelope.

    Falls back to DRF's own handler for the status code and headers; only
    the body is rewritten to ``{data, message, error}``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data
    if isinstance(detail, dict) and "detail" in detail:
        message = str(detail["detail"])
        error = getattr(detail["detail"], "code", None)
    else:
        message = "Invalid parameters"
        error = detail

    logger.warning(
        "api.exception",
        status_code=response.status_code,
        exception=type(exc).__name__,
        error=message,
    )
    response.data = prepare_response(None, message, error)
    return response
