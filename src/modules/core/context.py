"""Per-request cancellable context handed to the service layer.

A ``RequestContext`` carries the correlation id of the request and an
optional deadline (``REQUEST_TIMEOUT_SECONDS``).  It can also be
cancelled explicitly from another thread.  Services call
``raise_if_cancelled()`` before each unit of work so an abandoned request
stops early instead of finishing writes nobody will read.
"""

from __future__ import annotations

import threading
import time

from django.conf import settings
from rest_framework.request import Request

from modules.core.exceptions import RequestCancelled
from modules.core.middleware import correlation_id_var


class RequestContext:
    def __init__(self, correlation_id: str = "", timeout: float | None = None) -> None:
        self.correlation_id = correlation_id
        self._deadline = time.monotonic() + timeout if timeout else None
        self._cancelled = threading.Event()

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        cid = getattr(request, "correlation_id", "") or correlation_id_var.get()
        return cls(correlation_id=cid, timeout=settings.REQUEST_TIMEOUT_SECONDS)

    @classmethod
    def background(cls) -> RequestContext:
        """Context with no deadline, for management commands and shells."""
        return cls()

    def cancel(self) -> None:
        self._cancelled.set()

    def raise_if_cancelled(self) -> None:
        if self._cancelled.is_set():
            raise RequestCancelled("Request was cancelled.")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise RequestCancelled("Request deadline exceeded.")
