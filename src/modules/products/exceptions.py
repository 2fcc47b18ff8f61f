"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches them through ``ServiceError`` and
translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import ServiceError


class ProductAlreadyExists(ServiceError):
    """A product with the same SKU already exists."""


class ProductNotFound(ServiceError):
    """The requested product does not exist."""
