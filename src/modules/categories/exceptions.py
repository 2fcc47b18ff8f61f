"""Category domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches them through ``ServiceError``.
"""

from __future__ import annotations

from modules.core.exceptions import ServiceError


class CategoryAlreadyExists(ServiceError):
    """A category with the same name already exists."""


class CategoryNotFound(ServiceError):
    """The requested category does not exist."""
