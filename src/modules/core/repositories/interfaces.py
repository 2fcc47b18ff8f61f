"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
catalog repository interfaces extend.  Service-layer code depends on
this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Sequence, TypeVar

from django.db import models

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Category``, ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` if absent or malformed."""

    @abstractmethod
    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Sequence[str] = (),
    ) -> models.QuerySet:
        """Return a lazy, ordered queryset of entities matching ``filters``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""
