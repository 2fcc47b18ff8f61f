"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the Category aggregate."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Category]:
        """Retrieve a category by name (case-insensitive)."""
