"""Category service layer (Use Cases).

Orchestrates business logic for the Category aggregate, delegating
persistence to the injected ``ICategoryRepository``.  Every operation
receives the caller's ``RequestContext`` and stops as soon as it is
cancelled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Tuple

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryAlreadyExists, CategoryNotFound
from modules.categories.models import Category
from modules.core.pagination import Pagination, paginate

if TYPE_CHECKING:
    from modules.categories.dtos import (
        CreateCategoryDTO,
        ListCategoriesQueryDTO,
        UpdateCategoryDTO,
    )
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.core.context import RequestContext


class ICategoryService(ABC):
    @abstractmethod
    def get_category_by_id(self, ctx: RequestContext, id: str) -> Category: ...

    @abstractmethod
    def list_categories(
        self, ctx: RequestContext, query: ListCategoriesQueryDTO
    ) -> Tuple[List[Category], Pagination]: ...

    @abstractmethod
    def create(self, ctx: RequestContext, dto: CreateCategoryDTO) -> Category: ...

    @abstractmethod
    def update(self, ctx: RequestContext, id: str, dto: UpdateCategoryDTO) -> Category: ...


class CategoryService(ICategoryService):
    """Application service for Category use-cases."""

    def __init__(self, repository: ICategoryRepository, logger=None) -> None:
        self._repo = repository
        self._log = logger or structlog.get_logger(__name__)

    def get_category_by_id(self, ctx: RequestContext, id: str) -> Category:
        ctx.raise_if_cancelled()
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")
        return category

    def list_categories(
        self, ctx: RequestContext, query: ListCategoriesQueryDTO
    ) -> Tuple[List[Category], Pagination]:
        ctx.raise_if_cancelled()
        queryset = self._repo.list(query.filters(), ordering=("name", "id"))
        return paginate(queryset, query.page, query.page_size)

    @transaction.atomic
    def create(self, ctx: RequestContext, dto: CreateCategoryDTO) -> Category:
        """Create a category.

        Raises:
            CategoryAlreadyExists: if the name is already taken.
        """
        ctx.raise_if_cancelled()
        log = self._log.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("category.duplicate_name")
            raise CategoryAlreadyExists(f"Category '{dto.name}' already exists.")

        category = Category(
            name=dto.name,
            description=dto.description,
            active=dto.active,
        )
        category = self._repo.save(category)
        log.info("category.created", category_id=str(category.id))
        return category

    @transaction.atomic
    def update(self, ctx: RequestContext, id: str, dto: UpdateCategoryDTO) -> Category:
        """Apply the supplied fields to an existing category.

        Raises:
            CategoryNotFound: if the category does not exist.
            CategoryAlreadyExists: if the new name belongs to another category.
        """
        ctx.raise_if_cancelled()
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")

        log = self._log.bind(category_id=str(id))

        if dto.name is not None and dto.name.lower() != category.name.lower():
            if self._repo.get_by_name(dto.name):
                log.warning("category.duplicate_name", name=dto.name)
                raise CategoryAlreadyExists(f"Category '{dto.name}' already exists.")

        for field in ("name", "description", "active"):
            value = getattr(dto, field)
            if value is not None:
                setattr(category, field, value)

        category = self._repo.save(category)
        log.info("category.updated")
        return category
