"""Django ORM implementation of the Category repository."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.categories.filters import CategoryFilter
from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Category]:
        try:
            return Category.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[Category]:
        return Category.objects.filter(name__iexact=name.strip()).first()

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Sequence[str] = (),
    ) -> models.QuerySet:
        queryset = Category.objects.all()
        if filters:
            queryset = CategoryFilter(filters, queryset=queryset).qs
        if ordering:
            queryset = queryset.order_by(*ordering)
        return queryset

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        entity.save()
        logger.info("category.saved", category_id=str(entity.id), name=entity.name)
        return entity
