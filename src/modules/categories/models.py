"""Category model.

A category groups products in the catalog.  Names are unique;
``active`` hides a category from storefront listings without
detaching its products.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Category(BaseModel):
    name = models.CharField(max_length=128, unique=True)
    description = models.TextField(blank=True, default="")
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)
        if is_new:
            logger.info("category_created", category_id=str(self.id), name=self.name)

    def __str__(self) -> str:
        return self.name
