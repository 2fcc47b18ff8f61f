"""Page-number pagination for service-layer listings."""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.paginator import Paginator
from django.db.models import QuerySet
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Pagination(BaseModel):
    """Metadata returned next to every listed page."""

    model_config = ConfigDict(frozen=True)

    page: int
    page_size: int
    total: int
    total_pages: int


class PageQueryDTO(BaseModel):
    """Common ``page`` / ``page_size`` query parameters.

    ``page_size`` above ``MAX_PAGE_SIZE`` is clamped instead of rejected.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE, ge=1)

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, v: int) -> int:
        return min(v, settings.MAX_PAGE_SIZE)


def paginate(queryset: QuerySet, page: int, page_size: int) -> tuple[list[Any], Pagination]:
    """Slice ``queryset`` into one page.

    A page past the end yields an empty list; an empty queryset reports
    ``total_pages == 0``.
    """
    paginator = Paginator(queryset, page_size)
    total = paginator.count
    total_pages = paginator.num_pages if total else 0

    items: list[Any] = []
    if page <= total_pages:
        items = list(paginator.page(page).object_list)

    return items, Pagination(
        page=page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
    )
