"""Category DTOs: request schemas and response projections.

Request DTOs carry only what a client may set and are checked by
``Validator.validate_struct``.  ``CategoryOutputDTO`` is the client-facing
projection filled from a ``Category`` by ``project``.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.core.pagination import PageQueryDTO, Pagination


def _strip(v):
    # Length is checked on the stripped value.
    return v.strip() if isinstance(v, str) else v


class CreateCategoryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=128)
    description: str = ""
    active: bool = True

    strip_name = field_validator("name", mode="before")(_strip)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v


class UpdateCategoryDTO(BaseModel):
    """All fields optional; only supplied fields are applied."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, max_length=128)
    description: str | None = None
    active: bool | None = None

    strip_name = field_validator("name", mode="before")(_strip)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("Name must not be empty.")
        return v


class ListCategoriesQueryDTO(PageQueryDTO):
    name: str | None = None
    active: bool | None = None

    def filters(self) -> dict[str, str]:
        return self.model_dump(mode="json", include={"name", "active"}, exclude_none=True)


class CategoryOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    name: str
    description: str
    active: bool
    created_at: datetime
    updated_at: datetime


class CategoryListOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    categories: list[CategoryOutputDTO]
    pagination: Pagination
