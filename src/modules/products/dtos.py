"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ListProductsQueryDTO``: query-string filters, ordering and paging.
- ``ProductOutputDTO``: client-facing projection of a ``Product``.
- ``ProductListOutputDTO``: one page of products plus pagination.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.core.pagination import PageQueryDTO, Pagination

ProductStatusValue = Literal["active", "inactive"]
ProductOrderField = Literal["name", "price", "stock_quantity", "created_at"]

# Upper bound of the PositiveIntegerField column.
MAX_STOCK_QUANTITY = 2147483647

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``sku`` and ``name`` are non-empty strings.
    - ``price`` is a Decimal greater than zero, at most two decimals.
    - ``stock_quantity`` is non-negative and fits the stock column.
    """

    model_config = ConfigDict(frozen=True)

    sku: str = Field(max_length=64)
    name: str = Field(max_length=255)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    description: str = ""
    stock_quantity: int = Field(default=0, le=MAX_STOCK_QUANTITY)
    category_id: UUID | None = None

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v

    @field_validator("sku", mode="before")
    @classmethod
    def strip_sku(cls, v):
        # Length is checked on the stripped value.
        return v.strip() if isinstance(v, str) else v

    @field_validator("sku")
    @classmethod
    def sku_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("SKU must not be empty.")
        return v.upper()

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, max_length=255)
    price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    description: str | None = None
    stock_quantity: int | None = Field(default=None, le=MAX_STOCK_QUANTITY)
    status: ProductStatusValue | None = None
    category_id: UUID | None = None

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v


class ListProductsQueryDTO(PageQueryDTO):
    """Query-string parameters of ``GET /products``."""

    name: str | None = None
    sku: str | None = None
    status: ProductStatusValue | None = None
    category_id: UUID | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    order_by: ProductOrderField = "created_at"
    order_desc: bool = True

    def filters(self) -> dict[str, str]:
        """Filter values keyed by ``ProductFilter`` field name."""
        return self.model_dump(
            mode="json",
            include={"name", "sku", "status", "category_id", "min_price", "max_price"},
            exclude_none=True,
        )

    def ordering(self) -> tuple[str, str]:
        prefix = "-" if self.order_desc else ""
        return f"{prefix}{self.order_by}", f"{prefix}id"


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable projection of a ``Product`` for API responses."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    sku: str
    name: str
    description: str
    price: Decimal
    stock_quantity: int
    status: str
    category_id: UUID | None
    created_at: datetime
    updated_at: datetime


class ProductListOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    products: list[ProductOutputDTO]
    pagination: Pagination
