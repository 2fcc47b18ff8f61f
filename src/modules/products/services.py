"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and category look-ups
to the injected ``ICategoryRepository``.

Business rules enforced here:
- SKU must be unique.
- A referenced category must exist.
- Price > 0 and stock >= 0 (validated by the DTOs).

Every operation receives the caller's ``RequestContext`` and stops as
soon as it is cancelled or past its deadline.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple
from uuid import UUID

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryNotFound
from modules.core.pagination import Pagination, paginate
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.core.context import RequestContext
    from modules.products.dtos import (
        CreateProductDTO,
        ListProductsQueryDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository


class IProductService(ABC):
    """Contract consumed by the product views."""

    @abstractmethod
    def get_product_by_id(self, ctx: RequestContext, id: str) -> Product: ...

    @abstractmethod
    def list_products(
        self, ctx: RequestContext, query: ListProductsQueryDTO
    ) -> Tuple[List[Product], Pagination]: ...

    @abstractmethod
    def create(self, ctx: RequestContext, dto: CreateProductDTO) -> Product: ...

    @abstractmethod
    def update(self, ctx: RequestContext, id: str, dto: UpdateProductDTO) -> Product: ...


class ProductService(IProductService):
    """Application service for Product use-cases.

    Receives its repositories (and optionally a logger) via constructor
    injection.
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
        logger=None,
    ) -> None:
        self._repo = repository
        self._categories = category_repository
        self._log = logger or structlog.get_logger(__name__)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product_by_id(self, ctx: RequestContext, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        ctx.raise_if_cancelled()
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        self._log.info("product.retrieved", product_id=str(id))
        return product

    def list_products(
        self, ctx: RequestContext, query: ListProductsQueryDTO
    ) -> Tuple[List[Product], Pagination]:
        """Return one page of products matching the query filters."""
        ctx.raise_if_cancelled()
        queryset = self._repo.list(query.filters(), ordering=query.ordering())
        products, pagination = paginate(queryset, query.page, query.page_size)
        self._log.info(
            "product.listed",
            count=len(products),
            total=pagination.total,
            page=pagination.page,
        )
        return products, pagination

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, ctx: RequestContext, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing uniqueness rules.

        Raises:
            ProductAlreadyExists: if SKU is already taken.
            CategoryNotFound: if ``category_id`` does not reference a category.
        """
        ctx.raise_if_cancelled()
        log = self._log.bind(sku=dto.sku)

        if self._repo.get_by_sku(dto.sku):
            log.warning("product.duplicate_sku")
            raise ProductAlreadyExists(f"SKU '{dto.sku}' already registered.")

        product = Product(
            sku=dto.sku,
            name=dto.name,
            price=dto.price,
            description=dto.description,
            stock_quantity=dto.stock_quantity,
            category=self._resolve_category(dto.category_id),
        )

        ctx.raise_if_cancelled()
        product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update(self, ctx: RequestContext, id: str, dto: UpdateProductDTO) -> Product:
        """Update an existing product with the supplied fields.

        Raises:
            ProductNotFound: if the product does not exist.
            CategoryNotFound: if ``category_id`` does not reference a category.
        """
        ctx.raise_if_cancelled()
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        log = self._log.bind(product_id=str(id))

        for field in ("name", "price", "description", "stock_quantity", "status"):
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        if dto.category_id is not None:
            product.category = self._resolve_category(dto.category_id)

        ctx.raise_if_cancelled()
        product = self._repo.save(product)
        log.info("product.updated")
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_category(self, category_id: Optional[UUID]) -> Optional[Category]:
        if category_id is None:
            return None
        category = self._categories.get_by_id(str(category_id))
        if not category:
            raise CategoryNotFound(f"Category {category_id} not found.")
        return category
