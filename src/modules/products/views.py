"""Product API views.

Each handler runs one request through the same pipeline: decode the body
or query string, validate it, call ``IProductService`` with the request
context, project the result onto ``ProductOutputDTO`` and write the
envelope.  The service is never called when decoding or validation fails.

Status codes:
- decode / validation failure: 400 ``"Invalid parameters"``
- service error on reads: 400 with the error text as message
- service error on writes: 500 ``"Something went wrong"``
- projection failure: 500 ``"Something went wrong"``
- success: 200 (create and update answer with a one-element list)
"""

from __future__ import annotations

import structlog
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.core.binding import RequestDecodeError, bind_json, bind_query
from modules.core.context import RequestContext
from modules.core.exceptions import SERVICE_ERRORS
from modules.core.mapping import MappingError, project, project_many
from modules.core.responses import error_response, json_response, prepare_response
from modules.core.validation import RequestValidationError, Validator
from modules.products.dtos import (
    CreateProductDTO,
    ListProductsQueryDTO,
    ProductListOutputDTO,
    ProductOutputDTO,
    UpdateProductDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import IProductService, ProductService

logger = structlog.get_logger(__name__)

INVALID_PARAMETERS = "Invalid parameters"
SOMETHING_WENT_WRONG = "Something went wrong"


def build_product_service() -> ProductService:
    """Composition root for the product endpoints."""
    return ProductService(
        repository=ProductDjangoRepository(),
        category_repository=CategoryDjangoRepository(),
    )


class ProductViewSet(ViewSet):
    """Product endpoints under ``/api/v1/products``.

    ``service``, ``validator`` and ``log`` can be supplied through
    ``as_view(...)`` keyword arguments; by default they come from
    ``build_product_service()`` and the module logger.
    """

    lookup_url_kwarg = "uuid"

    service: IProductService | None = None
    validator: Validator | None = None
    log = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = build_product_service()
        if self.validator is None:
            self.validator = Validator()
        if self.log is None:
            self.log = logger

    # ------------------------------------------------------------------
    # Retrieve / List
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Get product by uuid",
        tags=["products"],
        parameters=[OpenApiParameter("uuid", str, OpenApiParameter.PATH)],
    )
    def retrieve(self, request: Request, uuid: str | None = None) -> Response:
        """GET /api/v1/products/{uuid}"""
        ctx = RequestContext.from_request(request)
        try:
            product = self.service.get_product_by_id(ctx, uuid)
        except SERVICE_ERRORS as exc:
            self.log.error("product.get_failed", product_id=uuid, error=str(exc))
            return Response(
                prepare_response(None, str(exc)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            res = project(ProductOutputDTO, product)
        except MappingError as exc:
            self.log.error("product.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(res)

    @extend_schema(summary="List products", tags=["products"])
    def list(self, request: Request) -> Response:
        """GET /api/v1/products"""
        try:
            query = self.validator.validate_struct(
                ListProductsQueryDTO, bind_query(request)
            )
        except RequestValidationError as exc:
            self.log.error("product.query_bind_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        ctx = RequestContext.from_request(request)
        try:
            products, pagination = self.service.list_products(ctx, query)
        except SERVICE_ERRORS as exc:
            self.log.error("product.list_failed", error=str(exc))
            return Response(
                prepare_response(None, str(exc)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            items = project_many(ProductOutputDTO, products)
        except MappingError as exc:
            self.log.error("product.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(ProductListOutputDTO(products=items, pagination=pagination))

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    @extend_schema(summary="Create product", tags=["products"])
    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        try:
            data = bind_json(request)
        except RequestDecodeError as exc:
            self.log.error("product.body_bind_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        try:
            dto = self.validator.validate_struct(CreateProductDTO, data)
        except RequestValidationError as exc:
            self.log.error("product.validation_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        ctx = RequestContext.from_request(request)
        try:
            product = self.service.create(ctx, dto)
        except SERVICE_ERRORS as exc:
            self.log.error("product.create_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )

        try:
            res = project_many(ProductOutputDTO, [product])
        except MappingError as exc:
            self.log.error("product.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(res)

    @extend_schema(
        summary="Update product",
        tags=["products"],
        parameters=[OpenApiParameter("uuid", str, OpenApiParameter.PATH)],
    )
    def update(self, request: Request, uuid: str | None = None) -> Response:
        """PUT /api/v1/products/{uuid}"""
        try:
            data = bind_json(request)
        except RequestDecodeError as exc:
            self.log.error("product.body_bind_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        try:
            dto = self.validator.validate_struct(UpdateProductDTO, data)
        except RequestValidationError as exc:
            self.log.error("product.validation_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        ctx = RequestContext.from_request(request)
        try:
            product = self.service.update(ctx, uuid, dto)
        except SERVICE_ERRORS as exc:
            self.log.error("product.update_failed", product_id=uuid, error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )

        try:
            res = project_many(ProductOutputDTO, [product])
        except MappingError as exc:
            self.log.error("product.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(res)
