"""Category API views.

Same request pipeline and status-code policy as the product views:
decode, validate, call the service with the request context, project the
result and write the envelope.
"""

from __future__ import annotations

import structlog
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.dtos import (
    CategoryListOutputDTO,
    CategoryOutputDTO,
    CreateCategoryDTO,
    ListCategoriesQueryDTO,
    UpdateCategoryDTO,
)
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.services import CategoryService, ICategoryService
from modules.core.binding import RequestDecodeError, bind_json, bind_query
from modules.core.context import RequestContext
from modules.core.exceptions import SERVICE_ERRORS
from modules.core.mapping import MappingError, project, project_many
from modules.core.responses import error_response, json_response, prepare_response
from modules.core.validation import RequestValidationError, Validator

logger = structlog.get_logger(__name__)

INVALID_PARAMETERS = "Invalid parameters"
SOMETHING_WENT_WRONG = "Something went wrong"


def build_category_service() -> CategoryService:
    return CategoryService(repository=CategoryDjangoRepository())


class CategoryViewSet(ViewSet):
    """Category endpoints under ``/api/v1/categories``."""

    lookup_url_kwarg = "uuid"

    service: ICategoryService | None = None
    validator: Validator | None = None
    log = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = build_category_service()
        if self.validator is None:
            self.validator = Validator()
        if self.log is None:
            self.log = logger

    @extend_schema(summary="Get category by uuid", tags=["categories"])
    def retrieve(self, request: Request, uuid: str | None = None) -> Response:
        ctx = RequestContext.from_request(request)
        try:
            category = self.service.get_category_by_id(ctx, uuid)
        except SERVICE_ERRORS as exc:
            self.log.error("category.get_failed", category_id=uuid, error=str(exc))
            return Response(
                prepare_response(None, str(exc)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            res = project(CategoryOutputDTO, category)
        except MappingError as exc:
            self.log.error("category.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(res)

    @extend_schema(summary="List categories", tags=["categories"])
    def list(self, request: Request) -> Response:
        try:
            query = self.validator.validate_struct(
                ListCategoriesQueryDTO, bind_query(request)
            )
        except RequestValidationError as exc:
            self.log.error("category.query_bind_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        ctx = RequestContext.from_request(request)
        try:
            categories, pagination = self.service.list_categories(ctx, query)
        except SERVICE_ERRORS as exc:
            self.log.error("category.list_failed", error=str(exc))
            return Response(
                prepare_response(None, str(exc)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            items = project_many(CategoryOutputDTO, categories)
        except MappingError as exc:
            self.log.error("category.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(CategoryListOutputDTO(categories=items, pagination=pagination))

    @extend_schema(summary="Create category", tags=["categories"])
    def create(self, request: Request) -> Response:
        try:
            data = bind_json(request)
        except RequestDecodeError as exc:
            self.log.error("category.body_bind_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        try:
            dto = self.validator.validate_struct(CreateCategoryDTO, data)
        except RequestValidationError as exc:
            self.log.error("category.validation_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        ctx = RequestContext.from_request(request)
        try:
            category = self.service.create(ctx, dto)
        except SERVICE_ERRORS as exc:
            self.log.error("category.create_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )

        try:
            res = project_many(CategoryOutputDTO, [category])
        except MappingError as exc:
            self.log.error("category.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(res)

    @extend_schema(summary="Update category", tags=["categories"])
    def update(self, request: Request, uuid: str | None = None) -> Response:
        try:
            data = bind_json(request)
        except RequestDecodeError as exc:
            self.log.error("category.body_bind_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        try:
            dto = self.validator.validate_struct(UpdateCategoryDTO, data)
        except RequestValidationError as exc:
            self.log.error("category.validation_failed", error=str(exc))
            return error_response(status.HTTP_400_BAD_REQUEST, exc, INVALID_PARAMETERS)

        ctx = RequestContext.from_request(request)
        try:
            category = self.service.update(ctx, uuid, dto)
        except SERVICE_ERRORS as exc:
            self.log.error("category.update_failed", category_id=uuid, error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )

        try:
            res = project_many(CategoryOutputDTO, [category])
        except MappingError as exc:
            self.log.error("category.map_failed", error=str(exc))
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, exc, SOMETHING_WENT_WRONG
            )
        return json_response(res)
