"""Catalog API views.

Exposes ``ProductService`` and ``CategoryService`` via HTTP using DRF
ViewSets.  Validation failures and domain exceptions are translated into
the ``{success, errors}`` envelope with HTTP 422; the views never swallow
generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, inline_serializer
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import success_response, validation_error_response
from modules.products.dtos import field_errors
from modules.products.exceptions import CategoryNotFound
from modules.products.models import ProductCategory
from modules.products.repositories.django_repository import (
    CategoryDjangoRepository,
    ProductDjangoRepository,
)
from modules.products.serializers import (
    ProductCategorySerializer,
    ProductCreateSerializer,
    ProductSerializer,
)
from modules.products.services import CategoryService, ProductService

PRODUCT_CREATED_MESSAGE = "Product created successfully"

_validation_error_schema = inline_serializer(
    name="ValidationErrorEnvelope",
    fields={
        "success": serializers.BooleanField(default=False),
        "errors": serializers.DictField(
            child=serializers.ListField(child=serializers.CharField())
        ),
    },
)


class ProductViewSet(GenericViewSet):
    """Write endpoint for the Product resource (create only).

    Uses ``ProductService`` with the Django repositories (DIP).
    """

    serializer_class = ProductCreateSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    @extend_schema(
        request=ProductCreateSerializer,
        responses={
            201: inline_serializer(
                name="ProductCreatedEnvelope",
                fields={
                    "success": serializers.BooleanField(default=True),
                    "message": serializers.CharField(),
                    "data": ProductSerializer(),
                },
            ),
            422: _validation_error_schema,
        },
    )
    def create(self, request: Request) -> Response:
        """POST /products"""
        serializer = ProductCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            dto = serializer.to_dto()
        except PydanticValidationError as exc:
            return validation_error_response(field_errors(exc))

        try:
            product = self._service.create_product(dto)
        except CategoryNotFound as exc:
            return validation_error_response({"category_id": [str(exc)]})

        return success_response(
            ProductSerializer(product).data,
            message=PRODUCT_CREATED_MESSAGE,
            status_code=status.HTTP_201_CREATED,
        )


class CategoryViewSet(GenericViewSet):
    """Read endpoint for active product categories."""

    queryset = ProductCategory.objects.all()
    serializer_class = ProductCategorySerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    @extend_schema(
        responses={
            200: inline_serializer(
                name="CategoryListEnvelope",
                fields={
                    "success": serializers.BooleanField(default=True),
                    "data": ProductCategorySerializer(many=True),
                },
            ),
        },
    )
    def list(self, request: Request) -> Response:
        """GET /categories"""
        categories = self._service.list_active_categories()
        return success_response(ProductCategorySerializer(categories, many=True).data)
