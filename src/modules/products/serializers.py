"""Catalog DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).
``ProductCreateSerializer`` is the request validator: one declared field per
rule set, every field evaluated, all failures collected into
``{field: [messages]}``.  Business logic lives in the Service Layer, which
receives Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rest_framework import serializers
from rest_framework.fields import empty

from modules.products.dtos import NAME_MAX_LENGTH, CreateProductDTO
from modules.products.exceptions import CATEGORY_INVALID_MESSAGE
from modules.products.models import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    Product,
    ProductCategory,
)

PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
PRICE_MAX = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES) - PRICE_QUANTUM


class StrictCharField(serializers.CharField):
    """CharField that rejects non-string input instead of coercing numbers."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    """Boolean limited to true/false/1/0 that stays required for form input.

    ``BooleanField`` treats a key missing from form data as ``False``; here a
    missing key is reported as a missing field like any other.
    """

    default_empty_html = empty
    TRUE_VALUES = {True, 1, "1", "true", "True"}
    FALSE_VALUES = {False, 0, "0", "false", "False"}


class PriceField(serializers.DecimalField):
    """Non-negative number of any precision, rounded half-up to cents."""

    def __init__(self, **kwargs):
        super().__init__(
            max_digits=None,
            decimal_places=None,
            min_value=Decimal("0"),
            max_value=PRICE_MAX,
            **kwargs,
        )

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        # Bounds first: quantize() fails on magnitudes beyond the context.
        if value < 0:
            self.fail("min_value", min_value=self.min_value)
        if value > PRICE_MAX:
            self.fail("max_value", max_value=PRICE_MAX)
        return value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


class ProductCreateSerializer(serializers.Serializer):
    """Validates a product creation payload.

    ``category_id`` may reference any existing category, active or not.
    """

    name = StrictCharField(max_length=NAME_MAX_LENGTH)
    category_id = serializers.PrimaryKeyRelatedField(
        queryset=ProductCategory.objects.all(),
        pk_field=serializers.UUIDField(),
        error_messages={"does_not_exist": CATEGORY_INVALID_MESSAGE},
    )
    price = PriceField()
    active = StrictBooleanField()

    def to_dto(self) -> CreateProductDTO:
        """Build the service-layer DTO from validated data."""
        data = self.validated_data
        return CreateProductDTO(
            name=data["name"],
            category_id=data["category_id"].pk,
            price=data["price"],
            active=data["active"],
        )


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    category_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "category_id",
            "price",
            "active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductCategorySerializer(serializers.ModelSerializer):
    """Read serializer for the ProductCategory resource."""

    class Meta:
        model = ProductCategory
        fields = ["id", "name", "active", "created_at", "updated_at"]
        read_only_fields = fields
