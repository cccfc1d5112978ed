"""Catalog models: ``ProductCategory`` and ``Product``.

Rules implemented at the model level:
- A product name is non-empty and at most 255 characters.
- A product price is never negative (application + DB check constraint) and
  is stored with two decimal places.
- A product always references an existing category; categories that are
  referenced by products cannot be deleted (``PROTECT``).
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)

PRICE_MAX_DIGITS = 19
PRICE_DECIMAL_PLACES = 2


class ProductCategory(BaseModel):
    """Named grouping referenced by products.

    Only ``active`` categories are exposed by the listing endpoint.
    """

    name = models.CharField(max_length=255)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "product_categories"
        ordering = ["created_at", "id"]
        verbose_name_plural = "product categories"
        indexes = [
            models.Index(fields=["active"], name="product_categories_active_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "category.created",
                category_id=str(self.id),
                name=self.name,
            )

    def __str__(self) -> str:
        return self.name


class Product(BaseModel):
    """Catalog item."""

    name = models.CharField(max_length=255)
    category = models.ForeignKey(
        ProductCategory,
        on_delete=models.PROTECT,
        related_name="products",
    )
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0"))],
    )
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": "Name must not be empty."})
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.name
