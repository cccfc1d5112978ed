"""Catalog domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

CATEGORY_INVALID_MESSAGE = "The selected category id is invalid."


class CategoryNotFound(Exception):
    """The referenced product category does not exist (any longer).

    Raised when the category vanished between request validation and the
    product insert.
    """
