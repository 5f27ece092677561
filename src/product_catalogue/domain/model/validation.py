"""Validation helpers for Product.

Pure predicates with no side effects. ``product_problems`` explains a
rejection; ``is_valid_product`` is the yes/no view the catalogue uses.
"""

from __future__ import annotations

import math
from decimal import Decimal

from product_catalogue.domain.config import DEFAULT_CONFIG, CatalogueConfig
from product_catalogue.domain.model.product import Product


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a meaningful price or quantity
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_finite(value: int | float | Decimal) -> bool:
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_non_empty_str(value: object) -> bool:
    return isinstance(value, str) and value != ""


def product_problems(
    product: Product,
    config: CatalogueConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Return every reason *product* would be refused by a catalogue.

    An empty list means the product is valid.
    """
    problems: list[str] = []

    if not _is_non_empty_str(product.id):
        problems.append("Product id is required")
    if not _is_non_empty_str(product.name):
        problems.append("Product name is required")

    if product.price is None:
        problems.append("Product price is required")
    elif not _is_number(product.price):
        problems.append(f"Product price must be a number, got {product.price!r}")
    elif not _is_finite(product.price):
        problems.append(f"Product price must be finite, got {product.price}")

    if not _is_integer(product.quantity_in_stock):
        problems.append(
            f"Quantity in stock must be an integer, got {product.quantity_in_stock!r}"
        )
    if not _is_integer(product.reorder_level):
        problems.append(
            f"Reorder level must be an integer, got {product.reorder_level!r}"
        )

    if config.reject_negative_values and not problems:
        if product.price < 0:
            problems.append(f"Product price cannot be negative, got {product.price}")
        if product.quantity_in_stock < 0:
            problems.append(
                f"Quantity in stock cannot be negative, got {product.quantity_in_stock}"
            )
        if product.reorder_level < 0:
            problems.append(
                f"Reorder level cannot be negative, got {product.reorder_level}"
            )

    return problems


def is_valid_product(
    product: Product,
    config: CatalogueConfig = DEFAULT_CONFIG,
) -> bool:
    return not product_problems(product, config)
