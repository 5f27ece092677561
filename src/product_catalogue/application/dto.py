"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from product_catalogue.domain.model.product import Product


@dataclass(frozen=True)
class ProductSpec:
    """Input: one product record as supplied from outside.

    Fields mirror Product, but nothing has been checked yet; a spec with a
    missing name or an unreadable price still becomes a Product, which the
    catalogue will then refuse.
    """

    id: str
    name: str | None = None
    quantity_in_stock: int = 0
    reorder_level: int = 0
    price: str | int | float | None = None

    def to_product(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            quantity_in_stock=self.quantity_in_stock,
            reorder_level=self.reorder_level,
            price=_coerce_price(self.price),
        )


def _coerce_price(raw: str | int | float | None) -> object:
    """Turn a numeric price into a Decimal; leave anything else untouched."""
    if raw is None or isinstance(raw, bool):
        return raw
    try:
        return Decimal(str(raw))
    except (InvalidOperation, ValueError):
        return raw


@dataclass(frozen=True)
class LoadSummaryDTO:
    """Output: what happened when product records were loaded."""

    catalogue_name: str
    added: int
    rejected_ids: list[str]

    @property
    def rejected(self) -> int:
        return len(self.rejected_ids)


@dataclass(frozen=True)
class ReorderLineDTO:
    """Output: one product that needs restocking."""

    product_id: str
    product_name: str
    quantity_in_stock: int
    reorder_level: int
