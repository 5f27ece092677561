"""Product record.

Products are built by the caller and handed to a Catalogue, which decides
whether to keep them. Construction itself never fails: a product with a
missing name or price is a perfectly representable value, it is simply
not *valid* and will be refused by the catalogue.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """One catalogue entry.

    Frozen so that a product cannot change underneath the catalogue after
    it passed validation at insertion time.
    """

    id: str
    name: str | None
    quantity_in_stock: int = 0
    reorder_level: int = 0
    price: int | float | Decimal | None = None

    @property
    def needs_reorder(self) -> bool:
        """True when stock has fallen to or below the reorder level."""
        return self.quantity_in_stock <= self.reorder_level

    @property
    def in_stock(self) -> bool:
        return self.quantity_in_stock > 0
