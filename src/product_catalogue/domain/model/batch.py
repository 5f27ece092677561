"""Batch insertion request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from product_catalogue.domain.model.product import Product

BATCH_TYPE = "Batch"


@dataclass(frozen=True)
class BatchRequest:
    """An ordered group of products to insert as one logical operation.

    ``type`` is the request discriminator; the catalogue only accepts
    ``BATCH_TYPE``.
    """

    type: str
    products: tuple[Product, ...] = field(default_factory=tuple)

    @staticmethod
    def of(products: Sequence[Product]) -> BatchRequest:
        """Convenient factory for a well-formed batch request."""
        return BatchRequest(type=BATCH_TYPE, products=tuple(products))

    @property
    def product_ids(self) -> list[str]:
        """String ids only; any other id is left for validation to refuse."""
        return [p.id for p in self.products if isinstance(p.id, str)]
