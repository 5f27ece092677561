"""Application service: Check Reorders use case (query)."""

from __future__ import annotations

from product_catalogue.application.dto import ReorderLineDTO
from product_catalogue.domain.model.catalogue import Catalogue


class CheckReordersHandler:

    def __init__(self, catalogue: Catalogue) -> None:
        self._catalogue = catalogue

    def handle(self) -> list[ReorderLineDTO]:
        flagged = set(self._catalogue.check_reorders().product_ids)
        return [
            ReorderLineDTO(
                product_id=product.id,
                product_name=product.name or "",
                quantity_in_stock=product.quantity_in_stock,
                reorder_level=product.reorder_level,
            )
            for product in self._catalogue.list_products()
            if product.id in flagged
        ]
