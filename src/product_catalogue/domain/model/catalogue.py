"""Catalogue aggregate, the core of the domain.

The Catalogue owns its products outright: the id -> Product mapping is
private and only ever changed through the methods below. Lookups hand out
the (immutable) products themselves, never the mapping.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from product_catalogue.domain.config import DEFAULT_CONFIG, CatalogueConfig
from product_catalogue.domain.exceptions import BadBatchError
from product_catalogue.domain.model.batch import BATCH_TYPE, BatchRequest
from product_catalogue.domain.model.product import Product
from product_catalogue.domain.model.validation import product_problems

logger = logging.getLogger(__name__)


class AddResult(Enum):
    ADDED = "ADDED"
    INVALID = "INVALID"
    DUPLICATE = "DUPLICATE"

    def __bool__(self) -> bool:
        return self is AddResult.ADDED


@dataclass(frozen=True)
class ReorderReport:
    """Ids of every product at or below its reorder level.

    Ids follow insertion order, but callers should treat them as a set.
    """

    product_ids: list[str] = field(default_factory=list)


class Catalogue:
    """A named, in-memory collection of products keyed by id.

    Invariants:
    - no two stored products share an id
    - every stored product passed validation when it was inserted
    """

    def __init__(self, name: str, config: CatalogueConfig = DEFAULT_CONFIG) -> None:
        self.name = name
        self._config = config
        self._products: dict[str, Product] = {}

    def __repr__(self) -> str:
        return f"Catalogue(name={self.name!r}, products={len(self._products)})"

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return isinstance(product_id, str) and product_id in self._products

    @property
    def config(self) -> CatalogueConfig:
        return self._config

    # --- Single product operations --------------------------------------------

    def try_add_product(self, product: Product) -> AddResult:
        """Insert *product* and report exactly what happened.

        Never raises; an invalid or duplicate product leaves the
        catalogue untouched.
        """
        problems = product_problems(product, self._config)
        if problems:
            logger.debug(
                "Rejected product %r for %s: %s",
                product.id, self.name, "; ".join(problems),
            )
            return AddResult.INVALID

        if product.id in self._products:
            logger.debug("Rejected product %r for %s: id in use", product.id, self.name)
            return AddResult.DUPLICATE

        self._products[product.id] = product
        return AddResult.ADDED

    def add_product(self, product: Product) -> bool:
        """Insert *product*; False if it is invalid or its id is in use."""
        return self.try_add_product(product) is AddResult.ADDED

    def remove_product_by_id(self, product_id: str) -> Product | None:
        """Remove and return a product, or None if no such id is stored."""
        if not isinstance(product_id, str):
            return None
        return self._products.pop(product_id, None)

    def find_product_by_id(self, product_id: str) -> Product | None:
        if not isinstance(product_id, str):
            return None
        return self._products.get(product_id)

    def list_products(self) -> list[Product]:
        """Return every stored product in insertion order."""
        return list(self._products.values())

    # --- Queries --------------------------------------------------------------

    def check_reorders(self) -> ReorderReport:
        return ReorderReport(
            product_ids=[p.id for p in self._products.values() if p.needs_reorder]
        )

    # --- Batch insertion ------------------------------------------------------

    def batch_add_products(self, batch: BatchRequest) -> int:
        """Insert a batch of products and return how many were added.

        Uses a two-phase approach:
          Phase 1, pre-check: if any batch id is already stored, raise
                   BadBatchError before touching the catalogue.
          Phase 2, insert: products with no stock are skipped, the rest
                   go through the same rules as ``add_product``.
        """
        # Phase 1: reject the whole batch without mutating anything
        self._check_batch(batch)

        # Phase 2: insert what qualifies
        added = 0
        for product in batch.products:
            if isinstance(product.quantity_in_stock, int) and not product.in_stock:
                logger.debug(
                    "Skipped batch product %r for %s: nothing in stock",
                    product.id, self.name,
                )
                continue
            if self.try_add_product(product) is AddResult.ADDED:
                added += 1

        logger.info(
            "Batch added %d of %d products to %s",
            added, len(batch.products), self.name,
        )
        return added

    def _check_batch(self, batch: BatchRequest) -> None:
        if batch.type != BATCH_TYPE:
            raise BadBatchError(
                f"unsupported request type {batch.type!r}, expected {BATCH_TYPE!r}"
            )

        clashes = [pid for pid in batch.product_ids if pid in self._products]
        if clashes:
            logger.warning(
                "Batch for %s rejected, ids already stored: %s",
                self.name, ", ".join(map(str, clashes)),
            )
            raise BadBatchError(
                "product ids already in catalogue: " + ", ".join(map(str, clashes))
            )

        if self._config.reject_intra_batch_duplicates:
            repeated = [pid for pid, n in Counter(batch.product_ids).items() if n > 1]
            if repeated:
                logger.warning(
                    "Batch for %s rejected, ids repeated: %s",
                    self.name, ", ".join(map(str, repeated)),
                )
                raise BadBatchError(
                    "product ids repeated within batch: " + ", ".join(map(str, repeated))
                )
