"""Application service: Load Catalogue use case.

Feeds externally supplied product records into a catalogue, either one at
a time (each record stands on its own) or as a single batch (the whole
load fails if any id is already stored).
"""

from __future__ import annotations

import logging

from product_catalogue.application.dto import LoadSummaryDTO, ProductSpec
from product_catalogue.domain.model.batch import BatchRequest
from product_catalogue.domain.model.catalogue import Catalogue

logger = logging.getLogger(__name__)


class LoadCatalogueHandler:

    def __init__(self, catalogue: Catalogue) -> None:
        self._catalogue = catalogue

    def handle(self, specs: list[ProductSpec], as_batch: bool = False) -> LoadSummaryDTO:
        """Add every record to the catalogue.

        In batch mode a BadBatchError propagates unchanged and nothing
        is added.
        """
        products = [spec.to_product() for spec in specs]

        if as_batch:
            added = self._catalogue.batch_add_products(BatchRequest.of(products))
            rejected = [
                p.id for p in products
                if self._catalogue.find_product_by_id(p.id) is not p
            ]
        else:
            rejected = [p.id for p in products if not self._catalogue.add_product(p)]
            added = len(products) - len(rejected)

        logger.info(
            "Loaded %d products into %s (%d rejected)",
            added, self._catalogue.name, len(rejected),
        )
        return LoadSummaryDTO(
            catalogue_name=self._catalogue.name,
            added=added,
            rejected_ids=rejected,
        )
