"""Tests for the LoadCatalogue and CheckReorders use cases.

Uses a fresh in-memory catalogue per test.
"""

from decimal import Decimal

import pytest

from product_catalogue.application.check_reorders import CheckReordersHandler
from product_catalogue.application.dto import ProductSpec
from product_catalogue.application.load_catalogue import LoadCatalogueHandler
from product_catalogue.domain.exceptions import BadBatchError
from product_catalogue.domain.model.catalogue import Catalogue


def _specs() -> list[ProductSpec]:
    return [
        ProductSpec("A123", "Product 1", 100, 10, "10.00"),
        ProductSpec("B123", "Product 4", 10, 20, 10.0),
        ProductSpec("A129", "Product 5", 100, 10),  # no price
    ]


class TestProductSpec:

    def test_numeric_string_price_becomes_decimal(self):
        product = ProductSpec("A1", "Thing", price="12.50").to_product()
        assert product.price == Decimal("12.50")

    def test_float_price_becomes_decimal(self):
        assert ProductSpec("A1", "Thing", price=10.1).to_product().price == Decimal("10.1")

    def test_unreadable_price_left_as_is(self):
        assert ProductSpec("A1", "Thing", price="cheap").to_product().price == "cheap"

    def test_missing_price_stays_missing(self):
        assert ProductSpec("A1", "Thing").to_product().price is None


class TestLoadOneByOne:

    def test_reports_added_and_rejected(self):
        cat = Catalogue("Test Catalogue")
        summary = LoadCatalogueHandler(cat).handle(_specs())

        assert summary.catalogue_name == "Test Catalogue"
        assert summary.added == 2
        assert summary.rejected_ids == ["A129"]
        assert summary.rejected == 1
        assert len(cat) == 2

    def test_duplicate_record_rejected(self):
        cat = Catalogue("Test Catalogue")
        specs = [ProductSpec("A1", "First", 5, 1, 1), ProductSpec("A1", "Second", 5, 1, 1)]
        summary = LoadCatalogueHandler(cat).handle(specs)
        assert summary.added == 1
        assert summary.rejected_ids == ["A1"]


class TestLoadAsBatch:

    def test_zero_stock_and_invalid_records_rejected(self):
        cat = Catalogue("Test Catalogue")
        specs = _specs() + [ProductSpec("B128", "Product 8", 0, 10, 10.0)]

        summary = LoadCatalogueHandler(cat).handle(specs, as_batch=True)

        assert summary.added == 2
        assert set(summary.rejected_ids) == {"A129", "B128"}

    def test_conflict_propagates(self):
        cat = Catalogue("Test Catalogue")
        handler = LoadCatalogueHandler(cat)
        handler.handle([ProductSpec("A123", "Product 1", 100, 10, 10)])

        with pytest.raises(BadBatchError, match="Bad Batch"):
            handler.handle(_specs(), as_batch=True)
        assert len(cat) == 1


class TestCheckReorders:

    def test_lists_products_needing_reorder(self):
        cat = Catalogue("Test Catalogue")
        LoadCatalogueHandler(cat).handle(_specs())

        lines = CheckReordersHandler(cat).handle()

        assert len(lines) == 1
        assert lines[0].product_id == "B123"
        assert lines[0].product_name == "Product 4"
        assert lines[0].quantity_in_stock == 10
        assert lines[0].reorder_level == 20

    def test_empty_catalogue(self):
        assert CheckReordersHandler(Catalogue("Empty")).handle() == []
