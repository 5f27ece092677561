"""Tests for the JSON product-file reader."""

import json

import pytest

from product_catalogue.application.dto import ProductSpec
from product_catalogue.infrastructure.product_file import ProductFileError, read_product_file


def _write(tmp_path, content: str):
    path = tmp_path / "products.json"
    path.write_text(content, encoding="utf-8")
    return path


class TestReadProductFile:

    def test_reads_records(self, tmp_path):
        path = _write(tmp_path, json.dumps([
            {"id": "A123", "name": "Product 1", "quantity_in_stock": 100,
             "reorder_level": 10, "price": "10.00"},
            {"id": "A129", "name": "Product 5"},
        ]))

        specs = read_product_file(path)

        assert specs == [
            ProductSpec("A123", "Product 1", 100, 10, "10.00"),
            ProductSpec("A129", "Product 5"),
        ]

    def test_unknown_keys_ignored(self, tmp_path):
        path = _write(tmp_path, json.dumps([{"id": "A1", "colour": "red"}]))
        assert read_product_file(path) == [ProductSpec("A1")]

    def test_invalid_json_rejected(self, tmp_path):
        with pytest.raises(ProductFileError, match="Invalid JSON"):
            read_product_file(_write(tmp_path, "[{"))

    def test_non_array_rejected(self, tmp_path):
        with pytest.raises(ProductFileError, match="JSON array"):
            read_product_file(_write(tmp_path, json.dumps({"id": "A1"})))

    def test_non_object_record_rejected(self, tmp_path):
        with pytest.raises(ProductFileError, match="#1 is not an object"):
            read_product_file(_write(tmp_path, json.dumps([{"id": "A1"}, "A2"])))

    def test_record_without_id_rejected(self, tmp_path):
        with pytest.raises(ProductFileError, match="has no 'id'"):
            read_product_file(_write(tmp_path, json.dumps([{"name": "Nameless"}])))

    def test_missing_file_rejected(self, tmp_path):
        with pytest.raises(ProductFileError, match="Cannot read"):
            read_product_file(tmp_path / "absent.json")

    def test_non_string_id_rejected(self, tmp_path):
        path = _write(tmp_path, json.dumps([{"id": ["A1"], "name": "X"}]))
        with pytest.raises(ProductFileError, match="#0 has a non-string 'id'"):
            read_product_file(path)

    def test_numeric_id_rejected(self, tmp_path):
        with pytest.raises(ProductFileError, match="non-string 'id'"):
            read_product_file(_write(tmp_path, json.dumps([{"id": 5}])))
