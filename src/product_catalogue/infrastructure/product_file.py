"""JSON product-file reader.

Reads a JSON array of product records into ProductSpecs. Only the shape
of the file is checked here; whether each record is an acceptable
product is the catalogue's decision.
"""

from __future__ import annotations

import json
from pathlib import Path

from product_catalogue.application.dto import ProductSpec
from product_catalogue.domain.exceptions import DomainException

_FIELDS = ("name", "quantity_in_stock", "reorder_level", "price")


class ProductFileError(DomainException):
    """The product file is unreadable or not shaped as expected."""


def read_product_file(file_path: Path) -> list[ProductSpec]:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ProductFileError(f"Cannot read {file_path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ProductFileError(f"Invalid JSON in {file_path}: {exc.msg}") from exc

    if not isinstance(raw, list):
        raise ProductFileError(f"{file_path} must contain a JSON array of products")

    return [_to_spec(item, index) for index, item in enumerate(raw)]


def _to_spec(item: object, index: int) -> ProductSpec:
    if not isinstance(item, dict):
        raise ProductFileError(f"Product record #{index} is not an object")
    if "id" not in item:
        raise ProductFileError(f"Product record #{index} has no 'id'")
    if not isinstance(item["id"], str):
        raise ProductFileError(f"Product record #{index} has a non-string 'id'")
    return ProductSpec(id=item["id"], **{k: item[k] for k in _FIELDS if k in item})
