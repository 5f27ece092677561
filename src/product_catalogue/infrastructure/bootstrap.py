"""Composition root: wires configuration into new catalogues.

This is the only place in the codebase that reads the environment.
Every other module receives its CatalogueConfig explicitly.
"""

from __future__ import annotations

import os

from product_catalogue.domain.config import CatalogueConfig
from product_catalogue.domain.model.catalogue import Catalogue

_ENV_PREFIX = "CATALOGUE_"
_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_CATALOGUE_NAME = "Catalogue"


def catalogue_config() -> CatalogueConfig:
    """Read policy switches from ``CATALOGUE_*`` environment variables."""
    values = {}
    for name in CatalogueConfig.__dataclass_fields__:
        raw = os.environ.get(_ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw.strip().lower() in _TRUTHY
    return CatalogueConfig.from_mapping(values)


def new_catalogue(name: str = DEFAULT_CATALOGUE_NAME) -> Catalogue:
    return Catalogue(name, config=catalogue_config())
