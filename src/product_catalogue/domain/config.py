"""Catalogue policy settings.

Both switches default to the permissive behaviour, so a catalogue built
without a config accepts negative numbers and only guards batches against
ids that were already stored.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class CatalogueConfig:

    # Treat a negative price, stock level or reorder level as invalid
    reject_negative_values: bool = False

    # Fail the whole batch when two of its products share an id
    reject_intra_batch_duplicates: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> CatalogueConfig:
        """Build a config from a plain mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: bool(v) for k, v in values.items() if k in known})


DEFAULT_CONFIG = CatalogueConfig()
