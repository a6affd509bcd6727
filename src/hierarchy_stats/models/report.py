"""Report model - the three aggregates for one batch of records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HierarchyReport:
    """Results of running every aggregator over the same records."""

    leaf_names: list[str] = field(default_factory=list)
    top_categories: list[str] = field(default_factory=list)
    largest_subtree_size: int = 0
    record_count: int = 0
    k: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "record_count": self.record_count,
            "leaf_names": list(self.leaf_names),
            "top_categories": {
                "k": self.k,
                "categories": list(self.top_categories),
            },
            "largest_subtree_size": self.largest_subtree_size,
        }
