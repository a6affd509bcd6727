"""Aggregations over file hierarchies."""

from hierarchy_stats.aggregation.leaves import leaf_files, leaf_names
from hierarchy_stats.aggregation.categories import (
    count_categories,
    k_largest_categories,
)
from hierarchy_stats.aggregation.sizes import largest_subtree_size, subtree_sizes
from hierarchy_stats.aggregation.report import build_report

__all__ = [
    "leaf_names",
    "leaf_files",
    "count_categories",
    "k_largest_categories",
    "subtree_sizes",
    "largest_subtree_size",
    "build_report",
]
