"""Report - run every aggregator over one batch of records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hierarchy_stats.aggregation.categories import k_largest_categories
from hierarchy_stats.aggregation.leaves import leaf_names
from hierarchy_stats.aggregation.sizes import subtree_sizes
from hierarchy_stats.models.record import FileRecord
from hierarchy_stats.models.report import HierarchyReport
from hierarchy_stats.tree.builder import build_file_tree

logger = logging.getLogger(__name__)


def build_report(
    records: Iterable[FileRecord],
    k: int,
    *,
    sort_leaves: bool = True,
    max_depth: int | None = None,
) -> HierarchyReport:
    """Build the tree once and compute all three aggregates.

    Args:
        records: File records
        k: How many top categories to report
        sort_leaves: Sort leaf names alphabetically (tree order otherwise)
        max_depth: Reject hierarchies nested deeper than this

    Returns:
        HierarchyReport with leaves, top categories and largest subtree size
    """
    records = list(records)
    tree = build_file_tree(records, max_depth=max_depth)

    leaves = leaf_names(tree)
    if sort_leaves:
        leaves.sort()

    sizes = subtree_sizes(tree)
    report = HierarchyReport(
        leaf_names=leaves,
        top_categories=k_largest_categories(records, k),
        largest_subtree_size=max(sizes.values(), default=0),
        record_count=len(records),
        k=k,
    )
    logger.info(
        "Report: %d leaves, top categories %s, largest subtree %d",
        len(report.leaf_names), report.top_categories, report.largest_subtree_size,
    )
    return report
