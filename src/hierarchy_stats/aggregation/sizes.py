"""Subtree sizing - cumulative sizes rolled up from the leaves."""

from __future__ import annotations

from collections.abc import Iterable

from hierarchy_stats.models.record import FileRecord
from hierarchy_stats.models.tree import FileTree
from hierarchy_stats.tree.builder import build_file_tree


def subtree_sizes(tree: FileTree) -> dict[int, int]:
    """Compute each record's own size plus the sizes of all its descendants.

    Args:
        tree: The file tree to aggregate

    Returns:
        Mapping of record id to subtree size. The synthetic root is excluded.
    """
    totals: dict[int, int] = {}
    sizes: dict[int, int] = {}
    for node in tree.iter_postorder():
        total = node.size + sum(totals[child] for child in node.children)
        totals[node.index] = total
        if not node.is_root:
            sizes[node.record.id] = total
    return sizes


def largest_subtree_size(records: Iterable[FileRecord]) -> int:
    """Return the largest subtree size among all records, or 0 if there are none."""
    sizes = subtree_sizes(build_file_tree(records))
    return max(sizes.values(), default=0)
