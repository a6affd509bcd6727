"""Leaf collection - names of records nothing else points at."""

from __future__ import annotations

from collections.abc import Iterable

from hierarchy_stats.models.record import FileRecord
from hierarchy_stats.models.tree import FileTree
from hierarchy_stats.tree.builder import build_file_tree


def leaf_names(tree: FileTree) -> list[str]:
    """Collect the names of all leaf records in pre-order.

    The synthetic root is never reported, even when the tree is empty.
    The order follows the tree; sort the result if a canonical order is needed.
    """
    return [
        node.name
        for node in tree.iter_preorder()
        if node.is_leaf and not node.is_root
    ]


def leaf_files(records: Iterable[FileRecord]) -> list[str]:
    """Build a tree from records and return its leaf names."""
    return leaf_names(build_file_tree(records))
