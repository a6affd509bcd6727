"""Tree building from flat file records."""

from hierarchy_stats.tree.builder import (
    TreeBuilder,
    build_file_tree,
)

__all__ = [
    "TreeBuilder",
    "build_file_tree",
]
