"""hierarchy-stats - aggregate statistics over flat file hierarchies.

Public API:
    - build_file_tree: records → FileTree
    - leaf_names: FileTree → leaf names
    - k_largest_categories: records, k → most frequent categories
    - largest_subtree_size: records → largest cumulative size
    - build_report: records, k → HierarchyReport (all three at once)

Example:
    from hierarchy_stats import FileRecord, build_report

    records = [
        FileRecord(1, "docs", ("Folder",), None, 0),
        FileRecord(2, "notes.txt", ("Documents",), 1, 512),
    ]
    report = build_report(records, k=1)
"""

__version__ = "0.1.0"

from hierarchy_stats.errors import (
    DuplicateIdError,
    HierarchyError,
    InvalidArgumentError,
    MalformedHierarchyError,
)
from hierarchy_stats.models import (
    FileRecord,
    FileTree,
    HierarchyReport,
    TreeNode,
)
from hierarchy_stats.tree import build_file_tree
from hierarchy_stats.aggregation import (
    build_report,
    k_largest_categories,
    largest_subtree_size,
    leaf_files,
    leaf_names,
    subtree_sizes,
)

__all__ = [
    "__version__",
    # Models
    "FileRecord",
    "FileTree",
    "TreeNode",
    "HierarchyReport",
    # Errors
    "HierarchyError",
    "DuplicateIdError",
    "MalformedHierarchyError",
    "InvalidArgumentError",
    # Core functions
    "build_file_tree",
    "leaf_names",
    "leaf_files",
    "k_largest_categories",
    "subtree_sizes",
    "largest_subtree_size",
    "build_report",
]
