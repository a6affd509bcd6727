"""Tree builder for constructing a FileTree from flat records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hierarchy_stats.errors import DuplicateIdError, MalformedHierarchyError
from hierarchy_stats.models.record import FileRecord
from hierarchy_stats.models.tree import ROOT_INDEX, FileTree

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds a FileTree from records that point at their parents.

    Records whose parent is missing from the input are treated as top-level
    and hang directly off the synthetic root.
    """

    def __init__(self, max_depth: int | None = None):
        self.max_depth = max_depth

    def build(self, records: Iterable[FileRecord]) -> FileTree:
        """Build a FileTree from records.

        Args:
            records: File records in the order children should appear

        Returns:
            FileTree whose root owns every top-level record

        Raises:
            DuplicateIdError: If two records share an id
            MalformedHierarchyError: If parent links form a cycle, or the
                tree is deeper than max_depth
        """
        tree = FileTree()
        index_by_id: dict[int, int] = {}

        for record in records:
            if record.id in index_by_id:
                raise DuplicateIdError(record.id)
            index_by_id[record.id] = tree.add_node(record).index

        parent_of: dict[int, int] = {}
        dangling = 0
        for node in tree.real_nodes():
            parent_id = node.record.parent_id
            if parent_id is None:
                parent_index = ROOT_INDEX
            elif parent_id in index_by_id:
                parent_index = index_by_id[parent_id]
            else:
                logger.debug(
                    "Record %s has unknown parent %s, attaching to root",
                    node.record.id, parent_id,
                )
                parent_index = ROOT_INDEX
                dangling += 1
            tree.attach(parent_index, node.index)
            parent_of[node.index] = parent_index

        self._check_reachable(tree, parent_of)
        if self.max_depth is not None:
            self._check_depth(tree)

        logger.info(
            "Built tree: %d records, %d top-level, %d dangling parents",
            len(tree), len(tree.root.children), dangling,
        )
        return tree

    def _check_reachable(self, tree: FileTree, parent_of: dict[int, int]) -> None:
        """Every record must hang below the root; anything else is a cycle."""
        reached = {node.index for node in tree.iter_preorder()}
        if len(reached) == len(tree.nodes):
            return

        start = next(n.index for n in tree.real_nodes() if n.index not in reached)
        # Walk upward until an index repeats; the repeat closes the cycle.
        path: list[int] = []
        seen: set[int] = set()
        current = start
        while current not in seen:
            seen.add(current)
            path.append(current)
            current = parent_of[current]
        cycle = path[path.index(current):]
        cycle_ids = [tree.node(i).record.id for i in cycle]
        raise MalformedHierarchyError(
            f"Parent cycle detected among records: {cycle_ids}",
            record_ids=cycle_ids,
        )

    def _check_depth(self, tree: FileTree) -> None:
        for node, depth in tree.iter_with_depth():
            if depth > self.max_depth:
                raise MalformedHierarchyError(
                    f"Record {node.record.id} is nested {depth} levels deep "
                    f"(max_depth={self.max_depth})",
                    record_ids=[node.record.id],
                )


def build_file_tree(
    records: Iterable[FileRecord],
    *,
    max_depth: int | None = None,
) -> FileTree:
    """Convenience function to build a FileTree from records.

    Args:
        records: File records
        max_depth: Reject hierarchies nested deeper than this

    Returns:
        FileTree rooted at a synthetic root
    """
    builder = TreeBuilder(max_depth=max_depth)
    return builder.build(records)
