"""JSON renderers for file trees and reports."""

import json
from typing import Any

from hierarchy_stats.aggregation.sizes import subtree_sizes
from hierarchy_stats.errors import MalformedHierarchyError
from hierarchy_stats.models.report import HierarchyReport
from hierarchy_stats.models.tree import FileTree
from hierarchy_stats.renderers.base import OutputFormat, check_depth

# json.dumps recurses twice per tree level (node object, children list).
NESTED_JSON_MAX_DEPTH = 100


class JSONRenderer:
    """Renders a FileTree as JSON with subtree sizes.

    The default layout nests children inside their parents. The flat layout
    lists every node once, in pre-order, with ``children`` given as record
    ids, and works for hierarchies of any depth.
    """

    format = OutputFormat.JSON

    def render(
        self,
        tree: FileTree,
        *,
        depth: int | None = None,
        flat: bool = False,
        **options,
    ) -> str:
        """Render the tree as JSON.

        Args:
            tree: The file tree to render
            depth: Maximum depth to render (top-level records are depth 1)
            flat: Emit a node list instead of nested objects
            **options: Additional options (indent)

        Returns:
            JSON string representation of the tree

        Raises:
            MalformedHierarchyError: If the nested layout would exceed
                NESTED_JSON_MAX_DEPTH levels
        """
        check_depth(depth)
        sizes = subtree_sizes(tree)

        if flat:
            data = self._flatten(tree, sizes, depth)
        else:
            self._check_nesting(tree, depth)
            data = tree.to_dict(sizes=sizes)
            if depth is not None:
                data = self._limit_depth(data, depth)

        indent = options.get("indent", 2)
        return json.dumps(data, indent=indent)

    def _check_nesting(self, tree: FileTree, depth: int | None) -> None:
        if depth is not None and depth <= NESTED_JSON_MAX_DEPTH:
            return
        for node, node_depth in tree.iter_with_depth():
            if node_depth > NESTED_JSON_MAX_DEPTH:
                raise MalformedHierarchyError(
                    f"Record {node.record.id} is nested {node_depth} levels deep; "
                    f"nested JSON output supports at most {NESTED_JSON_MAX_DEPTH}. "
                    "Limit the render depth or use the flat layout",
                    record_ids=[node.record.id],
                )

    def _limit_depth(self, root: dict[str, Any], max_depth: int) -> dict[str, Any]:
        """Cut children below max_depth, leaving a truncation marker."""
        stack = [(root, 0)]
        while stack:
            node_dict, current_depth = stack.pop()
            children = node_dict.get("children")
            if not children:
                continue
            if current_depth >= max_depth:
                del node_dict["children"]
                node_dict["childrenCount"] = len(children)
                node_dict["childrenTruncated"] = True
                continue
            for child in children:
                stack.append((child, current_depth + 1))
        return root

    def _flatten(
        self,
        tree: FileTree,
        sizes: dict[int, int],
        max_depth: int | None,
    ) -> dict[str, Any]:
        root: dict[str, Any] = {"name": "(root)"}
        nodes: list[dict[str, Any]] = []

        for node, node_depth in tree.iter_with_depth():
            if max_depth is not None and node_depth > max_depth:
                continue
            if node.is_root:
                entry = root
            else:
                entry = node.record.to_dict()
                entry["subtree_size"] = sizes[node.record.id]
                nodes.append(entry)
            if not node.children:
                continue
            if max_depth is not None and node_depth >= max_depth:
                entry["childrenCount"] = len(node.children)
                entry["childrenTruncated"] = True
            else:
                entry["children"] = [tree.node(i).record.id for i in node.children]

        return {"root": root, "nodes": nodes}


def render_report_json(report: HierarchyReport, indent: int = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent)
