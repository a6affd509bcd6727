# Copyright 2026 Pennyworth Technologies, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""File tree model - an index-addressed arena of nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from hierarchy_stats.models.record import FileRecord

# The synthetic root always occupies the first arena slot.
ROOT_INDEX = 0


@dataclass
class TreeNode:
    index: int
    record: FileRecord | None = None  # None only for the synthetic root
    children: list[int] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.record is None

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    @property
    def name(self) -> str:
        return self.record.name if self.record is not None else ""

    @property
    def size(self) -> int:
        return self.record.size if self.record is not None else 0


@dataclass
class FileTree:
    """Rooted hierarchy built from flat file records.

    Nodes live in ``nodes`` and refer to their children by index. Index 0 is
    the synthetic root that owns every top-level record.
    """

    nodes: list[TreeNode] = field(default_factory=lambda: [TreeNode(index=ROOT_INDEX)])

    def __len__(self) -> int:
        """Number of real (non-root) nodes."""
        return len(self.nodes) - 1

    @property
    def root(self) -> TreeNode:
        return self.nodes[ROOT_INDEX]

    def node(self, index: int) -> TreeNode:
        return self.nodes[index]

    def children_of(self, index: int) -> list[TreeNode]:
        return [self.nodes[i] for i in self.nodes[index].children]

    def real_nodes(self) -> list[TreeNode]:
        return self.nodes[ROOT_INDEX + 1:]

    def add_node(self, record: FileRecord) -> TreeNode:
        node = TreeNode(index=len(self.nodes), record=record)
        self.nodes.append(node)
        return node

    def attach(self, parent_index: int, child_index: int) -> None:
        self.nodes[parent_index].children.append(child_index)

    def iter_preorder(self, start: int = ROOT_INDEX) -> Iterator[TreeNode]:
        """Depth-first pre-order walk, children in stored order."""
        stack = [start]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def iter_postorder(self, start: int = ROOT_INDEX) -> Iterator[TreeNode]:
        """Depth-first post-order walk: every child before its parent."""
        stack: list[tuple[int, bool]] = [(start, False)]
        while stack:
            index, expanded = stack.pop()
            node = self.nodes[index]
            if expanded:
                yield node
                continue
            stack.append((index, True))
            for child in reversed(node.children):
                stack.append((child, False))

    def height(self) -> int:
        """Depth of the deepest record (top-level records are depth 1)."""
        return max((depth for _, depth in self.iter_with_depth()), default=0)

    def iter_with_depth(self) -> Iterator[tuple[TreeNode, int]]:
        stack = [(ROOT_INDEX, 0)]
        while stack:
            index, depth = stack.pop()
            node = self.nodes[index]
            yield node, depth
            for child in reversed(node.children):
                stack.append((child, depth + 1))

    def to_dict(self, sizes: dict[int, int] | None = None) -> dict[str, Any]:
        """Nested dictionary of the tree for JSON serialization.

        ``sizes`` maps record id to subtree size; when given, each node gets
        a ``subtree_size`` entry.
        """
        built: dict[int, dict[str, Any]] = {}
        for node in self.iter_postorder():
            if node.is_root:
                entry: dict[str, Any] = {"name": "(root)"}
            else:
                entry = node.record.to_dict()
                if sizes is not None:
                    entry["subtree_size"] = sizes.get(node.record.id, node.size)
            if node.children:
                entry["children"] = [built.pop(i) for i in node.children]
            built[node.index] = entry
        return built[ROOT_INDEX]
