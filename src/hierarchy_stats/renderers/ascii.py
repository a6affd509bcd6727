"""ASCII tree renderer using Rich for terminal output."""

import io

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from hierarchy_stats.aggregation.sizes import subtree_sizes
from hierarchy_stats.models.tree import FileTree, TreeNode
from hierarchy_stats.renderers.base import OutputFormat, check_depth


class ASCIIRenderer:
    """Renders a FileTree as ASCII art using Rich."""

    format = OutputFormat.ASCII

    def render(
        self,
        tree: FileTree,
        *,
        depth: int | None = None,
        show_sizes: bool = True,
        **options,
    ) -> str:
        """Render the tree as ASCII.

        Args:
            tree: The file tree to render
            depth: Maximum depth to render (top-level records are depth 1,
                0 shows the root alone)
            show_sizes: Whether to show own and subtree sizes
            **options: Additional options (width)

        Returns:
            ASCII string representation of the tree
        """
        check_depth(depth)
        sizes = subtree_sizes(tree) if show_sizes else {}

        rich_root = Tree(Text("(root)", style="bold"))
        # Stack entries: (node index, rich parent, depth)
        stack = [(child, rich_root, 1) for child in reversed(tree.root.children)]
        if depth == 0 and stack:
            rich_root.add(Text(f"... ({len(stack)} more)", style="dim"))
            stack = []
        while stack:
            index, rich_parent, current_depth = stack.pop()
            node = tree.node(index)
            branch = rich_parent.add(self._build_label(node, sizes))
            if node.children and depth is not None and current_depth >= depth:
                branch.add(Text(f"... ({len(node.children)} more)", style="dim"))
                continue
            for child in reversed(node.children):
                stack.append((child, branch, current_depth + 1))

        console = Console(
            file=io.StringIO(),
            force_terminal=False,
            width=options.get("width", 120),
            record=True,
        )
        console.print(rich_root)
        return console.export_text()

    def _build_label(self, node: TreeNode, sizes: dict[int, int]) -> Text:
        """Build the label text for a node."""
        label = Text()
        style = "green" if node.is_leaf else "bold blue"
        label.append(node.name, style=style)

        if sizes:
            total = sizes.get(node.record.id, node.size)
            if node.is_leaf:
                label.append(f"  {node.size}", style="dim")
            else:
                label.append(f"  {node.size} / {total}", style="dim")

        if node.record.categories:
            label.append(f"  [{', '.join(node.record.categories)}]", style="cyan")
        return label
