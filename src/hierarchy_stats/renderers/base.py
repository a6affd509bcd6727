"""Base renderer and output format definitions."""

from enum import Enum
from typing import Protocol

from hierarchy_stats.errors import InvalidArgumentError
from hierarchy_stats.models.tree import FileTree


class OutputFormat(str, Enum):
    """Output format for rendering."""

    ASCII = "ascii"
    JSON = "json"


class TreeRenderer(Protocol):
    """Protocol for tree renderers."""

    format: OutputFormat

    def render(
        self,
        tree: FileTree,
        *,
        depth: int | None = None,
        **options,
    ) -> str:
        """Render the tree to the target format.

        Args:
            tree: The file tree to render
            depth: Maximum depth to render (None for unlimited)
            **options: Additional format-specific options

        Returns:
            Rendered output
        """
        ...


def check_depth(depth: int | None) -> None:
    """Reject render depths that are not a non-negative integer.

    Depth counts records below the synthetic root: 0 renders the root alone,
    1 adds the top-level records, and so on.
    """
    if depth is None:
        return
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise InvalidArgumentError(f"depth must be a non-negative integer, got {depth!r}")
