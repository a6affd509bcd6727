"""Renderers for file trees and hierarchy reports."""

from hierarchy_stats.models.report import HierarchyReport
from hierarchy_stats.models.tree import FileTree
from hierarchy_stats.renderers.base import OutputFormat, TreeRenderer
from hierarchy_stats.renderers.ascii import ASCIIRenderer
from hierarchy_stats.renderers.json_renderer import JSONRenderer, render_report_json


def render_tree(
    tree: FileTree,
    *,
    format: OutputFormat = OutputFormat.ASCII,
    depth: int | None = None,
    **options,
) -> str:
    """Render a FileTree to the specified format.

    Args:
        tree: The file tree to render
        format: Output format (ASCII or JSON)
        depth: Maximum tree depth to render
        **options: Format-specific options

    Returns:
        Rendered output
    """
    if format == OutputFormat.JSON:
        renderer: TreeRenderer = JSONRenderer()
    else:
        renderer = ASCIIRenderer()
    return renderer.render(tree, depth=depth, **options)


def render_report_text(report: HierarchyReport) -> str:
    """Render a report as a short human-readable block."""
    lines = [f"Records: {report.record_count}", "Leaf files:"]
    lines.extend(f"  {name}" for name in report.leaf_names)
    lines.append(f"Top {report.k} categories:")
    lines.extend(f"  {category}" for category in report.top_categories)
    lines.append(f"Largest subtree size: {report.largest_subtree_size}")
    return "\n".join(lines)


__all__ = [
    "OutputFormat",
    "TreeRenderer",
    "ASCIIRenderer",
    "JSONRenderer",
    "render_tree",
    "render_report_json",
    "render_report_text",
]
