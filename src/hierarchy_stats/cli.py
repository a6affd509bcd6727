"""hierarchy-stats CLI - aggregate statistics over file hierarchies."""

import functools
import json
import logging
from pathlib import Path

import click
from rich.console import Console

from hierarchy_stats import __version__
from hierarchy_stats.aggregation import (
    build_report,
    k_largest_categories,
    leaf_names,
    subtree_sizes,
)
from hierarchy_stats.config import (
    ConfigLoadError,
    ConfigValidationError,
    StatsConfig,
    generate_config_template_string,
    get_config,
    get_global_config_path,
    get_project_config_path,
)
from hierarchy_stats.errors import HierarchyError
from hierarchy_stats.loader import RecordLoadError, load_records
from hierarchy_stats.models.record import FileRecord
from hierarchy_stats.renderers import (
    OutputFormat,
    render_report_json,
    render_report_text,
    render_tree,
)
from hierarchy_stats.sample import SAMPLE_RECORDS
from hierarchy_stats.tree import build_file_tree

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}", highlight=False, soft_wrap=True)
    raise SystemExit(1)


def handle_domain_errors(func):
    """Turn load and hierarchy errors into a clean exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (HierarchyError, RecordLoadError) as e:
            _fail(str(e))

    return wrapper


def records_source(func):
    """Shared RECORDS_FILE argument and --sample flag."""
    func = click.option(
        "--sample", is_flag=True, help="Use the built-in sample hierarchy"
    )(func)
    func = click.argument(
        "records_file",
        required=False,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
    )(func)
    return func


def _load(records_file: Path | None, sample: bool) -> list[FileRecord]:
    if sample:
        return list(SAMPLE_RECORDS)
    if records_file is None:
        _fail("Provide a RECORDS_FILE or use --sample")
    return load_records(records_file)


def _config(ctx: click.Context) -> StatsConfig:
    return ctx.obj["config"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="HIERARCHY_STATS_LOG_LEVEL",
    help="Logging level (default: WARNING)",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Output format: json or text (default from config: json)",
)
@click.pass_context
def main(ctx: click.Context, log_level: str, output_format: str | None) -> None:
    """hierarchy-stats - leaves, top categories and subtree sizes of file hierarchies."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="[%(levelname).1s] %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    try:
        config = get_config()
    except (ConfigLoadError, ConfigValidationError) as e:
        _fail(str(e))

    if output_format is not None:
        config.display.output_format = output_format
    ctx.obj["config"] = config
    ctx.obj["output_format"] = config.display.output_format


@main.command()
def version() -> None:
    """Show version."""
    console.print(f"hierarchy-stats {__version__}")


@main.command()
@records_source
@click.option("-k", "k", type=int, default=None, help="Number of top categories")
@click.option("--unsorted", is_flag=True, help="Keep leaf names in tree order")
@click.pass_context
@handle_domain_errors
def report(
    ctx: click.Context,
    records_file: Path | None,
    sample: bool,
    k: int | None,
    unsorted: bool,
) -> None:
    """Report leaves, top categories and the largest subtree size."""
    config = _config(ctx)
    records = _load(records_file, sample)
    result = build_report(
        records,
        config.report.top_k if k is None else k,
        sort_leaves=config.report.sort_leaves and not unsorted,
        max_depth=config.tree.max_depth,
    )

    if ctx.obj["output_format"] == "json":
        print(render_report_json(result))
    else:
        click.echo(render_report_text(result))


@main.command()
@records_source
@click.option("--sort/--no-sort", default=None, help="Sort leaf names alphabetically")
@click.pass_context
@handle_domain_errors
def leaves(
    ctx: click.Context,
    records_file: Path | None,
    sample: bool,
    sort: bool | None,
) -> None:
    """List the names of all leaf files."""
    config = _config(ctx)
    tree = build_file_tree(_load(records_file, sample), max_depth=config.tree.max_depth)
    names = leaf_names(tree)
    if config.report.sort_leaves if sort is None else sort:
        names.sort()

    if ctx.obj["output_format"] == "json":
        print(json.dumps(names))
    else:
        for name in names:
            click.echo(name)


@main.command()
@records_source
@click.option("-k", "k", type=int, default=None, help="Number of top categories")
@click.pass_context
@handle_domain_errors
def categories(
    ctx: click.Context,
    records_file: Path | None,
    sample: bool,
    k: int | None,
) -> None:
    """List the k most frequent categories, most frequent first."""
    config = _config(ctx)
    top = k_largest_categories(
        _load(records_file, sample),
        config.report.top_k if k is None else k,
    )

    if ctx.obj["output_format"] == "json":
        print(json.dumps(top))
    else:
        for category in top:
            click.echo(category)


@main.command()
@records_source
@click.pass_context
@handle_domain_errors
def largest(ctx: click.Context, records_file: Path | None, sample: bool) -> None:
    """Print the largest cumulative subtree size."""
    config = _config(ctx)
    tree = build_file_tree(_load(records_file, sample), max_depth=config.tree.max_depth)
    size = max(subtree_sizes(tree).values(), default=0)

    if ctx.obj["output_format"] == "json":
        print(json.dumps({"largest_subtree_size": size}))
    else:
        click.echo(str(size))


@main.command()
@records_source
@click.option(
    "--depth", "-d",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum depth to render (0 = root only)",
)
@click.option(
    "--flat", is_flag=True, help="JSON only: list nodes with child ids instead of nesting"
)
@click.pass_context
@handle_domain_errors
def show(
    ctx: click.Context,
    records_file: Path | None,
    sample: bool,
    depth: int | None,
    flat: bool,
) -> None:
    """Render the hierarchy as a tree (text) or JSON."""
    config = _config(ctx)
    tree = build_file_tree(_load(records_file, sample), max_depth=config.tree.max_depth)

    if ctx.obj["output_format"] == "json":
        fmt = OutputFormat.JSON
    else:
        fmt = OutputFormat.ASCII
    output = render_tree(
        tree,
        format=fmt,
        depth=config.display.depth if depth is None else depth,
        width=config.display.width,
        flat=flat,
    )
    click.echo(output.rstrip("\n"))


@main.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show effective configuration (merged from all sources).

    Output is JSON format for easy parsing.
    """
    print(json.dumps(_config(ctx).to_dict(), indent=2))


@config.command("init")
@click.option("--global", "is_global", is_flag=True, help="Create global config at ~/.hierarchy_stats.json")
@click.option("--force", is_flag=True, help="Overwrite existing config file")
def config_init(is_global: bool, force: bool) -> None:
    """Initialize a configuration file with template.

    By default, creates .hierarchy_stats.json in the current directory.
    """
    if is_global:
        config_path = get_global_config_path()
    else:
        config_path = get_project_config_path(Path.cwd())

    if config_path.exists() and not force:
        console.print(f"[red]Error:[/red] Config file already exists: {config_path}")
        console.print("Use --force to overwrite")
        raise SystemExit(1)

    config_path.write_text(generate_config_template_string())
    console.print(f"[green]Created config file:[/green] {config_path}")


if __name__ == "__main__":
    main()
