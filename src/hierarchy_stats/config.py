"""Configuration system for hierarchy-stats.

Provides layered configuration with precedence:
1. CLI flags (highest)
2. Environment variables
3. Project config (./.hierarchy_stats.json)
4. Global config (~/.hierarchy_stats.json)
5. Hardcoded defaults (lowest)
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

VALID_OUTPUT_FORMATS = ("json", "text")

# Hardcoded defaults
DEFAULT_TOP_K = 3
DEFAULT_OUTPUT_FORMAT = "json"
DEFAULT_WIDTH = 120

CONFIG_FILE_NAME = ".hierarchy_stats.json"

# Environment variable names
ENV_TOP_K = "HIERARCHY_STATS_TOP_K"
ENV_OUTPUT_FORMAT = "HIERARCHY_STATS_OUTPUT_FORMAT"
ENV_MAX_DEPTH = "HIERARCHY_STATS_MAX_DEPTH"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigLoadError(Exception):
    """Raised when configuration file cannot be loaded."""

    pass


def _check_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(f"{name} must be an integer, got {value!r}")


def _check_unknown(cls: type, data: dict[str, Any], section: str) -> None:
    known_fields = {f.name for f in fields(cls)}
    unknown = set(data.keys()) - known_fields
    if unknown:
        raise ConfigValidationError(
            f"Unknown fields in {section} config: {', '.join(sorted(unknown))}"
        )


@dataclass
class ReportConfig:
    """Settings for the aggregate report."""

    top_k: int = DEFAULT_TOP_K
    sort_leaves: bool = True

    def validate(self) -> None:
        _check_int("top_k", self.top_k)
        if not isinstance(self.sort_leaves, bool):
            raise ConfigValidationError(
                f"sort_leaves must be true or false, got {self.sort_leaves!r}"
            )
        if self.top_k < 0:
            raise ConfigValidationError(f"top_k must be non-negative, got {self.top_k}")

    def to_dict(self) -> dict[str, Any]:
        return {"top_k": self.top_k, "sort_leaves": self.sort_leaves}

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "ReportConfig":
        if strict:
            _check_unknown(cls, data, "report")
        return cls(
            top_k=data.get("top_k", DEFAULT_TOP_K),
            sort_leaves=data.get("sort_leaves", True),
        )


@dataclass
class TreeConfig:
    """Settings for tree construction."""

    max_depth: int | None = None

    def validate(self) -> None:
        if self.max_depth is None:
            return
        _check_int("max_depth", self.max_depth)
        if self.max_depth <= 0:
            raise ConfigValidationError(
                f"max_depth must be positive, got {self.max_depth}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"max_depth": self.max_depth}

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "TreeConfig":
        if strict:
            _check_unknown(cls, data, "tree")
        return cls(max_depth=data.get("max_depth"))


@dataclass
class DisplayConfig:
    """Settings for rendering results."""

    output_format: str = DEFAULT_OUTPUT_FORMAT
    width: int = DEFAULT_WIDTH
    depth: int | None = None

    def validate(self) -> None:
        if self.output_format not in VALID_OUTPUT_FORMATS:
            raise ConfigValidationError(
                f"Invalid output_format '{self.output_format}'. "
                f"Valid values: {', '.join(VALID_OUTPUT_FORMATS)}"
            )
        _check_int("width", self.width)
        if self.width <= 0:
            raise ConfigValidationError(f"width must be positive, got {self.width}")
        if self.depth is None:
            return
        _check_int("depth", self.depth)
        if self.depth < 0:
            raise ConfigValidationError(f"depth must be non-negative, got {self.depth}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_format": self.output_format,
            "width": self.width,
            "depth": self.depth,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "DisplayConfig":
        if strict:
            _check_unknown(cls, data, "display")
        return cls(
            output_format=data.get("output_format", DEFAULT_OUTPUT_FORMAT),
            width=data.get("width", DEFAULT_WIDTH),
            depth=data.get("depth"),
        )


@dataclass
class StatsConfig:
    """Complete hierarchy-stats configuration."""

    version: str = "1"
    report: ReportConfig = field(default_factory=ReportConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def validate(self) -> None:
        """Validate every section."""
        self.report.validate()
        self.tree.validate()
        self.display.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "report": self.report.to_dict(),
            "tree": self.tree.to_dict(),
            "display": self.display.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> "StatsConfig":
        """Create from dictionary.

        Keys starting with ``_`` are treated as comments and ignored.
        """
        data = {k: v for k, v in data.items() if not k.startswith("_")}
        if strict:
            _check_unknown(cls, data, "top-level")

        def section(name: str) -> dict[str, Any]:
            raw = data.get(name) or {}
            if not isinstance(raw, dict):
                raise ConfigValidationError(f"Section '{name}' must be an object")
            return {k: v for k, v in raw.items() if not k.startswith("_")}

        return cls(
            version=str(data.get("version", "1")),
            report=ReportConfig.from_dict(section("report"), strict),
            tree=TreeConfig.from_dict(section("tree"), strict),
            display=DisplayConfig.from_dict(section("display"), strict),
        )


def get_global_config_path() -> Path:
    """Get path to global config file."""
    return Path.home() / CONFIG_FILE_NAME


def get_project_config_path(project_dir: Path) -> Path:
    """Get path to project config file."""
    return project_dir / CONFIG_FILE_NAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Read the raw JSON object stored in a config file.

    Returns:
        The decoded object, or an empty dict when the file does not exist

    Raises:
        ConfigLoadError: If file cannot be read or parsed
    """
    if not path.exists():
        return {}

    try:
        content = path.read_text()
    except OSError as e:
        raise ConfigLoadError(f"Error reading {path}: {e}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config in {path} must be a JSON object")

    logger.debug("Loaded config from %s", path)
    return data


def load_config_file(path: Path, strict: bool = False) -> StatsConfig:
    """Load configuration from a JSON file.

    Args:
        path: Path to the config file
        strict: If True, fail on unknown fields

    Returns:
        StatsConfig instance (defaults when the file does not exist)

    Raises:
        ConfigLoadError: If file cannot be read or parsed
        ConfigValidationError: If strict=True and unknown fields found
    """
    return StatsConfig.from_dict(load_config_data(path), strict=strict)


def merge_config_data(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge raw config objects with later layers taking precedence.

    Sections are merged key by key. A later layer overrides exactly the keys
    it sets, including keys set back to their default value.
    """
    result: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if key.startswith("_"):
                continue
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = {**result[key], **value}
            elif isinstance(value, dict):
                result[key] = dict(value)
            else:
                result[key] = value
    return result


def _int_from_env(name: str) -> int | None:
    value = os.environ.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigValidationError(f"{name} must be an integer, got '{value}'")


def apply_env_overrides(config: StatsConfig) -> StatsConfig:
    """Apply environment variable overrides to config.

    Raises:
        ConfigValidationError: If an env var value is invalid
    """
    result = copy.deepcopy(config)

    top_k = _int_from_env(ENV_TOP_K)
    if top_k is not None:
        result.report.top_k = top_k

    max_depth = _int_from_env(ENV_MAX_DEPTH)
    if max_depth is not None:
        result.tree.max_depth = max_depth

    if output_format := os.environ.get(ENV_OUTPUT_FORMAT):
        result.display.output_format = output_format

    return result


def get_config(project_dir: Path | None = None) -> StatsConfig:
    """Load and merge configuration from all sources.

    Loads in order (later sources override earlier):
    1. Hardcoded defaults
    2. Global config (~/.hierarchy_stats.json)
    3. Project config (<project_dir>/.hierarchy_stats.json, default cwd)
    4. Environment variables

    Returns:
        Merged, validated configuration
    """
    if project_dir is None:
        project_dir = Path.cwd()

    data = merge_config_data(
        load_config_data(get_global_config_path()),
        load_config_data(get_project_config_path(project_dir)),
    )
    result = apply_env_overrides(StatsConfig.from_dict(data))
    result.validate()
    return result


def generate_config_template() -> dict[str, Any]:
    """Generate a config template dictionary."""
    return {
        "version": "1",
        "_comment_version": "Config file format version",
        "report": {
            "top_k": DEFAULT_TOP_K,
            "_comment_top_k": "Number of top categories to report",
            "sort_leaves": True,
            "_comment_sort_leaves": "Sort leaf names alphabetically",
        },
        "tree": {
            "max_depth": None,
            "_comment_max_depth": "Reject hierarchies nested deeper than this (null = unlimited)",
        },
        "display": {
            "output_format": DEFAULT_OUTPUT_FORMAT,
            "_comment_output_format": f"Output format. Valid: {', '.join(VALID_OUTPUT_FORMATS)}",
            "width": DEFAULT_WIDTH,
            "_comment_width": "Terminal width for tree rendering",
            "depth": None,
            "_comment_depth": "Maximum tree depth to render (null = unlimited)",
        },
    }


def generate_config_template_string() -> str:
    """Generate a config template as a formatted JSON string."""
    return json.dumps(generate_config_template(), indent=2)
