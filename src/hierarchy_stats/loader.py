"""Load file records from JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from hierarchy_stats.models.record import FileRecord

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


class RecordLoadError(Exception):
    """Raised when a records file cannot be read or parsed."""

    pass


def parse_records(data: Any, source: str = "<data>") -> list[FileRecord]:
    """Convert a decoded document into FileRecords.

    The document is either a list of record mappings, or a mapping holding
    such a list under ``records`` or ``files``.
    """
    if isinstance(data, dict):
        items = data.get("records", data.get("files"))
        if items is None:
            raise RecordLoadError(f"{source}: expected a 'records' list")
    else:
        items = data

    if not isinstance(items, list):
        raise RecordLoadError(
            f"{source}: records must be a list, got {type(items).__name__}"
        )

    records: list[FileRecord] = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise RecordLoadError(f"{source}: record #{position} is not a mapping")
        try:
            records.append(FileRecord.from_dict(item))
        except KeyError as e:
            raise RecordLoadError(
                f"{source}: record #{position} is missing field {e}"
            ) from e
        except (TypeError, ValueError) as e:
            raise RecordLoadError(f"{source}: record #{position}: {e}") from e
    return records


def load_records(path: Path) -> list[FileRecord]:
    """Load records from a .json, .yaml or .yml file.

    Raises:
        RecordLoadError: If the file cannot be read, decoded, or converted
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
        raise RecordLoadError(
            f"Unsupported records file type '{suffix}' for {path}. "
            f"Use one of: {', '.join(JSON_SUFFIXES + YAML_SUFFIXES)}"
        )

    try:
        content = path.read_text()
    except OSError as e:
        raise RecordLoadError(f"Error reading {path}: {e}") from e

    try:
        if suffix in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RecordLoadError(f"Invalid {suffix.lstrip('.').upper()} in {path}: {e}") from e

    records = parse_records(data, source=str(path))
    logger.info("Loaded %d records from %s", len(records), path.name)
    return records
