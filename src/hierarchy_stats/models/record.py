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

"""File record model - one flat entry of the hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Legacy "no parent" marker accepted at the loading boundary only.
TOP_LEVEL_SENTINEL = -1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class FileRecord:
    """A single file or folder entry.

    ``parent_id`` is ``None`` for top-level records. ``size`` is the record's
    own size and excludes anything below it.
    """

    id: int
    name: str
    categories: tuple[str, ...] = field(default_factory=tuple)
    parent_id: int | None = None
    size: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.categories, tuple):
            object.__setattr__(self, "categories", tuple(self.categories))
        if not _is_int(self.id):
            raise ValueError(f"Record id must be an integer, got {self.id!r}")
        if not isinstance(self.name, str):
            raise ValueError(f"Record {self.id} name must be a string, got {self.name!r}")
        if self.parent_id is not None and not _is_int(self.parent_id):
            raise ValueError(
                f"Record {self.id} parent must be an integer, got {self.parent_id!r}"
            )
        if not _is_int(self.size):
            raise ValueError(f"Record {self.id} size must be an integer, got {self.size!r}")
        if self.size < 0:
            raise ValueError(f"Record {self.id} has negative size {self.size}")

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "categories": list(self.categories),
            "parent": self.parent_id,
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileRecord:
        """Create a record from a mapping.

        Accepts ``parent`` or ``parent_id``; a missing, null or ``-1`` parent
        means top-level.
        """
        parent = data.get("parent_id", data.get("parent"))
        if _is_int(parent) and parent == TOP_LEVEL_SENTINEL:
            parent = None
        return cls(
            id=data["id"],
            name=data["name"],
            categories=tuple(data.get("categories") or ()),
            parent_id=parent,
            size=data.get("size", 0),
        )
