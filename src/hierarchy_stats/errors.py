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

"""Exceptions raised while building or querying a file hierarchy."""

from __future__ import annotations


class HierarchyError(ValueError):
    """Base class for invalid hierarchy input."""

    pass


class DuplicateIdError(HierarchyError):
    """Raised when two records share the same id."""

    def __init__(self, record_id: int):
        self.record_id = record_id
        super().__init__(f"Duplicate record id: {record_id}")


class MalformedHierarchyError(HierarchyError):
    """Raised when parent links form a cycle or nest too deeply."""

    def __init__(self, message: str, record_ids: list[int] | None = None):
        self.record_ids = record_ids or []
        super().__init__(message)


class InvalidArgumentError(HierarchyError):
    """Raised when a query argument is out of range."""

    pass
