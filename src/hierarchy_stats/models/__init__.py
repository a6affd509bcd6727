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

"""Data models for file hierarchies."""

from hierarchy_stats.models.record import FileRecord, TOP_LEVEL_SENTINEL
from hierarchy_stats.models.tree import ROOT_INDEX, FileTree, TreeNode
from hierarchy_stats.models.report import HierarchyReport

__all__ = [
    "FileRecord",
    "TOP_LEVEL_SENTINEL",
    "ROOT_INDEX",
    "FileTree",
    "TreeNode",
    "HierarchyReport",
]
