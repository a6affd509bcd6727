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

"""Tests for CLI commands: report, leaves, categories, largest, show, config."""

import json
from pathlib import Path

from click.testing import CliRunner

from hierarchy_stats import __version__
from hierarchy_stats.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


def _invoke(*args):
    runner = CliRunner()
    return runner.invoke(main, list(args))


def _write_chain(tmp_path, depth):
    """Write a single chain of records, each the parent of the next."""
    records = [{"id": 0, "name": "n0", "size": 0}] + [
        {"id": i, "name": f"n{i}", "parent": i - 1, "size": 1} for i in range(1, depth)
    ]
    path = tmp_path / "chain.json"
    path.write_text(json.dumps(records))
    return path



# ---------------------------------------------------------------------------
# report
# ---------------------------------------------------------------------------

def test_report_sample_json(sample_leaves):
    result = _invoke("report", "--sample")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["leaf_names"] == sample_leaves
    assert data["top_categories"]["categories"] == ["Documents", "Folder", "Media"]
    assert data["largest_subtree_size"] == 20992


def test_report_text_format():
    result = _invoke("--format", "text", "report", "--sample")
    assert result.exit_code == 0, result.output
    assert "Largest subtree size: 20992" in result.output
    assert "Top 3 categories:" in result.output
    assert "  Video.mp4" in result.output


def test_report_from_yaml_file_with_k():
    result = _invoke("report", str(FIXTURES / "records.yaml"), "-k", "1")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["top_categories"]["categories"] == ["Documents"]


def test_report_uses_project_config(tmp_path):
    (tmp_path / ".hierarchy_stats.json").write_text(json.dumps({"report": {"top_k": 2}}))
    result = _invoke("report", "--sample")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["top_categories"]["k"] == 2


def test_report_unsorted_keeps_tree_order():
    result = _invoke("report", "--sample", "--unsorted")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["leaf_names"][0] == "Document.txt"


def test_report_requires_source():
    result = _invoke("report")
    assert result.exit_code == 1
    assert "Provide a RECORDS_FILE or use --sample" in result.output


def test_negative_k_fails_cleanly():
    result = _invoke("report", "--sample", "-k", "-1")
    assert result.exit_code == 1
    assert "k must be non-negative" in result.output


# ---------------------------------------------------------------------------
# single aggregates
# ---------------------------------------------------------------------------

def test_leaves_json(sample_leaves):
    result = _invoke("leaves", "--sample")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == sample_leaves


def test_leaves_text_no_sort():
    result = _invoke("-f", "text", "leaves", str(FIXTURES / "records.json"), "--no-sort")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["readme.md", "main.py", "orphan.log"]


def test_categories_text():
    result = _invoke("-f", "text", "categories", "--sample", "-k", "2")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["Documents", "Folder"]


def test_largest_json():
    result = _invoke("largest", "--sample")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"largest_subtree_size": 20992}


def test_largest_text_from_json_file():
    result = _invoke("--format", "text", "largest", str(FIXTURES / "records.json"))
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "1500"


def test_largest_honours_max_depth_env(tmp_path):
    path = _write_chain(tmp_path, 20)
    runner = CliRunner()
    result = runner.invoke(
        main, ["largest", str(path)], env={"HIERARCHY_STATS_MAX_DEPTH": "10"}
    )
    assert result.exit_code == 1
    assert "max_depth=10" in result.output



# ---------------------------------------------------------------------------
# errors
# ---------------------------------------------------------------------------

def test_cyclic_file_fails():
    result = _invoke("largest", str(FIXTURES / "cyclic.json"))
    assert result.exit_code == 1
    assert "Parent cycle detected" in result.output


def test_duplicate_file_fails():
    result = _invoke("leaves", str(FIXTURES / "duplicate.json"))
    assert result.exit_code == 1
    assert "Duplicate record id: 1" in result.output


def test_bad_records_file_fails(tmp_path):
    path = tmp_path / "records.json"
    path.write_text("{broken")
    result = _invoke("report", str(path))
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_bad_config_fails(tmp_path):
    (tmp_path / ".hierarchy_stats.json").write_text("{broken")
    result = _invoke("report", "--sample")
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_mistyped_config_value_fails_cleanly(tmp_path):
    (tmp_path / ".hierarchy_stats.json").write_text(json.dumps({"display": {"width": "wide"}}))
    result = _invoke("report", "--sample")
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "width must be an integer" in result.output


def test_project_config_restores_default_over_global(tmp_path):
    (tmp_path / "home" / ".hierarchy_stats.json").write_text(
        json.dumps({"report": {"top_k": 5, "sort_leaves": False}})
    )
    (tmp_path / ".hierarchy_stats.json").write_text(
        json.dumps({"report": {"top_k": 3, "sort_leaves": True}})
    )
    result = _invoke("config", "show")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["report"] == {"top_k": 3, "sort_leaves": True}


def test_string_ids_in_records_file_fail(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([
        {"id": "1", "name": "dir"},
        {"id": 2, "name": "f", "parent": 1, "size": 10},
    ]))
    result = _invoke("largest", str(path))
    assert result.exit_code == 1
    assert "id must be an integer" in result.output



# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------

def test_show_text_renders_tree():
    result = _invoke("-f", "text", "show", "--sample")
    assert result.exit_code == 0, result.output
    assert "(root)" in result.output
    assert "Folder2" in result.output
    assert "20992" in result.output


def test_show_json_with_depth():
    result = _invoke("show", "--sample", "--depth", "1")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    folder = data["children"][0]
    assert folder["name"] == "Folder"
    assert folder["childrenTruncated"] is True
    assert "children" not in folder


def test_show_depth_zero_renders_root_only():
    result = _invoke("show", "--sample", "--depth", "0")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["childrenCount"] == 3
    assert "children" not in data


def test_show_rejects_negative_depth():
    result = _invoke("show", "--sample", "--depth", "-1")
    assert result.exit_code == 2
    assert "-1" in result.output


def test_show_deep_chain_nested_json_fails_cleanly(tmp_path):
    path = _write_chain(tmp_path, 5000)
    result = _invoke("show", str(path))
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "flat layout" in result.output
    assert "RecursionError" not in result.output


def test_show_deep_chain_flat_json(tmp_path):
    path = _write_chain(tmp_path, 5000)
    result = _invoke("show", str(path), "--flat")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["root"]["children"] == [0]
    assert len(data["nodes"]) == 5000
    assert data["nodes"][0]["subtree_size"] == 4999
    assert data["nodes"][-1]["subtree_size"] == 1


def test_show_deep_chain_with_depth_limit(tmp_path):
    path = _write_chain(tmp_path, 5000)
    result = _invoke("show", str(path), "--depth", "3")
    assert result.exit_code == 0, result.output
    node = json.loads(result.output)["children"][0]["children"][0]["children"][0]
    assert node["childrenTruncated"] is True


def test_show_deep_chain_text(tmp_path):
    path = _write_chain(tmp_path, 5000)
    result = _invoke("-f", "text", "show", str(path), "--depth", "2")
    assert result.exit_code == 0, result.output
    assert "... (1 more)" in result.output



# ---------------------------------------------------------------------------
# config / version
# ---------------------------------------------------------------------------

def test_config_show_reflects_flags():
    result = _invoke("-f", "text", "config", "show")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["display"]["output_format"] == "text"


def test_config_init_creates_project_file(tmp_path):
    result = _invoke("config", "init")
    assert result.exit_code == 0, result.output
    data = json.loads((tmp_path / ".hierarchy_stats.json").read_text())
    assert data["report"]["top_k"] == 3


def test_config_init_refuses_overwrite(tmp_path):
    (tmp_path / ".hierarchy_stats.json").write_text("{}")
    result = _invoke("config", "init")
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_config_init_force(tmp_path):
    (tmp_path / ".hierarchy_stats.json").write_text("{}")
    result = _invoke("config", "init", "--force")
    assert result.exit_code == 0, result.output
    assert "top_k" in (tmp_path / ".hierarchy_stats.json").read_text()


def test_version():
    result = _invoke("version")
    assert result.exit_code == 0
    assert __version__ in result.output
