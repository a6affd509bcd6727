"""Tests for logging across modules."""

import logging
from pathlib import Path

from click.testing import CliRunner

from hierarchy_stats.aggregation import build_report
from hierarchy_stats.aggregation.categories import k_largest_categories
from hierarchy_stats.cli import main
from hierarchy_stats.loader import load_records

FIXTURES = Path(__file__).parent / "fixtures"


def test_cli_log_level_option_accepted():
    runner = CliRunner()
    result = runner.invoke(main, ["--log-level", "INFO", "largest", "--sample"])
    assert result.exit_code == 0, result.output


def test_cli_log_level_case_insensitive():
    runner = CliRunner()
    result = runner.invoke(main, ["--log-level", "debug", "leaves", "--sample"])
    assert result.exit_code == 0, result.output


def test_cli_rejects_unknown_log_level():
    runner = CliRunner()
    result = runner.invoke(main, ["--log-level", "LOUD", "leaves", "--sample"])
    assert result.exit_code != 0


def test_loader_logs_info(caplog):
    with caplog.at_level(logging.INFO, logger="hierarchy_stats.loader"):
        load_records(FIXTURES / "records.json")
    assert any("Loaded 5 records from records.json" in r.message for r in caplog.records)


def test_report_logs_info(caplog, sample_records):
    with caplog.at_level(logging.INFO, logger="hierarchy_stats.aggregation.report"):
        build_report(sample_records, 3)
    assert any("largest subtree 20992" in r.message for r in caplog.records)


def test_clamped_k_logs_debug(caplog, sample_records):
    with caplog.at_level(logging.DEBUG, logger="hierarchy_stats.aggregation.categories"):
        k_largest_categories(sample_records, 50)
    assert any("clamping" in r.message for r in caplog.records)
