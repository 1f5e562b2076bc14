"""Tests for the debtplan command line interface."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from debtplan.cli import cli
from tests.conftest import assert_float_equal

DEBTS = [
    {"id": "a", "name": "A", "balance": 1000, "interestRate": 20, "minimumPayment": 50},
    {"id": "b", "name": "B", "balance": 500, "interestRate": 10, "minimumPayment": 25},
]


@pytest.fixture
def debts_file(tmp_path):
    path = tmp_path / "debts.json"
    path.write_text(json.dumps({"debts": DEBTS}), encoding="utf-8")
    return path


def test_simulate_json_output(debts_file):
    """Verify simulate prints the timeline and summary as JSON."""
    result = CliRunner().invoke(
        cli, ["simulate", str(debts_file), "--strategy", "avalanche", "--extra", "100", "--format", "json"]
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    month_one = payload["timeline"][1]
    assert month_one["month"] == 1
    assert_float_equal(month_one["A"], 866.67)
    assert_float_equal(month_one["B"], 479.17)
    assert payload["summary"]["strategy"] == "avalanche"
    assert payload["summary"]["debt_free"] is True


def test_simulate_table_output(debts_file):
    """Verify simulate prints a readable table."""
    result = CliRunner().invoke(cli, ["simulate", str(debts_file), "--strategy", "snowball"])

    assert result.exit_code == 0, result.output
    assert "Month" in result.stdout
    assert "Strategy: snowball" in result.stdout
    assert "Total interest:" in result.stdout


def test_simulate_uses_configured_defaults(debts_file, monkeypatch):
    """Verify simulate falls back to the configured strategy and extra payment."""
    monkeypatch.setenv("DEBTPLAN_DEFAULT_STRATEGY", "snowball")
    monkeypatch.setenv("DEBTPLAN_EXTRA_PAYMENT", "100")

    result = CliRunner().invoke(cli, ["simulate", str(debts_file), "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["summary"]["strategy"] == "snowball"
    assert_float_equal(payload["timeline"][1]["B"], 379.17)


def test_simulate_reads_bare_list_from_stdin():
    """Verify a bare JSON list is accepted on stdin."""
    result = CliRunner().invoke(cli, ["simulate", "-", "--format", "json"], input=json.dumps(DEBTS))

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["timeline"][0]["totalBalance"] == 1500.0


def test_simulate_empty_list():
    """Verify an empty debt list is reported as debt free."""
    result = CliRunner().invoke(cli, ["simulate", "-", "--format", "json"], input="[]")

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["timeline"] == [{"month": 0, "totalBalance": 0.0}]


def test_compare_json_output(debts_file):
    """Verify compare prints both summaries and the recommendation as JSON."""
    result = CliRunner().invoke(cli, ["compare", str(debts_file), "--extra", "100", "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["recommended"] in {"avalanche", "snowball"}
    assert payload["avalanche"]["total_interest"] <= payload["snowball"]["total_interest"]


def test_compare_table_output(debts_file):
    """Verify compare prints both strategies and the recommendation."""
    result = CliRunner().invoke(cli, ["compare", str(debts_file), "--extra", "100"])

    assert result.exit_code == 0, result.output
    assert "== avalanche" in result.stdout
    assert "Recommended:" in result.stdout


def test_invalid_json_is_a_usage_error(tmp_path):
    """Verify malformed JSON exits with a usage error."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(cli, ["simulate", str(path)])

    assert result.exit_code == 2
    assert "not valid JSON" in result.output


def test_wrong_shape_is_a_usage_error(tmp_path):
    """Verify JSON without a debt list exits with a usage error."""
    path = tmp_path / "shape.json"
    path.write_text(json.dumps({"loans": []}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["simulate", str(path)])

    assert result.exit_code == 2
    assert "debts" in result.output


def test_unknown_strategy_choice_rejected(debts_file):
    """Verify an unknown --strategy value is rejected."""
    result = CliRunner().invoke(cli, ["simulate", str(debts_file), "--strategy", "hybrid"])

    assert result.exit_code == 2
