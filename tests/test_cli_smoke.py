"""CLI smoke tests — run commands against a snapshot file."""

import json

import pytest
from click.testing import CliRunner

from samplerctl.cli.app import cli
from samplerctl.tree import UIDocument


@pytest.fixture
def snapshot(tmp_path, panel_data):
    path = tmp_path / "panel.json"
    path.write_text(json.dumps(panel_data), encoding="utf-8")
    return str(path)


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "samplerctl" in result.output
    assert "--snapshot" in result.output


def test_cli_list(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "list"])
    assert result.exit_code == 0
    assert '[temp] [range] "Temperature" = 0.7 [0..2]' in result.output
    assert '[stream_toggle] [checkbox] "Streaming" = true' in result.output


def test_cli_list_json_sorted(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "--json", "list", "--sorted"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [p["name"] for p in data] == ["Seed", "Streaming", "Temperature", "Top P"]


def test_cli_get(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "get", "TEMP"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.7"


def test_cli_get_missing(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "get", "missing-param"])
    assert result.exit_code == 1
    assert 'Parameter "missing-param" not found.' in result.output


def test_cli_set_and_save(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "set", "--name", "temp", "5", "--save"])
    assert result.exit_code == 0
    assert UIDocument.load(snapshot).get_element_by_id("temp_openai").value == "2"


def test_cli_set_without_save_leaves_snapshot(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "set", "--name", "temp", "1.1"])
    assert result.exit_code == 0
    assert UIDocument.load(snapshot).get_element_by_id("temp_openai").value == "0.7"


def test_cli_set_invalid_value(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "--json", "set", "--name", "temp", "abc"])
    assert result.exit_code == 1
    assert "finite number" in result.output


def test_cli_suggest(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "suggest", "sampler-set"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0] == "seed\tSeed\t(number)"
    assert "stream_toggle\tStreaming\t(boolean)" in lines


def test_cli_set_negative_value(snapshot):
    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "set", "--name", "seed", "-0.5", "--save"])
    assert result.exit_code == 0
    assert UIDocument.load(snapshot).get_element_by_id("seed_textgenerationwebui").value == "-0.5"

    result = runner.invoke(cli, ["--snapshot", snapshot, "set", "--name", "temp", "-0.5", "--save"])
    assert result.exit_code == 0
    assert UIDocument.load(snapshot).get_element_by_id("temp_openai").value == "0"


def test_cli_list_json_is_strict(snapshot):
    def reject(constant):
        raise ValueError(f"non-standard JSON constant {constant}")

    runner = CliRunner()
    result = runner.invoke(cli, ["--snapshot", snapshot, "--json", "list"])
    assert result.exit_code == 0
    assert "NaN" not in result.output
    data = json.loads(result.output, parse_constant=reject)
    toggle = next(p for p in data if p["id"] == "stream_toggle")
    assert toggle["min"] is None
    assert toggle["max"] is None
    assert toggle["checked"] is True
