from __future__ import annotations

import json

from click.testing import CliRunner

from quantiparse.cli.main import cli


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "parse" in result.output


def test_cli_parse_prints_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["parse", "19 lbs, 4 oz", "--evaluate"], catch_exceptions=False)
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["kind"] == "irregular"
    assert payload["result"]["quantity"]["pounds"]["digits"] == "19"
    assert payload["measurement"]["magnitude"] == "308"


def test_cli_canonical():
    runner = CliRunner()
    result = runner.invoke(cli, ["parse", "--canonical", "kg*m/s^2"])
    assert result.exit_code == 0
    assert result.output.strip() == "kg * m / s^2"


def test_cli_parse_failure_exits_nonzero():
    runner = CliRunner()
    result = runner.invoke(cli, ["parse", "5 mxyz"])
    assert result.exit_code == 1


def test_cli_lists_prefixes():
    runner = CliRunner()
    result = runner.invoke(cli, ["units", "--prefixes"])
    assert result.exit_code == 0
    assert "kilo" in result.output.split()
