"""Tests for the guess command."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ambiguess.cli import cli


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path: Path):
    """Run ``guess`` pinned to a fixed instant, UTC local time and no DNS."""

    def _invoke(token, *extra):
        args = [
            "guess", token,
            "--now", "2015-09-27T09:29:35Z",
            "--local-timezone", "UTC",
            "--config", str(tmp_path / "missing.json"),
            "--no-dns",
            "--no-color",
            *extra,
        ]
        return runner.invoke(cli, args)

    return _invoke


class TestGuessOutput:
    """Tests for the text output."""

    def test_timestamp(self, invoke):
        result = invoke("1443346122")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == (
            "Timestamp 1443346122 is 2015-09-27 09:28:42 +0000 UTC"
            " (within the minute, 53 seconds ago)"
        )
        assert lines[1] == "    In other time zones:"
        assert "    2015-09-27 02:28:42 -0700 PDT (America/Los_Angeles)" in lines
        assert "1443346122 bytes" in lines
        assert "1970-01-17" not in result.output

    def test_unlikely(self, invoke):
        result = invoke("1443346122", "--unlikely")
        assert result.exit_code == 0
        assert "Timestamp 1443346122 is 1970-01-17" in result.output

    def test_no_sort_keeps_discovery_order(self, invoke):
        result = invoke("1443346122", "--no-sort", "--unlikely")
        assert result.output.splitlines()[0] == "1443346122 bytes"

    def test_verbose(self, invoke):
        result = invoke("1443346122", "--verbose")
        assert result.output.splitlines()[0] == "[goodness: 200, source: timestamp (seconds)]"

    def test_calendar(self, invoke):
        result = invoke("2015-09-24T09:29:35Z")

        assert result.exit_code == 0
        assert "Mo Tu We Th Fr Sa Su" in result.output
        assert "September 2015" in result.output

    def test_ip_without_dns(self, invoke):
        result = invoke("192.0.2.1")
        assert result.output.splitlines() == [
            "IP address 192.0.2.1",
            "    (address does not resolve to a host name)",
        ]

    def test_only_unlikely_guesses(self, invoke):
        result = invoke("0")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "No good guesses, showing unlikely ones:"
        assert lines[1] == "0 bytes"

    def test_trace(self, invoke):
        result = invoke("8TiB", "--trace")
        assert result.exit_code == 0
        assert "8796093022208 bytes" in result.output


class TestGuessJson:
    """Tests for --json output."""

    def test_json(self, invoke):
        result = invoke("1443346122", "--json")

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["token"] == "1443346122"
        assert payload["note"] is None
        first = payload["guesses"][0]
        assert first["source"] == "timestamp (seconds)"
        assert first["goodness"] == 200
        assert first["comment"] == "within the minute, 53 seconds ago"

    def test_json_note(self, invoke):
        payload = json.loads(invoke("0", "--json").stdout)
        assert payload["note"] == "no good guesses, showing unlikely ones"
        assert [g["rendering"] for g in payload["guesses"]] == ["0 bytes"]

    def test_json_nothing_guessed(self, invoke):
        result = invoke("hello", "--json")

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["token"] == "hello"
        assert payload["error"]["code"] == "CLASSIFICATION_ERROR"
        assert payload["error"]["exit_code"] == 1
        assert payload["error"]["details"] == {"token": "hello"}

    def test_json_configuration_error(self, invoke):
        result = invoke("1443346122", "--json", "--timezones", "Not/AZone")

        assert result.exit_code == 2
        error = json.loads(result.stdout)["error"]
        assert error["code"] == "CONFIGURATION_ERROR"
        assert error["recovery_suggestion"] == "Check config: ambiguess config validate"


class TestGuessFailures:
    """Tests for exit codes."""

    def test_nothing_guessed(self, invoke):
        result = invoke("hello")
        assert result.exit_code == 1
        assert "Could not guess anything." in result.output

    def test_blank_token(self, invoke):
        assert invoke("   ").exit_code == 1

    def test_unknown_timezone(self, invoke):
        result = invoke("1443346122", "--timezones", "UTC,Not/AZone")
        assert result.exit_code == 2

    def test_bad_config_file(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"guessing": {"timezones": []}}), encoding="utf-8")

        result = runner.invoke(cli, ["guess", "1443346122", "--config", str(path), "--no-dns"])

        assert result.exit_code == 2

    def test_bad_now(self, invoke):
        result = invoke("1443346122", "--now", "yesterday-ish")
        assert result.exit_code != 0

    def test_custom_zone_list(self, invoke):
        result = invoke("1443346122", "--timezones", "Asia/Tokyo")
        lines = result.output.splitlines()
        assert lines[2] == "    2015-09-27 18:28:42 +0900 JST (Asia/Tokyo)"
        assert lines[3] == "    UNIX timestamp: 1443346122"
