from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from typer.testing import CliRunner

import cli.doctor
import cli.ip
import cli.now
from cli.main import build_app
from conftest import RecordingClipboard, StaticSource
from core.domain.errors import TraceFetchError
from core.services.clock import take_snapshot

runner = CliRunner()

INSTANT = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clipboard(monkeypatch) -> RecordingClipboard:
    board = RecordingClipboard()
    monkeypatch.setattr(cli.ip, "SystemClipboard", lambda: board)
    return board


def _serve(monkeypatch, source: StaticSource) -> None:
    monkeypatch.setattr(cli.ip, "HttpTraceSource", lambda settings: source)


def test_help_lists_commands():
    result = runner.invoke(build_app(), ["--help"])

    assert result.exit_code == 0
    for name in ("ip", "now", "doctor"):
        assert name in result.output


def test_ip_command_copies_address(monkeypatch, clipboard):
    _serve(monkeypatch, StaticSource("h=1.1.1.1\nip=203.0.113.7\n"))

    result = runner.invoke(build_app(), ["ip"])

    assert result.exit_code == 0
    assert "ip address: 203.0.113.7" in result.output
    assert "IP address copied to clipboard!" in result.output
    assert clipboard.copied == ["203.0.113.7"]


def test_ip_command_not_connected_exits_non_zero(monkeypatch, clipboard):
    _serve(monkeypatch, StaticSource("h=1.1.1.1\n"))

    result = runner.invoke(build_app(), ["ip"])

    assert result.exit_code == 1
    assert "Are you sure you are connected to network?" in result.output
    assert clipboard.copied == []


def test_ip_command_fetch_error(monkeypatch, clipboard):
    _serve(monkeypatch, StaticSource(error=TraceFetchError("timeout")))

    result = runner.invoke(build_app(), ["ip"])

    assert result.exit_code == 1
    assert "error fetching ip address." in result.output
    assert "ip address:" not in result.output


def test_ip_command_clipboard_failure_still_succeeds(monkeypatch):
    _serve(monkeypatch, StaticSource("ip=203.0.113.7\n"))
    monkeypatch.setattr(cli.ip, "SystemClipboard", lambda: RecordingClipboard(fail_with="no clipboard"))

    result = runner.invoke(build_app(), ["ip"])

    assert result.exit_code == 0
    assert "ip address: 203.0.113.7" in result.output
    assert "Error copying to clipboard: no clipboard" in result.output


def test_now_prints_both_blocks_once_without_local_line(monkeypatch):
    monkeypatch.setattr(
        cli.now,
        "take_snapshot",
        lambda **kw: take_snapshot(INSTANT, ist_zone=kw["ist_zone"], local_zone=ZoneInfo("Europe/London")),
    )

    result = runner.invoke(build_app(), ["now"])

    assert result.exit_code == 0
    assert result.output.count("24-hour format:") == 1
    assert result.output.count("12-hour format:") == 1
    assert "IST   : 2025-01-15 17:30:00.000" in result.output
    assert "IST   : 2025-01-15 05:30:00.000 PM" in result.output
    assert "UTC   : 2025-01-15 12:00:00.000 PM" in result.output
    assert "Local" not in result.output
    assert "Exiting..." not in result.output


def test_now_without_resolvable_ist_zone(monkeypatch):
    monkeypatch.setenv("KC_IST_ZONE_NAME", "Nowhere/Atlantis")
    monkeypatch.setattr(
        cli.now,
        "take_snapshot",
        lambda **kw: take_snapshot(INSTANT, ist_zone=kw["ist_zone"], local_zone=timezone.utc),
    )

    result = runner.invoke(build_app(), ["now"])

    assert result.exit_code == 0
    assert "IST" not in result.output
    assert "UTC   : 2025-01-15 12:00:00.000" in result.output


def test_now_with_zone_directory_name_degrades(monkeypatch):
    monkeypatch.setenv("KC_IST_ZONE_NAME", "Asia")

    result = runner.invoke(build_app(), ["now"])

    assert result.exit_code == 0
    assert "IST" not in result.output
    assert "Local : " in result.output


def test_doctor_reports_zone_directory_name_as_missing(monkeypatch):
    monkeypatch.setenv("KC_IST_ZONE_NAME", "Asia")
    monkeypatch.setattr(cli.doctor, "_check_http", lambda settings: (True, "HTTP 200"))
    monkeypatch.setattr(cli.doctor, "_check_clipboard", lambda: (True, "OK"))

    result = runner.invoke(build_app(), ["doctor", "run"])

    assert result.exit_code == 0
    assert "FAIL" in result.output


def test_now_no_stop_runs_loop_until_cancelled(monkeypatch):
    calls = {}

    def fake_run_continuous(render, token, *, console, interval):
        calls["interval"] = interval
        calls["frame"] = render()
        token.cancel()
        console.print("Exiting...")
        return 1

    monkeypatch.setenv("KC_REFRESH_INTERVAL_SECONDS", "0.25")
    monkeypatch.setattr(cli.now, "run_continuous", fake_run_continuous)

    result = runner.invoke(build_app(), ["now", "--no-stop"])

    assert result.exit_code == 0
    assert calls["interval"] == 0.25
    assert "24-hour format" in calls["frame"]
    assert result.output.count("Exiting...") == 1


def test_doctor_run_reports_checks(monkeypatch):
    monkeypatch.setattr(cli.doctor, "_check_http", lambda settings: (True, "HTTP 200"))
    monkeypatch.setattr(cli.doctor, "_check_clipboard", lambda: (False, "no mechanism"))

    result = runner.invoke(build_app(), ["doctor", "run"])

    assert result.exit_code == 0
    assert "HTTP 200" in result.output
    assert "Clipboard" in result.output
    assert "xclip" in result.output


def test_verbose_flag_is_accepted(monkeypatch, clipboard):
    _serve(monkeypatch, StaticSource("ip=192.0.2.1\n"))

    result = runner.invoke(build_app(), ["--verbose", "ip"])

    assert result.exit_code == 0
    assert "ip address: 192.0.2.1" in result.output


def test_invalid_configuration_is_a_usage_error(monkeypatch):
    monkeypatch.setenv("KC_REFRESH_INTERVAL_SECONDS", "-1")

    result = runner.invoke(build_app(), ["now"])

    assert result.exit_code == 2
    assert "KC_REFRESH_INTERVAL_SECONDS" in result.output
