"""Tests for the top-level CLI commands (health, info, pi-health, boots, status, ls)."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

HOST = "http://pi.test"

_PI_HEALTH = {
    "hostname": "raspberrypi",
    "tailscale_name": "pi.tail.ts.net",
    "cpu_usage": 12.345,
    "memory_percent": 40.0,
    "disk_percent": 71.2,
    "temperature": 48.3,
    "load_avg_1": 0.5,
    "load_avg_5": 0.4,
    "load_avg_15": 0.3,
    "history": [
        {"time": "2024-05-01T10:00:00Z", "cpu_usage": 10.0},
        {"time": "2024-05-01T10:01:00Z", "cpu_usage": 11.0},
    ],
}


@pytest.fixture(autouse=True)
def fake_host(monkeypatch):
    monkeypatch.setattr("pimanager.config.settings.api_host", HOST)


class TestHealth:
    def test_healthy(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(
                    200,
                    json={"ok": True, "last_check": "2024-05-01T10:00:00Z", "tailscale_name": ""},
                )
            )
            result = runner.invoke(app, ["health"])

        assert result.exit_code == 0
        assert "✅ Backend healthy: True" in result.stdout
        assert "2024-05-01T10:00:00Z" in result.stdout

    def test_backend_unreachable(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            result = runner.invoke(app, ["health"])

        assert result.exit_code == 1
        assert f"❌ Cannot reach {HOST}" in result.stdout

    def test_invalid_json(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(
                    200, content=b"{", headers={"Content-Type": "application/json"}
                )
            )
            result = runner.invoke(app, ["health"])

        assert result.exit_code == 1
        assert "❌ Invalid JSON from backend" in result.stdout

    def test_invalid_utf8_json_is_rendered(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(
                    200,
                    content=b'{"ok": true, "tailscale_name": "pi-\xff"}',
                    headers={"Content-Type": "application/json"},
                )
            )
            result = runner.invoke(app, ["health"])

        assert result.exit_code == 0, result.exception
        assert "✅ Backend healthy: True" in result.stdout
        assert "pi-\ufffd" in result.stdout

    def test_invalid_utf8_and_invalid_json(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(
                    200, content=b"\xff{", headers={"Content-Type": "application/json"}
                )
            )
            result = runner.invoke(app, ["health"])

        assert result.exit_code == 1
        assert "❌ Invalid JSON from backend" in result.stdout

    def test_verbose_flag_accepted(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(200, json={"ok": True})
            )
            with patch("cli.main.logging.basicConfig") as basic_config:
                result = runner.invoke(app, ["--verbose", "health"])

        assert result.exit_code == 0
        basic_config.assert_called_once()


class TestInfoAndBoots:
    def test_info(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/").mock(
                return_value=httpx.Response(
                    200, json={"name": "pi-manager", "version": "0.1", "uptime_s": 42}
                )
            )
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "pi-manager v0.1  (up 42s)" in result.stdout

    def test_boots(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/boots/last").mock(
                return_value=httpx.Response(
                    200, json={"boot_id": "previous", "reason": "power-loss", "notes": "undervoltage"}
                )
            )
            result = runner.invoke(app, ["boots"])

        assert result.exit_code == 0
        assert "[boots] previous: power-loss" in result.stdout
        assert "notes: undervoltage" in result.stdout

    def test_unexpected_text_response(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/boots/last").mock(
                return_value=httpx.Response(200, text="<html>")
            )
            result = runner.invoke(app, ["boots"])

        assert result.exit_code == 1
        assert "❌ Unexpected boots response" in result.stdout


class TestPiHealthAndStatus:
    def test_pi_health(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/pi-health").mock(
                return_value=httpx.Response(200, json=_PI_HEALTH)
            )
            result = runner.invoke(app, ["pi-health"])

        assert result.exit_code == 0
        assert "raspberrypi" in result.stdout
        assert "12.3%" in result.stdout
        assert "48.3 °C" in result.stdout
        assert "Load avg    : 0.5 0.4 0.3" in result.stdout
        assert "2 samples" in result.stdout

    def test_status_calls_both_endpoints(self) -> None:
        with respx.mock:
            health = respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(200, json={"ok": True})
            )
            pi = respx.get(f"{HOST}/api/v1/pi-health").mock(
                return_value=httpx.Response(200, json=_PI_HEALTH)
            )
            result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        assert health.call_count == 1
        assert pi.call_count == 1
        assert "Backend healthy" in result.stdout
        assert "raspberrypi" in result.stdout

    def test_status_fails_if_either_fails(self) -> None:
        with respx.mock:
            respx.get(f"{HOST}/api/v1/health").mock(
                return_value=httpx.Response(200, json={"ok": True})
            )
            respx.get(f"{HOST}/api/v1/pi-health").mock(
                return_value=httpx.Response(500, text="sensor read failed")
            )
            result = runner.invoke(app, ["status"])

        assert result.exit_code == 1
        assert "❌ 500 Internal Server Error - sensor read failed" in result.stdout


class TestLs:
    def test_lists_entries(self) -> None:
        with respx.mock:
            route = respx.route(host="pi.test").mock(
                return_value=httpx.Response(
                    200,
                    json={
                        "current_path": "/home/pi/code",
                        "entries": [
                            {"name": "api", "path": "code/api", "abs_path": "/home/pi/code/api", "is_dir": True},
                            {"name": "web", "path": "code/web", "abs_path": "/home/pi/code/web", "is_dir": True},
                        ],
                    },
                )
            )
            result = runner.invoke(app, ["ls", "code"])

        assert result.exit_code == 0
        assert route.calls.last.request.url.raw_path == b"/api/v1/fs?path=code"
        assert "📁 /home/pi/code" in result.stdout
        assert "├── 📁 api" in result.stdout
        assert "└── 📁 web" in result.stdout

    def test_defaults_to_base_path(self) -> None:
        with respx.mock:
            route = respx.route(host="pi.test").mock(
                return_value=httpx.Response(200, json={"current_path": "/home/pi", "entries": []})
            )
            result = runner.invoke(app, ["ls"])

        assert result.exit_code == 0
        assert route.calls.last.request.url.raw_path == b"/api/v1/fs?path="
        assert "(empty)" in result.stdout

    def test_forbidden_path(self) -> None:
        with respx.mock:
            respx.route(host="pi.test").mock(
                return_value=httpx.Response(403, text='{"error":"path outside allowed base"}')
            )
            result = runner.invoke(app, ["ls", "../.."])

        assert result.exit_code == 1
        assert "❌ 403 Forbidden" in result.stdout
