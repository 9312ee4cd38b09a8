from __future__ import annotations

import json
from pathlib import Path

import pytest

from saas_mcp import cli


def test_info_prints_service_info(clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["info"]) == 0

    info = json.loads(capsys.readouterr().out)
    assert info["features"]["mcp"]["tools"] == ["analyze-code", "generate-tests", "optimize-performance"]


def test_health_prints_report(clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["health"]) == 0

    assert json.loads(capsys.readouterr().out)["status"] == "healthy"


def test_config_option_is_used(
    clean_env: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("server:\n  name: from-file\n", encoding="utf-8")

    assert cli.main(["info", "--config", str(path)]) == 0

    assert json.loads(capsys.readouterr().out)["name"] == "from-file"


def test_invalid_config_exits_with_one(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert cli.main(["serve", "--config", str(tmp_path / "absent.yaml")]) == 1


def test_unsupported_transport_exits_with_one(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SAAS_MCP_TRANSPORT", "websocket")

    assert cli.main([]) == 1


def test_transport_failure_exits_with_one(clean_env: pytest.MonkeyPatch) -> None:
    async def broken_serve(config, dispatcher):  # noqa: ANN001
        raise OSError("stdin is closed")

    clean_env.setattr(cli, "serve", broken_serve)

    assert cli.main(["serve"]) == 1


def test_clean_shutdown_exits_with_zero(clean_env: pytest.MonkeyPatch) -> None:
    seen = {}

    async def quiet_serve(config, dispatcher):  # noqa: ANN001
        seen["tools"] = dispatcher.tool_names
        seen["log_level"] = config.log_level

    clean_env.setattr(cli, "serve", quiet_serve)

    assert cli.main(["--log-level", "debug"]) == 0
    assert seen == {
        "tools": ["analyze-code", "generate-tests", "optimize-performance"],
        "log_level": "DEBUG",
    }
