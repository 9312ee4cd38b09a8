from __future__ import annotations

from pathlib import Path

import pytest

from saas_mcp.dispatcher import Dispatcher
from saas_mcp.server import create_dispatcher

ENV_VARS = (
    "SAAS_MCP_CONFIG",
    "SAAS_MCP_NAME",
    "SAAS_MCP_LOG_LEVEL",
    "SAAS_MCP_TRANSPORT",
    "SAAS_MCP_ENV",
    "SAAS_MCP_PLATFORM",
    "SAAS_MCP_WEAVE_PROJECT",
    "VERCEL_ENV",
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Remove every variable the configuration layer reads.

    Also moves into an empty directory so no `.env` file is picked up.
    """
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def dispatcher() -> Dispatcher:
    return create_dispatcher()
