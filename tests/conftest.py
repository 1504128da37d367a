"""Shared fixtures for the MCP Meili Search test suite."""

import pytest

from mcp_meili_search.core.config import EngineConfig

MEILI_ENV_VARS = (
    "MEILI_HOST",
    "MEILI_API_KEY",
    "MEILI_INDEX",
    "MEILI_EMBEDDER",
    "MEILI_TIMEOUT",
    "MEILI_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_meili_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's MEILI_* variables out of every test."""
    for name in MEILI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig(
        host="http://meili.test:7700",
        index="movies",
        api_key="masterKey123",
        embedder="openai",
    )


@pytest.fixture
def config_without_embedder() -> EngineConfig:
    return EngineConfig(host="http://meili.test:7700", index="movies")
