from __future__ import annotations

import io
from pathlib import Path

import pytest

from lcstarter.config import AppConfig, ConfigManager, load_config
from lcstarter.metrics.observability import Logger

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_TEMPERATURE",
    "OPENAI_MAX_TOKENS",
    "EMBEDDING_MODEL",
    "CHUNK_SIZE",
    "CHUNK_OVERLAP",
    "LOG_LEVEL",
    "ENABLE_CONSOLE_LOGGING",
    "RUN_EXAMPLES",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()


@pytest.fixture
def config() -> AppConfig:
    return load_config(openai={"api_key": "test-key"})


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(config: AppConfig, log_stream: io.StringIO) -> Logger:
    return Logger(config, stream=log_stream)
