from __future__ import annotations

import asyncio
import io

import pytest
from prometheus_client import REGISTRY

from lcstarter.app import StarterApp
from lcstarter.config import AppConfig, LogLevel
from lcstarter.errors import ConfigurationError, ConnectionFailedError, NotInitializedError
from lcstarter.models import Lifecycle
from lcstarter.services.core import OrchestrationCore


def test_get_core_requires_initialize(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)
    assert app.state is Lifecycle.UNINITIALIZED
    with pytest.raises(NotInitializedError, match="StarterApp must be initialized before use"):
        app.get_core()


def test_initialize_returns_ready_core(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)

    core = asyncio.run(app.initialize())

    assert isinstance(core, OrchestrationCore)
    assert app.is_initialized
    assert app.get_core() is core
    assert app.get_model_manager().is_initialized
    assert asyncio.run(core.simple_chat("hello")) == "Echo: hello"
    output = log_stream.getvalue()
    assert "Model connection test successful" in output
    assert "[INFO] StarterApp initialized successfully" in output


def test_initialize_twice_warns(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)
    first = asyncio.run(app.initialize())
    second = asyncio.run(app.initialize())
    assert first is second
    assert "[WARN] StarterApp already initialized" in log_stream.getvalue()


def test_failed_connection_test_aborts_initialize(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)

    async def failing_check() -> None:
        raise OSError("unreachable")

    app.get_model_manager()._check_connection = failing_check

    with pytest.raises(ConnectionFailedError, match="Failed to establish connection with models"):
        asyncio.run(app.initialize())

    assert not app.is_initialized
    with pytest.raises(NotInitializedError):
        app.get_core()
    assert "[ERROR] Failed to initialize StarterApp ConnectionFailedError" in log_stream.getvalue()


def test_reinitialize_reruns_connection_test(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)
    checks: list[int] = []

    async def check() -> None:
        checks.append(1)

    app.get_model_manager()._check_connection = check

    asyncio.run(app.initialize())
    core = asyncio.run(app.reinitialize())

    assert checks == [1, 1]
    assert app.get_core() is core
    assert "[WARN] ModelManager already initialized" in log_stream.getvalue()


def test_default_config_comes_from_config_manager(monkeypatch: pytest.MonkeyPatch, log_stream: io.StringIO):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    app = StarterApp(log_stream=log_stream)
    assert app.get_config().openai.api_key == "sk-env"


def test_missing_api_key_fails_construction(log_stream: io.StringIO):
    with pytest.raises(ConfigurationError):
        StarterApp(log_stream=log_stream)


def test_components_share_one_config(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)
    assert app.get_model_manager().get_config() is app.get_config()

    app.get_logger().set_log_level(LogLevel.ERROR)

    assert app.get_model_manager().get_config().logging.log_level is LogLevel.ERROR


def _ready(component: str) -> float | None:
    return REGISTRY.get_sample_value("lcstarter_component_ready", {"component": component})


def test_ready_gauges_track_initialize(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)

    asyncio.run(app.initialize())

    assert _ready("app") == 1.0
    assert _ready("model_manager") == 1.0


def test_reinitialize_clears_app_gauge_while_rerunning(config: AppConfig, log_stream: io.StringIO):
    app = StarterApp(config, log_stream=log_stream)
    seen: list[float | None] = []

    async def connection_check() -> None:
        seen.append(_ready("app"))

    app.get_model_manager()._check_connection = connection_check

    asyncio.run(app.initialize())
    asyncio.run(app.reinitialize())

    assert seen[-1] == 0.0
    assert _ready("app") == 1.0
