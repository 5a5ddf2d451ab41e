"""Application facade wiring configuration, logging, models and the core."""

from __future__ import annotations

from typing import TextIO

from lcstarter.config import AppConfig, ConfigManager
from lcstarter.errors import ConnectionFailedError, NotInitializedError
from lcstarter.metrics.observability import Logger, OperationMetrics
from lcstarter.models import Lifecycle
from lcstarter.services.core import OrchestrationCore
from lcstarter.services.model_manager import ModelManager


class StarterApp:
    """Owns the components and the top-level initialize/reinitialize lifecycle.

    Components are built in dependency order: config, logger, model manager,
    core. When no config is given the process-wide ``ConfigManager`` supplies
    one, which raises ``ConfigurationError`` if the API key is missing.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        model_manager: ModelManager | None = None,
        core: OrchestrationCore | None = None,
        log_stream: TextIO | None = None,
    ) -> None:
        self._config = config if config is not None else ConfigManager.get_instance().get_config()
        self._logger = Logger(self._config, stream=log_stream)
        self._model_manager = model_manager or ModelManager(self._config, self._logger)
        self._core = core or OrchestrationCore(self._model_manager, self._logger)
        self._state = Lifecycle.UNINITIALIZED

    @property
    def state(self) -> Lifecycle:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is Lifecycle.READY

    async def initialize(self) -> OrchestrationCore:
        """Initialize the models and verify the connection; return the ready core."""

        if self.is_initialized:
            self._logger.warn("StarterApp already initialized")
            return self._core
        try:
            self._logger.info("Initializing StarterApp...")
            await self._model_manager.initialize()
            if not await self._model_manager.test_connection():
                raise ConnectionFailedError("Failed to establish connection with models")
            self._state = Lifecycle.READY
            OperationMetrics.set_ready("app", True)
            self._logger.info("StarterApp initialized successfully")
            return self._core
        except Exception as exc:
            self._logger.error("Failed to initialize StarterApp", exc)
            raise

    async def reinitialize(self) -> OrchestrationCore:
        self._state = Lifecycle.UNINITIALIZED
        OperationMetrics.set_ready("app", False)
        return await self.initialize()

    def get_core(self) -> OrchestrationCore:
        if not self.is_initialized:
            raise NotInitializedError("StarterApp must be initialized before use")
        return self._core

    def get_model_manager(self) -> ModelManager:
        return self._model_manager

    def get_logger(self) -> Logger:
        return self._logger

    def get_config(self) -> AppConfig:
        return self._config
