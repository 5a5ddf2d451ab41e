"""Lifecycle management for the language models behind the core."""

from __future__ import annotations

import asyncio
from typing import Any

from lcstarter.config import AppConfig
from lcstarter.errors import NotInitializedError
from lcstarter.metrics.observability import Logger, OperationMetrics
from lcstarter.models import Lifecycle

INITIALIZATION_DELAY_SECONDS = 0.1
CONNECTION_CHECK_DELAY_SECONDS = 0.05


class ModelManager:
    """Tracks whether the models are ready and guards access to them.

    Initialization and the connection test are simulated with fixed delays;
    no provider client is created yet, so the accessors return ``None``
    once the manager is ready.
    """

    def __init__(
        self,
        config: AppConfig,
        logger: Logger,
        *,
        initialization_delay: float = INITIALIZATION_DELAY_SECONDS,
        check_delay: float = CONNECTION_CHECK_DELAY_SECONDS,
    ) -> None:
        self._config = config
        self._logger = logger
        self._initialization_delay = initialization_delay
        self._check_delay = check_delay
        self._state = Lifecycle.UNINITIALIZED

    @property
    def state(self) -> Lifecycle:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is Lifecycle.READY

    def get_config(self) -> AppConfig:
        return self._config

    async def initialize(self) -> None:
        if self.is_initialized:
            self._logger.warn("ModelManager already initialized")
            return
        try:
            self._logger.info("Initializing ModelManager...")
            await self._simulate_initialization()
            self._state = Lifecycle.READY
            OperationMetrics.set_ready("model_manager", True)
            self._logger.info("ModelManager initialized successfully")
        except Exception as exc:
            self._logger.error("Failed to initialize ModelManager", exc)
            raise

    async def _simulate_initialization(self) -> None:
        await asyncio.sleep(self._initialization_delay)
        self._logger.debug("Model initialization simulated")

    async def _check_connection(self) -> None:
        await asyncio.sleep(self._check_delay)

    async def test_connection(self) -> bool:
        try:
            self._logger.info("Testing model connection...")
            await self._check_connection()
            self._logger.info("Model connection test successful")
            return True
        except Exception as exc:
            self._logger.error("Model connection test failed", exc)
            return False

    async def reinitialize(self) -> None:
        self._state = Lifecycle.UNINITIALIZED
        OperationMetrics.set_ready("model_manager", False)
        await self.initialize()

    def _require_ready(self) -> None:
        if not self.is_initialized:
            raise NotInitializedError("ModelManager must be initialized before use")

    # TODO: return langchain_openai.ChatOpenAI built from config.openai once the provider is wired in.
    def get_chat_model(self) -> Any:
        self._require_ready()
        self._logger.debug("Getting chat model instance")
        return None

    def get_embeddings(self) -> Any:
        self._require_ready()
        self._logger.debug("Getting embeddings instance")
        return None

    def get_text_splitter(self) -> Any:
        self._require_ready()
        self._logger.debug("Getting text splitter instance")
        return None
