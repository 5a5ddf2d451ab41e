"""Core orchestration operations: chat, chains, search, embeddings and splitting."""

from __future__ import annotations

from typing import List, Sequence

from lcstarter.embeddings.service import EmbeddingBackend, EmbeddingConfig, RandomEmbeddings
from lcstarter.embeddings.store import DEFAULT_TOP_K, StaticVectorStore
from lcstarter.errors import NotInitializedError
from lcstarter.metrics.observability import Logger, OperationMetrics, TimedSection
from lcstarter.models import SearchResult
from lcstarter.services.generation import ChatBackend, EchoChatBackend
from lcstarter.services.model_manager import ModelManager
from lcstarter.services.query import PromptChain, RAGChain


def _timed(operation: str) -> TimedSection:
    return TimedSection(lambda duration: OperationMetrics.observe(operation, duration))


class OrchestrationCore:
    """Chat, chain, retrieval and text utilities gated on the model manager.

    The chat and embedding backends default to offline placeholders
    (``EchoChatBackend`` and ``RandomEmbeddings``); pass real ones to talk to
    a provider.
    """

    def __init__(
        self,
        model_manager: ModelManager,
        logger: Logger,
        *,
        chat_backend: ChatBackend | None = None,
        embeddings: EmbeddingBackend | None = None,
    ) -> None:
        self._model_manager = model_manager
        self._logger = logger
        self._chat = chat_backend or EchoChatBackend()
        self._embeddings = embeddings or RandomEmbeddings(
            EmbeddingConfig(model=model_manager.get_config().embeddings.embedding_model)
        )

    def _require_ready(self) -> None:
        if not self._model_manager.is_initialized:
            raise NotInitializedError("ModelManager must be initialized before use")

    async def simple_chat(self, message: str, system_prompt: str | None = None) -> str:
        with _timed("simple_chat"):
            try:
                self._logger.info("Executing simple chat...")
                self._require_ready()
                response = self._chat.chat(message, system_prompt)
                self._logger.info("Simple chat completed successfully")
                return response
            except Exception as exc:
                self._logger.error("Error in simple chat", exc)
                raise

    async def create_prompt_chain(self, template: str) -> PromptChain:
        with _timed("create_prompt_chain"):
            try:
                self._logger.info("Creating prompt chain...")
                self._require_ready()
                chain = PromptChain(template)
                self._logger.info("Prompt chain created successfully", {"input_variables": chain.input_variables})
                return chain
            except Exception as exc:
                self._logger.error("Error creating prompt chain", exc)
                raise

    async def create_vector_store(self, documents: Sequence[str]) -> StaticVectorStore:
        with _timed("create_vector_store"):
            try:
                self._logger.info("Creating vector store...")
                self._require_ready()
                store = StaticVectorStore(documents)
                self._logger.info("Vector store created successfully", {"doc_count": len(store)})
                return store
            except Exception as exc:
                self._logger.error("Error creating vector store", exc)
                raise

    async def create_rag_chain(self, documents: Sequence[str]) -> RAGChain:
        with _timed("create_rag_chain"):
            try:
                self._logger.info("Creating RAG chain...")
                store = await self.create_vector_store(documents)
                chain = RAGChain(store)
                self._logger.info("RAG chain created successfully")
                return chain
            except Exception as exc:
                self._logger.error("Error creating RAG chain", exc)
                raise

    async def similarity_search(
        self,
        query: str,
        documents: Sequence[str],
        k: int = DEFAULT_TOP_K,
    ) -> List[SearchResult]:
        with _timed("similarity_search"):
            try:
                self._logger.info("Performing similarity search...")
                store = await self.create_vector_store(documents)
                results = list(store.search(query, k))
                self._logger.info("Similarity search completed", {"result_count": len(results)})
                return results
            except Exception as exc:
                self._logger.error("Error in similarity search", exc)
                raise

    async def get_embeddings(self, text: str) -> List[float]:
        with _timed("get_embeddings"):
            try:
                self._logger.info("Getting embeddings for text...")
                self._require_ready()
                vector = list(self._embeddings.embed_query(text))
                self._logger.info("Embeddings generated successfully")
                return vector
            except Exception as exc:
                self._logger.error("Error getting embeddings", exc)
                raise

    async def split_text(self, text: str) -> List[str]:
        """Cut ``text`` into consecutive windows of ``chunk_size`` characters.

        ``chunk_overlap`` is not applied; windows never share characters.
        """

        with _timed("split_text"):
            try:
                self._logger.info("Splitting text into chunks...")
                self._require_ready()
                chunk_size = self._model_manager.get_config().embeddings.chunk_size
                chunks = [text[start : start + chunk_size] for start in range(0, len(text), chunk_size)]
                self._logger.info("Text split successfully", {"chunk_count": len(chunks)})
                return chunks
            except Exception as exc:
                self._logger.error("Error splitting text", exc)
                raise
