"""Embedding backends for lcstarter."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Protocol

from langchain_core.embeddings import Embeddings as LangChainEmbeddings

EMBEDDING_DIM = 1536


@dataclass(frozen=True)
class EmbeddingConfig:
    """Configuration for embedding backends."""

    model: str = "text-embedding-ada-002"
    dim: int = EMBEDDING_DIM


class EmbeddingBackend(Protocol):
    """Protocol describing embedding behaviour."""

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        """Return one vector per input text."""

    def embed_query(self, text: str) -> List[float]:
        """Return the embedding vector for a single text."""


class RandomEmbeddings(LangChainEmbeddings):
    """Placeholder embeddings: uniform random vectors unrelated to the input.

    Stands in for a provider such as ``OpenAIEmbeddings`` until one is wired
    in. Results are neither deterministic nor reproducible.
    """

    def __init__(self, config: EmbeddingConfig | None = None, rng: random.Random | None = None) -> None:
        self._config = config or EmbeddingConfig()
        self._rng = rng or random.Random()

    @property
    def dim(self) -> int:
        return self._config.dim

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        return [self.embed_query(text) for text in texts]

    def embed_query(self, text: str) -> List[float]:
        return [self._rng.random() for _ in range(self._config.dim)]
