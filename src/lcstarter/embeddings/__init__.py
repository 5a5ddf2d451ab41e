"""Embedding and vector store placeholders."""

from .service import EMBEDDING_DIM, EmbeddingBackend, EmbeddingConfig, RandomEmbeddings
from .store import DEFAULT_TOP_K, PLACEHOLDER_SCORE, StaticVectorStore, VectorStore

__all__ = [
    "DEFAULT_TOP_K",
    "EMBEDDING_DIM",
    "EmbeddingBackend",
    "EmbeddingConfig",
    "PLACEHOLDER_SCORE",
    "RandomEmbeddings",
    "StaticVectorStore",
    "VectorStore",
]
