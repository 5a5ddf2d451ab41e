"""Vector store implementations."""

from __future__ import annotations

from typing import List, Protocol, Sequence

from lcstarter.models import SearchResult

DEFAULT_TOP_K = 4
PLACEHOLDER_SCORE = 0.8


class VectorStore(Protocol):
    """Protocol for document stores searchable by query string."""

    documents: Sequence[str]

    def search(self, query: str, k: int = DEFAULT_TOP_K) -> Sequence[SearchResult]:
        """Return up to ``k`` results for the query."""


class StaticVectorStore:
    """In-memory placeholder store.

    Keeps the raw documents in insertion order, without indexing or
    deduplication. ``search`` ignores the query and returns ``documents[:k]``,
    each with the same score.
    """

    def __init__(self, documents: Sequence[str]) -> None:
        self.documents: List[str] = list(documents)

    def __len__(self) -> int:
        return len(self.documents)

    def search(self, query: str, k: int = DEFAULT_TOP_K) -> Sequence[SearchResult]:
        return [SearchResult(content=doc, score=PLACEHOLDER_SCORE) for doc in self.documents[:k]]
