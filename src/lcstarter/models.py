"""Shared domain models used across lcstarter components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class Lifecycle(str, Enum):
    """Two-state lifecycle of the model manager and the application."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


@dataclass(frozen=True)
class SearchResult:
    """Document content returned by a vector store search."""

    content: str
    score: float


@dataclass(frozen=True)
class RAGResponse:
    """Answer produced by a RAG chain together with the documents it used."""

    result: str
    source_documents: Sequence[SearchResult] = field(default_factory=tuple)
