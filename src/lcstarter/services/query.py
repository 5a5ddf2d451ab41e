"""Prompt and retrieval chains built on the placeholder backends."""

from __future__ import annotations

import json
from typing import Any, List, Mapping

from langchain_core.prompts import PromptTemplate

from lcstarter.embeddings.store import VectorStore
from lcstarter.models import RAGResponse


class PromptChain:
    """Pairs a prompt template with a callable that processes variables."""

    def __init__(self, template: str) -> None:
        self.template = template
        self.prompt = PromptTemplate.from_template(template)

    @property
    def input_variables(self) -> List[str]:
        return list(self.prompt.input_variables)

    def render(self, variables: Mapping[str, Any]) -> str:
        return self.prompt.format(**variables)

    async def call(self, variables: Mapping[str, Any]) -> str:
        return f"Processed: {json.dumps(dict(variables), separators=(',', ':'), default=str)}"


class RAGChain:
    """Retrieval chain answering from a backing vector store."""

    result_prefix = "RAG response based on: "

    def __init__(self, vector_store: VectorStore) -> None:
        self.vector_store = vector_store

    async def call(self, inputs: Mapping[str, str]) -> RAGResponse:
        relevant = list(self.vector_store.search(inputs["query"]))
        result = self.result_prefix + ", ".join(doc.content for doc in relevant)
        return RAGResponse(result=result, source_documents=relevant)
