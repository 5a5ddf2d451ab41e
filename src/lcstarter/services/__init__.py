"""Service layer: model lifecycle and orchestration operations."""

from .generation import ChatBackend, EchoChatBackend
from .model_manager import ModelManager
from .query import PromptChain, RAGChain
from .core import OrchestrationCore

__all__ = [
    "ChatBackend",
    "EchoChatBackend",
    "ModelManager",
    "OrchestrationCore",
    "PromptChain",
    "RAGChain",
]
