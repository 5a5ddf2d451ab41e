"""Chat backends for lcstarter."""

from __future__ import annotations

from typing import Protocol


class ChatBackend(Protocol):
    """Protocol describing chat completion behaviour."""

    def chat(self, message: str, system_prompt: str | None = None) -> str:
        """Return the assistant reply for ``message``."""


class EchoChatBackend:
    """Offline stand-in for a chat model; echoes the user message."""

    prefix = "Echo: "

    def chat(self, message: str, system_prompt: str | None = None) -> str:
        return f"{self.prefix}{message}"
