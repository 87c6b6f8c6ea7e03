"""Completion provider port - chat-style language model."""

from typing import Protocol


class CompletionProvider(Protocol):
    """Port for single-turn text completions."""

    async def complete(
        self,
        system: str,
        prompt: str,
        *,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        json_mode: bool = False,
    ) -> str: ...
