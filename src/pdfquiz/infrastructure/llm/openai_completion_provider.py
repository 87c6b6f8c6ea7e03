"""OpenAI-compatible chat completion provider."""

from openai import AsyncOpenAI, OpenAIError

from pdfquiz.domain.exceptions import CompletionFailure


class OpenAICompletionProvider:
    """Single-turn chat completions via OpenAI-compatible API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        default_model: str,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._default_model = default_model

    async def complete(
        self,
        system: str,
        prompt: str,
        *,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        json_mode: bool = False,
    ) -> str:
        """Return the assistant message for system + user prompt."""
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = await self._client.chat.completions.create(
                model=model or self._default_model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                **kwargs,
            )
        except OpenAIError as e:
            raise CompletionFailure(str(e)) from e
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise CompletionFailure("Empty completion response")
        return content
