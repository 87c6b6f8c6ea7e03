"""Unit tests for the OpenAI-compatible adapters (client mocked)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from openai import OpenAIError

from pdfquiz.domain.exceptions import CompletionFailure, EmbeddingFailure
from pdfquiz.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from pdfquiz.infrastructure.llm.openai_completion_provider import OpenAICompletionProvider


def _embedding_provider() -> OpenAIEmbeddingProvider:
    provider = OpenAIEmbeddingProvider(
        base_url="http://localhost:9/v1", api_key="sk-test", model="text-embedding-3-small"
    )
    provider._client = SimpleNamespace(embeddings=SimpleNamespace(create=AsyncMock()))
    return provider


def _completion_provider() -> OpenAICompletionProvider:
    provider = OpenAICompletionProvider(
        base_url="http://localhost:9/v1", api_key="sk-test", default_model="gpt-4"
    )
    provider._client = SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=AsyncMock()))
    )
    return provider


def _chat_response(content: str | None):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.mark.asyncio
async def test_embed_returns_vectors() -> None:
    provider = _embedding_provider()
    create = provider._client.embeddings.create
    create.return_value = SimpleNamespace(data=[SimpleNamespace(embedding=[0.5, 0.25])])

    assert await provider.embed(["chunk"]) == [[0.5, 0.25]]
    create.assert_awaited_once_with(model="text-embedding-3-small", input=["chunk"])


@pytest.mark.asyncio
async def test_embed_empty_input_skips_request() -> None:
    provider = _embedding_provider()
    assert await provider.embed([]) == []
    provider._client.embeddings.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_embed_wraps_api_error() -> None:
    provider = _embedding_provider()
    provider._client.embeddings.create.side_effect = OpenAIError("invalid api key")
    with pytest.raises(EmbeddingFailure, match="invalid api key"):
        await provider.embed(["chunk"])


@pytest.mark.asyncio
async def test_complete_json_mode_and_default_model() -> None:
    provider = _completion_provider()
    create = provider._client.chat.completions.create
    create.return_value = _chat_response('{"ok": true}')

    result = await provider.complete("system text", "user text", temperature=0.3, json_mode=True)

    assert result == '{"ok": true}'
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "gpt-4"
    assert kwargs["temperature"] == 0.3
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"] == [
        {"role": "system", "content": "system text"},
        {"role": "user", "content": "user text"},
    ]


@pytest.mark.asyncio
async def test_complete_plain_text_overrides_model() -> None:
    provider = _completion_provider()
    create = provider._client.chat.completions.create
    create.return_value = _chat_response("Good answer.")

    assert await provider.complete("s", "p", model="gpt-3.5-turbo", max_tokens=500) == "Good answer."
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "gpt-3.5-turbo"
    assert kwargs["max_tokens"] == 500
    assert "response_format" not in kwargs


@pytest.mark.asyncio
async def test_complete_empty_content_raises() -> None:
    provider = _completion_provider()
    provider._client.chat.completions.create.return_value = _chat_response(None)
    with pytest.raises(CompletionFailure, match="Empty completion"):
        await provider.complete("s", "p")


@pytest.mark.asyncio
async def test_complete_wraps_api_error() -> None:
    provider = _completion_provider()
    provider._client.chat.completions.create.side_effect = OpenAIError("rate limit")
    with pytest.raises(CompletionFailure, match="rate limit"):
        await provider.complete("s", "p")
