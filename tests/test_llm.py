"""
Tests for the Messages API client and response schema.

HTTP goes through httpx.MockTransport, no network needed.
"""

import asyncio
import json

import httpx
import pytest

from suggest_message.llm import LLMError, MessageResponse, MiniMaxClient


def _run(handler, prompt="PROMPT", **kwargs):
    """Build a client on a mock transport, call generate() once, close it."""
    async def scenario():
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = MiniMaxClient("test-key", http_client=http_client, **kwargs)
        try:
            return await client.generate(prompt)
        finally:
            await client.close()
    return asyncio.run(scenario())


def _text_response(text="feat(api): add retries"):
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "model": "MiniMax-M2.1",
        "content": [
            {"type": "thinking", "thinking": "..."},
            {"type": "text", "text": text},
        ],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 120, "output_tokens": 30},
    }


# ---------------------------------------------------------------------------
# MessageResponse
# ---------------------------------------------------------------------------

class TestMessageResponse:

    def test_first_text_block(self):
        parsed = MessageResponse.from_dict(_text_response("fix: x"))
        assert parsed.error is None
        assert parsed.text == "fix: x"
        assert parsed.usage.total == 150

    def test_no_text_block_is_empty_not_error(self):
        parsed = MessageResponse.from_dict({"content": [{"type": "tool_use", "id": "t"}]})
        assert parsed.error is None
        assert parsed.text == ""

    def test_missing_content(self):
        assert MessageResponse.from_dict({}).text == ""

    def test_error_object(self):
        parsed = MessageResponse.from_dict({
            "type": "error",
            "error": {"type": "rate_limit_error", "message": "slow down"},
        })
        assert parsed.error is not None
        assert parsed.error.type == "rate_limit_error"
        assert parsed.error.message == "slow down"

    def test_non_object_body_is_error(self):
        assert MessageResponse.from_dict(["not", "an", "object"]).error is not None


# ---------------------------------------------------------------------------
# MiniMaxClient
# ---------------------------------------------------------------------------

class TestMiniMaxClient:

    def test_requires_api_key(self):
        with pytest.raises(LLMError, match="MINIMAX_CP_KEY"):
            MiniMaxClient("")

    def test_defaults(self):
        client = MiniMaxClient("k")
        assert client.endpoint == "https://api.minimax.io/anthropic/v1/messages"
        assert client.model == "MiniMax-M2.1"
        assert client.max_tokens == 2048
        assert "MiniMax-M2.1" in client.name

    def test_request_shape(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_text_response())

        _run(handler, prompt="the prompt")

        assert seen["method"] == "POST"
        assert seen["url"] == "https://api.minimax.io/anthropic/v1/messages"
        assert seen["headers"]["x-api-key"] == "test-key"
        assert seen["headers"]["anthropic-version"] == "2023-06-01"
        assert seen["headers"]["content-type"].startswith("application/json")
        assert seen["body"] == {
            "model": "MiniMax-M2.1",
            "max_tokens": 2048,
            "messages": [{"role": "user", "content": "the prompt"}],
        }

    def test_endpoint_and_model_override(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["model"] = json.loads(request.content)["model"]
            return httpx.Response(200, json=_text_response())

        _run(handler, endpoint="https://llm.example.test/custom/messages", model="other-model")

        assert seen["url"] == "https://llm.example.test/custom/messages"
        assert seen["model"] == "other-model"

    def test_returns_text_content(self):
        response = _run(lambda request: httpx.Response(200, json=_text_response("feat: done")))
        assert response.content == "feat: done"
        assert response.tokens_used == 150

    def test_missing_text_returns_empty(self):
        response = _run(lambda request: httpx.Response(200, json={"content": []}))
        assert response.content == ""

    def test_error_object_in_success_status(self):
        body = {"error": {"type": "invalid_request_error", "message": "quota exceeded"}}
        with pytest.raises(LLMError, match="quota exceeded"):
            _run(lambda request: httpx.Response(200, json=body))

    def test_error_status_surfaces_server_message(self):
        body = {"type": "error", "error": {"type": "authentication_error", "message": "invalid api key"}}
        with pytest.raises(LLMError, match="invalid api key"):
            _run(lambda request: httpx.Response(401, json=body))

    def test_server_error_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500, json={"error": {"message": "boom"}})

        with pytest.raises(LLMError):
            _run(handler)
        assert len(calls) == 1

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(LLMError, match="API request failed"):
            _run(handler)

    def test_invalid_json(self):
        with pytest.raises(LLMError, match="Invalid response"):
            _run(lambda request: httpx.Response(200, text="<html>oops</html>"))

    def test_malformed_json_body(self):
        def handler(request):
            return httpx.Response(200, content=b"{oops", headers={"content-type": "application/json"})

        with pytest.raises(LLMError, match="Invalid response"):
            _run(handler)

    def test_json_that_is_not_an_object(self):
        with pytest.raises(LLMError, match="expected a JSON object"):
            _run(lambda request: httpx.Response(200, json=["feat: x"]))

    def test_plain_json_body_becomes_response(self):
        response = _run(lambda request: httpx.Response(200, json={"content": [{"type": "text", "text": "feat: x"}]}))
        assert response.content == "feat: x"
        assert response.model == "MiniMax-M2.1"
        assert response.tokens_used == 0
