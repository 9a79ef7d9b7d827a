"""MiniMax LLM Client (Anthropic-compatible Messages endpoint)"""

import httpx
from anthropic import APIConnectionError, APIError, APIStatusError, AsyncAnthropic

from suggest_message.llm.base import LLMClient, LLMResponse, LLMError
from suggest_message.llm.schema import MessageResponse


def _status_error_message(exc: APIStatusError) -> str:
    """Prefer the server's error.message over the SDK's generic text."""
    body = exc.body
    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return exc.message


class MiniMaxClient(LLMClient):
    """Single-shot Messages API client. Requires MINIMAX_CP_KEY env var."""

    DEFAULT_ENDPOINT = "https://api.minimax.io/anthropic/v1/messages"
    DEFAULT_MODEL = "MiniMax-M2.1"
    MAX_TOKENS = 2048
    ANTHROPIC_VERSION = "2023-06-01"

    def __init__(
        self,
        api_key: str | None,
        endpoint: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not api_key:
            raise LLMError("Missing MINIMAX_CP_KEY env var.")

        self.endpoint = endpoint or self.DEFAULT_ENDPOINT
        self.model = model or self.DEFAULT_MODEL
        self.max_tokens = max_tokens or self.MAX_TOKENS

        options = {}
        if timeout is not None:
            options["timeout"] = timeout
        # One attempt only; the SDK would otherwise retry 429/5xx
        self._client = AsyncAnthropic(
            api_key=api_key,
            max_retries=0,
            http_client=http_client,
            default_headers={"anthropic-version": self.ANTHROPIC_VERSION},
            **options,
        )

    @property
    def name(self) -> str:
        return f"MiniMax ({self.model})"

    def build_payload(self, prompt: str) -> dict:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    async def generate(self, prompt: str) -> LLMResponse:
        # Absolute URL: the SDK posts to it as-is instead of base_url + path.
        # cast_to=object hands back the decoded JSON untouched.
        try:
            data = await self._client.post(
                self.endpoint,
                cast_to=object,
                body=self.build_payload(prompt),
            )
        except APIStatusError as e:
            raise LLMError(f"API error: {_status_error_message(e)}")
        except APIConnectionError as e:
            raise LLMError(f"API request failed: {e.message}")
        except APIError as e:
            raise LLMError(f"Invalid response from API: {e.message}")
        except ValueError:
            raise LLMError("Invalid response from API (body is not JSON)")

        # Non-JSON bodies come back as plain text
        if not isinstance(data, dict):
            raise LLMError("Invalid response from API (expected a JSON object)")

        parsed = MessageResponse.from_dict(data)
        if parsed.error is not None:
            raise LLMError(f"API error: {parsed.error.message or 'Unknown error'}")

        return LLMResponse(
            content=parsed.text,
            model=parsed.model or self.model,
            tokens_used=parsed.usage.total,
        )

    async def close(self) -> None:
        await self._client.close()
