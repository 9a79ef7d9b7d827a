"""Messages API response schema.

The endpoint is Anthropic-compatible but not necessarily Anthropic, so the
body is read as plain JSON and mapped onto these dataclasses instead of the
SDK's own models. Two outcomes are kept apart:

- ``error`` is set: the server reported a failure, surface its message.
- ``error`` is None: take the first ``"text"`` content block. A response with
  no text block yields ``""``; that is not an error at this layer.
"""

from dataclasses import dataclass, field


@dataclass
class ApiError:
    type: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data) -> 'ApiError':
        if not isinstance(data, dict):
            return cls(message=str(data))
        return cls(type=str(data.get("type") or ""), message=str(data.get("message") or ""))


@dataclass
class ContentBlock:
    type: str
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> 'ContentBlock':
        return cls(type=str(data.get("type") or ""), text=str(data.get("text") or ""))


@dataclass
class Usage:
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass
class MessageResponse:
    """Parsed body of a Messages API call."""
    content: list[ContentBlock] = field(default_factory=list)
    error: ApiError | None = None
    model: str = ""
    stop_reason: str | None = None
    usage: Usage = field(default_factory=Usage)

    @property
    def text(self) -> str:
        for block in self.content:
            if block.type == "text":
                return block.text
        return ""

    @classmethod
    def from_dict(cls, data) -> 'MessageResponse':
        if not isinstance(data, dict):
            return cls(error=ApiError(message="Unexpected response shape"))

        error = ApiError.from_dict(data["error"]) if data.get("error") else None

        content = [
            ContentBlock.from_dict(block)
            for block in data.get("content") or []
            if isinstance(block, dict)
        ]

        usage_data = data.get("usage")
        if not isinstance(usage_data, dict):
            usage_data = {}
        usage = Usage(
            input_tokens=int(usage_data.get("input_tokens") or 0),
            output_tokens=int(usage_data.get("output_tokens") or 0),
        )

        return cls(
            content=content,
            error=error,
            model=str(data.get("model") or ""),
            stop_reason=data.get("stop_reason"),
            usage=usage,
        )
