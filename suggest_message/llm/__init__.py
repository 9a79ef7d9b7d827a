"""LLM Client Package"""

from suggest_message.llm.base import LLMClient, LLMResponse, LLMError
from suggest_message.llm.minimax import MiniMaxClient
from suggest_message.llm.schema import ApiError, ContentBlock, MessageResponse, Usage


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "MiniMaxClient",
    "MessageResponse",
    "ContentBlock",
    "ApiError",
    "Usage",
]
