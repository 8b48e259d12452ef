"""LLM Client Package"""

from auto_commit_msg.config import Config
from auto_commit_msg.llm.base import (
    ChatMessage, ChatRequest, ChatResponse, Choice, LLMError, NoAssistantMessageError,
    Role, DEVELOPER_PROMPT, build_request, select_model,
)
from auto_commit_msg.llm.openai_compat import ChatCompletionClient, read_api_token


def get_client(config: Config) -> ChatCompletionClient:
    """Build a client for the configured provider. Fails if the token env var is unset."""
    token = read_api_token(config.provider.api_key)
    return ChatCompletionClient(config.provider.base_url, token)


__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "ChatCompletionClient",
    "LLMError",
    "NoAssistantMessageError",
    "Role",
    "DEVELOPER_PROMPT",
    "build_request",
    "get_client",
    "read_api_token",
    "select_model",
]
