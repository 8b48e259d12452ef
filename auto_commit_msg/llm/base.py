"""LLM Base Types and Shared Code"""

from dataclasses import dataclass, field
from enum import Enum

from auto_commit_msg.config import DiffConfig


DEVELOPER_PROMPT = (
    "You are an assistant that writes concise, conventional commit messages "
    "based on the provided git diff. Return the commit message without any quotes."
)


class LLMError(Exception):
    """Raised when the completion request fails."""
    pass


class NoAssistantMessageError(LLMError):
    """Raised when a response has no assistant-role choice."""
    pass


class Role(str, Enum):
    DEVELOPER = "developer"
    USER = "user"
    ASSISTANT = "assistant"


def select_model(total_changes: int, diff_config: DiffConfig) -> str:
    """Pick the long model once the change set reaches the threshold."""
    if total_changes >= diff_config.threshold:
        return diff_config.long_model
    return diff_config.short_model


@dataclass
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    """Body of a chat/completions call."""
    model: str
    messages: list[ChatMessage] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }


def build_request(model: str, diff: str) -> ChatRequest:
    """Instruction first, then the diff as the user turn."""
    return ChatRequest(
        model=model,
        messages=[
            ChatMessage(role=Role.DEVELOPER.value, content=DEVELOPER_PROMPT),
            ChatMessage(role=Role.USER.value, content=diff),
        ],
    )


@dataclass
class Choice:
    message: ChatMessage


@dataclass
class ChatResponse:
    """Parsed chat/completions response."""
    choices: list[Choice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data) -> 'ChatResponse':
        if not isinstance(data, dict) or not isinstance(data.get("choices"), list):
            raise LLMError("Malformed response: expected an object with a 'choices' list")

        choices = []
        for i, choice in enumerate(data["choices"]):
            message = choice.get("message") if isinstance(choice, dict) else None
            if not isinstance(message, dict):
                raise LLMError(f"Malformed response: choice {i} has no message")
            role = message.get("role")
            content = message.get("content")
            if not isinstance(role, str) or not isinstance(content, str):
                raise LLMError(f"Malformed response: choice {i} message needs a role and text content")
            choices.append(Choice(ChatMessage(role=role, content=content)))
        return cls(choices=choices)

    def assistant_message(self) -> str:
        """Content of the first assistant-role choice."""
        for choice in self.choices:
            if choice.message.role == Role.ASSISTANT.value:
                return choice.message.content
        raise NoAssistantMessageError(
            f"Response contained no assistant message ({len(self.choices)} choices)"
        )
