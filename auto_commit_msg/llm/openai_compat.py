"""OpenAI-compatible chat/completions client (Gemini, OpenAI, Ollama, ...)"""

import os
import json
import http.client
import urllib.request
import urllib.error
from urllib.parse import urljoin, urlparse

from auto_commit_msg.config import ConfigError
from auto_commit_msg.llm.base import ChatRequest, ChatResponse, LLMError

# Longest slice of an error body echoed back to the user
ERROR_BODY_LIMIT = 300


def read_api_token(env_name: str) -> str:
    """Look up the bearer token in the env var named by the config."""
    token = os.environ.get(env_name)
    if not token:
        raise ConfigError(
            f"No API key found. Set the {env_name} environment variable:\n"
            f"  export {env_name}='your-key-here'"
        )
    if any(ord(c) < 32 or ord(c) == 127 for c in token):
        raise ConfigError(f"{env_name} contains control characters (a stray newline?)")
    return token


class ChatCompletionClient:
    """Sends one chat/completions request per call. No retries."""

    ENDPOINT = "chat/completions"

    def __init__(self, base_url: str, api_key: str):
        self.base_url = base_url
        # Same rules as a browser: a trailing slash keeps the last path segment
        self.url = urljoin(base_url, self.ENDPOINT)
        if urlparse(self.url).scheme not in ("http", "https"):
            raise ConfigError(f"provider.base_url must be an http(s) URL, got {base_url!r}")
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    @property
    def name(self) -> str:
        return self.url

    def _call_api(self, payload: dict) -> bytes:
        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(self.url, data=data, headers=self.headers, method="POST")
        with urllib.request.urlopen(req) as response:
            return response.read()

    def create_chat_completion(self, request: ChatRequest) -> ChatResponse:
        """POST the request and parse the response."""
        try:
            body = self._call_api(request.to_dict())
            data = json.loads(body.decode('utf-8'))
        except urllib.error.HTTPError as e:
            detail = _read_error_body(e)
            raise LLMError(f"API error ({e.code} {e.reason}) from {self.url}" + (f": {detail}" if detail else ""))
        except urllib.error.URLError as e:
            raise LLMError(f"Could not connect to {self.url}: {e.reason}")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LLMError(f"Invalid JSON in response from {self.url}: {e}")
        except ValueError as e:
            raise LLMError(f"Could not send request to {self.url}: {e}")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from {self.url}: {e}")
        except OSError as e:
            raise LLMError(f"Connection to {self.url} lost: {e}")

        return ChatResponse.from_dict(data)


def _read_error_body(error: urllib.error.HTTPError) -> str:
    try:
        body = error.read().decode('utf-8', errors='replace').strip()
    except OSError:
        return ""
    if len(body) > ERROR_BODY_LIMIT:
        body = body[:ERROR_BODY_LIMIT] + "..."
    return body
