"""Session-scoped adapter for the remote chat backend.

Architectural role:
    Owns the rolling message window for one conversation and turns a user message
    into a chat-completion payload for `chatmind.llm.client`.

History window:
    - The system persona is always the first message.
    - At most `MAX_HISTORY` messages are sent, system message included; the
      oldest non-system messages are evicted first.
    - Building a payload does not touch stored history. A user/assistant pair is
      stored only through `commit`, after the caller accepted the reply.

Determinism:
    Payload construction is deterministic for fixed history and configuration.
    Generated output is not, since inference runs remotely.
"""

from typing import Callable

from chatmind.llm import client
from chatmind.llm.provider_config import (
    FREQUENCY_PENALTY,
    MAX_HISTORY,
    MAX_TOKENS,
    MODEL_NAME,
    PRESENCE_PENALTY,
    REMOTE_API_URL,
    REMOTE_TIMEOUT_SECONDS,
    SYSTEM_MESSAGE,
    TEMPERATURE,
    load_key,
)


Transport = Callable[..., str]


class RemoteChatBackend:
    """Chat-completion backend with a bounded per-session history."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = MODEL_NAME,
        url: str = REMOTE_API_URL,
        timeout: float = REMOTE_TIMEOUT_SECONDS,
        transport: Transport | None = None,
    ):
        self.api_key = api_key if api_key is not None else load_key()
        self.model = model
        self.url = url
        self.timeout = timeout
        self._transport = transport or client.send_request
        self.system_message = {"role": "system", "content": SYSTEM_MESSAGE}
        self.history: list[dict] = []

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def window(self, user_message: str) -> list[dict]:
        """Messages to send for `user_message`, system message first."""
        recent = [*self.history, {"role": "user", "content": user_message}]
        return [self.system_message, *recent[-(MAX_HISTORY - 1):]]

    def build_payload(self, user_message: str) -> dict:
        return {
            "model": self.model,
            "messages": self.window(user_message),
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
            "presence_penalty": PRESENCE_PENALTY,
            "frequency_penalty": FREQUENCY_PENALTY,
        }

    def generate(self, user_message: str) -> str:
        """Request a reply. Raises `RemoteBackendError` subclasses on failure."""
        return self._transport(
            self.build_payload(user_message),
            self.api_key,
            timeout=self.timeout,
            url=self.url,
        )

    def commit(self, user_message: str, reply: str) -> None:
        """Store an accepted exchange, keeping the window bound."""
        self.history.append({"role": "user", "content": user_message})
        self.history.append({"role": "assistant", "content": reply})
        del self.history[:-(MAX_HISTORY - 1)]

    def clear_history(self) -> None:
        self.history.clear()
