"""
OpenAI-compatible HTTP adapter for ChatMind.

Architectural role:
- Expose chat-completion style endpoints for chat front ends.
- Keep one independent `ChatSession` per client `user` id.
- Delegate message understanding to `ChatSession.process_message`.

Endpoint responsibilities:
- `GET /v1/models`: list the single served assistant model.
- `POST /v1/chat/completions`: validate input, select the session, invoke the
  engine and format the reply as JSON or SSE.

API request lifecycle (`POST /v1/chat/completions`):
1. Parse and validate the JSON body (`model`, `messages`, optional `stream`, `user`).
2. Pick the latest user message; earlier messages are ignored because the session
   keeps its own history.
3. Resolve the session for `user` (default session when absent).
4. Format the reply for non-stream or streaming response contracts.

Input validation behavior:
- Invalid body shape -> HTTP 400.
- Missing `messages` -> HTTP 400.
- Missing or unknown `model` -> HTTP 400.
- No user message in `messages` -> HTTP 400.

Side effects:
- Creates sessions lazily; the oldest session is dropped past `MAX_SESSIONS`.
- Emits debug output only when `DEBUG == "true"`.
"""

from dotenv import load_dotenv

load_dotenv()

import json
import os
import time
import uuid
from collections import OrderedDict
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, ValidationError

from chatmind.core.engine import ChatSession

app = FastAPI()
# Sensitive request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"

MODEL_ID = os.getenv("CHATMIND_MODEL_ID", "tobi-ai")
DEFAULT_USER = "default"
MAX_SESSIONS = 256


# ============================================================
# Request Schema
# ============================================================

class ChatMessage(BaseModel):
    role: str
    content: str = ""


class ChatCompletionRequest(BaseModel):
    model: str | None = None
    messages: list[ChatMessage] = []
    stream: bool = False
    user: str | None = None


# ============================================================
# Session Registry
# ============================================================

class SessionRegistry:
    """Lazily created sessions keyed by client id, least recently used evicted first."""

    def __init__(self, factory: Callable[[], ChatSession] = ChatSession.from_env, limit: int = MAX_SESSIONS):
        self.factory = factory
        self.limit = limit
        self._sessions: OrderedDict[str, ChatSession] = OrderedDict()

    def get(self, user: str | None) -> ChatSession:
        key = user or DEFAULT_USER

        session = self._sessions.pop(key, None)
        if session is None:
            session = self.factory()
        self._sessions[key] = session

        while len(self._sessions) > self.limit:
            self._sessions.popitem(last=False)

        return session

    def __len__(self):
        return len(self._sessions)


sessions = SessionRegistry()


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


# ============================================================
# Model Listing
# ============================================================

@app.get("/v1/models")
def list_models():
    """Return the served assistant as OpenAI-style model metadata."""
    return {
        "object": "list",
        "data": [
            {
                "id": MODEL_ID,
                "object": "model",
                "created": int(time.time()),
                "owned_by": "local"
            }
        ]
    }


# ============================================================
# OpenAI-Compatible Chat Completions
# ============================================================

@app.post("/v1/chat/completions")
async def chat_completions(request: Request):
    """
    OpenAI-compatible chat completions endpoint.

    Error handling strategy:
    - Validation failures return structured 400 JSON errors.
    - The engine never raises; its reply is always returned as assistant content.
    """
    try:
        body = await request.json()
        payload = ChatCompletionRequest.model_validate(body)
    except (ValueError, ValidationError):
        return _error("Invalid request body")

    if DEBUG:
        print("\n==== API DEBUG START ====")
        print("Incoming messages:", [m.model_dump() for m in payload.messages])
        print("Stream:", payload.stream)
        print("Model:", payload.model)
        print("User:", payload.user)

    if not payload.messages:
        return _error("No messages provided")

    if not payload.model:
        return _error("No model provided")

    if payload.model != MODEL_ID:
        return _error("Unknown model requested")

    user_message = None
    for msg in reversed(payload.messages):
        if msg.role == "user":
            user_message = msg.content
            break

    if user_message is None:
        return _error("No user message provided")

    session = sessions.get(payload.user)
    result = await session.process_message(user_message)

    if DEBUG:
        print("Engine result repr:", repr(result))

    completion_id = f"chatcmpl-{uuid.uuid4().hex}"
    created = int(time.time())

    if payload.stream:

        def event_generator():
            """Yield one content chunk, the stop chunk and the `[DONE]` sentinel."""
            for delta, finish_reason in (({"content": result}, None), ({}, "stop")):
                data = {
                    "id": completion_id,
                    "object": "chat.completion.chunk",
                    "created": created,
                    "model": MODEL_ID,
                    "choices": [
                        {
                            "index": 0,
                            "delta": delta,
                            "finish_reason": finish_reason
                        }
                    ]
                }
                yield f"data: {json.dumps(data)}\n\n"
            yield "data: [DONE]\n\n"

        return StreamingResponse(event_generator(), media_type="text/event-stream")

    return {
        "id": completion_id,
        "object": "chat.completion",
        "created": created,
        "model": MODEL_ID,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": result},
                "finish_reason": "stop"
            }
        ]
    }
