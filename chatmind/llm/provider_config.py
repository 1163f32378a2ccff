"""Runtime configuration for the optional remote chat backend.

Architectural role:
    Centralizes endpoint, model, timeout and credential lookup for
    `chatmind.llm.service` and `chatmind.llm.client`.

Determinism:
    Values are resolved at import time from the process environment (after
    `load_dotenv()`), plus runtime key-file reads in `load_key`.

Failure behavior:
    A missing credential is represented as `None`; the session then runs in
    local-only mode.
"""

import os
from dotenv import load_dotenv

load_dotenv()

MODEL_NAME = os.getenv("MODEL_NAME", "gpt-3.5-turbo")
REMOTE_API_URL = os.getenv("REMOTE_API_URL", "https://api.openai.com/v1/chat/completions")
REMOTE_TIMEOUT_SECONDS = float(os.getenv("REMOTE_TIMEOUT_SECONDS", "15"))

KEY_FILE = os.getenv("OPENAI_KEY_FILE", "config/openai.key")

# Rolling window size, system message included.
MAX_HISTORY = 10

# Generation defaults forwarded with every request.
MAX_TOKENS = 1000
TEMPERATURE = 0.7
PRESENCE_PENALTY = 0.1
FREQUENCY_PENALTY = 0.1

SYSTEM_MESSAGE = (
    "You are Tobi AI, an intelligent assistant created by Aluko Oluwatobi. You are knowledgeable about:\n"
    "- Artificial Intelligence and Machine Learning\n"
    "- Programming languages (JavaScript, Python, Java, etc.)\n"
    "- Web development (React, Node.js, HTML, CSS)\n"
    "- Software engineering best practices\n"
    "- Data science and analytics\n"
    "- Computer science concepts\n\n"
    "Your personality:\n"
    "- Helpful and knowledgeable\n"
    "- Adapt explanations to the user's expertise level\n"
    "- Provide practical examples and code when relevant\n"
    "- Ask clarifying questions when needed\n"
    "- Be encouraging and supportive for learning\n"
    "- Maintain context throughout the conversation\n\n"
    "Always provide accurate, helpful, and well-structured responses."
)


def load_key(path=KEY_FILE):
    """Load the API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/openai.key` -> `OPENAI_API_KEY`).
        2. Raw file contents at `path`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing or empty file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None
