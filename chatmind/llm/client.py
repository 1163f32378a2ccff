"""HTTP transport for OpenAI-compatible chat completions.

Model invocation flow:
    `service.RemoteChatBackend.generate` -> `send_request(payload, api_key, timeout)`
    -> parsed reply text.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the given timeout.

Failure handling model:
    Transport and provider failures are raised as `RemoteBackendError` subclasses.
    Messages carry the status code only; response bodies and credentials are never
    included.
"""

import requests

from chatmind.llm.exceptions import (
    RemoteAuthError,
    RemoteBackendError,
    RemoteBadResponseError,
    RemoteQuotaError,
    RemoteTimeoutError,
)
from chatmind.llm.provider_config import REMOTE_API_URL, REMOTE_TIMEOUT_SECONDS


def _raise_for_status(response: requests.Response) -> None:
    status = response.status_code

    if status in (401, 403):
        raise RemoteAuthError(f"Remote backend rejected the credential ({status})")
    if status == 429:
        raise RemoteQuotaError("Remote backend rate limit or quota exceeded (429)")
    if status >= 400:
        raise RemoteBadResponseError(f"Remote backend HTTP error ({status})")


def _extract_content(data) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as err:
        raise RemoteBadResponseError("Remote backend response has no message content") from err

    if not isinstance(content, str) or not content.strip():
        raise RemoteBadResponseError("Remote backend returned an empty message")

    return content.strip()


def send_request(
    payload: dict,
    api_key: str | None,
    timeout: float = REMOTE_TIMEOUT_SECONDS,
    url: str = REMOTE_API_URL,
) -> str:
    """Send one chat-completion request and return the reply text.

    Args:
        payload: OpenAI-compatible request body (`model`, `messages`, sampling params).
        api_key: Bearer credential. `None` is rejected before any network call.
        timeout: Connect/read timeout in seconds forwarded to `requests`.
        url: Chat-completions endpoint.

    Raises:
        RemoteAuthError: Missing credential, HTTP 401 or 403.
        RemoteQuotaError: HTTP 429.
        RemoteTimeoutError: Connect or read timeout.
        RemoteBadResponseError: Other HTTP errors, invalid JSON, missing content.
        RemoteBackendError: Any other transport failure.
    """
    if not api_key:
        raise RemoteAuthError("No API key configured for the remote backend")

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }

    try:
        response = requests.post(
            url,
            headers=headers,
            json=payload,
            timeout=timeout,
        )
    except requests.exceptions.Timeout as err:
        raise RemoteTimeoutError(f"Remote backend did not answer within {timeout}s") from err
    except requests.exceptions.RequestException as err:
        raise RemoteBackendError(f"Remote backend request failed: {type(err).__name__}") from err

    _raise_for_status(response)

    try:
        data = response.json()
    except ValueError as err:
        raise RemoteBadResponseError("Remote backend returned invalid JSON") from err

    return _extract_content(data)
