"""Failure types raised by the remote chat-completion transport.

`chatmind.llm.client` raises these; `chatmind.core.engine` catches the base class
and falls back to the local pipeline.
"""


class RemoteBackendError(Exception):
    """Base exception for all remote backend failures."""
    pass


class RemoteTimeoutError(RemoteBackendError):
    """Raised when the backend does not answer within the configured timeout."""
    pass


class RemoteAuthError(RemoteBackendError):
    """Raised when the credential is missing or rejected (HTTP 401/403)."""
    pass


class RemoteQuotaError(RemoteBackendError):
    """Raised when the rate limit or usage quota is exceeded (HTTP 429)."""
    pass


class RemoteBadResponseError(RemoteBackendError):
    """Raised when the backend answers with an error status or an unusable body."""
    pass
