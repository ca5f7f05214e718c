from __future__ import annotations

from ..errors import (
    AuthError,
    ErrorKind,
    NetworkError,
    RateLimited,
    SommelierError,
    UnknownError,
    UpstreamTimeout,
)
from .models import ErrorResponse

# Best-effort fallback for exceptions that reach the handler untyped.
# Typed errors never go through this table.
_KEYWORD_RULES: tuple[tuple[tuple[str, ...], type[SommelierError]], ...] = (
    (("timeout", "timed out", "etimedout"), UpstreamTimeout),
    (("api key", "unauthorized", "authentication"), AuthError),
    (("rate limit",), RateLimited),
    (("network", "connection", "fetch"), NetworkError),
)


def classify_unexpected(exc: Exception) -> SommelierError:
    """Wrap an arbitrary exception in the taxonomy, keeping typed ones as-is."""
    if isinstance(exc, SommelierError):
        return exc

    text = str(exc).lower()
    for keywords, error_cls in _KEYWORD_RULES:
        if any(k in text for k in keywords):
            return error_cls(str(exc) or error_cls.user_message)
    return UnknownError(str(exc) or None)


def error_body(exc: SommelierError, expose_details: bool = False) -> dict:
    """JSON body for a failed request. Config problems never leak details."""
    details = None
    if expose_details and exc.kind is not ErrorKind.config:
        details = exc.detail
    return ErrorResponse(error=exc.user_message, details=details).model_dump(exclude_none=True)
