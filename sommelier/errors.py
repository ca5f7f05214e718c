"""
Typed errors for the pairing service.

Every failure is tagged with an ``ErrorKind`` where it happens. The HTTP
layer reads ``status_code`` and ``user_message`` from the exception instead
of inspecting its text.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    validation = "validation"
    config = "config"
    catalog_unavailable = "catalog_unavailable"
    auth = "auth"
    rate_limited = "rate_limited"
    service_unavailable = "service_unavailable"
    network = "network"
    timeout = "timeout"
    upstream = "upstream"
    malformed_response = "malformed_response"
    retries_exhausted = "retries_exhausted"
    unknown = "unknown"


class SommelierError(Exception):
    """Base exception. Subclasses fix kind, status and the localized message."""

    kind: ErrorKind = ErrorKind.unknown
    status_code: int = 500
    retryable: bool = False
    user_message: str = "Si è verificato un errore imprevisto."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)

    @property
    def detail(self) -> str:
        return str(self)


class RequestValidationFailed(SommelierError):
    """Bad method or payload. The message is safe to show to the caller."""

    kind = ErrorKind.validation
    status_code = 400
    user_message = "Richiesta non valida."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message)
        if message:
            self.user_message = message


class ConfigError(SommelierError):
    kind = ErrorKind.config
    status_code = 500
    user_message = "Configurazione del server non valida. Contattare l'amministratore."


class CatalogUnavailable(SommelierError):
    kind = ErrorKind.catalog_unavailable
    status_code = 500
    user_message = "Database dei vini non disponibile."


class AuthError(SommelierError):
    """Upstream rejected the credential (401/403). Never retried."""

    kind = ErrorKind.auth
    status_code = 401
    user_message = "Errore di autenticazione con il servizio AI."


class RateLimited(SommelierError):
    kind = ErrorKind.rate_limited
    status_code = 429
    retryable = True
    user_message = "Troppe richieste. Attendere un momento e riprovare."


class ServiceUnavailable(SommelierError):
    kind = ErrorKind.service_unavailable
    status_code = 503
    retryable = True
    user_message = "Servizio AI temporaneamente non disponibile. Riprovare."


class NetworkError(SommelierError):
    kind = ErrorKind.network
    status_code = 503
    retryable = True
    user_message = "Errore di connessione al servizio AI. Verificare la connessione."


class UpstreamTimeout(SommelierError):
    kind = ErrorKind.timeout
    status_code = 504
    retryable = True
    user_message = "Timeout: il servizio AI sta impiegando troppo tempo. Riprovare."


class UpstreamError(SommelierError):
    """Any other non-success status from the completion API.

    Server-side statuses (5xx) are transient; client-side ones (4xx) are not.
    """

    kind = ErrorKind.upstream

    def __init__(self, status: int | None, message: str | None = None) -> None:
        self.status = status
        super().__init__(message or f"Errore API: {status}")

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status is None or self.status >= 500


class MalformedResponse(SommelierError):
    kind = ErrorKind.malformed_response
    retryable = True


class RetriesExhausted(SommelierError):
    """Raised after the last allowed attempt failed with a transient error.

    Status and user message follow the last error, so a run of timeouts
    still surfaces as a timeout.
    """

    kind = ErrorKind.retries_exhausted

    def __init__(self, last_error: SommelierError, attempts: int) -> None:
        self.last_error = last_error
        self.attempts = attempts
        self.status_code = last_error.status_code
        self.user_message = last_error.user_message
        super().__init__(f"Falliti tutti i tentativi: {last_error}")


class UnknownError(SommelierError):
    kind = ErrorKind.unknown
