from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any

import groq
from groq import AsyncGroq

from ..errors import (
    AuthError,
    MalformedResponse,
    NetworkError,
    RateLimited,
    RetriesExhausted,
    ServiceUnavailable,
    SommelierError,
    UnknownError,
    UpstreamError,
    UpstreamTimeout,
)
from .config import DEFAULT_LLM_CONFIG, LLMConfig
from .prompts import PairingPrompt

logger = logging.getLogger(__name__)


def backoff_delay(retry: int, base: float = DEFAULT_LLM_CONFIG.backoff_base) -> float:
    """Seconds to wait before retry number ``retry`` (1-based): base, 2*base, 4*base..."""
    return base * (2 ** (retry - 1))


def _upstream_message(exc: groq.APIStatusError) -> str:
    body: Any = exc.body
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return exc.message or f"Errore API: {exc.status_code}"


def classify_error(exc: groq.APIError, timeout: float = DEFAULT_LLM_CONFIG.timeout) -> SommelierError:
    """Map a Groq SDK exception to the service's error taxonomy."""
    # APITimeoutError subclasses APIConnectionError, so check it first.
    if isinstance(exc, groq.APITimeoutError):
        return UpstreamTimeout(f"Timeout: richiesta interrotta dopo {timeout:g} secondi")
    if isinstance(exc, groq.APIConnectionError):
        return NetworkError(f"Errore di rete: {exc.message}")
    if isinstance(exc, groq.APIStatusError):
        status = exc.status_code
        if status in (401, 403):
            return AuthError("API key non valida o scaduta")
        if status == 429:
            return RateLimited("Limite di rate raggiunto. Riprovare tra poco.")
        if status == 503:
            return ServiceUnavailable("Servizio AI temporaneamente non disponibile")
        return UpstreamError(status, _upstream_message(exc))
    return UpstreamError(None, str(exc))


async def _create_completion(api_key: str, prompt: PairingPrompt, config: LLMConfig) -> Any:
    client = AsyncGroq(
        api_key=api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        max_retries=0,
    )
    try:
        # The SDK timeout applies per connect/read step; wait_for bounds the
        # whole call and cancels the in-flight request when it expires.
        return await asyncio.wait_for(
            client.chat.completions.create(
                model=config.model,
                messages=[
                    {"role": "system", "content": prompt.system_message},
                    {"role": "user", "content": prompt.user_message},
                ],
                temperature=config.temperature,
                max_tokens=config.max_tokens,
                top_p=config.top_p,
                stream=False,
            ),
            timeout=config.timeout,
        )
    finally:
        await client.close()


def complete(
    api_key: str,
    prompt: PairingPrompt,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """
    Run a single chat completion and return its text.

    The whole call, response body included, must finish within
    ``config.timeout`` seconds or it is cancelled and ``UpstreamTimeout`` is
    raised. The SDK's own retries are disabled; ``complete_with_retry`` owns
    the retry budget. Raises a ``SommelierError`` subclass on any failure.

    Must be called from synchronous code (no running event loop).
    """
    try:
        response = asyncio.run(_create_completion(api_key, prompt, config))
    except asyncio.TimeoutError:
        raise UpstreamTimeout(
            f"Timeout: richiesta interrotta dopo {config.timeout:g} secondi"
        ) from None
    except groq.APIError as exc:
        raise classify_error(exc, timeout=config.timeout) from exc

    choices = getattr(response, "choices", None)
    if not choices or choices[0].message is None:
        raise MalformedResponse("Risposta API non valida")

    content = choices[0].message.content or ""
    if not content.strip():
        raise MalformedResponse("Risposta vuota dall'AI")

    return content


def complete_with_retry(
    api_key: str,
    prompt: PairingPrompt,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
    max_retries: int | None = None,
    sleep: Callable[[float], None] | None = None,
) -> str:
    """
    Call ``complete`` up to ``max_retries + 1`` times.

    Transient errors are retried after an exponential backoff; terminal ones
    (bad credential, other 4xx) are re-raised at once. When the last attempt
    fails, ``RetriesExhausted`` wraps its error. Negative retry counts are
    treated as zero, so at least one attempt is always made.
    """
    retries = max(0, config.max_retries if max_retries is None else max_retries)
    sleep = sleep or time.sleep
    total = retries + 1
    last_error: SommelierError | None = None

    for attempt in range(total):
        if attempt > 0:
            delay = backoff_delay(attempt, config.backoff_base)
            logger.info("Attempt %d of %d in %.1fs", attempt + 1, total, delay)
            sleep(delay)

        try:
            return complete(api_key, prompt, config)
        except SommelierError as exc:
            logger.warning("Attempt %d of %d failed: %s", attempt + 1, total, exc)
            if not exc.retryable:
                raise
            last_error = exc

    if last_error is None:
        raise UnknownError("Ciclo di tentativi terminato senza risposta né errore")
    raise RetriesExhausted(last_error, attempts=total)
