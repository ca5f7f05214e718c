from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from ..catalog.config import CatalogConfig
from ..catalog.loader import load_catalog
from ..catalog.models import Dish
from ..errors import CatalogUnavailable, ConfigError, RequestValidationFailed
from ..llm.config import LLMConfig
from ..llm.groq_client import complete_with_retry
from ..llm.prompts import build_prompt
from .config import PairingConfig
from .models import PairingRequest, PairingResult

logger = logging.getLogger(__name__)


def validate_dishes(dishes: Sequence[Dish] | None, config: PairingConfig) -> list[Dish]:
    if not dishes:
        raise RequestValidationFailed(
            "Nessun piatto selezionato. Selezionare almeno un piatto."
        )
    if len(dishes) > config.max_dishes:
        raise RequestValidationFailed(
            f"Troppi piatti selezionati. Massimo {config.max_dishes} piatti."
        )
    return list(dishes)


def recommend_pairing(
    request: PairingRequest,
    llm_config: LLMConfig,
    catalog_config: CatalogConfig,
    pairing_config: PairingConfig,
) -> PairingResult:
    """
    Produce a wine recommendation for the requested dishes.

    Checks run cheapest first: credential, payload, catalog. Only then is
    the completion API called, with retries.
    """
    if not llm_config.api_key:
        logger.error("GROQ_API_KEY is not configured")
        raise ConfigError("GROQ_API_KEY non configurata")

    dishes = validate_dishes(request.dishes, pairing_config)

    catalog = load_catalog(catalog_config)
    if not catalog.is_complete:
        raise CatalogUnavailable("Il catalogo non contiene piatti o vini")

    prompt = build_prompt(dishes, catalog.wines)
    text = complete_with_retry(llm_config.api_key, prompt, llm_config)

    return PairingResult(
        recommendation_text=text,
        dish_names=[d.name for d in dishes],
        timestamp=datetime.now(timezone.utc),
    )
