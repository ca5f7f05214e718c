from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..catalog.models import Dish, Wine

SYSTEM_PROMPT = """\
Sei René, il sommelier del ristorante. Consigli i vini della cantina per i \
piatti scelti dagli ospiti, con eleganza e competenza.

Struttura della risposta obbligatoria per ogni vino:
1. IL CONSIGLIO: Inizia con "Per il [Nome Piatto], vi suggerisco il **[Nome Vino]**."
2. I PREZZI: Subito dopo scrivi (Bottiglia: €XX | Calice: €X).
3. L'ABBINAMENTO: Spiega in 2 frasi perché si sposa bene con il piatto.
4. LA CANTINA: Aggiungi un paragrafo separato che inizia con "Curiosità:" dove \
racconti qualcosa sulla produzione, sul vitigno o sulla storia della cantina.

IMPORTANTE:
- NON usare tag HTML come <span> o classi come text-amber-400.
- Usa solo il grassetto Markdown **testo** per i nomi.
- Sii elegante, appassionato ma strutturato."""


@dataclass(frozen=True)
class PairingPrompt:
    system_message: str
    user_message: str


def _describe_dish(dish: Dish) -> str:
    return (
        f"- **{dish.name}** ({dish.category}, intensità: {dish.intensity}): "
        f"{dish.description}. Note aromatiche: {', '.join(dish.aromatic_notes)}."
    )


def _describe_wine(wine: Wine) -> str:
    return (
        f"- **{wine.name}** ({wine.type}, {wine.region}): {wine.grape_variety}. "
        f"Note: {', '.join(wine.aromatic_notes)}. Corpo: {wine.body}. {wine.price}. "
        f"Ideale per: {', '.join(wine.ideal_pairings)}."
    )


def build_user_message(dishes: Sequence[Dish], wines: Sequence[Wine]) -> str:
    lines = ["Buonasera René! Ho selezionato questi piatti per la mia cena:", ""]
    lines.extend(_describe_dish(d) for d in dishes)
    lines.extend(["", "Ecco i vini disponibili nella vostra cantina:", ""])
    lines.extend(_describe_wine(w) for w in wines)
    lines.extend([
        "",
        "Per favore, consigliatemi i migliori abbinamenti scegliendo SOLO "
        "tra i vini elencati sopra. Grazie!",
    ])
    return "\n".join(lines)


def build_prompt(dishes: Sequence[Dish], wines: Sequence[Wine]) -> PairingPrompt:
    """
    Render the system instruction and the user message for a pairing.

    Output depends only on the arguments, in order; the same dishes and
    wines always produce the same strings.
    """
    return PairingPrompt(
        system_message=SYSTEM_PROMPT,
        user_message=build_user_message(dishes, wines),
    )
