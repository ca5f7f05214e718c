from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def _alias(*names: str) -> dict:
    # First name is the wire (camelCase) name; the rest are accepted on input,
    # including the Italian keys of the original catalog format.
    return {
        "validation_alias": AliasChoices(*names),
        "serialization_alias": names[0],
    }


class Dish(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1, **_alias("name", "nome"))
    category: str = Field(default="", **_alias("category", "categoria"))
    intensity: str = Field(default="", **_alias("intensity", "intensita"))
    description: str = Field(default="", **_alias("description", "descrizione"))
    aromatic_notes: list[str] = Field(
        default_factory=list,
        **_alias("aromaticNotes", "aromatic_notes", "note_aromatiche"),
    )


class Wine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, **_alias("name", "nome"))
    type: str = Field(default="", **_alias("type", "tipo"))
    region: str = Field(default="", **_alias("region", "regione"))
    grape_variety: str = Field(
        default="", **_alias("grapeVariety", "grape_variety", "vitigno")
    )
    aromatic_notes: list[str] = Field(
        default_factory=list,
        **_alias("aromaticNotes", "aromatic_notes", "note_aromatiche"),
    )
    body: str = Field(default="", **_alias("body", "corpo"))
    price: str = Field(default="", **_alias("price", "prezzo"))
    ideal_pairings: list[str] = Field(
        default_factory=list,
        **_alias("idealPairings", "ideal_pairings", "abbinamenti_ideali"),
    )


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    dishes: list[Dish] = Field(default_factory=list, **_alias("dishes", "piatti"))
    wines: list[Wine] = Field(default_factory=list, **_alias("wines", "vini"))

    @property
    def is_complete(self) -> bool:
        """True when both dishes and wines are present."""
        return bool(self.dishes) and bool(self.wines)
