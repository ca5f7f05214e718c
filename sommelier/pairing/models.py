from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from ..catalog.models import Dish


class PairingRequest(BaseModel):
    # Bounds are checked by the service so they surface as a 400 with a
    # specific message rather than a generic validation error.
    dishes: list[Dish] | None = Field(
        default=None,
        validation_alias=AliasChoices("dishes", "piatti"),
    )


class PairingResult(BaseModel):
    recommendation_text: str = Field(..., serialization_alias="recommendationText")
    dish_names: list[str] = Field(default_factory=list, serialization_alias="dishNames")
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
