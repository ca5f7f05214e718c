from __future__ import annotations

import os
from dataclasses import dataclass

MIN_DISHES = 1
MAX_DISHES = 5


@dataclass(frozen=True)
class PairingConfig:
    min_dishes: int = MIN_DISHES
    max_dishes: int = MAX_DISHES
    environment: str = "production"

    @classmethod
    def from_env(cls) -> "PairingConfig":
        return cls(environment=os.getenv("SOMMELIER_ENV", "production").strip().lower())

    @property
    def expose_details(self) -> bool:
        """Raw error details are returned to the caller only in development."""
        return self.environment == "development"
