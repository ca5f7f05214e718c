from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

CATALOG_FILENAME = "database.json"


def _legacy_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    return (
        cwd / CATALOG_FILENAME,
        cwd / "public" / CATALOG_FILENAME,
        Path(".") / CATALOG_FILENAME,
        Path("..") / CATALOG_FILENAME,
    )


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where to find the catalog document.

    ``path`` wins when set. Without it the loader walks ``candidates`` in
    order, which keeps older deployments that ship ``database.json`` next to
    the app or under ``public/`` working.
    """

    path: Path | None = None
    candidates: tuple[Path, ...] = field(default_factory=_legacy_candidates)

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        raw = os.getenv("CATALOG_PATH", "").strip()
        return cls(path=Path(raw) if raw else None)

    @property
    def search_paths(self) -> tuple[Path, ...]:
        if self.path is not None:
            return (self.path,)
        return self.candidates
