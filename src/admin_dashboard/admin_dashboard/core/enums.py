from __future__ import annotations

from enum import IntEnum


class NewsEstado(IntEnum):
    """Status of a news item, stored as an integer flag."""

    NO_VIGENTE = 0
    VIGENTE = 1

    @classmethod
    def from_legacy(cls, value: str) -> "NewsEstado":
        """Map the old tri-state text status onto the flag."""
        key = (value or "").strip().lower()
        if key in {"activa", "actualizada", "vigente"}:
            return cls.VIGENTE
        if key in {"fuera_de_uso", "no_vigente"}:
            return cls.NO_VIGENTE
        raise ValueError(f"Unknown estado: {value!r}")

    def toggled(self) -> "NewsEstado":
        return NewsEstado(1 - self.value)
