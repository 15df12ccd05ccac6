from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NpsTrimestralEntry:
    entry_id: int
    user_id: int
    month: str  # YYYY-MM
    nps: int
