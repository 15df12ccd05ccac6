from __future__ import annotations

from typing import Protocol, Sequence

from .model import NpsTrimestralEntry


class NpsTrimestralRepository(Protocol):
    def latest_for_user(self, user_id: int, *, limit: int) -> Sequence[NpsTrimestralEntry]:
        """Most recent months first."""

        raise NotImplementedError

    def upsert(self, *, user_id: int, month: str, nps: int) -> None:
        raise NotImplementedError
