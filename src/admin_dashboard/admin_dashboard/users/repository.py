from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SurveyUser, UserStatistics


class UserRepository(Protocol):
    def list_all(self) -> Sequence[SurveyUser]:
        raise NotImplementedError

    def get_by_id(self, user_id: int) -> Optional[SurveyUser]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[SurveyUser]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        responses: int = 0,
        nps: int = 0,
        csat: int = 0,
        rd: int = 0,
        email: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update_metrics(self, user_id: int, *, responses: int, nps: int, csat: int, rd: int) -> bool:
        """Returns False when no row has this id."""

        raise NotImplementedError

    def statistics(self) -> UserStatistics:
        raise NotImplementedError
