from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.validators import validate
from ..core.exceptions import NotFoundError, ValidationError
from .model import SurveyUser, UserStatistics
from .repository import UserRepository
from .schemas import NewUser, UserMetrics


class UserService:
    """Use cases around survey users and their counters."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_all(self) -> Sequence[SurveyUser]:
        return self._users.list_all()

    def get(self, user_id: int) -> SurveyUser:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return user

    def find_by_email(self, email: str) -> Optional[SurveyUser]:
        email = (email or "").strip().lower()
        if not email:
            return None
        return self._users.get_by_email(email)

    def create(self, payload: Mapping[str, Any]) -> SurveyUser:
        data = validate(NewUser, payload)
        if data.password and not data.email:
            raise ValidationError("email is required when a password is set")

        password_hash = generate_password_hash(data.password) if data.password else None
        user_id = self._users.create(
            name=data.name,
            responses=data.responses,
            nps=data.nps,
            csat=data.csat,
            rd=data.rd,
            email=data.email,
            password_hash=password_hash,
        )
        return SurveyUser(
            user_id=user_id,
            name=data.name,
            responses=data.responses,
            nps=data.nps,
            csat=data.csat,
            rd=data.rd,
            email=data.email,
            password_hash=password_hash,
        )

    def update_metrics(self, user_id: int, payload: Mapping[str, Any]) -> None:
        metrics = validate(UserMetrics, payload)
        if not self._users.update_metrics(int(user_id), **metrics.model_dump()):
            raise NotFoundError("User not found")

    def statistics(self) -> UserStatistics:
        return self._users.statistics()
