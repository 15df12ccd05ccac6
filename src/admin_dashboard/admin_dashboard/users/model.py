from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SurveyUser:
    """A survey subject with its NPS/CSAT/RD counters.

    Accounts created with credentials also carry an email and a password hash;
    the hash never leaves the service layer.
    """

    user_id: int
    name: str
    responses: int = 0
    nps: int = 0
    csat: int = 0
    rd: int = 0
    email: Optional[str] = None
    password_hash: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class UserStatistics:
    total_users: int
    average_nps: float
    average_csat: float
    average_rd: float
