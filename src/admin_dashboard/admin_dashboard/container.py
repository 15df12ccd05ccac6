from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .break_schedules.service import BreakScheduleService
from .break_schedules.sqlalchemy_break_schedule_repository import SQLAlchemyBreakScheduleRepository
from .core.constants import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY_SECONDS
from .database.connection import DatabaseConnection, RetryPolicy, StoreSettings
from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from .news.service import NewsService
from .news.sqlalchemy_news_repository import SQLAlchemyNewsRepository
from .nps.service import NpsTrimestralService
from .nps.sqlalchemy_nps_repository import SQLAlchemyNpsTrimestralRepository
from .users.service import UserService
from .users.sqlalchemy_user_repository import SQLAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: SQLAlchemyEmployeeRepository
    break_schedules_repo: SQLAlchemyBreakScheduleRepository
    users_repo: SQLAlchemyUserRepository
    news_repo: SQLAlchemyNewsRepository
    nps_trimestral_repo: SQLAlchemyNpsTrimestralRepository

    employee_service: EmployeeService
    break_schedule_service: BreakScheduleService
    user_service: UserService
    news_service: NewsService
    nps_trimestral_service: NpsTrimestralService

    oauth_config: dict = field(default_factory=dict)


def build_container(
    *,
    db_config: dict,
    oauth_config: Optional[dict] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Container:
    settings = StoreSettings(
        url=str(db_config.get("url") or ""),
        auth_token=str(db_config.get("auth_token") or ""),
    )
    retry_policy = RetryPolicy(
        max_retries=int(db_config.get("max_retries", DEFAULT_MAX_RETRIES)),
        delay_seconds=float(db_config.get("retry_delay", DEFAULT_RETRY_DELAY_SECONDS)),
    )
    conn = DatabaseConnection(settings, retry_policy, sleep=sleep)

    employees_repo = SQLAlchemyEmployeeRepository(conn)
    break_schedules_repo = SQLAlchemyBreakScheduleRepository(conn)
    users_repo = SQLAlchemyUserRepository(conn)
    news_repo = SQLAlchemyNewsRepository(conn)
    nps_trimestral_repo = SQLAlchemyNpsTrimestralRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        break_schedules_repo=break_schedules_repo,
        users_repo=users_repo,
        news_repo=news_repo,
        nps_trimestral_repo=nps_trimestral_repo,
        employee_service=EmployeeService(employees_repo),
        break_schedule_service=BreakScheduleService(break_schedules_repo),
        user_service=UserService(users_repo),
        news_service=NewsService(news_repo),
        nps_trimestral_service=NpsTrimestralService(nps_trimestral_repo),
        oauth_config=dict(oauth_config or {}),
    )
