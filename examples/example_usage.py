"""Example: use the service layer without Flask.

Controllers are a thin layer; the data rules live in services and repositories.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.admin_dashboard.admin_dashboard.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.user_service.statistics())
    print(container.break_schedule_service.weekly_summary(week=1, year=2025))


if __name__ == "__main__":
    main()
