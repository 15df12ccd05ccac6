from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.admin_dashboard.admin_dashboard.container import build_container
from src.admin_dashboard.admin_dashboard.database.seed import seed_demo_data


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    seed_demo_data(container)

    engine = container.conn.ensure_connection()
    print(f"OK: Seeded database -> {engine.url.render_as_string(hide_password=True)}")
    container.conn.dispose()


if __name__ == "__main__":
    main()
