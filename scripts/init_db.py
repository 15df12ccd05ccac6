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
from src.admin_dashboard.admin_dashboard.core.exceptions import ConnectionUnavailableError
from src.admin_dashboard.admin_dashboard.database.bootstrap import list_tables
from src.admin_dashboard.admin_dashboard.database.tables import describe_schema


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    try:
        container.conn.ensure_tables()
    except ConnectionUnavailableError as e:
        raise SystemExit(f"FAILED: {e}")

    engine = container.conn.ensure_connection()
    tables = list_tables(engine)
    print(f"OK: tables ready -> {engine.url.render_as_string(hide_password=True)} (tables={len(tables)})")
    for name, columns in describe_schema().items():
        print(f"  {name}: " + ", ".join(c["name"] for c in columns))
    container.conn.dispose()


if __name__ == "__main__":
    main()
