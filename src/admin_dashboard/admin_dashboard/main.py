from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .break_schedules.controller import register as register_break_schedules
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.seed import seed_demo_data
from .employees.controller import register as register_employees
from .news.controller import register as register_news
from .nps.controller import register as register_nps
from .system.controller import register as register_system
from .users.controller import register as register_users

logger = logging.getLogger("admin_dashboard")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info("settings=%s", settings_module)

    if container is None:
        container = build_container(db_config=db_config, oauth_config=getattr(settings, "OAUTH_CONFIG", {}))

    # Missing URL/token raises ConfigurationError here and stops startup.
    if container.conn.engine is None:
        container.conn.initialize()

    if container.conn.engine is not None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            container.conn.ensure_tables()
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_demo_data(container)
    else:
        logger.error("Starting without a store connection; requests will retry it")

    app.extensions["container"] = container

    register_error_handlers(app)
    register_employees(app, container)
    register_break_schedules(app, container)
    register_users(app, container)
    register_news(app, container)
    register_nps(app, container)
    register_system(app, container)

    return app
