from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import SchemaError
from .tables import TABLES, Base

logger = logging.getLogger(__name__)


def ensure_tables_exist(engine: Engine) -> None:
    """CREATE TABLE IF NOT EXISTS for every record kind."""

    logger.debug("Checking tables: %s", ", ".join(TABLES))
    try:
        Base.metadata.create_all(engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.error("Could not create tables: %s", e)
        raise SchemaError(f"could not create tables: {e}") from e
    logger.info("Tables ready (%d)", len(TABLES))


def list_tables(engine: Engine) -> list[str]:
    return sorted(inspect(engine).get_table_names())
