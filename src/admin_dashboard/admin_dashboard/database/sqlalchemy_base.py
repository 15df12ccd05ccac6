from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Sequence

from sqlalchemy import Time, cast, extract, func
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import ConfigurationError, ConflictError, OperationFailedError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def store_session(conn: DatabaseConnection, *, entity: str, verb: str) -> Iterator[Session]:
    """One unit of work against the store.

    Makes sure the handle and the tables exist, commits on success and turns
    any SQLAlchemy failure into OperationFailedError("could not <verb> <entity>").
    """

    engine = conn.ensure_connection()
    conn.ensure_tables()
    session = Session(engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.error("Constraint violated while trying to %s %s: %s", verb, entity, e.orig)
        raise ConflictError(entity=entity, verb=verb, cause=str(e.orig)) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Store error while trying to %s %s: %s", verb, entity, e)
        raise OperationFailedError(entity=entity, verb=verb, cause=str(e)) from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def dialect_name(session: Session) -> str:
    return session.get_bind().dialect.name


def upsert_statement(
    session: Session,
    model: Any,
    values: Mapping[str, Any],
    *,
    keys: Sequence[str],
    update: Sequence[str],
):
    """INSERT ... ON CONFLICT/ON DUPLICATE KEY UPDATE for the bound backend.

    ``keys`` must be covered by a unique constraint on the table.
    """

    table = model.__table__
    name = dialect_name(session)

    if name in {"sqlite", "postgresql"}:
        insert = sqlite_insert if name == "sqlite" else pg_insert
        stmt = insert(table).values(**values)
        return stmt.on_conflict_do_update(
            index_elements=list(keys),
            set_={col: stmt.excluded[col] for col in update},
        )

    if name in {"mysql", "mariadb"}:
        stmt = mysql_insert(table).values(**values)
        return stmt.on_duplicate_key_update(**{col: stmt.inserted[col] for col in update})

    raise ConfigurationError(f"upsert is not supported on the {name} backend")


def minutes_between(session: Session, start_col, end_col):
    """SQL expression for end - start in minutes; both columns hold HH:MM text."""

    name = dialect_name(session)
    if name == "sqlite":
        return (func.julianday(end_col) - func.julianday(start_col)) * 24 * 60
    if name in {"mysql", "mariadb"}:
        return func.time_to_sec(func.timediff(end_col, start_col)) / 60
    if name == "postgresql":
        return extract("epoch", cast(end_col, Time) - cast(start_col, Time)) / 60
    raise ConfigurationError(f"time arithmetic is not supported on the {name} backend")
