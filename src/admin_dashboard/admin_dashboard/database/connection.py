from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import StaticPool

from ..core.constants import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY_SECONDS
from ..core.exceptions import ConfigurationError, ConnectionUnavailableError
from .bootstrap import ensure_tables_exist

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSettings:
    url: str
    auth_token: str


@dataclass(frozen=True)
class RetryPolicy:
    """How often and how far apart connection attempts are repeated."""

    max_retries: int = DEFAULT_MAX_RETRIES
    delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS

    @property
    def attempts(self) -> int:
        return 1 + max(0, int(self.max_retries))


def masked_url(url: str) -> str:
    if not url:
        return "NOT CONFIGURED"
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<invalid url>"


class DatabaseConnection:
    """Owner of the single store handle (a SQLAlchemy Engine).

    Built once by the container and handed to every repository. The handle is
    replaced wholesale on reconnect; there is no pool of handles.
    """

    def __init__(
        self,
        settings: StoreSettings,
        retry_policy: Optional[RetryPolicy] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._settings = settings
        self._retry = retry_policy or RetryPolicy()
        self._sleep = sleep
        self._engine: Optional[Engine] = None
        self._tables_ready = False
        self._lock = threading.RLock()

    @property
    def engine(self) -> Optional[Engine]:
        return self._engine

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry

    def _create_engine(self) -> Engine:
        url = make_url(self._settings.url)
        kwargs: dict = {}
        if url.get_backend_name() == "sqlite":
            # Local file store: the token is required but not sent anywhere.
            kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            if url.password is None:
                url = url.set(password=self._settings.auth_token)
            kwargs["pool_pre_ping"] = True
        return create_engine(url, **kwargs)

    def initialize(self) -> Optional[Engine]:
        url = self._settings.url
        token = self._settings.auth_token
        logger.info(
            "Store configuration: url=%s auth_token=%s",
            masked_url(url),
            "configured (hidden)" if token else "NOT CONFIGURED",
        )
        if not url:
            raise ConfigurationError("store connection URL is not configured (DATABASE_URL)")
        if not token:
            raise ConfigurationError("store auth token is not configured (DATABASE_AUTH_TOKEN)")

        self.dispose()
        attempts = self._retry.attempts
        for attempt in range(1, attempts + 1):
            engine: Optional[Engine] = None
            try:
                engine = self._create_engine()
                with engine.connect():
                    pass
            except Exception as e:
                logger.error("Could not open store connection (attempt %d of %d): %s", attempt, attempts, e)
                if engine is not None:
                    engine.dispose()
                if attempt < attempts:
                    logger.info("Retrying store connection in %.1fs...", self._retry.delay_seconds)
                    self._sleep(self._retry.delay_seconds)
                continue

            self._engine = engine
            self._tables_ready = False
            logger.info("Store connection ready (%s)", engine.dialect.name)
            return engine

        logger.error("Giving up on store connection after %d attempts", attempts)
        return None

    def ensure_connection(self) -> Engine:
        engine = self._engine
        if engine is not None:
            return engine
        with self._lock:
            if self._engine is None:
                logger.warning("Store connection is not available, reconnecting...")
                self.initialize()
            if self._engine is None:
                raise ConnectionUnavailableError("store connection is not available")
            return self._engine

    def ensure_tables(self) -> None:
        """Create missing tables once per handle."""

        if self._tables_ready:
            return
        with self._lock:
            if not self._tables_ready:
                ensure_tables_exist(self.ensure_connection())
                self._tables_ready = True

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._tables_ready = False
