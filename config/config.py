import os


def getenv(name: str, *fallbacks: str, default: str = "") -> str:
    """First non-blank value among ``name`` and its fallback names."""
    for key in (name, *fallbacks):
        value = os.environ.get(key)
        if value is not None and value.strip():
            return value.strip()
    return default


def db_config(*, default_url: str = "", default_token: str = "") -> dict:
    """Store settings from the environment.

    DATABASE_URL is a SQLAlchemy URL, e.g. ``sqlite:///admin_dashboard.db`` or
    ``mysql+mysqlconnector://user@host:3306/dashboard`` (mysql-connector-python).
    For server backends DATABASE_AUTH_TOKEN is used as the password when the
    URL carries none. TURSO_* / PUBLIC_TURSO_* names are read for older
    deployments.
    """
    return {
        "url": getenv("DATABASE_URL", "TURSO_DATABASE_URL", "PUBLIC_TURSO_DATABASE_URL", default=default_url),
        "auth_token": getenv(
            "DATABASE_AUTH_TOKEN", "TURSO_AUTH_TOKEN", "PUBLIC_TURSO_AUTH_TOKEN", default=default_token
        ),
        "max_retries": int(getenv("DB_MAX_RETRIES", default="3")),
        "retry_delay": float(getenv("DB_RETRY_DELAY", default="5")),
    }


def oauth_config() -> dict:
    return {
        "google_client_id": getenv("GOOGLE_CLIENT_ID", "NEXT_PUBLIC_GOOGLE_CLIENT_ID"),
        "google_client_secret": getenv("GOOGLE_CLIENT_SECRET", "NEXT_PUBLIC_GOOGLE_CLIENT_SECRET"),
    }
