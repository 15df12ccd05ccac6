SECRET_KEY = "test-secret"

DB_CONFIG = {
    "url": "sqlite:///:memory:",
    "auth_token": "test-token",
    "max_retries": 0,
    "retry_delay": 0.0,
}

OAUTH_CONFIG = {
    "google_client_id": "",
    "google_client_secret": "",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
