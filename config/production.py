import os

from config.config import db_config, oauth_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# No defaults: a missing URL or token stops the app at startup.
DB_CONFIG = db_config()

OAUTH_CONFIG = oauth_config()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
