"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_SECONDS = 5.0

DEFAULT_NEWS_PAGE_SIZE = 10
MAX_NEWS_PAGE_SIZE = 100
DEFAULT_TOP_EMPLOYEES = 5
DEFAULT_NPS_HISTORY = 3
