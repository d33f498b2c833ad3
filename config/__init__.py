from .settings import (
    API_VERSION,
    DEFAULT_SETTINGS,
    FEED_DESCRIPTION,
    FEED_TITLE,
    PAGE_SIZE,
    SITE_URL,
)
