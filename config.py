"""
Configuration file for Reddit Proxy
Supports environment variable overrides for Docker/production deployment
"""

import os

# Request parameter defaults
DEFAULT_SORT = os.getenv("DEFAULT_SORT", "hot")
DEFAULT_POST_LIMIT = int(os.getenv("DEFAULT_POST_LIMIT", "10"))
MAX_POST_LIMIT = int(os.getenv("MAX_POST_LIMIT", "25"))
MAX_SUBREDDIT_LENGTH = int(os.getenv("MAX_SUBREDDIT_LENGTH", "50"))
ALLOWED_SORTS = ("hot", "new", "top", "rising")

# Outbound request settings
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "6"))  # seconds, per attempt

# Header profiles (Reddit blocks default/bot-like user agents)
BROWSER_USER_AGENT = os.getenv(
    "BROWSER_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
)
ALT_BROWSER_USER_AGENT = os.getenv(
    "ALT_BROWSER_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_2) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.2 Safari/605.1.15",
)
FEED_USER_AGENT = os.getenv("FEED_USER_AGENT", "Mozilla/5.0 (compatible; RSS Reader)")

# Post normalization policy
MAX_SELFTEXT_LENGTH = int(os.getenv("MAX_SELFTEXT_LENGTH", "300"))
EXCLUDE_PINNED_POSTS = os.getenv("EXCLUDE_PINNED_POSTS", "True").lower() == "true"

# Response headers
CACHE_CONTROL = os.getenv("CACHE_CONTROL", "s-maxage=300, stale-while-revalidate=600")

# Positive-result cache (0 disables)
RESULT_CACHE_TTL = int(os.getenv("RESULT_CACHE_TTL", "60"))  # seconds
RESULT_CACHE_MAXSIZE = int(os.getenv("RESULT_CACHE_MAXSIZE", "256"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
