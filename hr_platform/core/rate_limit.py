"""
Rate limiting configuration using slowapi.

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at Redis
when several workers must share counters.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from hr_platform.core.config import settings


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_WRITE)
RATE_DEFAULT = "120/minute"      # directory reads and searches
RATE_WRITE = "30/minute"         # create, update, delete, skill assignment
