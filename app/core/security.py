# app/core/security.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

# Keyed on the caller's address, off unless RATE_LIMIT_ENABLED is set
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
