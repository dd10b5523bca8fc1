import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import pytz
from jose import jwt

from desi_nutri.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES, DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)

# Token Logic
def create_access_token(data: dict, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    """Mint a bearer token. Used by tooling and tests; end-user sign-in lives elsewhere."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({'exp': expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> dict:
    """Raises jose.JWTError on bad signature or expiry."""
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])

# --- Local Time Helpers ---
def resolve_timezone(tz_name: Optional[str]):
    """
    Returns a pytz timezone for the given name.
    Falls back to DEFAULT_TIMEZONE, then UTC, when the name is missing or unknown.
    """
    for candidate in (tz_name, DEFAULT_TIMEZONE):
        if not candidate:
            continue
        try:
            return pytz.timezone(candidate)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone '{candidate}', falling back")
    return pytz.UTC

def get_local_date(tz_name: Optional[str], now: Optional[datetime] = None) -> date:
    """Calendar date of `now` (default: current UTC time) on the wall clock of tz_name."""
    server_now = now or datetime.now(pytz.UTC)
    if server_now.tzinfo is None:
        server_now = pytz.UTC.localize(server_now)
    return server_now.astimezone(resolve_timezone(tz_name)).date()

def utc_now() -> datetime:
    return datetime.now(timezone.utc)
