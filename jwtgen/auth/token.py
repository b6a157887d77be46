import hashlib
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from jwtgen.errors import TokenError

log = logging.getLogger(__name__)

ALGO = "HS256"
DEFAULT_TTL_MINUTES = 5


def derive_key(value: str) -> bytes:
    """SHA-256 of the UTF-8 encoded value, used as the raw HMAC key."""
    if not value:
        raise TokenError("Cannot derive a signing key from an empty secret")
    return hashlib.sha256(value.encode("utf-8")).digest()


def generate_jwt(
    secret: str,
    principal: str,
    *,
    ttl_minutes: int = DEFAULT_TTL_MINUTES,
    now: datetime | None = None,
) -> str:
    """
    Sign a compact JWT asserting `principal` as subject, expiring after
    `ttl_minutes`.
    """
    issued = now or datetime.now(timezone.utc)
    claims = {
        "sub": principal,
        "exp": int((issued + timedelta(minutes=ttl_minutes)).timestamp()),
    }
    token = jwt.encode(claims, derive_key(secret), algorithm=ALGO)
    log.debug(f"Signed JWT for subject={principal!r} ttl_minutes={ttl_minutes}")
    return token


def decode_jwt(token: str, secret: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, derive_key(secret), algorithms=[ALGO])
    except ExpiredSignatureError as e:
        log.error(f"JWT expired: {e}")
        raise TokenError("Token expired") from e
    except JWTError as e:
        log.error(f"JWT validation failed: {e}")
        raise TokenError("Invalid token") from e
