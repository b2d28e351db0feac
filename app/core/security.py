"""Password hashing, session tokens and signed flash payloads."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Length limits for registration input. The minimum password length is enforced
# by the registration service, not only by the signup form.
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 12
# bcrypt only reads the first 72 bytes; longer passwords are rejected rather than truncated.
# The character cap covers ASCII input; the byte cap catches multi-byte characters.
PASSWORD_MAX_LEN = 72
PASSWORD_MAX_BYTES = 72

# Bytes of entropy behind each session token.
SESSION_TOKEN_BYTES = 32

FLASH_ALGORITHM = "HS256"
FLASH_KEYS = ("notice", "alert")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # Registration rejects passwords over PASSWORD_MAX_BYTES; the slice only guards other callers.
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_session_token() -> str:
    """Return a new URL-safe opaque session token."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def encode_flash(messages: dict[str, str]) -> str:
    """
    Sign flash messages (notice/alert) into a short-lived token for the flash cookie.
    Unknown keys are dropped.
    """
    now = datetime.now(UTC)
    payload: dict[str, Any] = {k: v for k, v in messages.items() if k in FLASH_KEYS and v}
    payload["iat"] = now
    payload["exp"] = now + timedelta(seconds=settings.FLASH_EXPIRE_SECONDS)
    return jwt.encode(
        payload,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=FLASH_ALGORITHM,
    )


def decode_flash(token: str | None) -> dict[str, str]:
    """
    Verify a flash token and return its messages.
    Missing, expired or tampered tokens yield an empty dict.
    """
    if not token:
        return {}
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[FLASH_ALGORITHM],
        )
    except jwt.PyJWTError:
        return {}
    return {k: str(payload[k]) for k in FLASH_KEYS if payload.get(k)}
