"""Create and resume authenticated sessions."""

import logging

from sqlalchemy.orm import Session

from app.core.security import generate_session_token
from app.models import User, UserSession

logger = logging.getLogger(__name__)

# Column limits on the sessions table.
_MAX_USER_AGENT_LEN = 1024
_MAX_IP_LEN = 64


def start_new_session(
    db: Session,
    user: User,
    *,
    user_agent: str | None = None,
    ip_address: str | None = None,
) -> tuple[UserSession, str]:
    """
    Persist one new session for user and return it with its token.

    A fresh token is generated on every call. Flushes but does not commit;
    the caller owns the transaction and delivers the token (e.g. as a cookie).
    """
    token = generate_session_token()
    row = UserSession(
        user_id=user.id,
        token=token,
        user_agent=user_agent[:_MAX_USER_AGENT_LEN] if user_agent else None,
        ip_address=ip_address[:_MAX_IP_LEN] if ip_address else None,
    )
    db.add(row)
    db.flush()
    logger.info("Session started", extra={"user_id": user.id, "session_row_id": row.id})
    return row, token


def find_session_by_token(db: Session, token: str | None) -> UserSession | None:
    """Look up the session carried by a cookie value; None if missing or unknown."""
    if not token or not token.strip():
        return None
    return db.query(UserSession).filter(UserSession.token == token.strip()).first()
