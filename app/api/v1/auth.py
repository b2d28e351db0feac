"""Session cookie auth dependencies (get_current_session, get_current_user) and /me."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.models import UserSession
from app.schemas.auth import CurrentUser
from app.services.sessions import find_session_by_token

router = APIRouter()


def get_current_session(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> UserSession | None:
    """Dependency: resolve the session cookie to its session row, or None when signed out."""
    token = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    return find_session_by_token(db, token)


def get_optional_user(
    session_row: Annotated[UserSession | None, Depends(get_current_session)],
) -> CurrentUser | None:
    """Dependency: current user if a valid session cookie is present, else None."""
    if session_row is None or session_row.user is None:
        return None
    return CurrentUser.model_validate(session_row.user)


def get_current_user(
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> CurrentUser:
    """Dependency: require a valid session and return the current user. Raises 401 otherwise."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


@router.get("/me", response_model=CurrentUser)
def read_current_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Return the user owning the session cookie."""
    return current_user
