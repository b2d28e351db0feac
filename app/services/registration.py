"""User registration: validate signup input, persist the user and start a session."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    hash_password,
)
from app.models import User, UserSession
from app.schemas.auth import RegistrationForm
from app.services.email import normalize_email
from app.services.sessions import start_new_session

logger = logging.getLogger(__name__)

ERROR_EMAIL_BLANK = "Email address can't be blank"
ERROR_EMAIL_TOO_LONG = "Email address is too long"
ERROR_EMAIL_TAKEN = "Email address has already been taken"
ERROR_PASSWORD_BLANK = "Password can't be blank"
ERROR_PASSWORD_TOO_SHORT = f"Password is too short (minimum is {PASSWORD_MIN_LEN} characters)"
ERROR_PASSWORD_TOO_LONG = f"Password is too long (maximum is {PASSWORD_MAX_LEN} characters)"
ERROR_PASSWORD_TOO_MANY_BYTES = (
    f"Password is too long (maximum is {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded)"
)
ERROR_CONFIRMATION_MISMATCH = "Password confirmation doesn't match Password"


class RegistrationError(Exception):
    """Base for every registration failure. errors holds rule violations, if any."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class RegistrationValidationError(RegistrationError):
    """Input failed presence, length, confirmation or uniqueness rules."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors) or "Invalid registration", errors)


class PersistenceConflictError(RegistrationError):
    """The unique email constraint rejected the insert (concurrent registration)."""

    def __init__(self, message: str = "Email address was registered concurrently") -> None:
        super().__init__(message, [ERROR_EMAIL_TAKEN])


@dataclass
class RegistrationResult:
    """Outcome of a successful registration."""

    user: User
    session: UserSession
    token: str


def validate_registration(form: RegistrationForm) -> list[str]:
    """
    Return rule violations for a signup form (empty list means valid).
    Uniqueness is checked separately because it needs the database.
    """
    errors: list[str] = []
    email = normalize_email(form.email_address)
    if not email:
        errors.append(ERROR_EMAIL_BLANK)
    elif len(email) > EMAIL_MAX_LEN:
        errors.append(ERROR_EMAIL_TOO_LONG)

    password = form.password
    if not password:
        errors.append(ERROR_PASSWORD_BLANK)
    elif len(password) < PASSWORD_MIN_LEN:
        errors.append(ERROR_PASSWORD_TOO_SHORT)
    elif len(password) > PASSWORD_MAX_LEN:
        errors.append(ERROR_PASSWORD_TOO_LONG)
    elif len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors.append(ERROR_PASSWORD_TOO_MANY_BYTES)

    if password != form.password_confirmation:
        errors.append(ERROR_CONFIRMATION_MISMATCH)
    return errors


def email_taken(db: Session, email_address: str) -> bool:
    """True if a user already owns this email (compared after normalization)."""
    normalized = normalize_email(email_address)
    return db.query(User.id).filter(User.email_address == normalized).first() is not None


def create_user(db: Session, form: RegistrationForm) -> User:
    """
    Validate the form and add a new User to the session (flushed, not committed).

    Raises RegistrationValidationError on rule violations or an existing email,
    PersistenceConflictError when the unique index rejects the flush.
    """
    errors = validate_registration(form)
    if errors:
        raise RegistrationValidationError(errors)

    email = normalize_email(form.email_address)
    if email_taken(db, email):
        raise RegistrationValidationError([ERROR_EMAIL_TAKEN])

    user = User(email_address=email, password_hash=hash_password(form.password))
    db.add(user)
    try:
        db.flush()
    except IntegrityError as e:
        raise PersistenceConflictError() from e
    return user


def register_user(
    db: Session,
    form: RegistrationForm,
    *,
    user_agent: str | None = None,
    ip_address: str | None = None,
) -> RegistrationResult:
    """
    Create the user and its first session in one transaction.

    Either both rows are committed or neither is: any failure rolls back before
    the exception propagates. Unexpected exceptions are re-raised unchanged.
    """
    try:
        user = create_user(db, form)
        session_row, token = start_new_session(
            db, user, user_agent=user_agent, ip_address=ip_address
        )
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise PersistenceConflictError() from e
    except Exception:
        db.rollback()
        raise

    logger.info(
        "User registered",
        extra={"registration_status": "success", "user_id": user.id},
    )
    return RegistrationResult(user=user, session=session_row, token=token)
