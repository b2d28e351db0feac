"""Signup form and registration endpoint."""

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.database import get_db
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from app.schemas.auth import RegistrationForm, RegistrationRequest
from app.schemas.native_client import NativeClient
from app.services.rate_limit import SlidingWindowRateLimiter
from app.services.registration import RegistrationError, register_user
from app.web.dependencies import client_ip, get_native_client
from app.web.responses import (
    consume_flash,
    get_flash,
    redirect_with_flash,
    set_session_cookie,
)
from app.web.templating import templates

logger = logging.getLogger(__name__)
router = APIRouter()

SIGNUP_PATH = "/signup"
AFTER_REGISTRATION_PATH = "/"

NOTICE_USER_CREATED = "User created successfully"
# Every failure cause maps to this one message; details never reach the client.
ALERT_REGISTRATION_FAILED = "Failed to create user"
ALERT_RATE_LIMITED = "Try again later."

FORM_FIELDS = ("email_address", "password", "password_confirmation")

registration_limiter = SlidingWindowRateLimiter(
    limit=settings.REGISTRATION_RATE_LIMIT,
    window_seconds=settings.REGISTRATION_RATE_WINDOW_SEC,
)


async def read_registration_form(request: Request) -> RegistrationForm:
    """
    Dependency: read user[...] fields from a form post or {"user": {...}} JSON.
    Unparseable bodies (bad JSON, broken multipart) yield an empty form, which
    then fails validation.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    try:
        if content_type == "application/json":
            body = await request.json()
            if not isinstance(body, dict):
                return RegistrationForm()
            return RegistrationRequest.model_validate(body).user
        form = await request.form()
        values = {
            field: form.get(f"user[{field}]")
            for field in FORM_FIELDS
            if isinstance(form.get(f"user[{field}]"), str)
        }
        return RegistrationForm.model_validate(values)
    except (
        json.JSONDecodeError,
        UnicodeDecodeError,
        ValidationError,
        StarletteHTTPException,
    ) as e:
        logger.info("Unreadable registration body: %s", type(e).__name__)
        return RegistrationForm()


@router.get(SIGNUP_PATH, response_class=HTMLResponse, name="signup")
def signup(
    request: Request,
    native: Annotated[NativeClient, Depends(get_native_client)],
) -> HTMLResponse:
    """Render the signup form."""
    response = templates.TemplateResponse(
        request,
        "signup.html",
        {
            "flash": get_flash(request),
            "native": native,
            "current_user": None,
            "password_min_len": PASSWORD_MIN_LEN,
            "password_max_len": PASSWORD_MAX_LEN,
        },
    )
    consume_flash(request, response)
    return response


@router.post("/register", name="register")
def register(
    request: Request,
    form: Annotated[RegistrationForm, Depends(read_registration_form)],
    db: Annotated[Session, Depends(get_db)],
) -> RedirectResponse:
    """
    Create a user and sign them in.

    Success: 303 to the landing page with a notice and the session cookie.
    Any failure (invalid input, taken email, race on the unique index, unexpected
    error): 303 back to the signup form with one generic alert.
    """
    ip = client_ip(request)
    if not registration_limiter.hit(ip):
        logger.warning(
            "Registration rate limited",
            extra={"registration_status": "rate_limited", "client_ip": ip},
        )
        return redirect_with_flash(SIGNUP_PATH, alert=ALERT_RATE_LIMITED)

    try:
        result = register_user(
            db,
            form,
            user_agent=request.headers.get("user-agent"),
            ip_address=ip,
        )
    except RegistrationError as e:
        logger.info(
            "Registration rejected",
            extra={
                "registration_status": "failure",
                "reason": type(e).__name__,
                "error_count": len(e.errors),
            },
        )
        return redirect_with_flash(SIGNUP_PATH, alert=ALERT_REGISTRATION_FAILED)
    except Exception as e:
        logger.exception("Registration failed unexpectedly: %s", type(e).__name__)
        return redirect_with_flash(SIGNUP_PATH, alert=ALERT_REGISTRATION_FAILED)

    response = redirect_with_flash(AFTER_REGISTRATION_PATH, notice=NOTICE_USER_CREATED)
    set_session_cookie(response, result.token)
    return response
