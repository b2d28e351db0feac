"""Redirect, flash and session cookie helpers shared by the HTML routes."""

from fastapi import Request, Response, status
from fastapi.responses import RedirectResponse

from app.core.config import get_settings
from app.core.security import decode_flash, encode_flash

FLASH_COOKIE_NAME = "flash"


def redirect_with_flash(
    url: str,
    *,
    notice: str | None = None,
    alert: str | None = None,
) -> RedirectResponse:
    """303 redirect carrying a one-request flash message in a signed cookie."""
    response = RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
    messages = {k: v for k, v in (("notice", notice), ("alert", alert)) if v}
    if messages:
        response.set_cookie(
            FLASH_COOKIE_NAME,
            encode_flash(messages),
            max_age=get_settings().FLASH_EXPIRE_SECONDS,
            httponly=True,
            samesite="lax",
            secure=get_settings().APP_ENV == "prod",
        )
    return response


def get_flash(request: Request) -> dict[str, str]:
    """Flash messages attached to this request (empty when none or invalid)."""
    return decode_flash(request.cookies.get(FLASH_COOKIE_NAME))


def consume_flash(request: Request, response: Response) -> None:
    """Expire the flash cookie once a page has displayed it."""
    if FLASH_COOKIE_NAME in request.cookies:
        response.delete_cookie(FLASH_COOKIE_NAME)


def set_session_cookie(response: Response, token: str) -> None:
    """Deliver a session token to the client."""
    settings = get_settings()
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_COOKIE_MAX_AGE_SEC,
        httponly=True,
        samesite="lax",
        secure=settings.APP_ENV == "prod",
    )
