"""Landing page: flash messages, signed-in user and native-aware layout."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.api.v1.auth import get_optional_user
from app.schemas.auth import CurrentUser
from app.schemas.native_client import NativeClient
from app.web.dependencies import get_native_client
from app.web.responses import consume_flash, get_flash
from app.web.templating import templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse, name="root")
def landing(
    request: Request,
    native: Annotated[NativeClient, Depends(get_native_client)],
    current_user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> HTMLResponse:
    """Render the landing page; native shells get the layout without the web nav bar."""
    response = templates.TemplateResponse(
        request,
        "landing.html",
        {
            "flash": get_flash(request),
            "native": native,
            "current_user": current_user,
        },
    )
    consume_flash(request, response)
    return response
