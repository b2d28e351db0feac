"""Path configuration for Turbo Native shells. Public and static."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.schemas.path_configuration import PathConfiguration
from app.services.path_configuration import build_path_configuration

router = APIRouter()

JSON_UTF8 = "application/json; charset=utf-8"


@router.get(
    "/ios/path_configuration.json",
    response_model=PathConfiguration,
    name="turbo_ios_path_configuration",
)
def ios_path_configuration() -> JSONResponse:
    """
    Return the URL-pattern to presentation rules evaluated by the iOS shell.
    No authentication, no error conditions.
    """
    return JSONResponse(
        content=build_path_configuration().model_dump(),
        media_type=JSON_UTF8,
    )
