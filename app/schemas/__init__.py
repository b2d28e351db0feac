"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, RegistrationForm, RegistrationRequest
from app.schemas.health import HealthResponse
from app.schemas.native_client import NativeClient, NativePlatform
from app.schemas.path_configuration import PathConfiguration, PathConfigurationRule

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "NativeClient",
    "NativePlatform",
    "PathConfiguration",
    "PathConfigurationRule",
    "RegistrationForm",
    "RegistrationRequest",
]
