"""Request/response schemas for registration and session endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RegistrationForm(BaseModel):
    """
    Signup payload. Fields default to empty strings so that missing values reach
    the registration validator instead of failing request parsing.
    """

    email_address: str = Field(default="", description="Email address (normalized before use)")
    password: str = Field(default="", description="Password (write-only)")
    password_confirmation: str = Field(
        default="", description="Must equal password; never persisted"
    )

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks.
        return f"RegistrationForm(email_address={self.email_address!r})"

    __str__ = __repr__


class RegistrationRequest(BaseModel):
    """JSON body for POST /register: {"user": {...}}."""

    user: RegistrationForm = Field(default_factory=RegistrationForm)


class CurrentUser(BaseModel):
    """Authenticated user (id, email_address) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email_address: str
