"""Schema for the result of native shell detection."""

from typing import Literal

from pydantic import BaseModel, Field

NativePlatform = Literal["ios", "android"]


class NativeClient(BaseModel):
    """Classification of a request's User-Agent as a native shell (or not)."""

    platform: NativePlatform | None = Field(
        default=None, description="Native shell platform, or None for a regular browser"
    )
    is_native: bool = False
    is_ios: bool = False
    is_android: bool = False
