"""Schemas for the native shell path configuration document."""

from typing import Any

from pydantic import BaseModel, Field


class PathConfigurationRule(BaseModel):
    """URL path patterns and the presentation properties the shell applies to them."""

    patterns: list[str] = Field(..., description="Regex-like path patterns, e.g. '/new$'")
    properties: dict[str, Any] = Field(
        default_factory=dict, description="Presentation hints, e.g. presentation=modal"
    )


class PathConfiguration(BaseModel):
    """Document consumed by Turbo Native shells for navigation decisions."""

    settings: dict[str, Any] = Field(default_factory=dict)
    rules: list[PathConfigurationRule] = Field(default_factory=list)
