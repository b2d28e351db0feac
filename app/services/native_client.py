"""Detect Turbo Native iOS/Android shells from the User-Agent header."""

import re

from app.schemas.native_client import NativeClient

IOS_MARKER = "Turbo Native iOS"
ANDROID_MARKER = "Turbo Native Android"

# Case-sensitive, matches anywhere in the header.
_IOS_PATTERN = re.compile(re.escape(IOS_MARKER))
_ANDROID_PATTERN = re.compile(re.escape(ANDROID_MARKER))
_NATIVE_PATTERN = re.compile(f"({re.escape(IOS_MARKER)}|{re.escape(ANDROID_MARKER)})")


def is_ios_app(user_agent: str | None) -> bool:
    """True if the User-Agent identifies the Turbo Native iOS shell."""
    return bool(_IOS_PATTERN.search(user_agent or ""))


def is_android_app(user_agent: str | None) -> bool:
    """True if the User-Agent identifies the Turbo Native Android shell."""
    return bool(_ANDROID_PATTERN.search(user_agent or ""))


def is_native_app(user_agent: str | None) -> bool:
    """True for either native shell. Missing or empty header is not native."""
    return bool(_NATIVE_PATTERN.search(user_agent or ""))


def detect_native_client(user_agent: str | None) -> NativeClient:
    """
    Classify a raw User-Agent string. Never raises.

    If both markers appear (not expected in practice), iOS wins for platform.
    """
    ios = is_ios_app(user_agent)
    android = is_android_app(user_agent)
    platform = "ios" if ios else "android" if android else None
    return NativeClient(
        platform=platform,
        is_native=is_native_app(user_agent),
        is_ios=ios,
        is_android=android,
    )
