"""Request-derived dependencies for the HTML routes."""

from fastapi import Request

from app.schemas.native_client import NativeClient
from app.services.native_client import detect_native_client


def get_native_client(request: Request) -> NativeClient:
    """Dependency: classify the caller's User-Agent (missing header is a regular browser)."""
    return detect_native_client(request.headers.get("user-agent", ""))


def client_ip(request: Request) -> str:
    """
    Best-effort client address for throttling and session bookkeeping.

    Behind a reverse proxy this is the proxy unless FORWARDED_ALLOW_IPS lists it
    (see app.main.install_proxy_headers).
    """
    return request.client.host if request.client else "unknown"
