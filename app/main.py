"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.api.v1 import router as v1_router
from app.core.config import APP_NAME, APP_VERSION, settings
from app.web import router as web_router


def install_proxy_headers(app: FastAPI, forwarded_allow_ips: str) -> None:
    """
    Take the client address from X-Forwarded-For when the peer is a trusted proxy.
    No-op when forwarded_allow_ips is empty.
    """
    if not forwarded_allow_ips:
        return
    trusted = "*" if forwarded_allow_ips == "*" else forwarded_allow_ips.split(",")
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=trusted)


app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_proxy_headers(app, settings.FORWARDED_ALLOW_IPS)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
app.include_router(web_router)
