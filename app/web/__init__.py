"""Server-rendered pages and native shell endpoints."""

from fastapi import APIRouter

from app.web import landing, turbo, users

router = APIRouter()
router.include_router(landing.router, tags=["pages"])
router.include_router(users.router, tags=["registration"])
router.include_router(turbo.router, prefix="/turbo", tags=["turbo"])
