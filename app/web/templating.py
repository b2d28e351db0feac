"""Jinja2 templates for the server-rendered pages."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.core.config import APP_NAME

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_name"] = APP_NAME
