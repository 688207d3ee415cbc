"""Static pages: the index redirect and the not-found page."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.config import get_settings
from app.templating import templates

router = APIRouter()
settings = get_settings()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Send the browser on to the main app."""
    return templates.TemplateResponse(
        request,
        "redirect.html",
        {"page_title": settings.site_name, "target_url": settings.app_url},
    )


@router.get(settings.not_found_path, response_class=HTMLResponse)
async def not_found(request: Request):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"page_title": settings.site_name, "site_url": settings.site_url},
        status_code=404,
    )
