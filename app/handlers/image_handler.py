"""Image embed page: /{slug}."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.config import get_settings
from app.services.disco_api import DiscoAPIClient, get_api_client
from app.services.embed import build_embed_metadata, resolve_request_context
from app.templating import templates

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


def _not_found() -> RedirectResponse:
    return RedirectResponse(settings.not_found_path, status_code=302)


@router.get("/{slug}", response_class=HTMLResponse)
async def image_page(
    slug: str,
    request: Request,
    host: str | None = Header(None),
    api: DiscoAPIClient = Depends(get_api_client),
):
    ctx = resolve_request_context(slug, host, settings.hostname_override)
    if ctx is None:
        logger.info("No hostname for slug=%s", slug)
        return _not_found()

    image = await api.get_image(ctx.slug, ctx.hostname)
    if image is None:
        logger.info("Image not found: slug=%s host=%s", ctx.slug, ctx.hostname)
        return _not_found()

    prefs = await api.get_owner_preferences(image.uploaded_by)
    embed = build_embed_metadata(
        image,
        prefs,
        site_name=settings.site_name,
        site_url=settings.site_url,
        default_theme_colour=settings.default_theme_colour,
    )
    return templates.TemplateResponse(
        request,
        "image.html",
        {"page_title": embed.page_title, "embed": embed},
    )
