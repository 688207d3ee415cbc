"""Embed metadata resolution for the image page.

Turns an :class:`ImageRecord` plus the uploader's :class:`OwnerPreferences`
into the Open Graph / Twitter Card tags and page options rendered by
``templates/image.html``.
"""
from __future__ import annotations

import re
from typing import Optional

from app.models import EmbedMetadata, ImageRecord, MetaTag, OwnerPreferences, RequestContext

VIDEO_EXTENSIONS = (".mp4", ".webm", ".mov")
VIDEO_WIDTH = 1280
VIDEO_HEIGHT = 720

_CDN_HOST = "cdn.discordapp.com"
_MEDIA_HOST = "media.discordapp.net"

_STYLE_CLOSE_RE = re.compile(r"</(style)", re.IGNORECASE)


def resolve_request_context(
    slug: str,
    host_header: Optional[str],
    hostname_override: Optional[str] = None,
) -> Optional[RequestContext]:
    """Return the (slug, hostname) pair for a request, or ``None`` if no hostname is known."""

    hostname = hostname_override or host_header
    if not hostname:
        return None
    return RequestContext(slug=slug, hostname=hostname)


def is_video(url: str) -> bool:
    return url.endswith(VIDEO_EXTENSIONS)


def display_url(url: str) -> str:
    """Swap the Discord CDN host for its media proxy host."""

    return url.replace(_CDN_HOST, _MEDIA_HOST)


def theme_colour(embed_colour: str, default: str) -> str:
    if not embed_colour:
        return default
    return f"#{embed_colour}"


def sanitize_css(css: str) -> str:
    # a literal "</style" would end the element early
    return _STYLE_CLOSE_RE.sub(r"<\\/\1", css)


def _media_tags(url: str) -> list[MetaTag]:
    if not is_video(url):
        return [MetaTag(property="og:image", content=url)]
    return [
        MetaTag(property="og:type", content="video.other"),
        MetaTag(property="og:video:type", content="video/mp4"),
        MetaTag(property="og:video", content=url),
        MetaTag(property="og:video:url", content=url),
        MetaTag(property="og:video:secure_url", content=url),
        MetaTag(property="og:video:width", content=str(VIDEO_WIDTH)),
        MetaTag(property="og:video:height", content=str(VIDEO_HEIGHT)),
    ]


def build_embed_metadata(
    image: ImageRecord,
    prefs: OwnerPreferences,
    *,
    site_name: str,
    site_url: str,
    default_theme_colour: str,
) -> EmbedMetadata:
    """Merge an image record with its owner's preferences into page metadata.

    Only ``twitter:title`` falls back to *site_name*; every other text tag
    renders the preference as-is, empty when unset.
    """

    url = image.img_url
    tags = _media_tags(url)
    tags += [
        MetaTag(property="og:description", content=prefs.embed_desc),
        MetaTag(property="og:title", content=prefs.embed_title),
        MetaTag(property="og:site_name", content=prefs.embed_site_name),
        MetaTag(property="og:url", content=prefs.embed_site_url),
        MetaTag(property="theme-color", content=theme_colour(prefs.embed_colour, default_theme_colour)),
        MetaTag(property="article:author", content=prefs.embed_author_name),
        MetaTag(property="twitter:description", content=prefs.embed_desc),
        MetaTag(property="twitter:title", content=prefs.embed_title or site_name),
        MetaTag(property="twitter:image", content=url),
        MetaTag(property="twitter:card", content="summary_large_image"),
    ]

    css = sanitize_css(prefs.custom_css)

    return EmbedMetadata(
        slug=image.slug,
        page_title=site_name,
        is_video=is_video(url),
        tags=tags,
        display_url=display_url(url),
        download_url=url,
        custom_css=css,
        dark_background=not css,
        site_url=site_url,
    )
