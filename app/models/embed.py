from __future__ import annotations

from pydantic import BaseModel


class RequestContext(BaseModel):
    slug: str
    hostname: str


class MetaTag(BaseModel):
    property: str
    content: str


class EmbedMetadata(BaseModel):
    """Everything the image page template needs, already resolved."""

    slug: str
    page_title: str
    is_video: bool
    tags: list[MetaTag]
    display_url: str  # CDN-rewritten, for the inline media element
    download_url: str  # original URL
    custom_css: str = ""
    dark_background: bool = True
    site_url: str
