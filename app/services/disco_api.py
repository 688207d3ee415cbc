"""Disco.pics backend API wrapper.

Provides async helpers for the two lookups the embed page needs: the image
record for a slug/host pair and the uploader's embed preferences.  Neither
helper raises on a failed lookup; an unknown image is reported as ``None``
and unavailable preferences fall back to an all-empty record.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from app.config import get_settings
from app.models import ImageRecord, OwnerPreferences

logger = logging.getLogger(__name__)
settings = get_settings()


class DiscoAPIClient:
    """Minimal async client for the Disco.pics backend API."""

    def __init__(
        self,
        *,
        base_url: str,
        key: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._key = key
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_image(self, slug: str, hostname: str) -> Optional[ImageRecord]:
        """Return the image stored under *slug* for *hostname*, or ``None``."""

        data = await self._get_json("/api/getImage", {"slug": slug, "host": hostname})
        if data is None:
            return None
        try:
            image = ImageRecord.model_validate(data)
        except ValidationError as exc:
            logger.warning("Malformed image record for slug=%s host=%s: %s", slug, hostname, exc)
            return None
        logger.debug("Found image id=%s for slug=%s", image.id, slug)
        return image

    async def get_owner_preferences(self, owner_id: str) -> OwnerPreferences:
        """Return the embed preferences of *owner_id*, defaulting every field when unavailable."""

        data = await self._get_json(
            "/api/user",
            {"id": owner_id, "key": self._key, "images": "false"},
        )
        if data is None:
            return OwnerPreferences()
        try:
            user = data["data"]["user"]
            return OwnerPreferences.model_validate(user)
        except (KeyError, TypeError, ValidationError) as exc:
            logger.warning("Malformed user envelope for id=%s: %s", owner_id, exc)
            return OwnerPreferences()

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get_json(self, path: str, params: dict[str, str]) -> Optional[Any]:
        url = f"{self._base_url}{path}"
        # the key is a credential, keep it out of the logs
        logger.debug("GET %s %s", url, {k: v for k, v in params.items() if k != "key"})
        try:
            resp = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            return None
        if resp.status_code != 200:
            logger.info("GET %s returned %s", url, resp.status_code)
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("Invalid JSON from %s: %s", url, exc)
            return None


# ------------------------------------------------------------------
# Singleton instance
# ------------------------------------------------------------------

disco_api_client = DiscoAPIClient(
    base_url=settings.api_base_url,
    key=settings.get_key,
    timeout=settings.api_timeout,
)


def get_api_client() -> DiscoAPIClient:
    """FastAPI dependency returning the shared client."""

    return disco_api_client
