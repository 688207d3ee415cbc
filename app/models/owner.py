from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class OwnerPreferences(BaseModel):
    """Embed customisation set by the uploader. Missing values are empty strings.

    Each field is defaulted on its own, so one badly typed value never
    discards the rest of the customisation.
    """

    embed_title: str = ""
    embed_site_name: str = ""
    embed_site_url: str = ""
    embed_author_name: str = ""
    embed_desc: str = ""
    embed_colour: str = ""  # hex without leading '#'
    custom_css: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: Any) -> str:
        if not value:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (bool, int, float)):
            return str(value)
        return ""
