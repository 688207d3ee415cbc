from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ImageRecord(BaseModel):
    """Image metadata as returned by ``/api/getImage``."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    slug: str
    img_url: str  # absolute URL, image or video by extension
    uploaded_by: str  # owner id for the user lookup
    # not rendered, so a missing value is tolerated
    id: str = ""
    uploaded_at: str = ""

    @field_validator("id", "uploaded_at", mode="before")
    @classmethod
    def _blank_if_none(cls, value: Any) -> Any:
        return "" if value is None else value
