from .embed import EmbedMetadata, MetaTag, RequestContext
from .image import ImageRecord
from .owner import OwnerPreferences

__all__ = [
    "EmbedMetadata",
    "MetaTag",
    "RequestContext",
    "ImageRecord",
    "OwnerPreferences",
]
