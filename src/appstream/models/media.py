"""
media.py – icons, screenshots, images and videos
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

from .enums import ImageKind
from .translatable import TranslatableString

# ---------------------------------------------------------------------------
# Icons
# ---------------------------------------------------------------------------


class StockIcon(BaseModel):
    """Icon looked up by name in the desktop icon theme."""

    type: Literal["stock"] = "stock"
    name: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class CachedIcon(BaseModel):
    """Icon shipped in the metadata cache next to the collection."""

    type: Literal["cached"] = "cached"
    path: str
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    scale: Optional[int] = Field(None, ge=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class RemoteIcon(BaseModel):
    type: Literal["remote"] = "remote"
    url: AnyUrl
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    scale: Optional[int] = Field(None, ge=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class LocalIcon(BaseModel):
    """Absolute path on the local filesystem (the default icon type)."""

    type: Literal["local"] = "local"
    path: str
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    scale: Optional[int] = Field(None, ge=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


Icon = Annotated[
    Union[StockIcon, CachedIcon, RemoteIcon, LocalIcon],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# Screenshots
# ---------------------------------------------------------------------------


class Image(BaseModel):
    kind: ImageKind = ImageKind.SOURCE
    url: AnyUrl
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)


class Video(BaseModel):
    url: AnyUrl
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    codec: Optional[str] = None
    container: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Screenshot(BaseModel):
    """A ``<screenshot>`` with its caption, images and videos."""

    is_default: bool = Field(
        False, description='True for ``<screenshot type="default">``.'
    )
    caption: Optional[TranslatableString] = None
    images: List[Image] = Field(default_factory=list)
    videos: List[Video] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = [
    "CachedIcon",
    "Icon",
    "Image",
    "LocalIcon",
    "RemoteIcon",
    "Screenshot",
    "StockIcon",
    "Video",
]
