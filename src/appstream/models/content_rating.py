"""
content_rating.py – OARS age-rating declarations
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ContentRatingVersion, ContentState


class ContentAttribute(BaseModel):
    """One ``<content_attribute id="…">intensity</content_attribute>``."""

    id: str = Field(..., description="OARS attribute id, e.g. ``violence-cartoon``.")
    state: ContentState

    model_config = ConfigDict(extra="forbid", frozen=True)


class ContentRating(BaseModel):
    version: ContentRatingVersion = ContentRatingVersion.UNKNOWN
    raw_type: Optional[str] = Field(
        None, description="Original ``type`` when the version is not recognised."
    )
    attributes: List[ContentAttribute] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def get(self, attribute_id: str) -> Optional[ContentState]:
        """Intensity declared for ``attribute_id``, ``None`` if not listed."""
        for attribute in self.attributes:
            if attribute.id == attribute_id:
                return attribute.state
        return None

    def supersedes(self, other: ContentRating) -> bool:
        """True when this rating's version is strictly newer than ``other``'s."""
        return self.version > other.version


__all__ = ["ContentAttribute", "ContentRating"]
