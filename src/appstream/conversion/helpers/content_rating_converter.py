"""Converter for OARS ``<content_rating>`` blocks."""

from __future__ import annotations

from typing import Optional

from lxml import etree

from ...models import (
    ContentAttribute,
    ContentRating,
    ContentRatingVersion,
    ContentState,
)
from .primitives import child_elements, required_attr, required_text
from .vocabulary import permissive, strict


class ContentRatingConverter:
    """
    ``<content_rating type="oars-1.1">`` holding
    ``<content_attribute id="…">intensity</content_attribute>`` entries.

    The version is permissive (anything unrecognised, or no ``type`` at all,
    is ``UNKNOWN``, and an unrecognised ``type`` is kept in ``raw_type``);
    the intensity is strict.
    """

    @staticmethod
    def convert(element: etree._Element) -> ContentRating:
        raw = element.get("type")
        version, unknown = ContentRatingVersion.UNKNOWN, None
        if raw is not None:
            version, unknown = permissive(ContentRatingVersion, raw)

        attributes = [
            ContentRatingConverter._attribute(child)
            for child in child_elements(element, "content_attribute")
        ]
        return ContentRating(version=version, raw_type=unknown, attributes=attributes)

    @staticmethod
    def _attribute(element: etree._Element) -> ContentAttribute:
        attribute_id = required_attr(element, "id")
        state = strict(
            ContentState, required_text(element), "$value", "content_attribute"
        )
        return ContentAttribute(id=attribute_id, state=state)

    @staticmethod
    def newest(
        current: Optional[ContentRating], candidate: ContentRating
    ) -> ContentRating:
        """
        Pick between two ratings of the same component: ``candidate`` only
        replaces ``current`` when its version is strictly newer.
        """
        if current is None or candidate.supersedes(current):
            return candidate
        return current
