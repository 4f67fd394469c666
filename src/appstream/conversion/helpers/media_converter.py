"""Converters for icons, screenshots, images and videos."""

from __future__ import annotations

import logging
from typing import List

from lxml import etree

from ...builder import ImageBuilder, ScreenshotBuilder, VideoBuilder
from ...exceptions import InvalidValueError
from ...models import (
    CachedIcon,
    Icon,
    Image,
    ImageKind,
    LocalIcon,
    RemoteIcon,
    Screenshot,
    StockIcon,
    Video,
)
from .locale_aggregator import LocaleAggregator
from .primitives import (
    child_elements,
    optional_int_attr,
    parse_url,
    required_text,
    tag_name,
)
from .vocabulary import strict

logger = logging.getLogger(__name__)


class IconConverter:
    """
    ``<icon type="…" width="64" height="64">…</icon>``

    A missing ``type`` means ``local``; an unrecognised one is read as a
    local path as well.
    """

    @staticmethod
    def convert(element: etree._Element) -> Icon:
        icon_type = element.get("type", "local")
        value = required_text(element)

        if icon_type == "stock":
            return StockIcon(name=value)

        dims = {
            "width": optional_int_attr(element, "width"),
            "height": optional_int_attr(element, "height"),
            "scale": optional_int_attr(element, "scale"),
        }
        if dims["scale"] == 0:
            raise InvalidValueError(element.get("scale"), "scale", "icon")
        if icon_type == "cached":
            return CachedIcon(path=value, **dims)
        if icon_type == "remote":
            return RemoteIcon(url=parse_url(value), **dims)
        if icon_type != "local":
            logger.debug("Unknown icon type %r, reading it as local", icon_type)
        return LocalIcon(path=value, **dims)


class ImageConverter:
    """``<image type="thumbnail" width="…" height="…">url</image>``"""

    @staticmethod
    def convert(element: etree._Element) -> Image:
        kind = strict(ImageKind, element.get("type", "source"), "type", "image")
        builder = ImageBuilder(parse_url(required_text(element))).with_kind(kind)

        width = optional_int_attr(element, "width")
        if width is not None:
            builder.with_width(width)
        height = optional_int_attr(element, "height")
        if height is not None:
            builder.with_height(height)
        return builder.build()


class VideoConverter:
    @staticmethod
    def convert(element: etree._Element) -> Video:
        builder = VideoBuilder(parse_url(required_text(element)))

        width = optional_int_attr(element, "width")
        if width is not None:
            builder.with_width(width)
        height = optional_int_attr(element, "height")
        if height is not None:
            builder.with_height(height)
        if element.get("codec"):
            builder.with_codec(element.get("codec"))
        if element.get("container"):
            builder.with_container(element.get("container"))
        return builder.build()


class ScreenshotConverter:
    """
    ``<screenshot type="default">`` with ``<caption>``, ``<image>`` and
    ``<video>`` children. Only ``type="default"`` marks the default shot.
    """

    @staticmethod
    def convert(element: etree._Element) -> Screenshot:
        builder = ScreenshotBuilder().with_default(element.get("type") == "default")

        caption = LocaleAggregator()
        for child in child_elements(element):
            match tag_name(child):
                case "caption":
                    caption.add(child)
                case "image":
                    builder.add_image(ImageConverter.convert(child))
                case "video":
                    builder.add_video(VideoConverter.convert(child))
                case _:
                    logger.debug("Skipping <%s> inside <screenshot>", tag_name(child))

        text = caption.translatable()
        if text is not None:
            builder.with_caption(text)
        return builder.build()

    @staticmethod
    def convert_children(element: etree._Element) -> List[Screenshot]:
        """``<screenshots>`` → list of screenshots in document order."""
        return [
            ScreenshotConverter.convert(child)
            for child in child_elements(element, "screenshot")
        ]
