"""Converter for the items of ``<requires>``, ``<recommends>`` and ``<supports>``."""

from __future__ import annotations

import logging
from typing import List

from lxml import etree

from ...exceptions import InvalidValueError
from ...models import (
    AppId,
    Compare,
    Control,
    ControlRequirement,
    DisplayLengthRequirement,
    DisplayLengthSize,
    IdRequirement,
    OtherRequirement,
    Requirement,
    Side,
)
from .primitives import child_elements, required_text, tag_name
from .vocabulary import strict

logger = logging.getLogger(__name__)


class RequirementConverter:
    """
    Stateless converter for one relation item.

    ``display_length``, ``control`` and ``id`` are modelled; any other tag
    (``memory``, ``modalias``, ``kernel`` …) becomes an ``OtherRequirement``.
    """

    @staticmethod
    def convert(element: etree._Element) -> Requirement:
        tag = tag_name(element)
        match tag:
            case "display_length":
                return RequirementConverter._display_length(element)
            case "control":
                control = strict(Control, required_text(element), "$value", "control")
                return ControlRequirement(control=control)
            case "id":
                return RequirementConverter._id(element)
            case _:
                logger.debug("Requirement <%s> kept as 'other'", tag)
                return OtherRequirement(tag=tag)

    @staticmethod
    def convert_children(element: etree._Element) -> List[Requirement]:
        return [
            RequirementConverter.convert(child) for child in child_elements(element)
        ]

    # ------------------------------------------------------------------ #
    # Private conversion methods
    # ------------------------------------------------------------------ #

    @staticmethod
    def _display_length(element: etree._Element) -> DisplayLengthRequirement:
        compare = strict(
            Compare, element.get("compare", "ge"), "compare", "display_length"
        )
        side = strict(Side, element.get("side", "shortest"), "side", "display_length")
        value = required_text(element)

        try:
            size = DisplayLengthSize(value)
        except ValueError:
            size = None
        if size is not None:
            return DisplayLengthRequirement(compare=compare, side=side, size=size)

        if not (value.isascii() and value.isdigit()):
            raise InvalidValueError(value, "$value", "display_length")
        return DisplayLengthRequirement(compare=compare, side=side, pixels=int(value))

    @staticmethod
    def _id(element: etree._Element) -> IdRequirement:
        compare = None
        if element.get("compare") is not None:
            compare = strict(Compare, element.get("compare"), "compare", "id")
        return IdRequirement(
            id=AppId(required_text(element)),
            version=element.get("version"),
            compare=compare,
        )
