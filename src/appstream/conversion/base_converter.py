"""Abstract base class for the element-tree converters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from lxml import etree

from ..exceptions import InvalidTagError
from .helpers.primitives import tag_name


class BaseConverter(ABC):
    """
    Abstract base class for converting one element of an AppStream document.

    Concrete converters wrap a single root element (``<component>`` or
    ``<components>``) and turn it into a model object. The element is only
    read; every value handed to the model is an owned copy.
    """

    #: Tag the wrapped element must carry.
    root_tag: str = ""

    def __init__(self, element: etree._Element) -> None:
        """
        Initialize converter with the root element.

        Args:
            element: Parsed element whose tag must equal ``root_tag``

        Raises:
            InvalidTagError: If the element has a different tag
        """
        if tag_name(element) != self.root_tag:
            raise InvalidTagError(tag_name(element))
        self.element = element
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def convert(self) -> Any:
        """Convert the wrapped element (raises ``ParseError`` on failure)."""

    # --------------------------------------------------------------------- #
    # Shared utility methods for all converters
    # --------------------------------------------------------------------- #

    def _log_skipped(self, tag: str) -> None:
        self.logger.debug("Skipping unknown <%s> in <%s>", tag, self.root_tag)

    def _log_conversion(self, item_type: str, item_id: str, success: bool = True) -> None:
        """
        Log conversion progress for debugging and monitoring.

        Args:
            item_type: Type of item being converted (e.g., "component")
            item_id: Identifier of the item
            success: Whether conversion was successful
        """
        if success:
            self.logger.debug("Converted %s: %s", item_type, item_id)
        else:
            self.logger.warning("Failed to convert %s: %s", item_type, item_id)
