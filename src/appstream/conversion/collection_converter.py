"""Converts a ``<components>`` document to a Collection"""

from __future__ import annotations

from lxml import etree

from ..builder import CollectionBuilder
from ..exceptions import CollectionParseError, ContextParseError, ParseError
from ..models import Collection
from .base_converter import BaseConverter
from .component_converter import ComponentConverter
from .helpers.primitives import child_elements, required_attr, tag_name


class CollectionConverter(BaseConverter):
    """
    Converts the ``<components version=… origin=… architecture=…>`` root.

    Two modes are offered:

    * ``convert()`` stops at the first component that fails and raises
      that component's ``ParseError`` unchanged; nothing partial is kept.
    * ``convert_partial()`` attempts every component and, when some fail,
      raises ``CollectionParseError`` carrying the collection of the
      components that did convert plus one ``ContextParseError`` per
      failure.
    """

    root_tag = "components"

    def convert(self) -> Collection:
        builder = self._collection_builder()
        for child in self._component_elements():
            builder.add_component(ComponentConverter(child).convert())

        collection = builder.build()
        self.logger.debug(
            "Collection conversion completed: %d components", len(collection)
        )
        return collection

    def convert_partial(self) -> Collection:
        """
        Convert every component that can be converted.

        Raises:
            CollectionParseError: If the root itself is invalid (no partial
                collection) or if at least one component failed
        """
        try:
            builder = self._collection_builder()
        except ParseError as err:
            raise CollectionParseError.from_parse_error(err) from err

        errors: list[ContextParseError] = []
        for child in self._component_elements():
            try:
                builder.add_component(ComponentConverter(child).convert())
            except ParseError as err:
                self._log_conversion("component", self._describe(child), success=False)
                errors.append(ContextParseError(err, child))

        collection = builder.build()
        if errors:
            raise CollectionParseError(errors, collection)
        return collection

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _collection_builder(self) -> CollectionBuilder:
        builder = CollectionBuilder(required_attr(self.element, "version"))
        origin = self.element.get("origin")
        if origin:
            builder.with_origin(origin)
        architecture = self.element.get("architecture")
        if architecture is not None:
            builder.with_architecture(architecture)
        return builder

    def _component_elements(self):
        for child in child_elements(self.element):
            if tag_name(child) == "component":
                yield child
            else:
                self._log_skipped(tag_name(child))

    @staticmethod
    def _describe(element: etree._Element) -> str:
        """Component id for log messages, falling back to the source line."""
        app_id = (element.findtext("id") or "").strip()
        return app_id or f"line {element.sourceline}"
