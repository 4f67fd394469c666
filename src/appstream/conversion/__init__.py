"""
Conversion package

Transforms a parsed AppStream element tree into the typed model without
performing any I/O.

Public helpers
--------------
convert_component(element) -> Component
convert_collection(element, partial=False) -> Collection
    Convenience wrappers that instantiate the matching converter.
"""

from __future__ import annotations

from lxml import etree

from ..models import Collection, Component
from .collection_converter import CollectionConverter
from .component_converter import ComponentConverter

__all__ = [
    "CollectionConverter",
    "ComponentConverter",
    "convert_collection",
    "convert_component",
]


def convert_component(element: etree._Element) -> Component:
    """High-level helper used by the conversion pipeline."""
    return ComponentConverter(element).convert()


def convert_collection(
    element: etree._Element, *, partial: bool = False
) -> Collection:
    """
    Convert a ``<components>`` root.

    With ``partial=True`` failing components are collected instead of
    aborting; see ``CollectionConverter.convert_partial``.
    """
    converter = CollectionConverter(element)
    return converter.convert_partial() if partial else converter.convert()
