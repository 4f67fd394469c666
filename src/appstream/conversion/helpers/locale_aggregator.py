"""
Accumulators that fold repeated, per-locale sibling elements into one
locale-keyed value.

    <name>Contrast</name>
    <name xml:lang="de">Kontrast</name>
    -> {"default": "Contrast", "de": "Kontrast"}
"""

from __future__ import annotations

from typing import Dict, List, Optional

from lxml import etree

from ...models.translatable import (
    DEFAULT_LOCALE,
    MarkupTranslatableString,
    TranslatableList,
    TranslatableString,
)
from .primitives import child_elements, inner_markup, locale_of, required_text


class LocaleAggregator:
    """
    Collect one string per locale.

    With ``markup=True`` each element contributes its inner markup instead
    of its flattened text. A later element for the same locale replaces an
    earlier one.
    """

    def __init__(self, markup: bool = False) -> None:
        self.markup = markup
        self._values: Dict[str, str] = {}

    def add(self, element: etree._Element) -> None:
        locale = locale_of(element) or DEFAULT_LOCALE
        if self.markup:
            self._values[locale] = inner_markup(element)
        else:
            self._values[locale] = required_text(element)

    def add_all(self, parent: etree._Element, tag: str) -> "LocaleAggregator":
        for child in child_elements(parent, tag):
            self.add(child)
        return self

    def __len__(self) -> int:
        return len(self._values)

    def translatable(self) -> Optional[TranslatableString]:
        """``None`` when nothing was collected."""
        if not self._values:
            return None
        return TranslatableString(dict(self._values))

    def markup_translatable(self) -> Optional[MarkupTranslatableString]:
        if not self._values:
            return None
        return MarkupTranslatableString(dict(self._values))


class LocaleListAggregator:
    """Collect an ordered list of strings per locale (``<keyword>``)."""

    def __init__(self) -> None:
        self._values: Dict[str, List[str]] = {}

    def add(self, element: etree._Element) -> None:
        locale = locale_of(element) or DEFAULT_LOCALE
        self._values.setdefault(locale, []).append(required_text(element))

    def add_all(self, parent: etree._Element, tag: str) -> "LocaleListAggregator":
        for child in child_elements(parent, tag):
            self.add(child)
        return self

    def translatable(self) -> Optional[TranslatableList]:
        if not self._values:
            return None
        return TranslatableList({k: list(v) for k, v in self._values.items()})
