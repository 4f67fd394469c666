"""
translatable.py – locale-keyed values
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Text that may be repeated once per locale in a document (``<name>``,
``<summary>``, ``<description>``, ``<keywords>``) is stored as a mapping from
locale identifier to value. Untagged values live under ``DEFAULT_LOCALE``.
"""

from __future__ import annotations

from typing import Dict, Final, List, Optional

from pydantic import ConfigDict, RootModel

DEFAULT_LOCALE: Final[str] = "default"


class _LocaleLookup:
    """Read helpers shared by every locale-keyed root model."""

    def locales(self) -> List[str]:
        return list(self.root)

    def __getitem__(self, locale: str):
        return self.root[locale]

    def __contains__(self, locale: object) -> bool:
        return locale in self.root

    def __len__(self) -> int:
        return len(self.root)

    def __bool__(self) -> bool:
        return bool(self.root)


class TranslatableString(_LocaleLookup, RootModel[Dict[str, str]]):
    """One plain-text string per locale (``<name>``, ``<summary>`` …)."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def with_default(cls, text: str) -> TranslatableString:
        return cls({DEFAULT_LOCALE: text})

    def and_locale(self, locale: str, text: str) -> TranslatableString:
        """Return a copy with ``text`` stored for ``locale``."""
        return type(self)({**self.root, locale: text})

    def get_default(self) -> Optional[str]:
        return self.root.get(DEFAULT_LOCALE)

    def get_for_locale(self, locale: str) -> Optional[str]:
        return self.root.get(locale)


class MarkupTranslatableString(_LocaleLookup, RootModel[Dict[str, str]]):
    """
    Markup-bearing text per locale (``<description>``).

    Nested elements are kept as literal markup, e.g. ``"<p>Hello</p>"``.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def with_default(cls, markup: str) -> MarkupTranslatableString:
        return cls({DEFAULT_LOCALE: markup})

    def and_locale(self, locale: str, markup: str) -> MarkupTranslatableString:
        return type(self)({**self.root, locale: markup})

    def get_default(self) -> Optional[str]:
        return self.root.get(DEFAULT_LOCALE)

    def get_for_locale(self, locale: str) -> Optional[str]:
        return self.root.get(locale)


class TranslatableList(_LocaleLookup, RootModel[Dict[str, List[str]]]):
    """An ordered list of strings per locale (``<keywords>``)."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def with_default(cls, words: List[str]) -> TranslatableList:
        return cls({DEFAULT_LOCALE: list(words)})

    def and_locale(self, locale: str, words: List[str]) -> TranslatableList:
        return type(self)({**self.root, locale: list(words)})

    def add_for_locale(self, locale: Optional[str], word: str) -> TranslatableList:
        """Return a copy with ``word`` appended to the list of ``locale``."""
        key = locale or DEFAULT_LOCALE
        return type(self)({**self.root, key: [*self.root.get(key, []), word]})

    def get_default(self) -> Optional[List[str]]:
        return self.root.get(DEFAULT_LOCALE)

    def get_for_locale(self, locale: str) -> Optional[List[str]]:
        return self.root.get(locale)


__all__ = [
    "DEFAULT_LOCALE",
    "MarkupTranslatableString",
    "TranslatableList",
    "TranslatableString",
]
