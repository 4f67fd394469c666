"""
Variant dispatch for closed vocabularies.

Two policies exist and are chosen per tag by the calling converter:

* ``strict``      – an unknown value is an ``InvalidValueError``.
* ``permissive``  – an unknown value maps to the vocabulary's ``UNKNOWN``
  member and the original spelling is handed back to be stored.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Final, Optional, Tuple, Type, TypeVar

from ...exceptions import InvalidValueError
from ...models.enums import ComponentKind

E = TypeVar("E", bound=Enum)

COMPONENT_KIND_ALIASES: Final[Dict[str, ComponentKind]] = {
    "desktop": ComponentKind.DESKTOP_APPLICATION,
    "desktop-app": ComponentKind.DESKTOP_APPLICATION,
    "console": ComponentKind.CONSOLE_APPLICATION,
    "webapp": ComponentKind.WEB_APPLICATION,
    "input-method": ComponentKind.INPUT_METHOD,
    "os": ComponentKind.OS,
}


def strict(vocabulary: Type[E], value: str, attr: str, tag: str) -> E:
    """Return the member spelled ``value`` or raise ``InvalidValueError``."""
    try:
        return vocabulary(value)
    except ValueError:
        raise InvalidValueError(value, attr, tag) from None


def permissive(vocabulary: Type[E], value: str) -> Tuple[E, Optional[str]]:
    """
    Return ``(member, None)`` for a known ``value``, ``(UNKNOWN, value)``
    otherwise.
    """
    try:
        return vocabulary(value), None
    except ValueError:
        return vocabulary["UNKNOWN"], value


def component_kind(value: str) -> ComponentKind:
    """``<component type=…>`` including the legacy short spellings."""
    alias = COMPONENT_KIND_ALIASES.get(value)
    if alias is not None:
        return alias
    return strict(ComponentKind, value, "type", "component")
