"""Small, pure helpers reused by every converter."""

from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Iterator, Optional

from lxml import etree
from pydantic import AnyUrl, TypeAdapter, ValidationError

from ...exceptions import (
    DateTimeParseError,
    InvalidValueError,
    MissingAttributeError,
    MissingValueError,
    UrlParseError,
)

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def tag_name(element: etree._Element) -> str:
    """Local name of ``element`` (namespace stripped)."""
    return etree.QName(element).localname


def child_elements(
    element: etree._Element, tag: Optional[str] = None
) -> Iterator[etree._Element]:
    """
    Yield the element children of ``element``, optionally only ``tag``.

    Comments and processing instructions are skipped.
    """
    for child in element:
        if not isinstance(child.tag, str):
            continue
        if tag is None or tag_name(child) == tag:
            yield child


def element_text(element: etree._Element) -> Optional[str]:
    """
    Direct text content of ``element`` with surrounding whitespace removed.

    Text of nested elements is not included; ``None`` when nothing is left.
    """
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    text = "".join(parts).strip()
    return text or None


def required_text(element: etree._Element) -> str:
    text = element_text(element)
    if text is None:
        raise MissingValueError(tag_name(element))
    return text


def required_attr(element: etree._Element, attr: str) -> str:
    value = element.get(attr)
    if value is None:
        raise MissingAttributeError(attr, tag_name(element))
    return value


def locale_of(element: etree._Element) -> Optional[str]:
    """``xml:lang`` of ``element``; a plain ``lang`` attribute is accepted too."""
    return element.get(XML_LANG) or element.get("lang")


def parse_url(value: str) -> AnyUrl:
    try:
        return _url_adapter.validate_python(value)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise UrlParseError(value, reason) from exc


def parse_int(value: str, attr: str, tag: str) -> int:
    try:
        number = int(value.strip())
    except ValueError:
        raise InvalidValueError(value, attr, tag) from None
    if number < 0:
        raise InvalidValueError(value, attr, tag)
    return number


def optional_int_attr(element: etree._Element, attr: str) -> Optional[int]:
    value = element.get(attr)
    if value is None:
        return None
    return parse_int(value, attr, tag_name(element))


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def _from_timestamp(value: str) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def _from_calendar_date(value: str) -> Optional[datetime]:
    try:
        day = datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None
    return day.replace(tzinfo=timezone.utc)


def _from_iso_datetime(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


_DATE_PARSERS = (_from_timestamp, _from_calendar_date, _from_iso_datetime)


def parse_date(value: str, attr: str, tag: str) -> datetime:
    """
    Resolve a release date: Unix timestamp first, then ``YYYY-MM-DD`` at
    midnight UTC, then a full ISO-8601 date-time. Always returns UTC.
    """
    raw = value.strip()
    for parser in _DATE_PARSERS:
        parsed = parser(raw)
        if parsed is not None:
            return parsed
    raise DateTimeParseError(value, attr, tag)


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------


def inner_markup(element: etree._Element) -> str:
    """
    Inner content of ``element`` with nested elements kept as markup.

    Attributes are dropped, text is escaped and whitespace-only runs
    between elements are left out::

        <description><p>One</p><ul><li>Two</li></ul></description>
        -> "<p>One</p><ul><li>Two</li></ul>"
    """
    parts: list[str] = []
    if element.text and element.text.strip():
        parts.append(html.escape(element.text, quote=False))
    for child in element:
        if isinstance(child.tag, str):
            name = tag_name(child)
            parts.append(f"<{name}>{inner_markup(child)}</{name}>")
        if child.tail and child.tail.strip():
            parts.append(html.escape(child.tail, quote=False))
    return "".join(parts)
