"""
exceptions.py

Custom, typed exception hierarchy used across the XML → model conversion
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from lxml import etree

if TYPE_CHECKING:
    from .models import Collection

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class AppStreamError(Exception):
    """
    Root of all errors raised by this project.
    """


class ParseError(AppStreamError):
    """
    Base of the closed parse-error taxonomy.

    Every conversion routine either returns a value or raises one of the
    subclasses below. ``kind`` names the taxonomy member.
    """

    kind: str = "Other"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# --------------------------------------------------------------------------- #
#                     Structural / pass-through failures                      #
# --------------------------------------------------------------------------- #


class XmlParserError(ParseError):
    """The upstream XML parser rejected the byte stream."""

    kind = "XmlParserError"

    def __init__(self, reason: str) -> None:
        super().__init__(f"XML parser error: {reason}")
        self.reason = reason


class UrlParseError(ParseError):
    """A URL value could not be parsed."""

    kind = "UrlParseError"

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"URL parser error: {reason} ({value!r})")
        self.value = value
        self.reason = reason


class InputOutputError(ParseError):
    """Reading or decompressing the source failed."""

    kind = "IOError"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Input/output error: {reason}")
        self.reason = reason


class DateTimeParseError(ParseError):
    """A date-like attribute is neither a timestamp nor an ISO date."""

    kind = "DateTimeParseError"

    def __init__(self, value: str, attr: str, tag: str) -> None:
        super().__init__(
            f"Cannot parse date {value!r} of attribute {attr} for tag {tag}"
        )
        self.value = value
        self.attr = attr
        self.tag = tag


# --------------------------------------------------------------------------- #
#                        Schema and value failures                            #
# --------------------------------------------------------------------------- #


class InvalidTagError(ParseError):
    """The tag is not allowed where it appears."""

    kind = "InvalidTag"

    def __init__(self, tag: str) -> None:
        super().__init__(f"Invalid tag: {tag}")
        self.tag = tag


class MissingTagError(ParseError):
    """A required child tag is missing."""

    kind = "MissingTag"

    def __init__(self, tag: str) -> None:
        super().__init__(f"A required tag is missing: {tag}")
        self.tag = tag


class MissingAttributeError(ParseError):
    """A required attribute is missing."""

    kind = "MissingAttribute"

    def __init__(self, attr: str, tag: str) -> None:
        super().__init__(f"Missing attribute {attr} required by tag {tag}")
        self.attr = attr
        self.tag = tag


class MissingValueError(ParseError):
    """A tag that needs text content has none."""

    kind = "MissingValue"

    def __init__(self, tag: str) -> None:
        super().__init__(f"The tag {tag} doesn't have a value")
        self.tag = tag


class InvalidValueError(ParseError):
    """A present value does not belong to the vocabulary of its tag."""

    kind = "InvalidValue"

    def __init__(self, value: str, attr: str, tag: str) -> None:
        super().__init__(
            f"Invalid value {value} passed to attribute {attr} for tag {tag}"
        )
        self.value = value
        self.attr = attr
        self.tag = tag


class OtherParseError(ParseError):
    """Escape hatch for failures that need a free-form reason."""

    kind = "Other"

    def __init__(self, tag: str, reason: str) -> None:
        super().__init__(f"Error parsing {tag}: {reason}")
        self.tag = tag
        self.reason = reason


class MissingFieldError(ParseError):
    """A builder was finalised without one of its mandatory fields."""

    kind = "MissingField"

    def __init__(self, field: str, entity: str = "component") -> None:
        super().__init__(f"A '{field}' is required to build a {entity}")
        self.field = field
        self.entity = entity


# --------------------------------------------------------------------------- #
#                           Contextual wrappers                               #
# --------------------------------------------------------------------------- #

SHORT_CONTEXT_LIMIT = 200
VERBOSE_CONTEXT_LIMIT = 4000


class ContextParseError(AppStreamError):
    """
    A ``ParseError`` paired with the subtree it occurred in.

    The subtree is serialised at construction time, so the error never keeps
    a reference into the source document.
    """

    def __init__(
        self, error: ParseError, context: etree._Element | None = None
    ) -> None:
        self.error = error
        self.context: str | None = None
        if context is not None:
            self.context = etree.tostring(
                context, encoding="unicode", pretty_print=True, with_tail=False
            ).rstrip("\n")
        super().__init__(self.render())

    def render(self, verbose: bool = False) -> str:
        """Error message followed by a bounded rendering of the context."""
        if self.context is None:
            return str(self.error)
        limit = VERBOSE_CONTEXT_LIMIT if verbose else SHORT_CONTEXT_LIMIT
        snippet = self.context
        if len(snippet) > limit:
            snippet = f"{snippet[:limit]} …"
        if verbose:
            return f"{self.error}\n{snippet}"
        return f"{self.error}\n | " + snippet.replace("\n", "\n | ")

    def __repr__(self) -> str:
        return (
            f"ContextParseError(error={self.error!r}, "
            f"context={self.render(verbose=True)!r})"
        )


class CollectionParseError(AppStreamError):
    """
    Raised when a collection could only be converted partially.

    ``partial_collection`` holds every component that converted cleanly, or
    ``None`` when the collection itself was malformed.
    """

    def __init__(
        self,
        errors: list[ContextParseError],
        partial_collection: Collection | None = None,
    ) -> None:
        self.errors = errors
        self.partial_collection = partial_collection
        first = str(errors[0].error) if errors else "unknown error"
        super().__init__(
            f"{len(errors)} error(s) while parsing the collection; first: {first}"
        )

    @classmethod
    def from_parse_error(cls, error: ParseError) -> CollectionParseError:
        return cls([ContextParseError(error)], None)

    @property
    def first_error(self) -> ParseError:
        return self.errors[0].error


def split_collection_result(
    convert: Callable[[], Collection],
) -> tuple[Collection | None, list[ContextParseError]]:
    """
    Run ``convert()`` and return ``(collection, errors)`` instead of raising
    ``CollectionParseError``.
    """
    try:
        return convert(), []
    except CollectionParseError as err:
        return err.partial_collection, err.errors
