"""Converters for releases and everything nested under them."""

from __future__ import annotations

import logging
from typing import List

from lxml import etree

from ...builder import ArtifactBuilder, IssueBuilder, ReleaseBuilder
from ...exceptions import InvalidValueError, MissingTagError
from ...models import (
    Artifact,
    ArtifactKind,
    Issue,
    IssueKind,
    Release,
    ReleaseKind,
    ReleaseUrgency,
)
from .locale_aggregator import LocaleAggregator
from .primitives import (
    child_elements,
    parse_date,
    parse_url,
    required_attr,
    required_text,
    tag_name,
)
from .variant_converter import BundleConverter, ChecksumConverter, SizeConverter
from .vocabulary import strict

logger = logging.getLogger(__name__)


class IssueConverter:
    """``<issue type="cve" url="…">CVE-2024-0001</issue>``"""

    @staticmethod
    def convert(element: etree._Element) -> Issue:
        builder = IssueBuilder().with_identifier(required_text(element))
        builder.with_kind(
            strict(IssueKind, element.get("type", "generic"), "type", "issue")
        )
        if element.get("url") is not None:
            builder.with_url(parse_url(element.get("url")))
        return builder.build()


class ArtifactConverter:
    """
    ``<artifact type="binary" platform="…">`` with a mandatory
    ``<location>`` and optional ``<filename>``, ``<size>``, ``<checksum>``
    and ``<bundle>`` children.
    """

    @staticmethod
    def convert(element: etree._Element) -> Artifact:
        builder = ArtifactBuilder().with_kind(
            strict(ArtifactKind, required_attr(element, "type"), "type", "artifact")
        )
        if element.get("platform") is not None:
            builder.with_platform(element.get("platform"))

        has_location = False
        for child in child_elements(element):
            match tag_name(child):
                case "location":
                    builder.with_url(parse_url(required_text(child)))
                    has_location = True
                case "filename":
                    builder.with_filename(required_text(child))
                case "size":
                    builder.add_size(SizeConverter.convert(child))
                case "checksum":
                    builder.add_checksum(ChecksumConverter.convert(child))
                case "bundle":
                    builder.add_bundle(BundleConverter.convert(child))
                case other:
                    logger.debug("Skipping <%s> inside <artifact>", other)

        if not has_location:
            raise MissingTagError("location")
        return builder.build()


class ReleaseConverter:
    """
    ``<release version="…" date="…" date_eol="…" type="…" urgency="…">``

    ``timestamp`` is read as an alias of ``date`` when ``date`` is absent.
    Both accept a Unix timestamp or an ISO date (see ``parse_date``).
    """

    @staticmethod
    def convert(element: etree._Element) -> Release:
        version = required_attr(element, "version")
        if not version:
            raise InvalidValueError(version, "version", "release")
        builder = ReleaseBuilder(version)

        if element.get("date") is not None:
            builder.with_date(parse_date(element.get("date"), "date", "release"))
        elif element.get("timestamp") is not None:
            builder.with_date(
                parse_date(element.get("timestamp"), "timestamp", "release")
            )
        if element.get("date_eol") is not None:
            builder.with_date_eol(
                parse_date(element.get("date_eol"), "date_eol", "release")
            )
        builder.with_kind(
            strict(ReleaseKind, element.get("type", "stable"), "type", "release")
        )
        builder.with_urgency(
            strict(
                ReleaseUrgency, element.get("urgency", "medium"), "urgency", "release"
            )
        )

        description = LocaleAggregator(markup=True)
        for child in child_elements(element):
            match tag_name(child):
                case "description":
                    description.add(child)
                case "url":
                    builder.with_url(parse_url(required_text(child)))
                case "size":
                    builder.add_size(SizeConverter.convert(child))
                case "artifacts":
                    for artifact in child_elements(child, "artifact"):
                        builder.add_artifact(ArtifactConverter.convert(artifact))
                case "issues":
                    for issue in child_elements(child, "issue"):
                        builder.add_issue(IssueConverter.convert(issue))
                case other:
                    logger.debug("Skipping <%s> inside <release>", other)

        markup = description.markup_translatable()
        if markup is not None:
            builder.with_description(markup)
        return builder.build()

    @staticmethod
    def convert_children(element: etree._Element) -> List[Release]:
        """``<releases>`` → releases in document order."""
        return [
            ReleaseConverter.convert(child)
            for child in child_elements(element, "release")
        ]
