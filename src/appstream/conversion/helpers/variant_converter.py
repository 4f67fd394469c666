"""Converters for the small tagged values attached to a component."""

from __future__ import annotations

from typing import List

from lxml import etree

from ...exceptions import InvalidTagError, InvalidValueError, MissingAttributeError
from ...models import (
    AppId,
    Bundle,
    BundleKind,
    Category,
    CategoryKind,
    Checksum,
    ChecksumKind,
    FirmwareKind,
    Kudo,
    KudoKind,
    Language,
    Launchable,
    LaunchableKind,
    License,
    ProjectUrl,
    ProjectUrlKind,
    Provide,
    ProvideKind,
    Size,
    SizeKind,
    Translation,
    TranslationKind,
)
from .primitives import (
    child_elements,
    element_text,
    optional_int_attr,
    parse_int,
    parse_url,
    required_attr,
    required_text,
    tag_name,
)
from .vocabulary import permissive, strict


class AppIdConverter:
    @staticmethod
    def convert(element: etree._Element) -> AppId:
        return AppId(required_text(element))

    @staticmethod
    def convert_children(element: etree._Element) -> List[AppId]:
        """``<extends>``/``<suggests>``: one ``<id>`` per child."""
        return [AppIdConverter.convert(child) for child in child_elements(element, "id")]


class LicenseConverter:
    @staticmethod
    def convert(element: etree._Element) -> License:
        return License(required_text(element))


class ProjectUrlConverter:
    """``<url type="homepage">https://…</url>``; ``type`` is mandatory."""

    @staticmethod
    def convert(element: etree._Element) -> ProjectUrl:
        raw = required_attr(element, "type")
        kind, unknown = permissive(ProjectUrlKind, raw)
        return ProjectUrl(
            kind=kind, url=parse_url(required_text(element)), raw_type=unknown
        )


class LaunchableConverter:
    @staticmethod
    def convert(element: etree._Element) -> Launchable:
        raw = required_attr(element, "type")
        kind, unknown = permissive(LaunchableKind, raw)
        value = required_text(element)
        if kind is LaunchableKind.URL:
            value = str(parse_url(value))
        return Launchable(kind=kind, value=value, raw_type=unknown)


class BundleConverter:
    """
    ``<bundle type="flatpak" sdk="…" runtime="…">app/org.x/x86_64/stable</bundle>``

    ``type`` is mandatory and strict; flatpak bundles also need ``sdk``.
    """

    @staticmethod
    def convert(element: etree._Element) -> Bundle:
        kind = strict(BundleKind, required_attr(element, "type"), "type", "bundle")
        reference = required_text(element)
        if kind is BundleKind.FLATPAK:
            sdk = element.get("sdk")
            if not sdk:
                raise MissingAttributeError("sdk", "bundle")
            return Bundle(
                kind=kind,
                reference=reference,
                sdk=sdk,
                runtime=element.get("runtime"),
            )
        return Bundle(kind=kind, reference=reference)


class ProvideConverter:
    """One child of ``<provides>``; the tag name selects the kind."""

    @staticmethod
    def convert(element: etree._Element) -> Provide:
        tag = tag_name(element)
        try:
            kind = ProvideKind(tag)
        except ValueError:
            raise InvalidTagError(tag) from None

        value = required_text(element)
        if kind is ProvideKind.FIRMWARE:
            firmware_kind = strict(
                FirmwareKind, required_attr(element, "type"), "type", "firmware"
            )
            return Provide(kind=kind, value=value, firmware_kind=firmware_kind)
        return Provide(kind=kind, value=value)

    @staticmethod
    def convert_children(element: etree._Element) -> List[Provide]:
        return [ProvideConverter.convert(child) for child in child_elements(element)]


class TranslationConverter:
    @staticmethod
    def convert(element: etree._Element) -> Translation:
        raw = required_attr(element, "type")
        kind, unknown = permissive(TranslationKind, raw)
        return Translation(kind=kind, domain=required_text(element), raw_type=unknown)


class CategoryConverter:
    @staticmethod
    def convert(element: etree._Element) -> Category:
        name = required_text(element)
        kind, _ = permissive(CategoryKind, name)
        return Category(kind=kind, name=name)


class KudoConverter:
    @staticmethod
    def convert(element: etree._Element) -> Kudo:
        name = required_text(element)
        kind, _ = permissive(KudoKind, name)
        return Kudo(kind=kind, name=name)


class LanguageConverter:
    """``<lang percentage="96">de</lang>``"""

    @staticmethod
    def convert(element: etree._Element) -> Language:
        percentage = optional_int_attr(element, "percentage")
        if percentage is not None and percentage > 100:
            raise InvalidValueError(element.get("percentage"), "percentage", "lang")
        return Language(locale=required_text(element), percentage=percentage)


class ChecksumConverter:
    @staticmethod
    def convert(element: etree._Element) -> Checksum:
        kind = strict(
            ChecksumKind, required_attr(element, "type"), "type", "checksum"
        )
        return Checksum(kind=kind, value=required_text(element))


class SizeConverter:
    """``<size type="download">12345</size>`` (bytes)."""

    @staticmethod
    def convert(element: etree._Element) -> Size:
        kind = strict(SizeKind, required_attr(element, "type"), "type", "size")
        value = parse_int(required_text(element), "$value", "size")
        return Size(kind=kind, value=value)


class MetadataConverter:
    """``<custom>``/``<metadata>``: ``<value key="…">text</value>`` pairs."""

    @staticmethod
    def convert(element: etree._Element) -> dict[str, str | None]:
        values: dict[str, str | None] = {}
        for child in child_elements(element, "value"):
            values[required_attr(child, "key")] = element_text(child)
        return values
