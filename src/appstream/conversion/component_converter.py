"""Converts a ``<component>`` element to a Component"""

from __future__ import annotations

from ..builder import ComponentBuilder
from ..exceptions import MissingTagError
from ..models import Component, ContentRating
from .base_converter import BaseConverter
from .helpers.content_rating_converter import ContentRatingConverter
from .helpers.locale_aggregator import LocaleAggregator, LocaleListAggregator
from .helpers.media_converter import IconConverter, ScreenshotConverter
from .helpers.primitives import child_elements, required_text, tag_name
from .helpers.release_converter import ReleaseConverter
from .helpers.requirement_converter import RequirementConverter
from .helpers.variant_converter import (
    AppIdConverter,
    BundleConverter,
    CategoryConverter,
    KudoConverter,
    LanguageConverter,
    LaunchableConverter,
    LicenseConverter,
    MetadataConverter,
    ProjectUrlConverter,
    ProvideConverter,
    TranslationConverter,
)
from .helpers.vocabulary import component_kind


class ComponentConverter(BaseConverter):
    """
    Converts one ``<component>`` into a Component.

    The children are walked once, in document order. Locale-bearing text
    (name, summary, developer name, description, keywords) is folded by the
    locale aggregators; everything else goes to the matching entity
    converter. Unknown children are skipped. The first failure of any child
    propagates unchanged.
    """

    root_tag = "component"

    def convert(self) -> Component:
        """
        Convert the wrapped element.

        Returns:
            Component: validated, frozen component

        Raises:
            MissingTagError: If ``<id>`` is absent
            MissingFieldError: If no ``<name>`` was found
            ParseError: Any failure raised by a child converter
        """
        builder = ComponentBuilder()
        if self.element.get("type") is not None:
            builder.with_kind(component_kind(self.element.get("type")))

        id_element = next(child_elements(self.element, "id"), None)
        if id_element is None:
            raise MissingTagError("id")
        app_id = AppIdConverter.convert(id_element)
        builder.with_id(app_id)

        name = LocaleAggregator()
        summary = LocaleAggregator()
        developer_name = LocaleAggregator()
        description = LocaleAggregator(markup=True)
        keywords = LocaleListAggregator()
        content_rating: ContentRating | None = None

        for child in child_elements(self.element):
            match tag_name(child):
                case "id":
                    continue
                case "name":
                    name.add(child)
                case "summary":
                    summary.add(child)
                case "description":
                    description.add(child)
                case "developer_name":
                    developer_name.add(child)
                case "developer":
                    developer_name.add_all(child, "name")
                case "keywords":
                    keywords.add_all(child, "keyword")
                case "project_license":
                    builder.with_project_license(LicenseConverter.convert(child))
                case "metadata_license":
                    builder.with_metadata_license(LicenseConverter.convert(child))
                case "project_group":
                    builder.with_project_group(required_text(child))
                case "compulsory_for_desktop":
                    builder.with_compulsory_for_desktop(required_text(child))
                case "update_contact":
                    builder.with_update_contact(required_text(child))
                case "pkgname":
                    builder.with_pkgname(required_text(child))
                case "source_pkgname":
                    builder.with_source_pkgname(required_text(child))
                case "extends":
                    for extended in AppIdConverter.convert_children(child):
                        builder.add_extends(extended)
                case "suggests":
                    for suggested in AppIdConverter.convert_children(child):
                        builder.add_suggestion(suggested)
                case "icon":
                    builder.add_icon(IconConverter.convert(child))
                case "screenshots":
                    for screenshot in ScreenshotConverter.convert_children(child):
                        builder.add_screenshot(screenshot)
                case "url":
                    builder.add_url(ProjectUrlConverter.convert(child))
                case "categories":
                    for category in child_elements(child, "category"):
                        builder.add_category(CategoryConverter.convert(category))
                case "launchable":
                    builder.add_launchable(LaunchableConverter.convert(child))
                case "bundle":
                    builder.add_bundle(BundleConverter.convert(child))
                case "releases":
                    for release in ReleaseConverter.convert_children(child):
                        builder.add_release(release)
                case "languages":
                    for lang in child_elements(child, "lang"):
                        builder.add_language(LanguageConverter.convert(lang))
                case "mimetypes":
                    for mimetype in child_elements(child, "mimetype"):
                        builder.add_mimetype(required_text(mimetype))
                case "kudos":
                    for kudo in child_elements(child, "kudo"):
                        builder.add_kudo(KudoConverter.convert(kudo))
                case "provides":
                    for provide in ProvideConverter.convert_children(child):
                        builder.add_provide(provide)
                case "translation":
                    builder.add_translation(TranslationConverter.convert(child))
                case "content_rating":
                    content_rating = ContentRatingConverter.newest(
                        content_rating, ContentRatingConverter.convert(child)
                    )
                case "custom" | "metadata":
                    for key, value in MetadataConverter.convert(child).items():
                        builder.add_metadata(key, value)
                case "requires":
                    for requirement in RequirementConverter.convert_children(child):
                        builder.add_requirement(requirement)
                case "recommends":
                    for requirement in RequirementConverter.convert_children(child):
                        builder.add_recommendation(requirement)
                case "supports":
                    for requirement in RequirementConverter.convert_children(child):
                        builder.add_support(requirement)
                case other:
                    self._log_skipped(other)

        if content_rating is not None:
            builder.with_content_rating(content_rating)
        self._finish_locale_fields(
            builder, name, summary, developer_name, description, keywords
        )

        component = builder.build()
        self._log_conversion("component", str(app_id))
        return component

    # ------------------------------------------------------------------ #
    # Private conversion methods
    # ------------------------------------------------------------------ #

    @staticmethod
    def _finish_locale_fields(
        builder: ComponentBuilder,
        name: LocaleAggregator,
        summary: LocaleAggregator,
        developer_name: LocaleAggregator,
        description: LocaleAggregator,
        keywords: LocaleListAggregator,
    ) -> None:
        """Set the aggregated text fields that received at least one value."""
        if (value := name.translatable()) is not None:
            builder.with_name(value)
        if (value := summary.translatable()) is not None:
            builder.with_summary(value)
        if (value := developer_name.translatable()) is not None:
            builder.with_developer_name(value)
        if (markup := description.markup_translatable()) is not None:
            builder.with_description(markup)
        if (words := keywords.translatable()) is not None:
            builder.with_keywords(words)
