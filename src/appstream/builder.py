"""
builder.py – fluent construction helpers for the domain model

Builders are plain mutable accumulators; ``build()`` validates and returns
the frozen model. A missing mandatory field raises ``MissingFieldError``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import AnyUrl

from .exceptions import MissingFieldError
from .models import (
    AppId,
    Artifact,
    ArtifactKind,
    Bundle,
    Category,
    Checksum,
    Collection,
    Component,
    ComponentKind,
    ContentRating,
    Icon,
    Image,
    ImageKind,
    Issue,
    IssueKind,
    Kudo,
    Language,
    Launchable,
    License,
    MarkupTranslatableString,
    ProjectUrl,
    Provide,
    Release,
    ReleaseKind,
    ReleaseUrgency,
    Requirement,
    Screenshot,
    Size,
    TranslatableList,
    TranslatableString,
    Translation,
    Video,
)

UrlLike = str | AnyUrl


def _app_id(value: AppId | str) -> AppId:
    return value if isinstance(value, AppId) else AppId(value)


def _text(value: TranslatableString | str) -> TranslatableString:
    if isinstance(value, TranslatableString):
        return value
    return TranslatableString.with_default(value)


def _markup(value: MarkupTranslatableString | str) -> MarkupTranslatableString:
    if isinstance(value, MarkupTranslatableString):
        return value
    return MarkupTranslatableString.with_default(value)


class ComponentBuilder:
    """Fluent builder for creating Component objects"""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def _append(self, field: str, value: Any) -> "ComponentBuilder":
        self._data.setdefault(field, []).append(value)
        return self

    # ----- scalar fields -----------------------------------------------------
    def with_id(self, app_id: AppId | str) -> "ComponentBuilder":
        self._data["id"] = _app_id(app_id)
        return self

    def with_kind(self, kind: ComponentKind) -> "ComponentBuilder":
        self._data["kind"] = kind
        return self

    def with_name(self, name: TranslatableString | str) -> "ComponentBuilder":
        self._data["name"] = _text(name)
        return self

    def with_summary(self, summary: TranslatableString | str) -> "ComponentBuilder":
        self._data["summary"] = _text(summary)
        return self

    def with_description(
        self, description: MarkupTranslatableString | str
    ) -> "ComponentBuilder":
        self._data["description"] = _markup(description)
        return self

    def with_developer_name(
        self, developer_name: TranslatableString | str
    ) -> "ComponentBuilder":
        self._data["developer_name"] = _text(developer_name)
        return self

    def with_keywords(self, keywords: TranslatableList) -> "ComponentBuilder":
        self._data["keywords"] = keywords
        return self

    def with_project_license(self, license_: License | str) -> "ComponentBuilder":
        self._data["project_license"] = License(str(license_))
        return self

    def with_metadata_license(self, license_: License | str) -> "ComponentBuilder":
        self._data["metadata_license"] = License(str(license_))
        return self

    def with_project_group(self, group: str) -> "ComponentBuilder":
        self._data["project_group"] = group
        return self

    def with_compulsory_for_desktop(self, desktop: str) -> "ComponentBuilder":
        self._data["compulsory_for_desktop"] = desktop
        return self

    def with_update_contact(self, contact: str) -> "ComponentBuilder":
        self._data["update_contact"] = contact
        return self

    def with_pkgname(self, pkgname: str) -> "ComponentBuilder":
        self._data["pkgname"] = pkgname
        return self

    def with_source_pkgname(self, pkgname: str) -> "ComponentBuilder":
        self._data["source_pkgname"] = pkgname
        return self

    def with_content_rating(self, rating: ContentRating) -> "ComponentBuilder":
        self._data["content_rating"] = rating
        return self

    # ----- list fields -------------------------------------------------------
    def add_extends(self, app_id: AppId | str) -> "ComponentBuilder":
        return self._append("extends", _app_id(app_id))

    def add_icon(self, icon: Icon) -> "ComponentBuilder":
        return self._append("icons", icon)

    def add_screenshot(self, screenshot: Screenshot) -> "ComponentBuilder":
        return self._append("screenshots", screenshot)

    def add_url(self, url: ProjectUrl) -> "ComponentBuilder":
        return self._append("urls", url)

    def add_category(self, category: Category) -> "ComponentBuilder":
        return self._append("categories", category)

    def add_launchable(self, launchable: Launchable) -> "ComponentBuilder":
        return self._append("launchables", launchable)

    def add_bundle(self, bundle: Bundle) -> "ComponentBuilder":
        return self._append("bundles", bundle)

    def add_release(self, release: Release) -> "ComponentBuilder":
        return self._append("releases", release)

    def add_language(self, language: Language) -> "ComponentBuilder":
        return self._append("languages", language)

    def add_mimetype(self, mimetype: str) -> "ComponentBuilder":
        return self._append("mimetypes", mimetype)

    def add_kudo(self, kudo: Kudo) -> "ComponentBuilder":
        return self._append("kudos", kudo)

    def add_provide(self, provide: Provide) -> "ComponentBuilder":
        return self._append("provides", provide)

    def add_translation(self, translation: Translation) -> "ComponentBuilder":
        return self._append("translations", translation)

    def add_suggestion(self, app_id: AppId | str) -> "ComponentBuilder":
        return self._append("suggestions", _app_id(app_id))

    def add_metadata(self, key: str, value: Optional[str] = None) -> "ComponentBuilder":
        """Adds a ``<custom>``/``<metadata>`` entry; later keys win."""
        self._data.setdefault("metadata", {})[key] = value
        return self

    def add_requirement(self, requirement: Requirement) -> "ComponentBuilder":
        return self._append("requires", requirement)

    def add_recommendation(self, requirement: Requirement) -> "ComponentBuilder":
        return self._append("recommends", requirement)

    def add_support(self, requirement: Requirement) -> "ComponentBuilder":
        return self._append("supports", requirement)

    def build(self) -> Component:
        """Builds the final Component object"""
        for field in ("id", "name"):
            if field not in self._data:
                raise MissingFieldError(field, "component")
        return Component(**self._data)


class CollectionBuilder:
    """Fluent builder for creating Collection objects"""

    def __init__(self, version: str):
        self._data: dict[str, Any] = {"version": version, "components": []}

    def with_origin(self, origin: str) -> "CollectionBuilder":
        self._data["origin"] = origin
        return self

    def with_architecture(self, architecture: str) -> "CollectionBuilder":
        self._data["architecture"] = architecture
        return self

    def add_component(self, component: Component) -> "CollectionBuilder":
        self._data["components"].append(component)
        return self

    def build(self) -> Collection:
        return Collection(**self._data)


class ReleaseBuilder:
    """Fluent builder for creating Release objects"""

    def __init__(self, version: str):
        self._data: dict[str, Any] = {"version": version}

    def with_date(self, date: datetime) -> "ReleaseBuilder":
        self._data["date"] = date
        return self

    def with_date_eol(self, date_eol: datetime) -> "ReleaseBuilder":
        self._data["date_eol"] = date_eol
        return self

    def with_description(
        self, description: MarkupTranslatableString | str
    ) -> "ReleaseBuilder":
        self._data["description"] = _markup(description)
        return self

    def with_kind(self, kind: ReleaseKind) -> "ReleaseBuilder":
        self._data["kind"] = kind
        return self

    def with_urgency(self, urgency: ReleaseUrgency) -> "ReleaseBuilder":
        self._data["urgency"] = urgency
        return self

    def with_url(self, url: UrlLike) -> "ReleaseBuilder":
        self._data["url"] = url
        return self

    def add_size(self, size: Size) -> "ReleaseBuilder":
        self._data.setdefault("sizes", []).append(size)
        return self

    def add_artifact(self, artifact: Artifact) -> "ReleaseBuilder":
        self._data.setdefault("artifacts", []).append(artifact)
        return self

    def add_issue(self, issue: Issue) -> "ReleaseBuilder":
        self._data.setdefault("issues", []).append(issue)
        return self

    def build(self) -> Release:
        return Release(**self._data)


class ArtifactBuilder:
    """Fluent builder for creating Artifact objects"""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def with_url(self, url: UrlLike) -> "ArtifactBuilder":
        self._data["url"] = url
        return self

    def with_kind(self, kind: ArtifactKind) -> "ArtifactBuilder":
        self._data["kind"] = kind
        return self

    def with_platform(self, platform: str) -> "ArtifactBuilder":
        self._data["platform"] = platform
        return self

    def with_filename(self, filename: str) -> "ArtifactBuilder":
        self._data["filename"] = filename
        return self

    def add_size(self, size: Size) -> "ArtifactBuilder":
        self._data.setdefault("sizes", []).append(size)
        return self

    def add_checksum(self, checksum: Checksum) -> "ArtifactBuilder":
        self._data.setdefault("checksums", []).append(checksum)
        return self

    def add_bundle(self, bundle: Bundle) -> "ArtifactBuilder":
        self._data.setdefault("bundles", []).append(bundle)
        return self

    def build(self) -> Artifact:
        for field in ("url", "kind"):
            if field not in self._data:
                raise MissingFieldError(field, "artifact")
        return Artifact(**self._data)


class ScreenshotBuilder:
    """Fluent builder for creating Screenshot objects (default screenshot unless told otherwise)"""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {"is_default": True}

    def with_default(self, is_default: bool) -> "ScreenshotBuilder":
        self._data["is_default"] = is_default
        return self

    def with_caption(self, caption: TranslatableString | str) -> "ScreenshotBuilder":
        self._data["caption"] = _text(caption)
        return self

    def add_image(self, image: Image) -> "ScreenshotBuilder":
        self._data.setdefault("images", []).append(image)
        return self

    def add_video(self, video: Video) -> "ScreenshotBuilder":
        self._data.setdefault("videos", []).append(video)
        return self

    def build(self) -> Screenshot:
        return Screenshot(**self._data)


class ImageBuilder:
    """Fluent builder for creating Image objects"""

    def __init__(self, url: UrlLike):
        self._data: dict[str, Any] = {"url": url}

    def with_kind(self, kind: ImageKind) -> "ImageBuilder":
        self._data["kind"] = kind
        return self

    def with_width(self, width: int) -> "ImageBuilder":
        self._data["width"] = width
        return self

    def with_height(self, height: int) -> "ImageBuilder":
        self._data["height"] = height
        return self

    def build(self) -> Image:
        return Image(**self._data)


class VideoBuilder:
    """Fluent builder for creating Video objects"""

    def __init__(self, url: UrlLike):
        self._data: dict[str, Any] = {"url": url}

    def with_width(self, width: int) -> "VideoBuilder":
        self._data["width"] = width
        return self

    def with_height(self, height: int) -> "VideoBuilder":
        self._data["height"] = height
        return self

    def with_codec(self, codec: str) -> "VideoBuilder":
        self._data["codec"] = codec
        return self

    def with_container(self, container: str) -> "VideoBuilder":
        self._data["container"] = container
        return self

    def build(self) -> Video:
        return Video(**self._data)


class LanguageBuilder:
    def __init__(self, locale: str):
        self._data: dict[str, Any] = {"locale": locale}

    def with_percentage(self, percentage: int) -> "LanguageBuilder":
        self._data["percentage"] = percentage
        return self

    def build(self) -> Language:
        return Language(**self._data)


class IssueBuilder:
    """Fluent builder for creating Issue objects"""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def with_identifier(self, identifier: str) -> "IssueBuilder":
        self._data["identifier"] = identifier
        return self

    def with_kind(self, kind: IssueKind) -> "IssueBuilder":
        self._data["kind"] = kind
        return self

    def with_url(self, url: UrlLike) -> "IssueBuilder":
        self._data["url"] = url
        return self

    def build(self) -> Issue:
        if "identifier" not in self._data:
            raise MissingFieldError("identifier", "issue")
        return Issue(**self._data)


__all__ = [
    "ArtifactBuilder",
    "CollectionBuilder",
    "ComponentBuilder",
    "ImageBuilder",
    "IssueBuilder",
    "LanguageBuilder",
    "ReleaseBuilder",
    "ScreenshotBuilder",
    "VideoBuilder",
]
