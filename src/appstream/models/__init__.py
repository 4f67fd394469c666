"""Typed, frozen domain model of AppStream metadata."""

from .component import Collection, Component, Language
from .content_rating import ContentAttribute, ContentRating
from .enums import (
    ArtifactKind,
    BundleKind,
    CategoryKind,
    ChecksumKind,
    Compare,
    ComponentKind,
    ContentRatingVersion,
    ContentState,
    Control,
    DisplayLengthSize,
    FirmwareKind,
    ImageKind,
    IssueKind,
    KudoKind,
    LaunchableKind,
    ProjectUrlKind,
    ProvideKind,
    ReleaseKind,
    ReleaseUrgency,
    Side,
    SizeKind,
    TranslationKind,
)
from .identifiers import AppId, License
from .media import (
    CachedIcon,
    Icon,
    Image,
    LocalIcon,
    RemoteIcon,
    Screenshot,
    StockIcon,
    Video,
)
from .release import Artifact, Issue, Release
from .requirements import (
    ControlRequirement,
    DisplayLengthRequirement,
    IdRequirement,
    OtherRequirement,
    Requirement,
)
from .translatable import (
    DEFAULT_LOCALE,
    MarkupTranslatableString,
    TranslatableList,
    TranslatableString,
)
from .variants import (
    Bundle,
    Category,
    Checksum,
    Kudo,
    Launchable,
    ProjectUrl,
    Provide,
    Size,
    Translation,
)

__all__ = [
    "DEFAULT_LOCALE",
    "AppId",
    "Artifact",
    "ArtifactKind",
    "Bundle",
    "BundleKind",
    "CachedIcon",
    "Category",
    "CategoryKind",
    "Checksum",
    "ChecksumKind",
    "Collection",
    "Compare",
    "Component",
    "ComponentKind",
    "ContentAttribute",
    "ContentRating",
    "ContentRatingVersion",
    "ContentState",
    "Control",
    "ControlRequirement",
    "DisplayLengthRequirement",
    "DisplayLengthSize",
    "FirmwareKind",
    "Icon",
    "IdRequirement",
    "Image",
    "ImageKind",
    "Issue",
    "IssueKind",
    "Kudo",
    "KudoKind",
    "Language",
    "Launchable",
    "LaunchableKind",
    "License",
    "LocalIcon",
    "MarkupTranslatableString",
    "OtherRequirement",
    "ProjectUrl",
    "ProjectUrlKind",
    "Provide",
    "ProvideKind",
    "Release",
    "ReleaseKind",
    "ReleaseUrgency",
    "RemoteIcon",
    "Requirement",
    "Screenshot",
    "Side",
    "Size",
    "SizeKind",
    "StockIcon",
    "TranslatableList",
    "TranslatableString",
    "Translation",
    "TranslationKind",
    "Video",
]
