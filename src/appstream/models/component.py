"""
component.py – the Component and Collection aggregates
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
A ``Component`` describes one installable piece of software; a ``Collection``
is the catalog document shipped per repository. Both are frozen: every value
is an owned copy of the source document's text.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .content_rating import ContentRating
from .enums import ComponentKind
from .identifiers import AppId, License
from .media import Icon, Screenshot
from .release import Release
from .requirements import Requirement
from .translatable import (
    MarkupTranslatableString,
    TranslatableList,
    TranslatableString,
)
from .variants import (
    Bundle,
    Category,
    Kudo,
    Launchable,
    ProjectUrl,
    Provide,
    Translation,
)


class Language(BaseModel):
    """A translation shipped by the component and how complete it is."""

    locale: str
    percentage: Optional[int] = Field(None, ge=0, le=100)

    model_config = ConfigDict(extra="forbid", frozen=True)


class Component(BaseModel):
    """One ``<component>``; only ``id`` and ``name`` are mandatory."""

    # ----- identity ----------------------------------------------------------
    id: AppId
    kind: ComponentKind = ComponentKind.GENERIC
    name: TranslatableString
    summary: Optional[TranslatableString] = None
    description: Optional[MarkupTranslatableString] = None
    developer_name: Optional[TranslatableString] = None
    keywords: Optional[TranslatableList] = None

    # ----- scalar metadata ---------------------------------------------------
    project_license: Optional[License] = None
    metadata_license: Optional[License] = None
    project_group: Optional[str] = None
    compulsory_for_desktop: Optional[str] = None
    update_contact: Optional[str] = None
    pkgname: Optional[str] = None
    source_pkgname: Optional[str] = None
    content_rating: Optional[ContentRating] = None

    # ----- collections -------------------------------------------------------
    extends: List[AppId] = Field(default_factory=list)
    icons: List[Icon] = Field(default_factory=list)
    screenshots: List[Screenshot] = Field(default_factory=list)
    urls: List[ProjectUrl] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)
    launchables: List[Launchable] = Field(default_factory=list)
    bundles: List[Bundle] = Field(default_factory=list)
    releases: List[Release] = Field(default_factory=list)
    languages: List[Language] = Field(default_factory=list)
    mimetypes: List[str] = Field(default_factory=list)
    kudos: List[Kudo] = Field(default_factory=list)
    provides: List[Provide] = Field(default_factory=list)
    translations: List[Translation] = Field(default_factory=list)
    suggestions: List[AppId] = Field(default_factory=list)
    metadata: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="``<custom>``/``<metadata>`` key → optional value.",
    )
    requires: List[Requirement] = Field(default_factory=list)
    recommends: List[Requirement] = Field(default_factory=list)
    supports: List[Requirement] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    # ----- validators --------------------------------------------------------
    @field_validator("name")
    @classmethod
    def _name_has_a_value(cls, v: TranslatableString) -> TranslatableString:
        if not v.root:
            raise ValueError("Component.name needs at least one locale")
        return v

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


class Collection(BaseModel):
    """A catalog of components (``<components version=…>``)."""

    version: str = Field(..., description="AppStream format version.")
    origin: Optional[str] = None
    architecture: Optional[str] = None
    components: List[Component] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def find_by_id(self, app_id: AppId | str) -> List[Component]:
        """All components with ``app_id``, in document order."""
        wanted = str(app_id)
        return [c for c in self.components if c.id.root == wanted]

    def __len__(self) -> int:
        return len(self.components)


__all__ = ["Collection", "Component", "Language"]
