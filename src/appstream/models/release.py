"""
release.py – releases and their downloadable artifacts
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator

from .enums import ArtifactKind, IssueKind, ReleaseKind, ReleaseUrgency
from .translatable import MarkupTranslatableString
from .variants import Bundle, Checksum, Size


class Issue(BaseModel):
    """An issue resolved by a release (``<issues><issue>``)."""

    kind: IssueKind = IssueKind.GENERIC
    identifier: str = Field(..., description="Bug number or CVE id.")
    url: Optional[AnyUrl] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Artifact(BaseModel):
    """A source or binary download belonging to a release."""

    platform: Optional[str] = Field(
        None, description="Target triplet, e.g. ``x86_64-linux-gnu``."
    )
    kind: ArtifactKind
    sizes: List[Size] = Field(default_factory=list)
    url: AnyUrl = Field(..., description="Download location.")
    filename: Optional[str] = None
    checksums: List[Checksum] = Field(default_factory=list)
    bundles: List[Bundle] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class Release(BaseModel):
    version: str
    date: Optional[datetime] = Field(None, description="Release instant (UTC).")
    date_eol: Optional[datetime] = Field(None, description="End of life (UTC).")
    description: Optional[MarkupTranslatableString] = None
    kind: ReleaseKind = ReleaseKind.STABLE
    sizes: List[Size] = Field(default_factory=list)
    urgency: ReleaseUrgency = ReleaseUrgency.MEDIUM
    artifacts: List[Artifact] = Field(default_factory=list)
    url: Optional[AnyUrl] = Field(None, description="Changelog/details page.")
    issues: List[Issue] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    # ----- validators --------------------------------------------------------
    @field_validator("version")
    @classmethod
    def _version_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Release.version must not be empty")
        return v


__all__ = ["Artifact", "Issue", "Release"]
