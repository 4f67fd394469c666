"""
variants.py – small tagged values attached to a component
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Each model pairs a ``kind`` from :mod:`appstream.models.enums` with its
payload. Permissive kinds keep the spelling found in the document in
``raw_type`` (or ``name``) when the kind is ``UNKNOWN``.
"""

from __future__ import annotations

from typing import Optional, Self

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, model_validator

from .enums import (
    BundleKind,
    CategoryKind,
    ChecksumKind,
    FirmwareKind,
    KudoKind,
    LaunchableKind,
    ProjectUrlKind,
    ProvideKind,
    SizeKind,
    TranslationKind,
)


class ProjectUrl(BaseModel):
    """``<url type="…">``"""

    kind: ProjectUrlKind = Field(..., description="Purpose of the link.")
    url: AnyUrl
    raw_type: Optional[str] = Field(
        None, description="Original ``type`` when ``kind`` is UNKNOWN."
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


class Launchable(BaseModel):
    """``<launchable type="…">``: one way to start the component."""

    kind: LaunchableKind
    value: str = Field(
        ..., description="Desktop-file id, service name, URL or manifest."
    )
    raw_type: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Bundle(BaseModel):
    """Reference to a third-party distribution of the component."""

    kind: BundleKind
    reference: str = Field(..., description="Bundle id or name (tag text).")
    runtime: Optional[str] = None
    sdk: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _flatpak_needs_sdk(self) -> Self:
        if self.kind is BundleKind.FLATPAK and not self.sdk:
            raise ValueError("A flatpak bundle requires an 'sdk'")
        if self.kind is not BundleKind.FLATPAK and (self.sdk or self.runtime):
            raise ValueError("Only flatpak bundles carry 'sdk'/'runtime'")
        return self


class Provide(BaseModel):
    """One public interface listed under ``<provides>``."""

    kind: ProvideKind
    value: str
    firmware_kind: Optional[FirmwareKind] = Field(
        None, description="Only set for ``<firmware type=…>``."
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _firmware_kind_matches(self) -> Self:
        is_firmware = self.kind is ProvideKind.FIRMWARE
        if is_firmware != (self.firmware_kind is not None):
            raise ValueError(
                "firmware_kind must be set exactly for firmware provides"
            )
        return self


class Translation(BaseModel):
    """``<translation type="…">domain</translation>``"""

    kind: TranslationKind
    domain: str
    raw_type: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Category(BaseModel):
    kind: CategoryKind
    name: str = Field(..., description="Category as spelled in the document.")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def of(cls, kind: CategoryKind) -> Category:
        return cls(kind=kind, name=kind.value)


class Kudo(BaseModel):
    kind: KudoKind
    name: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def of(cls, kind: KudoKind) -> Kudo:
        return cls(kind=kind, name=kind.value)


class Checksum(BaseModel):
    kind: ChecksumKind
    value: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class Size(BaseModel):
    """Download or installed size in bytes."""

    kind: SizeKind
    value: int = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = [
    "Bundle",
    "Category",
    "Checksum",
    "Kudo",
    "Launchable",
    "ProjectUrl",
    "Provide",
    "Size",
    "Translation",
]
