"""
identifiers.py – opaque string wrappers
"""

from __future__ import annotations

from pydantic import ConfigDict, RootModel, field_validator


class AppId(RootModel[str]):
    """
    Reverse-DNS component id, e.g. ``org.gnome.Contrast``.

    The value is kept as written; only emptiness is rejected.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("AppId must not be empty")
        return v

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


class License(RootModel[str]):
    """SPDX license expression, stored verbatim."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


__all__ = ["AppId", "License"]
