"""
requirements.py – entries of ``<requires>``, ``<recommends>`` and ``<supports>``

Only ``display_length``, ``control`` and ``id`` are modelled; every other
relation item becomes an :class:`OtherRequirement` naming its tag.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Self, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Compare, Control, DisplayLengthSize, Side
from .identifiers import AppId


class DisplayLengthRequirement(BaseModel):
    """
    ``<display_length compare="ge" side="shortest">768</display_length>``

    The length is either a named size (``small``, ``large`` …) or an exact
    value in logical pixels; exactly one of ``size``/``pixels`` is set.
    """

    type: Literal["display_length"] = "display_length"
    compare: Compare = Compare.GE
    side: Side = Side.SHORTEST
    size: Optional[DisplayLengthSize] = None
    pixels: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _exactly_one_length(self) -> Self:
        if (self.size is None) == (self.pixels is None):
            raise ValueError("Set exactly one of 'size' or 'pixels'")
        return self


class ControlRequirement(BaseModel):
    type: Literal["control"] = "control"
    control: Control

    model_config = ConfigDict(extra="forbid", frozen=True)


class IdRequirement(BaseModel):
    """Relation to another component, optionally version-constrained."""

    type: Literal["id"] = "id"
    id: AppId
    version: Optional[str] = None
    compare: Optional[Compare] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class OtherRequirement(BaseModel):
    """Catch-all for relation items without a dedicated model."""

    type: Literal["other"] = "other"
    tag: str

    model_config = ConfigDict(extra="forbid", frozen=True)


Requirement = Annotated[
    Union[
        DisplayLengthRequirement,
        ControlRequirement,
        IdRequirement,
        OtherRequirement,
    ],
    Field(discriminator="type"),
]


__all__ = [
    "ControlRequirement",
    "DisplayLengthRequirement",
    "IdRequirement",
    "OtherRequirement",
    "Requirement",
]
