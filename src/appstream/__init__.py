"""
Package façade – a single import gives users everything they need:

    >>> from appstream import parse_component
    >>> component = parse_component("org.gnome.Contrast.metainfo.xml")

Design
------
* Thin wrappers around ConversionPipeline (keeps public API tiny).
* Re-exports the model, the builders and the error types callers catch.
"""

from __future__ import annotations

import logging
from typing import Optional, cast

from .builder import (
    ArtifactBuilder,
    CollectionBuilder,
    ComponentBuilder,
    ImageBuilder,
    IssueBuilder,
    LanguageBuilder,
    ReleaseBuilder,
    ScreenshotBuilder,
    VideoBuilder,
)
from .conversion_pipeline import ConversionPipeline, Source
from .exceptions import (
    AppStreamError,
    CollectionParseError,
    ContextParseError,
    ParseError,
    split_collection_result,
)
from .models import AppId, Collection, Component, DEFAULT_LOCALE
from .serialization import to_yaml

__all__ = [
    "DEFAULT_LOCALE",
    "AppId",
    "AppStreamError",
    "ArtifactBuilder",
    "Collection",
    "CollectionBuilder",
    "CollectionParseError",
    "Component",
    "ComponentBuilder",
    "ContextParseError",
    "ConversionPipeline",
    "ImageBuilder",
    "IssueBuilder",
    "LanguageBuilder",
    "ParseError",
    "ReleaseBuilder",
    "ScreenshotBuilder",
    "VideoBuilder",
    "parse_collection",
    "parse_component",
    "split_collection_result",
    "to_yaml",
]

logger = logging.getLogger(__name__)


def parse_component(
    source: Source, *, gzipped: Optional[bool] = None
) -> Component:
    """
    Convenience helper that hides the internal pipeline machinery.

    Parameters
    ----------
    source
        Path, XML string, bytes or lxml element of a ``<component>``.
    gzipped
        Forwarded to ConversionPipeline (default: decide from suffix).
    """
    pipeline = ConversionPipeline(source, kind="component", gzipped=gzipped)
    return cast(Component, pipeline.run())


def parse_collection(
    source: Source,
    *,
    partial: bool = False,
    gzipped: Optional[bool] = None,
) -> Collection:
    """
    Parse a ``<components>`` catalog.

    With ``partial=True`` a failing component does not abort the run;
    ``CollectionParseError.partial_collection`` holds the rest.
    """
    pipeline = ConversionPipeline(
        source, kind="collection", partial=partial, gzipped=gzipped
    )
    return cast(Collection, pipeline.run())
