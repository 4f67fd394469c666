"""
ConversionPipeline – high-level orchestration from XML to the typed model.

Responsibilities
----------------
1.   Accept a filesystem path, raw (optionally gzip-compressed) bytes,
     an XML string or an already-parsed lxml element.
2.   Invoke the I/O layer to obtain the root element.
3.   Invoke the conversion layer to build a validated Component or
     Collection.
4.   Surface all domain-specific exceptions unchanged so that callers
     can handle them in a single try/except.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

from lxml import etree

from .conversion import convert_collection, convert_component
from .exceptions import AppStreamError
from .io import load_element, parse_bytes, parse_gzip_bytes, parse_string
from .models import Collection, Component

logger = logging.getLogger(__name__)

Source = str | Path | bytes | etree._Element
DocumentKind = Literal["component", "collection"]

_GZIP_MAGIC = b"\x1f\x8b"


class ConversionPipeline:
    """End-to-end converter AppStream XML → Component / Collection."""

    def __init__(
        self,
        source: Source,
        kind: DocumentKind = "component",
        partial: bool = False,
        gzipped: Optional[bool] = None,
    ) -> None:
        """
        Parameters
        ----------
        source
            Path to a ``.xml``/``.xml.gz`` file, XML text (a string starting
            with ``<``), raw bytes (gzip detected by magic number) or a
            parsed lxml element.
        kind
            ``"component"`` for a single metainfo file, ``"collection"`` for
            a catalog document.
        partial
            Collections only: keep converting after a component fails and
            raise ``CollectionParseError`` with the partial result.
        gzipped
            Files only: force (``True``) or forbid (``False``) gzip
            decompression instead of deciding from the suffix.
        """
        if kind not in ("component", "collection"):
            raise AppStreamError(
                f"ConversionPipeline: kind must be 'component' or 'collection', got {kind!r}"
            )
        self._kind = kind
        self._partial = partial
        self._root = self._load(source, gzipped)

    @staticmethod
    def _load(source: Source, gzipped: Optional[bool]) -> etree._Element:
        if isinstance(source, etree._Element):
            logger.debug("Using in-memory element <%s>", source.tag)
            return source
        if isinstance(source, bytes):
            if source.startswith(_GZIP_MAGIC):
                logger.debug("Decompressing in-memory gzip buffer")
                return parse_gzip_bytes(source)
            return parse_bytes(source)
        if isinstance(source, str) and source.lstrip().startswith("<"):
            logger.debug("Parsing in-memory XML string")
            return parse_string(source)
        if isinstance(source, (str, Path)):
            logger.debug("Loading AppStream file: %s", source)
            return load_element(source, gzipped=gzipped)
        raise AppStreamError(
            "ConversionPipeline: source must be Path | str | bytes | lxml element"
        )

    def run(self) -> Component | Collection:
        """Return a fully-validated model (raises on failure)."""
        if self._kind == "component":
            component = convert_component(self._root)
            logger.info("Conversion succeeded – component %s", component.id)
            return component

        collection = convert_collection(self._root, partial=self._partial)
        logger.info(
            "Conversion succeeded – %d component(s) in collection %s",
            len(collection.components),
            collection.origin or "<no origin>",
        )
        return collection
