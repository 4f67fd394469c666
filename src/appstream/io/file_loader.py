"""Concrete loaders that turn XML (plain or gzip-compressed) into an lxml element."""

from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import Final

from lxml import etree

from ..exceptions import InputOutputError, XmlParserError

logger = logging.getLogger(__name__)

_XML_EXTS: Final[set[str]] = {".xml"}
_GZIP_EXTS: Final[set[str]] = {".gz"}


def _parser() -> etree.XMLParser:
    # no entity expansion, no network access
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse_bytes(data: bytes) -> etree._Element:
    """Parse an XML byte string and return its root element."""
    try:
        return etree.fromstring(data, _parser())
    except etree.XMLSyntaxError as exc:
        raise XmlParserError(str(exc)) from exc


def parse_gzip_bytes(data: bytes) -> etree._Element:
    """Decompress an in-memory gzip buffer, then parse it."""
    try:
        raw = gzip.decompress(data)
    except (OSError, EOFError) as exc:
        raise InputOutputError(f"Cannot decompress buffer: {exc}") from exc
    return parse_bytes(raw)


def parse_string(text: str) -> etree._Element:
    """Parse an in-memory XML document."""
    return parse_bytes(text.encode("utf-8"))


class FileLoader:
    """Read a plain XML file from disk and return its root element."""

    supported_exts: set[str] = _XML_EXTS

    @staticmethod
    def load(path: str | Path) -> etree._Element:
        file_path = Path(path)

        # validation
        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise InputOutputError(f"File not found: {file_path}")

        try:
            data = file_path.read_bytes()
        except OSError as exc:
            raise InputOutputError(f"Cannot read {file_path.name}: {exc}") from exc

        root = parse_bytes(data)
        logger.debug("XML file loaded: %s (<%s>)", file_path, root.tag)
        return root


class GzipFileLoader:
    """Read a gzip-compressed XML file (``*.xml.gz``) from disk."""

    supported_exts: set[str] = _GZIP_EXTS

    @staticmethod
    def load(path: str | Path) -> etree._Element:
        file_path = Path(path)

        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise InputOutputError(f"File not found: {file_path}")

        try:
            with gzip.open(file_path, "rb") as handle:
                data = handle.read()
        except (OSError, EOFError) as exc:
            raise InputOutputError(
                f"Cannot decompress {file_path.name}: {exc}"
            ) from exc

        root = parse_bytes(data)
        logger.debug("Gzip XML file loaded: %s (<%s>)", file_path, root.tag)
        return root
