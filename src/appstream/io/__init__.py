"""
I/O layer: files, gzip archives and in-memory buffers → lxml root element.

This is the only place where bytes are read or decompressed; the
conversion package works on the resulting tree.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lxml import etree

from .file_loader import (
    FileLoader,
    GzipFileLoader,
    parse_bytes,
    parse_gzip_bytes,
    parse_string,
)
from .loader_factory import LoaderFactory

__all__ = [
    "FileLoader",
    "GzipFileLoader",
    "LoaderFactory",
    "load_element",
    "parse_bytes",
    "parse_gzip_bytes",
    "parse_string",
]


def load_element(
    path: str | Path, *, gzipped: Optional[bool] = None
) -> etree._Element:
    """Load ``path`` with the loader chosen by ``LoaderFactory``."""
    return LoaderFactory.resolve(path, gzipped=gzipped).load(path)
