"""Choose the appropriate concrete loader (plain XML, gzip, …)."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Optional, Protocol, cast, runtime_checkable

from lxml import etree

from ..exceptions import InputOutputError
from .file_loader import FileLoader, GzipFileLoader


@runtime_checkable
class LoaderProtocol(Protocol):
    """Required signature for every concrete loader."""

    supported_exts: ClassVar[set[str]]

    @staticmethod
    def load(path: str | Path) -> etree._Element: ...


class LoaderFactory:
    """Resolve a loader from the file suffix or an explicit ``gzipped`` flag."""

    # Register new loaders here (order matters: first match wins).
    _LOADERS = (GzipFileLoader, FileLoader)

    @classmethod
    def resolve(
        cls, path: str | Path, gzipped: Optional[bool] = None
    ) -> type[LoaderProtocol]:
        """
        Return the loader for ``path``.

        ``gzipped`` overrides suffix detection; ``None`` means "decide from
        the ``.gz`` suffix". Files with no known suffix are read as plain XML.
        """
        if gzipped is not None:
            chosen = GzipFileLoader if gzipped else FileLoader
            return cast(type[LoaderProtocol], chosen)

        suffix = Path(path).suffix.lower()
        for loader in cls._LOADERS:
            if suffix in loader.supported_exts:
                return cast(type[LoaderProtocol], loader)
        if suffix == "":
            return cast(type[LoaderProtocol], FileLoader)

        raise InputOutputError(f"No loader found for: {path}")
