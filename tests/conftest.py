"""Shared fixtures: XML snippets and the documents under tests/data."""

from pathlib import Path
from typing import Callable

import pytest
from lxml import etree

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the sample AppStream documents."""
    return DATA_DIR


@pytest.fixture
def xml() -> Callable[[str], etree._Element]:
    """Parse an XML snippet into its root element."""

    def _parse(text: str) -> etree._Element:
        return etree.fromstring(text.strip().encode("utf-8"))

    return _parse


@pytest.fixture
def load_data() -> Callable[[str], etree._Element]:
    """Parse one of the documents in tests/data by file name."""

    def _load(name: str) -> etree._Element:
        return etree.parse(str(DATA_DIR / name)).getroot()

    return _load
