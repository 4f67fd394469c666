"""Unit tests for the loaders and LoaderFactory."""

import gzip

import pytest

from appstream.exceptions import InputOutputError, XmlParserError
from appstream.io import (
    FileLoader,
    GzipFileLoader,
    LoaderFactory,
    load_element,
    parse_bytes,
    parse_gzip_bytes,
    parse_string,
)

DOC = b'<?xml version="1.0" encoding="UTF-8"?><component><id>a.b</id></component>'


@pytest.fixture
def gz_file(tmp_path):
    path = tmp_path / "appstream.xml.gz"
    path.write_bytes(gzip.compress(DOC))
    return path


class TestInMemory:
    def test_parse_bytes(self):
        assert parse_bytes(DOC).tag == "component"

    def test_parse_string(self):
        assert parse_string("<components version='1'/>").get("version") == "1"

    def test_parse_gzip_bytes(self):
        assert parse_gzip_bytes(gzip.compress(DOC)).findtext("id") == "a.b"

    def test_syntax_error(self):
        with pytest.raises(XmlParserError):
            parse_bytes(b"<component><id>a.b</component>")

    def test_bad_gzip_buffer(self):
        with pytest.raises(InputOutputError):
            parse_gzip_bytes(b"\x1f\x8bnot really gzip")

    def test_entities_are_not_expanded(self):
        doc = (
            b'<?xml version="1.0"?>'
            b'<!DOCTYPE c [<!ENTITY e SYSTEM "file:///etc/passwd">]>'
            b"<c>&e;</c>"
        )
        root = parse_bytes(doc)
        assert "root:" not in (root.text or "")


class TestFileLoaders:
    def test_plain_file(self, data_dir):
        root = FileLoader.load(data_dir / "contrast.metainfo.xml")
        assert root.tag == "component"

    def test_gzip_file(self, gz_file):
        assert GzipFileLoader.load(gz_file).findtext("id") == "a.b"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputOutputError):
            FileLoader.load(tmp_path / "nope.xml")
        with pytest.raises(InputOutputError):
            GzipFileLoader.load(tmp_path / "nope.xml.gz")

    def test_corrupt_gzip_file(self, tmp_path):
        path = tmp_path / "broken.xml.gz"
        path.write_bytes(b"plain text, not gzip")
        with pytest.raises(InputOutputError):
            GzipFileLoader.load(path)

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.xml"
        path.write_text("<component>", encoding="utf-8")
        with pytest.raises(XmlParserError):
            FileLoader.load(path)


class TestLoaderFactory:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a.xml", FileLoader),
            ("a.metainfo.xml", FileLoader),
            ("flathub.xml.gz", GzipFileLoader),
            ("APPSTREAM.XML.GZ", GzipFileLoader),
            ("no_suffix", FileLoader),
        ],
    )
    def test_suffix_resolution(self, name, expected):
        assert LoaderFactory.resolve(name) is expected

    def test_explicit_flag_wins(self):
        assert LoaderFactory.resolve("a.xml", gzipped=True) is GzipFileLoader
        assert LoaderFactory.resolve("a.gz", gzipped=False) is FileLoader

    @pytest.mark.parametrize("name", ["a.json", "org.x.metainfo", "org.x.appdata"])
    def test_unknown_suffix(self, name):
        with pytest.raises(InputOutputError):
            LoaderFactory.resolve(name)

    def test_plain_loader_suffixes(self):
        assert FileLoader.supported_exts == {".xml"}

    def test_load_element(self, gz_file, data_dir):
        assert load_element(gz_file).tag == "component"
        assert load_element(data_dir / "collection.xml").tag == "components"
