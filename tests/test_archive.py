# tests/test_archive.py
import gzip
import io
import zipfile
from unittest.mock import patch

import pytest

from toneterminal_presets.archive import ArchiveEntry, build_zip_archive, gzip_bytes
from toneterminal_presets.exceptions import ArchiveWriteError, SerializerError


class TestBuildZipArchive:

    def test_readable_by_zipfile(self):
        data = build_zip_archive([
            ArchiveEntry("README.txt", "hello"),
            ArchiveEntry("nested/data.bin", b"\x00\x01\x02"),
        ])
        assert data[:2] == b"PK"
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.testzip() is None
            assert archive.namelist() == ["README.txt", "nested/data.bin"]
            assert archive.read("README.txt") == b"hello"
            assert archive.read("nested/data.bin") == b"\x00\x01\x02"

    def test_default_compression_is_deflate(self):
        data = build_zip_archive([ArchiveEntry("a.txt", "a" * 500)])
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.getinfo("a.txt").compress_type == zipfile.ZIP_DEFLATED

    def test_store_compression(self):
        data = build_zip_archive([ArchiveEntry("a.txt", "abc")], compression="STORE")
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.getinfo("a.txt").compress_type == zipfile.ZIP_STORED

    def test_unknown_compression(self):
        with pytest.raises(ValueError):
            build_zip_archive([ArchiveEntry("a.txt", "abc")], compression="BZIP9")

    def test_text_entries_are_utf8(self):
        data = build_zip_archive([ArchiveEntry("a.txt", "Søng ♪")])
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.read("a.txt").decode("utf-8") == "Søng ♪"

    def test_binary_string_entries_are_latin1(self):
        data = build_zip_archive([ArchiveEntry("a.bin", "\xff\x00", binary=True)])
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.read("a.bin") == b"\xff\x00"

    def test_deterministic(self):
        entries = [ArchiveEntry("a.txt", "same"), ArchiveEntry("b.txt", b"bytes")]
        assert build_zip_archive(entries) == build_zip_archive(entries)

    def test_timestamps_pinned(self):
        data = build_zip_archive([ArchiveEntry("a.txt", "x")])
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.getinfo("a.txt").date_time == (1980, 1, 1, 0, 0, 0)

    def test_writer_failure_raises_archive_error(self):
        with patch("toneterminal_presets.archive.zipfile.ZipFile", side_effect=OSError("disk on fire")):
            with pytest.raises(ArchiveWriteError) as excinfo:
                build_zip_archive([ArchiveEntry("a.txt", "x")])
        assert excinfo.value.container == "zip"
        assert "disk on fire" in str(excinfo.value)
        assert isinstance(excinfo.value, SerializerError)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_unencodable_binary_string_raises_archive_error(self):
        with pytest.raises(ArchiveWriteError):
            build_zip_archive([ArchiveEntry("a.bin", "♪", binary=True)])


class TestGzipBytes:

    def test_round_trip(self):
        assert gzip.decompress(gzip_bytes(b"<xml/>")) == b"<xml/>"

    def test_deterministic(self):
        assert gzip_bytes(b"payload") == gzip_bytes(b"payload")

    def test_failure_raises_archive_error(self):
        with patch("toneterminal_presets.archive.gzip.compress", side_effect=OSError("boom")):
            with pytest.raises(ArchiveWriteError) as excinfo:
                gzip_bytes(b"x")
        assert excinfo.value.container == "gzip"
