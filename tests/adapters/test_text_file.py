from __future__ import annotations

import codecs
from pathlib import Path

import pytest

from lib_log_buffers.adapters.text_file import TextFileReader, TextFileWriter
from lib_log_buffers.domain.encoding import FileEncoding


@pytest.fixture
def writer() -> TextFileWriter:
    return TextFileWriter(line_separator="\n")


def test_utf8_writes_bom_once_and_appends_with_separator(tmp_path: Path, writer: TextFileWriter) -> None:
    """UTF-8 files get one BOM and newline separated appends."""

    target = tmp_path / "out.log"
    writer.write(target, "first", encoding=FileEncoding.UTF8)
    writer.write(target, "second", encoding=FileEncoding.UTF8, append=True)

    raw = target.read_bytes()
    assert raw == codecs.BOM_UTF8 + b"first\nsecond"
    assert raw.count(codecs.BOM_UTF8) == 1


def test_utf8_no_bom_has_no_marker(tmp_path: Path, writer: TextFileWriter) -> None:
    """``utf8NoBOM`` files start with content."""

    target = tmp_path / "out.log"
    writer.write(target, "Größe", encoding=FileEncoding.UTF8_NO_BOM)
    assert target.read_bytes() == "Größe".encode("utf-8")


def test_ascii_replaces_unencodable_characters(tmp_path: Path, writer: TextFileWriter) -> None:
    """ASCII files replace characters outside the codec."""

    target = tmp_path / "out.log"
    writer.write(target, "[✓] done", encoding=FileEncoding.ASCII)
    assert target.read_bytes() == b"[?] done"


def test_unicode_appends_without_second_bom(tmp_path: Path, writer: TextFileWriter) -> None:
    """UTF-16 appends do not repeat the byte order mark."""

    target = tmp_path / "out.log"
    writer.write(target, "one", encoding=FileEncoding.UNICODE)
    writer.write(target, "two", encoding=FileEncoding.UNICODE, append=True)

    assert TextFileReader().read(target) == "one\ntwo"


def test_append_to_missing_or_empty_file_omits_separator(tmp_path: Path, writer: TextFileWriter) -> None:
    """The first append writes no leading newline."""

    target = tmp_path / "nested" / "dir" / "out.log"
    writer.write(target, "only", encoding=FileEncoding.UTF8_NO_BOM, append=True)
    assert target.read_text(encoding="utf-8") == "only"

    empty = tmp_path / "empty.log"
    empty.touch()
    writer.write(empty, "text", encoding=FileEncoding.UTF8_NO_BOM, append=True)
    assert empty.read_text(encoding="utf-8") == "text"


def test_write_without_append_overwrites(tmp_path: Path, writer: TextFileWriter) -> None:
    """Plain writes replace previous content."""

    target = tmp_path / "out.log"
    writer.write(target, "old", encoding=FileEncoding.UTF8_NO_BOM)
    writer.write(target, "new", encoding=FileEncoding.UTF8_NO_BOM)
    assert target.read_text(encoding="utf-8") == "new"


@pytest.mark.parametrize("encoding", list(FileEncoding))
def test_reader_detects_every_written_encoding(tmp_path: Path, writer: TextFileWriter, encoding: FileEncoding) -> None:
    """The reader decodes whatever the writer produced."""

    target = tmp_path / f"{encoding.value}.json"
    writer.write(target, '{"Buffers": {}}', encoding=encoding)
    assert TextFileReader().read(target) == '{"Buffers": {}}'


def test_reader_rejects_invalid_utf8(tmp_path: Path) -> None:
    """Undecodable bytes raise instead of being replaced."""

    target = tmp_path / "bad.json"
    target.write_bytes(b"\xff\x00\xfe")
    with pytest.raises(UnicodeDecodeError):
        TextFileReader().read(target)
