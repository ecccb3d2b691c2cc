"""Unit tests for document reading and report writing."""

from unittest.mock import patch

import pytest

from src.policy_ocr.classifier import build_entry
from src.policy_ocr.io import format_record, read_lines, write_report
from src.policy_ocr.types import (
    SourceEmpty,
    SourceErrorKind,
    SourceNotFound,
    SourceUnreadable,
)


@pytest.fixture
def records():
    """Provide plain {number, valid_checksum} records."""
    return [
        {"number": "457508000", "valid_checksum": True},
        {"number": "664371495", "valid_checksum": False},
        {"number": "86110??36", "valid_checksum": False},
        {"number": "123456789", "valid_checksum": True},
    ]


class TestReadLines:
    """Test the input adapter."""

    def test_preserves_columns(self, tmp_path):
        """Test leading and inner spaces survive; newlines do not."""
        path = tmp_path / "scan.txt"
        path.write_text("    _  _ \n  | _| _|\r\n  ||_  _|\n\n")

        assert read_lines(path) == ["    _  _ ", "  | _| _|", "  ||_  _|", ""]

    def test_missing_final_newline(self, tmp_path):
        path = tmp_path / "scan.txt"
        path.write_text("a\nb")

        assert read_lines(path) == ["a", "b"]

    def test_not_found(self, tmp_path):
        """Test a missing file raises SourceNotFound naming the path."""
        path = tmp_path / "missing.txt"

        with pytest.raises(SourceNotFound, match="missing.txt") as exc_info:
            read_lines(path)
        assert exc_info.value.kind == SourceErrorKind.NOT_FOUND

    def test_directory_is_not_found(self, tmp_path):
        with pytest.raises(SourceNotFound):
            read_lines(tmp_path)

    def test_permission_denied(self, tmp_path):
        """Test permission failures are SourceUnreadable, distinct from not found."""
        path = tmp_path / "locked.txt"
        path.write_text("x\n")

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(SourceUnreadable, match="Permission denied") as exc_info:
                read_lines(path)
        assert exc_info.value.kind == SourceErrorKind.UNREADABLE

    def test_decode_error(self, tmp_path):
        """Test undecodable bytes are SourceUnreadable."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa\n")

        with pytest.raises(SourceUnreadable, match="Error reading file"):
            read_lines(path, encoding="utf-8")

    def test_empty_file(self, tmp_path):
        """Test a zero-length file raises SourceEmpty."""
        path = tmp_path / "empty.txt"
        path.write_text("")

        with pytest.raises(SourceEmpty, match="File is empty"):
            read_lines(path)


class TestFormatRecord:
    """Test record formatting."""

    def test_mapping_records(self, records):
        assert [format_record(r) for r in records] == [
            "457508000",
            "664371495 ERR",
            "86110??36 ILL",
            "123456789",
        ]

    def test_report_entries(self):
        assert format_record(build_entry("664371495")) == "664371495 ERR"


class TestWriteReport:
    """Test the output adapter."""

    def test_writes_formatted_lines(self, tmp_path, records):
        """Test one newline-terminated line per record."""
        path = tmp_path / "report.txt"

        count = write_report(records, path)

        assert count == 4
        assert path.read_text() == (
            "457508000\n664371495 ERR\n86110??36 ILL\n123456789\n"
        )

    def test_creates_file_and_parents(self, tmp_path, records):
        path = tmp_path / "out" / "nested" / "report.txt"

        write_report(records, path)

        assert path.exists()

    def test_overwrites_existing_content(self, tmp_path, records):
        """Test existing content is replaced, never appended to."""
        path = tmp_path / "report.txt"
        path.write_text("old content\n")

        write_report(records, path)

        content = path.read_text()
        assert "old content" not in content
        assert content.startswith("457508000\n")

    def test_report_entries(self, tmp_path):
        path = tmp_path / "report.txt"

        write_report([build_entry("457508000"), build_entry("86110??36")], path)

        assert path.read_text() == "457508000\n86110??36 ILL\n"

    def test_empty_report(self, tmp_path):
        path = tmp_path / "report.txt"
        path.write_text("stale\n")

        assert write_report([], path) == 0
        assert path.read_text() == ""
