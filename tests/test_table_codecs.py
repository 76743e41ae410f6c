"""Tests for the table package: CSV/XLSX codecs and codec selection.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st
from openpyxl import Workbook, load_workbook

from msgtable.constants import SHEET_NAME
from msgtable.diagnostics import DiagnosticCode, TableFormatError, UnsupportedFormatError
from msgtable.enums import TableFormat
from msgtable.table import (
    CsvTableCodec,
    XlsxTableCodec,
    codec_for_path,
    table_format_for_path,
)
from tests.strategies import message_texts

_TABLE = [
    ["category", "key", "zh", "jp"],
    ["auth", "inputs.email", "电子信箱", "Eメール"],
    ["auth", "inputs.captcha", "", "確認コード"],
]


class TestCodecSelection:
    """Extension-based codec selection."""

    @pytest.mark.parametrize(
        ("path", "codec_type", "table_format"),
        [
            ("out.csv", CsvTableCodec, TableFormat.CSV),
            ("dir/out.CSV", CsvTableCodec, TableFormat.CSV),
            ("out.xlsx", XlsxTableCodec, TableFormat.XLSX),
            ("./output-messages.XLSX", XlsxTableCodec, TableFormat.XLSX),
        ],
    )
    def test_known_extensions(
        self, path: str, codec_type: type, table_format: TableFormat
    ) -> None:
        """.csv and .xlsx are recognized case-insensitively."""
        assert isinstance(codec_for_path(path), codec_type)
        assert table_format_for_path(path) is table_format

    @pytest.mark.parametrize("path", ["out.txt", "out", "out.xls", "out.csv.bak"])
    def test_unknown_extension(self, path: str) -> None:
        """Anything else is a configuration error naming the path."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            codec_for_path(path)

        assert exc_info.value.path == path
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSUPPORTED_TABLE_FORMAT
        assert f"Unknown file type: {path}" in str(exc_info.value)

    def test_extension_property(self) -> None:
        """TableFormat knows its extension."""
        assert TableFormat.CSV.extension == ".csv"
        assert TableFormat.XLSX.extension == ".xlsx"


class TestCsvTableCodec:
    """CSV encoding."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        """A written table reads back unchanged."""
        path = tmp_path / "messages.csv"
        codec = CsvTableCodec()

        codec.write(_TABLE, path)

        assert codec.read(path) == _TABLE

    def test_written_text(self, tmp_path: Path) -> None:
        """Output is UTF-8 without a byte order mark."""
        path = tmp_path / "messages.csv"

        CsvTableCodec().write(_TABLE[:2], path)

        raw = path.read_bytes()
        assert not raw.startswith(b"\xef\xbb\xbf")
        assert raw.decode("utf-8").splitlines()[1] == "auth,inputs.email,电子信箱,Eメール"

    def test_reads_bom_and_quoting(self, tmp_path: Path) -> None:
        """A spreadsheet-exported BOM is ignored; quoted cells keep commas and newlines."""
        path = tmp_path / "messages.csv"
        path.write_bytes(
            "\ufeffcategory,key,zh\r\nc,k,\"a, b\"\r\nc,m,\"line1\nline2\"\r\n".encode()
        )

        assert CsvTableCodec().read(path) == [
            ["category", "key", "zh"],
            ["c", "k", "a, b"],
            ["c", "m", "line1\nline2"],
        ]

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        """Undecodable bytes are a table format error."""
        path = tmp_path / "messages.csv"
        path.write_bytes(b"category,key,zh\n\xff\xfe\xfa")

        with pytest.raises(TableFormatError) as exc_info:
            CsvTableCodec().read(path)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TABLE_UNREADABLE

    @given(st.lists(st.lists(message_texts(), min_size=3, max_size=3), max_size=5))
    def test_arbitrary_text_survives(self, tmp_path: Path, rows: list[list[str]]) -> None:
        """Any message text survives a CSV write and read."""
        path = tmp_path / "prop.csv"
        table = [["category", "key", "zh"], *rows]
        codec = CsvTableCodec()

        codec.write(table, path)

        assert codec.read(path) == table


class TestXlsxTableCodec:
    """XLSX encoding with openpyxl."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        """Empty strings come back as empty strings."""
        path = tmp_path / "messages.xlsx"
        codec = XlsxTableCodec()

        codec.write(_TABLE, path)

        assert codec.read(path) == _TABLE

    def test_single_named_sheet(self, tmp_path: Path) -> None:
        """The workbook has exactly one sheet named sheet1."""
        path = tmp_path / "messages.xlsx"

        XlsxTableCodec().write(_TABLE, path)

        workbook = load_workbook(path)
        assert workbook.sheetnames == [SHEET_NAME]

    def test_formula_like_text_stays_text(self, tmp_path: Path) -> None:
        """Messages starting with '=' or spelling an error code are stored as text."""
        path = tmp_path / "messages.xlsx"
        table = [["category", "key", "zh"], ["c", "eq", "=1+1"], ["c", "na", "#N/A"]]
        codec = XlsxTableCodec()

        codec.write(table, path)

        assert codec.read(path) == table

    def test_reads_first_sheet_and_stringifies(self, tmp_path: Path) -> None:
        """Any first sheet is read; numbers become strings and None becomes ''."""
        path = tmp_path / "edited.xlsx"
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Translations"
        sheet.append(["category", "key", "zh"])
        sheet.append(["c", "count", 42])
        sheet.append(["c", "empty", None])
        workbook.create_sheet("notes").append(["ignored"])
        workbook.save(path)

        assert XlsxTableCodec().read(path) == [
            ["category", "key", "zh"],
            ["c", "count", "42"],
            ["c", "empty", ""],
        ]

    def test_not_a_workbook(self, tmp_path: Path) -> None:
        """A file that is not a workbook is a table format error."""
        path = tmp_path / "broken.xlsx"
        path.write_text("category,key,zh\n", encoding="utf-8")

        with pytest.raises(TableFormatError) as exc_info:
            XlsxTableCodec().read(path)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TABLE_UNREADABLE

    @pytest.mark.parametrize("text", ["a\x07b", "\x00", "bell\x1b[0m"])
    def test_control_character_is_table_error(self, tmp_path: Path, text: str) -> None:
        """Characters worksheets cannot hold fail with the row number."""
        path = tmp_path / "bad.xlsx"

        with pytest.raises(TableFormatError) as exc_info:
            XlsxTableCodec().write([_TABLE[0], ["auth", "k", text, ""]], path)

        assert exc_info.value.row == 2
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TABLE_ROW_INVALID
        assert not path.exists()

    @given(st.lists(st.lists(message_texts(), min_size=3, max_size=3), max_size=4))
    def test_arbitrary_text_survives(self, tmp_path: Path, rows: list[list[str]]) -> None:
        """Any message text survives an XLSX write and read."""
        path = tmp_path / "prop.xlsx"
        table = [["category", "key", "zh"], *rows]
        codec = XlsxTableCodec()

        codec.write(table, path)

        assert codec.read(path) == table
