"""Table file codecs.

    TableCodec      - read/write protocol
    CsvTableCodec   - .csv via the standard library
    XlsxTableCodec  - .xlsx via openpyxl
    codec_for_path  - selection by file extension

Python 3.13+.
"""

from .codec import TableCodec, codec_for_path, table_format_for_path
from .csv_codec import CsvTableCodec
from .xlsx_codec import XlsxTableCodec

__all__ = [
    "CsvTableCodec",
    "TableCodec",
    "XlsxTableCodec",
    "codec_for_path",
    "table_format_for_path",
]
