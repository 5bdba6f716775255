from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")

RAW_COLUMNS: list[str] = [
    "name",
    "address",
    "phone",
    "operating_hours",
    "cuisine",
    "vegetarian_options",
    "signature_dishes",
    "price_range",
    "rating",
    "website",
    "special_features",
]


@dataclass(frozen=True)
class CsvRow:
    line_number: int  # 1-based, the header is line 0
    fields: tuple[str, ...]


@dataclass(frozen=True)
class ParsedCsv:
    rows: list[CsvRow]
    total: int  # data lines seen, including skipped ones


def read_csv_text(path: Path) -> str:
    """Load the whole file. Missing or unreadable files raise."""
    return Path(path).read_text(encoding="utf-8")


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF only; other Unicode line breaks stay inside fields."""
    return _LINE_BREAK.split(text.strip())


def split_row(line: str, delimiter: str = ",") -> list[str]:
    """
    Split one line into fields.

    A double quote toggles quoted mode and is dropped from the field;
    delimiters inside quotes do not end a field. Doubled quotes are not
    unescaped, so `""` inside a quoted field simply vanishes.
    """
    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return values


def parse_rows(text: str) -> ParsedCsv:
    """
    Split CSV text into data rows, dropping the header.

    Rows with fewer fields than RAW_COLUMNS are skipped; extra trailing
    fields are cut off.
    """
    lines = split_lines(text)
    data_lines = lines[1:]

    min_fields = len(RAW_COLUMNS)
    rows: list[CsvRow] = []
    for line_number, line in enumerate(data_lines, start=1):
        values = split_row(line)
        if len(values) < min_fields:
            logger.debug("Skipping line %d with %d fields", line_number, len(values))
            continue
        rows.append(CsvRow(line_number=line_number, fields=tuple(values[:min_fields])))

    return ParsedCsv(rows=rows, total=len(data_lines))
