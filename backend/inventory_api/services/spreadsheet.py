"""
Spreadsheet codec: workbook bytes <-> header-keyed rows.

Reads the first sheet of an .xlsx workbook (openpyxl) or a CSV file, and
writes single-sheet .xlsx workbooks for export. Knows nothing about products
or ingredients; the transfer service maps rows onto entities.
"""

from __future__ import annotations

import csv
import io
import os
from typing import Any, Iterable, Sequence
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from shared.config.logging import get_logger
from shared.utils.exceptions import SpreadsheetError

logger = get_logger(__name__)

Row = dict[str, Any]


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _header(value: Any, position: int) -> str:
    if value is None or not str(value).strip():
        return f"__column_{position}"
    return str(value).strip()


def _read_xlsx(content: bytes) -> list[Row]:
    try:
        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, ValueError, OSError) as exc:
        raise SpreadsheetError(str(exc) or exc.__class__.__name__) from exc

    try:
        if not workbook.worksheets:
            return []
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        header_row = next(rows, None)
        if header_row is None:
            return []
        headers = [_header(value, i) for i, value in enumerate(header_row)]

        records: list[Row] = []
        for values in rows:
            if all(_is_blank(v) for v in values):
                continue
            records.append(
                {headers[i]: value for i, value in enumerate(values) if i < len(headers)}
            )
        return records
    finally:
        workbook.close()


def _read_csv(content: bytes) -> list[Row]:
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SpreadsheetError("CSV file is not UTF-8 encoded") from exc

    try:
        reader = csv.reader(io.StringIO(text))
        header_row = next(reader, None)
        if header_row is None:
            return []
        headers = [_header(value, i) for i, value in enumerate(header_row)]

        records: list[Row] = []
        for values in reader:
            if all(_is_blank(v) for v in values):
                continue
            records.append(
                {headers[i]: value for i, value in enumerate(values) if i < len(headers)}
            )
        return records
    except csv.Error as exc:
        raise SpreadsheetError(str(exc)) from exc


def read_rows(content: bytes, filename: str | None = None) -> list[Row]:
    """
    Parse the first sheet into header-keyed rows, skipping blank rows.

    CSV is chosen by the ``.csv`` extension; everything else is read as xlsx.

    Raises:
        SpreadsheetError: the file cannot be parsed at all.
    """
    extension = os.path.splitext(filename or "")[1].lower()
    if extension == ".csv":
        records = _read_csv(content)
    else:
        records = _read_xlsx(content)

    logger.debug("Spreadsheet parsed", filename=filename, rows=len(records))
    return records


def write_workbook(sheet_title: str, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> bytes:
    """Single-sheet .xlsx workbook with a header row."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title
    sheet.append(list(headers))
    for row in rows:
        sheet.append(list(row))

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
