"""
Spreadsheet import/export adapter.

Import maps loosely-headed rows onto the write models' input shape, validates
each row and persists valid rows one at a time. Failing rows are reported as
"Row N: <reason>" and skipped; nothing is rolled back.

Export projects entities onto a fixed set of columns.

Usage:
    outcome = import_rows(rows, PRODUCT_HEADER_ALIASES, validate_product, repo.create)
    content = export_workbook(products, ExportColumns.PRODUCTS, "Products")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Iterable, Mapping, Sequence

from inventory_api.services.spreadsheet import Row, write_workbook
from inventory_api.services.validation import ValidationResult
from shared.config.logging import transfer_logger as logger
from shared.utils.exceptions import UpstreamError

# Row numbers shown to users: data index + 1 for the header + 1 for 1-based rows
FIRST_DATA_ROW = 2


def normalize_header(header: str) -> str:
    """'Net Volume', 'net_volume', 'netVolume' -> 'netvolume'."""
    return "".join(ch for ch in str(header).lower() if ch not in " _-")


def cell_to_text(value: Any) -> str | None:
    """Spreadsheet cell as text; integral floats lose their '.0'."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def map_row(row: Row, aliases: Mapping[str, str]) -> dict[str, str]:
    """
    Pick entity fields out of a header-keyed row.
    The first non-blank cell whose header matches an alias wins.
    """
    mapped: dict[str, str] = {}
    for header, value in row.items():
        target = aliases.get(normalize_header(header))
        if target is None or target in mapped:
            continue
        text = cell_to_text(value)
        if text is not None:
            mapped[target] = text
    return mapped


@dataclass
class ImportOutcome:
    """Persisted entities plus one message per rejected row."""

    imported: list[Any] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def import_rows(
    rows: Sequence[Row],
    aliases: Mapping[str, str],
    validate: Callable[[Any], ValidationResult],
    create: Callable[[dict[str, Any]], Any],
    *,
    entity: str = "row",
) -> ImportOutcome:
    """Validate and insert each row; failures are collected, never raised."""
    outcome = ImportOutcome()

    for index, row in enumerate(rows):
        label = f"Row {index + FIRST_DATA_ROW}"
        payload = map_row(row, aliases)

        if not payload.get("name"):
            outcome.errors.append(f"{label}: Name is required")
            continue

        result = validate(payload)
        if not result.ok:
            outcome.errors.append(f"{label}: {', '.join(result.messages)}")
            continue

        try:
            outcome.imported.append(create(result.data))
        except UpstreamError as exc:
            outcome.errors.append(f"{label}: {exc.message}")

    logger.info(
        "Spreadsheet import finished",
        entity=entity,
        rows=len(rows),
        imported=len(outcome.imported),
        rejected=len(outcome.errors),
    )
    return outcome


def _export_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return value


def export_rows(entities: Iterable[Any], columns: Sequence[tuple[str, str]]) -> list[list[Any]]:
    """Fixed projection: one list of cell values per entity."""
    return [[_export_value(getattr(entity, attr)) for _, attr in columns] for entity in entities]


def export_workbook(
    entities: Iterable[Any],
    columns: Sequence[tuple[str, str]],
    sheet_title: str,
) -> bytes:
    """Entities as a single-sheet .xlsx workbook."""
    rows = export_rows(entities, columns)
    logger.info("Spreadsheet export built", sheet=sheet_title, rows=len(rows))
    return write_workbook(sheet_title, [header for header, _ in columns], rows)
