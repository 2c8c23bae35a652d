from __future__ import annotations

import csv
from dataclasses import dataclass, field
from io import BytesIO, StringIO
import logging
from pathlib import Path
from typing import Sequence

from openpyxl import load_workbook

from .mapping import map_headers, missing_fields, to_text


logger = logging.getLogger(__name__)

MAX_CATALOG_SIZE = 65000
SPREADSHEET_SUFFIXES = {".xlsx"}
DELIMITED_SUFFIXES = {".csv", ".tsv"}
TEXT_ENCODINGS = ("utf-8-sig", "cp1252")
SNIFF_SAMPLE_SIZE = 16384


class IngestionError(ValueError):
    message_key = "ingest_error_generic"

    def __init__(self, message: str, **message_args: object) -> None:
        super().__init__(message)
        self.message_args = message_args


class UnsupportedFormat(IngestionError):
    message_key = "ingest_error_unsupported"

    def __init__(self, extension: str) -> None:
        super().__init__(
            f"File format not supported ({extension or 'no extension'}). Please upload CSV, TSV, or Excel.",
            extension=extension,
        )
        self.extension = extension


class EmptyOrHeaderOnly(IngestionError):
    message_key = "ingest_error_empty"

    def __init__(self) -> None:
        super().__init__("File is empty or contains only headers.")


class MissingColumns(IngestionError):
    message_key = "ingest_error_missing_columns"

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        columns = ", ".join(self.missing)
        super().__init__(f"Missing required columns: {columns}", columns=columns)


class MalformedFile(IngestionError):
    message_key = "ingest_error_malformed"

    def __init__(self, detail: str) -> None:
        super().__init__(detail, detail=detail)
        self.detail = detail


class SizeExceeded(IngestionError):
    message_key = "ingest_error_size"

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"File contains {count} items, exceeding the limit of {limit}.",
            count=count,
            limit=limit,
        )
        self.count = count
        self.limit = limit


@dataclass(frozen=True)
class PartRecord:
    item_no: str = ""
    item_description: str = ""
    item_group: str = ""
    model: str = ""
    bhl_hln_flag: str = ""
    hsn_tax: str = ""
    sale_rate: str = ""
    mrp: str = ""


@dataclass
class IngestResult:
    records: list[PartRecord]
    source_name: str
    rows_read: int = 0
    duplicates_replaced: int = 0
    ignored_headers: list[str] = field(default_factory=list)


def ingest_catalog(filename: str, data: bytes, max_records: int = MAX_CATALOG_SIZE) -> IngestResult:
    suffix = Path(filename).suffix.lower()
    if suffix in SPREADSHEET_SUFFIXES:
        rows = read_spreadsheet_rows(data)
    elif suffix in DELIMITED_SUFFIXES:
        rows = read_delimited_rows(data, suffix)
    else:
        raise UnsupportedFormat(suffix)

    headers = rows[0] if rows else []
    fields = map_headers(headers)
    missing = missing_fields(fields)
    if missing:
        raise MissingColumns(missing)

    parsed = [extract_record(row, fields) for row in rows[1:]]
    if len(parsed) > max_records:
        raise SizeExceeded(len(parsed), max_records)

    records, duplicates = dedupe_records(parsed)
    ignored = [to_text(raw) for raw, resolved in zip(headers, fields) if resolved is None and to_text(raw)]
    logger.info(
        "Ingested %s: rows=%d, parts=%d, duplicates=%d, ignored_columns=%d",
        filename,
        len(parsed),
        len(records),
        duplicates,
        len(ignored),
    )
    return IngestResult(
        records=records,
        source_name=Path(filename).name,
        rows_read=len(parsed),
        duplicates_replaced=duplicates,
        ignored_headers=ignored,
    )


def read_spreadsheet_rows(data: bytes) -> list[list[object]]:
    try:
        wb = load_workbook(BytesIO(data), read_only=True, data_only=True)
        try:
            if not wb.worksheets:
                raise MalformedFile("Workbook contains no sheets.")
            ws = wb.worksheets[0]
            rows = [list(row) for row in ws.iter_rows(values_only=True) if not is_blank_row(row)]
        finally:
            wb.close()
    except IngestionError:
        raise
    except Exception as exc:
        raise MalformedFile("Failed to parse Excel file.") from exc
    if len(rows) < 2:
        raise EmptyOrHeaderOnly()
    return rows


def read_delimited_rows(data: bytes, suffix: str) -> list[list[object]]:
    text = decode_text(data)
    delimiter = sniff_delimiter(text, suffix)
    try:
        reader = csv.reader(StringIO(text, newline=""), delimiter=delimiter)
        return [list(row) for row in reader if not is_empty_line(row)]
    except csv.Error as exc:
        raise MalformedFile(f"CSV parsing error: {exc}") from exc


def decode_text(data: bytes) -> str:
    last_error: UnicodeDecodeError | None = None
    for encoding in TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            last_error = exc
    raise MalformedFile("Could not decode the file as text.") from last_error


def sniff_delimiter(text: str, suffix: str) -> str:
    fallback = "\t" if suffix == ".tsv" else ","
    sample = text[:SNIFF_SAMPLE_SIZE]
    if not sample.strip():
        return fallback
    try:
        return csv.Sniffer().sniff(sample, delimiters=",\t").delimiter
    except csv.Error:
        return fallback


def is_blank_row(row: Sequence[object]) -> bool:
    return all(value is None or (isinstance(value, str) and not value.strip()) for value in row)


def is_empty_line(row: Sequence[str]) -> bool:
    # a bare line break; delimiter-only lines still carry cells
    return len(row) <= 1 and is_blank_row(row)


def extract_record(cells: Sequence[object], fields: Sequence[str | None]) -> PartRecord:
    values: dict[str, str] = {}
    for idx, canonical in enumerate(fields):
        if canonical is None:
            continue
        values[canonical] = to_text(cells[idx]) if idx < len(cells) else ""
    return PartRecord(**values)


def dedupe_records(records: list[PartRecord]) -> tuple[list[PartRecord], int]:
    by_item_no: dict[str, int] = {}
    result: list[PartRecord] = []
    duplicates = 0
    for record in records:
        if not record.item_no:
            result.append(record)
            continue
        existing = by_item_no.get(record.item_no)
        if existing is None:
            by_item_no[record.item_no] = len(result)
            result.append(record)
        else:
            result[existing] = record
            duplicates += 1
    return result, duplicates
