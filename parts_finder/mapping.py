from __future__ import annotations

from datetime import date, datetime, time
import re
from typing import Iterable


REQUIRED_FIELDS = (
    "item_no",
    "item_description",
    "item_group",
    "model",
    "bhl_hln_flag",
    "hsn_tax",
    "sale_rate",
    "mrp",
)

CANONICAL_FIELDS = {
    "item_no": {"itemno", "itemnumber"},
    "item_description": {"itemdescription", "description", "itemdesc"},
    "item_group": {"itemgroup"},
    "model": {"model"},
    "bhl_hln_flag": {"bhlhlnflag"},
    "hsn_tax": {"hsntax", "hsntaxpercent"},
    "sale_rate": {"salerate"},
    "mrp": {"mrp"},
}


def normalize_header(value: object) -> str:
    text = str(value if value is not None else "").strip().lower()
    return re.sub(r"[^a-z0-9]", "", text)


def resolve_field(raw: object) -> str | None:
    norm = normalize_header(raw)
    if not norm:
        return None
    for canonical, synonyms in CANONICAL_FIELDS.items():
        if norm == canonical.replace("_", "") or norm in synonyms:
            return canonical
    return None


def map_headers(headers: Iterable[object]) -> list[str | None]:
    return [resolve_field(raw) for raw in headers]


def missing_fields(resolved: Iterable[str | None]) -> list[str]:
    found = {field for field in resolved if field}
    return [field for field in REQUIRED_FIELDS if field not in found]


def to_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value).strip()
