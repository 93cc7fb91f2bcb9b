"""Header normalization and scalar coercion for tabular employee input."""

import math
import re

import pandas as pd

type ColumnMapping = dict[str, str]

# Canonical field -> accepted header spellings (already folded by _fold_header)
HEADER_SYNONYMS: dict[str, tuple[str, ...]] = {
    "id": ("id", "employee id", "emp id"),
    "name": ("name", "employee name", "full name"),
    "designation": ("designation", "role", "title", "job title"),
    "band": ("band", "grade", "level"),
    "function": ("function", "department", "dept"),
    "salary": ("salary", "monthly salary", "pay"),
    "supervisor_id": (
        "supervisor id", "manager id", "reports to id", "parent id", "raw supervisor id",
    ),
    "supervisor_name": (
        "supervisor name", "supervisor", "manager", "manager name", "reports to",
        "raw supervisor name",
    ),
    "reporting_type": ("reporting type", "type", "relationship"),
    "redundant": ("redundant", "redundancy"),
}


def _fold_header(header: str) -> str:
    return re.sub(r"[\s_\-]+", " ", header.strip().lower()).strip()


def _build_lookup() -> ColumnMapping:
    lookup: ColumnMapping = {}
    for canonical, spellings in HEADER_SYNONYMS.items():
        for spelling in spellings:
            lookup[spelling] = canonical
            # "SupervisorID" style headers fold to "supervisorid"
            lookup[spelling.replace(" ", "")] = canonical
    return lookup


_HEADER_LOOKUP = _build_lookup()


def canonical_header(header: str) -> str | None:
    """Return the canonical field for a recognized header, else None."""
    folded = _fold_header(str(header))
    return _HEADER_LOOKUP.get(folded) or _HEADER_LOOKUP.get(folded.replace(" ", ""))


def split_row(row: dict[str, object]) -> tuple[dict[str, object], dict[str, object]]:
    """Split a raw row into (standard fields keyed canonically, custom fields).

    Custom headers keep their original case (trimmed). When a row carries two
    spellings of the same standard field, the first non-blank one wins.
    """
    standard: dict[str, object] = {}
    custom: dict[str, object] = {}
    for header, value in row.items():
        canonical = canonical_header(header)
        if canonical is None:
            custom[str(header).strip()] = value
        elif not to_text(standard.get(canonical)):
            standard[canonical] = value
    return standard, custom


def to_text(value: object) -> str:
    """Coerce a spreadsheet scalar to trimmed text.

    Missing values become ``""``. Integral floats drop their ``.0`` so an id
    read as ``1.0`` matches a supervisor reference read as ``1``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value).strip()


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Trim header whitespace, leaving case intact for custom fields."""
    df = df.copy()
    df.columns = [str(col).strip() for col in df.columns]
    return df
