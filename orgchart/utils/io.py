"""File I/O utilities for reading employee sheets and writing chart output."""

import json
from pathlib import Path

import pandas as pd
from rich.console import Console

from orgchart.utils.transforms import normalize_columns
from orgchart.utils.types import Row

type FilePath = str | Path

console = Console()


def read_tabular_file(path: FilePath, sheet_name: str | int = 0) -> list[Row]:
    """Read a CSV or Excel sheet into row dicts, header row consumed.

    Every cell is read as text so ids such as ``007`` survive untouched.
    """
    path = Path(path)

    match path.suffix.lower():
        case ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        case ".xlsx":
            df = pd.read_excel(path, sheet_name=sheet_name, dtype=str, engine="openpyxl")
        case ".xls":
            df = pd.read_excel(path, sheet_name=sheet_name, dtype=str, engine="xlrd")
        case ext:
            raise ValueError(f"Unsupported input format: {ext}")

    df = normalize_columns(df)
    console.print(f"  Read {len(df)} rows from {path.name}")
    return rows_from_frame(df)


def rows_from_frame(df: pd.DataFrame) -> list[Row]:
    """Convert a DataFrame to row dicts in frame order, blanks as ``""``."""
    return df.astype(object).where(df.notna(), "").to_dict(orient="records")


def write_output(df: pd.DataFrame, path: FilePath, fmt: str | None = None) -> None:
    """Write a table such as the layout geometry; ``fmt`` defaults to the suffix."""
    path = Path(path)
    fmt = fmt or path.suffix.lower().lstrip(".")

    match fmt:
        case "csv":
            writer = lambda p: df.to_csv(p, index=False)
        case "parquet":
            writer = lambda p: df.to_parquet(p, index=False)
        case "xlsx" | "excel":
            writer = lambda p: df.to_excel(p, index=False, engine="openpyxl")
        case "json":
            writer = lambda p: df.to_json(p, orient="records", indent=2)
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    path.parent.mkdir(parents=True, exist_ok=True)
    writer(path)
    console.print(f"  Wrote {len(df)} rows to {path}")


def write_json(payload: dict | list, path: FilePath) -> None:
    """Write a JSON document, e.g. a layout snapshot for a renderer."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    console.print(f"  Wrote {path}")

