"""Validation helpers returning ``{"valid", "status", "errors"}`` outcomes."""

import pandas as pd
import pandera as pa
from pandera import DataFrameSchema

from orgchart.utils.transforms import to_text
from orgchart.utils.types import ValidationOutcome


def _outcome(errors: list[str]) -> ValidationOutcome:
    match errors:
        case []:
            return {"valid": True, "status": "ok", "errors": []}
        case _:
            return {"valid": False, "status": "error", "errors": errors}


def _describe_failure(failure: dict) -> str:
    match failure:
        case {"column": col, "check": check, "failure_case": val}:
            return f"Column '{col}' failed check '{check}': {val}"
        case _:
            return f"Validation failure: {failure}"


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationOutcome:
    """Run a pandera schema lazily and collect every failure case."""
    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as exc:
        cases = exc.failure_cases
    else:
        return _outcome([])

    # Frame-wide checks report one failure case per column of each failing row
    frame_wide = (cases["schema_context"] == "DataFrameSchema") & cases["index"].notna()
    errors = [_describe_failure(row.to_dict()) for _, row in cases[~frame_wide].iterrows()]
    for check, group in cases[frame_wide].groupby("check", sort=False):
        rows = ", ".join(dict.fromkeys(to_text(i) for i in group["index"]))
        errors.append(f"Frame check '{check}' failed on row(s) {rows}")
    return _outcome(errors)


def validate_unique(df: pd.DataFrame, column: str) -> ValidationOutcome:
    """Check that ``column`` holds no repeated key."""
    repeated = df.loc[df.duplicated(subset=[column]), column].astype(str).unique()
    if len(repeated) == 0:
        return _outcome([])
    sample = sorted(repeated)[:5]
    return _outcome([f"Found {len(repeated)} duplicate {column} value(s). Sample: {sample}"])


def validate_referential_integrity(
    child: pd.DataFrame,
    parent: pd.DataFrame,
    child_key: str,
    parent_key: str,
) -> ValidationOutcome:
    """Every non-blank ``child_key`` must appear in ``parent[parent_key]``."""
    keys = child[child_key]
    keys = keys[keys.notna() & (keys != "")]
    orphans = sorted(set(keys) - set(parent[parent_key]))
    if not orphans:
        return _outcome([])
    return _outcome([f"Found {len(orphans)} orphan {child_key} value(s). Sample: {orphans[:5]}"])


def merge_outcomes(*outcomes: ValidationOutcome) -> ValidationOutcome:
    """Fold several validation outcomes into one."""
    return _outcome([err for outcome in outcomes for err in outcome["errors"]])
