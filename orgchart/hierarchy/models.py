"""Pandera schemas for resolved employee records."""

from collections.abc import Sequence

import pandas as pd
import pandera as pa
from pandera import Column, Check

from orgchart.hierarchy.records import JSON_KEYS, EmployeeRecord
from orgchart.utils.types import Redundancy, ReportingType, ValidationOutcome
from orgchart.utils.validators import (
    merge_outcomes,
    validate_dataframe,
    validate_referential_integrity,
    validate_unique,
)


employee_record_schema = pa.DataFrameSchema(
    {
        "id": Column(str, Check.str_length(min_value=1), nullable=False),
        "name": Column(str, Check.str_length(min_value=1), nullable=False),
        "designation": Column(str, nullable=True),
        "band": Column(str, nullable=True),
        "function": Column(str, nullable=True),
        "salary": Column(str, nullable=True),
        "parentId": Column(str, nullable=False),
        "rawSupervisorId": Column(str, nullable=True),
        "rawSupervisorName": Column(str, nullable=True),
        "reportingType": Column(str, Check.isin([t.value for t in ReportingType])),
        "redundant": Column(str, Check.isin([r.value for r in Redundancy])),
    },
    checks=[
        Check(lambda df: df["parentId"] != df["id"], error="parentId must differ from id"),
    ],
    strict=False,
    coerce=False,
)


def records_frame(records: Sequence[EmployeeRecord]) -> pd.DataFrame:
    """One row per record in the JSON shape; custom fields become extra columns."""
    if not records:
        return pd.DataFrame(columns=list(JSON_KEYS.values()), dtype=str)
    return pd.DataFrame([r.to_dict() for r in records])


def validate_records(records: Sequence[EmployeeRecord]) -> ValidationOutcome:
    """Check a resolved collection: schema, unique ids, no dangling parents."""
    df = records_frame(records)
    return merge_outcomes(
        validate_dataframe(df, employee_record_schema),
        validate_unique(df, "id"),
        validate_referential_integrity(df, df, "parentId", "id"),
    )
