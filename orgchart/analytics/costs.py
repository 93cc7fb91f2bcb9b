"""Salary cost rollups: monthly, annual and fully-loaded, as-is and optimized."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from orgchart.analytics.subtree import descendants
from orgchart.config import CostConfig, load_chart_config
from orgchart.hierarchy.records import EmployeeRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostBreakdown:
    monthly: float
    annual: float
    fully_loaded: float


@dataclass(frozen=True)
class CostSummary:
    as_is: CostBreakdown
    # None unless at least one redundant employee is in the set
    optimized: CostBreakdown | None
    headcount: int

    @property
    def has_redundancy(self) -> bool:
        return self.optimized is not None

    @property
    def savings(self) -> CostBreakdown | None:
        if self.optimized is None:
            return None
        return CostBreakdown(
            monthly=self.as_is.monthly - self.optimized.monthly,
            annual=self.as_is.annual - self.optimized.annual,
            fully_loaded=self.as_is.fully_loaded - self.optimized.fully_loaded,
        )


def parse_salary(value: object) -> float:
    """Read a free-text monthly salary such as ``"120k"`` or ``"$95,000"``.

    Currency symbols, separators and whitespace are dropped; a trailing ``k``
    (any case) multiplies by 1000. Anything unreadable counts as 0.
    """
    if value is None:
        return 0.0
    cleaned = re.sub(r"[^0-9k.]", "", str(value).lower())
    multiplier = 1.0
    if cleaned.endswith("k"):
        multiplier = 1000.0
        cleaned = cleaned[:-1]
    try:
        return float(cleaned) * multiplier
    except ValueError:
        return 0.0


def _breakdown(monthly: float, loaded_cost_percentage: float, config: CostConfig) -> CostBreakdown:
    annual = monthly * config.months_per_year
    return CostBreakdown(
        monthly=monthly,
        annual=annual,
        fully_loaded=annual * loaded_cost_percentage / 100,
    )


def compute_costs(
    records: Sequence[EmployeeRecord],
    loaded_cost_percentage: float | None = None,
    config: CostConfig | None = None,
) -> CostSummary:
    """Total the salaries of ``records``; the optimized view drops redundant roles."""
    if config is None:
        config = load_chart_config().cost
    if loaded_cost_percentage is None:
        loaded_cost_percentage = config.loaded_cost_percentage

    frame = pd.DataFrame(
        {
            "monthly": [parse_salary(r.salary) for r in records],
            "redundant": [r.is_redundant for r in records],
        },
        dtype=object,
    )
    monthly = frame["monthly"].astype(float)
    redundant = frame["redundant"].astype(bool)

    as_is = _breakdown(float(monthly.sum()), loaded_cost_percentage, config)
    optimized = None
    if redundant.any():
        optimized = _breakdown(float(monthly[~redundant].sum()), loaded_cost_percentage, config)

    logger.info(
        "Costed %d employees: %.0f/month (%d redundant)",
        len(records),
        as_is.monthly,
        int(redundant.sum()),
    )
    return CostSummary(as_is=as_is, optimized=optimized, headcount=len(records))


def subtree_costs(
    records: Sequence[EmployeeRecord],
    node_id: str,
    loaded_cost_percentage: float | None = None,
    config: CostConfig | None = None,
) -> CostSummary:
    """Costs of ``node_id`` and everyone reporting to them, directly or not."""
    return compute_costs(descendants(records, node_id), loaded_cost_percentage, config)
