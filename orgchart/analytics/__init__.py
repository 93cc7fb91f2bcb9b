"""Read-side queries over a resolved chart: subtrees, statistics, costs, search."""

from orgchart.analytics.subtree import (
    descendants,
    direct_report_counts,
    max_depth,
    path_to_root,
    span_of_control,
)
from orgchart.analytics.stats import OrgStatistics, headcount_by_function, org_statistics
from orgchart.analytics.costs import (
    CostBreakdown,
    CostSummary,
    compute_costs,
    parse_salary,
    subtree_costs,
)
from orgchart.analytics.search import filter_by_function, list_functions, search_employees
