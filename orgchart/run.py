"""Command-line runner: resolve an employee sheet and write its chart layout."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from orgchart.analytics import compute_costs, org_statistics
from orgchart.config import ChartConfig, apply_overrides, get_env_config, load_chart_config
from orgchart.hierarchy import NoRootError, ResolutionResult, resolve_hierarchy, validate_records
from orgchart.layout import compute_layout, layout_bounds
from orgchart.utils.io import read_tabular_file, write_json, write_output

console = Console()
logger = logging.getLogger("orgchart")


def load_config(profile: str | None = None) -> ChartConfig:
    """Profile defaults, overridden by ``orgchart.yaml`` or ``[tool.orgchart]``."""
    config_path = Path.cwd() / "orgchart.yaml"
    if config_path.exists():
        import yaml
        with open(config_path) as f:
            overrides = yaml.safe_load(f) or {}
    else:
        overrides = get_env_config()

    profile = profile or overrides.get("profile", "default")
    return apply_overrides(load_chart_config(profile), overrides)


def _print_warnings(result: ResolutionResult) -> None:
    if not result.warnings:
        return
    table = Table(title=f"{len(result.warnings)} data warning(s)")
    table.add_column("Kind")
    table.add_column("Employee")
    table.add_column("Details")
    for warning in result.warnings:
        table.add_row(str(warning.kind), warning.record_id, warning.message)
    console.print(table)


def _print_statistics(result: ResolutionResult, loaded_cost: float, show_salary: bool) -> None:
    stats = org_statistics(result.records)
    table = Table(title="Chart Insights")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Headcount", str(stats.total_headcount))
    table.add_row("Average span of control", f"{stats.average_span:.1f}")
    table.add_row("Hierarchy depth", str(stats.max_depth))
    for function, count in stats.functions:
        table.add_row(f"  {function}", str(count))
    console.print(table)

    if not show_salary:
        return

    costs = compute_costs(result.records, loaded_cost)
    cost_table = Table(title="Cost Analysis")
    cost_table.add_column("")
    cost_table.add_column("As-Is", justify="right")
    if costs.optimized is not None:
        cost_table.add_column("Excl. Redundant", justify="right", style="green")
    for label, attr in (("Monthly", "monthly"), ("Annual", "annual"), ("Fully Loaded", "fully_loaded")):
        row = [label, f"{getattr(costs.as_is, attr):,.0f}"]
        if costs.optimized is not None:
            row.append(f"{getattr(costs.optimized, attr):,.0f}")
        cost_table.add_row(*row)
    console.print(cost_table)


def main():
    parser = argparse.ArgumentParser(description="Build an org chart layout from an employee sheet")
    parser.add_argument("input", type=Path, help="CSV or Excel file, header row first")
    parser.add_argument("--direction", choices=["vertical", "horizontal"], help="Chart orientation")
    parser.add_argument("--show-salary", action="store_true", default=None, help="Size cards for the salary line and print costs")
    parser.add_argument("--loaded-cost", type=float, help="Fully-loaded cost percentage")
    parser.add_argument("--profile", type=str, help="Layout profile (default, compact, presentation)")
    parser.add_argument("--output", type=Path, default=Path("output/layout.json"), help="Layout JSON path")
    parser.add_argument("--geometry", type=Path, help="Also write node geometry as a table (.csv, .parquet, .xlsx, .json)")
    parser.add_argument("--validate", action="store_true", help="Only resolve and validate, don't lay out")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show info-level logs")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = load_config(args.profile)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    direction = args.direction or config.direction
    show_salary = config.show_salary if args.show_salary is None else args.show_salary
    loaded_cost = args.loaded_cost if args.loaded_cost is not None else config.cost.loaded_cost_percentage

    rows = read_tabular_file(args.input)
    try:
        result = resolve_hierarchy(rows)
    except NoRootError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        sys.exit(1)

    _print_warnings(result)

    outcome = validate_records(result.records)
    status = "[green]✓[/green]" if outcome["valid"] else "[red]✗[/red]"
    console.print(f"{status} {len(result.records)} employees, {len(result.roots)} root(s)")
    for error in outcome["errors"]:
        console.print(f"  [red]{error}[/red]")
    if args.validate:
        if not outcome["valid"]:
            sys.exit(1)
        return

    _print_statistics(result, loaded_cost, show_salary)

    layout = compute_layout(
        result.records,
        direction=direction,
        show_salary=show_salary,
        config=config.layout,
    )
    payload = layout.to_dict()
    bounds = layout_bounds(layout.nodes)
    if bounds is not None:
        payload["bounds"] = {"x": bounds.x, "y": bounds.y, "width": bounds.width, "height": bounds.height}
    write_json(payload, args.output)
    if args.geometry:
        write_output(layout.to_frame(), args.geometry)


if __name__ == "__main__":
    main()
