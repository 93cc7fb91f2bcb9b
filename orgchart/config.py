"""Chart configuration: layout geometry and cost defaults."""

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

type ConfigDict = dict[str, str | int | float | bool | dict]


@dataclass(frozen=True)
class LayoutConfig:
    node_width: float
    base_height: float
    salary_height: float
    custom_field_height: float
    rank_sep: float
    node_sep: float
    focus_zoom: float
    annotation_font_size: str = "24px"
    annotation_font_family: str = "Arial"


@dataclass(frozen=True)
class CostConfig:
    loaded_cost_percentage: float
    months_per_year: int = 12


@dataclass(frozen=True)
class ChartConfig:
    layout: LayoutConfig
    cost: CostConfig
    direction: str = "vertical"
    show_salary: bool = False


def load_chart_config(profile: str = "default") -> ChartConfig:
    match profile:
        case "default":
            layout = LayoutConfig(
                node_width=250,
                base_height=140,
                salary_height=160,
                custom_field_height=20,
                rank_sep=50,
                node_sep=50,
                focus_zoom=1.2,
            )
        case "compact":
            layout = LayoutConfig(
                node_width=250,
                base_height=140,
                salary_height=160,
                custom_field_height=20,
                rank_sep=30,
                node_sep=20,
                focus_zoom=1.5,
            )
        case "presentation":
            layout = LayoutConfig(
                node_width=250,
                base_height=140,
                salary_height=160,
                custom_field_height=20,
                rank_sep=100,
                node_sep=80,
                focus_zoom=1.0,
                annotation_font_size="32px",
            )
        case other:
            raise ValueError(f"Unknown chart profile: {other}")

    return ChartConfig(layout=layout, cost=CostConfig(loaded_cost_percentage=125.0))


def apply_overrides(config: ChartConfig, overrides: ConfigDict) -> ChartConfig:
    """Merge a ``[tool.orgchart]``-style table into a config.

    Top-level scalar keys override ``ChartConfig`` fields; the ``layout`` and
    ``cost`` sub-tables override the matching nested dataclass.
    """
    layout_keys = {f.name for f in fields(LayoutConfig)}
    cost_keys = {f.name for f in fields(CostConfig)}
    top_keys = {"direction", "show_salary"}

    layout, cost, top = config.layout, config.cost, {}
    for key, value in overrides.items():
        match key, value:
            case "layout", dict(table):
                unknown = set(table) - layout_keys
                if unknown:
                    raise ValueError(f"Unknown layout settings: {sorted(unknown)}")
                layout = replace(layout, **table)
            case "cost", dict(table):
                unknown = set(table) - cost_keys
                if unknown:
                    raise ValueError(f"Unknown cost settings: {sorted(unknown)}")
                cost = replace(cost, **table)
            case "profile", _:
                continue
            case name, _ if name in top_keys:
                top[name] = value
            case name, _:
                raise ValueError(f"Unknown chart setting: {name}")

    return replace(config, layout=layout, cost=cost, **top)


def get_env_config(pyproject: Path | None = None) -> ConfigDict:
    """Read chart config from pyproject.toml."""
    if pyproject is None:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("orgchart", {})
