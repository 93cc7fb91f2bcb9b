"""The canonical employee record and its external JSON shape."""

from dataclasses import dataclass, field

from orgchart.utils.types import CustomFields, RecordID, Redundancy, ReportingType

UNKNOWN_NAME = "Unknown"

# Record attribute -> key in the JSON shape shared with renderers and exporters
JSON_KEYS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "designation": "designation",
    "band": "band",
    "function": "function",
    "salary": "salary",
    "parent_id": "parentId",
    "raw_supervisor_id": "rawSupervisorId",
    "raw_supervisor_name": "rawSupervisorName",
    "reporting_type": "reportingType",
    "redundant": "redundant",
}

_ATTRS_BY_JSON_KEY = {v: k for k, v in JSON_KEYS.items()}


@dataclass(frozen=True)
class EmployeeRecord:
    id: RecordID
    name: str = UNKNOWN_NAME
    designation: str = ""
    band: str = ""
    function: str = ""
    salary: str = ""
    parent_id: RecordID = ""
    raw_supervisor_id: str | None = None
    raw_supervisor_name: str | None = None
    reporting_type: ReportingType = ReportingType.DIRECT
    redundant: Redundancy = Redundancy.NO
    custom_fields: CustomFields = field(default_factory=dict)

    @property
    def is_root(self) -> bool:
        return not self.parent_id

    @property
    def is_redundant(self) -> bool:
        return self.redundant == Redundancy.YES

    @property
    def non_empty_custom_fields(self) -> CustomFields:
        return {k: v for k, v in self.custom_fields.items() if str(v).strip()}

    def to_dict(self) -> dict[str, str | None]:
        # Canonical keys go last so a custom field can never shadow them
        data: dict[str, str | None] = dict(self.custom_fields)
        for attr, json_key in JSON_KEYS.items():
            data.pop(json_key, None)
            data[json_key] = getattr(self, attr)
        data["reportingType"] = str(self.reporting_type)
        data["redundant"] = str(self.redundant)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "EmployeeRecord":
        """Rebuild a record from its JSON shape; unknown keys become custom fields."""
        kwargs: dict = {}
        custom: CustomFields = {}
        for key, value in data.items():
            attr = _ATTRS_BY_JSON_KEY.get(key)
            if attr is None:
                custom[key] = "" if value is None else str(value)
            else:
                kwargs[attr] = value
        kwargs["id"] = str(kwargs.get("id", "")).strip()
        kwargs["parent_id"] = str(kwargs.get("parent_id") or "")
        kwargs["reporting_type"] = ReportingType(kwargs.get("reporting_type") or ReportingType.DIRECT)
        kwargs["redundant"] = Redundancy(str(kwargs.get("redundant") or "N").upper()[:1])
        return cls(**kwargs, custom_fields=custom)
