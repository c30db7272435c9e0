"""Normalization of raw visitor input before it is written to storage.

``defaults`` supplies values for always-kept keys the caller did not send or
sent blank: the model defaults on create, the stored values on update.
"""

from collections.abc import Mapping
from typing import Any

STATUS_FIELDS = ("is_approved", "inprogress", "complete", "exit")
DURATION_UNIT_FIELD = "durationunit"

# Written on every create/update even when blank.
ALWAYS_KEPT_FIELDS = frozenset((DURATION_UNIT_FIELD, *STATUS_FIELDS))

# camelCase names accepted from callers that bypass the request schemas.
WIRE_ALIASES = {
    "isApproved": "is_approved",
    "hostName": "host_name",
}

CREATE_DEFAULTS: dict[str, Any] = {
    DURATION_UNIT_FIELD: None,
    **{field: False for field in STATUS_FIELDS},
}


def normalize_date(value: Any) -> Any:
    # DD-MM-YYYY -> YYYY-MM-DD; anything else passes through.
    if not isinstance(value, str) or "-" not in value:
        return value
    parts = value.split("-")
    if len(parts) == 3 and len(parts[0]) == 2:
        return f"{parts[2]}-{parts[1]}-{parts[0]}"
    return value


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _apply_wire_aliases(data: dict[str, Any]) -> dict[str, Any]:
    for wire_name, field in WIRE_ALIASES.items():
        if wire_name in data:
            value = data.pop(wire_name)
            data.setdefault(field, value)
    return data


def clean_fields(fields: Mapping[str, Any], defaults: Mapping[str, Any] | None = None) -> dict[str, Any]:
    defaults = CREATE_DEFAULTS if defaults is None else defaults
    cleaned = {
        key: value
        for key, value in fields.items()
        if key in ALWAYS_KEPT_FIELDS or not _is_blank(value)
    }
    for key in ALWAYS_KEPT_FIELDS:
        if key not in cleaned:
            cleaned[key] = defaults.get(key)
        elif key in STATUS_FIELDS and _is_blank(cleaned[key]):
            cleaned[key] = defaults.get(key)
    return cleaned


def normalize_visitor_input(
    fields: Mapping[str, Any],
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    data = _apply_wire_aliases(dict(fields))
    if "date" in data:
        data["date"] = normalize_date(data["date"])
    if data.get(DURATION_UNIT_FIELD) == "":
        data[DURATION_UNIT_FIELD] = None
    return clean_fields(data, defaults)
