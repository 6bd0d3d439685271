"""JSON adapter for pattern profiles."""

from __future__ import annotations

import json
from datetime import date

from commit_pattern.schema import DateRange, PatternProfile

_REQUIRED_FIELDS = ("targets", "annotations")


def _string_list(payload: dict, field: str) -> list[str]:
    value = payload[field]
    if not isinstance(value, list) or not value:
        raise ValueError(f"Field '{field}' must be a non-empty list")
    items = []
    for index, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"Field '{field}' item {index}: expected a non-empty string")
        items.append(item.strip())
    return items


def _parse_date(payload: dict, field: str) -> date:
    try:
        return date.fromisoformat(str(payload[field]))
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Field '{field}': malformed date") from exc


def parse_profile(payload: dict) -> PatternProfile:
    """Build a pattern profile from a decoded JSON object."""

    if not isinstance(payload, dict):
        raise ValueError("JSON payload must be an object")

    missing = [field for field in _REQUIRED_FIELDS if field not in payload]
    if missing:
        raise ValueError(f"Missing required fields {missing}")

    date_range = None
    has_start, has_end = "start" in payload, "end" in payload
    if has_start != has_end:
        raise ValueError("Fields 'start' and 'end' must be given together")
    if has_start:
        date_range = DateRange(_parse_date(payload, "start"), _parse_date(payload, "end"))

    probability = None
    if payload.get("probability") is not None:
        if isinstance(payload["probability"], bool):
            raise ValueError("Field 'probability': expected a number")
        try:
            probability = float(payload["probability"])
        except Exception as exc:  # noqa: BLE001
            raise ValueError("Field 'probability': expected a number") from exc
        if not 0.0 <= probability <= 1.0:
            raise ValueError("Field 'probability': must be within [0, 1]")

    return PatternProfile(
        targets=_string_list(payload, "targets"),
        annotations=_string_list(payload, "annotations"),
        date_range=date_range,
        probability=probability,
    )


def parse(file_path: str) -> PatternProfile:
    """Parse a JSON file into a pattern profile."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)
    return parse_profile(payload)
