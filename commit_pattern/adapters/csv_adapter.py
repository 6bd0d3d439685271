"""CSV adapter for planned event schedules."""

from __future__ import annotations

import csv
from datetime import datetime
from typing import Iterable

from commit_pattern.schema import Event

FIELDS = ["timestamp", "target_file", "annotation_text"]


def _parse_row(row: dict, row_number: int) -> Event:
    missing = [field for field in FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        timestamp = datetime.fromisoformat(row["timestamp"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed timestamp") from exc

    return Event(
        timestamp=timestamp,
        target_file=row["target_file"].strip(),
        annotation_text=row["annotation_text"],
    )


def write(events: Iterable[Event], file_path: str) -> int:
    """Write events to CSV and return the number of rows written."""

    count = 0
    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDS)
        writer.writeheader()
        for event in events:
            writer.writerow(
                {
                    "timestamp": event.timestamp.isoformat(),
                    "target_file": event.target_file,
                    "annotation_text": event.annotation_text,
                }
            )
            count += 1
    return count


def parse(file_path: str) -> list[Event]:
    """Parse a CSV schedule into events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []
        return [_parse_row(row, row_number) for row_number, row in enumerate(reader, start=2)]
