"""Module: summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable


@dataclass(frozen=True)
class MedicationEntry:
    name: str
    status: str  # completed | scheduled | overdue
    is_primary: bool


# Calendar cell contents for one day.
@dataclass
class DailySummary:
    date: date
    medications: list[MedicationEntry] = field(default_factory=list)
    has_records: bool = False
    total_scheduled: int = 0
    total_completed: int = 0


def daily_summary(
    records: Iterable,
    *,
    start: date | None = None,
    end: date | None = None,
    primary_due_date: date | None = None,
    primary_medication_name: str | None = None,
    today: date | None = None,
) -> dict[date, DailySummary]:
    """
    Group dose records by the day they were given.

    When primary_due_date falls inside [start, end] and no primary dose was
    logged that day, the day also gets a "scheduled" entry, or "overdue" if
    the day is already behind today.
    """
    today = today or date.today()
    days: dict[date, DailySummary] = {}

    for record in records:
        day = record.recorded_date
        if (start and day < start) or (end and day > end):
            continue
        summary = days.setdefault(day, DailySummary(date=day))
        summary.medications.append(
            MedicationEntry(
                name=record.medication_name,
                status="completed",
                is_primary=bool(record.is_primary_medication),
            )
        )
        summary.has_records = True
        summary.total_completed += 1

    if primary_due_date is not None:
        in_window = (start is None or primary_due_date >= start) and (
            end is None or primary_due_date <= end
        )
        existing = days.get(primary_due_date)
        already_given = existing is not None and any(m.is_primary for m in existing.medications)
        if in_window and not already_given:
            summary = days.setdefault(primary_due_date, DailySummary(date=primary_due_date))
            summary.medications.append(
                MedicationEntry(
                    name=primary_medication_name or "",
                    status="overdue" if primary_due_date < today else "scheduled",
                    is_primary=True,
                )
            )
            summary.total_scheduled += 1

    return dict(sorted(days.items()))
