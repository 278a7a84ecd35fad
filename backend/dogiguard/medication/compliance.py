"""Module: compliance."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable


# One logged dose. ORM rows exposing the same attribute names are accepted
# anywhere a DoseRecord is.
@dataclass(frozen=True)
class DoseRecord:
    medication_name: str
    recorded_date: date
    scheduled_date: date | None = None
    is_primary_medication: bool = False
    subject_id: uuid.UUID | None = None
    id: uuid.UUID | None = None
    dosage: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class MedicationStats:
    medication_name: str
    total_doses: int
    on_time_doses: int
    delayed_doses: int
    average_interval_days: float | None
    compliance_rate: float | None


class TimingStatus(str, Enum):
    ON_TIME = "on_time"
    DELAYED = "delayed"
    EARLY = "early"
    UNSCHEDULED = "unscheduled"


def timing_status(record) -> TimingStatus:
    scheduled = record.scheduled_date
    if scheduled is None:
        return TimingStatus.UNSCHEDULED
    if record.recorded_date == scheduled:
        return TimingStatus.ON_TIME
    if record.recorded_date > scheduled:
        return TimingStatus.DELAYED
    return TimingStatus.EARLY


def _average_interval(dates: list[date]) -> float | None:
    if len(dates) < 2:
        return None
    gaps = [(later - earlier).days for earlier, later in zip(dates, dates[1:])]
    return sum(gaps) / len(gaps)


def _group_stats(name: str, records: list) -> MedicationStats:
    records = sorted(records, key=lambda r: r.recorded_date)
    scheduled = [r for r in records if r.scheduled_date is not None]
    on_time = sum(1 for r in scheduled if r.recorded_date == r.scheduled_date)
    delayed = sum(1 for r in scheduled if r.recorded_date > r.scheduled_date)

    rate = None
    if scheduled:
        rate = round(on_time / len(scheduled) * 100, 1)

    return MedicationStats(
        medication_name=name,
        total_doses=len(records),
        on_time_doses=on_time,
        delayed_doses=delayed,
        average_interval_days=_average_interval([r.recorded_date for r in records]),
        compliance_rate=rate,
    )


def medication_stats(records: Iterable, medication_filter: str | None = None) -> list[MedicationStats]:
    """
    Per-medication dose statistics, recomputed from scratch on every call.

    Records are grouped by exact medication_name; "Heartgard" and
    "heartgard " are different medications here. Groups come back in the
    order their first record appears in the input.
    """
    groups: dict[str, list] = {}
    for record in records:
        if medication_filter is not None and record.medication_name != medication_filter:
            continue
        groups.setdefault(record.medication_name, []).append(record)

    return [_group_stats(name, group) for name, group in groups.items()]
