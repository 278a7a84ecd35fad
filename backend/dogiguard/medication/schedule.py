"""Module: schedule."""

from __future__ import annotations

from datetime import date, datetime, timedelta

# Monthly heartworm prevention is the common case for a dog's primary medication.
DEFAULT_INTERVAL_DAYS = 30


def next_dose_date(last_date: date | datetime, interval_days: int = DEFAULT_INTERVAL_DAYS):
    """
    Add interval_days calendar days to last_date.

    Datetimes keep their time-of-day. The interval is not validated here;
    request payloads enforce a positive value before reaching this point.
    """
    return last_date + timedelta(days=interval_days)


def projected_due_date(
    last_date: date | None,
    interval_days: int = DEFAULT_INTERVAL_DAYS,
    today: date | None = None,
) -> date:
    # With no dose on file the medication is due immediately.
    if last_date is None:
        return today or date.today()
    return next_dose_date(last_date, interval_days)
