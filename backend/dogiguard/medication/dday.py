"""Module: dday."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class UrgencyTier(str, Enum):
    OVERDUE = "overdue"
    URGENT = "urgent"
    SOON = "soon"
    SAFE = "safe"


# Badge colors per tier. Fixed lookup, not configurable per call.
TIER_COLORS: dict[UrgencyTier, str] = {
    UrgencyTier.OVERDUE: "#FF3B30",  # red
    UrgencyTier.URGENT: "#FF9500",  # orange
    UrgencyTier.SOON: "#FFCC00",  # yellow
    UrgencyTier.SAFE: "#34C759",  # green
}

URGENT_MAX_DAYS = 7
SOON_MAX_DAYS = 14


@dataclass(frozen=True)
class DDayBadge:
    offset: int
    tier: UrgencyTier
    color: str


def _calendar_day(value: date | datetime, tz=None) -> date:
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def day_offset(target: date | datetime, today: date | datetime | None = None) -> int:
    """
    Signed whole-day distance from today to target.

    Both values are reduced to their calendar day first, so time-of-day never
    moves a due date into a neighbouring day. Aware datetimes are compared in
    today's timezone.
    """
    if today is None:
        today = date.today()
    tz = today.tzinfo if isinstance(today, datetime) else None
    return (_calendar_day(target, tz) - _calendar_day(today)).days


def urgency_tier(offset: int) -> UrgencyTier:
    if offset <= 0:
        return UrgencyTier.OVERDUE
    if offset <= URGENT_MAX_DAYS:
        return UrgencyTier.URGENT
    if offset <= SOON_MAX_DAYS:
        return UrgencyTier.SOON
    return UrgencyTier.SAFE


def tier_color(tier: UrgencyTier) -> str:
    return TIER_COLORS[tier]


def dday_badge(target: date | datetime, today: date | datetime | None = None) -> DDayBadge:
    offset = day_offset(target, today)
    tier = urgency_tier(offset)
    return DDayBadge(offset=offset, tier=tier, color=tier_color(tier))
