"""Module: medication.

Pure scheduling and compliance rules shared by the API and service layers.
Nothing here touches the database or the wall clock unless "today" is left
at its default.
"""

from dogiguard.medication.compliance import (
    DoseRecord,
    MedicationStats,
    TimingStatus,
    medication_stats,
    timing_status,
)
from dogiguard.medication.dates import calculate_age, format_date
from dogiguard.medication.dday import (
    TIER_COLORS,
    DDayBadge,
    UrgencyTier,
    day_offset,
    dday_badge,
    tier_color,
    urgency_tier,
)
from dogiguard.medication.schedule import (
    DEFAULT_INTERVAL_DAYS,
    next_dose_date,
    projected_due_date,
)
from dogiguard.medication.summary import DailySummary, daily_summary

__all__ = [
    "DEFAULT_INTERVAL_DAYS",
    "TIER_COLORS",
    "DDayBadge",
    "DailySummary",
    "DoseRecord",
    "MedicationStats",
    "TimingStatus",
    "UrgencyTier",
    "calculate_age",
    "daily_summary",
    "day_offset",
    "dday_badge",
    "format_date",
    "medication_stats",
    "next_dose_date",
    "projected_due_date",
    "tier_color",
    "timing_status",
    "urgency_tier",
]
