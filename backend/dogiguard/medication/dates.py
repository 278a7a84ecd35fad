"""Module: dates."""

from __future__ import annotations

from datetime import date

DEFAULT_LOCALE = "en"

_EN_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Medium-length date patterns keyed by two-letter language code.
_DATE_FORMATTERS = {
    "en": lambda d: f"{_EN_MONTHS[d.month - 1]} {d.day}, {d.year}",
    "ko": lambda d: f"{d.year}년 {d.month}월 {d.day}일",
}


def calculate_age(birth_date: date, as_of: date | None = None) -> int:
    """
    Whole years between birth_date and as_of (defaults to today).

    The year difference is reduced by one when the reference month/day has
    not yet reached the birthday in the reference year.
    """
    ref = as_of or date.today()
    age = ref.year - birth_date.year
    if (ref.month, ref.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def resolve_locale(locale: str | None) -> str:
    if not locale:
        return DEFAULT_LOCALE
    language = locale[:2].lower()
    return language if language in _DATE_FORMATTERS else DEFAULT_LOCALE


def format_date(value: date, locale: str = DEFAULT_LOCALE) -> str:
    """Render value as a medium-length display date, e.g. "Jan 5, 2024"."""
    return _DATE_FORMATTERS[resolve_locale(locale)](value)
