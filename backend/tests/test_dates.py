from datetime import date, datetime

import pytest

from dogiguard.medication.dates import calculate_age, format_date, resolve_locale


def test_age_before_birthday_in_reference_year():
    assert calculate_age(date(2020, 6, 15), as_of=date(2024, 6, 14)) == 3


def test_age_on_birthday():
    assert calculate_age(date(2020, 6, 15), as_of=date(2024, 6, 15)) == 4


def test_age_month_after_birthday():
    assert calculate_age(date(2020, 6, 15), as_of=date(2024, 7, 1)) == 4


def test_age_is_zero_for_puppies():
    assert calculate_age(date(2024, 3, 1), as_of=date(2024, 12, 31)) == 0


def test_age_increases_by_one_a_year_later():
    birth = date(2018, 9, 30)
    ref = date(2023, 2, 10)
    assert calculate_age(birth, ref.replace(year=ref.year + 1)) == calculate_age(birth, ref) + 1


def test_leap_day_birthday_counts_from_march_in_common_years():
    birth = date(2020, 2, 29)
    assert calculate_age(birth, as_of=date(2023, 2, 28)) == 2
    assert calculate_age(birth, as_of=date(2023, 3, 1)) == 3


def test_age_accepts_datetimes():
    assert calculate_age(datetime(2020, 6, 15, 23, 0), as_of=datetime(2024, 6, 15, 1, 0)) == 4


def test_age_defaults_to_today():
    assert calculate_age(date(date.today().year - 5, 1, 1)) == 5


def test_format_date_english():
    assert format_date(date(2024, 1, 5), "en") == "Jan 5, 2024"
    assert format_date(date(2023, 12, 25), "en") == "Dec 25, 2023"


def test_format_date_korean():
    assert format_date(date(2024, 1, 5), "ko") == "2024년 1월 5일"


@pytest.mark.parametrize("code, expected", [
    ("en-US", "en"),
    ("ko_KR", "ko"),
    ("KO", "ko"),
    ("fr", "en"),
    ("", "en"),
    (None, "en"),
])
def test_resolve_locale(code, expected):
    assert resolve_locale(code) == expected


def test_format_date_unknown_locale_falls_back_to_english():
    assert format_date(date(2024, 1, 5), "de") == "Jan 5, 2024"


def test_format_date_default_locale():
    assert format_date(date(2025, 2, 14)) == "Feb 14, 2025"
