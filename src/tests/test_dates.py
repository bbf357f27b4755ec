from datetime import date, timedelta

import pandas as pd
import pytest

from nflverse_fetch.ingest import schedules as schedules_module
from nflverse_fetch.utils.dates import (
    first_monday_in_september,
    get_current_season,
    get_current_week,
    get_current_week_from_date,
    season_start,
    week_from_schedule,
)


@pytest.mark.parametrize(
    "year, labor_day",
    [
        (2023, date(2023, 9, 4)),
        (2024, date(2024, 9, 2)),
        (2025, date(2025, 9, 1)),
        (2026, date(2026, 9, 7)),
    ],
)
def test_first_monday_in_september(year, labor_day):
    assert first_monday_in_september(year) == labor_day
    assert labor_day.weekday() == 0


def test_season_start_is_thursday_after_labor_day():
    start = season_start(2023)
    assert start == date(2023, 9, 7)
    assert start.weekday() == 3


@pytest.mark.parametrize(
    "today, season",
    [
        (date(2023, 9, 6), 2022),
        (date(2023, 9, 7), 2023),
        (date(2024, 1, 15), 2023),
        (date(2024, 3, 20), 2023),
        (date(2024, 12, 31), 2024),
    ],
)
def test_current_season_uses_season_start(today, season):
    assert get_current_season(roster=False, today=today) == season


@pytest.mark.parametrize(
    "today, season",
    [
        (date(2024, 3, 14), 2023),
        (date(2024, 3, 15), 2024),
        (date(2024, 8, 1), 2024),
        (date(2024, 1, 1), 2023),
    ],
)
def test_current_season_uses_roster_cutoff(today, season):
    assert get_current_season(roster=True, today=today) == season


def test_current_season_defaults_to_today():
    today = date.today()
    assert get_current_season() in (today.year - 1, today.year)


@pytest.mark.parametrize(
    "today, week",
    [
        (date(2023, 9, 7), 1),
        (date(2023, 9, 13), 1),
        (date(2023, 9, 14), 2),
        (date(2023, 12, 31), 17),
        (date(2024, 2, 11), 22),
        (date(2024, 8, 1), 22),
    ],
)
def test_week_from_date(today, week):
    assert get_current_week_from_date(today) == week


def test_week_from_date_always_in_range():
    day = date(2022, 1, 1)
    while day < date(2026, 1, 1):
        assert 1 <= get_current_week(use_date=True, today=day) <= 22
        day += timedelta(days=1)


def test_week_from_schedule_uses_first_unplayed_week():
    schedule = pd.DataFrame(
        {
            "season": [2023] * 5,
            "week": [4, 5, 5, 6, 7],
            "result": [3.0, 7.0, None, None, None],
        }
    )
    assert week_from_schedule(schedule) == 5


def test_week_from_schedule_returns_last_week_when_complete():
    schedule = pd.DataFrame({"season": [2023] * 3, "week": [20, 21, 22], "result": [1.0, -3.0, 7.0]})
    assert week_from_schedule(schedule) == 22


def test_current_week_from_schedule_loads_current_season(monkeypatch):
    requested = []

    def fake_load_schedules(seasons=None):
        requested.append(seasons)
        return pd.DataFrame({"season": [2023, 2023], "week": [9, 10], "result": [14.0, None]})

    monkeypatch.setattr(schedules_module, "load_schedules", fake_load_schedules)

    assert get_current_week(use_date=False, today=date(2023, 11, 10)) == 10
    assert requested == [[2023]]
