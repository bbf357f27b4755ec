"""
NFL calendar helpers.

The season year equals the calendar year once a cutoff date has passed and
the previous year before it:
- roster cutoff: March 15
- schedule cutoff: the Thursday after Labor Day (first Monday in September)
"""

import logging
from datetime import date, timedelta
from typing import Optional

import pandas as pd

from .constants import MAX_WEEK, ROSTER_CUTOFF, SEASON_START_OFFSET_DAYS

logger = logging.getLogger(__name__)


def first_monday_in_september(year: int) -> date:
    """Labor Day for the given year."""
    sept1 = date(year, 9, 1)
    # Monday is weekday 0
    return sept1 + timedelta(days=(7 - sept1.weekday()) % 7)


def season_start(year: int) -> date:
    """Thursday after Labor Day, the first day of the given season."""
    return first_monday_in_september(year) + timedelta(days=SEASON_START_OFFSET_DAYS)


def get_current_season(roster: bool = False, today: Optional[date] = None) -> int:
    """
    Get the current NFL season year.

    Args:
        roster: Use the March 15 roster cutoff instead of the season start
        today: Date to evaluate (defaults to the local date)

    Returns:
        Season year
    """
    today = today or date.today()
    year = today.year

    if roster:
        cutoff = date(year, *ROSTER_CUTOFF)
    else:
        cutoff = season_start(year)

    return year - 1 if today < cutoff else year


def get_current_week_from_date(today: Optional[date] = None) -> int:
    """Week number counted in 7-day blocks from the season start, clamped to 1..22."""
    today = today or date.today()
    season = get_current_season(roster=False, today=today)
    days_since = (today - season_start(season)).days

    if days_since < 0:
        return 1
    week = days_since // 7 + 1
    return max(1, min(week, MAX_WEEK))


def week_from_schedule(schedule: pd.DataFrame) -> int:
    """
    Get the current week from a schedule table.

    The current week is the earliest week with a game that has no result yet;
    when every game has been played, it is the last week of the schedule.

    Args:
        schedule: Table with at least ``week`` and ``result`` columns

    Returns:
        Week number
    """
    weeks = pd.to_numeric(schedule["week"], errors="coerce")
    unplayed = weeks[schedule["result"].isna()].dropna()

    if unplayed.empty:
        played = weeks.dropna()
        return int(played.max()) if not played.empty else MAX_WEEK
    return int(unplayed.min())


def get_current_week_from_schedule(today: Optional[date] = None) -> int:
    """Load the current season's schedule and find the next week with unplayed games."""
    # Imported here to keep the loaders out of the calendar module's import chain
    from ..ingest.schedules import load_schedules

    season = get_current_season(roster=False, today=today)
    logger.debug(f"Resolving current week from the {season} schedule")
    return week_from_schedule(load_schedules(seasons=[season]))


def get_current_week(use_date: bool = True, today: Optional[date] = None) -> int:
    """
    Get the current NFL week (1-22).

    Args:
        use_date: Count weeks from the calendar; when False, load the current
            schedule and use the first week with unplayed games (network access)
        today: Date to evaluate (defaults to the local date)

    Returns:
        Week number
    """
    if use_date:
        return get_current_week_from_date(today)
    return get_current_week_from_schedule(today)
