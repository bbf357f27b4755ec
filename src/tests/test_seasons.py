from datetime import date

import pytest

from nflverse_fetch.errors import InvalidSeasonError
from nflverse_fetch.ingest.seasons import (
    SeasonKind,
    Seasons,
    resolve_seasons,
    resolve_seasons_roster,
    season_filter,
)
from nflverse_fetch.utils.dates import get_current_season

TODAY = date(2024, 4, 1)


def test_no_seasons_resolves_to_current_season():
    assert resolve_seasons(None, 1999, roster=False) == [get_current_season(False)]


def test_current_season_honours_roster_flag():
    assert resolve_seasons(None, 1999, roster=False, today=TODAY) == [2023]
    assert resolve_seasons_roster(None, 1920, today=TODAY) == [2024]


def test_season_before_first_available_is_rejected():
    with pytest.raises(InvalidSeasonError) as excinfo:
        resolve_seasons([1990], 1999, roster=False)
    assert "1990" in str(excinfo.value)
    assert "1999" in str(excinfo.value)


def test_invalid_season_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_seasons(1990, 1999)


def test_multiple_seasons_keep_order():
    assert resolve_seasons([2022, 2023], 1999, roster=False) == [2022, 2023]
    assert resolve_seasons([2023, 2022], 1999) == [2023, 2022]


def test_duplicates_are_preserved():
    assert resolve_seasons([2023, 2021, 2023], 1999) == [2023, 2021, 2023]


def test_future_seasons_are_accepted():
    assert resolve_seasons([2100], 1999) == [2100]


def test_any_invalid_season_fails_whole_list():
    with pytest.raises(InvalidSeasonError):
        resolve_seasons([2023, 1998], 1999)


def test_single_season():
    assert resolve_seasons(2010, 1999) == [2010]
    assert Seasons.from_arg(2010).kind is SeasonKind.SINGLE


def test_iterables_are_accepted():
    assert resolve_seasons(range(2020, 2023), 1999) == [2020, 2021, 2022]
    assert resolve_seasons((2021,), 1999) == [2021]


def test_all_seasons_runs_from_first_season_to_current():
    assert resolve_seasons(True, 2020, today=TODAY) == [2020, 2021, 2022, 2023]
    assert Seasons.from_arg(True).kind is SeasonKind.ALL


def test_all_seasons_with_first_season_after_current():
    with pytest.raises(InvalidSeasonError, match="after current season"):
        resolve_seasons(True, 2030, today=TODAY)


def test_false_selects_nothing():
    with pytest.raises(InvalidSeasonError):
        resolve_seasons(False, 1999)


def test_season_filter():
    assert season_filter(None) is None
    assert season_filter(True) is None
    assert season_filter(2023) == [2023]
    assert season_filter([1950, 2023]) == [1950, 2023]
    with pytest.raises(InvalidSeasonError):
        season_filter([2015], first_season=2016)
