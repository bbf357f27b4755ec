"""
NFL statistics data loading module.

This module handles loading play-level and aggregated statistics:
- Play-by-play and play participation
- Player and team stats by summary level
- Next Gen Stats and Pro Football Reference advanced stats
- FTN charting data
"""

import logging
from typing import List

import pandas as pd

from ..errors import NFLReadError, NoDataError
from ..utils.constants import FIRST_SEASONS, MAX_WEEK
from ..utils.dates import get_current_season, get_current_week
from .downloader import combine_tables, download_nflverse, filter_seasons, load_seasons
from .seasons import SeasonsArg, resolve_seasons, season_filter
from .validators import ParameterValidator

logger = logging.getLogger(__name__)


def load_pbp(seasons: SeasonsArg = None) -> pd.DataFrame:
    """
    Load play-by-play data for the given seasons.

    Args:
        seasons: None for the current season, True for all seasons, or season years

    Returns:
        One row per play
    """
    return load_seasons(lambda season: f"pbp/play_by_play_{season}", seasons,
                        FIRST_SEASONS["pbp"])


def _latest_participation_season() -> int:
    """Participation files are published once a season is complete."""
    current = get_current_season()
    try:
        week = get_current_week(use_date=False)
    except NFLReadError as e:
        logger.warning(f"Could not determine current week from schedule, assuming week 1: {e}")
        week = 1
    return current if week == MAX_WEEK else current - 1


def load_participation(seasons: SeasonsArg = None) -> pd.DataFrame:
    """
    Load play participation data for the given seasons.

    Seasons that are not complete yet are skipped.

    Raises:
        NoDataError: If every requested season is skipped
    """
    season_list = resolve_seasons(seasons, FIRST_SEASONS["participation"])
    if not season_list:
        raise NoDataError()

    if any(season >= get_current_season() for season in season_list):
        max_season = _latest_participation_season()
    else:
        max_season = max(season_list)

    tables: List[pd.DataFrame] = []
    for season in season_list:
        if season > max_season:
            logger.info(f"Skipping participation for {season}: season not complete")
            continue
        tables.append(download_nflverse(f"pbp_participation/pbp_participation_{season}"))

    if not tables:
        raise NoDataError()
    return combine_tables(tables)


def load_player_stats(seasons: SeasonsArg = None, summary_level: str = "week") -> pd.DataFrame:
    """
    Load player stats for the given seasons.

    Args:
        seasons: None for the current season, True for all seasons, or season years
        summary_level: One of "week", "reg", "post", "reg+post"
    """
    level = ParameterValidator.summary_level(summary_level).replace("+", "")
    return load_seasons(lambda season: f"stats_player/stats_player_{level}_{season}", seasons,
                        FIRST_SEASONS["player_stats"])


def load_team_stats(seasons: SeasonsArg = None, summary_level: str = "week") -> pd.DataFrame:
    """
    Load team stats for the given seasons.

    Args:
        seasons: None for the current season, True for all seasons, or season years
        summary_level: One of "week", "reg", "post", "reg+post"
    """
    level = ParameterValidator.summary_level(summary_level).replace("+", "")
    return load_seasons(lambda season: f"stats_team/stats_team_{level}_{season}", seasons,
                        FIRST_SEASONS["team_stats"])


def load_nextgen_stats(seasons: SeasonsArg = None, stat_type: str = "passing") -> pd.DataFrame:
    """
    Load Next Gen Stats data.

    A single file per stat type holds every season; ``seasons`` filters it.

    Args:
        seasons: Seasons to keep (None or True = all seasons)
        stat_type: One of "passing", "receiving", "rushing"
    """
    ParameterValidator.ngs_stat_type(stat_type)
    keep = season_filter(seasons, FIRST_SEASONS["nextgen_stats"])
    return filter_seasons(download_nflverse(f"nextgen_stats/ngs_{stat_type}"), keep)


def load_pfr_advstats(seasons: SeasonsArg = None, stat_type: str = "pass",
                      summary_level: str = "week") -> pd.DataFrame:
    """
    Load Pro Football Reference advanced stats.

    The "week" level downloads one file per season; the "season" level
    downloads a single combined file and filters it.

    Args:
        seasons: Season selection
        stat_type: One of "pass", "rush", "rec", "def"
        summary_level: One of "week", "season"
    """
    ParameterValidator.pfr_stat_type(stat_type)
    ParameterValidator.pfr_summary_level(summary_level)

    if summary_level == "week":
        return load_seasons(lambda season: f"pfr_advstats/advstats_week_{stat_type}_{season}",
                            seasons, FIRST_SEASONS["pfr_advstats"])

    keep = season_filter(seasons, FIRST_SEASONS["pfr_advstats"])
    return filter_seasons(download_nflverse(f"pfr_advstats/advstats_season_{stat_type}"), keep)


def load_ftn_charting(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load FTN charting data for the given seasons."""
    return load_seasons(lambda season: f"ftn_charting/ftn_charting_{season}", seasons,
                        FIRST_SEASONS["ftn_charting"])
