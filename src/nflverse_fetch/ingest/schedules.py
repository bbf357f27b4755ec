"""
NFL Schedule data loading module.

Game schedules and results for every season, published as one combined
nflverse-data file.
"""

import logging

import pandas as pd

from ..utils.constants import VALID_ROOF_TYPES
from .downloader import download_nflverse, filter_seasons
from .seasons import SeasonsArg, season_filter

logger = logging.getLogger(__name__)


def clean_roof(df: pd.DataFrame) -> pd.DataFrame:
    """Replace roof values outside the known set with nulls."""
    if "roof" not in df.columns:
        return df
    df = df.copy()
    df["roof"] = df["roof"].where(df["roof"].isin(VALID_ROOF_TYPES))
    return df


def load_schedules(seasons: SeasonsArg = None) -> pd.DataFrame:
    """
    Load schedule data.

    Args:
        seasons: Seasons to keep (None or True = all seasons)

    Returns:
        One row per game
    """
    keep = season_filter(seasons)
    df = clean_roof(download_nflverse("schedules/games"))
    return filter_seasons(df, keep)
