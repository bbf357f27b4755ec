"""
NFL Roster data loading module.

Season and weekly rosters, depth charts, injury reports and snap counts,
published as one nflverse-data file per season.
"""

import pandas as pd

from ..utils.constants import FIRST_SEASONS
from .downloader import load_seasons
from .seasons import SeasonsArg


def load_rosters(seasons: SeasonsArg = None) -> pd.DataFrame:
    """
    Load season-level roster data.

    The current season rolls over on March 15 rather than at kickoff.
    """
    return load_seasons(lambda season: f"rosters/roster_{season}", seasons,
                        FIRST_SEASONS["rosters"], roster=True)


def load_rosters_weekly(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load weekly roster data for the given seasons."""
    return load_seasons(lambda season: f"weekly_rosters/roster_weekly_{season}", seasons,
                        FIRST_SEASONS["rosters_weekly"])


def load_depth_charts(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load weekly depth charts for the given seasons."""
    return load_seasons(lambda season: f"depth_charts/depth_charts_{season}", seasons,
                        FIRST_SEASONS["depth_charts"])


def load_injuries(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load weekly injury reports for the given seasons."""
    return load_seasons(lambda season: f"injuries/injuries_{season}", seasons,
                        FIRST_SEASONS["injuries"])


def load_snap_counts(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load snap count data for the given seasons."""
    return load_seasons(lambda season: f"snap_counts/snap_counts_{season}", seasons,
                        FIRST_SEASONS["snap_counts"])
