"""
Constants for the nflverse_fetch project.

Upstream repositories, payload formats and the per-dataset availability
bounds and accepted argument values used by the loaders.
"""

from enum import Enum
from typing import Dict, Tuple


class DataFormat(Enum):
    """Encoding of a remote dataset file."""
    PARQUET = ".parquet"
    CSV = ".csv"

    @property
    def extension(self) -> str:
        return self.value


class Repository(Enum):
    """Upstream data providers, each published under a fixed base URL."""
    NFLVERSE_DATA = "https://github.com/nflverse/nflverse-data/releases/download/"
    ESPNSCRAPER = "https://github.com/nflverse/espnscrapeR-data/raw/master/data/"
    DYNASTYPROCESS = "https://github.com/dynastyprocess/data/raw/master/files/"
    FFOPPORTUNITY = "https://github.com/ffverse/ffopportunity/releases/download/"

    @property
    def base_url(self) -> str:
        return self.value


# Tokens read as null in every CSV column
CSV_NULL_VALUES = ["NA", "NULL", ""]

# Season-date cutoffs
ROSTER_CUTOFF = (3, 15)  # March 15
SEASON_START_OFFSET_DAYS = 3  # Thursday after the first Monday of September
MAX_WEEK = 22

# Earliest season published for each per-season dataset
FIRST_SEASONS: Dict[str, int] = {
    "pbp": 1999,
    "participation": 2016,
    "player_stats": 1999,
    "team_stats": 1999,
    "rosters": 1920,
    "rosters_weekly": 2002,
    "depth_charts": 2001,
    "injuries": 2009,
    "snap_counts": 2012,
    "ftn_charting": 2022,
    "nextgen_stats": 2016,
    "pfr_advstats": 2018,
    "ff_opportunity": 2006,
}

# Accepted values for enum-like loader arguments
SUMMARY_LEVELS: Tuple[str, ...] = ("week", "reg", "post", "reg+post")
NGS_STAT_TYPES: Tuple[str, ...] = ("passing", "receiving", "rushing")
PFR_STAT_TYPES: Tuple[str, ...] = ("pass", "rush", "rec", "def")
PFR_SUMMARY_LEVELS: Tuple[str, ...] = ("week", "season")
FF_RANKING_TYPES: Tuple[str, ...] = ("draft", "week", "all")
FF_OPPORTUNITY_STAT_TYPES: Tuple[str, ...] = ("weekly", "pbp_pass", "pbp_rush")
FF_OPPORTUNITY_VERSIONS: Tuple[str, ...] = ("latest", "v1.0.0")

VALID_ROOF_TYPES: Tuple[str, ...] = ("dome", "outdoors", "closed", "open")

# dynastyprocess ranking files
FF_RANKING_FILES: Dict[str, Tuple[str, DataFormat]] = {
    "draft": ("db_fpecr_latest.csv", DataFormat.CSV),
    "week": ("fp_latest_weekly.csv", DataFormat.CSV),
    "all": ("db_fpecr.parquet", DataFormat.PARQUET),
}
