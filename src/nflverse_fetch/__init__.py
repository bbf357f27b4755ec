"""
nflverse_fetch - cached loaders for nflverse NFL datasets.

Datasets are downloaded from the nflverse release repositories as Parquet or
CSV, decoded into pandas DataFrames and cached in memory or on disk.
"""

__version__ = "0.1.0"

from .config import CacheMode, NFLReadConfig, create_config, get_config, update_config
from .errors import (
    DecodeError,
    HTTPStatusError,
    InvalidParameterError,
    InvalidSeasonError,
    NetworkError,
    NFLReadError,
    NoDataError,
)
from .ingest import (
    LOADERS,
    Downloader,
    build_url,
    load_combine,
    load_contracts,
    load_depth_charts,
    load_draft_picks,
    load_ff_opportunity,
    load_ff_playerids,
    load_ff_rankings,
    load_ftn_charting,
    load_injuries,
    load_nextgen_stats,
    load_officials,
    load_participation,
    load_pbp,
    load_pfr_advstats,
    load_player_stats,
    load_players,
    load_rosters,
    load_rosters_weekly,
    load_schedules,
    load_snap_counts,
    load_team_stats,
    load_teams,
    load_trades,
)
from .utils.cache import cache_info, clear_cache
from .utils.dates import get_current_season, get_current_week
