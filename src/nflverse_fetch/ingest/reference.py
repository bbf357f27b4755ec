"""
NFL reference data loading module.

Players, teams, contracts, trades, draft picks, combine results and
officials. Each dataset is a single nflverse-data file.
"""

import pandas as pd

from .downloader import download_nflverse, filter_seasons
from .seasons import SeasonsArg, season_filter


def load_players() -> pd.DataFrame:
    """Load player information."""
    return download_nflverse("players/players")


def load_teams() -> pd.DataFrame:
    """Load team metadata (colors, logos, etc.)."""
    return download_nflverse("teams/teams_colors_logos")


def load_contracts() -> pd.DataFrame:
    """Load historical contract data."""
    return download_nflverse("contracts/historical_contracts")


def load_trades() -> pd.DataFrame:
    """Load trade data."""
    return download_nflverse("trades/trades")


def _load_filtered(path: str, seasons: SeasonsArg) -> pd.DataFrame:
    keep = season_filter(seasons)
    return filter_seasons(download_nflverse(path), keep)


def load_draft_picks(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load draft pick data, optionally filtered to specific seasons."""
    return _load_filtered("draft_picks/draft_picks", seasons)


def load_combine(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load NFL combine data, optionally filtered to specific seasons."""
    return _load_filtered("combine/combine", seasons)


def load_officials(seasons: SeasonsArg = None) -> pd.DataFrame:
    """Load game officials data, optionally filtered to specific seasons."""
    return _load_filtered("officials/officials", seasons)
