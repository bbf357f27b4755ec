"""
Fantasy football data loading module.

Player ID mappings and expert rankings from dynastyprocess, and expected
points models from ffopportunity.
"""

import pandas as pd

from ..utils.constants import FF_RANKING_FILES, FIRST_SEASONS, DataFormat, Repository
from .downloader import get_downloader, load_seasons
from .seasons import SeasonsArg
from .validators import ParameterValidator


def load_ff_playerids() -> pd.DataFrame:
    """Load fantasy football player ID mappings from dynastyprocess."""
    with get_downloader() as downloader:
        return downloader.fetch_path(Repository.DYNASTYPROCESS, "db_playerids.csv", DataFormat.CSV)


def load_ff_rankings(ranking_type: str = "draft") -> pd.DataFrame:
    """
    Load fantasy football rankings from dynastyprocess.

    Args:
        ranking_type: "draft" (latest draft rankings), "week" (latest weekly
            rankings) or "all" (full ranking history)
    """
    ParameterValidator.ff_ranking_type(ranking_type)
    path, data_format = FF_RANKING_FILES[ranking_type]
    with get_downloader() as downloader:
        return downloader.fetch_path(Repository.DYNASTYPROCESS, path, data_format)


def load_ff_opportunity(seasons: SeasonsArg = None, stat_type: str = "weekly",
                        model_version: str = "latest") -> pd.DataFrame:
    """
    Load expected fantasy points data from ffopportunity.

    Args:
        seasons: Season selection
        stat_type: One of "weekly", "pbp_pass", "pbp_rush"
        model_version: One of "latest", "v1.0.0"
    """
    ParameterValidator.ff_opportunity_stat_type(stat_type)
    ParameterValidator.ff_model_version(model_version)

    with get_downloader() as downloader:
        return load_seasons(
            lambda season: f"{model_version}-data/ep_{stat_type}_{season}",
            seasons,
            FIRST_SEASONS["ff_opportunity"],
            fetch=lambda path: downloader.fetch_path(Repository.FFOPPORTUNITY, path, DataFormat.PARQUET),
        )
