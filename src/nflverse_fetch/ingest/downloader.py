"""
nflverse Release Downloader

This module handles fetching dataset files published as release artifacts.
It includes functionality for:
- Building download URLs for the upstream repositories
- Checking the cache before any network request
- Decoding Parquet and CSV payloads into DataFrames
- Combining per-season files and filtering combined files by season
"""

import io
import logging
from typing import Callable, Iterable, List, Optional

import pandas as pd
import requests

from ..config import NFLReadConfig, get_config
from ..errors import DecodeError, HTTPStatusError, NetworkError, NoDataError
from ..utils.cache import BaseCache, build_cache, make_cache_key
from ..utils.constants import CSV_NULL_VALUES, DataFormat, Repository
from .seasons import SeasonsArg, resolve_seasons

logger = logging.getLogger(__name__)

_KNOWN_EXTENSIONS = tuple(fmt.extension for fmt in DataFormat)


def build_url(repository: Repository, path: str, data_format: DataFormat = DataFormat.PARQUET) -> str:
    """
    Build the download URL for a dataset file.

    The format's extension is appended unless the path already ends with a
    known extension.

    Args:
        repository: Upstream repository
        path: File path relative to the repository base URL
        data_format: Expected encoding

    Returns:
        Full URL
    """
    if path.endswith(_KNOWN_EXTENSIONS):
        return f"{repository.base_url}{path}"
    return f"{repository.base_url}{path}{data_format.extension}"


def decode_table(content: bytes, data_format: DataFormat) -> pd.DataFrame:
    """
    Decode a downloaded payload.

    Args:
        content: Raw response body
        data_format: Encoding of the body

    Returns:
        Decoded table

    Raises:
        DecodeError: If the payload cannot be read
    """
    buffer = io.BytesIO(content)
    try:
        if data_format is DataFormat.PARQUET:
            return pd.read_parquet(buffer, engine="pyarrow")
        return pd.read_csv(buffer, header=0, na_values=CSV_NULL_VALUES, keep_default_na=False)
    except Exception as e:
        raise DecodeError(f"Failed to decode {data_format.name.lower()} payload: {e}") from e


class Downloader:
    """Fetches and decodes dataset files, consulting the cache first."""

    def __init__(self, config: Optional[NFLReadConfig] = None,
                 cache: Optional[BaseCache] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the downloader.

        Args:
            config: Settings for timeouts, user agent and caching (None = active configuration)
            cache: Cache tier to use (None = the tier selected by the configuration)
            session: HTTP session (None = a new ``requests.Session``)
        """
        self.config = config or get_config()
        self.cache = cache if cache is not None else build_cache(self.config)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this downloader created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> 'Downloader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def fetch(self, url: str, data_format: DataFormat = DataFormat.PARQUET) -> pd.DataFrame:
        """
        Download a dataset file, or return it from the cache.

        Args:
            url: Full URL of the file
            data_format: Encoding of the file

        Returns:
            Decoded table

        Raises:
            NetworkError: The request failed or timed out
            HTTPStatusError: The server returned a non-success status
            DecodeError: The payload could not be decoded
        """
        cache_key = make_cache_key(url)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {url}")
            return cached

        if self.config.verbose:
            logger.info(f"Downloading: {url}")
        else:
            logger.debug(f"Downloading: {url}")

        try:
            response = self.session.get(
                url,
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
            )
        except requests.RequestException as e:
            logger.error(f"Request failed for {url}: {e}")
            raise NetworkError(f"Request failed for {url}: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"HTTP {response.status_code} for {url}")
            raise HTTPStatusError(url, response.status_code, response.reason)

        table = decode_table(response.content, data_format)
        self.cache.set(cache_key, table)
        return table

    def fetch_path(self, repository: Repository, path: str,
                   data_format: DataFormat = DataFormat.PARQUET) -> pd.DataFrame:
        """Build the URL for a repository path and fetch it."""
        return self.fetch(build_url(repository, path, data_format), data_format)


def get_downloader() -> Downloader:
    """Downloader bound to the active configuration; use it as a context manager."""
    return Downloader(get_config())


def download_dataframe(url: str, data_format: DataFormat = DataFormat.PARQUET) -> pd.DataFrame:
    """Fetch a URL with the active configuration."""
    with get_downloader() as downloader:
        return downloader.fetch(url, data_format)


def download_nflverse(path: str) -> pd.DataFrame:
    """Fetch a Parquet file from the nflverse-data releases."""
    with get_downloader() as downloader:
        return downloader.fetch_path(Repository.NFLVERSE_DATA, path, DataFormat.PARQUET)


def combine_tables(tables: List[pd.DataFrame]) -> pd.DataFrame:
    """
    Stack tables, filling columns missing from some of them with nulls.

    Raises:
        NoDataError: If there is nothing to stack
    """
    if not tables:
        raise NoDataError()
    if len(tables) == 1:
        return tables[0]
    return pd.concat(tables, ignore_index=True, sort=False)


def load_seasons(path_for: Callable[[int], str], seasons: SeasonsArg, first_season: int,
                 roster: bool = False,
                 fetch: Optional[Callable[[str], pd.DataFrame]] = None) -> pd.DataFrame:
    """
    Fetch one file per season and combine them.

    Args:
        path_for: Maps a season year to its nflverse-data path
        seasons: Loader ``seasons`` argument
        first_season: Earliest season published for the dataset
        roster: Use the roster cutoff for the current season
        fetch: Fetches a path (None = ``download_nflverse``)

    Returns:
        Combined table

    Raises:
        NoDataError: If no seasons were requested
    """
    season_list = resolve_seasons(seasons, first_season, roster=roster)
    fetch = fetch or download_nflverse
    return combine_tables([fetch(path_for(season)) for season in season_list])


def filter_seasons(df: pd.DataFrame, seasons: Optional[Iterable[int]]) -> pd.DataFrame:
    """Keep rows whose ``season`` is in ``seasons``; None keeps everything."""
    if seasons is None:
        return df
    return df[df["season"].isin(list(seasons))].reset_index(drop=True)
