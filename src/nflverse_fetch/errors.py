"""Exceptions raised while resolving seasons and downloading nflverse datasets."""

from typing import Optional


class NFLReadError(Exception):
    """Base class for every failure surfaced by nflverse_fetch."""


class NetworkError(NFLReadError):
    """The HTTP request could not be completed (connection error, timeout)."""


class HTTPStatusError(NFLReadError):
    """The server answered with a non-success status code."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        message = f"HTTP {status_code} for {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DecodeError(NFLReadError):
    """The downloaded payload could not be read as Parquet or CSV."""


class InvalidParameterError(NFLReadError, ValueError):
    """An enum-like argument is outside the values a dataset accepts."""


class InvalidSeasonError(NFLReadError, ValueError):
    """A requested season is outside the range a dataset covers."""


class NoDataError(NFLReadError):
    """No data available for the requested parameters."""

    def __init__(self, message: str = "No data available for the requested parameters"):
        super().__init__(message)
