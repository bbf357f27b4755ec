"""
Season resolution for the dataset loaders.

Most loaders accept a ``seasons`` argument:
- ``None``: the current season only
- ``True``: every season from the dataset's first season to the current one
- an ``int``: that single season
- an iterable of ints: those seasons, in the given order, duplicates kept
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from ..errors import InvalidSeasonError
from ..utils.dates import get_current_season

SeasonsArg = Union[None, bool, int, Iterable[int]]


class SeasonKind(Enum):
    CURRENT = "current"
    ALL = "all"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class Seasons:
    """A caller's season request before it is checked against a dataset."""
    kind: SeasonKind
    years: Tuple[int, ...] = ()

    @classmethod
    def current(cls) -> 'Seasons':
        return cls(SeasonKind.CURRENT)

    @classmethod
    def all(cls) -> 'Seasons':
        return cls(SeasonKind.ALL)

    @classmethod
    def single(cls, year: int) -> 'Seasons':
        return cls(SeasonKind.SINGLE, (int(year),))

    @classmethod
    def multiple(cls, years: Iterable[int]) -> 'Seasons':
        return cls(SeasonKind.MULTIPLE, tuple(int(y) for y in years))

    @classmethod
    def from_arg(cls, seasons: SeasonsArg) -> 'Seasons':
        """Build a request from the loaders' ``seasons`` argument."""
        if seasons is None:
            return cls.current()
        # bool is a subclass of int
        if isinstance(seasons, bool):
            if not seasons:
                raise InvalidSeasonError("seasons=False does not select any season")
            return cls.all()
        if isinstance(seasons, int):
            return cls.single(seasons)
        return cls.multiple(seasons)

    def resolve(self, first_season: int, roster: bool = False,
                today: Optional[date] = None) -> List[int]:
        """
        Resolve to a concrete list of season years.

        Args:
            first_season: Earliest season for which the dataset is available
            roster: Use the roster cutoff when computing the current season
            today: Date to evaluate (defaults to the local date)

        Returns:
            Season years

        Raises:
            InvalidSeasonError: A season is before ``first_season``, or the
                dataset starts after the current season
        """
        current = get_current_season(roster=roster, today=today)

        if self.kind is SeasonKind.CURRENT:
            return [current]

        if self.kind is SeasonKind.ALL:
            if first_season > current:
                raise InvalidSeasonError(
                    f"First available season ({first_season}) is after current season ({current})"
                )
            return list(range(first_season, current + 1))

        for season in self.years:
            if season < first_season:
                raise InvalidSeasonError(
                    f"Season {season} is before first available season ({first_season})"
                )
        return list(self.years)


def resolve_seasons(seasons: SeasonsArg, first_season: int, roster: bool = False,
                    today: Optional[date] = None) -> List[int]:
    """Resolve a loader's ``seasons`` argument against a dataset's first season."""
    return Seasons.from_arg(seasons).resolve(first_season, roster=roster, today=today)


def resolve_seasons_roster(seasons: SeasonsArg, first_season: int,
                           today: Optional[date] = None) -> List[int]:
    """Resolve seasons using the roster cutoff for the current season."""
    return resolve_seasons(seasons, first_season, roster=True, today=today)


def season_filter(seasons: SeasonsArg, first_season: Optional[int] = None) -> Optional[List[int]]:
    """
    Seasons to keep from a dataset published as one combined file.

    Returns None when every season should be kept (``None`` or ``True``).
    Seasons before ``first_season`` are rejected when a bound is given.
    """
    request = Seasons.from_arg(seasons)
    if request.kind in (SeasonKind.CURRENT, SeasonKind.ALL):
        return None
    if first_season is not None:
        return request.resolve(first_season)
    return list(request.years)
