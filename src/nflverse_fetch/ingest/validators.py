"""
Loader Argument Validation

This module checks the enum-like arguments the dataset loaders accept before
any cache lookup or network request is made.
"""

import logging
from typing import Iterable

from ..errors import InvalidParameterError
from ..utils.constants import (
    FF_OPPORTUNITY_STAT_TYPES,
    FF_OPPORTUNITY_VERSIONS,
    FF_RANKING_TYPES,
    NGS_STAT_TYPES,
    PFR_STAT_TYPES,
    PFR_SUMMARY_LEVELS,
    SUMMARY_LEVELS,
)

logger = logging.getLogger(__name__)


def validate_choice(name: str, value: str, allowed: Iterable[str]) -> str:
    """
    Check that an argument is one of the accepted values.

    Args:
        name: Argument name, used in the error message
        value: Value supplied by the caller
        allowed: Accepted values

    Returns:
        The value, unchanged

    Raises:
        InvalidParameterError: If the value is not accepted
    """
    allowed = tuple(allowed)
    if value not in allowed:
        logger.debug(f"Rejected {name}={value!r}")
        raise InvalidParameterError(
            f"Invalid {name}: '{value}'. Must be one of: {', '.join(allowed)}"
        )
    return value


class ParameterValidator:
    """Validators for the arguments of each dataset family."""

    @staticmethod
    def summary_level(value: str) -> str:
        return validate_choice("summary_level", value, SUMMARY_LEVELS)

    @staticmethod
    def ngs_stat_type(value: str) -> str:
        return validate_choice("stat_type", value, NGS_STAT_TYPES)

    @staticmethod
    def pfr_stat_type(value: str) -> str:
        return validate_choice("stat_type", value, PFR_STAT_TYPES)

    @staticmethod
    def pfr_summary_level(value: str) -> str:
        return validate_choice("summary_level", value, PFR_SUMMARY_LEVELS)

    @staticmethod
    def ff_ranking_type(value: str) -> str:
        return validate_choice("ranking_type", value, FF_RANKING_TYPES)

    @staticmethod
    def ff_opportunity_stat_type(value: str) -> str:
        return validate_choice("stat_type", value, FF_OPPORTUNITY_STAT_TYPES)

    @staticmethod
    def ff_model_version(value: str) -> str:
        return validate_choice("model_version", value, FF_OPPORTUNITY_VERSIONS)
