"""
blueprints.filters.factory - Filter Factory
=============================================

Maps a FilterType to its concrete filter. Called once at startup; the
resulting filter stays active for the lifetime of the services layer.

Usage:
    >>> from blueprints.filters import create_filter
    >>> create_filter(FilterType.REDUNDANCY)
    RedundancyFilter()
"""

from __future__ import annotations

from typing import Union

from blueprints.core.enums import FilterType
from blueprints.core.exceptions import ConfigurationError
from blueprints.filters.base import BlueprintsFilter
from blueprints.filters.identity import IdentityFilter
from blueprints.filters.redundancy import RedundancyFilter
from blueprints.filters.undersampling import UndersamplingFilter

_FILTERS: dict[FilterType, type[BlueprintsFilter]] = {
    FilterType.IDENTITY: IdentityFilter,
    FilterType.REDUNDANCY: RedundancyFilter,
    FilterType.UNDERSAMPLING: UndersamplingFilter,
}


def create_filter(filter_type: Union[FilterType, str]) -> BlueprintsFilter:
    """Create the filter selected by ``filter_type``.

    Args:
        filter_type: A FilterType, or its string value ("identity",
            "redundancy", "undersampling"). Case-insensitive.

    Returns:
        A fresh BlueprintsFilter instance.

    Raises:
        ConfigurationError: If the name matches no filter.
    """
    if isinstance(filter_type, FilterType):
        return _FILTERS[filter_type]()

    try:
        selected = FilterType(filter_type.lower())
    except ValueError:
        raise ConfigurationError(
            message=(
                f"Unknown filter: '{filter_type}'. "
                f"Available filters: {', '.join(f.value for f in FilterType)}"
            ),
            error_code="UNKNOWN_FILTER",
            details={"filter_type": str(filter_type)},
        ) from None

    return _FILTERS[selected]()
