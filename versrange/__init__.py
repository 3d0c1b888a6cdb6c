"""versrange: normalize advisory version ranges into canonical vers-style ranges."""

from .conversion import (
    range_from_ghsa,
    range_from_nvd,
    range_from_nvd_cpe_match,
    range_from_osv,
    ranges_from_ghsa_vulnerability,
    ranges_from_osv_affected,
)
from .exceptions import (
    ConfigurationError,
    InvalidRangeError,
    InvalidVersionError,
    MalformedInputError,
    VersRangeError,
)
from .models import Comparator, Constraint, RangeBuilder, VersionRange
from .schemes import scheme_from_ghsa_ecosystem, scheme_from_osv_ecosystem


def _get_version() -> str:
    """Get package version, "unknown" when not installed."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("versrange")
    except PackageNotFoundError:
        return "unknown"


__version__ = _get_version()

__all__ = [
    # Converters
    "range_from_ghsa",
    "range_from_osv",
    "range_from_nvd",
    "ranges_from_ghsa_vulnerability",
    "ranges_from_osv_affected",
    "range_from_nvd_cpe_match",
    # Scheme inference
    "scheme_from_ghsa_ecosystem",
    "scheme_from_osv_ecosystem",
    # Models
    "Comparator",
    "Constraint",
    "RangeBuilder",
    "VersionRange",
    # Errors
    "VersRangeError",
    "MalformedInputError",
    "InvalidVersionError",
    "InvalidRangeError",
    "ConfigurationError",
]
