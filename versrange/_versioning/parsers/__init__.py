"""Version parsers for the supported versioning schemes."""

from .semver import SemverParser
from .univers_backed import UniversParser, univers_parsers

__all__ = [
    "SemverParser",
    "UniversParser",
    "univers_parsers",
]
