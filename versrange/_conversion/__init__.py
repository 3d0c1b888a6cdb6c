"""Conversion of upstream advisory ranges into canonical version ranges.

Supported sources:
- GitHub Security Advisories: comma-separated comparator expressions
- OSV: typed range events with optional database_specific overrides
- NVD: CPE match boundaries and the CPE version component
"""

from .ghsa import range_from_ghsa
from .nvd import range_from_nvd
from .osv import range_from_osv
from .simplification import OSV_SIMPLIFICATION_RULES, simplify

__all__ = [
    "range_from_ghsa",
    "range_from_nvd",
    "range_from_osv",
    "simplify",
    "OSV_SIMPLIFICATION_RULES",
]
