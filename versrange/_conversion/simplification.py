"""Rewrite rules collapsing redundant constraint combinations.

Each rule matches the whole constraint list of a range, never a part of it.
Rules are tried in order and at most one is applied.
"""

from typing import Callable, Optional

from .._versioning import VersionSchemeRegistry
from ..logging_config import logger
from ..models import Comparator, Constraint, RangeBuilder, VersionRange

# "Introduced at the beginning of time"
_ZERO = "0"

SimplificationRule = Callable[[VersionRange, Optional[VersionSchemeRegistry]], Optional[VersionRange]]


def _is_introduced_at_zero(constraint: Constraint) -> bool:
    return constraint.comparator is Comparator.GREATER_THAN_OR_EQUAL and constraint.version == _ZERO


def collapse_zero_lower_bound(
    version_range: VersionRange, registry: Optional[VersionSchemeRegistry] = None
) -> Optional[VersionRange]:
    """>=0 is equivalent to *."""
    constraints = version_range.constraints
    if len(constraints) != 1 or not _is_introduced_at_zero(constraints[0]):
        return None

    return RangeBuilder(version_range.scheme, registry=registry).with_constraint(Comparator.WILDCARD).build()


def drop_zero_lower_bound(
    version_range: VersionRange, registry: Optional[VersionSchemeRegistry] = None
) -> Optional[VersionRange]:
    """>=0|<X is equivalent to <X, and >=0|<=X to <=X."""
    constraints = version_range.constraints
    if len(constraints) != 2 or not _is_introduced_at_zero(constraints[0]):
        return None
    if not constraints[1].comparator.is_upper_bound:
        return None

    return RangeBuilder(version_range.scheme, registry=registry).with_existing_constraint(constraints[1]).build()


OSV_SIMPLIFICATION_RULES: tuple[SimplificationRule, ...] = (
    collapse_zero_lower_bound,
    drop_zero_lower_bound,
)


def simplify(
    version_range: VersionRange,
    rules: tuple[SimplificationRule, ...] = OSV_SIMPLIFICATION_RULES,
    registry: Optional[VersionSchemeRegistry] = None,
) -> VersionRange:
    """Apply the first matching rule, or return the range unchanged."""
    for rule in rules:
        simplified = rule(version_range, registry)
        if simplified is not None:
            logger.debug(f"Simplified range with {rule.__name__}")
            return simplified
    return version_range
