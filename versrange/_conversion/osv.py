"""Converter for OSV affected ranges."""

from typing import Any, Iterable, Mapping, Optional

from .._versioning import VersionSchemeRegistry
from ..exceptions import MalformedInputError
from ..logging_config import logger
from ..models import Comparator, RangeBuilder, VersionRange
from ..schemes import SCHEME_DEBIAN, scheme_from_osv_ecosystem
from ._bounds import UPPER_BOUND_PREFIXES, split_comparator
from .simplification import simplify

SUPPORTED_RANGE_TYPES = ("ecosystem", "semver")

EVENT_COMPARATORS = {
    "introduced": Comparator.GREATER_THAN_OR_EQUAL,
    "fixed": Comparator.LESS_THAN,
    "limit": Comparator.LESS_THAN,
    "last_affected": Comparator.LESS_THAN_OR_EQUAL,
}

# Debian tracker values meaning "no fix known", used in place of an upper bound
DEBIAN_OPEN_UPPER_BOUNDS = frozenset({"<end-of-life>", "<unfixed>"})

LAST_KNOWN_AFFECTED_RANGE_KEY = "last_known_affected_version_range"


def range_from_osv(
    range_type: str,
    ecosystem: str,
    events: Iterable[tuple[str, str]],
    database_specific: Optional[Mapping[str, Any]] = None,
    registry: Optional[VersionSchemeRegistry] = None,
) -> VersionRange:
    """
    Convert a range type, ecosystem and range events as used by OSV.

    Trivial lower bounds are collapsed after building: >=0 alone becomes
    the wildcard, and >=0 followed by a single upper bound becomes that bound.

    Args:
        range_type: Type of the range, ECOSYSTEM or SEMVER (case-insensitive)
        ecosystem: OSV ecosystem of the affected package. Used verbatim as the
            scheme when it has no known versioning scheme.
        events: Ordered (event, version) pairs, e.g. [("introduced", "0"), ("fixed", "1.2.3")]
        database_specific: Optional database_specific mapping of the affected entry
        registry: Version scheme service, defaults to the shared registry

    Returns:
        The resulting VersionRange.

    Raises:
        MalformedInputError: If the range type is not supported, an event is unknown,
            or database_specific is not a mapping
        InvalidRangeError: If the produced range is invalid
        InvalidVersionError: If any version is invalid for the inferred scheme
    """
    if range_type.lower() not in SUPPORTED_RANGE_TYPES:
        raise MalformedInputError(f'Range type "{range_type}" is not supported', fragment=range_type)
    if database_specific is not None and not isinstance(database_specific, Mapping):
        raise MalformedInputError(
            f"database_specific must be a mapping, got {type(database_specific).__name__}",
            fragment="database_specific",
        )

    scheme = scheme_from_osv_ecosystem(ecosystem) or ecosystem
    logger.debug(f"OSV ecosystem '{ecosystem}' uses scheme '{scheme}'")

    builder = RangeBuilder(scheme, registry=registry)
    for position, (event, version) in enumerate(events):
        comparator = EVENT_COMPARATORS.get(event)
        if comparator is None:
            raise MalformedInputError(
                f'Invalid event "{event}" at position {position}', fragment=event, position=position
            )

        if scheme == SCHEME_DEBIAN and comparator.is_upper_bound and version in DEBIAN_OPEN_UPPER_BOUNDS:
            # Not a version; leaving the range open on this side is what it means.
            logger.debug(f"Skipping Debian upper bound '{version}' at position {position}")
            continue

        builder.with_constraint(comparator, version)

    if database_specific is not None:
        last_known_affected = database_specific.get(LAST_KNOWN_AFFECTED_RANGE_KEY)
        if isinstance(last_known_affected, str):
            parsed = split_comparator(last_known_affected, UPPER_BOUND_PREFIXES)
            if parsed is not None:
                builder.with_constraint(*parsed)
            else:
                logger.debug(f"Ignoring unrecognized {LAST_KNOWN_AFFECTED_RANGE_KEY} '{last_known_affected}'")

    return simplify(builder.build(), registry=registry)
