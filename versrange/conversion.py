"""Public API for converting advisory ranges into canonical version ranges.

The core converters take the pieces of an upstream range directly. The
record helpers accept the JSON objects the upstream APIs return and pick
those pieces out.

Example usage:
    from versrange.conversion import range_from_ghsa, range_from_osv

    ghsa_range = range_from_ghsa("pip", ">= 1.0, < 1.4.2")
    osv_range = range_from_osv("ECOSYSTEM", "PyPI", [("introduced", "0"), ("fixed", "1.4.2")])
"""

import re
from typing import Any, Mapping, Optional

from ._conversion import range_from_ghsa, range_from_nvd, range_from_osv
from ._versioning import VersionSchemeRegistry
from .exceptions import MalformedInputError
from .logging_config import logger
from .models import VersionRange

# Commit ranges carry hashes, not versions
OSV_GIT_RANGE_TYPE = "GIT"

NVD_BOUND_FIELDS = (
    "versionStartExcluding",
    "versionStartIncluding",
    "versionEndExcluding",
    "versionEndIncluding",
)

CPE23_PREFIX = "cpe:2.3:"
CPE23_VERSION_INDEX = 5

_UNESCAPED_COLON = re.compile(r"(?<!\\):")
_CPE_ESCAPE = re.compile(r"\\(.)")


def _require(record: Mapping[str, Any], key: str, kind: str, position: Optional[int] = None) -> Any:
    if not isinstance(record, Mapping) or key not in record:
        raise MalformedInputError(f'{kind} is missing required field "{key}"', fragment=key, position=position)
    return record[key]


def _require_str(record: Mapping[str, Any], key: str, kind: str, position: Optional[int] = None) -> str:
    value = _require(record, key, kind, position)
    if not isinstance(value, str):
        raise MalformedInputError(
            f'{kind} field "{key}" must be a string, got {type(value).__name__}', fragment=key, position=position
        )
    return value


def ranges_from_ghsa_vulnerability(
    vulnerability: Mapping[str, Any], registry: Optional[VersionSchemeRegistry] = None
) -> list[VersionRange]:
    """
    Convert a vulnerability entry of a GitHub Security Advisory.

    Accepts both the REST shape (vulnerable_version_range) and the GraphQL
    shape (vulnerableVersionRange).

    Args:
        vulnerability: Entry of the advisory's vulnerabilities list
        registry: Version scheme service, defaults to the shared registry

    Returns:
        A list with the converted range, empty when the entry has no range.
    """
    package = _require(vulnerability, "package", "GHSA vulnerability")
    ecosystem = _require_str(package, "ecosystem", "GHSA package")

    range_expr = vulnerability.get("vulnerable_version_range") or vulnerability.get("vulnerableVersionRange")
    if not range_expr:
        logger.debug(f"GHSA vulnerability for '{package.get('name')}' has no version range")
        return []
    if not isinstance(range_expr, str):
        raise MalformedInputError(
            f"GHSA vulnerable version range must be a string, got {type(range_expr).__name__}",
            fragment=str(range_expr),
        )

    return [range_from_ghsa(ecosystem, range_expr, registry=registry)]


def ranges_from_osv_affected(
    affected: Mapping[str, Any], registry: Optional[VersionSchemeRegistry] = None
) -> list[VersionRange]:
    """
    Convert the ranges of an OSV affected entry.

    GIT ranges are skipped. Each event object contributes its single
    key/value pair, in order.

    Args:
        affected: Entry of the OSV record's affected list
        registry: Version scheme service, defaults to the shared registry

    Returns:
        One range per non-GIT range of the entry.
    """
    package = _require(affected, "package", "OSV affected entry")
    ecosystem = _require_str(package, "ecosystem", "OSV package")
    database_specific = affected.get("database_specific")

    osv_ranges = affected.get("ranges", [])
    if not isinstance(osv_ranges, list):
        raise MalformedInputError(
            f'OSV affected entry field "ranges" must be a list, got {type(osv_ranges).__name__}', fragment="ranges"
        )

    ranges: list[VersionRange] = []
    for range_position, osv_range in enumerate(osv_ranges):
        range_type = _require_str(osv_range, "type", "OSV range", range_position)
        if range_type.upper() == OSV_GIT_RANGE_TYPE:
            logger.debug(f"Skipping {OSV_GIT_RANGE_TYPE} range for '{package.get('name')}'")
            continue

        events: list[tuple[str, str]] = []
        osv_events = _require(osv_range, "events", "OSV range", range_position)
        if not isinstance(osv_events, list):
            raise MalformedInputError(
                f'OSV range at position {range_position} field "events" must be a list',
                fragment="events",
                position=range_position,
            )

        for position, event in enumerate(osv_events):
            if not isinstance(event, Mapping) or len(event) != 1:
                raise MalformedInputError(
                    f"OSV event at position {position} must have exactly one key",
                    fragment=str(event),
                    position=position,
                )
            events.extend(event.items())

        ranges.append(range_from_osv(range_type, ecosystem, events, database_specific, registry=registry))

    return ranges


def cpe_version(criteria: Optional[str]) -> Optional[str]:
    """Extract the version component of a CPE 2.3 formatted string.

    Args:
        criteria: CPE like "cpe:2.3:a:apache:log4j:2.14.1:*:*:*:*:*:*:*"

    Returns:
        The unescaped version component, or None if the CPE has none.
    """
    if not criteria or not criteria.startswith(CPE23_PREFIX):
        return None

    components = _UNESCAPED_COLON.split(criteria)
    if len(components) <= CPE23_VERSION_INDEX:
        return None

    return _CPE_ESCAPE.sub(r"\1", components[CPE23_VERSION_INDEX])


def range_from_nvd_cpe_match(
    cpe_match: Mapping[str, Any], registry: Optional[VersionSchemeRegistry] = None
) -> Optional[VersionRange]:
    """
    Convert an NVD 2.0 cpeMatch object.

    Args:
        cpe_match: cpeMatch object with "criteria" and optional version bounds
        registry: Version scheme service, defaults to the shared registry

    Returns:
        The converted range, or None when no constraint can be inferred.
    """
    criteria = _require(cpe_match, "criteria", "NVD cpeMatch")
    bounds = [cpe_match.get(field) for field in NVD_BOUND_FIELDS]

    return range_from_nvd(*bounds, exact_version=cpe_version(criteria), registry=registry)


__all__ = [
    "range_from_ghsa",
    "range_from_osv",
    "range_from_nvd",
    "ranges_from_ghsa_vulnerability",
    "ranges_from_osv_affected",
    "range_from_nvd_cpe_match",
    "cpe_version",
]
