"""Converter for NVD CPE match version ranges."""

from typing import Optional

from .._versioning import VersionSchemeRegistry
from ..logging_config import logger
from ..models import Comparator, RangeBuilder, VersionRange
from ..schemes import SCHEME_GENERIC

CPE_ANY = "*"
CPE_NOT_APPLICABLE = "-"


def _is_present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def range_from_nvd(
    version_start_excluding: Optional[str] = None,
    version_start_including: Optional[str] = None,
    version_end_excluding: Optional[str] = None,
    version_end_including: Optional[str] = None,
    exact_version: Optional[str] = None,
    registry: Optional[VersionSchemeRegistry] = None,
) -> Optional[VersionRange]:
    """
    Convert the version range or exact version of an NVD CPE match.

    Args:
        version_start_excluding: versionStartExcluding of the CPE match
        version_start_including: versionStartIncluding of the CPE match
        version_end_excluding: versionEndExcluding of the CPE match
        version_end_including: versionEndIncluding of the CPE match
        exact_version: Version component of the matched CPE
        registry: Version scheme service, defaults to the shared registry

    Returns:
        The resulting VersionRange, or None when no constraint can be inferred.

    Raises:
        InvalidRangeError: If the produced range is invalid
        InvalidVersionError: If any version is invalid for the generic scheme
    """
    # NVD data carries no package ecosystem to infer a scheme from.
    builder = RangeBuilder(SCHEME_GENERIC, registry=registry)

    bounds = (
        (Comparator.GREATER_THAN, version_start_excluding),
        (Comparator.GREATER_THAN_OR_EQUAL, version_start_including),
        (Comparator.LESS_THAN, version_end_excluding),
        (Comparator.LESS_THAN_OR_EQUAL, version_end_including),
    )
    for comparator, version in bounds:
        if _is_present(version):
            builder.with_constraint(comparator, version)

    # Without bounds the CPE version itself is either an exact version,
    # a wildcard matching all versions, or "not applicable" matching none.
    if not builder.has_constraints() and _is_present(exact_version):
        if exact_version == CPE_ANY:
            builder.with_constraint(Comparator.WILDCARD)
        elif exact_version != CPE_NOT_APPLICABLE:
            builder.with_constraint(Comparator.EQUAL, exact_version)

    if not builder.has_constraints():
        logger.debug(f"No range inferred from NVD CPE match (exact version: {exact_version!r})")
        return None

    return builder.build()
