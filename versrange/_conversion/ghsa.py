"""Converter for GitHub Security Advisories version ranges."""

from typing import Optional

from .._versioning import VersionSchemeRegistry
from ..exceptions import MalformedInputError
from ..logging_config import logger
from ..models import RangeBuilder, VersionRange
from ..schemes import scheme_from_ghsa_ecosystem
from ._bounds import split_comparator


def range_from_ghsa(
    ecosystem: str, range_expr: str, registry: Optional[VersionSchemeRegistry] = None
) -> VersionRange:
    """
    Convert an ecosystem and version range as used by GitHub Security Advisories.

    Ranges are composed of one or more constraints separated by commas. Valid
    comparators are =, >=, >, < and <=, e.g. ">= 1.2.3, < 5.0.1".
    See https://docs.github.com/en/rest/security-advisories/global-advisories

    Args:
        ecosystem: GHSA ecosystem of the affected package. Used verbatim as the
            scheme when it has no known versioning scheme.
        range_expr: The vulnerable version range expression
        registry: Version scheme service, defaults to the shared registry

    Returns:
        The resulting VersionRange, constraints in expression order.

    Raises:
        MalformedInputError: If a constraint has no recognized comparator
        InvalidRangeError: If the produced range is invalid
        InvalidVersionError: If any version is invalid for the inferred scheme
    """
    scheme = scheme_from_ghsa_ecosystem(ecosystem) or ecosystem
    logger.debug(f"GHSA ecosystem '{ecosystem}' uses scheme '{scheme}'")

    builder = RangeBuilder(scheme, registry=registry)
    for position, token in enumerate(range_expr.split(",")):
        constraint_expr = token.strip()
        parsed = split_comparator(constraint_expr)
        if parsed is None:
            raise MalformedInputError(
                f'Invalid constraint "{constraint_expr}" at position {position}',
                fragment=constraint_expr,
                position=position,
            )
        comparator, version = parsed
        builder.with_constraint(comparator, version)

    return builder.build()
