"""Canonical version range model.

A range is a versioning scheme tag plus an ordered tuple of constraints.
Ranges are produced by the converters through a RangeBuilder, which
validates everything once when the range is built.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ._versioning import VersionSchemeRegistry, resolve_registry
from .exceptions import InvalidRangeError
from .logging_config import logger


class Comparator(Enum):
    """Comparators a constraint can use, valued with their vers symbols."""

    EQUAL = "="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    WILDCARD = "*"

    @property
    def is_upper_bound(self) -> bool:
        return self in (Comparator.LESS_THAN, Comparator.LESS_THAN_OR_EQUAL)


@dataclass(frozen=True)
class Constraint:
    """A single comparator and version bound within a range.

    The version is None only for WILDCARD, which matches every version.
    """

    comparator: Comparator
    version: Optional[str] = None

    def __str__(self) -> str:
        if self.comparator is Comparator.WILDCARD:
            return self.comparator.value
        return f"{self.comparator.value}{self.version}"


@dataclass(frozen=True)
class VersionRange:
    """A scheme-tagged, ordered set of constraints."""

    scheme: str
    constraints: tuple[Constraint, ...]


class RangeBuilder:
    """Accumulates constraints for a range and validates them on build.

    Example:
        version_range = (
            RangeBuilder("npm")
            .with_constraint(Comparator.GREATER_THAN_OR_EQUAL, "1.0.0")
            .with_constraint(Comparator.LESS_THAN, "1.4.2")
            .build()
        )
    """

    def __init__(self, scheme: str, registry: Optional[VersionSchemeRegistry] = None) -> None:
        self.scheme = scheme
        self._registry = registry
        self._constraints: list[Constraint] = []

    def with_constraint(self, comparator: Comparator, version: Optional[str] = None) -> "RangeBuilder":
        """Append a constraint built from a comparator and version text."""
        return self.with_existing_constraint(Constraint(comparator=comparator, version=version))

    def with_existing_constraint(self, constraint: Constraint) -> "RangeBuilder":
        """Append an already constructed constraint."""
        self._constraints.append(constraint)
        return self

    def has_constraints(self) -> bool:
        return bool(self._constraints)

    def build(self) -> VersionRange:
        """Validate the accumulated constraints and produce the range.

        Returns:
            The finished VersionRange, constraints in the order they were added.

        Raises:
            InvalidRangeError: If the constraints do not form a well-formed range.
            InvalidVersionError: If a version is not valid under the scheme.
        """
        if not self.scheme or not self.scheme.strip():
            raise InvalidRangeError("Range scheme must not be blank")
        if not self._constraints:
            raise InvalidRangeError("Range must contain at least one constraint")

        registry = resolve_registry(self._registry)
        for constraint in self._constraints:
            if constraint.comparator is Comparator.WILDCARD:
                if constraint.version is not None:
                    raise InvalidRangeError(
                        f"Comparator {Comparator.WILDCARD.value} must not have a version, got '{constraint.version}'"
                    )
                if len(self._constraints) > 1:
                    raise InvalidRangeError(
                        f"Comparator {Comparator.WILDCARD.value} is only allowed as the sole constraint of a range"
                    )
                continue

            if constraint.version is None or not constraint.version.strip():
                raise InvalidRangeError(f"Comparator {constraint.comparator.value} requires a version")

            registry.parse(constraint.version, self.scheme)

        version_range = VersionRange(scheme=self.scheme, constraints=tuple(self._constraints))
        logger.debug(f"Built range for scheme '{self.scheme}': {'|'.join(str(c) for c in version_range.constraints)}")
        return version_range
