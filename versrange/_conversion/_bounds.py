"""Comparator prefix matching shared by the textual range converters."""

from typing import Optional

from ..models import Comparator

# Longer prefixes come first so "<=" is never read as "<".
GHSA_COMPARATOR_PREFIXES = (
    ("<=", Comparator.LESS_THAN_OR_EQUAL),
    ("<", Comparator.LESS_THAN),
    (">=", Comparator.GREATER_THAN_OR_EQUAL),
    (">", Comparator.GREATER_THAN),
    ("=", Comparator.EQUAL),
)

UPPER_BOUND_PREFIXES = (
    ("<=", Comparator.LESS_THAN_OR_EQUAL),
    ("<", Comparator.LESS_THAN),
)


def split_comparator(
    expression: str, prefixes: tuple[tuple[str, Comparator], ...] = GHSA_COMPARATOR_PREFIXES
) -> Optional[tuple[Comparator, str]]:
    """Split a constraint expression like ">= 1.2.3" into comparator and version.

    Args:
        expression: Trimmed constraint expression
        prefixes: Ordered (prefix, comparator) pairs, first match wins

    Returns:
        (comparator, version text) tuple, or None if no prefix matches.
    """
    for prefix, comparator in prefixes:
        if expression.startswith(prefix):
            return comparator, expression[len(prefix) :].strip()
    return None
