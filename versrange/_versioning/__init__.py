"""Version scheme service.

Parses version text under a named versioning scheme, rejecting text the
scheme does not accept. Range building uses it to validate every bound.

Example usage:
    from versrange._versioning import get_default_registry

    version = get_default_registry().parse("1:2.30-1", "debian")
"""

from functools import lru_cache
from typing import Optional

from ..schemes import SCHEME_GENERIC
from .parsers import SemverParser, UniversParser, univers_parsers
from .protocol import VersionParser
from .registry import VersionSchemeRegistry


def create_default_registry(fallback_scheme: str = SCHEME_GENERIC) -> VersionSchemeRegistry:
    """Create registry with all default parsers."""
    registry = VersionSchemeRegistry(fallback_scheme=fallback_scheme)

    # semver, npm
    registry.register(SemverParser())

    # Everything else
    for parser in univers_parsers():
        registry.register(parser)

    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> VersionSchemeRegistry:
    """Get the shared default registry, created on first use.

    The fallback scheme is read from the environment configuration.
    """
    from ..config import load_fallback_scheme

    return create_default_registry(fallback_scheme=load_fallback_scheme())


def resolve_registry(registry: Optional[VersionSchemeRegistry]) -> VersionSchemeRegistry:
    """Return the given registry, or the shared default when None."""
    return registry if registry is not None else get_default_registry()


__all__ = [
    # Main API
    "get_default_registry",
    "create_default_registry",
    "resolve_registry",
    # Classes for advanced usage
    "VersionSchemeRegistry",
    "VersionParser",
    # Parsers
    "SemverParser",
    "UniversParser",
]
