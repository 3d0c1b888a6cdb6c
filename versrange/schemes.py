"""Versioning scheme tags and inference from advisory ecosystem identifiers."""

from typing import Optional

SCHEME_ALPINE = "alpine"
SCHEME_DEBIAN = "debian"
SCHEME_GEM = "gem"
SCHEME_GENERIC = "generic"
SCHEME_GOLANG = "golang"
SCHEME_MAVEN = "maven"
SCHEME_NPM = "npm"
SCHEME_NUGET = "nuget"
SCHEME_PYPI = "pypi"
SCHEME_RPM = "rpm"
SCHEME_SEMVER = "semver"

KNOWN_SCHEMES = (
    SCHEME_ALPINE,
    SCHEME_DEBIAN,
    SCHEME_GEM,
    SCHEME_GENERIC,
    SCHEME_GOLANG,
    SCHEME_MAVEN,
    SCHEME_NPM,
    SCHEME_NUGET,
    SCHEME_PYPI,
    SCHEME_RPM,
    SCHEME_SEMVER,
)

# GHSA ecosystems: actions, composer, erlang, go, maven, npm, nuget, other, pip, pub, rubygems, rust.
# Only those with a known versioning scheme are listed.
GHSA_ECOSYSTEM_SCHEMES = {
    "go": SCHEME_GOLANG,
    "maven": SCHEME_MAVEN,
    "npm": SCHEME_NPM,
    "nuget": SCHEME_NUGET,
    "pip": SCHEME_PYPI,
    "rubygems": SCHEME_GEM,
}

# Linux distributions in OSV may carry a ":<RELEASE>" suffix, e.g. "Debian:11" or "Ubuntu:20.04".
# Checked in order, before the exact-match table, and case-sensitively.
OSV_DISTRO_PREFIX_SCHEMES = (
    ("AlmaLinux", SCHEME_RPM),
    ("Alpine", SCHEME_ALPINE),
    ("Debian", SCHEME_DEBIAN),
    ("Mageia", SCHEME_RPM),
    ("Photon OS", SCHEME_RPM),
    ("Rocky Linux", SCHEME_RPM),
    ("Ubuntu", SCHEME_DEBIAN),
)

OSV_ECOSYSTEM_SCHEMES = {
    "go": SCHEME_GOLANG,
    "maven": SCHEME_MAVEN,
    "npm": SCHEME_NPM,
    "nuget": SCHEME_NUGET,
    "pypi": SCHEME_PYPI,
    "rubygems": SCHEME_GEM,
}


def scheme_from_ghsa_ecosystem(ecosystem: str) -> Optional[str]:
    """Infer the versioning scheme of a GitHub Security Advisories ecosystem.

    Args:
        ecosystem: GHSA ecosystem identifier (e.g. "pip", "Maven")

    Returns:
        Scheme tag, or None when the ecosystem has no known scheme.
    """
    return GHSA_ECOSYSTEM_SCHEMES.get(ecosystem.lower())


def scheme_from_osv_ecosystem(ecosystem: str) -> Optional[str]:
    """Infer the versioning scheme of an OSV ecosystem.

    See https://github.com/ossf/osv-schema/blob/main/docs/schema.md#affectedpackage-field

    Args:
        ecosystem: OSV ecosystem identifier (e.g. "PyPI", "Debian:12")

    Returns:
        Scheme tag, or None when the ecosystem has no known scheme.
    """
    for prefix, scheme in OSV_DISTRO_PREFIX_SCHEMES:
        if ecosystem.startswith(prefix):
            return scheme

    return OSV_ECOSYSTEM_SCHEMES.get(ecosystem.lower())
