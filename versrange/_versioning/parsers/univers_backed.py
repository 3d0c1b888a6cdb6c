"""Parsers backed by the univers version classes."""

from univers.versions import (
    AlpineLinuxVersion,
    DebianVersion,
    GenericVersion,
    GolangVersion,
    MavenVersion,
    NugetVersion,
    PypiVersion,
    RpmVersion,
    RubygemsVersion,
    Version,
)

from ...schemes import (
    SCHEME_ALPINE,
    SCHEME_DEBIAN,
    SCHEME_GEM,
    SCHEME_GENERIC,
    SCHEME_GOLANG,
    SCHEME_MAVEN,
    SCHEME_NUGET,
    SCHEME_PYPI,
    SCHEME_RPM,
)


class UniversParser:
    """Parser delegating to a univers Version subclass.

    univers raises InvalidVersion (a ValueError) for text the
    scheme does not accept.
    """

    def __init__(self, scheme: str, version_class: type[Version]) -> None:
        self.name = f"univers-{scheme}"
        self.schemes = (scheme,)
        self.version_class = version_class

    def parse(self, text: str) -> Version:
        return self.version_class(text)


UNIVERS_VERSION_CLASSES: dict[str, type[Version]] = {
    SCHEME_ALPINE: AlpineLinuxVersion,
    SCHEME_DEBIAN: DebianVersion,
    SCHEME_GEM: RubygemsVersion,
    SCHEME_GENERIC: GenericVersion,
    SCHEME_GOLANG: GolangVersion,
    SCHEME_MAVEN: MavenVersion,
    SCHEME_NUGET: NugetVersion,
    SCHEME_PYPI: PypiVersion,
    SCHEME_RPM: RpmVersion,
}


def univers_parsers() -> list[UniversParser]:
    """Create one parser per scheme covered by univers."""
    return [UniversParser(scheme, version_class) for scheme, version_class in UNIVERS_VERSION_CLASSES.items()]
