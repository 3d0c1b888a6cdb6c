"""Parser for semantic versions (semver, npm)."""

from semantic_version import Version

from ...schemes import SCHEME_NPM, SCHEME_SEMVER


class SemverParser:
    """Parser for semantic versions.

    Coerces partial versions the way advisory feeds write them:
    "0" becomes 0.0.0 and "1.2" becomes 1.2.0.
    """

    name = "semantic-version"
    schemes = (SCHEME_SEMVER, SCHEME_NPM)

    def parse(self, text: str) -> Version:
        return Version.coerce(text.strip())
