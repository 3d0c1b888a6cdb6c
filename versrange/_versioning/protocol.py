"""Protocol definition for version parsers."""

from typing import Any, Protocol


class VersionParser(Protocol):
    """Protocol for per-scheme version parsing plugins.

    Each parser turns version text into a comparable, scheme-specific value.
    Parsers are registered with VersionSchemeRegistry and selected by scheme tag.

    Example:
        class PypiParser:
            name = "pypi"
            schemes = ("pypi",)

            def parse(self, text: str) -> Any:
                return PypiVersion(text)
    """

    @property
    def name(self) -> str:
        """Human-readable name of this parser.

        Used for logging and diagnostics.
        """
        ...

    @property
    def schemes(self) -> tuple[str, ...]:
        """Scheme tags this parser handles, e.g. ("semver", "npm")."""
        ...

    def parse(self, text: str) -> Any:
        """Parse version text into a comparable value.

        Args:
            text: Version text as found in the advisory

        Returns:
            Scheme-specific version object supporting ordering.

        Raises:
            ValueError: If the text is not a valid version for this scheme.
        """
        ...
