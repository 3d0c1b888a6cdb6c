"""Registry dispatching version parsing to per-scheme parsers."""

from typing import Any, Optional

from ..exceptions import InvalidVersionError
from ..logging_config import logger
from ..schemes import SCHEME_GENERIC
from .protocol import VersionParser


class VersionSchemeRegistry:
    """Registry for version parsers.

    Manages parser instances and dispatches parsing to the parser
    registered for a scheme. Schemes without a parser of their own,
    such as raw ecosystem names used as scheme tags, are parsed with
    the fallback scheme's parser.

    Example:
        registry = VersionSchemeRegistry()
        registry.register(SemverParser())

        version = registry.parse("1.2.3", "npm")
    """

    def __init__(self, fallback_scheme: str = SCHEME_GENERIC) -> None:
        self._parsers: dict[str, VersionParser] = {}
        self.fallback_scheme = fallback_scheme

    def register(self, parser: VersionParser) -> None:
        """Register a parser for every scheme it declares.

        Args:
            parser: Parser instance implementing VersionParser protocol.
        """
        for scheme in parser.schemes:
            self._parsers[scheme.lower()] = parser
        logger.debug(f"Registered version parser: {parser.name} for {parser.schemes}")

    def get_parser_for(self, scheme: str) -> Optional[VersionParser]:
        """Get the parser registered for a scheme.

        Args:
            scheme: Scheme tag, matched case-insensitively

        Returns:
            Parser instance if found, None otherwise.
        """
        return self._parsers.get(scheme.lower())

    def parse(self, text: str, scheme: str) -> Any:
        """Parse version text under a scheme.

        Args:
            text: Version text
            scheme: Scheme tag of the range the version belongs to

        Returns:
            Scheme-specific comparable version value.

        Raises:
            InvalidVersionError: If the text is not valid under the scheme.
        """
        parser = self.get_parser_for(scheme)
        if parser is None:
            logger.debug(f"No version parser for scheme '{scheme}', using '{self.fallback_scheme}'")
            parser = self.get_parser_for(self.fallback_scheme)
            if parser is None:
                raise InvalidVersionError(text, scheme, "no version parser available")

        try:
            return parser.parse(text)
        except ValueError as e:
            raise InvalidVersionError(text, scheme, str(e)) from e
