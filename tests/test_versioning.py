"""Tests for the version scheme service."""

import pytest
from semantic_version import Version as SemanticVersion

from versrange._versioning import (
    SemverParser,
    UniversParser,
    VersionSchemeRegistry,
    create_default_registry,
    get_default_registry,
)
from versrange.conversion import range_from_ghsa
from versrange.exceptions import ConfigurationError, InvalidVersionError
from versrange.models import Comparator, Constraint
from versrange.schemes import KNOWN_SCHEMES


class TestVersionSchemeRegistry:
    """Tests for VersionSchemeRegistry dispatching."""

    def test_dispatches_by_scheme(self, make_parser):
        npm = make_parser(("npm",))
        pypi = make_parser(("pypi",))
        registry = VersionSchemeRegistry()
        registry.register(npm)
        registry.register(pypi)

        registry.parse("1.0.0", "npm")
        registry.parse("2.0", "pypi")

        assert npm.calls == ["1.0.0"]
        assert pypi.calls == ["2.0"]

    def test_scheme_lookup_case_insensitive(self, make_parser):
        parser = make_parser(("pypi",))
        registry = VersionSchemeRegistry()
        registry.register(parser)

        assert registry.get_parser_for("PyPI") is parser

    def test_unregistered_scheme_uses_fallback(self, make_parser):
        """Test raw ecosystem tags are parsed with the fallback scheme's parser."""
        generic = make_parser(("generic",))
        registry = VersionSchemeRegistry()
        registry.register(generic)

        registry.parse("1.2.3", "rust")

        assert generic.calls == ["1.2.3"]
        assert registry.get_parser_for("rust") is None

    def test_missing_fallback_parser(self):
        registry = VersionSchemeRegistry(fallback_scheme="generic")

        with pytest.raises(InvalidVersionError, match="no version parser"):
            registry.parse("1.0", "rust")

    def test_parser_error_wrapped(self, make_parser):
        """Test parser ValueErrors become InvalidVersionError with version and scheme."""
        registry = VersionSchemeRegistry()
        registry.register(make_parser(("npm",), rejected={"bogus"}))

        with pytest.raises(InvalidVersionError) as exc_info:
            registry.parse("bogus", "npm")

        assert exc_info.value.version == "bogus"
        assert exc_info.value.scheme == "npm"
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert isinstance(exc_info.value, ValueError)

    def test_parser_registered_for_each_scheme(self):
        registry = VersionSchemeRegistry()
        parser = SemverParser()
        registry.register(parser)

        assert registry.get_parser_for("semver") is parser
        assert registry.get_parser_for("npm") is parser


class TestDefaultRegistry:
    """Tests for the default parsers."""

    def test_covers_all_known_schemes(self):
        registry = create_default_registry()
        for scheme in KNOWN_SCHEMES:
            assert registry.get_parser_for(scheme) is not None, scheme

    def test_semver_schemes_use_semantic_version(self):
        registry = create_default_registry()
        assert isinstance(registry.get_parser_for("npm"), SemverParser)
        assert isinstance(registry.get_parser_for("semver"), SemverParser)
        assert isinstance(registry.get_parser_for("debian"), UniversParser)

    def test_shared_registry_is_cached(self):
        assert get_default_registry() is get_default_registry()

    def test_shared_registry_reads_fallback_scheme(self, monkeypatch):
        monkeypatch.setenv("VERSRANGE_FALLBACK_SCHEME", "semver")
        get_default_registry.cache_clear()

        assert get_default_registry().fallback_scheme == "semver"

    def test_shared_registry_ignores_logging_settings(self, monkeypatch):
        """Test an invalid logging variable does not block range conversion."""
        monkeypatch.setenv("VERSRANGE_LOG_LEVEL", "verbose")
        monkeypatch.setenv("VERSRANGE_LOG_FORMAT", "xml")
        get_default_registry.cache_clear()

        version_range = range_from_ghsa("npm", "< 1.0.0")

        assert version_range.constraints == (Constraint(Comparator.LESS_THAN, "1.0.0"),)

    def test_shared_registry_rejects_unknown_fallback_scheme(self, monkeypatch):
        monkeypatch.setenv("VERSRANGE_FALLBACK_SCHEME", "rust")
        get_default_registry.cache_clear()

        with pytest.raises(ConfigurationError, match="VERSRANGE_FALLBACK_SCHEME"):
            get_default_registry()

    @pytest.mark.parametrize(
        "text,scheme",
        [
            ("1.2.3", "npm"),
            ("1.2.3-beta.1", "semver"),
            ("1.4.2", "pypi"),
            ("2.13.4", "maven"),
            ("1:2.30-1", "debian"),
            ("2.30-1ubuntu1", "debian"),
            ("5.0.0", "generic"),
        ],
    )
    def test_valid_versions(self, text, scheme):
        assert create_default_registry().parse(text, scheme) is not None

    def test_semver_coerces_partial_versions(self):
        """Test advisory-style partial versions are coerced."""
        registry = create_default_registry()
        assert registry.parse("0", "npm") == SemanticVersion("0.0.0")
        assert registry.parse("1.2", "semver") == SemanticVersion("1.2.0")

    def test_parsed_versions_are_ordered(self):
        registry = create_default_registry()
        assert registry.parse("1.10.0", "npm") > registry.parse("1.9.0", "npm")
        assert registry.parse("1:1.0-1", "debian") > registry.parse("2.0-1", "debian")

    @pytest.mark.parametrize("text", ["not-a-version", "<unfixed>", ""])
    def test_invalid_semver(self, text):
        with pytest.raises(InvalidVersionError):
            create_default_registry().parse(text, "npm")
