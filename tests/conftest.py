"""Pytest configuration and shared fixtures for all tests."""

import pytest

from versrange._versioning import VersionSchemeRegistry, get_default_registry


@pytest.fixture(autouse=True)
def isolate_configuration(monkeypatch):
    """Run every test against the default configuration.

    Environment overrides would otherwise leak into the shared default
    registry, which is created once per process.
    """
    for name in ("VERSRANGE_LOG_LEVEL", "VERSRANGE_LOG_FORMAT", "VERSRANGE_FALLBACK_SCHEME"):
        monkeypatch.delenv(name, raising=False)
    get_default_registry.cache_clear()
    yield
    get_default_registry.cache_clear()


class RecordingParser:
    """Version parser accepting any text except the rejected ones, remembering what it saw."""

    name = "recording"

    def __init__(self, schemes, rejected=()):
        self.schemes = tuple(schemes)
        self.rejected = set(rejected)
        self.calls = []

    def parse(self, text):
        self.calls.append(text)
        if text in self.rejected:
            raise ValueError(f"rejected {text!r}")
        return text


@pytest.fixture
def recording_parser():
    """Parser registered for every scheme the tests use, plus the generic fallback."""
    return RecordingParser(
        ("alpine", "debian", "gem", "generic", "golang", "maven", "npm", "nuget", "pypi", "rpm", "semver"),
        rejected={"<unfixed>", "<end-of-life>"},
    )


@pytest.fixture
def recording_registry(recording_parser):
    registry = VersionSchemeRegistry()
    registry.register(recording_parser)
    return registry


@pytest.fixture
def make_parser():
    """Factory for recording parsers bound to the given schemes."""
    return RecordingParser
