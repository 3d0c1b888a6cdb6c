"""Tests for NVD CPE match range conversion."""

import pytest

from versrange.conversion import range_from_nvd
from versrange.models import Comparator, Constraint


class TestRangeFromNvd:
    """Tests for range_from_nvd."""

    def test_scheme_is_generic(self):
        assert range_from_nvd(version_end_excluding="5.0.0").scheme == "generic"

    def test_all_bounds_in_fixed_order(self):
        version_range = range_from_nvd(
            version_start_excluding="1.0",
            version_start_including="1.1",
            version_end_excluding="3.0",
            version_end_including="2.9",
        )

        assert version_range.constraints == (
            Constraint(Comparator.GREATER_THAN, "1.0"),
            Constraint(Comparator.GREATER_THAN_OR_EQUAL, "1.1"),
            Constraint(Comparator.LESS_THAN, "3.0"),
            Constraint(Comparator.LESS_THAN_OR_EQUAL, "2.9"),
        )

    def test_start_including_end_excluding(self):
        version_range = range_from_nvd(version_start_including="2.0.0", version_end_excluding="2.15.0")

        assert version_range.constraints == (
            Constraint(Comparator.GREATER_THAN_OR_EQUAL, "2.0.0"),
            Constraint(Comparator.LESS_THAN, "2.15.0"),
        )

    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_bounds_ignored(self, blank):
        version_range = range_from_nvd(version_start_including=blank, version_end_including="4.1")
        assert version_range.constraints == (Constraint(Comparator.LESS_THAN_OR_EQUAL, "4.1"),)

    def test_not_applicable_yields_no_range(self):
        assert range_from_nvd(exact_version="-") is None

    def test_any_version_is_wildcard(self):
        version_range = range_from_nvd(exact_version="*")
        assert version_range.constraints == (Constraint(Comparator.WILDCARD),)

    def test_exact_version(self):
        version_range = range_from_nvd(exact_version="2.14.1")
        assert version_range.constraints == (Constraint(Comparator.EQUAL, "2.14.1"),)

    @pytest.mark.parametrize("exact_version", [None, "", "  "])
    def test_nothing_yields_no_range(self, exact_version):
        assert range_from_nvd(exact_version=exact_version) is None

    def test_bound_takes_precedence_over_wildcard(self):
        version_range = range_from_nvd(version_end_excluding="5.0.0", exact_version="*")
        assert version_range.constraints == (Constraint(Comparator.LESS_THAN, "5.0.0"),)

    def test_bound_takes_precedence_over_exact_version(self):
        version_range = range_from_nvd(version_start_including="1.0", exact_version="1.2")
        assert version_range.constraints == (Constraint(Comparator.GREATER_THAN_OR_EQUAL, "1.0"),)

    def test_bound_with_not_applicable(self):
        version_range = range_from_nvd(version_end_including="3.2", exact_version="-")
        assert version_range.constraints == (Constraint(Comparator.LESS_THAN_OR_EQUAL, "3.2"),)

    def test_versions_validated_under_generic(self, recording_registry, recording_parser):
        range_from_nvd(version_start_excluding="1.0", version_end_excluding="2.0", registry=recording_registry)
        assert recording_parser.calls == ["1.0", "2.0"]

    def test_idempotent(self):
        assert range_from_nvd(version_end_including="9.0") == range_from_nvd(version_end_including="9.0")
