"""Tests for cga.workflow.regions module."""

import pytest

from cga.utils.errors import ConfigurationError, ExitCode, UnknownRegionError
from cga.workflow.regions import (
    REGION_ABBREVIATIONS,
    app_hostname,
    parse_region_table,
    resolve_region_abbreviation,
)
from tests.fakes import SAMPLE_REGION_TABLE


class TestParseRegionTable:
    """Tests for parse_region_table."""

    def test_sample_table(self):
        assert parse_region_table(SAMPLE_REGION_TABLE) == [
            "asia-east1",
            "europe-west",
            "europe-west3",
            "us-central",
        ]

    def test_drops_header_and_trailing_element(self):
        output = "HEADER\na b\nc d\ne f\n"

        regions = parse_region_table(output)

        assert len(regions) == len(output.split("\n")) - 2
        assert regions == ["a", "c", "e"]

    def test_header_only(self):
        assert parse_region_table("REGION  SUPPORTS_STANDARD\n") == []

    def test_empty_output(self):
        assert parse_region_table("") == []

    def test_line_without_space_is_kept_whole(self):
        assert parse_region_table("REGION\nus-central\n") == ["us-central"]

    def test_missing_trailing_newline_drops_last_row(self):
        assert parse_region_table("REGION\nasia-east1 True\nus-central True") == ["asia-east1"]


class TestResolveRegionAbbreviation:
    """Tests for resolve_region_abbreviation."""

    @pytest.mark.parametrize(
        ("region", "expected"),
        [
            ("europe-west3", "ey"),
            ("us-central", "uc"),
            ("europe-west", "ew"),
            ("asia-east1", "de"),
        ],
    )
    def test_known_regions(self, region, expected):
        assert resolve_region_abbreviation(region) == expected

    def test_abbreviations_are_two_lowercase_letters(self):
        for abbreviation in REGION_ABBREVIATIONS.values():
            assert len(abbreviation) == 2
            assert abbreviation.isalpha()
            assert abbreviation.islower()

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            REGION_ABBREVIATIONS["me-west1"] = "zf"

    def test_extra_entries_are_consulted(self):
        assert resolve_region_abbreviation("me-west1", {"me-west1": "zf"}) == "zf"

    def test_extra_entries_take_precedence(self):
        assert resolve_region_abbreviation("europe-west3", {"europe-west3": "zz"}) == "zz"

    def test_unknown_region_raises(self):
        with pytest.raises(UnknownRegionError) as exc_info:
            resolve_region_abbreviation("mars-north1")

        error = exc_info.value
        assert isinstance(error, ConfigurationError)
        assert error.region == "mars-north1"
        assert error.exit_code == ExitCode.CONFIGURATION_ERROR
        assert "mars-north1" in str(error)


def test_app_hostname():
    assert app_hostname("cga-demo12", "ey") == "cga-demo12.ey.r.appspot.com"
