"""Tests for the [HoldMap] parser."""

import pytest
from structlog.testing import capture_logs

from urn_regions.core.errors import DuplicateCellError, EmptyRegionCatalogError, UnknownRegionError
from urn_regions.core.hold_map import parse_hold_map, parse_region_names
from urn_regions.core.points import P2Int
from urn_regions.core.region_areas import parse_region_areas
from urn_regions.core.sections import FileHeader, split_sections


@pytest.fixture
def regions(metadata, patch):
    """Forest and urnEastmarch region records."""
    section = split_sections(
        "[RegionAreas]\nForest = [(1,1)(2,2)(3,1)]\nurnEastmarch = [(5,5)(6,6)]\n"
    )[FileHeader.REGION_AREAS]
    return parse_region_areas(section, metadata, patch)


def hold_section(body):
    return split_sections("[HoldMap]\n" + body)[FileHeader.HOLD_MAP]


class TestParseRegionNames:
    """Test splitting the region name list."""

    def test_names(self):
        assert parse_region_names('["Forest","urnEastmarch"]') == ["Forest", "urnEastmarch"]

    def test_empty_elements_dropped(self):
        assert parse_region_names('["Forest",,"",]') == ["Forest"]
        assert parse_region_names("[]") == []

    def test_single_quotes_and_spaces(self):
        assert parse_region_names("[ 'Forest' , \"Swamp\" ]") == ["Forest", "Swamp"]


class TestParseHoldMap:
    """Test building the cell index."""

    def test_cells_reference_regions(self, regions):
        """Each coordinate maps to its regions, in line order."""
        cells = parse_hold_map(
            hold_section('(1,1) = ["Forest"]\n(2,-3) = ["urnEastmarch", "Forest"]\n'), regions
        )
        assert [r.editor_name for r in cells[P2Int(1, 1)]] == ["Forest"]
        assert [r.editor_name for r in cells[P2Int(2, -3)]] == ["urnEastmarch", "Forest"]

    def test_references_are_identical_records(self, regions):
        cells = parse_hold_map(hold_section('(1,1) = ["Forest"]\n'), regions)
        assert cells[P2Int(1, 1)][0] is regions[0]

    def test_cell_with_no_regions(self, regions):
        cells = parse_hold_map(hold_section("(4,4) = []\n"), regions)
        assert cells[P2Int(4, 4)] == ()

    def test_unknown_region_is_fatal(self, regions):
        """Names must refer to declared regions."""
        with pytest.raises(UnknownRegionError) as exc_info:
            parse_hold_map(hold_section('(1,1) = ["Forest"]\n(1,2) = ["Swamp"]\n'), regions)
        err = exc_info.value
        assert err.key == "Swamp"
        assert err.line == 3
        assert err.kind == "unknown-region"
        assert "Swamp" in str(err) and "line 3" in str(err)

    def test_names_are_case_sensitive(self, regions):
        with pytest.raises(UnknownRegionError):
            parse_hold_map(hold_section('(1,1) = ["forest"]\n'), regions)

    def test_malformed_coordinate_skipped(self, regions):
        """A bad coordinate is a warning, not an error."""
        with capture_logs() as logs:
            cells = parse_hold_map(
                hold_section('(1,x) = ["Forest"]\n(2,2) = ["Forest"]\n'), regions
            )

        assert list(cells) == [P2Int(2, 2)]
        warnings = [e for e in logs if e["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["line"] == 2
        assert warnings[0]["text"] == '(1,x)=["Forest"]'

    def test_malformed_coordinate_not_checked_for_names(self, regions):
        """A skipped line does not resolve its region names."""
        cells = parse_hold_map(hold_section('(1,x) = ["Swamp"]\n'), regions)
        assert cells == {}

    def test_duplicate_coordinate_is_fatal(self, regions):
        with pytest.raises(DuplicateCellError) as exc_info:
            parse_hold_map(
                hold_section('(1,1) = ["Forest"]\n(1,1) = ["urnEastmarch"]\n'), regions
            )
        assert exc_info.value.line == 3
        assert exc_info.value.key == "(1,1)"

    def test_empty_catalog(self):
        """Parsing cells without regions fails before reading any line."""
        with pytest.raises(EmptyRegionCatalogError) as exc_info:
            parse_hold_map(hold_section('(1,x) = ["Forest"]\n'), [])
        assert exc_info.value.kind == "no-region-data"
        assert exc_info.value.line == 1

    def test_no_section(self, regions):
        assert parse_hold_map(None, regions) == {}
