"""Tests for the command-line front end."""

import json

from urn_regions.cli import main


DOC = """\
[RegionAreas]
urnEastmarch = [(10,-4)(12,-4)(12,2)]
[HoldMap]
(10,-3) = ["urnEastmarch"]
(11,-3) = ["urnEastmarch"]
"""


def write_inputs(tmp_path, doc=DOC):
    map_file = tmp_path / "tamriel.ini"
    map_file.write_text(doc, encoding="utf-8")
    metadata_file = tmp_path / "regions.json"
    metadata_file.write_text(json.dumps({"regions": [
        {"editor_id": "urnEastmarch", "color": "#4A6B8C", "map_name": "Eastmarch"},
    ]}), encoding="utf-8")
    return map_file, metadata_file


class TestCli:
    """Test running the parser from the command line."""

    def test_summary(self, tmp_path, capsys):
        map_file, metadata_file = write_inputs(tmp_path)
        assert main([str(map_file), "--metadata", str(metadata_file)]) == 0

        out = capsys.readouterr().out
        assert "Parsed 1 region containing 2 cells" in out
        assert "EditorID" not in out

    def test_verbose_lists_regions(self, tmp_path, capsys):
        map_file, metadata_file = write_inputs(tmp_path)
        assert main([str(map_file), "--metadata", str(metadata_file), "--verbose"]) == 0

        out = capsys.readouterr().out
        assert "EditorID: 'urnEastmarch'" in out
        assert "Displayname: 'Eastmarch'" in out

    def test_parse_failure_exit_code(self, tmp_path, capsys):
        map_file, metadata_file = write_inputs(
            tmp_path, '[RegionAreas]\nA = [(1,1)]\n[HoldMap]\n(1,1) = ["Swamp"]\n'
        )
        assert main([str(map_file), "--metadata", str(metadata_file)]) == 1
        assert "Region map parse failed" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.ini")]) == 1

    def test_missing_metadata_file(self, tmp_path, capsys):
        """An unreadable metadata file fails the run cleanly."""
        map_file, _ = write_inputs(tmp_path)
        assert main([str(map_file), "--metadata", str(tmp_path / "missing.json")]) == 1
        assert "Region map parse failed" in capsys.readouterr().err

    def test_invalid_metadata_file(self, tmp_path, capsys):
        """Out-of-range metadata values fail the run cleanly."""
        map_file, metadata_file = write_inputs(tmp_path)
        metadata_file.write_text(json.dumps({"regions": [
            {"editor_id": "urnEastmarch", "priority": 999},
        ]}), encoding="utf-8")
        assert main([str(map_file), "--metadata", str(metadata_file)]) == 1
        assert "Region map parse failed" in capsys.readouterr().err
