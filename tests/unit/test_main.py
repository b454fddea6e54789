"""Unit tests for the tiler-generate command line."""

import argparse
import json

import pytest

from tiler.core.tile_sets import get_tile_set, tile_set_names
from tiler.main import main, parse_canvas


class TestParseCanvas:
    """Tests for the --canvas argument type."""

    def test_valid(self):
        """WIDTHxHEIGHT parses in either case."""
        assert parse_canvas("800x600") == (800, 600)
        assert parse_canvas("64X32") == (64, 32)

    @pytest.mark.parametrize("value", ["800", "axb", "0x10", "10x-1"])
    def test_invalid(self, value):
        """Malformed or non-positive canvases are rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_canvas(value)


class TestMain:
    """Tests for end-to-end command line runs."""

    def test_writes_json_and_png(self, tmp_path):
        """A run writes both output files."""
        json_path = tmp_path / "board.json"
        png_path = tmp_path / "board.png"
        code = main([
            "--tile-set", "knots", "--width", "5", "--height", "4", "--seed", "3",
            "--quiet", "--json", str(json_path), "--png", str(png_path), "--cell-px", "1",
            "--max-iterations", "2000",
        ])
        assert code in (0, 2)
        data = json.loads(json_path.read_text())
        assert data["tile_set"] == "knots"
        assert (data["width"], data["height"]) == (5, 4)
        assert png_path.exists()

    def test_single_cell_board_succeeds(self, capsys):
        """A one-cell board exits 0 and reports completion."""
        assert main(["-t", "rooms", "--width", "1", "--height", "1", "--text"]) == 0
        out = capsys.readouterr().out
        assert "Status: complete" in out

    def test_canvas_sizing(self, tmp_path):
        """Without --width/--height the canvas sets the board size."""
        json_path = tmp_path / "board.json"
        main(["-t", "circles", "--canvas", "256x128", "-p", "2", "--seed", "1",
              "--quiet", "--json", str(json_path), "--max-iterations", "2000"])
        data = json.loads(json_path.read_text())
        assert (data["width"], data["height"]) == (4, 2)

    def test_unknown_tile_set(self, capsys):
        """An unknown tile set exits 1 with an error."""
        assert main(["--tile-set", "nope", "--width", "2", "--height", "2"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_width_without_height(self, capsys):
        """--width alone is rejected."""
        assert main(["--tile-set", "knots", "--width", "2"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_tile_set_file(self, tmp_path):
        """A tile set can come from a JSON file."""
        definition = {
            "name": "cli-plain",
            "tile_size": 2,
            "tiles": [{"name": "floor", "edges": "GGGGGGGG"}],
        }
        path = tmp_path / "tiles.json"
        path.write_text(json.dumps(definition))
        json_path = tmp_path / "board.json"
        code = main(["--tile-set-file", str(path), "--width", "3", "--height", "3",
                     "--quiet", "--json", str(json_path), "--max-iterations", "2000"])
        assert code == 0
        data = json.loads(json_path.read_text())
        assert data["rows"] == ["0 0 0", "0 0 0", "0 0 0"]
        assert data["status"] == "complete"

    def test_tile_set_file_is_not_registered(self, tmp_path):
        """A loaded tile set is used for the run without joining the registry."""
        definition = {
            "name": "cli-plain",
            "tile_size": 2,
            "tiles": [{"name": "floor", "edges": "GGGGGGGG"}],
        }
        path = tmp_path / "tiles.json"
        path.write_text(json.dumps(definition))
        assert main(["--tile-set-file", str(path), "--width", "2", "--height", "2",
                     "--quiet"]) == 0
        assert "cli-plain" not in tile_set_names()

    def test_tile_set_file_cannot_shadow_builtin(self, tmp_path):
        """A file named like a built-in set leaves the built-in untouched."""
        builtin = get_tile_set("circuit")
        definition = {
            "name": "circuit",
            "tile_size": 2,
            "tiles": [{"name": "floor", "edges": "GGGGGGGG"}],
        }
        path = tmp_path / "tiles.json"
        path.write_text(json.dumps(definition))
        json_path = tmp_path / "board.json"
        assert main(["--tile-set-file", str(path), "--width", "2", "--height", "2",
                     "--quiet", "--json", str(json_path)]) == 0
        assert json.loads(json_path.read_text())["rows"] == ["0 0", "0 0"]
        assert get_tile_set("circuit") is builtin
