"""Unit tests for tile set and board files."""

import json

import pytest

from tiler.core.board import Board
from tiler.core.errors import InvalidTileIdError, TileSetFormatError
from tiler.core.tile_sets import get_tile_set
from tiler.formats.board_file import (
    board_from_dict,
    format_row,
    load_board,
    parse_row,
    save_board,
)
from tiler.formats.tile_set_file import load_tile_set, save_tile_set, tile_set_from_dict


class TestTileSetFile:
    """Tests for JSON tile set definitions."""

    def test_save_and_load_builtin(self, tmp_path):
        """A built-in set survives a save and load unchanged."""
        path = tmp_path / "floorplan.json"
        original = get_tile_set("floorplan")
        save_tile_set(original, str(path))
        assert load_tile_set(str(path)) == original

    def test_flags_written_only_when_set(self, tmp_path):
        """Flags are only written for tiles that set them."""
        path = tmp_path / "circuit.json"
        save_tile_set(get_tile_set("circuit"), str(path))
        data = json.loads(path.read_text())
        dskew = next(t for t in data["tiles"] if t["name"] == "dskew")
        bridge = next(t for t in data["tiles"] if t["name"] == "bridge")
        assert dskew["force_duplicate_mirror"] is True
        assert bridge == {"name": "bridge", "edges": "GBGWGBGW"}

    def test_derive_defaults_to_true(self):
        """Missing keys fall back to their defaults."""
        tile_set = tile_set_from_dict(
            {"name": "x", "tile_size": 4, "tiles": [{"name": "a", "edges": "GGGGGGGG"}]}
        )
        assert tile_set.derive is True
        assert tile_set.specs[0].suppress_same_family is False

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"tile_size": 3, "tiles": [{"name": "a", "edges": "GGGGGGGG"}]},
            {"name": "x", "tile_size": 0, "tiles": [{"name": "a", "edges": "GGGGGGGG"}]},
            {"name": "x", "tile_size": 3, "tiles": []},
            {"name": "x", "tile_size": 3, "tiles": [{"name": "a"}]},
            {"name": "x", "tile_size": 3, "tiles": [{"name": "a", "edges": "GGG"}]},
        ],
    )
    def test_invalid_definitions(self, data):
        """Malformed definitions raise TileSetFormatError."""
        with pytest.raises(TileSetFormatError):
            tile_set_from_dict(data)

    def test_invalid_json(self, tmp_path):
        """Unparseable files raise TileSetFormatError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(TileSetFormatError):
            load_tile_set(str(path))


class TestBoardFile:
    """Tests for saved boards."""

    def test_rows(self):
        """Rows are space-separated ids with '..' for empty cells."""
        assert parse_row("0 .. 12") == [0, None, 12]
        assert format_row([0, None, 12]) == "0 .. 12"

    def test_save_and_load(self, tmp_path):
        """A saved board loads back with its metadata."""
        board = Board(3, 2, tile_count=20)
        board.set(0, 0, 12)
        board.set(2, 1, 3)
        path = tmp_path / "board.json"
        save_board(board, str(path), "knots", "complete")

        data = json.loads(path.read_text())
        assert data["rows"] == ["12 .. ..", ".. .. 3"]

        loaded, metadata = load_board(str(path), tile_count=20)
        assert loaded.to_rows() == board.to_rows()
        assert loaded.placed_count == 2
        assert metadata == {"tile_set": "knots", "status": "complete"}

    def test_size_mismatch(self):
        """Rows that disagree with the declared size are rejected."""
        with pytest.raises(ValueError):
            board_from_dict({"width": 2, "height": 1, "rows": ["0"]}, tile_count=1)

    def test_unknown_tile_id(self):
        """Ids outside the catalog are rejected on load."""
        with pytest.raises(InvalidTileIdError):
            board_from_dict({"width": 1, "height": 1, "rows": ["7"]}, tile_count=2)
