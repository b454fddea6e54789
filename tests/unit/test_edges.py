"""Unit tests for edge description transforms and directions."""

import pytest

from tiler.core.catalog import Catalog
from tiler.core.directions import (
    BOTTOM,
    LEFT,
    RIGHT,
    TOP,
    direction_from,
    opposite,
    step,
)
from tiler.core.edges import (
    DERIVATION_TRANSFORMS,
    MIRROR_HORIZONTAL,
    NONE,
    ROTATE_90,
    apply_transform,
    mirror_horizontal,
    mirror_vertical,
    rotate,
    sides_from_edges,
)
from tiler.core.errors import EdgeStringError


class TestSides:
    """Tests for splitting edge descriptions into sides."""

    def test_sides_share_corners_clockwise(self):
        """Each side's last zone is the next side's first zone, read clockwise."""
        top, right, bottom, left = sides_from_edges("ABCDEFGH")
        assert top == ("A", "B", "C")
        assert right == ("C", "D", "E")
        assert bottom == ("G", "F", "E")
        assert left == ("A", "H", "G")

    def test_invalid_length_rejected(self):
        """Edge descriptions must have eight zones."""
        with pytest.raises(EdgeStringError):
            sides_from_edges("ABC")

    def test_non_string_rejected(self):
        """Only strings are accepted as edge descriptions."""
        with pytest.raises(EdgeStringError):
            sides_from_edges(None)


class TestMirrors:
    """Tests for horizontal and vertical mirroring."""

    def test_mirror_horizontal(self):
        """Horizontal mirror applies the fixed zone permutation."""
        assert mirror_horizontal("ABCDEFGH") == "CBAHGFED"

    def test_mirror_vertical(self):
        """Vertical mirror applies the fixed zone permutation."""
        assert mirror_vertical("ABCDEFGH") == "GFEDCBAH"

    def test_mirror_horizontal_swaps_left_and_right(self):
        """Left and right trade places; top and bottom reverse."""
        top, right, bottom, left = sides_from_edges("ABCDEFGH")
        m_top, m_right, m_bottom, m_left = sides_from_edges(mirror_horizontal("ABCDEFGH"))
        assert m_right == left
        assert m_left == right
        assert m_top == tuple(reversed(top))
        assert m_bottom == tuple(reversed(bottom))

    def test_mirror_vertical_swaps_top_and_bottom(self):
        """Top and bottom trade places; the left side reverses."""
        top, right, bottom, left = sides_from_edges("ABCDEFGH")
        m_top, m_right, m_bottom, m_left = sides_from_edges(mirror_vertical("ABCDEFGH"))
        assert m_top == bottom
        assert m_bottom == top
        assert m_left == tuple(reversed(left))

    def test_symmetric_tile_unchanged(self):
        """A fully symmetric tile mirrors onto itself."""
        assert mirror_horizontal("GBGBGBGB") == "GBGBGBGB"
        assert mirror_vertical("GBGBGBGB") == "GBGBGBGB"


class TestRotate:
    """Tests for clockwise rotation."""

    def test_rotate_90_moves_left_side_to_top(self):
        """A quarter turn shifts the string by two zones."""
        assert rotate("ABCDEFGH", 90) == "GHABCDEF"

    def test_rotate_180(self):
        """A half turn shifts the string by four zones."""
        assert rotate("ABCDEFGH", 180) == "EFGHABCD"

    def test_rotate_270(self):
        """Three quarter turns shift the string by six zones."""
        assert rotate("ABCDEFGH", 270) == "CDEFGHAB"

    def test_rotate_full_turn_is_identity(self):
        """Whole turns leave the description unchanged."""
        assert rotate("ABCDEFGH", 360) == "ABCDEFGH"
        assert rotate("ABCDEFGH", 0) == "ABCDEFGH"

    def test_negative_rotation_is_counter_clockwise(self):
        """Negative angles rotate counter-clockwise."""
        assert rotate("ABCDEFGH", -90) == rotate("ABCDEFGH", 270)

    def test_rotate_90_new_top_is_old_left_reversed(self):
        """After a quarter turn the old left side reads along the top."""
        _, _, _, left = sides_from_edges("ABCDEFGH")
        top, _, _, _ = sides_from_edges(rotate("ABCDEFGH", 90))
        assert top == tuple(reversed(left))

    def test_non_right_angle_rejected(self):
        """Only multiples of 90 degrees are supported."""
        with pytest.raises(ValueError):
            rotate("ABCDEFGH", 45)


BUILTIN_TILE_SETS = ("circuit", "castle", "knots", "simple", "floorplan", "rooms", "circles")


def builtin_edge_strings():
    """Every distinct edge description in the built-in catalogs."""
    edges = set()
    for name in BUILTIN_TILE_SETS:
        edges.update(tile.edges for tile in Catalog.build(name))
    return sorted(edges)


class TestTransformLaws:
    """Algebraic laws of the transforms, checked on every built-in tile."""

    def test_four_quarter_turns_are_identity(self):
        """Rotating by 90 degrees four times returns the original description."""
        for edges in builtin_edge_strings():
            turned = edges
            for _ in range(4):
                turned = rotate(turned, 90)
            assert turned == edges

    def test_quarter_turn_then_three_quarters_is_identity(self):
        """A 90 degree turn is undone by a 270 degree turn."""
        for edges in builtin_edge_strings():
            assert rotate(rotate(edges, 90), 270) == edges

    def test_mirror_horizontal_is_involution(self):
        """Mirroring horizontally twice returns the original description."""
        for edges in builtin_edge_strings():
            assert mirror_horizontal(mirror_horizontal(edges)) == edges

    def test_mirror_vertical_is_involution(self):
        """Mirroring vertically twice returns the original description."""
        for edges in builtin_edge_strings():
            assert mirror_vertical(mirror_vertical(edges)) == edges

    def test_law_holds_for_asymmetric_description(self):
        """The laws also hold where every zone is distinct."""
        edges = "ABCDEFGH"
        assert rotate(rotate(rotate(rotate(edges, 90), 90), 90), 90) == edges
        assert mirror_horizontal(mirror_horizontal(edges)) == edges
        assert mirror_vertical(mirror_vertical(edges)) == edges


class TestApplyTransform:
    """Tests for dispatching transform tags."""

    def test_none_is_identity(self):
        """The identity tag returns the description unchanged."""
        assert apply_transform("ABCDEFGH", NONE) == "ABCDEFGH"

    def test_named_transforms(self):
        """Transform tags dispatch to the matching operation."""
        assert apply_transform("ABCDEFGH", MIRROR_HORIZONTAL) == "CBAHGFED"
        assert apply_transform("ABCDEFGH", ROTATE_90) == "GHABCDEF"

    def test_derivation_order(self):
        """Derivation tries the horizontal mirror first, then four others."""
        assert DERIVATION_TRANSFORMS[0] == MIRROR_HORIZONTAL
        assert len(DERIVATION_TRANSFORMS) == 5

    def test_unknown_transform(self):
        """Unknown transform tags are rejected."""
        with pytest.raises(ValueError, match="Unknown transform"):
            apply_transform("ABCDEFGH", "shear")


class TestDirections:
    """Tests for direction helpers."""

    def test_opposites(self):
        """Every direction has a fixed opposite."""
        assert opposite(TOP) == BOTTOM
        assert opposite(BOTTOM) == TOP
        assert opposite(LEFT) == RIGHT
        assert opposite(RIGHT) == LEFT

    def test_step_uses_screen_coordinates(self):
        """TOP decreases y and RIGHT increases x."""
        assert step(2, 2, TOP) == (2, 1)
        assert step(2, 2, BOTTOM) == (2, 3)
        assert step(2, 2, LEFT) == (1, 2)
        assert step(2, 2, RIGHT) == (3, 2)

    def test_direction_from(self):
        """Adjacent positions resolve to the direction between them."""
        assert direction_from((2, 2), (3, 2)) == RIGHT
        assert direction_from((2, 2), (2, 1)) == TOP

    def test_direction_from_rejects_diagonal(self):
        """Diagonal positions are not adjacent."""
        with pytest.raises(ValueError):
            direction_from((0, 0), (1, 1))
