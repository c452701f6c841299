"""
Tests for the shape catalog.
"""

import numpy as np
import pytest

from koala_kombo.game import CATALOG, Coordinate, ShapeId, all_shapes, coords, get_shape
from koala_kombo.game.shapes import BASE_SHAPES, offsets_of


class TestCatalog:
    """Every shape is defined once, normalized and immutable."""

    def test_every_id_has_a_shape(self):
        assert set(CATALOG) == set(ShapeId)
        assert [s.id for s in all_shapes()] == list(ShapeId)

    @pytest.mark.parametrize("shape_id", list(ShapeId))
    def test_offsets_are_normalized_and_unique(self, shape_id):
        cells = coords(shape_id)
        assert min(c.x for c in cells) == 0
        assert min(c.y for c in cells) == 0
        assert len(set(cells)) == len(cells)

    def test_lookup_accepts_plain_ints(self):
        assert get_shape(int(ShapeId.SINGLE)).cells == (Coordinate(0, 0),)

    def test_unknown_id_is_rejected(self):
        with pytest.raises(ValueError):
            get_shape(len(ShapeId))

    def test_shapes_are_frozen(self):
        shape = get_shape(ShapeId.O)
        with pytest.raises(AttributeError):
            shape.cells = ()

    def test_offsets_follow_pattern_row_order(self):
        assert coords(ShapeId.T) == (
            Coordinate(1, 0), Coordinate(0, 1), Coordinate(1, 1), Coordinate(2, 1),
        )
        assert coords(ShapeId.L) == (
            Coordinate(2, 0), Coordinate(0, 1), Coordinate(1, 1), Coordinate(2, 1),
        )


class TestVariety:
    """The catalog carries the mix of pieces needed for balanced play."""

    def test_straight_bars_in_both_orientations(self):
        for length in range(2, 6):
            horizontal = [s for s in all_shapes() if s.size == length and s.height == 1]
            vertical = [s for s in all_shapes() if s.size == length and s.width == 1]
            assert horizontal and vertical

    def test_single_cell_piece(self):
        assert any(s.size == 1 for s in all_shapes())

    def test_square_blocks(self):
        o = get_shape(ShapeId.O)
        huge = get_shape(ShapeId.HUGE)
        assert (o.width, o.height, o.size) == (2, 2, 4)
        assert (huge.width, huge.height, huge.size) == (3, 3, 9)

    def test_large_blocks(self):
        assert get_shape(ShapeId.WIDE_O).size == 6
        assert get_shape(ShapeId.TALL_O).size == 6

    def test_same_size_different_geometry(self):
        tetrominoes = {frozenset(s.cells) for s in all_shapes() if s.size == 4}
        assert len(tetrominoes) == len([s for s in all_shapes() if s.size == 4])
        assert len(tetrominoes) > 1

    def test_bent_shapes_have_rotations(self):
        for group in (
            (ShapeId.T, ShapeId.T_DOWN, ShapeId.T_LEFT, ShapeId.T_RIGHT),
            (ShapeId.L, ShapeId.L_UP),
            (ShapeId.J, ShapeId.J_UP),
            (ShapeId.S, ShapeId.S_UP),
            (ShapeId.Z, ShapeId.Z_UP),
        ):
            footprints = {frozenset(get_shape(s).cells) for s in group}
            assert len(footprints) == len(group)


class TestOffsetsOf:
    """Shape matrices resolve to normalized, row-major offsets."""

    def test_padding_is_normalized_away(self):
        matrix = np.array([[0, 0, 0], [0, 1, 0], [0, 1, 1]], dtype=np.int8)
        assert offsets_of(matrix) == (
            Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1),
        )

    def test_offsets_are_plain_ints(self):
        for cell in offsets_of(BASE_SHAPES[ShapeId.HUGE]):
            assert type(cell.x) is int and type(cell.y) is int

    def test_catalog_matches_matrices(self):
        for shape_id, matrix in BASE_SHAPES.items():
            assert CATALOG[shape_id].cells == offsets_of(matrix)
            assert CATALOG[shape_id].size == int(matrix.sum())
