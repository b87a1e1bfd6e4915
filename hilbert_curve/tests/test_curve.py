"""
Tests for the scalar Hilbert curve conversions.
"""

import pytest
from hilbert_curve.core import distance_to_point, point_to_distance, is_power_of_two
from hilbert_curve.core.curve import _rotate_quadrant, check_grid_size
from hilbert_curve.exceptions import GridSizeError, CoordinateError


SIZES = [2, 4, 8, 16, 32, 64, 128, 256]

# n = 4 curve, d = 0..15
TABLE_4 = [
    (0, 0), (1, 0), (1, 1), (0, 1),
    (0, 2), (0, 3), (1, 3), (1, 2),
    (2, 2), (2, 3), (3, 3), (3, 2),
    (3, 1), (2, 1), (2, 0), (3, 0),
]


class TestRoundTrip:
    """Tests that the two directions are inverse."""

    @pytest.mark.parametrize("n", SIZES)
    def test_reversibility(self, n):
        """point_to_distance undoes distance_to_point for every d."""
        for d in range(n * n):
            x, y = distance_to_point(d, n)
            assert point_to_distance(x, y, n) == d

    @pytest.mark.parametrize("n", [2, 8, 32])
    def test_inverse_then_forward(self, n):
        """distance_to_point undoes point_to_distance for every cell."""
        for x in range(n):
            for y in range(n):
                d = point_to_distance(x, y, n)
                assert distance_to_point(d, n) == (x, y)


class TestCurveShape:
    """Tests for the cells the curve visits."""

    @pytest.mark.parametrize("n", [1, 2, 4, 16, 64])
    def test_visits_every_cell_once(self, n):
        """Forward map is a permutation of the grid."""
        cells = [distance_to_point(d, n) for d in range(n * n)]
        assert len(set(cells)) == n * n
        assert set(cells) == {(x, y) for x in range(n) for y in range(n)}

    @pytest.mark.parametrize("n", [2, 4, 8, 32, 128])
    def test_consecutive_cells_adjacent(self, n):
        """Consecutive distances map to edge-adjacent cells."""
        prev = distance_to_point(0, n)
        for d in range(1, n * n):
            cur = distance_to_point(d, n)
            assert abs(cur[0] - prev[0]) + abs(cur[1] - prev[1]) == 1
            prev = cur

    @pytest.mark.parametrize("n", [1] + SIZES)
    def test_starts_at_origin(self, n):
        """Curve starts in the lower left corner."""
        assert distance_to_point(0, n) == (0, 0)
        assert point_to_distance(0, 0, n) == 0

    @pytest.mark.parametrize("n", SIZES)
    def test_ends_lower_right(self, n):
        """Curve ends in the lower right corner."""
        assert distance_to_point(n * n - 1, n) == (n - 1, 0)
        assert point_to_distance(n - 1, 0, n) == n * n - 1

    def test_reference_table_n2(self):
        """Order-1 curve: up, right, down."""
        cells = [distance_to_point(d, 2) for d in range(4)]
        assert cells == [(0, 0), (0, 1), (1, 1), (1, 0)]

    def test_reference_table_n4(self):
        """Order-2 curve matches the known table."""
        cells = [distance_to_point(d, 4) for d in range(16)]
        assert cells == TABLE_4
        for d, (x, y) in enumerate(TABLE_4):
            assert point_to_distance(x, y, 4) == d

    def test_minimal_grid(self):
        """n = 1 has a single cell."""
        assert distance_to_point(0, 1) == (0, 0)
        assert point_to_distance(0, 0, 1) == 0

    def test_large_grid(self):
        """Works beyond 64-bit ranges."""
        n = 1 << 40
        d = n * n - 12345
        x, y = distance_to_point(d, n)
        assert 0 <= x < n and 0 <= y < n
        assert point_to_distance(x, y, n) == d


class TestRotateQuadrant:
    """Tests for the shared quadrant transform."""

    def test_identity_when_ry_set(self):
        assert _rotate_quadrant(4, 1, 2, 0, 1) == (1, 2)
        assert _rotate_quadrant(4, 1, 2, 1, 1) == (1, 2)

    def test_swap(self):
        """ry = 0, rx = 0 transposes."""
        assert _rotate_quadrant(4, 1, 2, 0, 0) == (2, 1)

    def test_reflect_and_swap(self):
        """ry = 0, rx = 1 reflects about the centre then transposes."""
        assert _rotate_quadrant(4, 1, 2, 1, 0) == (1, 2)
        assert _rotate_quadrant(4, 0, 3, 1, 0) == (0, 3)
        assert _rotate_quadrant(8, 1, 0, 1, 0) == (7, 6)

    def test_involution(self):
        """Applying the transform twice restores the point."""
        for rx in (0, 1):
            for ry in (0, 1):
                for x in range(4):
                    for y in range(4):
                        p = _rotate_quadrant(4, x, y, rx, ry)
                        assert _rotate_quadrant(4, p[0], p[1], rx, ry) == (x, y)


class TestPreconditions:
    """Tests for input validation."""

    @pytest.mark.parametrize("n", [1, 2, 4, 1024, 1 << 62])
    def test_power_of_two(self, n):
        assert is_power_of_two(n)

    @pytest.mark.parametrize("n", [0, 3, 6, 12, 1000, -4])
    def test_not_power_of_two(self, n):
        assert not is_power_of_two(n)

    def test_forward_rejects_n3(self):
        """n = 3 fails instead of returning a wrong value."""
        with pytest.raises(GridSizeError, match="power of 2"):
            distance_to_point(0, 3)

    def test_inverse_rejects_n3(self):
        with pytest.raises(GridSizeError, match="power of 2"):
            point_to_distance(0, 0, 3)

    def test_rejects_zero(self):
        with pytest.raises(GridSizeError):
            check_grid_size(0)

    def test_grid_size_error_is_value_error(self):
        with pytest.raises(ValueError):
            distance_to_point(1, 6)

    def test_out_of_range_unchecked(self):
        """Coordinates outside the grid are not rejected by default."""
        d = point_to_distance(4, 0, 4)
        assert isinstance(d, int)

    def test_check_bounds_inverse(self):
        with pytest.raises(CoordinateError):
            point_to_distance(4, 0, 4, check_bounds=True)
        with pytest.raises(CoordinateError):
            point_to_distance(0, -1, 4, check_bounds=True)
        assert point_to_distance(3, 0, 4, check_bounds=True) == 15

    def test_check_bounds_forward(self):
        with pytest.raises(CoordinateError):
            distance_to_point(16, 4, check_bounds=True)
        with pytest.raises(CoordinateError):
            distance_to_point(-1, 4, check_bounds=True)
        assert distance_to_point(15, 4, check_bounds=True) == (3, 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
