"""Tests for cells module."""

from itertools import permutations

from cells import COMPONENTS, STEPS, Cell, join, points_along_diag

R, L, U, D = Cell.RIGHT, Cell.LEFT, Cell.UP, Cell.DOWN
RU, RD, LU, LD = Cell.RIGHT_UP, Cell.RIGHT_DOWN, Cell.LEFT_UP, Cell.LEFT_DOWN
DIAGONALS = (RU, RD, LU, LD)


def join_all(markers: tuple[Cell, ...] | list[Cell]) -> Cell:
    cell = Cell.EMPTY
    for marker in markers:
        cell = join(cell, marker)
    return cell


class TestJoinAxis:
    """Joining axis directions."""

    def test_into_empty(self) -> None:
        """Joining into an empty cell gives the incoming marker."""
        for marker in STEPS.values():
            assert join(Cell.EMPTY, marker) == marker

    def test_opposites(self) -> None:
        """Opposite axis directions make a bidirectional edge."""
        assert join(L, R) == Cell.RIGHT_LEFT
        assert join(R, L) == Cell.RIGHT_LEFT
        assert join(U, D) == Cell.UP_DOWN
        assert join(D, U) == Cell.UP_DOWN

    def test_duplicate(self) -> None:
        """Adding the same direction twice does not change the cell."""
        assert join(R, R) == R
        assert join(Cell.RIGHT_LEFT, L) == Cell.RIGHT_LEFT
        assert join(Cell.UP_DOWN, D) == Cell.UP_DOWN

    def test_conflicts_keep_current(self) -> None:
        """Axis directions that are not opposites leave the cell unchanged."""
        assert join(R, U) == R
        assert join(U, L) == U
        assert join(Cell.RIGHT_LEFT, U) == Cell.RIGHT_LEFT
        assert join(L, LU) == L
        assert join(RU, U) == RU

    def test_node_and_empty(self) -> None:
        """Nodes absorb markers, and empty markers change nothing."""
        assert join(Cell.NODE, R) == Cell.NODE
        assert join(Cell.NODE, RD) == Cell.NODE
        assert join(R, Cell.EMPTY) == R
        assert join(Cell.DIAG_RISE, Cell.NODE) == Cell.DIAG_RISE


class TestJoinDiagonal:
    """Joining diagonal directions."""

    def test_opposites(self) -> None:
        """Point-symmetric diagonals make a straight diagonal."""
        assert join(LU, RD) == Cell.DIAG_FALL
        assert join(RD, LU) == Cell.DIAG_FALL
        assert join(LD, RU) == Cell.DIAG_RISE
        assert join(RU, LD) == Cell.DIAG_RISE

    def test_perpendicular(self) -> None:
        """Perpendicular diagonals make a crossing."""
        assert join(RU, RD) == Cell.CROSS_RIGHT
        assert join(LU, LD) == Cell.CROSS_LEFT
        assert join(RU, LU) == Cell.CROSS_UP
        assert join(LD, RD) == Cell.CROSS_DOWN

    def test_three_directions(self) -> None:
        """A third diagonal turns a pair into a three-way crossing."""
        assert join(Cell.DIAG_RISE, RD) == Cell.CROSS_RIGHT_DOWN
        assert join(Cell.DIAG_RISE, LU) == Cell.CROSS_LEFT_UP
        assert join(Cell.DIAG_FALL, LD) == Cell.CROSS_LEFT_DOWN
        assert join(Cell.DIAG_FALL, RU) == Cell.CROSS_RIGHT_UP
        assert join(Cell.CROSS_RIGHT, LD) == Cell.CROSS_RIGHT_DOWN
        assert join(Cell.CROSS_RIGHT, LU) == Cell.CROSS_RIGHT_UP
        assert join(Cell.CROSS_LEFT, RU) == Cell.CROSS_LEFT_UP
        assert join(Cell.CROSS_LEFT, RD) == Cell.CROSS_LEFT_DOWN
        assert join(Cell.CROSS_UP, RD) == Cell.CROSS_RIGHT_UP
        assert join(Cell.CROSS_UP, LD) == Cell.CROSS_LEFT_UP
        assert join(Cell.CROSS_DOWN, LU) == Cell.CROSS_LEFT_DOWN
        assert join(Cell.CROSS_DOWN, RU) == Cell.CROSS_RIGHT_DOWN

    def test_four_directions(self) -> None:
        """The missing diagonal completes the full cross."""
        assert join(Cell.CROSS_RIGHT_UP, LD) == Cell.CROSS
        assert join(Cell.CROSS_RIGHT_DOWN, LU) == Cell.CROSS
        assert join(Cell.CROSS_LEFT_UP, RD) == Cell.CROSS
        assert join(Cell.CROSS_LEFT_DOWN, RU) == Cell.CROSS

    def test_disjoint_crossings(self) -> None:
        """Two crossings sharing no direction make the full cross."""
        assert join(Cell.CROSS_RIGHT, Cell.CROSS_LEFT) == Cell.CROSS
        assert join(Cell.CROSS_UP, Cell.CROSS_DOWN) == Cell.CROSS
        assert join(Cell.CROSS_LEFT, Cell.CROSS_RIGHT) == Cell.CROSS
        assert join(Cell.CROSS_DOWN, Cell.CROSS_UP) == Cell.CROSS

    def test_overlapping_crossings_are_noops(self) -> None:
        """Crossings that share a direction leave the cell unchanged."""
        assert join(Cell.CROSS_RIGHT, Cell.CROSS_UP) == Cell.CROSS_RIGHT
        assert join(Cell.CROSS_UP, Cell.CROSS_LEFT) == Cell.CROSS_UP
        assert join(Cell.CROSS_RIGHT_UP, Cell.CROSS_DOWN) == Cell.CROSS_RIGHT_UP

    def test_straight_diagonals_as_incoming_are_noops(self) -> None:
        """Joining a straight diagonal into a diagonal cell changes nothing."""
        assert join(Cell.DIAG_RISE, Cell.DIAG_FALL) == Cell.DIAG_RISE
        assert join(Cell.DIAG_FALL, Cell.DIAG_RISE) == Cell.DIAG_FALL
        assert join(RU, Cell.DIAG_FALL) == RU
        assert join(LD, Cell.CROSS_RIGHT) == LD

    def test_duplicates_are_noops(self) -> None:
        """Directions already present do not change the cell."""
        assert join(Cell.DIAG_RISE, RU) == Cell.DIAG_RISE
        assert join(Cell.CROSS_RIGHT_UP, RD) == Cell.CROSS_RIGHT_UP
        assert join(Cell.CROSS, LD) == Cell.CROSS

    def test_order_independent_pairs(self) -> None:
        """Joining [A, B] and [B, A] into an empty cell gives the same state."""
        pairs = [(a, b) for a in DIAGONALS for b in DIAGONALS] + [(L, R), (U, D), (R, R)]
        for a, b in pairs:
            assert join_all([a, b]) == join_all([b, a])

    def test_order_independent_all_diagonals(self) -> None:
        """Every order of the four diagonals converges to the full cross."""
        for order in permutations(DIAGONALS):
            assert join_all(order) == Cell.CROSS

    def test_union_of_components(self) -> None:
        """Every diagonal state is the union of the markers joined into it."""
        for cell, dirs in COMPONENTS.items():
            if dirs <= set(DIAGONALS):
                assert join_all(sorted(dirs, key=lambda c: c.value)) == cell


class TestPointsAlongDiag:
    """Tests for points_along_diag."""

    FALLING = {
        RD, LU, Cell.DIAG_FALL, Cell.CROSS,
        Cell.CROSS_RIGHT, Cell.CROSS_LEFT, Cell.CROSS_UP, Cell.CROSS_DOWN,
        Cell.CROSS_RIGHT_UP, Cell.CROSS_RIGHT_DOWN, Cell.CROSS_LEFT_UP, Cell.CROSS_LEFT_DOWN,
    }
    RISING = {
        LD, RU, Cell.DIAG_RISE, Cell.CROSS,
        Cell.CROSS_RIGHT, Cell.CROSS_LEFT, Cell.CROSS_UP, Cell.CROSS_DOWN,
        Cell.CROSS_RIGHT_UP, Cell.CROSS_RIGHT_DOWN, Cell.CROSS_LEFT_UP, Cell.CROSS_LEFT_DOWN,
    }

    def test_falling_diagonal(self) -> None:
        """(1, 1) and (-1, -1) ask about the falling diagonal."""
        for cell in Cell:
            expected = cell in self.FALLING
            assert points_along_diag(cell, (1, 1)) == expected, cell
            assert points_along_diag(cell, (-1, -1)) == expected, cell

    def test_rising_diagonal(self) -> None:
        """(-1, 1) and (1, -1) ask about the rising diagonal."""
        for cell in Cell:
            expected = cell in self.RISING
            assert points_along_diag(cell, (-1, 1)) == expected, cell
            assert points_along_diag(cell, (1, -1)) == expected, cell

    def test_non_diagonal_direction(self) -> None:
        """Axis or invalid directions never point along a diagonal."""
        assert not points_along_diag(Cell.CROSS, (1, 0))
        assert not points_along_diag(Cell.CROSS, (0, -1))
        assert not points_along_diag(Cell.CROSS, (2, 2))
