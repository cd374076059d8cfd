"""Tests for the Cell enum and the ConwayGrid class."""

import numpy as np
import pytest

from conway.core import automaton
from conway.core.automaton import Cell, ConwayGrid, next_state
from conway.core.grid import Grid, IndexOutOfBounds


@pytest.fixture
def sample_grid():
    """5x5 grid with a small scattered pattern."""
    return ConwayGrid.from_alive(5, 5, [(2, 0), (1, 1), (3, 1), (1, 3)])


class TestCell:
    """Test cases for the Cell enum."""

    def test_from_token(self):
        assert Cell.from_token(0) is Cell.DEAD
        assert Cell.from_token(1) is Cell.ALIVE
        assert Cell.from_token(np.int64(1)) is Cell.ALIVE

    @pytest.mark.parametrize("token", [2, -1, 10, True, False, 1.0, "1", None])
    def test_from_token_rejects_other_values(self, token):
        with pytest.raises(ValueError):
            Cell.from_token(token)


class TestRules:
    """Test the per-cell transition rule."""

    @pytest.mark.parametrize("neighbours", range(9))
    def test_live_cell(self, neighbours):
        expected = Cell.ALIVE if neighbours in (2, 3) else Cell.DEAD
        assert next_state(Cell.ALIVE, neighbours) is expected

    @pytest.mark.parametrize("neighbours", range(9))
    def test_dead_cell(self, neighbours):
        expected = Cell.ALIVE if neighbours == 3 else Cell.DEAD
        assert next_state(Cell.DEAD, neighbours) is expected


class TestConstruction:
    """Test the ways of building a ConwayGrid."""

    def test_initialization(self):
        grid = ConwayGrid(4, 3)
        assert grid.width == 4
        assert grid.height == 3
        assert grid.area == 12
        assert grid.shape == (4, 3)
        assert grid.generation == 0
        assert grid.population == 0
        assert grid.get((3, 2)) is Cell.DEAD

    def test_from_table(self):
        grid = ConwayGrid.from_table([[0, 1, 0], [0, 0, 1]])

        assert grid.width == 3
        assert grid.height == 2
        assert grid.alive_cells() == [(1, 0), (2, 1)]

    def test_from_table_numpy(self):
        table = np.array([[1, 0], [0, 1], [1, 1]], dtype=np.int8)
        grid = ConwayGrid.from_table(table)

        assert grid.shape == (2, 3)
        assert grid.population == 4
        np.testing.assert_array_equal(grid.to_array(), table)

    def test_from_table_empty(self):
        grid = ConwayGrid.from_table([])
        assert grid.shape == (0, 0)

    def test_from_table_ragged(self):
        with pytest.raises(ValueError):
            ConwayGrid.from_table([[0, 1, 0], [0, 1]])

    @pytest.mark.parametrize(
        "rows",
        [
            [[0, 2], [1, 0]],
            [[0, -1]],
            [[0.0, 1.0]],
            [["0", "1"]],
            [[True, False]],
        ],
    )
    def test_from_table_rejects_non_binary(self, rows):
        with pytest.raises(ValueError):
            ConwayGrid.from_table(rows)

    def test_from_alive(self):
        grid = ConwayGrid.from_alive(3, 3, [(0, 0), (2, 1)])
        assert grid.get((0, 0)) is Cell.ALIVE
        assert grid.get((2, 1)) is Cell.ALIVE
        assert grid.population == 2

    def test_from_alive_out_of_bounds(self):
        with pytest.raises(IndexOutOfBounds):
            ConwayGrid.from_alive(3, 3, [(3, 0)])

    def test_get_set_out_of_bounds(self):
        grid = ConwayGrid(2, 2)
        with pytest.raises(IndexOutOfBounds):
            grid.get((2, 0))
        with pytest.raises(IndexOutOfBounds):
            grid.set((0, 2), Cell.ALIVE)


class TestNeighbours:
    """Test neighbour counting."""

    def test_sample_counts(self, sample_grid):
        assert sample_grid.count_alive_neighbours((1, 0)) == 2
        assert sample_grid.count_alive_neighbours((1, 1)) == 1
        assert sample_grid.count_alive_neighbours((1, 3)) == 0
        assert sample_grid.count_alive_neighbours((4, 4)) == 0

    def test_corner_and_edge_limits(self):
        """Cells past the edge count as dead, so corners see at most 3."""
        grid = ConwayGrid.from_table([[1, 1, 1], [1, 1, 1], [1, 1, 1]])

        assert grid.count_alive_neighbours((0, 0)) == 3
        assert grid.count_alive_neighbours((2, 2)) == 3
        assert grid.count_alive_neighbours((1, 0)) == 5
        assert grid.count_alive_neighbours((1, 1)) == 8

    def test_no_wraparound(self):
        """Opposite corners are not neighbours."""
        grid = ConwayGrid.from_alive(3, 3, [(2, 2)])
        assert grid.count_alive_neighbours((0, 0)) == 0

        grid = ConwayGrid.from_alive(5, 5, [(4, 0), (0, 4)])
        assert grid.count_alive_neighbours((0, 0)) == 0

    def test_cell_itself_not_counted(self):
        grid = ConwayGrid.from_alive(3, 3, [(1, 1)])
        assert grid.count_alive_neighbours((1, 1)) == 0

    def test_neighbour_counts_matches_single_counts(self, sample_grid):
        counts = sample_grid.neighbour_counts()

        assert counts.shape == (5, 5)
        assert counts.dtype == np.int8
        for col, row in [(c, r) for r in range(5) for c in range(5)]:
            assert counts[row, col] == sample_grid.count_alive_neighbours((col, row))

    def test_neighbour_counts_non_square(self):
        grid = ConwayGrid.from_table([[1, 1, 1, 1], [1, 1, 1, 1]])
        counts = grid.neighbour_counts()

        np.testing.assert_array_equal(counts, [[3, 5, 5, 3], [3, 5, 5, 3]])

    def test_neighbour_counts_empty(self):
        assert ConwayGrid(0, 0).neighbour_counts().shape == (0, 0)


class TestStep:
    """Test generation stepping."""

    def test_still_life_block(self):
        grid = ConwayGrid.from_alive(4, 4, [(1, 1), (2, 1), (1, 2), (2, 2)])
        before = grid.copy()

        grid.step()

        assert grid == before
        assert grid.generation == 1

    def test_oscillator_blinker(self):
        grid = ConwayGrid.from_alive(5, 5, [(1, 2), (2, 2), (3, 2)])

        grid.step()
        assert grid.alive_cells() == [(2, 1), (2, 2), (2, 3)]

        grid.step()
        assert grid.alive_cells() == [(1, 2), (2, 2), (3, 2)]
        assert grid.generation == 2

    def test_glider_moves(self):
        cells = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
        grid = ConwayGrid.from_alive(8, 8, cells)

        for _ in range(4):
            grid.step()

        assert grid.alive_cells() == sorted(((x + 1, y + 1) for x, y in cells), key=lambda c: (c[1], c[0]))

    def test_blinker_at_edge(self):
        """A blinker on the border loses the cells that would fall off."""
        grid = ConwayGrid.from_alive(3, 3, [(0, 0), (1, 0), (2, 0)])

        grid.step()

        assert grid.alive_cells() == [(1, 0), (1, 1)]

    def test_extinction(self):
        grid = ConwayGrid.from_alive(5, 5, [(2, 2)])
        grid.step()
        assert grid.population == 0

    def test_empty_grid(self):
        grid = ConwayGrid(0, 0)
        grid.step()
        assert grid.generation == 1

    def test_step_matches_neighbour_counts(self, sample_grid):
        counts = sample_grid.neighbour_counts()
        current = sample_grid.to_array()
        expected = ((current == 1) & ((counts == 2) | (counts == 3))) | ((current == 0) & (counts == 3))

        sample_grid.step()

        np.testing.assert_array_equal(sample_grid.to_array(), expected.astype(np.int8))

    def test_step_propagates_set_errors(self, monkeypatch):
        """A failed cell write aborts the step and keeps the old generation."""

        class FailingGrid(Grid):
            def set(self, coord, value):
                if coord == (1, 1):
                    raise IndexOutOfBounds(coord, self.shape)
                super().set(coord, value)

        grid = ConwayGrid.from_alive(3, 3, [(0, 1), (1, 1), (2, 1)])
        monkeypatch.setattr(automaton, "Grid", FailingGrid)

        with pytest.raises(IndexOutOfBounds):
            grid.step()

        assert grid.alive_cells() == [(0, 1), (1, 1), (2, 1)]
        assert grid.generation == 0


class TestConversion:
    """Test exports and comparisons."""

    def test_to_array(self, sample_grid):
        array = sample_grid.to_array()

        assert array.shape == (5, 5)
        assert array[0, 2] == 1
        assert array[3, 1] == 1
        assert array.sum() == 4

    def test_copy_is_independent(self, sample_grid):
        clone = sample_grid.copy()
        clone.step()

        assert sample_grid.generation == 0
        assert sample_grid.population == 4
        assert clone.generation == 1

    def test_equality(self):
        assert ConwayGrid(3, 3) == ConwayGrid(3, 3)
        assert ConwayGrid(3, 3) != ConwayGrid.from_alive(3, 3, [(0, 0)])
        assert ConwayGrid(3, 3) != ConwayGrid(3, 4)
        assert ConwayGrid(3, 3) != Grid(3, 3, Cell.DEAD)
