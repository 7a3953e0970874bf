from itertools import product

import pytest

from minesweeper_probability.constraints import extract_constraints
from minesweeper_probability.region_solver import solve_region, get_areas
from minesweeper_probability.regions import partition, Region

from .boards import make_board, reveal


def brute_force(region, mines_left):
    """ Try all 2^k placements of the region, the slow way. """
    combinations_at = {}
    mines_at = {cell_id: {} for cell_id in region.cells}
    for bits in product((0, 1), repeat=len(region)):
        placement = dict(zip(region.cells, bits))
        if sum(bits) > mines_left:
            continue
        if not all(sum(placement[m] for m in c.members) == c.target for c in region.constraints):
            continue
        m = sum(bits)
        combinations_at[m] = combinations_at.get(m, 0) + 1
        for cell_id, mine in placement.items():
            if mine:
                mines_at[cell_id][m] = mines_at[cell_id].get(m, 0) + 1
    return combinations_at, mines_at


def regions_of(board):
    constraints, _ = extract_constraints(board)
    return partition(board, constraints)[0]


def test_one_two_one_has_a_single_placement(one_two_one):
    region, = regions_of(one_two_one)
    solution = solve_region(region, 2)
    assert solution.solvable
    assert solution.combinations_at == {2: 1}
    assert solution.mines_at == {0: {2: 1}, 1: {}, 2: {2: 1}}


def test_single_number(diagonal):
    region, = regions_of(diagonal)
    solution = solve_region(region, 3)
    # 2 mines among 5 cells, each cell is a mine in 4 of the 10 placements.
    assert solution.combinations_at == {2: 10}
    assert all(mines_at == {2: 4} for mines_at in solution.mines_at.values())


def test_mines_left_caps_the_region(one_two_one):
    region, = regions_of(one_two_one)
    assert not solve_region(region, 1).solvable


def test_uncapped_region_ignores_the_mine_count(one_two_one):
    one_two_one.total_mines = 1
    region, = regions_of(one_two_one)
    assert solve_region(region).combinations_at == {2: 1}


def test_inconsistent_region_is_unsolvable(two_islands):
    two_islands.cell_at(1, 0).adjacent = 3
    first, second = regions_of(two_islands)
    assert not solve_region(first, 2).solvable
    assert solve_region(second, 2).combinations_at == {1: 1}


def test_contradicting_numbers():
    # Two numbers over the same two cells that disagree.
    board = make_board(2, 2, [(0, 0)])
    reveal(board, [(0, 1), (1, 1)])
    board.cell_at(1, 1).adjacent = 2
    region, = regions_of(board)
    assert not solve_region(region, 1).solvable


def test_areas_group_equally_constrained_cells(one_two_one, diagonal):
    region, = regions_of(one_two_one)
    assert sorted(get_areas(region).values()) == [(0,), (1,), (2,)]
    region, = regions_of(diagonal)
    assert list(get_areas(region).values()) == [(0, 1, 4, 6, 7)]


MINES = [(1, 0), (4, 0), (0, 2), (3, 3), (5, 3), (1, 5), (4, 5)]


@pytest.mark.parametrize('revealed', [
    [(x, y) for y in range(6) for x in range(3) if (x, y) not in MINES],
    [(x, y) for y in range(3) for x in range(6) if (x, y) not in MINES],
    [(2, 1), (3, 1), (2, 4)],
])
@pytest.mark.parametrize('mines_left', [7, 3])
def test_matches_brute_force(revealed, mines_left):
    board = make_board(6, 6, MINES)
    reveal(board, revealed)
    regions = regions_of(board)
    assert regions
    for region in regions:
        assert len(region) <= 16
        solution = solve_region(region, mines_left)
        combinations_at, mines_at = brute_force(region, mines_left)
        assert solution.combinations_at == combinations_at
        assert solution.mines_at == mines_at


def test_empty_region_tables():
    solution = solve_region(Region([3, 4], []), -1)
    assert not solution.solvable
    assert solution.mines_at == {3: {}, 4: {}}
