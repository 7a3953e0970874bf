from minesweeper_probability.constraints import extract_constraints, Constraint

from .boards import make_board, reveal


def test_one_constraint_per_number(one_two_one):
    constraints, orphans = extract_constraints(one_two_one)
    assert orphans == []
    # Zeros don't constrain anything.
    assert [c.cell_id for c in constraints] == [3, 4, 5]
    assert [c.target for c in constraints] == [1, 2, 1]
    assert [c.members for c in constraints] == [{0, 1}, {0, 1, 2}, {1, 2}]
    assert all(c.consistent for c in constraints)


def test_flags_are_subtracted(one_two_one):
    one_two_one.cell_at(0, 0).flagged = True
    constraints, _ = extract_constraints(one_two_one)
    assert [c.target for c in constraints] == [0, 1, 1]
    assert [c.members for c in constraints] == [{1}, {1, 2}, {1, 2}]


def test_satisfied_number_is_dropped():
    board = make_board(2, 2, [(0, 0)])
    reveal(board, [(1, 0), (0, 1), (1, 1)])
    board.cell_at(0, 0).flagged = True
    constraints, orphans = extract_constraints(board)
    assert constraints == []
    assert orphans == []


def test_over_flagged_number_is_inconsistent():
    board = make_board(2, 2, [(0, 0)])
    reveal(board, [(1, 0)])
    board.cell_at(0, 0).flagged = True
    board.cell_at(1, 1).flagged = True
    constraints, _ = extract_constraints(board)
    assert len(constraints) == 1
    assert constraints[0].target == -1
    assert constraints[0].members == {2}
    assert not constraints[0].consistent


def test_number_without_closed_neighbors_is_an_orphan():
    board = make_board(2, 2, [(0, 0)])
    # Revealing the mine itself leaves the numbers nowhere to put their mine.
    reveal(board, [(0, 0), (1, 0), (0, 1), (1, 1)])
    constraints, orphans = extract_constraints(board)
    assert constraints == []
    assert [c.cell_id for c in orphans] == [1, 2, 3]
    assert all(c.target == 1 for c in orphans)


def test_consistency_bounds():
    assert Constraint(0, 0, [1, 2]).consistent
    assert Constraint(0, 2, [1, 2]).consistent
    assert not Constraint(0, 3, [1, 2]).consistent
    assert not Constraint(0, -1, [1, 2]).consistent


def test_members_are_clipped_at_the_edges():
    board = make_board(5, 4, [(1, 0), (4, 3)])
    reveal(board, [(0, 0), (4, 2), (2, 1)])
    board.cell_at(3, 3).flagged = True
    constraints, _ = extract_constraints(board)
    assert [c.cell_id for c in constraints] == [0, 7, 14]
    # Corner: 3 neighbors, edge: 5 neighbors of which one flagged.
    assert constraints[0].members == {1, 5, 6}
    assert constraints[1].members == {1, 2, 3, 6, 8, 11, 12, 13}
    assert (constraints[2].target, constraints[2].members) == (0, {8, 9, 13, 19})
