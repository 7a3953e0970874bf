""" Count every mine placement inside a region that satisfies all of its numbers.

    Enumerating all 2^k placements of a region's k cells is wasteful, since many cells are interchangeable: cells that
    are constrained by exactly the same numbers must have the same probability. Those cells are grouped into an area,
    and the constraint programming problem is to decide how many mines each area holds. A solution with m_a mines in
    an area of n_a cells stands for C(n_a, m_a) placements, so multiplying those out over all areas gives back the exact
    count of cell-level placements, the same number brute force would find.
"""
from functools import reduce
from operator import mul

from constraint import Problem, ExactSumConstraint, MaxSumConstraint

from .tools import combinations


class RegionSolution:
    def __init__(self, region, combinations_at=None, mines_at=None):
        """ :param region: The solved region.
            :param combinations_at: {m: number of valid placements with m mines in the region}
            :param mines_at: {cell_id: {m: number of valid placements with m mines that have a mine on the cell}}
        """
        self.region = region
        self.combinations_at = combinations_at or {}
        self.mines_at = mines_at or {cell_id: {} for cell_id in region.cells}

    @property
    def solvable(self):
        return bool(self.combinations_at)

    def __repr__(self):
        return 'RegionSolution(cells={}, combinations_at={})'.format(len(self.region), self.combinations_at)


def get_areas(region):
    """ Group the cells of a region by the constraints that apply to them.
        :returns: A mapping {tuple of constraint indices: tuple of cell ids}, each entry being one area.
    """
    applied = {cell_id: [] for cell_id in region.cells}
    for i, constraint in enumerate(region.constraints):
        for cell_id in constraint.members:
            applied[cell_id].append(i)
    areas = {}
    for cell_id in region.cells:
        areas.setdefault(tuple(applied[cell_id]), []).append(cell_id)
    return {k: tuple(v) for k, v in areas.items()}


def solve_region(region, mines_left=None):
    """ Find how many valid placements the region has for each number of mines, and how often each cell is a mine.
        :param region: The region to solve.
        :param mines_left: The most mines the region may hold, or None to count placements regardless of the mine
                           count. Running out of mines is a contradiction of the whole board rather than of the
                           region, so the solver doesn't cap regions and leaves that to the aggregator.
        :returns: A `RegionSolution`, with empty tables if no placement satisfies the region.
    """
    if not region.consistent or (mines_left is not None and mines_left < 0):
        return RegionSolution(region)
    areas = get_areas(region)
    problem = Problem()
    # One variable per area, holding the number of mines in it.
    for area in areas.values():
        problem.addVariable(area, range(len(area)+1))
    for i, constraint in enumerate(region.constraints):
        problem.addConstraint(ExactSumConstraint(constraint.target), [v for k, v in areas.items() if i in k])
    if mines_left is not None:
        problem.addConstraint(MaxSumConstraint(mines_left), list(areas.values()))
    combinations_at = {}
    mines_at = {cell_id: {} for cell_id in region.cells}
    for solution in problem.getSolutions():
        m = sum(solution.values())
        # Number of placements within each area, and over the whole region.
        area_counts = {area: combinations(len(area), m_area) for area, m_area in solution.items()}
        model_count = reduce(mul, area_counts.values(), 1)
        combinations_at[m] = combinations_at.get(m, 0) + model_count
        for area, m_area in solution.items():
            if m_area == 0:
                continue
            # Fix a mine on one cell and spread the rest of the area's mines over its other cells.
            with_mine = model_count // area_counts[area] * combinations(len(area)-1, m_area-1)
            for cell_id in area:
                mines_at[cell_id][m] = mines_at[cell_id].get(m, 0) + with_mine
    return RegionSolution(region, combinations_at, mines_at)
