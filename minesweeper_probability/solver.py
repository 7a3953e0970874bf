""" An exact probabilistic minesweeper solver. It determines the probability of a mine being under each closed cell,
    given the revealed numbers, the flags and the total number of mines, assuming the mines were distributed
    uniformly.

    The solver works in several steps, every one of them recomputed from scratch on each call:
    - Turn every revealed number into a constraint on its closed, unflagged neighbors, after subtracting its flags.
    - Split the constrained cells into regions that share no constraints, which can be solved independently. Cells
      without constraints form the free pool.
    - Count, per region and per number of mines in the region, the placements that satisfy all of its numbers.
    - Combine the regions and the free pool, weighing every combination by the number of ways the leftover mines can
      be spread over the free pool, and divide by the total number of placements.

    A board that contradicts itself never makes the solver raise. A region that can't be satisfied, e.g. because of an
    over-flagged number, has its cells reported as `UNKNOWN` while the rest of the board is still solved, with the
    broken region's cells counted as part of the free pool. If there's no placement for the board as a whole, every
    closed cell is `UNKNOWN`. That includes a region needing more mines than are left, since the missing mines are a
    problem of the board as a whole.
"""
import logging

from .aggregator import aggregate, GlobalContradiction
from .config import SAFE, UNKNOWN
from .constraints import extract_constraints
from .region_solver import solve_region
from .regions import partition

logger = logging.getLogger(__name__)


class Solver:
    def __init__(self, board):
        self.board = board
        # Diagnostics of the last call to `solve`.
        self.inconsistent = []
        self.unsolvable = []
        self.contradiction = False

    def solve(self):
        """ Compute the probability of a mine under every closed, unflagged cell and write it onto the cells.
            Revealed cells get `SAFE`, flagged cells are left alone.
            :returns: An array with the probability of each cell, with shape (height, width).
        """
        board = self.board
        constraints, orphans = extract_constraints(board)
        self.inconsistent = [c for c in constraints if not c.consistent] + orphans
        regions, free_cells = partition(board, constraints)
        mines_left = board.mines_left()
        solutions = [solve_region(region) for region in regions]
        solved = [solution for solution in solutions if solution.solvable]
        self.unsolvable = [solution.region for solution in solutions if not solution.solvable]
        for region in self.unsolvable:
            logger.warning('No valid placement for the region of cells %s.', list(region.cells))
        # Cells of a broken region could hold any number of mines, like free cells.
        pool_size = len(free_cells) + sum(len(region) for region in self.unsolvable)
        logger.debug('Solving %d regions (sizes %s) with %d cells in the pool and %d mines left.',
                     len(regions), [len(region) for region in regions], pool_size, mines_left)
        try:
            cell_probabilities, free_probability = aggregate(solved, pool_size, mines_left)
            self.contradiction = False
        except GlobalContradiction:
            logger.warning('No placement of the %d remaining mines is consistent with the board.', mines_left)
            cell_probabilities, free_probability = {}, None
            self.contradiction = True
        if free_probability is None:
            free_probability = UNKNOWN
        free = set(free_cells)

        for cell in board:
            if cell.revealed:
                cell.probability = SAFE
            elif cell.flagged:
                continue
            elif cell.id in cell_probabilities:
                cell.probability = cell_probabilities[cell.id]
            elif cell.id in free:
                cell.probability = free_probability
            else:
                cell.probability = UNKNOWN
        return board.probabilities()


def compute_probabilities(board):
    """ Recompute the probability of every cell on the board in place. """
    Solver(board).solve()
