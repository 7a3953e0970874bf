""" The state of a minefield: a fixed arena of cells, indexed by their id, where the id of the cell at (x, y) is
    `y*width + x`. Everything else, the solver included, only ever reads the board through this module.

    The solver is not allowed to look at `Cell.is_mine`, it only sees what a player sees: revealed numbers and flags.
"""
import numpy as np

from .config import UNKNOWN
from .tools import count_neighbors


class Cell:
    def __init__(self, id, x, y, is_mine=False):
        self.id = id
        self.x = x
        self.y = y
        self.is_mine = is_mine
        # Number of neighboring mines, only meaningful once revealed.
        self.adjacent = 0
        self.revealed = False
        self.flagged = False
        self.probability = UNKNOWN

    @property
    def resolved(self):
        """ Whether the cell is no longer in question, i.e. it's either revealed or flagged. """
        return self.revealed or self.flagged

    def __repr__(self):
        state = 'revealed' if self.revealed else 'flagged' if self.flagged else 'closed'
        return 'Cell(id={}, x={}, y={}, {}, p={:.4})'.format(self.id, self.x, self.y, state, self.probability)


class Board:
    def __init__(self, width, height, total_mines):
        """ Create a board without any mines placed.
            :param width: The width of the minefield.
            :param height: The height of the minefield.
            :param total_mines: The total number of mines on the minefield, flagged or not.
        """
        if width <= 0 or height <= 0:
            raise ValueError('Board dimensions must be positive, got {}x{}.'.format(width, height))
        if not 0 <= total_mines <= width*height:
            raise ValueError('Cannot fit {} mines on a {}x{} board.'.format(total_mines, width, height))
        self.width = width
        self.height = height
        self.total_mines = total_mines
        self.cells = [Cell(y*width + x, x, y) for y in range(height) for x in range(width)]

    @property
    def shape(self):
        return self.height, self.width

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __getitem__(self, id):
        return self.cells[id]

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x, y):
        if not self.contains(x, y):
            raise IndexError('({}, {}) is outside of the {}x{} board.'.format(x, y, self.width, self.height))
        return self.cells[y*self.width + x]

    def neighbors(self, cell):
        """ The up to 8 cells around the given cell. """
        return [self.cells[y*self.width + x]
                for y in range(max(cell.y-1, 0), min(cell.y+2, self.height))
                for x in range(max(cell.x-1, 0), min(cell.x+2, self.width))
                if (x, y) != (cell.x, cell.y)]

    def place_mines(self, coords):
        """ Put mines at exactly the given (x, y) coordinates, removing any others, and recompute the numbers. The
            total mine count of the board follows the number of mines placed.
        """
        for cell in self.cells:
            cell.is_mine = False
        for x, y in coords:
            self.cell_at(x, y).is_mine = True
        self.total_mines = sum(cell.is_mine for cell in self.cells)
        self.compute_adjacent()

    def compute_adjacent(self):
        counts = count_neighbors(self.mine_mask())
        for cell in self.cells:
            cell.adjacent = int(counts[cell.y, cell.x])

    def reset(self):
        """ Close and unflag every cell, keeping the mines where they are. """
        for cell in self.cells:
            cell.revealed = False
            cell.flagged = False
            cell.probability = UNKNOWN

    def flag_count(self):
        return sum(cell.flagged for cell in self.cells)

    def mines_left(self):
        """ The number of mines that haven't been flagged yet. """
        return self.total_mines - self.flag_count()

    def _field(self, attr, dtype):
        return np.array([getattr(cell, attr) for cell in self.cells], dtype=dtype).reshape(self.shape)

    def revealed_mask(self):
        return self._field('revealed', bool)

    def flagged_mask(self):
        return self._field('flagged', bool)

    def mine_mask(self):
        """ Where the mines are. Only the game may look at this, never the solver. """
        return self._field('is_mine', bool)

    def unresolved_mask(self):
        return ~(self.revealed_mask() | self.flagged_mask())

    def numbers(self):
        """ The numbers a player sees: the adjacent count on revealed cells, np.nan everywhere else. """
        numbers = self._field('adjacent', float)
        numbers[~self.revealed_mask()] = np.nan
        return numbers

    def probabilities(self):
        return self._field('probability', float)
