""" A playable minesweeper game around the probability solver. It owns the board, places the mines, reveals cells and
    keeps the probabilities up to date after every move.

    Hitting a mine loses the game, but the move can be taken back with `undo`, which is counted in
    `undo_used_after_lose`.
"""
import logging

import numpy as np
from scipy.ndimage import label, generate_binary_structure

from .board import Board
from .config import DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_MINES
from .flags import toggle_flag
from .solver import compute_probabilities
from .tools import dilate

logger = logging.getLogger(__name__)


class GameOver(RuntimeError):
    """ A move was made on a game that is already won or lost. """


class Minesweeper:
    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, mines=DEFAULT_MINES, seed=None):
        """ :param seed: Seed for the random mine placement, for reproducible games. """
        self._rng = np.random.default_rng(seed)
        self.configure(width, height, mines)

    def configure(self, width, height, mines):
        """ Start a new game with the given settings. Mines are placed on the first reveal.
            :raises ValueError: If the settings don't make a valid board.
        """
        self.board = Board(width, height, mines)
        self.mines_placed = False
        self.undo_used_after_lose = 0
        self._hit = None
        compute_probabilities(self.board)

    def reset(self):
        """ Start a new game with the same settings. """
        self.configure(self.board.width, self.board.height, self.board.total_mines)

    def place_mines(self, coords):
        """ Put the mines at the given (x, y) coordinates instead of placing them randomly. """
        self.board.place_mines(coords)
        self.mines_placed = True
        compute_probabilities(self.board)

    @property
    def lost(self):
        return self._hit is not None

    @property
    def won(self):
        board = self.board
        return self.mines_placed and not self.lost and (board.revealed_mask() | board.mine_mask()).all()

    @property
    def done(self):
        return self.lost or self.won

    def _place_random_mines(self, first):
        """ Place the mines uniformly at random, but never under the first revealed cell, if at all possible. """
        ids = [cell.id for cell in self.board if cell is not first]
        if len(ids) < self.board.total_mines:
            ids.append(first.id)
        chosen = self._rng.choice(ids, size=self.board.total_mines, replace=False)
        self.board.place_mines([(self.board[i].x, self.board[i].y) for i in chosen])
        self.mines_placed = True

    def reveal(self, x, y):
        """ Open the cell at (x, y). Opening a cell without neighboring mines opens all of its neighbors too, and so on.
            :returns: The cells that were opened, none if the cell was flagged or already open.
            :raises GameOver: If the game is already over.
            :raises IndexError: If (x, y) isn't on the board.
        """
        if self.done:
            raise GameOver('The game is over, start a new one or undo the last move.')
        cell = self.board.cell_at(x, y)
        if cell.resolved:
            return []
        if not self.mines_placed:
            self._place_random_mines(cell)
        if cell.is_mine:
            logger.info('Mine hit at (%d, %d).', x, y)
            cell.revealed = True
            self._hit = cell
            compute_probabilities(self.board)
            return [cell]
        opened = self._flood(cell)
        for c in opened:
            c.revealed = True
        compute_probabilities(self.board)
        return opened

    def _flood(self, cell):
        """ Find the cells that open along with the given safe cell. """
        if cell.adjacent > 0:
            return [cell]
        board = self.board
        adjacent = np.array([c.adjacent for c in board]).reshape(board.shape)
        zeros = (adjacent == 0) & ~board.mine_mask() & ~board.flagged_mask()
        labeled, _ = label(zeros, structure=generate_binary_structure(2, 2))
        area = labeled == labeled[cell.y, cell.x]
        # The numbers bordering the empty area open as well.
        area = dilate(area) & ~board.flagged_mask() & ~board.revealed_mask()
        return [board[int(i)] for i in np.flatnonzero(area)]

    def toggle_flag(self, x, y):
        """ Flag or unflag the cell at (x, y), unless the flag would contradict a neighboring number.
            :returns: Whether the flag changed.
        """
        if self.done:
            raise GameOver('The game is over, start a new one or undo the last move.')
        changed = toggle_flag(self.board, self.board.cell_at(x, y))
        if changed:
            compute_probabilities(self.board)
        return changed

    def undo(self):
        """ Take back the move that hit a mine. This closes the hit cell again, the one case where a revealed cell
            goes back to closed.
            :returns: Whether there was anything to undo.
        """
        if not self.lost:
            return False
        self._hit.revealed = False
        self._hit = None
        self.undo_used_after_lose += 1
        compute_probabilities(self.board)
        return True
