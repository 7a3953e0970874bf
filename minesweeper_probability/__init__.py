""" Exact mine probabilities for minesweeper boards. """
from .board import Board, Cell
from .config import SAFE, UNKNOWN
from .flags import can_flag, toggle_flag
from .game import Minesweeper, GameOver
from .solver import Solver, compute_probabilities
