""" Play a few random games, opening a cell that is least likely to hold a mine on every move and printing the
    probabilities the solver computed along the way.
"""
import logging
from time import time

import numpy as np

from minesweeper_probability import Minesweeper


def show(board):
    """ Print the board, with the mine probability in percent on closed cells. """
    for y in range(board.height):
        row = []
        for x in range(board.width):
            cell = board.cell_at(x, y)
            if cell.revealed:
                row.append('{:>4}'.format(cell.adjacent or '.'))
            elif cell.flagged:
                row.append('   F')
            elif cell.probability < 0:
                row.append('   ?')
            else:
                row.append('{:>4.0f}'.format(100*cell.probability))
        print(' '.join(row))
    print()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    game = Minesweeper(width=9, height=9, mines=10, seed=0)
    wins = 0
    games = 10
    for i in range(games):
        game.reset()
        while not game.done:
            board = game.board
            prob = board.probabilities()
            closed = board.unresolved_mask()
            # Flag the cells that are certainly mines.
            for y, x in zip(*((prob == 1) & closed).nonzero()):
                game.toggle_flag(x, y)
            prob = board.probabilities()
            prob[~board.unresolved_mask()] = np.nan
            best_prob = np.nanmin(prob)
            ys, xs = (prob == best_prob).nonzero()
            t = time()
            game.reveal(int(xs[0]), int(ys[0]))
            print('({}, {}) at {:.4%} - {:.5}s'.format(xs[0], ys[0], best_prob, time() - t))
            show(board)
        if game.won:
            wins += 1
        print('{}> {}'.format(i, 'W' if game.won else 'L'))
    print('Won {} of {} games.'.format(wins, games))
