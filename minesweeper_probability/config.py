""" Default settings for new games and the probability markers written onto cells. """

# Board dimensions and mine count of a new game.
DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
DEFAULT_MINES = 15

# Probability of a cell that hasn't been computed, or can't be computed because the board contradicts itself.
UNKNOWN = -1.0
# Probability written onto revealed cells.
SAFE = 0.0
