""" Common helpers for working with minefields. Masks are boolean arrays with shape (height, width). """
from math import comb

import numpy as np
from scipy.ndimage import binary_dilation, generate_binary_structure
from scipy.signal import convolve2d


def dilate(bool_ar):
    """ Perform binary dilation with a structuring element with connectivity 2, i.e. including diagonals. """
    return binary_dilation(bool_ar, structure=generate_binary_structure(2, 2))


def count_neighbors(bool_ar):
    """ Calculate how many True's there are next to each square. """
    kernel = np.ones((3, 3), dtype=int)
    kernel[1, 1] = 0
    return convolve2d(bool_ar.astype(int), kernel, mode='same')


def combinations(n, m):
    """ Calculate the number of ways that m mines can be distributed in n squares, 0 if that's impossible. """
    if m < 0 or m > n:
        return 0
    return comb(n, m)
