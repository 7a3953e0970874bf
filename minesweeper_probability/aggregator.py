""" Combine the solutions of independent regions with the unconstrained cells into exact probabilities.

    The regions don't influence each other through their numbers, but they do through the total mine count: every
    mine a region holds is one fewer for the others and for the free pool of unconstrained cells. A combination of
    region solutions with M mines in total leaves B-M mines for the R free cells, which can be placed in C(R, B-M)
    ways, so the number of boards matching the combination is the product of the region counts times C(R, B-M).

    Instead of iterating over every combination of regions, which grows exponentially with the number of regions, the
    region tables are convolved into a table of the number of placements per total mine count. Leaving one region out
    of that convolution gives the weight of everything outside of that region, which is what the probability of a
    cell within the region needs. All of this is done with Python integers, so nothing is rounded until the final
    division.
"""
from .tools import combinations


class GlobalContradiction(Exception):
    """ No placement of the remaining mines satisfies all regions and the mine count together. """


def convolve(a, b):
    """ Combine two tables {mines: count} of independent parts into a table for both parts together. """
    result = {}
    for m_a, count_a in a.items():
        for m_b, count_b in b.items():
            result[m_a+m_b] = result.get(m_a+m_b, 0) + count_a*count_b
    return result


def aggregate(solutions, free_count, budget):
    """ Compute the probability of a mine for every cell of the solved regions and for the free pool.
        :param solutions: The `RegionSolution`s of all solvable regions.
        :param free_count: R, the number of unconstrained cells.
        :param budget: B, the number of mines that still have to be placed on the regions and the free pool.
        :returns cell_probabilities: {cell_id: probability} for all cells in the regions.
        :returns free_probability: The probability of each free cell, or None if there are no free cells.
        :raises GlobalContradiction: If no placement is consistent with the whole board.
    """
    tables = [solution.combinations_at for solution in solutions]
    # prefix[i] combines the first i regions, suffix[i] all regions from i on.
    prefix = [{0: 1}]
    for table in tables:
        prefix.append(convolve(prefix[-1], table))
    suffix = [{0: 1}]
    for table in reversed(tables):
        suffix.append(convolve(table, suffix[-1]))
    suffix.reverse()
    total = prefix[-1]
    z = sum(count * combinations(free_count, budget-m) for m, count in total.items())
    if z == 0:
        raise GlobalContradiction()

    cell_probabilities = {}
    for i, solution in enumerate(solutions):
        others = convolve(prefix[i], suffix[i+1])
        # The number of placements outside of the region, given that it holds m mines.
        outside = {m: sum(count * combinations(free_count, budget-m-m_others) for m_others, count in others.items())
                   for m in solution.combinations_at}
        for cell_id, mines_at in solution.mines_at.items():
            cell_probabilities[cell_id] = sum(count * outside[m] for m, count in mines_at.items()) / z

    free_probability = None
    if free_count > 0:
        # A fixed free cell holding a mine leaves B-M-1 mines for the other R-1 free cells.
        free_probability = sum(count * combinations(free_count-1, budget-m-1) for m, count in total.items()) / z
    return cell_probabilities, free_probability
