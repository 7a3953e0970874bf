""" Split the constrained cells into regions that can be solved independently of each other.

    Two cells are in the same region if some number constrains both of them, or if they're linked through a chain of
    such numbers. Note that being next to each other isn't enough; two closed cells can touch without sharing a number,
    and two cells far apart can be linked by numbers in between them.
"""
import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components


class Region:
    def __init__(self, cells, constraints):
        """ :param cells: The ids of the cells in the region, in ascending order.
            :param constraints: The constraints whose members all lie within the region.
        """
        self.cells = tuple(cells)
        self.constraints = list(constraints)

    @property
    def consistent(self):
        return all(constraint.consistent for constraint in self.constraints)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return 'Region(cells={}, constraints={})'.format(list(self.cells), len(self.constraints))


def partition(board, constraints):
    """ Group the unresolved cells into regions and the free pool.
        :returns regions: A list of regions, ordered by their smallest cell id.
        :returns free_cells: The ids of the unresolved cells that no constraint touches, in ascending order.
    """
    constrained = sorted(set().union(*(c.members for c in constraints)))
    in_constraints = set(constrained)
    free_cells = [int(cell_id) for cell_id in np.flatnonzero(board.unresolved_mask()) if cell_id not in in_constraints]
    if not constrained:
        return [], free_cells
    index = {cell_id: i for i, cell_id in enumerate(constrained)}
    # Chaining the members of each constraint is enough to connect all of them.
    rows, cols = [], []
    for constraint in constraints:
        members = sorted(constraint.members)
        rows.extend(index[m] for m in members[:-1])
        cols.extend(index[m] for m in members[1:])
    n = len(constrained)
    graph = coo_matrix((np.ones(len(rows)), (np.array(rows, dtype=int), np.array(cols, dtype=int))), shape=(n, n))
    num_components, labels = connected_components(graph, directed=False)
    component_cells = [[] for _ in range(num_components)]
    for cell_id, label in zip(constrained, labels):
        component_cells[label].append(cell_id)
    component_constraints = [[] for _ in range(num_components)]
    for constraint in constraints:
        component_constraints[labels[index[min(constraint.members)]]].append(constraint)
    regions = sorted((Region(cells, cs) for cells, cs in zip(component_cells, component_constraints)),
                     key=lambda region: region.cells[0])
    return regions, free_cells
