""" Turn the revealed numbers of a board into constraints of the form "exactly N mines among these cells". """
import logging

logger = logging.getLogger(__name__)


class Constraint:
    def __init__(self, cell_id, target, members):
        """ :param cell_id: The id of the revealed cell the constraint comes from.
            :param target: How many mines are among the members, i.e. the number minus the flagged neighbors.
            :param members: The ids of the neighbors that are neither revealed nor flagged.
        """
        self.cell_id = cell_id
        self.target = target
        self.members = frozenset(members)

    @property
    def consistent(self):
        """ Whether the constraint can be satisfied at all. An over-flagged number has a negative target and a number
            with too few closed neighbors left has a target above the member count.
        """
        return 0 <= self.target <= len(self.members)

    def __repr__(self):
        return 'Constraint(cell_id={}, target={}, members={})'.format(self.cell_id, self.target, sorted(self.members))


def extract_constraints(board):
    """ Build one constraint per revealed number that still has closed, unflagged neighbors.
        :returns constraints: A list of constraints, ordered by the id of their cell. Inconsistent constraints are
                              included, they can be recognized by `Constraint.consistent`.
        :returns orphans: Constraints without members that still require mines, which no placement can satisfy.
    """
    constraints = []
    orphans = []
    for cell in board:
        if not cell.revealed or cell.adjacent == 0:
            continue
        neighbors = board.neighbors(cell)
        # Subtract the flags around the number, leaving the mines that still have to be found.
        target = cell.adjacent - sum(n.flagged for n in neighbors)
        constraint = Constraint(cell.id, target, [n.id for n in neighbors if not n.resolved])
        if not constraint.members:
            if constraint.target != 0:
                logger.warning('Number at (%d, %d) has no closed neighbors left but needs %d more mines.',
                               cell.x, cell.y, constraint.target)
                orphans.append(constraint)
            continue
        if not constraint.consistent:
            logger.warning('Number at (%d, %d) needs %d mines among %d closed neighbors.',
                           cell.x, cell.y, constraint.target, len(constraint.members))
        constraints.append(constraint)
    return constraints, orphans
