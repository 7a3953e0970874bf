""" Guard against flags that contradict the revealed numbers. A number that already has as many flags around it as it
    shows can't take another one, so flagging one of its other neighbors is refused.
"""


def can_flag(board, cell):
    """ Whether a flag can be put on the cell without over-flagging a neighboring number. """
    if cell.resolved:
        return False
    for neighbor in board.neighbors(cell):
        if neighbor.revealed:
            flags = sum(n.flagged for n in board.neighbors(neighbor))
            if flags + 1 > neighbor.adjacent:
                return False
    return True


def toggle_flag(board, cell):
    """ Flag or unflag a cell. Removing a flag always works, placing one only if `can_flag` allows it.
        :returns: Whether the cell changed.
    """
    if cell.flagged:
        cell.flagged = False
        return True
    if not can_flag(board, cell):
        return False
    cell.flagged = True
    return True
