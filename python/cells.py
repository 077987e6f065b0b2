"""
Cell states for projecting a graph onto a 2D map.

A cell holds either a node marker or the union of every edge direction
written into it. Directions are named by where the edge points: RIGHT_UP is
an edge going right and up, DIAG_RISE is the bidirectional rising diagonal.

The two- and three-direction crossings are named by the arrow heads that are
visible on top of the X:

    CROSS_RIGHT      CROSS_RIGHT_UP    CROSS_LEFT_DOWN
        ^                ^
    \\ /              \\ /              \\ /
     X                X                X
    / \\              / \\              / \\
        v                v             v
"""

from __future__ import annotations

from enum import Enum


class Cell(Enum):
    """Content of one cell in the map."""

    EMPTY = "empty"
    NODE = "node"  # At least one incoming or outgoing edge
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    RIGHT_LEFT = "right_left"
    UP_DOWN = "up_down"
    RIGHT_UP = "right_up"
    RIGHT_DOWN = "right_down"
    LEFT_UP = "left_up"
    LEFT_DOWN = "left_down"
    DIAG_RISE = "diag_rise"  # Rising, reading left to right
    DIAG_FALL = "diag_fall"  # Falling, reading left to right
    CROSS_RIGHT = "cross_right"
    CROSS_LEFT = "cross_left"
    CROSS_UP = "cross_up"
    CROSS_DOWN = "cross_down"
    CROSS_RIGHT_UP = "cross_right_up"
    CROSS_RIGHT_DOWN = "cross_right_down"
    CROSS_LEFT_UP = "cross_left_up"
    CROSS_LEFT_DOWN = "cross_left_down"
    CROSS = "cross"  # Both diagonals, both ways


# Unit step (dx, dy) of every single-direction cell. y grows downwards.
STEPS: dict[tuple[int, int], Cell] = {
    (1, 0): Cell.RIGHT,
    (-1, 0): Cell.LEFT,
    (0, -1): Cell.UP,
    (0, 1): Cell.DOWN,
    (1, -1): Cell.RIGHT_UP,
    (1, 1): Cell.RIGHT_DOWN,
    (-1, -1): Cell.LEFT_UP,
    (-1, 1): Cell.LEFT_DOWN,
}

_R, _L, _U, _D = Cell.RIGHT, Cell.LEFT, Cell.UP, Cell.DOWN
_RU, _RD, _LU, _LD = Cell.RIGHT_UP, Cell.RIGHT_DOWN, Cell.LEFT_UP, Cell.LEFT_DOWN

# Directions accumulated by each edge-carrying cell
COMPONENTS: dict[Cell, frozenset[Cell]] = {
    _R: frozenset({_R}),
    _L: frozenset({_L}),
    _U: frozenset({_U}),
    _D: frozenset({_D}),
    Cell.RIGHT_LEFT: frozenset({_R, _L}),
    Cell.UP_DOWN: frozenset({_U, _D}),
    _RU: frozenset({_RU}),
    _RD: frozenset({_RD}),
    _LU: frozenset({_LU}),
    _LD: frozenset({_LD}),
    Cell.DIAG_RISE: frozenset({_RU, _LD}),
    Cell.DIAG_FALL: frozenset({_LU, _RD}),
    Cell.CROSS_RIGHT: frozenset({_RU, _RD}),
    Cell.CROSS_LEFT: frozenset({_LU, _LD}),
    Cell.CROSS_UP: frozenset({_RU, _LU}),
    Cell.CROSS_DOWN: frozenset({_LD, _RD}),
    Cell.CROSS_RIGHT_UP: frozenset({_LU, _RD, _RU}),
    Cell.CROSS_RIGHT_DOWN: frozenset({_RU, _LD, _RD}),
    Cell.CROSS_LEFT_UP: frozenset({_RU, _LD, _LU}),
    Cell.CROSS_LEFT_DOWN: frozenset({_LU, _RD, _LD}),
    Cell.CROSS: frozenset({_RU, _RD, _LU, _LD}),
}

_BY_COMPONENTS: dict[frozenset[Cell], Cell] = {dirs: cell for cell, dirs in COMPONENTS.items()}

# Diagonal axes: falling (\) and rising (/)
_FALLING = frozenset({_LU, _RD})
_RISING = frozenset({_RU, _LD})

# Two-direction crossings sharing no direction
_CROSSING_PAIRS = {
    frozenset({Cell.CROSS_RIGHT, Cell.CROSS_LEFT}),
    frozenset({Cell.CROSS_UP, Cell.CROSS_DOWN}),
}

_SINGLE = frozenset(STEPS.values())


def join(current: Cell, incoming: Cell) -> Cell:
    """
    Merge an incoming marker into a cell.

    A single direction is added to the cell when a state for the resulting
    direction set exists. Mixing axis directions that are not opposites, or an
    axis with a diagonal, keeps the current state. Of the compound markers,
    only a two-direction crossing joined with its disjoint counterpart has an
    effect, giving the full cross.
    """
    if current is Cell.EMPTY:
        return incoming
    if incoming in _SINGLE and current in COMPONENTS:
        merged = _BY_COMPONENTS.get(COMPONENTS[current] | COMPONENTS[incoming])
        return current if merged is None else merged
    if frozenset({current, incoming}) in _CROSSING_PAIRS:
        return Cell.CROSS
    return current


def points_along_diag(cell: Cell, direction: tuple[int, int]) -> bool:
    """
    Return True if the cell has an edge along the diagonal of `direction`.

    The sign of the direction is ignored: (1, 1) and (-1, -1) both ask about
    the falling diagonal, (-1, 1) and (1, -1) about the rising one.
    """
    match direction:
        case (1, 1) | (-1, -1):
            axis = _FALLING
        case (-1, 1) | (1, -1):
            axis = _RISING
        case _:
            return False
    return bool(COMPONENTS.get(cell, frozenset()) & axis)
