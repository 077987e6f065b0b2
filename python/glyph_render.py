"""
Text rendering for projected maps.

    ■ → ■ → ■
    ↓   ↓   ↓
    ■ → ■ → ■

Crossing arrows use unicode arrow-cross symbols where they exist. Some
crossing variants have no symbol, so a white arrow is used instead: it means
the arrow crosses a bidirectional edge.

    ■   ■
      ⬃
    ■   ■
"""

from __future__ import annotations

from typing import Callable

from simple_chalk import chalk

from cells import Cell
from grid_map import CellMap

# U+FE0E asks for text presentation of the single diagonal arrows
_TEXT = "\ufe0e"

GLYPHS: dict[Cell, str] = {
    Cell.RIGHT: "→",
    Cell.LEFT: "←",
    Cell.DOWN: "↓",
    Cell.UP: "↑",
    Cell.RIGHT_LEFT: "-",
    Cell.UP_DOWN: "|",
    Cell.RIGHT_DOWN: "↘" + _TEXT,
    Cell.RIGHT_UP: "↗" + _TEXT,
    Cell.LEFT_UP: "↖" + _TEXT,
    Cell.LEFT_DOWN: "↙" + _TEXT,
    Cell.DIAG_RISE: "⟋",
    Cell.DIAG_FALL: "⟍",
    Cell.CROSS: "╳",
    Cell.CROSS_RIGHT_UP: "⤯",
    Cell.CROSS_RIGHT_DOWN: "⤰",
    Cell.CROSS_RIGHT: "⤭",
    Cell.CROSS_UP: "⤲",
    Cell.CROSS_LEFT: "⤪",
    Cell.CROSS_DOWN: "⤩",
    Cell.CROSS_LEFT_UP: "⬁",
    Cell.CROSS_LEFT_DOWN: "⬃",
    Cell.NODE: "■",
    Cell.EMPTY: " ",
}

ColorFn = Callable[[Cell], Callable[[str], str]]


def render(cell_map: CellMap, color_fn: ColorFn | None = None) -> str:
    """
    Render a map as text, one glyph per cell.

    Args:
        cell_map: Map produced by grid_map.project
        color_fn: Optional function returning a colorizer for each cell

    Returns:
        Cells separated by a space, rows separated by newlines
    """
    if color_fn is None:
        color_fn = lambda cell: lambda s: s

    lines: list[str] = []
    for row in cell_map:
        lines.append(" ".join(color_fn(cell)(GLYPHS[cell]) for cell in row))
    return "\n".join(lines)


_AXIS = {Cell.RIGHT, Cell.LEFT, Cell.UP, Cell.DOWN, Cell.RIGHT_LEFT, Cell.UP_DOWN}
_DIAGONAL = {
    Cell.RIGHT_UP,
    Cell.RIGHT_DOWN,
    Cell.LEFT_UP,
    Cell.LEFT_DOWN,
    Cell.DIAG_RISE,
    Cell.DIAG_FALL,
}


def cell_color(cell: Cell) -> Callable[[str], str]:
    """Terminal colour for a cell: nodes, axis edges, diagonals, crossings."""
    if cell is Cell.EMPTY:
        return lambda s: s
    if cell is Cell.NODE:
        return chalk.yellow
    if cell in _AXIS:
        return chalk.cyan
    if cell in _DIAGONAL:
        return chalk.green
    return chalk.magenta


def render_colored(cell_map: CellMap) -> str:
    """Render a map with ANSI colours for terminal display."""
    return render(cell_map, cell_color)
