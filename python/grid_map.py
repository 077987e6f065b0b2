"""
Projection of a graph onto a 2D map of cells.

Node ids are raster positions in a W x H grid, so for W = 3:

    0 1 2
    3 4 5
    6 7 8

Every node is connected to its neighbours only, up to 8 with diagonals.
Both nodes and edges are projected into cells: the map has a row and a
column between every pair of node rows/columns to hold the edge markers,
giving (2*H - 1) rows of (2*W - 1) cells.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from cells import STEPS, Cell, join, points_along_diag
from reachability import as_graph

logger = logging.getLogger(__name__)

CellMap = list[list[Cell]]


def _check_dims(dims: Sequence[int]) -> tuple[int, int]:
    if len(dims) != 2:
        raise ValueError(
            f"Invalid map dimensions: {tuple(dims)!r}\n"
            f"  Expected (width, height)"
        )
    w, h = int(dims[0]), int(dims[1])
    if w < 1 or h < 1:
        raise ValueError(
            f"Invalid map dimensions: {w}x{h}\n"
            f"  Width and height must both be at least 1"
        )
    return w, h


def project(dims: Sequence[int], edges: Iterable[Sequence[int]]) -> CellMap:
    """
    Create a 2D map from a graph whose node ids encode grid positions.

    Args:
        dims: (width, height) of the logical node grid
        edges: Directed edges between node ids in [0, width * height)

    Returns:
        Map of (2*height - 1) rows by (2*width - 1) cells

    Raises:
        ValueError: If the dimensions are not positive or a node id lies
            outside the grid.
    """
    w, h = _check_dims(dims)
    graph = as_graph(edges)

    limit = w * h
    for a, b in graph:
        if not (0 <= a < limit and 0 <= b < limit):
            raise ValueError(
                f"Edge out of range: ({a}, {b})\n"
                f"  Map: {w}x{h}\n"
                f"  Valid node ids: 0 to {limit - 1}"
            )

    cell_map: CellMap = [[Cell.EMPTY for _ in range(w * 2 - 1)] for _ in range(h * 2 - 1)]

    skipped = 0
    for a, b in graph:
        ax, ay = a % w, a // w
        bx, by = b % w, b // w
        step = (bx - ax, by - ay)
        marker = STEPS.get(step)
        if marker is None:
            # Not a neighbour (also covers self-loops)
            logger.debug("project: skipping edge (%d, %d), offset %r", a, b, step)
            skipped += 1
            continue
        row = ay * 2 + step[1]
        col = ax * 2 + step[0]
        cell_map[row][col] = join(cell_map[row][col], marker)

    _mark_nodes(cell_map)

    logger.info(
        "project: %dx%d map, %d edge(s), %d skipped",
        w,
        h,
        len(graph),
        skipped,
    )
    return cell_map


def _mark_nodes(cell_map: CellMap) -> None:
    """Place a node marker on every node position touched by an edge."""
    rows = len(cell_map)
    cols = len(cell_map[0])

    def filled(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < cols and cell_map[r][c] is not Cell.EMPTY

    def along(r: int, c: int, direction: tuple[int, int]) -> bool:
        return 0 <= r < rows and 0 <= c < cols and points_along_diag(cell_map[r][c], direction)

    for r in range(0, rows, 2):
        for c in range(0, cols, 2):
            if cell_map[r][c] is not Cell.EMPTY:
                continue
            touched = (
                filled(r, c - 1)
                or filled(r, c + 1)
                or filled(r - 1, c)
                or filled(r + 1, c)
                or along(r + 1, c + 1, (1, 1))
                or along(r - 1, c - 1, (1, 1))
                or along(r + 1, c - 1, (-1, 1))
                or along(r - 1, c + 1, (-1, 1))
            )
            if touched:
                cell_map[r][c] = Cell.NODE
