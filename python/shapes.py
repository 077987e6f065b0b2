"""Some functions to create various shapes of mazes."""

from __future__ import annotations

from reachability import Graph


def dir_line(n: int) -> Graph:
    """
    Create a directional line of `n` nodes, starting at 0.

    For example, dir_line(4):

        0 → 1 → 2 → 3
    """
    return [(i, i + 1) for i in range(n - 1)]


def diag_rect(dims: tuple[int, int]) -> Graph:
    """
    Create a rectangle where every node is connected to its right and down
    neighbours.

    For example, diag_rect((3, 3)):

        0 → 1 → 2
        ↓   ↓   ↓
        3 → 4 → 5
        ↓   ↓   ↓
        6 → 7 → 8
    """
    w, h = dims
    edges: Graph = []
    for j in range(h):
        for i in range(w):
            x = j * w + i
            if i + 1 != w:
                edges.append((x, x + 1))
            if j + 1 != h:
                edges.append((x, x + w))
    return edges
