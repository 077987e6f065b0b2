"""
Linear reachability solver for directional edges.

Reduces a maze (a list of directed edges) to the edges that connect its
initial nodes to the terminal nodes they can reach:

    [1, 2], [2, 3]                  =>  [1, 3]
    [1, 4], [2, 3], [3, 4], [4, 5]  =>  [1, 5], [2, 5]
    [1, 4], [2, 3], [4, 5]          =>  [1, 5], [2, 3]

An initial node has no incoming edge, a terminal node has no outgoing edge.
Nodes on a cycle are never initial or terminal, so paths that only lead into
a cycle (or only come out of one) vanish from the result.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from fixpoint import Inference, ManyTrue, Propagate, solve_minimum

Edge = tuple[int, int]
Graph = list[Edge]


def as_edge(pair: Sequence[int]) -> Edge:
    """Normalize a two-item sequence such as [1, 2] to an Edge tuple."""
    if len(pair) != 2:
        raise ValueError(
            f"Invalid edge: {pair!r}\n"
            f"  Expected a pair of node ids, got {len(pair)} item(s)"
        )
    a, b = pair
    return (int(a), int(b))


def as_graph(edges: Iterable[Sequence[int]]) -> Graph:
    """Normalize any iterable of pairs to a Graph, keeping order."""
    return [as_edge(e) for e in edges]


def initial_nodes(edges: Iterable[Sequence[int]]) -> set[int]:
    """Nodes that are never the target of an edge."""
    graph = as_graph(edges)
    targets = {b for _, b in graph}
    return {a for a, _ in graph if a not in targets}


def terminal_nodes(edges: Iterable[Sequence[int]]) -> set[int]:
    """Nodes that are never the source of an edge."""
    graph = as_graph(edges)
    sources = {a for a, _ in graph}
    return {b for _, b in graph if b not in sources}


def infer(cache: set[Edge], facts: list[Edge]) -> Inference[Edge]:
    """
    One inference step of the reachability closure.

    First composes a pair of facts sharing an endpoint into a fact not seen
    before. Once every composition is cached, reports the facts that still
    have a continuation on either side: those are not initial-to-terminal.
    """
    for a, b in facts:
        for c, d in facts:
            if b == c and (a, d) not in cache:
                return Propagate((a, d))

    redundant = [
        (a, b)
        for a, b in facts
        if any(c == b or a == d for c, d in facts)
    ]
    return ManyTrue(tuple(redundant))


def solve(edges: Iterable[Sequence[int]]) -> Graph:
    """
    Return the edges describing reachability from initial to terminal nodes.

    Args:
        edges: Directed edges as pairs of non-negative ints.

    Returns:
        Deduplicated initial-to-terminal pairs, sorted ascending.
    """
    return sorted(solve_minimum(as_graph(edges), infer))
