"""
Etching: iterate through a maze by removing initial or terminal nodes.

The solution of a maze tells which nodes are initial and which are terminal.
Removing the edges of those nodes from the maze gives a new maze with a
different solution. Etching until nothing is left analyzes a maze without
looking at its internal structure; how many passes it takes is the
cardinality of the maze.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Sequence

from reachability import Edge, Graph, as_graph, solve

logger = logging.getLogger(__name__)

EtchFn = Callable[[Sequence[Edge], Graph], None]


def etch_initial(solved: Sequence[Edge], graph: Graph) -> None:
    """
    Etch away initial nodes, in place.

    Args:
        solved: The solved maze
        graph: The maze to etch; every edge leaving a node that is a source
            in `solved` is removed
    """
    sources = {a for a, _ in solved}
    graph[:] = [e for e in graph if e[0] not in sources]


def etch_terminal(solved: Sequence[Edge], graph: Graph) -> None:
    """Etch away terminal nodes, in place."""
    targets = {b for _, b in solved}
    graph[:] = [e for e in graph if e[1] not in targets]


def etch_layers(
    edges: Iterable[Sequence[int]],
    etch: EtchFn = etch_initial,
) -> Iterator[tuple[Graph, Graph]]:
    """
    Etch a copy of the maze until no edges are left.

    Yields (maze, solution) for every pass, before the pass is applied.
    Stops early when the solution is empty, since nothing could be etched:
    the rest of the maze then has no initial node reaching a terminal node.
    """
    graph = as_graph(edges)
    while graph:
        solved = solve(graph)
        if not solved:
            logger.warning(
                "etch_layers: empty solution, %d edge(s) left unetched",
                len(graph),
            )
            return
        yield list(graph), solved
        etch(solved, graph)


def cardinality(edges: Iterable[Sequence[int]], etch: EtchFn = etch_initial) -> int:
    """
    Count the etching passes needed to empty the maze, plus one.

    An empty maze has cardinality 0. Otherwise counting starts at 1, since
    it takes one step to stand still. Etching by initial or by terminal
    nodes gives the same count.
    """
    graph = as_graph(edges)
    if not graph:
        return 0
    passes = sum(1 for _ in etch_layers(graph, etch))
    logger.info("cardinality: %d pass(es) over %d edge(s)", passes, len(graph))
    return passes + 1
