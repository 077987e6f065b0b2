"""
Demonstration scenarios for the reachability solver.

Usage:
    python demo.py [scenario | edge list] [--verbose]
    python demo.py "[1, 2], [2, 3]"

Without an argument every scenario is run in turn. An edge list is solved
and its cardinality printed.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

from edge_parser import format_edges, parse_edges
from etch import cardinality, etch_initial, etch_layers
from glyph_render import render_colored
from grid_map import project
from reachability import Graph, solve
from shapes import diag_rect, dir_line


@dataclass(frozen=True)
class Scenario:
    """An example maze with an explanation."""

    description: str
    edges: Graph
    dims: tuple[int, int] | None = None  # Set when node ids are grid positions
    etch_steps: bool = False  # Show every etching pass instead of the solution
    show_cardinality: bool = False


SCENARIOS: dict[str, Scenario] = dict(
    meet=Scenario(
        "Two starts meet in the middle and reach two ends.\n"
        "\n"
        "      2\n"
        "    4 5 6\n"
        "      8",
        [(2, 5), (4, 5), (5, 6), (5, 8)],
    ),
    cross=Scenario(
        "Two routes around the edge of a square, from 1 to 9.\n"
        "\n"
        "    1 2 3\n"
        "    4   6\n"
        "    7 8 9",
        [(1, 2), (2, 3), (1, 4), (3, 6), (4, 7), (6, 9), (7, 8), (8, 9)],
    ),
    bidirection=Scenario(
        "A bidirectional maze encoded as a directional one.\n"
        "Every start/end is two nodes, one initial and one terminal,\n"
        "joined by a cyclic path. Every start/end reaches itself.\n"
        "\n"
        "     1   3\n"
        "      \\ /\n"
        "    4--5--6\n"
        "    |     |\n"
        "    7     9\n"
        "    |     |\n"
        "    10-11-12\n"
        "      /  \\\n"
        "    13   15",
        [
            (1, 5), (5, 3),
            (5, 6), (6, 9), (9, 12), (12, 11), (11, 10), (10, 7), (7, 4), (4, 5),
            (13, 11), (11, 15),
        ],
    ),
    exclusive=Scenario(
        "Initial nodes never reach each other: (A -> B) and (B -> A) is\n"
        "always false, because they form a loop or are disconnected.\n"
        "\n"
        "    1     3\n"
        "    |     |\n"
        "    4--5--6\n"
        "    |     |\n"
        "    7     9\n"
        "    |     |\n"
        "    10-11-12",
        [
            (1, 4), (3, 6),
            (5, 6), (6, 9), (9, 12), (12, 11), (11, 10), (10, 7), (7, 4), (4, 5),
        ],
    ),
    no_initial=Scenario(
        "Node 10 is terminal, but it must be reached from an initial node\n"
        "to be part of the solution.\n"
        "\n"
        "    1--2--3\n"
        "    |     |\n"
        "    4     6\n"
        "    |     |\n"
        "    7--8--9\n"
        "       |\n"
        "       10",
        [(1, 2), (2, 3), (3, 6), (6, 9), (9, 8), (8, 7), (7, 4), (4, 1), (8, 10)],
    ),
    no_terminal=Scenario(
        "Node 2 is initial, but it must reach a terminal node to be part\n"
        "of the solution.\n"
        "\n"
        "       2\n"
        "       |\n"
        "    4--5--6\n"
        "    |     |\n"
        "    7     9\n"
        "    |     |\n"
        "    10-11-12",
        [(2, 5), (5, 6), (6, 9), (9, 12), (12, 11), (11, 10), (10, 7), (7, 4), (4, 5)],
    ),
    map=Scenario(
        "Two diagonal edges crossing in the same cell.",
        [(0, 4), (3, 1)],
        dims=(3, 3),
    ),
    cardinality=Scenario(
        "A rectangle of right and down edges; etching it takes one pass\n"
        "per anti-diagonal.",
        diag_rect((3, 3)),
        dims=(3, 3),
        show_cardinality=True,
    ),
    line=Scenario(
        "A directional line, etched one initial node at a time.",
        dir_line(4),
        dims=(4, 1),
        etch_steps=True,
    ),
)


def run_scenario(name: str, scenario: Scenario) -> None:
    """Print a scenario, its solution and, for grid scenarios, its map."""
    print("=" * 40)
    print(f"{name}:")
    print("=" * 40)
    print(scenario.description)
    print()

    if scenario.etch_steps and scenario.dims is not None:
        for graph, solved in etch_layers(scenario.edges, etch_initial):
            print(render_colored(project(scenario.dims, graph)))
            print(format_edges(graph))
            print("-" * 40)
            print(format_edges(solved))
            print()
        return

    if scenario.dims is not None:
        print(render_colored(project(scenario.dims, scenario.edges)))
        print()

    print(f"{format_edges(scenario.edges)}  =>  {format_edges(solve(scenario.edges))}")
    if scenario.show_cardinality:
        print(f"cardinality: {cardinality(scenario.edges)}")
    print()


def lookup_scenario(arg: str) -> Scenario:
    """
    Find a named scenario, or build one from an edge list such as "[1, 2], [2, 3]".

    Raises:
        ValueError: If `arg` is neither a scenario name nor a valid edge list
    """
    if arg in SCENARIOS:
        return SCENARIOS[arg]
    try:
        edges = parse_edges(arg)
    except ValueError as e:
        raise ValueError(
            f"Unknown scenario: {arg!r}\n"
            f"Available: {', '.join(SCENARIOS)}\n"
            f"Or an edge list:\n{e}"
        ) from e
    return Scenario("Edges from the command line.", edges, show_cardinality=True)


def main(argv: list[str]) -> int:
    args = [a for a in argv if a != "--verbose"]
    if len(args) != len(argv):
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        scenarios = [(arg, lookup_scenario(arg)) for arg in args]
    except ValueError as e:
        print(e)
        return 1

    for name, scenario in scenarios or list(SCENARIOS.items()):
        run_scenario(name, scenario)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
