"""
Edge list parsing utilities.

Provides two input formats:
1. Bracket format, as printed by format_edges: "[1, 2], [2, 3]"
2. Arrow format: "1->2 2->3"
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from reachability import Graph, as_edge

__all__ = ["parse_edges", "format_edges"]

_PAIR = re.compile(r"[\[(]\s*(\d+)\s*,\s*(\d+)\s*[\])]")
_ARROW = re.compile(r"(\d+)\s*->\s*(\d+)")
_SEPARATOR = re.compile(r"[\s,]*")


def parse_edges(text: str) -> Graph:
    """
    Parse an edge list from text.

    Format:
    - Bracket pairs: "[1, 2]" or "(1, 2)"
    - Arrow pairs: "1->2"
    - Pairs separated by whitespace and/or commas; both forms may be mixed

    Example:
        "[1, 4], [2, 3], 3->4"  ->  [(1, 4), (2, 3), (3, 4)]

    Args:
        text: The edge list

    Returns:
        Edges in the order they appear
    """
    edges: Graph = []
    pos = _SEPARATOR.match(text, 0).end()  # type: ignore[union-attr]

    while pos < len(text):
        match = _PAIR.match(text, pos) or _ARROW.match(text, pos)
        if match is None:
            token = text[pos:].split(None, 1)[0]
            error_msg = (
                f"Invalid edge: '{token}'\n"
                f"  Position: character {pos}\n"
                f"  Valid formats:\n"
                f"    - Bracket pair (e.g., '[1, 2]', '(1, 2)')\n"
                f"    - Arrow pair (e.g., '1->2')"
            )
            raise ValueError(error_msg)
        edges.append((int(match.group(1)), int(match.group(2))))
        pos = _SEPARATOR.match(text, match.end()).end()  # type: ignore[union-attr]

    return edges


def format_edges(edges: Iterable[Sequence[int]]) -> str:
    """Format edges in bracket format, e.g. "[1, 3], [2, 5]"."""
    return ", ".join(f"[{a}, {b}]" for a, b in (as_edge(e) for e in edges))
