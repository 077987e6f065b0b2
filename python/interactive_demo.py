"""
Interactive demo for etching a maze.
Display the projected maze and its solution, and etch it with keyboard commands.
"""

from __future__ import annotations

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from demo import SCENARIOS
from edge_parser import format_edges
from etch import EtchFn, cardinality, etch_initial, etch_terminal
from glyph_render import render_colored
from grid_map import project
from reachability import Graph, solve


class InteractiveDemo:
    """Interactive demo for etching passes."""

    def __init__(self, dims: tuple[int, int], edges: Graph) -> None:
        self.dims = dims
        self.graph = list(edges)
        self.original_graph = list(edges)  # Kept for reset
        self.passes = 0
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with map, solution and status."""
        solved = solve(self.graph)

        status = Text()
        # Convert ANSI-colored map text to Rich Text
        status.append(Text.from_ansi(render_colored(project(self.dims, self.graph))))
        status.append("\n\n")

        status.append("Maze: ", style="bold")
        status.append(f"{format_edges(self.graph) or '(empty)'}\n")
        status.append("Solution: ", style="bold")
        status.append(f"{format_edges(solved) or '(empty)'}\n")
        status.append("Passes: ", style="bold")
        status.append(f"{self.passes}\n")
        status.append("Cardinality: ", style="bold")
        status.append(f"{cardinality(self.graph)}\n\n")

        status.append("Keys:\n", style="bold cyan")
        status.append("  I - Etch initial nodes\n")
        status.append("  T - Etch terminal nodes\n")
        status.append("  R - Reset to original maze\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Maze Etching Demo", border_style="green", width=80)

    def attempt_etch(self, etch: EtchFn, label: str) -> None:
        """Run one etching pass on the current maze."""
        if not self.graph:
            self.status_message = "✗ Nothing left to etch"
            return

        solved = solve(self.graph)
        before = len(self.graph)
        etch(solved, self.graph)
        removed = before - len(self.graph)

        if removed == 0:
            self.status_message = f"✗ Etch {label} removed nothing (no solution)"
        else:
            self.passes += 1
            self.status_message = f"✓ Etched {label}: removed {removed} edge(s)"

    def reset(self) -> None:
        """Reset the maze to its original state."""
        self.graph = list(self.original_graph)
        self.passes = 0
        self.status_message = "Maze reset to original state"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == "r":
                        self.reset()
                    elif key.lower() == "i":
                        self.attempt_etch(etch_initial, "initial")
                    elif key.lower() == "t":
                        self.attempt_etch(etch_terminal, "terminal")
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if "--verbose" in sys.argv:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    names = [a for a in sys.argv[1:] if a != "--verbose"]
    name = names[0] if names else "cardinality"

    scenario = SCENARIOS.get(name)
    if scenario is None or scenario.dims is None:
        grid_names = [n for n, s in SCENARIOS.items() if s.dims is not None]
        print(f"ERROR: '{name}' is not a grid scenario.")
        print(f"Grid scenarios: {', '.join(grid_names)}")
        sys.exit(1)

    InteractiveDemo(scenario.dims, scenario.edges).run()
