#!/usr/bin/env python3
"""
Line of sight demo for gridsight.
Loads a named layout and prints the corner-pair evidence behind the verdict.

Usage:
    python los_demo.py [layout] [--verbose]
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from board_parser import board_from_string
from board_types import CORNERS, RayCastPoint
from gridsight import Board

LAYOUTS = dict(
    diagonal=dict(
        board="""
        --X
        ---
        X--
        """,
        source=(0, 0),
        target=(2, 2),
    ),
    wall=dict(
        board="""
        --X--
        --X--
        --X--
        """,
        source=(0, 1),
        target=(4, 1),
    ),
    pillar=dict(
        board="""
        -----
        --X--
        -----
        """,
        source=(0, 1),
        target=(4, 1),
    ),
    squeeze=dict(
        board="""
        -X-
        X--
        ---
        """,
        source=(0, 0),
        target=(2, 2),
    ),
)


def corner_table(board: Board, source: tuple[int, int], target: tuple[int, int]) -> Table:
    """Build a table of all 16 corner rays between source and target."""
    table = Table(title=f"Rays from {source} to {target}")
    table.add_column("Source corner", style="bold")
    table.add_column("Target corner")
    table.add_column("Ray")
    table.add_column("Blocked at")

    for source_corner in CORNERS:
        for target_corner in CORNERS:
            result = board.check_ray(
                RayCastPoint(source[0], source[1], source_corner),
                RayCastPoint(target[0], target[1], target_corner),
            )
            if result.blocked:
                ray = Text("blocked", style="red")
            else:
                ray = Text("clear", style="green")
            blocked_at = (
                f"({result.blocked_at.x}, {result.blocked_at.y})" if result.blocked_at else ""
            )
            table.add_row(source_corner.value, target_corner.value, ray, blocked_at)
    return table


def main(name: str) -> None:
    """Run the demo for one layout."""
    console = Console()
    layout = LAYOUTS[name]
    board = board_from_string(layout["board"])
    source = layout["source"]
    target = layout["target"]

    console.print(f"Layout: [bold]{name}[/bold] ({board.width}x{board.height})")
    console.print(corner_table(board, source, target))

    result = board.check_line_of_sight(*source, *target)
    if result.has_line_of_sight:
        corners = ", ".join(c.value for c in result.target_corners or ())
        console.print(
            f"[green]Visible[/green] from {result.source_corner.value} to {corners}"
        )
    else:
        console.print("[red]Not visible[/red]")


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    level = logging.DEBUG if "--verbose" in sys.argv else logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    layout_name = args[0] if args else "diagonal"
    if layout_name not in LAYOUTS:
        print(f"Unknown layout '{layout_name}'. Available: {', '.join(sorted(LAYOUTS))}")
        sys.exit(1)
    main(layout_name)
