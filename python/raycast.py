"""
Grid ray traversal between lattice points.

A segment runs between two lattice points in corner space. Cell (x, y)
occupies the unit square between lattice points (x, y) and (x + 1, y + 1).
"""

from __future__ import annotations

from fractions import Fraction
from math import floor
from typing import Iterator

from board_types import VisitFn

__all__ = ["grid_cast_ray", "iter_segment_cells"]


def iter_segment_cells(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """
    Yield, in order from (x0, y0) to (x1, y1), the cells the segment passes through.

    - A zero-length segment yields nothing.
    - A segment running along a grid line crosses no cell interior. For each
      unit edge it runs along, both cells sharing that edge are yielded
      (above then below, or left then right).
    - Any other segment yields every cell whose interior it crosses. Cells it
      only touches at a corner are skipped.

    Cells may lie outside any particular board; callers classify them.
    """
    dx = x1 - x0
    dy = y1 - y0

    if dx == 0 and dy == 0:
        return

    if dy == 0:
        step = 1 if dx > 0 else -1
        for x in range(x0, x1, step):
            col = min(x, x + step)
            yield (col, y0 - 1)
            yield (col, y0)
        return

    if dx == 0:
        step = 1 if dy > 0 else -1
        for y in range(y0, y1, step):
            row = min(y, y + step)
            yield (x0 - 1, row)
            yield (x0, row)
        return

    # Parameter values (0..1) where the segment crosses a vertical or horizontal
    # grid line. Exact arithmetic keeps simultaneous crossings (corners) equal.
    crossings: set[Fraction] = {Fraction(0), Fraction(1)}
    for k in range(min(x0, x1) + 1, max(x0, x1)):
        crossings.add(Fraction(k - x0, dx))
    for k in range(min(y0, y1) + 1, max(y0, y1)):
        crossings.add(Fraction(k - y0, dy))

    ordered = sorted(crossings)
    for t_enter, t_exit in zip(ordered, ordered[1:]):
        # Midpoint of a crossing-free stretch is strictly inside one cell
        t_mid = (t_enter + t_exit) / 2
        yield (floor(x0 + t_mid * dx), floor(y0 + t_mid * dy))


def grid_cast_ray(x0: int, y0: int, x1: int, y1: int, visit: VisitFn) -> bool:
    """
    Walk the cells between two lattice points, calling visit for each one.

    Stops at the first cell for which visit returns a truthy value.

    Returns:
        True if visit requested a stop, False if the traversal completed
    """
    for x, y in iter_segment_cells(x0, y0, x1, y1):
        if visit(x, y):
            return True
    return False
