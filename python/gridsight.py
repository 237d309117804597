"""
Corner-to-corner line of sight on a tile grid.

Cells are unit squares. Visibility between two cells is tested along the 16
rays joining their corners; the target is visible if any ray is clear of
blocking cells.

Coordinate spaces:
- Cell space: (0, 0) to (width, height) exclusive, one point per square.
- Corner space: (0, 0) to (width, height) inclusive, one point per lattice
  intersection. Cell (x, y) spans corner points (x, y) to (x + 1, y + 1).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from board_types import (
    CORNERS,
    TRANSPARENT_CELLS,
    Cell,
    Corner,
    Edge,
    EdgeDirection,
    InvalidCoordinateError,
    LineOfSightResult,
    Point,
    RayCastPoint,
    RayCheckResult,
    TraversalFn,
    UnsupportedOperationError,
)
from raycast import grid_cast_ray

logger = logging.getLogger(__name__)


def cell_corner_to_point(cell_x: int, cell_y: int, corner: Corner) -> Point:
    """Map a corner of cell (cell_x, cell_y) to its lattice point in corner space."""
    return Point(
        cell_x + (1 if corner in (Corner.TOP_RIGHT, Corner.BOTTOM_RIGHT) else 0),
        cell_y + (1 if corner in (Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT) else 0),
    )


@dataclass(frozen=True)
class Board:
    """
    An immutable grid of cells stored flat in row-major order.

    The traversal primitive used for ray checks is injectable; it defaults to
    grid_cast_ray.
    """

    width: int
    height: int
    cells: tuple[Cell, ...]
    traversal: TraversalFn = field(default=grid_cast_ray, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Invalid board size {self.width}x{self.height}\n"
                f"  Width and height must both be positive"
            )
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Board of size {self.width}x{self.height} needs "
                f"{self.width * self.height} cells, got {len(self.cells)}"
            )

    # =========================================================================
    # Cell and Edge Queries
    # =========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """True if (x, y) is a cell-space coordinate on this board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y), or OUT_OF_BOUNDS for coordinates off the board."""
        if not self.in_bounds(x, y):
            return Cell.OUT_OF_BOUNDS
        return self.cells[x + y * self.width]

    def get_edge(self, x: int, y: int, direction: EdgeDirection) -> Edge:
        """
        Classify the unit grid line leaving lattice point (x, y) in a direction.

        A DOWN edge separates cells (x - 1, y) and (x, y); a RIGHT edge
        separates cells (x, y - 1) and (x, y). The edge is blocked if either
        of those cells is blocking or off the board.

        Raises:
            InvalidCoordinateError: If (x, y) is outside (0, 0) to (width, height)
        """
        if x < 0 or x > self.width or y < 0 or y > self.height:
            raise InvalidCoordinateError(x, y, self.width, self.height)

        if self.get_cell(x, y) not in TRANSPARENT_CELLS:
            return Edge.BLOCKED

        if direction == EdgeDirection.DOWN:
            x -= 1
            if x < 0:
                return Edge.BLOCKED
        else:
            y -= 1
            if y < 0:
                return Edge.BLOCKED

        if self.get_cell(x, y) not in TRANSPARENT_CELLS:
            return Edge.BLOCKED
        return Edge.CLEAR

    # =========================================================================
    # Rays and Line of Sight
    # =========================================================================

    def check_ray(self, source: RayCastPoint, dest: RayCastPoint) -> RayCheckResult:
        """
        Test whether the ray between two cell corners is obstructed.

        Every cell the traversal visits that is not EMPTY, SOURCE or TARGET
        stops the ray; cells off the board count as blocking.
        """
        start = cell_corner_to_point(source.x, source.y, source.corner)
        end = cell_corner_to_point(dest.x, dest.y, dest.corner)

        blockers: list[Point] = []

        def visit(x: int, y: int) -> bool:
            if self.get_cell(x, y) in TRANSPARENT_CELLS:
                return False
            blockers.append(Point(x, y))
            return True

        blocked = bool(self.traversal(start.x, start.y, end.x, end.y, visit))
        blocked_at = blockers[0] if blockers else None

        logger.debug(
            "check_ray: (%d, %d) -> (%d, %d) blocked=%s at=%s",
            start.x,
            start.y,
            end.x,
            end.y,
            blocked,
            blocked_at,
        )
        return RayCheckResult(blocked, blocked_at)

    def visible_corners(
        self, source_x: int, source_y: int, target_x: int, target_y: int
    ) -> dict[Corner, tuple[Corner, ...]]:
        """
        Evaluate all 16 corner pairs between two cells.

        Returns:
            Mapping from each source corner (in CORNERS order) to the target
            corners, also in CORNERS order, reachable from it by a clear ray
        """
        results: dict[Corner, tuple[Corner, ...]] = {}
        for source_corner in CORNERS:
            source = RayCastPoint(source_x, source_y, source_corner)
            results[source_corner] = tuple(
                target_corner
                for target_corner in CORNERS
                if not self.check_ray(source, RayCastPoint(target_x, target_y, target_corner)).blocked
            )

        logger.debug(
            "visible_corners: (%d, %d) -> (%d, %d): %s",
            source_x,
            source_y,
            target_x,
            target_y,
            {s.value: [t.value for t in ts] for s, ts in results.items()},
        )
        return results

    def check_line_of_sight(
        self, source_x: int, source_y: int, target_x: int, target_y: int
    ) -> LineOfSightResult:
        """
        Decide whether cell (source_x, source_y) can see cell (target_x, target_y).

        The first source corner (in CORNERS order) with at least one clear ray
        is reported, together with every target corner it can see.
        """
        for source_corner, target_corners in self.visible_corners(
            source_x, source_y, target_x, target_y
        ).items():
            if target_corners:
                logger.info(
                    "check_line_of_sight: (%d, %d) -> (%d, %d) visible from %s to %s",
                    source_x,
                    source_y,
                    target_x,
                    target_y,
                    source_corner.value,
                    ", ".join(c.value for c in target_corners),
                )
                return LineOfSightResult(True, source_corner, target_corners)

        logger.info(
            "check_line_of_sight: (%d, %d) -> (%d, %d) not visible",
            source_x,
            source_y,
            target_x,
            target_y,
        )
        return LineOfSightResult(False)

    def are_cells_connected(self, x0: int, y0: int, x1: int, y1: int) -> bool:
        """Cell-to-cell connectivity is not provided; always raises."""
        raise UnsupportedOperationError("are_cells_connected")
