"""
Shared type definitions for the gridsight system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Cell(Enum):
    """State of a single grid square."""

    EMPTY = "Empty"
    BLOCKING = "Blocking"
    SOURCE = "Source"  # Marker only, transparent
    TARGET = "Target"  # Marker only, transparent
    OUT_OF_BOUNDS = "OutOfBounds"  # Never stored, synthesized by queries


TRANSPARENT_CELLS = frozenset({Cell.EMPTY, Cell.SOURCE, Cell.TARGET})


class Corner(Enum):
    """One of the four lattice points surrounding a cell."""

    TOP_LEFT = "TopLeft"
    TOP_RIGHT = "TopRight"
    BOTTOM_LEFT = "BottomLeft"
    BOTTOM_RIGHT = "BottomRight"


# Search order for line of sight; the first clear source corner wins.
CORNERS: tuple[Corner, ...] = (
    Corner.TOP_LEFT,
    Corner.TOP_RIGHT,
    Corner.BOTTOM_LEFT,
    Corner.BOTTOM_RIGHT,
)


class Edge(Enum):
    """Passability of a unit grid line."""

    CLEAR = "Clear"
    BLOCKED = "Blocked"


class EdgeDirection(Enum):
    """Direction of a unit grid line leaving a lattice point."""

    DOWN = "Down"  # Increasing y
    RIGHT = "Right"  # Increasing x


# =============================================================================
# Points and Results
# =============================================================================


@dataclass(frozen=True)
class Point:
    """A lattice point in corner space, (0, 0) to (width, height) inclusive."""

    x: int
    y: int


@dataclass(frozen=True)
class RayCastPoint:
    """A corner of a cell, addressed by cell coordinates."""

    x: int
    y: int
    corner: Corner


@dataclass(frozen=True)
class RayCheckResult:
    """Outcome of testing one corner-to-corner ray."""

    blocked: bool
    blocked_at: Point | None = None  # First opaque cell met, in cell space


@dataclass(frozen=True)
class LineOfSightResult:
    """Outcome of the all-corners search between two cells."""

    has_line_of_sight: bool
    source_corner: Corner | None = None
    target_corners: tuple[Corner, ...] | None = None


# Callback invoked per visited cell; a truthy return stops the traversal
VisitFn = Callable[[int, int], bool | None]

# Grid traversal primitive: (x0, y0, x1, y1, visit) -> stopped
TraversalFn = Callable[[int, int, int, int, VisitFn], bool]


# =============================================================================
# Errors
# =============================================================================


class InvalidCoordinateError(ValueError):
    """A lattice coordinate lies outside (0, 0) to (width, height) inclusive."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Bad coordinate ({x}, {y})\n"
            f"  Lattice coordinates must lie within (0, 0) to ({width}, {height}) inclusive"
        )


class RowLengthMismatchError(ValueError):
    """A board row differs in length from the first row."""

    def __init__(self, row_index: int, actual_length: int, expected_width: int) -> None:
        self.row_index = row_index
        self.actual_length = actual_length
        self.expected_width = expected_width
        super().__init__(
            f"Row {row_index} has invalid length {actual_length}; expected {expected_width}\n"
            f"  All rows must have the same number of cells as row 0"
        )


class UnknownSymbolError(ValueError):
    """A board row contains a character outside the symbol table."""

    def __init__(self, x: int, y: int, symbol: str) -> None:
        self.x = x
        self.y = y
        self.symbol = symbol
        super().__init__(
            f"Bad input at ({x}, {y}): '{symbol}'\n"
            f"  Valid characters: '-' (empty), 'X' (blocking)"
        )


class UnsupportedOperationError(NotImplementedError):
    """The requested operation is deliberately not provided."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} is not supported")
