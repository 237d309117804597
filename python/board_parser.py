"""
Board parsing utilities for gridsight.

Boards are written as rows of single characters:
- '-': Empty cell
- 'X': Blocking cell

Example:
    --X
    ---
    X--
"""

from __future__ import annotations

import logging
from typing import Sequence

from board_types import Cell, RowLengthMismatchError, UnknownSymbolError
from gridsight import Board

__all__ = ["SYMBOL_TO_CELL", "board_from_rows", "board_from_string"]

logger = logging.getLogger(__name__)

SYMBOL_TO_CELL: dict[str, Cell] = {
    "-": Cell.EMPTY,
    "X": Cell.BLOCKING,
}


def board_from_rows(rows: Sequence[Sequence[str]]) -> Board:
    """
    Build a Board from rows of symbols.

    Each row may be a string or any sequence of single-character strings.
    Row 0 is the top of the board and fixes its width.

    Args:
        rows: Board rows, top to bottom

    Returns:
        Board with cells flattened in row-major order

    Raises:
        RowLengthMismatchError: If a row's length differs from row 0's
        UnknownSymbolError: If a symbol is not in SYMBOL_TO_CELL
        ValueError: If there are no rows
    """
    if not rows:
        raise ValueError("Cannot build a board from zero rows")

    height = len(rows)
    width = len(rows[0])
    for row_idx, row in enumerate(rows):
        if len(row) != width:
            raise RowLengthMismatchError(row_idx, len(row), width)

    cells: list[Cell] = []
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            cell = SYMBOL_TO_CELL.get(symbol)
            if cell is None:
                raise UnknownSymbolError(x, y, symbol)
            cells.append(cell)

    board = Board(width, height, tuple(cells))
    logger.info(
        "board_from_rows: loaded %dx%d board with %d blocking cells",
        width,
        height,
        cells.count(Cell.BLOCKING),
    )
    return board


def board_from_string(definition: str) -> Board:
    """
    Build a Board from a multi-line string, one row per line.

    Leading and trailing whitespace on each line is ignored and blank lines
    are dropped, so boards can be written as indented triple-quoted strings.

    Example:
        \"\"\"
        --X
        ---
        X--
        \"\"\"
    """
    rows = [line.strip() for line in definition.strip().split("\n") if line.strip()]
    return board_from_rows(rows)
