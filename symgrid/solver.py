"""Puzzle setup and backtracking search."""

from __future__ import annotations

from collections.abc import Sequence

from .board import Board
from .rules import (
    BLOCKS,
    NO_LETTER,
    check_all_blocks_symmetry,
    check_block_rules,
    check_empty_cells_continuity,
    check_no_adjacent_filled,
    get_block_type,
)

Position = tuple[int, int]

LETTER_A_POSITIONS: tuple[Position, ...] = (
    (3, 1), (4, 2), (9, 1), (7, 3), (8, 3), (1, 6), (5, 7), (0, 8),
)
LETTER_S_POSITIONS: tuple[Position, ...] = ((0, 5), (9, 4), (2, 6), (6, 8))
CONNECTOR_CELLS: tuple[Position, ...] = ((8, 2), (6, 4), (0, 7), (4, 6))
"""Extra cells filled in the initial state to link the 'A' cells."""


def _clear(board: Board) -> None:
    for y in range(board.height):
        for x in range(board.width):
            board.set_cell(x, y, False)


def set_puzzle(board: Board) -> None:
    """Reset the board, lay out the blocks and place the 'A' and 'S' letters."""
    board.initialize()
    for block_id, block in enumerate(BLOCKS):
        for x, y in block:
            board.set_block_id(x, y, block_id)

    print("Встановлення літер...")
    first, *rest = LETTER_A_POSITIONS
    board.set_cell_number(*first, "A")
    print(
        "Після встановлення A в (3,1), get_cell_number повертає: "
        f"{ord(board.get_cell_number(*first))}"
    )
    for x, y in rest:
        board.set_cell_number(x, y, "A")
    for x, y in LETTER_S_POSITIONS:
        board.set_cell_number(x, y, "S")


def set_up_initial_state(board: Board) -> None:
    """Fill the 'A' cells and connector cells; leave everything else empty."""
    _clear(board)
    for x, y in (*LETTER_A_POSITIONS, *CONNECTOR_CELLS):
        board.set_cell(x, y, True)
    for x, y in LETTER_S_POSITIONS:
        board.set_cell(x, y, False)


def setup_letters(board: Board) -> None:
    """Mark every 'A' and 'S' letter cell on the board."""
    for x, y in LETTER_A_POSITIONS:
        board.set_cell_number(x, y, "A")
    for x, y in LETTER_S_POSITIONS:
        board.set_cell_number(x, y, "S")


def verify_letters(board: Board) -> bool:
    """Return True when every letter cell reads back as its letter."""
    return all(board.get_cell_number(x, y) == "A" for x, y in LETTER_A_POSITIONS) and all(
        board.get_cell_number(x, y) == "S" for x, y in LETTER_S_POSITIONS
    )


def solve_backtracking(board: Board, x: int, y: int) -> bool:
    """Try every fill pattern from (x, y) onward in row-major order."""
    if y >= board.height:
        return board.is_solved()

    next_x = (x + 1) % board.width
    next_y = y + (x + 1) // board.width

    board.set_cell(x, y, False)
    if board.check_adjacent_rule() and board.check_continuity_rule():
        if solve_backtracking(board, next_x, next_y):
            return True

    board.set_cell(x, y, True)
    if board.check_adjacent_rule() and not board.check_crossing_rule():
        if solve_backtracking(board, next_x, next_y):
            return True

    board.set_cell(x, y, False)
    return False


def _block_of(position: Position) -> Sequence[Position] | None:
    return next((block for block in BLOCKS if position in block), None)


def solve_with_cells_improved(board: Board, cells: Sequence[Position], index: int) -> bool:
    """Decide the cells from ``index`` on, leaving each empty before trying to fill it."""
    if not check_no_adjacent_filled(board) or not check_empty_cells_continuity(board):
        return False

    if index > 0:
        block = _block_of(tuple(cells[index - 1]))
        if block is not None:
            if get_block_type(board, block) != NO_LETTER and not check_block_rules(board, block):
                return False

    if index >= len(cells):
        return check_all_blocks_symmetry(board)

    x, y = cells[index]

    board.set_cell(x, y, False)
    if solve_with_cells_improved(board, cells, index + 1):
        return True

    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if 0 <= nx < board.width and 0 <= ny < board.height and board.get_cell(nx, ny):
            board.set_cell(x, y, False)
            return False

    board.set_cell(x, y, True)
    if solve_with_cells_improved(board, cells, index + 1):
        return True

    board.set_cell(x, y, False)
    return False


def solve_optimized_backtracking(board: Board) -> bool:
    """Start from the initial state and search over every non-letter cell."""
    _clear(board)
    set_up_initial_state(board)
    lettered = set(LETTER_A_POSITIONS) | set(LETTER_S_POSITIONS)
    cells = [
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if (x, y) not in lettered
    ]
    return solve_with_cells_improved(board, cells, 0)