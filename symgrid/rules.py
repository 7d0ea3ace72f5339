"""Rule checks for the A/S block puzzle on the fixed 10x10 layout."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

from .board import Board

Position = tuple[int, int]

BLOCKS: tuple[tuple[Position, ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1), (0, 2), (1, 2), (2, 2)),
    ((6, 0), (7, 0), (8, 0), (9, 0), (6, 1), (7, 1), (8, 1), (9, 1), (7, 2), (8, 2), (9, 2)),
    ((3, 1), (4, 1), (5, 1), (3, 2), (4, 2), (5, 2), (3, 3), (4, 3), (5, 3)),
    ((7, 3), (8, 3), (9, 3), (7, 4), (8, 4), (9, 4), (7, 5), (8, 5), (9, 5)),
    ((0, 5), (1, 5), (2, 5), (0, 6), (1, 6), (2, 6), (0, 7), (1, 7), (2, 7), (0, 8)),
    ((7, 7), (8, 7), (9, 7), (7, 8), (8, 8), (9, 8), (7, 9), (8, 9), (9, 9)),
    ((4, 6), (5, 6), (6, 6), (4, 7), (5, 7), (6, 7), (4, 8), (5, 8), (6, 8)),
    ((6, 8), (6, 9), (5, 9), (4, 9), (3, 9), (3, 8)),
)
"""The puzzle's blocks as lists of (x, y) positions."""

NO_LETTER = " "

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _positions(board: Board) -> Iterator[Position]:
    for y in range(board.height):
        for x in range(board.width):
            yield x, y


def _neighbours(board: Board, x: int, y: int) -> Iterator[Position]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < board.width and 0 <= ny < board.height:
            yield nx, ny


def _bounds(cells: Sequence[Position]) -> tuple[int, int, int, int]:
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return min(xs), max(xs), min(ys), max(ys)


def check_letter_rules(board: Board, x: int, y: int) -> bool:
    """An 'A' cell must be filled, an 'S' cell must be empty; others are free."""
    letter = board.get_cell_number(x, y)
    filled = board.get_cell(x, y)
    if letter == "A":
        return filled
    if letter == "S":
        return not filled
    return True


def custom_check_crossing_rule(board: Board) -> bool:
    """Return True for an empty board, otherwise the negated crossing rule."""
    if not any(board.get_cell(x, y) for x, y in _positions(board)):
        return True
    return not board.check_crossing_rule()


def check_no_adjacent_filled(board: Board) -> bool:
    """Return True when no two filled cells share a side; diagonals are allowed."""
    for x, y in _positions(board):
        if board.get_cell(x, y) and any(
            board.get_cell(nx, ny) for nx, ny in _neighbours(board, x, y)
        ):
            return False
    return True


def check_empty_cells_continuity(board: Board) -> bool:
    """Return True when the unfilled cells form one region (or there are none)."""
    empty = [pos for pos in _positions(board) if not board.get_cell(*pos)]
    if not empty:
        return True
    start = empty[0]
    visited = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(board, x, y):
            if not board.get_cell(nx, ny) and (nx, ny) not in visited:
                visited.add((nx, ny))
                queue.append((nx, ny))
    return visited.issuperset(empty)


def check_block_symmetry(board: Board, block_cells: Sequence[Position]) -> bool:
    """Return True when the block mirrors onto itself across its vertical axis."""
    if not block_cells:
        return True
    members = {tuple(cell) for cell in block_cells}
    min_x, max_x, min_y, max_y = _bounds(block_cells)
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            mirror_x = max_x - (x - min_x)
            has_original = (x, y) in members
            has_mirror = (mirror_x, y) in members
            if has_original != has_mirror:
                return False
            if has_original and board.get_cell(x, y) != board.get_cell(mirror_x, y):
                return False
    return True


def check_block_180_symmetry(board: Board, block_cells: Sequence[Position]) -> bool:
    """Return True when the block looks the same after a 180° turn."""
    if not block_cells:
        return True
    members = {tuple(cell) for cell in block_cells}
    min_x, max_x, min_y, max_y = _bounds(block_cells)
    for x, y in block_cells:
        rot_x = max_x - (x - min_x)
        rot_y = max_y - (y - min_y)
        if (rot_x, rot_y) not in members:
            return False
        if board.get_cell(x, y) != board.get_cell(rot_x, rot_y):
            return False
    return True


def get_block_type(board: Board, block_cells: Sequence[Position]) -> str:
    """Return the first 'A' or 'S' letter found in the block, or a space."""
    for x, y in block_cells:
        letter = board.get_cell_number(x, y)
        if letter in ("A", "S"):
            return letter
    return NO_LETTER


def check_block_rules(board: Board, block_cells: Sequence[Position]) -> bool:
    """'S' blocks must be 180° symmetric, 'A' blocks must not be."""
    block_type = get_block_type(board, block_cells)
    symmetric = check_block_180_symmetry(board, block_cells)
    if block_type == "S":
        return symmetric
    if block_type == "A":
        return not symmetric
    return True


def check_all_blocks_symmetry(board: Board) -> bool:
    """Return True when every puzzle block satisfies its letter's symmetry rule."""
    return all(check_block_rules(board, block) for block in BLOCKS)