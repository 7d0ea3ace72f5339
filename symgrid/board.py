"""The puzzle grid and the rules a finished grid must satisfy."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from .cell import Cell

BOARD_SIZE = 10

_NEIGHBOUR_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _line_is_contiguous(line: Iterable[bool]) -> bool:
    """Return True when the filled squares of a line form no more than one run."""
    seen_filled = False
    seen_gap = False
    for filled in line:
        if filled:
            if seen_gap:
                return False
            seen_filled = True
        elif seen_filled:
            seen_gap = True
    return True


class Board:
    """A rectangular grid of cells grouped into blocks.

    Coordinates are (x, y) with x the column and y the row. Writes outside the
    grid are ignored and reads outside it report an empty, unnumbered cell.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _positions(self) -> Iterator[tuple[int, int, Cell]]:
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                yield x, y, cell

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx, dy in _NEIGHBOUR_STEPS:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny):
                yield nx, ny

    def initialize(self) -> None:
        """Clear every cell: unfilled, in no block, with no letter."""
        for _, _, cell in self._positions():
            cell.reset()

    def set_cell(self, x: int, y: int, filled: bool) -> None:
        """Set whether the cell at (x, y) is filled."""
        if self._in_bounds(x, y):
            self._cells[y][x].filled = filled

    def get_cell(self, x: int, y: int) -> bool:
        """Return whether the cell at (x, y) is filled; False outside the grid."""
        if self._in_bounds(x, y):
            return self._cells[y][x].filled
        return False

    def set_block_id(self, x: int, y: int, block_id: int) -> None:
        """Assign the cell at (x, y) to a block."""
        if self._in_bounds(x, y):
            self._cells[y][x].block_id = block_id

    def set_cell_number(self, x: int, y: int, kind: str, value: int = 0) -> None:
        """Give the cell at (x, y) a value and mark its block 'S' or 'A'."""
        if not self._in_bounds(x, y):
            return
        cell = self._cells[y][x]
        cell.has_number = True
        cell.value = value
        if kind == "S":
            cell.symmetry = True
        elif kind == "A":
            cell.asymmetry = True

    def get_cell_number(self, x: int, y: int) -> str:
        """Return the cell's value as a character, or NUL when it has none."""
        if self._in_bounds(x, y) and self._cells[y][x].has_number:
            return chr(self._cells[y][x].value % 256)
        return "\0"

    def cells_in_block(self, block_id: int) -> list[tuple[int, int]]:
        """Return the (x, y) positions of a block's cells in row-major order."""
        return [(x, y) for x, y, cell in self._positions() if cell.block_id == block_id]

    def count_filled_cells_in_block(self, block_id: int) -> int:
        """Return how many cells of the block are filled."""
        return sum(
            1 for _, _, cell in self._positions() if cell.block_id == block_id and cell.filled
        )

    def is_block_symmetric(self, block_id: int) -> bool:
        """Return True when the block looks the same after a 180° turn.

        Both the block's shape and its filled cells must match their rotated
        counterparts. A block with no cells is not symmetric.
        """
        positions = self.cells_in_block(block_id)
        if not positions:
            return False
        xs = [x for x, _ in positions]
        ys = [y for _, y in positions]
        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        for x, y in positions:
            sym_x = max_x - (x - min_x)
            sym_y = max_y - (y - min_y)
            if not self._in_bounds(sym_x, sym_y):
                return False
            mirror = self._cells[sym_y][sym_x]
            if mirror.block_id != block_id or mirror.filled != self._cells[y][x].filled:
                return False
        return True

    def is_block_asymmetric(self, block_id: int) -> bool:
        """Return True when the block is not symmetric under a 180° turn."""
        return not self.is_block_symmetric(block_id)

    def check_continuity_rule(self) -> bool:
        """Return True when the unfilled cells exist and form one connected region."""
        empty = {(x, y) for x, y, cell in self._positions() if not cell.filled}
        if not empty:
            return False
        start = min(empty, key=lambda pos: (pos[1], pos[0]))
        visited = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for nx, ny in self._neighbours(x, y):
                if (nx, ny) in empty and (nx, ny) not in visited:
                    visited.add((nx, ny))
                    queue.append((nx, ny))
        return visited == empty

    def check_adjacent_rule(self) -> bool:
        """Return True when no two filled cells share a side."""
        for x, y, cell in self._positions():
            if cell.filled and any(
                self._cells[ny][nx].filled for nx, ny in self._neighbours(x, y)
            ):
                return False
        return True

    def check_numbers_rule(self) -> bool:
        """Return True when each numbered block has as many filled cells as its number.

        Only the first numbered cell of each block, in row-major order, counts.
        """
        checked: set[int] = set()
        for _, _, cell in self._positions():
            block_id = cell.block_id
            if block_id != -1 and cell.has_number and block_id not in checked:
                if cell.value != self.count_filled_cells_in_block(block_id):
                    return False
                checked.add(block_id)
        return True

    def check_crossing_rule(self) -> bool:
        """Return True when every row and column holds at most one run of filled cells."""
        rows = ([cell.filled for cell in row] for row in self._cells)
        columns = (
            [self._cells[y][x].filled for y in range(self.height)] for x in range(self.width)
        )
        return all(_line_is_contiguous(line) for line in rows) and all(
            _line_is_contiguous(line) for line in columns
        )

    def check_symmetry_rules(self) -> bool:
        """Return True when 'S' blocks are symmetric and 'A' blocks are not.

        Each block is judged by the marks of its first cell in row-major order.
        """
        checked: set[int] = set()
        for _, _, cell in self._positions():
            block_id = cell.block_id
            if block_id == -1 or block_id in checked:
                continue
            if cell.symmetry and not self.is_block_symmetric(block_id):
                return False
            if cell.asymmetry and self.is_block_symmetric(block_id):
                return False
            checked.add(block_id)
        return True

    def is_solved(self) -> bool:
        """Return True when the grid satisfies every rule."""
        return (
            self.check_continuity_rule()
            and self.check_adjacent_rule()
            and self.check_numbers_rule()
            and self.check_crossing_rule()
            and self.check_symmetry_rules()
        )