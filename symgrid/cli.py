"""Command-line entry point: set up the puzzle, solve it and show the grid."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .board import BOARD_SIZE, Board
from .solver import set_puzzle, setup_letters, solve_optimized_backtracking, verify_letters

FILLED_MARK = "◼ "
EMPTY_MARK = "□ "


def render_board(board: Board) -> str:
    """Return the grid as text, one line per row, each line newline-terminated."""
    return "".join(
        "".join(
            FILLED_MARK if board.get_cell(x, y) else EMPTY_MARK for x in range(board.width)
        )
        + "\n"
        for y in range(board.height)
    )


def print_board(board: Board) -> None:
    """Write the grid to standard output."""
    print(render_board(board), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle and print the result."""
    parser = argparse.ArgumentParser(
        description="Solve the 10x10 A/S symmetry block puzzle."
    )
    parser.parse_args(argv)

    board = Board(BOARD_SIZE, BOARD_SIZE)
    set_puzzle(board)

    if not verify_letters(board):
        print("Перевстановлення літер...")
        setup_letters(board)

    print("Розв'язуємо головоломку...")

    if solve_optimized_backtracking(board):
        print("Рішення знайдено!")
    else:
        print("Рішення не існує!")
        print("Стан дошки в кінці алгоритму:")
    print_board(board)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())