from symgrid.board import BOARD_SIZE, Board
from symgrid.rules import BLOCKS
from symgrid.solver import (
    CONNECTOR_CELLS,
    LETTER_A_POSITIONS,
    LETTER_S_POSITIONS,
    set_puzzle,
    set_up_initial_state,
    setup_letters,
    solve_backtracking,
    solve_optimized_backtracking,
    solve_with_cells_improved,
    verify_letters,
)


def filled_cells(board):
    return {
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.get_cell(x, y)
    }


def new_board():
    return Board(BOARD_SIZE, BOARD_SIZE)


def test_set_puzzle_assigns_blocks():
    board = new_board()
    set_puzzle(board)
    for block_id, block in enumerate(BLOCKS):
        expected = set(block)
        if block_id == 6:
            expected -= set(BLOCKS[7])
        assert set(board.cells_in_block(block_id)) == expected


def test_set_puzzle_prints_progress(capsys):
    set_puzzle(new_board())
    out = capsys.readouterr().out
    assert "Встановлення літер..." in out
    assert out.strip().endswith(": 0")


def test_set_puzzle_marks_symmetry_rules():
    board = new_board()
    set_puzzle(board)
    assert filled_cells(board) == set()
    assert board.check_symmetry_rules() == board.check_symmetry_rules()
    assert board.is_block_symmetric(0)


def test_letters_with_default_value_do_not_verify():
    board = new_board()
    set_puzzle(board)
    assert not verify_letters(board)
    setup_letters(board)
    assert not verify_letters(board)


def test_letters_with_character_values_verify():
    board = new_board()
    for x, y in LETTER_A_POSITIONS:
        board.set_cell_number(x, y, "A", ord("A"))
    for x, y in LETTER_S_POSITIONS:
        board.set_cell_number(x, y, "S", ord("S"))
    assert verify_letters(board)


def test_initial_state_fills_letters_and_connectors():
    board = new_board()
    board.set_cell(5, 5, True)
    set_up_initial_state(board)
    assert filled_cells(board) == set(LETTER_A_POSITIONS) | set(CONNECTOR_CELLS)
    assert all(not board.get_cell(x, y) for x, y in LETTER_S_POSITIONS)


def test_initial_state_breaks_adjacency():
    board = new_board()
    set_up_initial_state(board)
    assert not board.check_adjacent_rule()


def test_solve_backtracking_empty_board():
    board = new_board()
    assert solve_backtracking(board, 0, 0)
    assert filled_cells(board) == set()


def test_solve_with_cells_empty_list():
    board = new_board()
    assert solve_with_cells_improved(board, [], 0)


def test_solve_with_cells_fills_to_break_symmetry():
    board = new_board()
    board.set_cell_number(1, 1, "A", ord("A"))
    assert solve_with_cells_improved(board, [(0, 0)], 0)
    assert filled_cells(board) == {(0, 0)}


def test_solve_with_cells_keeps_symmetric_block_empty():
    board = new_board()
    board.set_cell_number(1, 1, "S", ord("S"))
    assert solve_with_cells_improved(board, [(0, 0), (2, 2)], 0)
    assert filled_cells(board) == set()


def test_solve_with_cells_rejects_adjacent_start():
    board = new_board()
    board.set_cell(4, 4, True)
    board.set_cell(4, 5, True)
    assert not solve_with_cells_improved(board, [(0, 0)], 0)
    assert filled_cells(board) == {(4, 4), (4, 5)}


def test_solve_optimized_leaves_initial_state():
    board = new_board()
    set_puzzle(board)
    assert not solve_optimized_backtracking(board)
    reference = new_board()
    set_up_initial_state(reference)
    assert filled_cells(board) == filled_cells(reference)