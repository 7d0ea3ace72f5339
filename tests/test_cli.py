from symgrid.board import BOARD_SIZE, Board
from symgrid.cli import main, print_board, render_board
from symgrid.solver import set_up_initial_state


def test_render_empty_board():
    text = render_board(Board(BOARD_SIZE, BOARD_SIZE))
    lines = text.splitlines()
    assert len(lines) == BOARD_SIZE
    assert all(line == "□ " * BOARD_SIZE for line in lines)
    assert text.endswith("\n")


def test_render_marks_filled_cell():
    board = Board(BOARD_SIZE, BOARD_SIZE)
    board.set_cell(2, 1, True)
    lines = render_board(board).splitlines()
    assert lines[1].split(" ")[2] == "◼"
    assert lines[0] == "□ " * BOARD_SIZE
    assert render_board(board).count("◼") == 1


def test_print_board_matches_render(capsys):
    board = Board(BOARD_SIZE, BOARD_SIZE)
    board.set_cell(9, 9, True)
    print_board(board)
    assert capsys.readouterr().out == render_board(board)


def test_main_reports_no_solution(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Перевстановлення літер..." in out
    assert "Розв'язуємо головоломку..." in out
    assert "Рішення не існує!" in out
    assert "Стан дошки в кінці алгоритму:" in out


def test_main_prints_final_board(capsys):
    main([])
    out = capsys.readouterr().out
    reference = Board(BOARD_SIZE, BOARD_SIZE)
    set_up_initial_state(reference)
    assert out.endswith(render_board(reference))