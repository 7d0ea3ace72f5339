# symgrid

A solver for a 10x10 grid puzzle in which you shade cells by these rules:

- cells marked **A** are shaded;
- cells marked **S** stay empty;
- shaded cells never touch along a side (diagonal contact is fine);
- all empty cells form one orthogonally connected region;
- a block holding an **S** looks the same after a 180° rotation;
- a block holding an **A** does not.

The board is divided into eight fixed blocks, and the letter layout is built in.

## Installation

```
pip install .
```

## Command line

```
symgrid
```

This lays out the built-in puzzle, runs the backtracking search and prints
the board, shaded cells as `◼` and empty cells as `□`. Progress messages are
printed in Ukrainian. If no solution turns up, it says so and prints the
board as the search left it. The command takes no options besides `--help`.

## Library use

```python
from symgrid.board import Board
from symgrid.solver import set_puzzle, solve_optimized_backtracking
from symgrid.cli import render_board

board = Board(10, 10)
set_puzzle(board)
if solve_optimized_backtracking(board):
    print(render_board(board))
```

`set_puzzle` prints two short setup messages while it places the letters.

### Modules

- `symgrid.cell` — `Cell`, one grid square: `filled`, `block_id`, `value`,
  `has_number`, and the `symmetry` / `asymmetry` marks (setting one clears
  the other). `reset()` returns it to its empty state.
- `symgrid.board` — `Board(width, height)`, which keeps each cell's shading,
  block id and letter. Writes outside the grid are ignored; reads outside it
  report an unshaded cell. Rule checks: `check_adjacent_rule`,
  `check_continuity_rule`, `check_crossing_rule`, `check_numbers_rule`,
  `check_symmetry_rules`, and `is_solved`, which requires all of them.
  Block helpers: `cells_in_block`, `count_filled_cells_in_block`,
  `is_block_symmetric`, `is_block_asymmetric`.
- `symgrid.rules` — `BLOCKS`, the fixed block shapes, and the checks the
  solver uses on them: `check_letter_rules`, `check_no_adjacent_filled`,
  `check_empty_cells_continuity`, `check_block_symmetry` (mirror across the
  vertical axis), `check_block_180_symmetry`, `get_block_type`,
  `check_block_rules`, `check_all_blocks_symmetry` and
  `custom_check_crossing_rule`.
- `symgrid.solver` — `set_puzzle`, `setup_letters`, `verify_letters`,
  `set_up_initial_state` (shades the A cells and four connecting cells),
  and two searches: `solve_backtracking(board, x, y)`, which tries every
  cell in row-major order against the board's own rules, and
  `solve_optimized_backtracking(board)`, which starts from the initial state
  and decides every non-letter cell with `solve_with_cells_improved`.
- `symgrid.cli` — `render_board`, `print_board` and `main`.

## Limitations

Only the built-in puzzle is solved: there is no way to load another layout
from a file or the command line, and the board is not saved anywhere.

## Tests

```
pip install ".[test]"
pytest
```