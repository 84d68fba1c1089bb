"""Helpers shared by the test modules."""

# every line that wins: 3 rows, 3 columns, 2 diagonals
WINNING_LINES = [
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)],
    [(2, 0), (1, 1), (0, 2)],
]

# x,o,x,o,x,o,x,o,x with no line for either side:
#   x o x
#   x o o
#   o x x
STALEMATE_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                   (1, 2), (2, 1), (2, 0), (2, 2)]

# last x move fills the board and completes the main diagonal:
#   x o x
#   o x o
#   o x x
FULL_BOARD_WIN_MOVES = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1),
                        (1, 2), (2, 1), (2, 0), (2, 2)]


def play(display, moves):
    """Click each (row, col) in order, return the last outcome."""
    outcome = None
    for row, col in moves:
        outcome = display.click(row, col)
    return outcome


def line_win_moves(line, last_index):
    """
    Moves where x fills `line`, finishing on line[last_index],
    while o plays the first two cells off the line.
    """
    last = line[last_index]
    first, second = [cell for cell in line if cell != last]
    o_cells = [(r, c) for r in range(3) for c in range(3)
               if (r, c) not in line][:2]
    return [first, o_cells[0], second, o_cells[1], last]
