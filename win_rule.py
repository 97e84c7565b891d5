from collections import namedtuple

from board import EMPTY

WIN = 'Win'
DRAW = 'Draw'

# Horizontal, vertical, main diagonal, anti-diagonal
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

GameResult = namedtuple('GameResult', ['kind', 'winner', 'line'])


def _run_length(grid, row, col, d_row, d_col, side):
    """Count contiguous `side` stones from (row, col) stepping by (d_row, d_col), excluding the start."""
    size = len(grid)
    count = 0
    r, c = row + d_row, col + d_col
    while 0 <= r < size and 0 <= c < size and grid[r][c] == side:
        count += 1
        r += d_row
        c += d_col
    return count


def is_winning_move(grid, row, col, side, win_length):
    """True if a `side` stone at (row, col) sits on a line of at least win_length."""
    for d_row, d_col in DIRECTIONS:
        total = 1 + _run_length(grid, row, col, -d_row, -d_col, side) + _run_length(grid, row, col, d_row, d_col, side)
        if total >= win_length:
            return True
    return False


class WinRule:
    """Decides wins from the most recently placed stone, and draws on a full board."""

    def __init__(self, win_length=3):
        if win_length < 3:
            raise ValueError(f"win_length must be at least 3, got {win_length}")
        self.win_length = win_length

    def check_win_condition(self, grid, last_move):
        """Return (ended, result) for the position after `last_move`."""
        side = last_move.side
        if side is EMPTY:
            return False, None

        for d_row, d_col in DIRECTIONS:
            line = self.collect_line(grid, last_move.row, last_move.col, d_row, d_col, side)
            if len(line) >= self.win_length:
                segment = self.extract_segment(line, last_move.row, last_move.col)
                return True, GameResult(WIN, side, segment)

        # No winner - game continues while any cell is free
        for row in grid:
            for cell in row:
                if cell is EMPTY:
                    return False, None

        return True, GameResult(DRAW, EMPTY, [])

    def collect_line(self, grid, row, col, d_row, d_col, side):
        """Ordered run of `side` cells through (row, col), far-negative to far-positive."""
        size = len(grid)
        negative = []
        r, c = row - d_row, col - d_col
        while 0 <= r < size and 0 <= c < size and grid[r][c] == side:
            negative.append((r, c))
            r -= d_row
            c -= d_col
        negative.reverse()

        cells = negative + [(row, col)]
        r, c = row + d_row, col + d_col
        while 0 <= r < size and 0 <= c < size and grid[r][c] == side:
            cells.append((r, c))
            r += d_row
            c += d_col
        return cells

    def extract_segment(self, line, row, col):
        """Pick exactly win_length cells containing (row, col), keeping it near the segment end."""
        k = self.win_length
        if len(line) == k:
            return list(line)
        anchor = line.index((row, col))
        start = min(max(anchor - (k - 1), 0), len(line) - k)
        return line[start:start + k]
