from board import EMPTY, grid_center, grid_corners, opponent
from move_generator import chebyshev
from win_rule import DIRECTIONS


def is_large_board(edge_size, win_length):
    # 10x10 and up, or any gomoku-style win length
    return edge_size * edge_size > 81 or win_length >= 5


def longest_chain_from(grid, row, col, side):
    """Longest run of `side` starting at (row, col) and walking forward in one of the four directions."""
    if grid[row][col] != side:
        return 0
    size = len(grid)
    best = 1
    for d_row, d_col in DIRECTIONS:
        count = 1
        r, c = row + d_row, col + d_col
        while 0 <= r < size and 0 <= c < size and grid[r][c] == side:
            count += 1
            r += d_row
            c += d_col
        best = max(best, count)
    return best


def evaluate_small(grid, me):
    """Centre and corner control, for 3x3-style boards."""
    opp = opponent(me)
    score = 0

    center_row, center_col = grid_center(grid)
    if grid[center_row][center_col] == me:
        score += 2
    elif grid[center_row][center_col] == opp:
        score -= 2

    for r, c in grid_corners(grid):
        if grid[r][c] == me:
            score += 1
        elif grid[r][c] == opp:
            score -= 1
    return score


def evaluate_large(grid, me):
    """Central control plus partial line building, summed over every stone."""
    size = len(grid)
    center_row, center_col = grid_center(grid)
    score = 0
    for r in range(size):
        for c in range(size):
            side = grid[r][c]
            if side is EMPTY:
                continue
            base = max(3 - chebyshev(r, c, center_row, center_col), -3)
            value = base + 2 * longest_chain_from(grid, r, c, side)
            score += value if side == me else -value
    return score


def evaluate(grid, me, win_length):
    if is_large_board(len(grid), win_length):
        return evaluate_large(grid, me)
    return evaluate_small(grid, me)
