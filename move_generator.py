import random

import numpy as np

from board import EMPTY, grid_center


def chebyshev(r1, c1, r2, c2):
    return max(abs(r1 - r2), abs(c1 - c2))


def occupancy_mask(grid):
    """Boolean array, True where a stone sits."""
    return np.array([[cell is not EMPTY for cell in row] for row in grid], dtype=bool)


def enumerate_empty_moves(grid):
    """Return every empty (row, col) in row-major order."""
    return [(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell is EMPTY]


def enumerate_candidate_moves(grid, radius=2, max_count=64, rng=None):
    """Empty cells within `radius` (Chebyshev) of an existing stone, shuffled and capped at max_count.

    Keeps large-board search tractable. An empty board yields only the centre;
    if no cell qualifies, a random sample of empty cells is returned instead.
    """
    rng = rng or random
    size = len(grid)
    occupied = occupancy_mask(grid)
    rows, cols = np.nonzero(occupied)

    if rows.size == 0:
        # Opening move: centre only
        return [grid_center(grid)]

    r0 = max(0, int(rows.min()) - radius)
    r1 = min(size - 1, int(rows.max()) + radius)
    c0 = max(0, int(cols.min()) - radius)
    c1 = min(size - 1, int(cols.max()) + radius)

    moves = []
    for r in range(r0, r1 + 1):
        for c in range(c0, c1 + 1):
            if occupied[r, c]:
                continue
            window = occupied[max(0, r - radius):r + radius + 1, max(0, c - radius):c + radius + 1]
            if window.any():
                moves.append((r, c))

    if not moves:
        fallback = enumerate_empty_moves(grid)
        rng.shuffle(fallback)
        return fallback[:max_count]

    rng.shuffle(moves)
    return moves[:max_count]


def order_by_center(moves, edge_size):
    """Sort moves in place by distance to the centre (stable), and return them."""
    center = edge_size // 2
    moves.sort(key=lambda move: chebyshev(move[0], move[1], center, center))
    return moves
