from collections import namedtuple

X = 'X'  # X goes first
O = 'O'
EMPTY = None

MIN_EDGE_SIZE = 3
MAX_EDGE_SIZE = 15


def opponent(side):
    """Return the other playable side."""
    if side == X:
        return O
    if side == O:
        return X
    raise ValueError(f"No opponent for side {side!r}")


def grid_center(grid):
    size = len(grid)
    return size // 2, size // 2


def grid_corners(grid):
    last = len(grid) - 1
    return [(0, 0), (0, last), (last, 0), (last, last)]


def count_empty(grid):
    return sum(1 for row in grid for cell in row if cell is EMPTY)


class Move(namedtuple('Move', ['row', 'col', 'side'])):
    """A placement of `side` at (row, col)."""
    __slots__ = ()

    def is_sentinel(self):
        # Negative row means no legal move was available
        return self.row < 0


class Board:
    def __init__(self, edge_size=3, grid=None):
        if not MIN_EDGE_SIZE <= edge_size <= MAX_EDGE_SIZE:
            raise ValueError(f"edge_size must be in [{MIN_EDGE_SIZE}, {MAX_EDGE_SIZE}], got {edge_size}")
        self.edge_size = edge_size
        if grid is None:
            # Initialize an empty board
            self.grid = [[EMPTY for _ in range(edge_size)] for _ in range(edge_size)]
        else:
            if len(grid) != edge_size or any(len(row) != edge_size for row in grid):
                raise ValueError(f"grid must be {edge_size}x{edge_size}")
            self.grid = [row[:] for row in grid]

    def get(self, row, col):
        return self.grid[row][col]

    def can_place(self, row, col):
        if row < 0 or row >= self.edge_size or col < 0 or col >= self.edge_size:
            return False
        return self.grid[row][col] is EMPTY

    def apply_move(self, move):
        """Place a stone; returns False and leaves the board untouched if illegal."""
        if not self.can_place(move.row, move.col):
            return False
        self.grid[move.row][move.col] = move.side
        return True

    def snapshot(self):
        """Return an independent copy of the grid for the decision engine."""
        return [row[:] for row in self.grid]

    def get_available_moves(self):
        # Return list of available (row, col) moves
        moves = []
        for row in range(self.edge_size):
            for col in range(self.edge_size):
                if self.grid[row][col] is EMPTY:
                    moves.append((row, col))
        return moves

    def count_empty(self):
        return count_empty(self.grid)

    def has_empty_cell(self):
        return any(cell is EMPTY for row in self.grid for cell in row)

    def is_full(self):
        return not self.has_empty_cell()

    def center(self):
        return grid_center(self.grid)

    def corners(self):
        return grid_corners(self.grid)

    def __str__(self):
        return "\n".join(
            " ".join('.' if cell is EMPTY else cell for cell in row)
            for row in self.grid
        )
