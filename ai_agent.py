import math
import random
import time

from board import EMPTY, Move, count_empty, grid_center, grid_corners, opponent
from evaluation import evaluate, is_large_board
from move_generator import enumerate_candidate_moves, enumerate_empty_moves, order_by_center
from win_rule import WIN, WinRule, is_winning_move

EASY = 'Easy'
STANDARD = 'Standard'
DIFFICULTIES = (EASY, STANDARD)

STANDARD_TIME_BUDGET = 0.08  # seconds per Standard decision

WIN_SCORE = 1000


class AIAgent:
    """Picks a move for one side of an N×N line game.

    Easy is a one-ply rule cascade (win, block, centre, corner, anything).
    Standard runs a deadline-bounded minimax with alpha-beta pruning; large
    boards only search cells near existing stones.
    """

    def __init__(self, time_budget=STANDARD_TIME_BUDGET, rng=None, seed=None):
        self.time_budget = time_budget
        self.rng = rng if rng is not None else random.Random(seed)
        self.player = 'O'  # Default player
        self.opponent = 'X'
        self._deadline = None

    def set_player(self, player):
        """Set the player marker (X or O)."""
        self.player = player
        self.opponent = opponent(player)

    def decide(self, grid, side_to_play, difficulty, win_length=3):
        """Return a Move for side_to_play, or Move(-1, -1, side_to_play) when the board is full.

        `grid` is used as scratch space and restored before returning; pass a snapshot.
        """
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty {difficulty!r}")
        if not any(cell is EMPTY for row in grid for cell in row):
            return Move(-1, -1, side_to_play)

        self.set_player(side_to_play)
        if difficulty == EASY:
            return self.decide_easy(grid, win_length)

        self._deadline = None if self.time_budget is None else time.time() + self.time_budget
        return self.decide_standard(grid, win_length)

    def time_up(self):
        return self._deadline is not None and time.time() >= self._deadline

    def find_winning_move(self, grid, side, win_length):
        """Find an empty cell that completes a line for `side`, if any."""
        for row, col in enumerate_empty_moves(grid):
            grid[row][col] = side
            win = is_winning_move(grid, row, col, side, win_length)
            grid[row][col] = EMPTY
            if win:
                return row, col
        return None

    # Easy: fast heuristic, exploitable by design

    def decide_easy(self, grid, win_length):
        me = self.player

        win = self.find_winning_move(grid, me, win_length)
        if win:
            return Move(win[0], win[1], me)

        block = self.find_winning_move(grid, self.opponent, win_length)
        if block:
            return Move(block[0], block[1], me)

        center_row, center_col = grid_center(grid)
        if grid[center_row][center_col] is EMPTY:
            return Move(center_row, center_col, me)

        corners = [(r, c) for r, c in grid_corners(grid) if grid[r][c] is EMPTY]
        if corners:
            row, col = self.rng.choice(corners)
            return Move(row, col, me)

        row, col = self.rng.choice(enumerate_empty_moves(grid))
        return Move(row, col, me)

    # Standard: minimax + alpha-beta

    def search_plan(self, grid, win_length):
        """Return (root_moves, max_depth, use_candidates) for the board regime."""
        size = len(grid)
        cells = size * size
        empty = count_empty(grid)
        if cells <= 9 and win_length == 3:
            return enumerate_empty_moves(grid), min(9, empty), False
        if is_large_board(size, win_length):
            roots = enumerate_candidate_moves(grid, radius=2, max_count=48, rng=self.rng)
            # Fewer roots buy a deeper search
            if len(roots) <= 12:
                depth = 4
            elif len(roots) <= 24:
                depth = 3
            else:
                depth = 2
            return roots, depth, True
        roots = enumerate_candidate_moves(grid, radius=1, max_count=64, rng=self.rng)
        return roots, min(5, empty), False

    def decide_standard(self, grid, win_length):
        me = self.player
        size = len(grid)

        # Quick check for winning moves first
        win = self.find_winning_move(grid, me, win_length)
        if win:
            return Move(win[0], win[1], me)

        # Quick check for blocking moves
        block = self.find_winning_move(grid, self.opponent, win_length)
        if block:
            return Move(block[0], block[1], me)

        root_moves, max_depth, use_candidates = self.search_plan(grid, win_length)
        if not root_moves:
            center_row, center_col = grid_center(grid)
            return Move(center_row, center_col, me)
        order_by_center(root_moves, size)

        win_rule = WinRule(win_length)
        best_val = -math.inf
        move = None
        for row, col in root_moves:
            if self.time_up():
                break
            grid[row][col] = me
            move_val = self.minimax(grid, win_rule, Move(row, col, me), False, 1, max_depth,
                                    -math.inf, math.inf, use_candidates)
            grid[row][col] = EMPTY

            if move_val > best_val:
                best_val = move_val
                move = (row, col)

        if move is None:
            # Deadline hit before any root finished
            move = root_moves[0]
        return Move(move[0], move[1], me)

    def minimax(self, grid, win_rule, last_move, is_maximizing, depth, max_depth, alpha, beta, use_candidates):
        """Score the position after `last_move` from self.player's point of view."""
        if self.time_up():
            return evaluate(grid, self.player, win_rule.win_length)

        ended, result = win_rule.check_win_condition(grid, last_move)
        if ended:
            if result.kind == WIN:
                if result.winner == self.player:
                    return WIN_SCORE - depth  # Win (prefer quicker wins)
                return depth - WIN_SCORE  # Loss (prefer longer losses)
            return 0

        # Depth limit reached - use heuristic evaluation instead
        if depth >= max_depth:
            return evaluate(grid, self.player, win_rule.win_length)

        if use_candidates:
            moves = enumerate_candidate_moves(grid, radius=2, max_count=48, rng=self.rng)
        else:
            moves = enumerate_empty_moves(grid)
        if not moves:
            return evaluate(grid, self.player, win_rule.win_length)
        order_by_center(moves, len(grid))

        side = self.player if is_maximizing else self.opponent
        best = -math.inf if is_maximizing else math.inf
        for row, col in moves:
            if self.time_up():
                break
            grid[row][col] = side
            score = self.minimax(grid, win_rule, Move(row, col, side), not is_maximizing, depth + 1,
                                 max_depth, alpha, beta, use_candidates)
            grid[row][col] = EMPTY

            # Alpha-Beta pruning
            if is_maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)
            if beta <= alpha:
                break

        if math.isinf(best):
            # Deadline cut the loop before any child was scored
            return evaluate(grid, self.player, win_rule.win_length)
        return best
