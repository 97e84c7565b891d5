import copy
import math
import time

import pytest

from ai_agent import EASY, STANDARD, WIN_SCORE, AIAgent
from board import O, X, Move, opponent
from evaluation import evaluate
from move_generator import chebyshev, enumerate_empty_moves
from win_rule import WIN, WinRule, is_winning_move

TIERS = [EASY, STANDARD]


@pytest.mark.parametrize("difficulty", TIERS)
def test_takes_immediate_win(agent, make_grid, difficulty):
    grid = make_grid([
        "XX.",
        "...",
        "...",
    ])
    assert agent.decide(grid, X, difficulty) == Move(0, 2, X)


@pytest.mark.parametrize("difficulty", TIERS)
def test_empty_five_by_five_plays_center(agent, empty_grid, difficulty):
    assert agent.decide(empty_grid(5), X, difficulty, win_length=3) == Move(2, 2, X)


@pytest.mark.parametrize("difficulty", TIERS)
def test_blocks_opponent_win(agent, make_grid, difficulty):
    grid = make_grid([
        "OO.",
        "X..",
        "..X",
    ])
    assert agent.decide(grid, X, difficulty) == Move(0, 2, X)


@pytest.mark.parametrize("difficulty", TIERS)
def test_win_preferred_over_block(agent, make_grid, difficulty):
    grid = make_grid([
        "OO.",
        "XX.",
        "...",
    ])
    move = agent.decide(grid, X, difficulty)
    assert move == Move(1, 2, X)


@pytest.mark.parametrize("difficulty", TIERS)
def test_gomoku_win_and_block(agent, empty_grid, difficulty):
    grid = empty_grid(15)
    for c in range(3, 7):
        grid[7][c] = O
    for r, c in [(7, 2), (0, 0), (14, 14), (0, 14)]:
        grid[r][c] = X
    assert agent.decide(grid, X, difficulty, win_length=5) == Move(7, 7, X)

    # Same position with O to move: either end completes five
    move = agent.decide(grid, O, difficulty, win_length=5)
    assert move.side == O
    grid[move.row][move.col] = O
    assert is_winning_move(grid, move.row, move.col, O, 5)


@pytest.mark.parametrize("difficulty", TIERS)
def test_full_board_returns_sentinel(agent, make_grid, difficulty):
    grid = make_grid([
        "XOX",
        "XOO",
        "OXX",
    ])
    move = agent.decide(grid, O, difficulty)
    assert move == Move(-1, -1, O)
    assert move.is_sentinel()


def test_unknown_difficulty(agent, empty_grid):
    with pytest.raises(ValueError):
        agent.decide(empty_grid(3), X, 'Impossible')


@pytest.mark.parametrize("difficulty", TIERS)
@pytest.mark.parametrize("size, win_length", [(3, 3), (7, 4), (15, 5)])
def test_caller_grid_restored(agent, empty_grid, difficulty, size, win_length):
    grid = empty_grid(size)
    center = size // 2
    grid[center][center] = X
    grid[center - 1][center] = O
    grid[0][0] = X
    before = copy.deepcopy(grid)
    move = agent.decide(grid, O, difficulty, win_length)
    assert grid == before
    assert grid[move.row][move.col] is None


def test_easy_takes_a_corner_when_center_is_taken(empty_grid):
    for seed in range(10):
        grid = empty_grid(3)
        grid[1][1] = O
        move = AIAgent(seed=seed).decide(grid, X, EASY)
        assert (move.row, move.col) in [(0, 0), (0, 2), (2, 0), (2, 2)]


def test_easy_win_found_before_corner(make_grid):
    grid = make_grid([
        "X.O",
        ".O.",
        "X.O",
    ])
    # Completing column 0 beats the corner rule
    assert AIAgent(seed=0).decide(grid, X, EASY) == Move(1, 0, X)


def test_easy_random_fallback_only_returns_empty_cells(make_grid):
    grid = make_grid([
        "X...O",
        ".....",
        "..X..",
        ".....",
        "O...X",
    ])
    seen = set()
    for seed in range(20):
        move = AIAgent(seed=seed).decide(grid, O, EASY, win_length=4)
        assert grid[move.row][move.col] is None
        assert (move.row, move.col) not in [(0, 0), (0, 4), (4, 0), (4, 4), (2, 2)]
        seen.add((move.row, move.col))
    assert len(seen) > 1


def test_seeded_agents_agree(make_grid):
    grid = make_grid([
        "X...O",
        ".....",
        "..X..",
        ".....",
        "O...X",
    ])
    first = AIAgent(seed=99).decide(copy.deepcopy(grid), O, EASY, win_length=4)
    second = AIAgent(seed=99).decide(copy.deepcopy(grid), O, EASY, win_length=4)
    assert first == second


def _unpruned_minimax(agent, grid, rule, last_move, is_maximizing, depth, max_depth):
    ended, result = rule.check_win_condition(grid, last_move)
    if ended:
        if result.kind == WIN:
            return WIN_SCORE - depth if result.winner == agent.player else depth - WIN_SCORE
        return 0
    if depth >= max_depth:
        return evaluate(grid, agent.player, rule.win_length)
    side = agent.player if is_maximizing else agent.opponent
    scores = []
    for row, col in enumerate_empty_moves(grid):
        grid[row][col] = side
        scores.append(_unpruned_minimax(agent, grid, rule, Move(row, col, side), not is_maximizing,
                                        depth + 1, max_depth))
        grid[row][col] = None
    return max(scores) if is_maximizing else min(scores)


@pytest.mark.parametrize("rows, side", [
    (["X..", ".O.", "..."], X),
    (["X..", ".O.", "..X"], O),
    (["...", ".X.", "..."], O),
])
def test_alpha_beta_matches_full_minimax(unlimited_agent, make_grid, rows, side):
    grid = make_grid(rows)
    move = unlimited_agent.decide(copy.deepcopy(grid), side, STANDARD)

    rule = WinRule(3)
    empties = enumerate_empty_moves(grid)
    max_depth = min(9, len(empties))
    values = {}
    for row, col in empties:
        grid[row][col] = side
        values[(row, col)] = _unpruned_minimax(unlimited_agent, grid, rule, Move(row, col, side),
                                               False, 1, max_depth)
        grid[row][col] = None

    assert values[(move.row, move.col)] == max(values.values())


def test_pruned_search_value_matches_full_minimax(unlimited_agent, make_grid):
    grid = make_grid(["X..", ".O.", "..."])
    unlimited_agent.set_player(X)
    rule = WinRule(3)
    grid[0][2] = X
    pruned = unlimited_agent.minimax(grid, rule, Move(0, 2, X), False, 1, 6, -math.inf, math.inf, False)
    full = _unpruned_minimax(unlimited_agent, grid, rule, Move(0, 2, X), False, 1, 6)
    assert pruned == full


def test_standard_defends_opposite_corners(unlimited_agent, make_grid):
    # Any corner reply loses to an X fork; only an edge holds the draw
    grid = make_grid([
        "X..",
        ".O.",
        "..X",
    ])
    move = unlimited_agent.decide(grid, O, STANDARD)
    assert (move.row, move.col) in [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_deadline_respected_on_largest_board(empty_grid):
    grid = empty_grid(15)
    for r, c in [(7, 7), (8, 8), (5, 9), (9, 5), (4, 4)]:
        grid[r][c] = X
    for r, c in [(6, 8), (6, 6), (7, 9), (10, 10), (3, 11)]:
        grid[r][c] = O
    agent = AIAgent(time_budget=0.08, seed=5)
    start = time.time()
    move = agent.decide(grid, X, STANDARD, win_length=5)
    elapsed = time.time() - start
    assert grid[move.row][move.col] is None
    # Budget plus one node's evaluation overhead
    assert elapsed < 0.08 + 0.05


def test_expired_deadline_falls_back_to_center_ordered_root(empty_grid):
    grid = empty_grid(9)
    grid[4][4] = X
    agent = AIAgent(time_budget=1e-9, seed=0)
    move = agent.decide(grid, O, STANDARD, win_length=4)
    assert move.side == O
    assert chebyshev(move.row, move.col, 4, 4) == 1


def test_search_plan_regimes(agent, empty_grid):
    small = empty_grid(3)
    small[1][1] = X
    roots, depth, use_candidates = agent.search_plan(small, 3)
    assert len(roots) == 8 and depth == 8 and not use_candidates

    medium = empty_grid(7)
    medium[3][3] = X
    roots, depth, use_candidates = agent.search_plan(medium, 4)
    assert len(roots) == 8 and depth == 5 and not use_candidates

    large = empty_grid(15)
    large[7][7] = X
    roots, depth, use_candidates = agent.search_plan(large, 5)
    assert len(roots) == 24 and depth == 3 and use_candidates

    large[2][2] = O
    roots, depth, use_candidates = agent.search_plan(large, 5)
    assert len(roots) == 48 and depth == 2


def test_set_player():
    agent = AIAgent()
    agent.set_player(X)
    assert agent.opponent == opponent(X)
