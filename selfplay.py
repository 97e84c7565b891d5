import argparse
import time

from ai_agent import DIFFICULTIES, EASY, STANDARD, STANDARD_TIME_BUDGET, AIAgent
from board import O, X
from config import PVP, GameConfig, load_config
from game import Game
from win_rule import DRAW


def play_game(first_difficulty, second_difficulty, edge_size=3, win_length=3, agent=None, timings=None):
    """Play one AI-vs-AI game; X uses first_difficulty. Returns the finished Game."""
    agent = agent or AIAgent()
    game = Game(config=GameConfig(mode=PVP, edge_size=edge_size, win_length=win_length))
    while not game.is_game_over():
        difficulty = first_difficulty if game.current_player == X else second_difficulty
        start = time.time()
        move = game.ai_move(agent, difficulty)
        if timings is not None:
            timings.append(time.time() - start)
        if move is None:
            break
    return game


def play_match(games=10, first=STANDARD, second=EASY, edge_size=3, win_length=3, agent=None, verbose=False):
    """Play `games` games alternating sides; tallies are from `first`'s point of view."""
    agent = agent or AIAgent()
    stats = {'wins': 0, 'losses': 0, 'draws': 0, 'avg_decision_time': 0.0}
    timings = []

    for episode in range(games):
        # Swap who plays X every other game
        first_is_x = episode % 2 == 0
        x_tier, o_tier = (first, second) if first_is_x else (second, first)
        game = play_game(x_tier, o_tier, edge_size, win_length, agent, timings)

        first_side = X if first_is_x else O
        if game.winner in (DRAW, None):
            stats['draws'] += 1
        elif game.winner == first_side:
            stats['wins'] += 1
        else:
            stats['losses'] += 1

        if verbose:
            print(f"Game {episode + 1}/{games}: X={x_tier}, O={o_tier}, winner={game.winner}")

    if timings:
        stats['avg_decision_time'] = sum(timings) / len(timings)
    return stats


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pit two AI difficulty tiers against each other.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=None, help="board edge size (3-15)")
    parser.add_argument("--win-length", type=int, default=None)
    parser.add_argument("--first", choices=DIFFICULTIES, default=STANDARD)
    parser.add_argument("--second", choices=DIFFICULTIES, default=EASY)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--budget", type=float, default=None, help="Standard search budget in seconds")
    parser.add_argument("--config", default=None, help="JSON game config to take board settings from")
    args = parser.parse_args(argv)
    if args.games < 1:
        parser.error("--games must be at least 1")

    config = load_config(args.config) if args.config else GameConfig()
    edge_size = args.size or config.edge_size
    win_length = args.win_length or config.win_length
    budget = args.budget or config.time_budget or STANDARD_TIME_BUDGET
    GameConfig(edge_size=edge_size, win_length=win_length, time_budget=budget).validate()

    start_time = time.time()
    agent = AIAgent(time_budget=budget, seed=args.seed)
    print(f"Playing {args.games} games on {edge_size}x{edge_size}, {win_length} in a row: "
          f"{args.first} vs {args.second}")
    stats = play_match(args.games, args.first, args.second, edge_size, win_length, agent, verbose=True)

    print(f"{args.first} results:")
    print(f"Win rate: {stats['wins'] / args.games:.2f}")
    print(f"Loss rate: {stats['losses'] / args.games:.2f}")
    print(f"Draw rate: {stats['draws'] / args.games:.2f}")
    print(f"Average decision time: {stats['avg_decision_time'] * 1000:.1f} ms")

    elapsed_time = time.time() - start_time
    print(f"Match complete in {elapsed_time:.2f} seconds!")
    return stats


if __name__ == "__main__":
    main()
