from board import X, Board, Move, opponent
from config import PVP, GameConfig
from win_rule import DRAW, WIN, WinRule


class Game:
    def __init__(self, edge_size=None, win_length=None, config=None):
        self.config = GameConfig.from_dict(config.to_dict()) if config else GameConfig()
        if edge_size is not None:
            self.config.edge_size = edge_size
        if win_length is not None:
            self.config.win_length = win_length
        self.config.validate()
        self.win_rule = WinRule(self.config.win_length)
        self.history = []
        self.redo_stack = []
        self.reset_game()

    @property
    def edge_size(self):
        return self.config.edge_size

    @property
    def board(self):
        return self.state.grid

    def reset_game(self):
        # Reset the game state
        self.state = Board(self.config.edge_size)
        self.current_player = X
        self.winner = None
        self.result = None
        self.last_move = None
        self.history = []
        self.redo_stack = []

    def _capture(self):
        return {
            'board': self.state.snapshot(),
            'player': self.current_player,
            'winner': self.winner,
            'result': self.result,
            'last_move': self.last_move,
        }

    def _restore(self, saved):
        self.state = Board(self.config.edge_size, saved['board'])
        self.current_player = saved['player']
        self.winner = saved['winner']
        self.result = saved['result']
        self.last_move = saved['last_move']

    def make_move(self, row, col):
        if self.is_game_over() or not self.state.can_place(row, col):
            return False

        # Save state for undo
        self.history.append(self._capture())
        self.redo_stack = []  # Clear redo stack on new move

        move = Move(row, col, self.current_player)
        self.state.apply_move(move)
        self.last_move = move
        self.check_winner()

        # Switch players if game isn't over
        if not self.winner:
            self.current_player = opponent(self.current_player)
        return True

    def undo(self):
        if len(self.history) > 0:
            # Save current state for redo
            self.redo_stack.append(self._capture())
            self._restore(self.history.pop())
            return True
        return False

    def redo(self):
        if len(self.redo_stack) > 0:
            # Save current state for undo
            self.history.append(self._capture())
            self._restore(self.redo_stack.pop())
            return True
        return False

    def check_winner(self):
        """Judge the position after the last move; sets winner to 'X', 'O' or 'Draw'."""
        ended, result = self.win_rule.check_win_condition(self.state.grid, self.last_move)
        if not ended:
            return None
        self.result = result
        self.winner = result.winner if result.kind == WIN else DRAW
        return result

    def get_available_moves(self):
        return self.state.get_available_moves()

    def is_game_over(self):
        return self.winner is not None

    def is_human_turn(self):
        if self.config.mode == PVP:
            return True
        human_is_x = self.config.first_is_human
        return (self.current_player == X) == human_is_x

    def ai_move(self, agent, difficulty=None):
        """Ask `agent` for a move on a snapshot and play it; returns the Move played or None."""
        if self.is_game_over():
            return None
        difficulty = difficulty or self.config.difficulty
        move = agent.decide(self.state.snapshot(), self.current_player, difficulty, self.config.win_length)

        if move.is_sentinel() or not self.state.can_place(move.row, move.col):
            # Fall back to the first free cell
            available = self.get_available_moves()
            if not available:
                return None
            move = Move(available[0][0], available[0][1], self.current_player)

        self.make_move(move.row, move.col)
        return move

    def __str__(self):
        return str(self.state)
