import json

from ai_agent import DIFFICULTIES, STANDARD, STANDARD_TIME_BUDGET
from board import MAX_EDGE_SIZE, MIN_EDGE_SIZE
from utils import get_config_path

PVE = 'PVE'
PVP = 'PVP'
GAME_MODES = (PVE, PVP)


class GameConfig:
    """Session setup: who plays, how hard the AI is, and the board geometry."""

    def __init__(self, mode=PVE, first_is_human=True, first_name="Player", second_name="AI",
                 difficulty=STANDARD, edge_size=3, win_length=3, time_budget=STANDARD_TIME_BUDGET):
        self.mode = mode
        self.first_is_human = first_is_human  # Only meaningful in PVE: X is the human
        self.first_name = first_name
        self.second_name = second_name
        self.difficulty = difficulty
        self.edge_size = edge_size
        self.win_length = win_length
        self.time_budget = time_budget

    def validate(self):
        if self.mode not in GAME_MODES:
            raise ValueError(f"mode must be one of {GAME_MODES}, got {self.mode!r}")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"difficulty must be one of {DIFFICULTIES}, got {self.difficulty!r}")
        if not isinstance(self.edge_size, int) or not MIN_EDGE_SIZE <= self.edge_size <= MAX_EDGE_SIZE:
            raise ValueError(f"edge_size must be in [{MIN_EDGE_SIZE}, {MAX_EDGE_SIZE}], got {self.edge_size!r}")
        if not isinstance(self.win_length, int) or self.win_length < 3:
            raise ValueError(f"win_length must be an integer >= 3, got {self.win_length!r}")
        if self.time_budget is not None:
            if not isinstance(self.time_budget, (int, float)) or self.time_budget <= 0:
                raise ValueError(f"time_budget must be a positive number, got {self.time_budget!r}")
        return self

    def to_dict(self):
        return {
            'mode': self.mode,
            'first_is_human': self.first_is_human,
            'first_name': self.first_name,
            'second_name': self.second_name,
            'difficulty': self.difficulty,
            'edge_size': self.edge_size,
            'win_length': self.win_length,
            'time_budget': self.time_budget,
        }

    @classmethod
    def from_dict(cls, data):
        known = cls().to_dict().keys()
        return cls(**{key: value for key, value in data.items() if key in known})

    def __eq__(self, other):
        return isinstance(other, GameConfig) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"GameConfig({self.to_dict()})"


def load_config(path=None):
    """Load a GameConfig from JSON, falling back to defaults if the file is missing or corrupt."""
    path = path or get_config_path()
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"No config found at {path}. Using defaults.")
        return GameConfig()
    except json.JSONDecodeError as e:
        print(f"Error loading config from {path}: {e}. Using defaults.")
        return GameConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config in {path} must be a JSON object, got {type(data).__name__}")
    return GameConfig.from_dict(data).validate()


def save_config(config, path=None):
    path = path or get_config_path()
    with open(path, 'w') as f:
        json.dump(config.validate().to_dict(), f, indent=2)
    print(f"Config saved to {path}")
    return path
