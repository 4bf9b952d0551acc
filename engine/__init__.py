"""
TicTacToe engine.
Handles game state, rules, and the session score.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Mark, Phase, ScoreTally, Snapshot
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Evaluation
from .game_engine import GameEngine
