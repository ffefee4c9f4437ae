"""BitXO package exposing the bit-board engine, game logic, and the web application."""

from .ai import NegamaxAI, ai_choose_move, search
from .game import GameState, TicTacToeGame, apply_move, evaluate_state
from .ui import app

__all__ = [
    "GameState",
    "NegamaxAI",
    "TicTacToeGame",
    "ai_choose_move",
    "apply_move",
    "app",
    "evaluate_state",
    "search",
]
