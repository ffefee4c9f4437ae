"""Players, game-state resolution and turn bookkeeping for BitXO."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging

from .bitboard import (
    BOARD_SQUARES,
    free_squares,
    has_won,
    is_draw,
    is_occupied,
    occupy,
)

logger = logging.getLogger(__name__)

# Sign index 0 is "o", 1 is "x"; "x" always opens.
SIGNS = ("o", "x")
FIRST_SIGN_INDEX = 1


class PlayerType(str, Enum):
    HUMAN = "human"
    AI = "ai"


class GameState(str, Enum):
    PLAYING = "playing"
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"


@dataclass
class Player:
    player_type: PlayerType
    index: int
    board: int = 0

    @property
    def sign(self) -> str:
        return SIGNS[self.index]

    @property
    def is_human(self) -> bool:
        return self.player_type is PlayerType.HUMAN


# ---------- Core interface ----------


def apply_move(mask: int, square: int) -> int:
    return occupy(mask, square)


def resolve(
    last_mover_mask: int, last_mover_is_human: bool, other_mask: int
) -> GameState:
    """Project both occupancy sets onto a :class:`GameState`."""
    if has_won(last_mover_mask):
        return GameState.HUMAN_WON if last_mover_is_human else GameState.COMPUTER_WON
    if is_draw(last_mover_mask | other_mask):
        return GameState.DRAW
    return GameState.PLAYING


evaluate_state = resolve


def empty_cells() -> List[str]:
    """Display board with every square showing its 1-based number."""
    return [str(i + 1) for i in range(BOARD_SQUARES)]


# ---------- Game ----------


@dataclass
class TicTacToeGame:
    human: Player
    ai: Player
    cells: List[str] = field(default_factory=empty_cells)
    state: GameState = GameState.PLAYING
    player_to_move: Optional[Player] = None

    def __post_init__(self) -> None:
        if self.player_to_move is None:
            self.player_to_move = self.player_with_sign(FIRST_SIGN_INDEX)

    @classmethod
    def new(cls, human_sign_index: int) -> "TicTacToeGame":
        if human_sign_index not in (0, 1):
            raise ValueError(f"Unknown sign index {human_sign_index}")
        return cls(
            human=Player(PlayerType.HUMAN, human_sign_index),
            ai=Player(PlayerType.AI, 1 - human_sign_index),
        )

    @property
    def is_over(self) -> bool:
        return self.state is not GameState.PLAYING

    def player_with_sign(self, index: int) -> Player:
        return self.human if self.human.index == index else self.ai

    def opponent_of(self, player: Player) -> Player:
        return self.ai if player is self.human else self.human

    def available_moves(self) -> List[int]:
        if self.is_over:
            return []
        return free_squares(self.human.board, self.ai.board)

    def play_move(self, square: int) -> None:
        """Claim ``square`` for the player to move and pass the turn."""
        if self.is_over:
            raise ValueError("Game already finished")
        if not 0 <= square < BOARD_SQUARES:
            raise ValueError(f"Square {square} is off the board")
        if is_occupied(self.human.board | self.ai.board, square):
            raise ValueError(f"Square {square} is already taken")

        mover = self.player_to_move
        other = self.opponent_of(mover)
        mover.board = apply_move(mover.board, square)
        self.cells[square] = mover.sign
        logger.debug("%s played square %d", mover.player_type.value, square)

        self.state = evaluate_state(mover.board, mover.is_human, other.board)
        self.player_to_move = other
        if self.is_over:
            logger.info("game finished: %s", self.state.value)

    def render(self) -> str:
        c = self.cells
        rows = [f" {c[i]} | {c[i + 1]} | {c[i + 2]} " for i in (0, 3, 6)]
        return "\n---|---|---\n".join(rows) + "\n"
