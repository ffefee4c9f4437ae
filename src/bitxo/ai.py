"""Perfect-play negamax search with alpha-beta pruning over bit-set boards."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .bitboard import BOARD_SQUARES, has_won, is_draw, is_occupied, occupy
from .game import TicTacToeGame

logger = logging.getLogger(__name__)

WIN_SCORE = 10
# Wider than any reachable score (|score| <= WIN_SCORE).
SEARCH_BOUND = 1000

NO_MOVE = -1


def _evaluate(to_move: int, opponent: int, depth: int) -> int:
    if has_won(to_move):
        return WIN_SCORE - depth
    if has_won(opponent):
        return depth - WIN_SCORE
    return 0


def search(to_move: int, opponent: int, depth: int, alpha: int, beta: int) -> int:
    """Negamax search from the point of view of ``to_move``.

    At ``depth == 0`` the return value is the best square for ``to_move``
    (``NO_MOVE`` if the board is full). Deeper calls return a fail-hard
    score clamped to ``[alpha, beta]``; wins are discounted by depth so the
    quickest win and the slowest loss are preferred. Squares are tried in
    ascending order, so ties go to the lowest index.
    """
    if depth > 0:
        score = _evaluate(to_move, opponent, depth)
        if score:
            return score
        if is_draw(to_move | opponent):
            return 0

    best_move = NO_MOVE
    taken = to_move | opponent
    for index in range(BOARD_SQUARES):
        if is_occupied(taken, index):
            continue
        # ints are immutable: the speculative move never outlives this call.
        child = occupy(to_move, index)
        score = -search(opponent, child, depth + 1, -beta, -alpha)

        if score >= beta:
            if depth == 0:
                return best_move
            return beta

        if score > alpha:
            alpha = score
            if depth == 0:
                best_move = index

    if depth == 0:
        return best_move
    return alpha


def ai_choose_move(ai_mask: int, human_mask: int) -> int:
    """Best square for the side holding ``ai_mask``, or ``NO_MOVE``."""
    move = search(ai_mask, human_mask, 0, -SEARCH_BOUND, SEARCH_BOUND)
    logger.debug("search picked square %d", move)
    return move


@dataclass
class NegamaxAI:
    """Perfect player for one side of a :class:`TicTacToeGame`.

      - NegamaxAI(player=0)  # plays the "o" sign
      - choose(game) -> square index
    """

    player: int

    def choose(self, game: TicTacToeGame) -> int:
        if game.is_over:
            raise ValueError("Game already finished")
        if game.player_to_move.index != self.player:
            raise ValueError("It is not this AI player's turn")

        me = game.player_with_sign(self.player)
        other = game.player_with_sign(1 - self.player)
        move = ai_choose_move(me.board, other.board)
        if move == NO_MOVE:
            raise RuntimeError("No valid moves available")
        return move
