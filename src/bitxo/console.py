"""Text-mode turn driver: play BitXO against the computer in a terminal."""

from __future__ import annotations

from typing import Callable, Optional

from .ai import NegamaxAI
from .game import GameState, TicTacToeGame

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

RESULT_MESSAGES = {
    GameState.HUMAN_WON: "Human won the game!",
    GameState.COMPUTER_WON: "Computer won the game!",
    GameState.DRAW: "Draw!",
}


def _read_int(read: InputFn, prompt: str) -> Optional[int]:
    try:
        return int(read(prompt).strip())
    except ValueError:
        return None


def choose_sign(read: InputFn, write: OutputFn) -> int:
    """Ask which sign the human plays; returns the sign index."""
    write("TicTacToe Game")
    write("1 - play as o")
    write("2 - play as x")
    while True:
        choice = _read_int(read, "Your choice: ")
        write("")
        if choice in (1, 2):
            return choice - 1
        write("Please choose 1 or 2")


def prompt_move(game: TicTacToeGame, read: InputFn, write: OutputFn) -> int:
    """Read a 1-based square from the human until it names a free square."""
    allowed = set(game.available_moves())
    while True:
        choice = _read_int(read, "Choose your move: ")
        write("")
        if choice is not None and choice - 1 in allowed:
            return choice - 1
        write("This move is wrong, choose again")


def run(read: InputFn = input, write: OutputFn = print) -> Optional[GameState]:
    """Play one game; returns the result, or None if input ran out first."""
    try:
        game = TicTacToeGame.new(choose_sign(read, write))
        ai = NegamaxAI(player=game.ai.index)

        while not game.is_over:
            write(game.render())
            if game.player_to_move.is_human:
                square = prompt_move(game, read, write)
            else:
                square = ai.choose(game)
                write(f"Computer move is: {square + 1}\n")
            game.play_move(square)
    except EOFError:
        write("")
        return None

    write(game.render())
    write(RESULT_MESSAGES[game.state])
    return game.state
