"""Tests for the terminal turn driver."""

from bitxo import console
from bitxo.game import GameState


def _scripted(answers):
    replies = iter(answers)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return read, prompts


def _computer_moves(out):
    return [line for line in out if line.startswith("Computer move is:")]


def test_computer_opens_and_game_finishes():
    # Human plays o and cycles through 1..9, so it ends up on 2 and then 3.
    out = []
    read, prompts = _scripted(["1"] + [str(n) for n in range(1, 10)] * 9)

    result = console.run(read, out.append)

    assert result is GameState.COMPUTER_WON
    assert prompts[0] == "Your choice: "
    assert out[:3] == ["TicTacToe Game", "1 - play as o", "2 - play as x"]
    assert _computer_moves(out) == [
        "Computer move is: 1\n",
        "Computer move is: 4\n",
        "Computer move is: 7\n",
    ]
    assert out[-1] == "Computer won the game!"


def test_invalid_input_is_reprompted():
    out = []
    read, prompts = _scripted(["3", "2", "abc", "0", "10"] + [str(n) for n in range(1, 10)] * 9)

    console.run(read, out.append)

    assert out.count("Please choose 1 or 2") == 1
    assert out.count("This move is wrong, choose again") >= 3
    assert prompts[:2] == ["Your choice: ", "Your choice: "]


def test_occupied_square_is_rejected():
    out = []
    # Human plays x and opens on 5; the computer answers on 1, which the
    # human then tries to take.
    read, _ = _scripted(["2", "5", "1"] + [str(n) for n in range(1, 10)] * 9)

    console.run(read, out.append)

    assert _computer_moves(out)[0] == "Computer move is: 1\n"
    assert "This move is wrong, choose again" in out


def test_end_of_input_stops_quietly():
    out = []
    read, _ = _scripted(["2", "5"])

    assert console.run(read, out.append) is None
    assert "Computer move is: 1\n" in out
    assert not any(line in console.RESULT_MESSAGES.values() for line in out)
