"""FastAPI-powered web UI for playing BitXO against the computer."""

from __future__ import annotations

import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Tuple

import threading

from fastapi import BackgroundTasks, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .ai import NegamaxAI
from .game import SIGNS, TicTacToeGame

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Container for an active game and its AI opponent."""

    game: TicTacToeGame
    ai: NegamaxAI
    move_log: List[Dict[str, int | str]] = field(default_factory=list)
    ai_pending: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="BitXO", description="Tic-tac-toe against a perfect opponent")


AI_THINK_DELAY: Tuple[float, float] = (0.3, 0.8)


class NewGameRequest(BaseModel):
    """Request payload for starting a new game."""

    sign: Literal["o", "x"] = Field(
        default="x",
        description="Sign played by the human; x moves first",
    )


class MoveRequest(BaseModel):
    """Request payload for submitting a move on an existing game."""

    square: int = Field(ge=0, le=8)


def _create_session(human_sign: str) -> Tuple[str, GameSession]:
    """Create a new game session and register it for later access."""

    game = TicTacToeGame.new(SIGNS.index(human_sign))
    session = GameSession(game=game, ai=NegamaxAI(player=game.ai.index))
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("created game %s (human plays %s)", session_id, human_sign)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _ai_to_move(session: GameSession) -> bool:
    game = session.game
    return not game.is_over and game.player_to_move is game.ai


def _run_ai_turn(game_id: str) -> None:
    session = SESSIONS.get(game_id)
    if not session:
        return

    time.sleep(max(0.0, random.uniform(*AI_THINK_DELAY)))

    with session.lock:
        try:
            if not _ai_to_move(session):
                return
            square = session.ai.choose(session.game)
            session.game.play_move(square)
            session.move_log.append({"player": "ai", "square": square})
        finally:
            session.ai_pending = False


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        game = session.game
        state: Dict[str, object] = {
            "id": game_id,
            "cells": list(game.cells),
            "humanSign": game.human.sign,
            "aiSign": game.ai.sign,
            "currentPlayer": game.player_to_move.player_type.value,
            "state": game.state.value,
            "availableMoves": game.available_moves(),
            "moveLog": list(session.move_log),
            "aiPending": session.ai_pending,
        }
        if session.move_log:
            state["lastMove"] = session.move_log[-1]
        return state


def _schedule_ai(
    game_id: str, session: GameSession, background_tasks: BackgroundTasks
) -> None:
    with session.lock:
        if not _ai_to_move(session) or session.ai_pending:
            return
        session.ai_pending = True
    background_tasks.add_task(_run_ai_turn, game_id)


def _apply_player_move(game_id: str, session: GameSession, square: int) -> None:
    with session.lock:
        game = session.game
        if game.is_over:
            raise HTTPException(status_code=400, detail="Game already finished")

        if session.ai_pending:
            raise HTTPException(status_code=400, detail="AI is completing its move")

        if game.player_to_move is not game.human:
            raise HTTPException(status_code=400, detail="It is not your turn")

        try:
            game.play_move(square)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        session.move_log.append({"player": "human", "square": square})


@app.post("/api/game")
def create_game(
    background_tasks: BackgroundTasks, request: NewGameRequest = NewGameRequest()
) -> Dict[str, object]:
    game_id, session = _create_session(request.sign)
    _schedule_ai(game_id, session, background_tasks)
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(
    game_id: str, request: MoveRequest, background_tasks: BackgroundTasks
) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_player_move(game_id, session, request.square)
    _schedule_ai(game_id, session, background_tasks)
    return _serialize_session(game_id, session)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>BitXO</title>
    <style>
      body {
        font-family: system-ui, sans-serif;
        background: #0f172a;
        color: #e2e8f0;
        display: flex;
        flex-direction: column;
        align-items: center;
        gap: 1rem;
        padding: 2rem;
      }
      .board {
        display: grid;
        grid-template-columns: repeat(3, 5rem);
        gap: 0.4rem;
      }
      .cell {
        height: 5rem;
        font-size: 2.5rem;
        border: none;
        border-radius: 0.5rem;
        background: #1e293b;
        color: #f8fafc;
        cursor: pointer;
      }
      .cell:disabled { cursor: default; }
      .cell.free { color: #475569; font-size: 1rem; }
      .controls button {
        padding: 0.5rem 1rem;
        border-radius: 0.4rem;
        border: none;
        cursor: pointer;
      }
    </style>
  </head>
  <body>
    <h1>BitXO</h1>
    <div class=\"controls\">
      <button data-sign=\"x\">Play as x</button>
      <button data-sign=\"o\">Play as o</button>
    </div>
    <p id=\"status\">Pick a sign to start.</p>
    <div class=\"board\" id=\"board\"></div>
    <script>
      const statusText = {
        playing: "Your move.",
        human_won: "Human won the game!",
        computer_won: "Computer won the game!",
        draw: "Draw!",
      };
      let game = null;

      function render() {
        const board = document.getElementById("board");
        board.innerHTML = "";
        game.cells.forEach((cell, square) => {
          const button = document.createElement("button");
          const free = game.availableMoves.includes(square);
          button.className = free ? "cell free" : "cell";
          button.textContent = cell;
          button.disabled =
            !free || game.aiPending || game.currentPlayer !== "human";
          button.addEventListener("click", () => play(square));
          board.appendChild(button);
        });
        const status = document.getElementById("status");
        if (game.state === "playing" && game.currentPlayer === "ai") {
          status.textContent = "Computer is thinking...";
        } else {
          status.textContent = statusText[game.state];
        }
      }

      async function refresh() {
        const response = await fetch(`/api/game/${game.id}`);
        game = await response.json();
        render();
        if (game.aiPending) setTimeout(refresh, 250);
      }

      async function start(sign) {
        const response = await fetch("/api/game", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ sign }),
        });
        game = await response.json();
        render();
        if (game.aiPending) setTimeout(refresh, 250);
      }

      async function play(square) {
        const response = await fetch(`/api/game/${game.id}/move`, {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ square }),
        });
        if (!response.ok) return;
        game = await response.json();
        render();
        if (game.aiPending) setTimeout(refresh, 250);
      }

      document.querySelectorAll("[data-sign]").forEach((button) => {
        button.addEventListener("click", () => start(button.dataset.sign));
      });
    </script>
  </body>
</html>
"""
