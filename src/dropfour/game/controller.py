from __future__ import annotations

from typing import Callable, Optional

from loguru import logger

from dropfour.ai.base import Agent
from dropfour.game.actions import attempt_move
from dropfour.game.state import GameState, create_initial_state
from dropfour.types import Move, Player
from dropfour.ui.effects import ai_thinking
from dropfour.ui.prompts import parse_move
from dropfour.ui.render import player_label, render

_REJECT_MESSAGES = {
    "game_over": "The game is already over.",
    "out_of_range": "That column does not exist.",
    "column_full": "Column is full.",
}


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_1: Agent, agent_2: Agent, current: Player) -> str:
    """
    Prepend a persistent header showing who plays X and O.
    """
    header = (
        f"X: {_agent_name(agent_1, 'Player 1')} | "
        f"O: {_agent_name(agent_2, 'Player 2')} | "
        f"Turn: {player_label(current)}"
    )
    if status:
        return f"{header}\n{status}"
    return header


def _final_status(state: GameState) -> str:
    if state.status == "won" and state.winner is not None:
        return f"{player_label(state.winner)} wins!"
    return "Draw game."


def run_game(
    agent_1: Agent,
    agent_2: Agent,
    show_thinking: bool = True,
    read_input: Callable[[str], str] = input,
) -> Optional[GameState]:
    """
    Play one game in the terminal. Returns the final state, or None if a
    human quit.
    """
    state = create_initial_state()
    status = f"{player_label(1)} starts."

    while True:
        render(state.board, _status_with_agents(status, agent_1, agent_2, state.current_player))

        if state.is_over:
            render(
                state.board,
                _status_with_agents(_final_status(state), agent_1, agent_2, state.current_player),
                highlight=state.winning_cells,
            )
            logger.info("Game finished: {} after {} moves", state.status, state.move_count)
            return state

        current_agent = agent_1 if state.current_player == 1 else agent_2
        mover = state.current_player

        if _agent_name(current_agent, "Human") == "Human":
            raw = read_input(f"{player_label(mover)} move: ")
            try:
                move = parse_move(raw, state.board.cols)
            except ValueError as e:
                status = str(e)
                continue
            if move is None:
                render(state.board, _status_with_agents("Game quit.", agent_1, agent_2, mover))
                return None
            chose = f"{player_label(mover)} chose {int(move) + 1}"
        else:
            if show_thinking:
                ai_thinking(_agent_name(current_agent, "AI"))
            move = current_agent.select_column(state.board, mover)

            info = getattr(current_agent, "last_info", None) or {}
            chose = f"{current_agent.name} chose {int(move) + 1}"
            if info.get("nodes"):
                chose += f" | d={info.get('depth')} | nodes={info.get('nodes')} | {info.get('time_ms')}ms"

        outcome = attempt_move(state, Move(move))
        if not outcome.accepted:
            status = _REJECT_MESSAGES.get(outcome.reason or "", "Move rejected.")
            continue

        state = outcome.state
        status = f"{chose} | Next: {player_label(state.current_player)}"
