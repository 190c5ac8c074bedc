from __future__ import annotations
from typing import Callable, Optional

from connect4.ai.base import Agent
from connect4.game.actions import play_move
from connect4.game.results import highlight_for, outcome_message
from connect4.game.state import GameState
from connect4.ui.render import render
from connect4.ui.prompts import parse_move
from connect4.ui.effects import ai_thinking
from connect4.types import Outcome


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_h: Agent, agent_c: Agent, state: GameState) -> str:
    """
    Prepend a persistent header showing who plays H and C.
    """
    h_name = _agent_name(agent_h, "Player H")
    c_name = _agent_name(agent_c, "Player C")

    header = f"H: {h_name} | C: {c_name}"
    if not state.is_over:
        header += f" | Turn: {state.current}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(
    agent_h: Agent,
    agent_c: Agent,
    show_thinking: bool = True,
    input_fn: Optional[Callable[[str], str]] = None,
) -> Outcome:
    """
    Play one game to the end. The human side (H) moves first.

    Returns the final outcome ("H", "C" or "D"), or None if the player quit.
    Human moves are read with input_fn (default: builtin input).
    """
    read = input_fn or input
    state = GameState()

    while True:
        if state.is_over:
            state.last_status = outcome_message(state.outcome)
            render(
                state.board,
                _status_with_agents(state.last_status, agent_h, agent_c, state),
                highlight=highlight_for(state),
            )
            return state.outcome

        render(state.board, _status_with_agents(state.last_status, agent_h, agent_c, state))

        current_agent = agent_h if state.current == "H" else agent_c

        try:
            if current_agent.name == "Human":
                raw = read(f"Player {state.current}, enter column: ")
                move = parse_move(raw, state.board.cols)
                if move is None:
                    render(state.board, _status_with_agents("Game quit.", agent_h, agent_c, state))
                    return None
            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")
                move = current_agent.choose_move(state)

            mover = current_agent.name
            if play_move(state, move) is None:
                state.last_status = "Move not allowed!"
                continue

            state.last_status = f"{mover} chose {int(move) + 1}"

        except ValueError as e:
            state.last_status = str(e)
