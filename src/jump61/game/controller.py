from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from jump61.ai.base import Agent
from jump61.config import DEFAULT_SIZE
from jump61.core.board import Board
from jump61.core.readonly import ReadonlyBoard
from jump61.types import Coord, Player
from jump61.ui.prompts import parse_move
from jump61.ui.render import render, thinking

logger = logging.getLogger(__name__)


class Game:
    """
    Owns the authoritative board. Players see it through a read-only view
    and report the moves they pick; the game loop applies them.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self._board = Board(size)
        self._view = ReadonlyBoard(self._board)
        self.reported: List[Tuple[Player, Coord]] = []
        self.last_status = "Red starts."
        self._board.set_notifier(self._on_change)

    @property
    def board(self) -> ReadonlyBoard:
        return self._view

    def report_move(self, row: int, col: int) -> None:
        side = self._board.whose_move()
        self.reported.append((side, (row, col)))
        self.last_status = f"{side.capitalize()} moves {row} {col}."

    def make_move(self, side: Player, row: int, col: int) -> None:
        self._board.add_spot_at(side, row, col)

    def undo(self) -> None:
        self._board.undo()

    def winner(self) -> Optional[Player]:
        return self._board.winner()

    def _on_change(self, board: Board) -> None:
        logger.debug("board changed:\n%s", board)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, red: Agent, blue: Agent, current: Player) -> str:
    header = f"Red: {_agent_name(red, 'Red')} | Blue: {_agent_name(blue, 'Blue')} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def _search_status(agent: Agent, info: dict) -> str:
    return (
        f"{agent.name} chose {info.get('move')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(game: Game, agent_red: Agent, agent_blue: Agent, show_thinking: bool = True) -> Optional[Player]:
    """Play until someone wins (returns the winner) or a player quits (returns None)."""
    agents = {"red": agent_red, "blue": agent_blue}

    while True:
        current = game.board.whose_move()
        render(game.board, _status_with_agents(game.last_status, agent_red, agent_blue, current))

        w = game.winner()
        if w is not None:
            render(game.board, _status_with_agents(f"{w.capitalize()} wins!", agent_red, agent_blue, current))
            logger.info("%s wins after %d reported AI moves", w, len(game.reported))
            return w

        agent = agents[current]

        try:
            if show_thinking and agent.name != "Human":
                thinking(agent.name)

            move = parse_move(agent.get_move(), game.board.size)
            if move is None:
                render(game.board, _status_with_agents("Game quit.", agent_red, agent_blue, current))
                return None

            game.make_move(current, *move)

            info = getattr(agent, "last_info", None)
            if info:
                game.last_status = _search_status(agent, info)
            else:
                game.last_status = f"{current.capitalize()} chose {move[0]} {move[1]}"

        except ValueError as e:
            game.last_status = str(e)
