"""
view interface the game engine talks to
"""
from typing import Callable, Dict, List, Optional, Protocol

from .config import player_label


class DisplayError(RuntimeError):
    """base error for view call-order violations"""


class NoMessageError(DisplayError):
    """clear_message called while no message is shown"""


def result_text(winner=None):
    """
    end-of-round text: '<label> wins!' or 'Nobody wins!'
    """
    return f"{player_label(winner)} wins!" if winner else "Nobody wins!"


def score_text(score, player):
    # e.g. 'Player 1: 2'
    return f"{player_label(player)}: {score[player]}"


class Display(Protocol):
    """
    everything the engine needs from a view. implementations own all
    widgets/drawing and know nothing about game rules.
    """

    def bind_handler(self, click_handler: Callable[[int, int], None]) -> None:
        """call click_handler(row, col) for clicks on a board cell, ignore the rest"""
        ...

    def render_board(self, board_data: List[List[str]]) -> None: ...

    def render_mark(self, row: int, col: int, player: str) -> None:
        """draw player's mark in (row, col); occupancy is the caller's problem"""
        ...

    def clear_board(self) -> None: ...

    def render_scoreboard(self, score: Dict[str, int]) -> None: ...

    def update_score(self, score: Dict[str, int], player: str) -> None: ...

    def render_message(self, winner: Optional[str] = None) -> None:
        """show the result; caller clears any previous message first"""
        ...

    def clear_message(self) -> None:
        """remove the shown message, raises NoMessageError if there is none"""
        ...
