"""Shared fixtures for the game tests."""

import os

# no display server in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from xo_rounds.display import NoMessageError
from xo_rounds.game_logic import TicTacToe
from xo_rounds.scheduler import ManualScheduler


class RecordingDisplay:
    """Display stand-in that records every call."""

    def __init__(self):
        self.calls = []
        self.click_handler = None
        self.marks = {}
        self.scores = {}
        self.message = None

    def bind_handler(self, click_handler):
        self.click_handler = click_handler

    def click(self, row, col):
        return self.click_handler(row, col)

    def render_board(self, board_data):
        self.calls.append(("render_board", len(board_data)))

    def render_mark(self, row, col, player):
        self.calls.append(("render_mark", row, col, player))
        self.marks[(row, col)] = player

    def clear_board(self):
        self.calls.append(("clear_board",))
        self.marks.clear()

    def render_scoreboard(self, score):
        self.calls.append(("render_scoreboard", dict(score)))
        self.scores = dict(score)

    def update_score(self, score, player):
        self.calls.append(("update_score", player, score[player]))
        self.scores[player] = score[player]

    def render_message(self, winner=None):
        self.calls.append(("render_message", winner))
        self.message = winner or "stalemate"

    def clear_message(self):
        if self.message is None:
            raise NoMessageError("no message to clear")
        self.calls.append(("clear_message",))
        self.message = None


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def game(display, scheduler):
    game = TicTacToe(display, scheduler)
    game.start_game()
    return game




@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
