from ..config import GameConfig
from ..display import NoMessageError, result_text, score_text
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt


class GameWindow(QMainWindow):
    """
    qt view for the game, implements Display
    """
    def __init__(self):
        """
        empty window; score, grid and messages are added by the engine
        """
        super().__init__()
        self.board_widget = BoardWidget(parent=self)
        self.score_labels = {}          # player -> QLabel
        self.message_label = None       # only while a result is shown
        self.on_close = None            # called from closeEvent
        self._setup_ui()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(GameConfig.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self.score_widget = QWidget()
        self.score_layout = QHBoxLayout(self.score_widget)
        self.main_layout.addWidget(self.score_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.message_area = QWidget()
        self.message_layout = QVBoxLayout(self.message_area)
        self.main_layout.addWidget(self.message_area)
        self.resize(400, 480)

    def bind_handler(self, click_handler):
        # board widget already filters out non-cell clicks
        self.board_widget.cell_clicked.connect(click_handler)

    def render_board(self, board_data):
        self.board_widget.build_grid(len(board_data), len(board_data[0]))

    def render_mark(self, row, col, player):
        self.board_widget.set_mark(row, col, player)

    def clear_board(self):
        self.board_widget.clear_marks()

    def render_scoreboard(self, score):
        # one counter per player, x left, o right
        f = QFont(); f.setPointSize(12)
        colors = {GameConfig.PLAYER_X: GameConfig.X_COLOR,
                  GameConfig.PLAYER_O: GameConfig.O_COLOR}
        for player in GameConfig.PLAYERS:
            label = QLabel(score_text(score, player))
            label.setObjectName(f"score-{player}")
            label.setFont(f)
            label.setStyleSheet(f"color: {colors[player]}; font-weight: bold;")
            self.score_layout.addWidget(label)
            self.score_labels[player] = label

    def update_score(self, score, player):
        self.score_labels[player].setText(score_text(score, player))

    def render_message(self, winner=None):
        # new label each round, caller clears the old one
        message = QLabel(result_text(winner))
        message.setObjectName("message")
        f = QFont(); f.setPointSize(14); f.setBold(True)
        message.setFont(f)
        message.setAlignment(Qt.AlignCenter)
        message.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_layout.addWidget(message)
        self.message_label = message

    def clear_message(self):
        if self.message_label is None:
            raise NoMessageError("no message to clear")
        self.message_layout.removeWidget(self.message_label)
        self.message_label.deleteLater()
        self.message_label = None

    def closeEvent(self, event):
        # let the owner cancel pending work first
        if self.on_close:
            self.on_close()
        event.accept()
