"""
game settings shared by the engine and the qt window
"""


class GameConfig:
    """
    fixed game constants, override per instance where noted
    """
    BOARD_SIZE = 3                      # always 3x3

    PLAYER_X = 'x'
    PLAYER_O = 'o'
    PLAYERS = (PLAYER_X, PLAYER_O)
    # shown in scoreboard + result message
    PLAYER_LABELS = {PLAYER_X: "Player 1", PLAYER_O: "Player 2"}

    RESET_DELAY_MS = 2500               # round end -> board reset

    WINDOW_TITLE = "Tic-Tac-Toe"
    X_COLOR = "#8acaff"
    O_COLOR = "#ff8a8a"
    GRID_COLOR = "#555"
    BOARD_BACKGROUND = "#333"


def player_label(player):
    """'x' -> 'Player 1', 'o' -> 'Player 2'"""
    return GameConfig.PLAYER_LABELS[player]
