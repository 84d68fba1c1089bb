import logging

from .config import GameConfig

logger = logging.getLogger(__name__)


class TicTacToe:
    """
    tic-tac-toe rules, turn order, score and round lifecycle
    """
    def __init__(self, display, scheduler, reset_delay_ms=GameConfig.RESET_DELAY_MS):
        """
        init board and counters, hook clicks from the display
        """
        self.display = display              # anything implementing Display
        self.scheduler = scheduler          # needs call_later(ms, callback)
        self.board_size = GameConfig.BOARD_SIZE
        self.board = self.create_board()
        self.players = GameConfig.PLAYERS
        self.wait = reset_delay_ms          # round end -> reset
        self.waiting = False                # true while result is shown
        self.score = {p: 0 for p in self.players}
        self.current_player = GameConfig.PLAYER_X
        self.reset_task = None              # pending reset, if any

        self.display.bind_handler(self.handle_click)

    def start_game(self):
        """
        draw score board and empty grid
        """
        self.display.render_scoreboard(self.score)
        self.display.render_board(self.board)

    def handle_click(self, row, col):
        """
        play current player at (row, col)
        returns: 'win', 'stalemate', 'continue', or 'ignored'
        """
        # occupied cell or result still on screen
        if self.board[row][col] != '' or self.waiting:
            return "ignored"

        player = self.current_player
        self.board[row][col] = player
        self.display.render_mark(row, col, player)
        logger.debug("%s played (%d, %d)", player, row, col)

        if self.is_game_won(row, col):
            self.increase_score()
            self.display.update_score(self.score, player)
            self.game_over(player)
            return "win"
        elif self.is_board_full():
            self.game_over()
            return "stalemate"
        self.switch_player()
        return "continue"

    def game_over(self, winner=None):
        """
        show result, block input, reset after the delay
        """
        self.waiting = True
        self.display.render_message(winner)
        if winner:
            logger.info("%s wins, score %s", winner, self.score)
        else:
            logger.info("stalemate, score %s", self.score)
        self.reset_task = self.scheduler.call_later(self.wait, self.reset_board)

    def create_board(self):
        return [['' for _ in range(self.board_size)]
                for _ in range(self.board_size)]

    def reset_board(self):
        """
        clear message + marks, fresh board, accept moves again
        current player carries over into the next round
        """
        self.display.clear_message()
        self.display.clear_board()
        self.board = self.create_board()
        self.waiting = False
        self.reset_task = None
        logger.debug("board reset, %s to move", self.current_player)

    def is_game_won(self, row, col):
        """
        lines through the last move (plus both diagonals) for current player
        """
        b = self.board; p = self.current_player
        # vertical
        if b[0][col] == p and b[1][col] == p and b[2][col] == p:
            return True
        # horizontal
        if b[row][0] == p and b[row][1] == p and b[row][2] == p:
            return True
        # diagonals
        if b[0][0] == p and b[1][1] == p and b[2][2] == p:
            return True
        if b[2][0] == p and b[1][1] == p and b[0][2] == p:
            return True
        return False

    def is_board_full(self):
        return all(cell != '' for row in self.board for cell in row)

    def switch_player(self):
        x, o = self.players
        self.current_player = o if self.current_player == x else x

    def increase_score(self):
        # winner is always the current player
        self.score[self.current_player] += 1

    def shutdown(self):
        """
        drop a pending reset, used when the view goes away
        """
        if self.reset_task:
            self.reset_task.cancel()
            self.reset_task = None
