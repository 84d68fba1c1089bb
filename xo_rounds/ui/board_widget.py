from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import GameConfig


class BoardWidget(QWidget):
    """
    draws the grid + marks, turns mouse clicks into cell coords
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.board_size = 0             # no grid until build_grid()
        self.marks = []                 # what is drawn, not game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def build_grid(self, rows, cols):
        # square board only
        self.board_size = min(rows, cols)
        self.clear_marks()

    def set_mark(self, row, col, player):
        self.marks[row][col] = player
        self.update()

    def mark_at(self, row, col):
        return self.marks[row][col]

    def clear_marks(self):
        self.marks = [['' for _ in range(self.board_size)]
                      for _ in range(self.board_size)]
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # side length + top-left offset of the centered square
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w - side) / 2, (h - side) / 2

    def cell_at(self, x, y):
        """
        (row, col) under widget point x, y or None outside the grid
        """
        if not self.board_size:
            return None
        side, ox, oy = self._geometry()
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / self.board_size
        if cell <= 0:
            return None
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp float edge cases
        last = self.board_size - 1
        return max(0, min(row, last)), max(0, min(col, last))

    def paintEvent(self, event):
        """
        draw grid and x/o marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._geometry()
            painter.fillRect(self.rect(), QColor(GameConfig.BOARD_BACKGROUND))
            size = self.board_size
            if not size:
                return
            cell_size = side / size
            # grid lines
            painter.setPen(QPen(QColor(GameConfig.GRID_COLOR), 2))
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # marks
            for r in range(size):
                for c in range(size):
                    sym = self.marks[r][c]
                    if not sym: continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = cell_size/2 * 0.7
                    if sym == GameConfig.PLAYER_X:
                        painter.setPen(QPen(QColor(GameConfig.X_COLOR), 4))
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(QColor(GameConfig.O_COLOR), 4))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        emit the clicked cell, ignore clicks off the grid
        """
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is None:
            return
        self.cell_clicked.emit(*cell)
