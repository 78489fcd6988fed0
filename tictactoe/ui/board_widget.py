from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Mark

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_COLOR = "lime"


class BoardWidget(QWidget):
    """
    custom widget to draw and click on an NxN tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_state, parent=None):
        super().__init__(parent)
        self.game_state = game_state  # read-only use, moves go through the window
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # (offset_x, offset_y, side, cell_size) of the square grid
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side, side / self.game_state.size

    def cell_at(self, x, y):
        """
        board cell under widget coords, or None outside the grid
        """
        ox, oy, side, cell = self._geometry()
        if cell <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        size = self.game_state.size
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp float rounding at the far edge
        return max(0, min(row, size - 1)), max(0, min(col, size - 1))

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side, cell_size = self._geometry()
            size = self.game_state.size
            painter.fillRect(self.rect(), QColor("#333"))
            # grid lines
            painter.setPen(QPen(QColor("#555"), 2))
            for i in range(1, size):
                x = offset_x + i * cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
                y = offset_y + i * cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))
            # marks
            rows = self.game_state.snapshot()
            for r in range(size):
                for c in range(size):
                    sym = rows[r][c]
                    if sym is Mark.EMPTY:
                        continue
                    cx = offset_x + c * cell_size + cell_size / 2
                    cy = offset_y + r * cell_size + cell_size / 2
                    rad = cell_size / 2 * 0.7
                    if sym is Mark.X:
                        painter.setPen(QPen(QColor(X_COLOR), 4))
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.setPen(QPen(QColor(O_COLOR), 4))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # strike through the winning line, centre of first to centre of last cell
            line = self.game_state.winning_line
            if line is not None:
                (r0, c0), (r1, c1) = line.cells[0], line.cells[-1]
                start = QPointF(offset_x + (c0 + 0.5) * cell_size, offset_y + (r0 + 0.5) * cell_size)
                end = QPointF(offset_x + (c1 + 0.5) * cell_size, offset_y + (r1 + 0.5) * cell_size)
                painter.setPen(QPen(QColor(WIN_COLOR), 6, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(start, end)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_state.get_outcome().is_over:
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is not None:
            self.cell_clicked.emit(*cell)  # notify main window
