from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import Mark
from . import geometry

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_FILL_COLOR = QColor(50, 205, 50, 70)   # lime, translucent


class BoardWidget(QWidget):
    """
    custom widget to draw the grid and turn clicks into cells
    """
    cell_clicked = Signal(int, int)  # emits col, row on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine          # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def board_rect(self):
        return geometry.board_rect(self.width(), self.height(),
                                   self.engine.width, self.engine.height)

    def sizeHint(self):
        # 480px along the longest side
        longest = max(self.engine.width, self.engine.height)
        return QSize(int(480 * self.engine.width / longest),
                     int(480 * self.engine.height / longest))

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning run
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            rect = self.board_rect()
            if rect.cell <= 0:
                return
            # winning cells underneath everything else
            for col, row in self.engine.winning_line:
                x, y = geometry.cell_origin(col, row, rect)
                painter.fillRect(QRectF(x, y, rect.cell, rect.cell), WIN_FILL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for (x1, y1), (x2, y2) in geometry.grid_lines(
                    rect, self.engine.width, self.engine.height):
                painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))
            # marks
            stroke = max(2.0, rect.cell / 20)
            for row in range(self.engine.height):
                for col in range(self.engine.width):
                    mark = self.engine.cell(col, row)
                    if mark is Mark.X:
                        painter.setPen(QPen(X_COLOR, stroke))
                        for (x1, y1), (x2, y2) in geometry.x_strokes(col, row, rect):
                            painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))
                    elif mark is Mark.O:
                        painter.setPen(QPen(O_COLOR, stroke))
                        (cx, cy), radius = geometry.o_circle(col, row, rect)
                        painter.drawEllipse(QPointF(cx, cy), radius, radius)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        cell = geometry.cell_at(pos.x(), pos.y(), self.board_rect(),
                                self.engine.width, self.engine.height)
        # only inside grid
        if cell is None:
            return
        self.cell_clicked.emit(*cell)  # notify main window
