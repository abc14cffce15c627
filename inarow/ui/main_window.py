import logging

from ..game_logic import (
    GameEngine, Outcome, RejectReason, GAME_OVER_MESSAGE, RESET_MESSAGE
)
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

# label styles, one per kind of status
DEFAULT_STYLE = "color: #eee;"
ERROR_STYLE = "color: #ff8a8a; font-weight: bold;"
SUCCESS_STYLE = "color: lime; font-weight: bold;"
INFO_STYLE = "color: #f0c674; font-weight: bold;"
TURN_STYLE = "color: #8acaff; font-weight: bold;"


class GameWindow(QMainWindow):
    """
    main window: owns the engine and routes board clicks into it
    """
    def __init__(self, config=None, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine(config)
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self._update_message(self.engine.status_text(), is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        cfg = self.engine.config
        self.setWindowTitle(
            f"N-in-a-Row ({cfg.width}x{cfg.height}, {cfg.win_length} to win)")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 4px 12px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Start Over")
        self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)

    @Slot(str)
    def _update_message(self, text, is_error=False, is_success=False,
                        is_info=False, is_turn=False):
        # set message text + style
        style = DEFAULT_STYLE
        if is_error:     style = ERROR_STYLE
        elif is_success: style = SUCCESS_STYLE
        elif is_info:    style = INFO_STYLE
        elif is_turn:    style = TURN_STYLE
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(int, int)
    def _on_cell_clicked(self, col, row):
        res = self.engine.attempt_move(col, row)
        if not res.accepted:
            if res.reason is RejectReason.GAME_OVER:
                self._update_message(GAME_OVER_MESSAGE, is_error=True)
            # occupied / off board: nothing to draw, keep the turn prompt
            return
        self.board_widget.update()
        if res.outcome is Outcome.WON:
            self._update_message(self.engine.status_text(), is_success=True)
        elif res.outcome is Outcome.DRAWN:
            self._update_message(self.engine.status_text(), is_info=True)
        else:
            self._update_message(self.engine.status_text(), is_turn=True)

    @Slot()
    def reset_game(self):
        # back to an empty board, same config
        self.engine.reset()
        logger.info("game reset")
        self._update_message(f"{RESET_MESSAGE}. {self.engine.status_text()}",
                             is_turn=True)
        self.board_widget.update()
