import logging

from ..game_logic import DEFAULT_BOARD_SIZE, GameState, MoveResult, Outcome
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


def outcome_message(outcome):
    """
    status text for a finished game, '' while still playing
    """
    if outcome is Outcome.X:
        return "Player X won!"
    if outcome is Outcome.O:
        return "Player O won!"
    if outcome is Outcome.DRAW:
        return "Draw!"
    return ""


def turn_message(player):
    return f"Player {player.value}'s turn"


class TicTacToeWindow(QMainWindow):
    """
    main window: one board, a status line and a reset button
    """
    def __init__(self, size=DEFAULT_BOARD_SIZE):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_state = GameState(size, observer=self._on_game_over)
        self.board_widget = BoardWidget(self.game_state, parent=self)
        self._setup_ui()
        self._update_message(turn_message(self.game_state.current_player), is_turn=True)
        logger.debug("window ready with %dx%d board", size, size)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
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
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
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
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _on_game_over(self, outcome):
        # observer registered with the game state, runs once per game
        self._update_message(outcome_message(outcome), is_success=True)
        self.board_widget.set_accept_clicks(False)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # invalid clicks are ignored by the game state
        res = self.game_state.place(r, c)
        if res is MoveResult.INVALID:
            return
        self.board_widget.update()
        if res is MoveResult.CONTINUE:
            self._update_message(turn_message(self.game_state.current_player), is_turn=True)

    @Slot()
    def reset_game(self):
        # new game, clears the result text
        self.game_state.reset()
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()
        self._update_message(turn_message(self.game_state.current_player), is_turn=True)
