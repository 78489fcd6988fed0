import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 3


class Mark(Enum):
    """
    content of one cell
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    def opposite(self):
        # only meaningful for player marks
        if self is Mark.EMPTY:
            raise ValueError("empty cell has no opposite")
        return Mark.O if self is Mark.X else Mark.X


class Outcome(Enum):
    """
    game status; terminal values are what the observer receives
    """
    IN_PROGRESS = 'in_progress'
    X = 'X'
    O = 'O'
    DRAW = 'Draw'

    @classmethod
    def win(cls, mark):
        return cls.X if mark is Mark.X else cls.O

    @property
    def winner(self):
        # winning mark, None for draw / unfinished
        return {Outcome.X: Mark.X, Outcome.O: Mark.O}.get(self)

    @property
    def is_over(self):
        return self is not Outcome.IN_PROGRESS


class MoveResult(Enum):
    """
    what place() did
    """
    INVALID = 'invalid'
    CONTINUE = 'continue'
    WIN = 'win'
    DRAW = 'draw'


@dataclass(frozen=True)
class Line:
    """
    a row, column or diagonal of the board
    """
    kind: str                          # 'row', 'col', 'diag' or 'anti'
    index: int                         # row/col number, 0 for diagonals
    cells: Tuple[Tuple[int, int], ...]


class Board:
    """
    fixed size NxN grid of marks
    """
    def __init__(self, size=DEFAULT_BOARD_SIZE):
        if size < 1:
            raise ValueError(f"board size must be at least 1, got {size}")
        self._size = size
        self._cells = [[Mark.EMPTY for _ in range(size)] for _ in range(size)]

    @property
    def size(self):
        return self._size

    def in_bounds(self, row, col):
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, row, col):
        # no negative-index wraparound
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self._size}x{self._size} board")
        return self._cells[row][col]

    def set(self, row, col, mark):
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self._size}x{self._size} board")
        self._cells[row][col] = mark

    def clear(self):
        for row in self._cells:
            for c in range(self._size):
                row[c] = Mark.EMPTY

    def rows(self):
        """
        read-only snapshot as nested tuples
        """
        return tuple(tuple(row) for row in self._cells)

    def lines(self):
        """
        every line in evaluation order:
        rows, then columns, then main diagonal, then anti-diagonal
        """
        n = self._size
        for r in range(n):
            yield Line('row', r, tuple((r, c) for c in range(n)))
        for c in range(n):
            yield Line('col', c, tuple((r, c) for r in range(n)))
        yield Line('diag', 0, tuple((i, i) for i in range(n)))
        yield Line('anti', 0, tuple((i, n - 1 - i) for i in range(n)))

    def find_winning_line(self) -> Optional[Tuple[Mark, Line]]:
        """
        first line whose cells all hold the same player mark,
        as (mark, line), or None
        """
        for line in self.lines():
            first = self._cells[line.cells[0][0]][line.cells[0][1]]
            if first is Mark.EMPTY:
                continue
            if all(self._cells[r][c] is first for r, c in line.cells):
                return first, line
        return None


Observer = Callable[[Outcome], None]


class GameState:
    """
    turn order, move application and win/draw detection for one board

    The observer, if any, is called once per game with the terminal
    Outcome (X, O or DRAW) when the game ends.
    """
    def __init__(self, size=DEFAULT_BOARD_SIZE, observer: Optional[Observer] = None):
        self.board = Board(size)
        self.observer = observer
        self.current_player = Mark.X
        self.filled_count = 0
        self.outcome = Outcome.IN_PROGRESS
        self.winning_line: Optional[Line] = None

    @property
    def size(self):
        return self.board.size

    def set_observer(self, observer: Optional[Observer]):
        self.observer = observer

    def place(self, row, col) -> MoveResult:
        """
        put current player's mark at (row, col)

        Out of range, occupied cells and moves after the game ended are
        ignored: nothing changes and MoveResult.INVALID is returned.
        """
        if self.outcome.is_over:
            logger.debug("ignored move (%s, %s): game already over", row, col)
            return MoveResult.INVALID
        if not self.board.in_bounds(row, col):
            logger.debug("ignored move (%s, %s): out of range", row, col)
            return MoveResult.INVALID
        if self.board.get(row, col) is not Mark.EMPTY:
            logger.debug("ignored move (%s, %s): cell taken", row, col)
            return MoveResult.INVALID

        player = self.current_player
        self.board.set(row, col, player)
        self.filled_count += 1

        found = self.board.find_winning_line()
        if found is not None:
            mark, line = found
            self.winning_line = line
            self._finish(Outcome.win(mark))
            return MoveResult.WIN
        if self.filled_count == self.size * self.size:
            self._finish(Outcome.DRAW)
            return MoveResult.DRAW

        self.current_player = player.opposite()
        return MoveResult.CONTINUE

    def _finish(self, outcome):
        # state is committed before the observer runs
        self.outcome = outcome
        logger.info("game over: %s after %d moves", outcome.value, self.filled_count)
        if self.observer is not None:
            self.observer(outcome)

    def reset(self):
        """
        back to a fresh game of the same size, observer kept
        """
        self.board.clear()
        self.current_player = Mark.X
        self.filled_count = 0
        self.outcome = Outcome.IN_PROGRESS
        self.winning_line = None
        logger.info("game reset (%dx%d)", self.size, self.size)

    def get_outcome(self):
        return self.outcome

    def get_cell(self, row, col):
        return self.board.get(row, col)

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        return self.board.in_bounds(row, col) and self.board.get(row, col) is Mark.EMPTY

    def snapshot(self):
        return self.board.rows()
