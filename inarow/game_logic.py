import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

WIN_MESSAGE = "Player {mark} is the winner!"
DRAW_MESSAGE = "The game ended in a draw..."
GAME_OVER_MESSAGE = "Game is over!"
RESET_MESSAGE = "Resets the current game"
TURN_MESSAGE = "Player {mark}'s turn"

# scan order: horizontal, vertical, diagonal down, diagonal up
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


class Mark(Enum):
    """the two player symbols"""
    X = "X"
    O = "O"

    def other(self):
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self):
        return self.value


FIRST_MARK = Mark.X


class Outcome(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAWN = "drawn"


class RejectReason(Enum):
    """why attempt_move refused a move"""
    GAME_OVER = "game_over"
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"


class InvalidConfigurationError(ValueError):
    """raised when a board can't host a winnable game"""


@dataclass(frozen=True)
class GameConfig:
    """
    board dimensions and run length, fixed per game
    """
    width: int = 3
    height: int = 3
    win_length: int = 3

    def __post_init__(self):
        for name in ("width", "height", "win_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError(
                f"board must be at least 1x1, got {self.width}x{self.height}")
        longest = max(self.width, self.height)
        if not 2 <= self.win_length <= longest:
            raise InvalidConfigurationError(
                f"win_length must be between 2 and {longest} "
                f"for a {self.width}x{self.height} board, got {self.win_length}")

    @property
    def cell_count(self):
        return self.width * self.height


@dataclass(frozen=True)
class Move:
    """one accepted placement; number is 1-based play order"""
    col: int
    row: int
    mark: Mark
    number: int


@dataclass(frozen=True)
class MoveResult:
    """
    what attempt_move did: rejected with a reason, or accepted
    with the placed mark and the outcome it produced
    """
    accepted: bool
    outcome: Outcome
    reason: RejectReason = None
    col: int = None
    row: int = None
    mark: Mark = None
    winner: Mark = None
    winning_line: tuple = ()

    @classmethod
    def rejected(cls, reason, outcome, col=None, row=None, winner=None):
        return cls(accepted=False, outcome=outcome, reason=reason,
                   col=col, row=row, winner=winner)

    @property
    def is_terminal(self):
        return self.outcome is not Outcome.ONGOING


class GameEngine:
    """
    n-in-a-row rules and state: board, turn order, history, outcome
    """
    def __init__(self, config=None):
        """
        init empty board for the given config (default 3x3, 3 to win)
        """
        self.config = config if config is not None else GameConfig()
        self.reset()

    def reset(self):
        """
        clear board, history and outcome
        """
        self._board = [[None for _ in range(self.config.width)]
                       for _ in range(self.config.height)]  # board[row][col]
        self._history = []
        self._counts = {Mark.X: 0, Mark.O: 0}
        self._outcome = Outcome.ONGOING
        self._winner = None
        self._winning_line = ()

    # -- read-only queries --------------------------------------------------

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height

    @property
    def win_length(self):
        return self.config.win_length

    @property
    def outcome(self):
        return self._outcome

    @property
    def winner(self):
        return self._winner

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def is_over(self):
        return self._outcome is not Outcome.ONGOING

    @property
    def history(self):
        return tuple(self._history)

    @property
    def move_count(self):
        return len(self._history)

    @property
    def board(self):
        """snapshot as a tuple of rows"""
        return tuple(tuple(row) for row in self._board)

    def count(self, mark):
        return self._counts[mark]

    def next_mark(self):
        """
        mark with strictly fewer placements moves next; X on a tie
        """
        if self._counts[Mark.O] < self._counts[Mark.X]:
            return Mark.O
        if self._counts[Mark.X] < self._counts[Mark.O]:
            return Mark.X
        return FIRST_MARK

    def in_bounds(self, col, row):
        return 0 <= col < self.width and 0 <= row < self.height

    def cell(self, col, row):
        """
        mark at (col, row), None if empty or off the board
        """
        if not self.in_bounds(col, row):
            return None
        return self._board[row][col]

    def is_cell_empty(self, col, row):
        return self.in_bounds(col, row) and self._board[row][col] is None

    def status_text(self):
        if self._outcome is Outcome.WON:
            return WIN_MESSAGE.format(mark=self._winner)
        if self._outcome is Outcome.DRAWN:
            return DRAW_MESSAGE
        return TURN_MESSAGE.format(mark=self.next_mark())

    def render(self):
        """
        plain text grid, one line per row, '.' for empty
        """
        return "\n".join(
            " ".join(cell.value if cell else "." for cell in row)
            for row in self._board)

    # -- moves --------------------------------------------------------------

    def attempt_move(self, col, row):
        """
        place next mark at (col, row) and evaluate the result
        """
        if self.is_over:
            logger.debug("rejected (%s, %s): game over", col, row)
            return MoveResult.rejected(RejectReason.GAME_OVER, self._outcome,
                                       col, row, self._winner)
        if not self.in_bounds(col, row):
            logger.debug("rejected (%s, %s): out of bounds", col, row)
            return MoveResult.rejected(RejectReason.OUT_OF_BOUNDS, self._outcome, col, row)
        if self._board[row][col] is not None:
            logger.debug("rejected (%s, %s): occupied by %s", col, row, self._board[row][col])
            return MoveResult.rejected(RejectReason.CELL_OCCUPIED, self._outcome, col, row)

        mark = self.next_mark()
        move = Move(col, row, mark, len(self._history) + 1)
        self._history.append(move)
        self._counts[mark] += 1
        self._board[row][col] = mark
        logger.debug("move %d: %s at (%d, %d)", move.number, mark, col, row)

        self._evaluate(move)
        return MoveResult(accepted=True, outcome=self._outcome, col=col, row=row,
                          mark=mark, winner=self._winner,
                          winning_line=self._winning_line)

    def _evaluate(self, pivot):
        # a new run has to pass through the latest move, so only
        # the four lines through the pivot need scanning
        for dx, dy in DIRECTIONS:
            line = self._scan_line(pivot, dx, dy)
            if line:
                self._outcome = Outcome.WON
                self._winner = pivot.mark
                self._winning_line = line
                logger.info("%s wins on move %d", pivot.mark, pivot.number)
                return
        if len(self._history) == self.config.cell_count:
            self._outcome = Outcome.DRAWN
            logger.info("draw after %d moves", pivot.number)

    def _scan_line(self, pivot, dx, dy):
        """
        slide along (dx, dy) through the pivot, win_length-1 cells each way;
        returns the winning cells or an empty tuple
        """
        reach = self.win_length - 1
        run = []
        for step in range(-reach, reach + 1):
            col, row = pivot.col + step * dx, pivot.row + step * dy
            if self.cell(col, row) is pivot.mark:
                run.append((col, row))
                if len(run) == self.win_length:
                    return tuple(run)
            else:
                run = []  # off board, empty or other mark
        return ()
