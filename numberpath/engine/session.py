"""
Game session rules: the player's drawn path, drag steps and win detection.
"""
import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from numberpath.engine.errors import GameOverError, InvalidMoveError
from numberpath.engine.generator import PuzzleInstance
from numberpath.engine.grid import Position
from numberpath.engine.topology import get_topology

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameState:
    """ One puzzle being played """

    def __init__(self, puzzle: PuzzleInstance, user_path: Iterable = (),
                 status: GameStatus = GameStatus.PLAYING, revealed: Iterable[int] = ()):
        self.puzzle = puzzle
        self.strategy = get_topology(puzzle.topology)
        self.hints: Dict[Position, int] = dict(puzzle.hints)
        self.revealed: List[int] = []
        for step in revealed:
            self._add_hint(step)
        self.user_path: List[Position] = [Position(*pos) for pos in user_path]
        self.status = GameStatus(status)

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.LOST)

    def _check_not_over(self):
        if self.is_over:
            raise GameOverError(f"Game is already {self.status.value}")

    def _is_open(self, pos) -> bool:
        row, col = pos
        return (0 <= row < self.puzzle.rows and 0 <= col < self.puzzle.cols
                and pos not in self.puzzle.obstacles)

    def start_cell(self) -> Optional[Position]:
        """Cell hinted with step 1, if that hint is shown"""
        for pos, step in self.hints.items():
            if step == 1:
                return pos
        return None

    # drawn path
    def set_user_path(self, path: Iterable) -> GameStatus:
        """Replace the drawn path, validating every step"""
        self._check_not_over()
        cells = [Position(*pos) for pos in path]

        seen = set()
        for index, pos in enumerate(cells):
            if not self._is_open(pos):
                raise InvalidMoveError(f"Step {index + 1} at {tuple(pos)} is not a free cell")
            if pos in seen:
                raise InvalidMoveError(f"Cell {tuple(pos)} is visited twice")
            if index and not self.strategy.is_adjacent(cells[index - 1], pos):
                raise InvalidMoveError(
                    f"Step {index + 1} at {tuple(pos)} is not adjacent to {tuple(cells[index - 1])}")
            if index and not self.strategy.accepts_step(cells[:index], pos):
                raise InvalidMoveError(f"Step {index + 1} at {tuple(pos)} crosses the line")
            seen.add(pos)

        self.user_path = cells
        self.status = GameStatus.PLAYING
        return self.check_win()

    def start_path(self, pos) -> bool:
        """Begin drawing at pos. Returns False if the cell cannot start a path"""
        self._check_not_over()
        pos = Position(*pos)
        if not self._is_open(pos):
            return False
        start = self.start_cell()
        if start is not None and pos != start:
            return False
        self.user_path = [pos]
        self.status = GameStatus.PLAYING
        self.check_win()
        return True

    def extend_path(self, pos) -> bool:
        """
        One drag step onto pos.
        Moving back onto the previous cell undoes the last step; otherwise the
        cell is appended when it is adjacent, free and not yet on the path.
        Returns True if the drawn path changed.
        """
        self._check_not_over()
        pos = Position(*pos)
        if not self.user_path:
            return self.start_path(pos)

        if pos == self.user_path[-1]:
            return False

        # backtrack
        if len(self.user_path) >= 2 and pos == self.user_path[-2]:
            self.user_path.pop()
            return True

        if not self.strategy.is_adjacent(self.user_path[-1], pos):
            return False
        if not self._is_open(pos) or pos in self.user_path:
            return False
        if not self.strategy.accepts_step(self.user_path, pos):
            return False

        self.user_path.append(pos)
        self.check_win()
        return True

    def check_win(self) -> GameStatus:
        """Won when every free cell is drawn and every hint sits at its step"""
        if len(self.user_path) != self.puzzle.free_cells:
            return self.status

        for pos, step in self.hints.items():
            if step > len(self.user_path) or self.user_path[step - 1] != pos:
                return self.status

        self.status = GameStatus.WON
        logger.info("Puzzle solved")
        return self.status

    def reset(self):
        self.user_path = []
        self.status = GameStatus.PLAYING

    # reveal
    def _add_hint(self, step: int) -> Tuple[Position, int]:
        pos = self.puzzle.full_path[step - 1]
        self.hints[pos] = step
        if step not in self.revealed:
            self.revealed.append(step)
        return pos, step

    def reveal_hint(self) -> Optional[Tuple[Position, int]]:
        """Show the lowest step that is not yet a hint"""
        self._check_not_over()
        shown = set(self.hints.values())
        for step in range(1, self.puzzle.total_steps + 1):
            if step not in shown:
                return self._add_hint(step)
        return None

    def reveal_answer(self) -> List[Position]:
        """Give up: the drawn path becomes the solution"""
        self._check_not_over()
        self.user_path = list(self.puzzle.full_path)
        self.status = GameStatus.LOST
        return self.user_path

    # board view
    def cell_statuses(self) -> List[List[dict]]:
        drawn = {pos: index for index, pos in enumerate(self.user_path, start=1)}
        won = self.status is GameStatus.WON
        board = []
        for r in range(self.puzzle.rows):
            row = []
            for c in range(self.puzzle.cols):
                pos = Position(r, c)
                hint = self.hints.get(pos)
                step = drawn.get(pos)
                status, value = "normal", None
                if pos in self.puzzle.obstacles:
                    status = "obstacle"
                elif won:
                    status, value = ("hint", hint) if hint is not None else ("success", step)
                elif step is not None:
                    status, value = "active", step
                    if hint is not None and hint != step:
                        status, value = "error", hint
                elif hint is not None:
                    status, value = "hint", hint
                row.append({"row": r, "col": c, "status": status, "value": value})
            board.append(row)
        return board
