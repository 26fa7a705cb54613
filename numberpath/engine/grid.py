from enum import Enum
from typing import Iterable, List, NamedTuple, Tuple


class Position(NamedTuple):
    row: int
    col: int


class CellState(Enum):
    FREE = 0
    OBSTACLE = 1
    VISITED = 2


class Grid:
    """ Cell occupancy for one search attempt. Never shared between searches """

    def __init__(self, rows: int, cols: int, obstacles: Iterable = ()):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one row and one column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = [[CellState.FREE] * cols for _ in range(rows)]

        self.obstacle_count = 0
        for obstacle in obstacles:
            pos = Position(*obstacle)
            if not self.in_bounds(pos):
                raise ValueError(f"Obstacle {tuple(pos)} is outside the {rows}x{cols} grid")
            if self._cells[pos.row][pos.col] is CellState.OBSTACLE:
                raise ValueError(f"Obstacle {tuple(pos)} is listed twice")
            self._cells[pos.row][pos.col] = CellState.OBSTACLE
            self.obstacle_count += 1

        # free cells not yet on the path
        self.unvisited = self.free_count

    @property
    def free_count(self) -> int:
        """Number of non-obstacle cells, i.e. the target path length"""
        return self.rows * self.cols - self.obstacle_count

    def in_bounds(self, pos) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def state(self, pos) -> CellState:
        return self._cells[pos[0]][pos[1]]

    def is_free(self, pos) -> bool:
        return self.in_bounds(pos) and self._cells[pos[0]][pos[1]] is CellState.FREE

    def is_obstacle(self, pos) -> bool:
        return self.in_bounds(pos) and self._cells[pos[0]][pos[1]] is CellState.OBSTACLE

    def visit(self, pos) -> None:
        if self._cells[pos[0]][pos[1]] is CellState.FREE:
            self.unvisited -= 1
        self._cells[pos[0]][pos[1]] = CellState.VISITED

    def release(self, pos) -> None:
        if self._cells[pos[0]][pos[1]] is CellState.VISITED:
            self.unvisited += 1
        self._cells[pos[0]][pos[1]] = CellState.FREE

    def cells(self) -> List[Position]:
        return [Position(r, c) for r in range(self.rows) for c in range(self.cols)]

    def free_cells(self) -> List[Position]:
        return [pos for pos in self.cells() if self.state(pos) is CellState.FREE]

    def open_cells(self) -> List[Position]:
        """Every non-obstacle cell, visited or not"""
        return [pos for pos in self.cells() if self.state(pos) is not CellState.OBSTACLE]

    def snapshot(self) -> Tuple[Tuple[CellState, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def __repr__(self):
        symbols = {CellState.FREE: ".", CellState.OBSTACLE: "#", CellState.VISITED: "o"}
        body = "\n".join("".join(symbols[cell] for cell in row) for row in self._cells)
        return f"Grid({self.rows}x{self.cols})\n{body}"
