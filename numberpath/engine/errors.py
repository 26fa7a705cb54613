class PuzzleError(Exception):
    """Base class for puzzle engine errors"""


class InvalidStartError(PuzzleError):
    """Explicit start position is an obstacle cell"""

    def __init__(self, position):
        self.position = position
        super().__init__(f"Start position {tuple(position)} is an obstacle")


class ObstaclePlacementFailed(PuzzleError):
    """No obstacle layout admitted a path within the attempt budget"""

    def __init__(self, rows: int, cols: int, count: int, attempts: int):
        self.rows = rows
        self.cols = cols
        self.count = count
        self.attempts = attempts
        super().__init__(
            f"Could not place {count} obstacles on a {rows}x{cols} grid "
            f"after {attempts} attempts"
        )


class PuzzleGenerationError(PuzzleError):
    """Every generation retry failed"""


class InvalidMoveError(PuzzleError):
    """Player path breaks the movement rules"""


class GameOverError(PuzzleError):
    """Game is already won or given up"""
