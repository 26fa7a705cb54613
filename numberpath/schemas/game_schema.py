from pydantic import BaseModel, Field
from typing import List, Optional, Literal
from uuid import UUID

from numberpath.schemas.puzzle_schema import HintRead


# Data sent by user
class GameCreate(BaseModel):
    level: int = Field(default=1, ge=1)
    topology: Optional[Literal["orthogonal", "diagonal"]] = None  # None uses the configured default


class MoveRequest(BaseModel):
    """ One drag step onto a cell"""
    row: int
    col: int


class PathUpdate(BaseModel):
    path: List[List[int]] # [[row, col], ...]


class LevelJump(BaseModel):
    level: int


class CellRead(BaseModel):
    row: int
    col: int
    status: str # normal, obstacle, hint, active, error, success
    value: Optional[int] = None


# Data sent to user
class GameRead(BaseModel):
    id: UUID
    puzzle_id: UUID
    level: int
    topology: str
    status: str
    rows: int
    cols: int
    obstacles: List[List[int]]
    hints: List[HintRead]
    user_path: List[List[int]]
    board: List[List[CellRead]]
    full_path: Optional[List[List[int]]] = None # only once the game is over


class MoveResponse(BaseModel):
    changed: bool
    game: GameRead


class HintResponse(BaseModel):
    hint: Optional[HintRead] = None
    game: GameRead
