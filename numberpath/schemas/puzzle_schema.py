from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Literal
from uuid import UUID


# Data sent by user
class PuzzleGenerate(BaseModel):
    """ Either a level, or explicit grid parameters"""
    level: Optional[int] = Field(default=None, ge=1)
    rows: Optional[int] = Field(default=None, ge=1, le=8)
    cols: Optional[int] = Field(default=None, ge=1, le=8)
    hidden_rate: float = Field(default=0.5, ge=0, le=1)
    obstacle_count: int = Field(default=0, ge=0)
    topology: Optional[Literal["orthogonal", "diagonal"]] = None

    @model_validator(mode="after")
    def level_or_size(self):
        """Require a level or both grid dimensions"""
        if self.level is None and (self.rows is None or self.cols is None):
            raise ValueError("Provide a level or both rows and cols")
        return self


class HintRead(BaseModel):
    row: int
    col: int
    step: int


# Data sent to user
class PuzzleRead(BaseModel):
    id: UUID
    level: Optional[int] = None
    rows: int
    cols: int
    topology: str
    hidden_rate: float
    obstacles: List[List[int]]
    hints: List[HintRead]
    full_path: List[List[int]]
