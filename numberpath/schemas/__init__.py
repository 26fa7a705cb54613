from numberpath.schemas.puzzle_schema import PuzzleGenerate, PuzzleRead, HintRead
from numberpath.schemas.level_schema import LevelRead
from numberpath.schemas.game_schema import GameCreate, GameRead, MoveRequest, MoveResponse, PathUpdate, LevelJump, CellRead, HintResponse
