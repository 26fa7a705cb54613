from numberpath.models.puzzle_model import Puzzle
from numberpath.models.game_model import Game
