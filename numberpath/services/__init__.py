from numberpath.services.puzzle_services import PuzzleServices
from numberpath.services.game_services import GameServices
