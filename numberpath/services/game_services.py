import logging
from uuid import uuid4
from fastapi import HTTPException

from numberpath import models
from numberpath.engine import GameOverError, GameState, GameStatus, InvalidMoveError
from numberpath.services.puzzle_services import PuzzleServices, resolve_topology

logger = logging.getLogger(__name__)


class GameServices:
    """ Handles game sessions: drawing, level changes, hints"""

    def __init__(self, db, rng=None):
        self.db = db
        self.puzzle_services = PuzzleServices(db, rng=rng)

    # create game
    def create_game(self, level: int = 1, topology=None) -> models.Game:
        """Generate a puzzle for the level and start a game on it"""
        topology = resolve_topology(topology)
        puzzle = self._new_puzzle(level, topology)
        game = models.Game(
            id=uuid4(),
            puzzle_id=puzzle.id,
            level=puzzle.level,
            topology=topology.value,
            status=GameStatus.PLAYING.value,
            user_path=[],
            revealed_hints=[],
        )
        self.db.add(game)
        self.db.commit()
        self.db.refresh(game)
        logger.info(f"New game {game.id} at level {game.level} ({game.topology})")
        return game

    def _new_puzzle(self, level: int, topology) -> models.Puzzle:
        instance = self.puzzle_services.build_puzzle(level=level, topology=topology)
        return self.puzzle_services.create_puzzle(instance)

    # get game by id
    def get_game_by_id(self, game_id) -> models.Game:
        game = self.db.query(models.Game).filter(models.Game.id == game_id).first()
        if not game:
            raise HTTPException(status_code=404, detail="Game not found")
        return game

    def load_state(self, game: models.Game) -> GameState:
        return GameState(
            PuzzleServices.to_instance(game.puzzle),
            user_path=game.user_path,
            status=GameStatus(game.status),
            revealed=game.revealed_hints,
        )

    def _save_state(self, game: models.Game, state: GameState) -> models.Game:
        # JSON columns are replaced, not mutated, so SQLAlchemy sees the change
        game.user_path = [list(pos) for pos in state.user_path]
        game.revealed_hints = list(state.revealed)
        game.status = state.status.value
        self.db.commit()
        self.db.refresh(game)
        return game

    def _apply(self, game_id, action):
        """Load the game, run action on its state, store the result"""
        game = self.get_game_by_id(game_id)
        state = self.load_state(game)
        try:
            result = action(state)
        except InvalidMoveError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except GameOverError as e:
            raise HTTPException(status_code=409, detail=str(e))
        self._save_state(game, state)
        return game, result

    # player path
    def set_path(self, game_id, path) -> models.Game:
        game, _ = self._apply(game_id, lambda state: state.set_user_path(path))
        return game

    def move(self, game_id, row: int, col: int):
        """One drag step. Returns the game and whether the path changed"""
        return self._apply(game_id, lambda state: state.extend_path((row, col)))

    def reset(self, game_id) -> models.Game:
        game, _ = self._apply(game_id, lambda state: state.reset())
        return game

    # hints
    def reveal_hint(self, game_id):
        return self._apply(game_id, lambda state: state.reveal_hint())

    def reveal_answer(self, game_id) -> models.Game:
        game, _ = self._apply(game_id, lambda state: state.reveal_answer())
        return game

    # levels
    def jump_to_level(self, game_id, level: int) -> models.Game:
        """Replace the game's puzzle with a fresh one for level"""
        game = self.get_game_by_id(game_id)
        level = max(level, 1)
        puzzle = self._new_puzzle(level, game.topology)

        game.puzzle_id = puzzle.id
        game.level = level
        game.status = GameStatus.PLAYING.value
        game.user_path = []
        game.revealed_hints = []
        self.db.commit()
        self.db.refresh(game)
        logger.info(f"Game {game.id} moved to level {level}")
        return game

    def next_level(self, game_id) -> models.Game:
        game = self.get_game_by_id(game_id)
        return self.jump_to_level(game_id, game.level + 1)

    def prev_level(self, game_id) -> models.Game:
        game = self.get_game_by_id(game_id)
        if game.level <= 1:
            raise HTTPException(status_code=400, detail="Already at the first level")
        return self.jump_to_level(game_id, game.level - 1)

    # Serialize game data to JSON
    def serialize_game(self, game: models.Game, state: GameState = None) -> dict:
        if state is None:
            state = self.load_state(game)
        puzzle = game.puzzle
        hints = sorted(state.hints.items(), key=lambda item: item[1])
        return {
            "id": game.id,
            "puzzle_id": game.puzzle_id,
            "level": game.level,
            "topology": game.topology,
            "status": state.status.value,
            "rows": puzzle.rows,
            "cols": puzzle.cols,
            "obstacles": puzzle.obstacles,
            "hints": [{"row": pos.row, "col": pos.col, "step": step} for pos, step in hints],
            "user_path": [list(pos) for pos in state.user_path],
            "board": state.cell_statuses(),
            "full_path": puzzle.full_path if state.is_over else None,
        }
