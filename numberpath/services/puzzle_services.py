import logging
from uuid import uuid4
from fastapi import HTTPException

from numberpath import models
from numberpath.core.config import settings
from numberpath.engine import (
    Position,
    PuzzleGenerationError,
    PuzzleInstance,
    Topology,
    generate_level,
    generate_puzzle,
)
from numberpath.schemas import PuzzleGenerate

logger = logging.getLogger(__name__)


def generation_options(topology: Topology) -> dict:
    """Search budgets from settings for the given topology"""
    if topology is Topology.DIAGONAL:
        start_limit, max_steps = settings.DIAGONAL_START_CANDIDATES, settings.DIAGONAL_SEARCH_MAX_STEPS
    else:
        start_limit, max_steps = settings.ORTHOGONAL_START_CANDIDATES, settings.ORTHOGONAL_SEARCH_MAX_STEPS
    return {
        "retries": settings.GENERATION_RETRIES,
        "obstacle_attempts": settings.OBSTACLE_MAX_ATTEMPTS,
        "max_steps": max_steps,
        "start_limit": start_limit,
    }


def resolve_topology(topology) -> Topology:
    return Topology(topology or settings.DEFAULT_TOPOLOGY)


class PuzzleServices:
    """ Generates puzzles and handles all puzzle related DB operation"""

    def __init__(self, db, rng=None):
        self.db = db
        self.rng = rng

    # generate puzzle
    def build_puzzle(self, level: int = None, topology=None, **params) -> PuzzleInstance:
        """Run the generation engine. Raises 503 when every retry failed"""
        topology = resolve_topology(topology)
        options = generation_options(topology)
        try:
            if level is not None:
                return generate_level(level, topology=topology, rng=self.rng, **options)
            return generate_puzzle(topology=topology, rng=self.rng, **params, **options)
        except PuzzleGenerationError as e:
            logger.error(f"Puzzle generation failed: {e}")
            raise HTTPException(status_code=503, detail=str(e))

    def generate_puzzle(self, puzzle_config: PuzzleGenerate) -> models.Puzzle:
        """Generate from a request and store the result"""
        if puzzle_config.level is not None:
            instance = self.build_puzzle(level=puzzle_config.level, topology=puzzle_config.topology)
        else:
            instance = self.build_puzzle(
                topology=puzzle_config.topology,
                rows=puzzle_config.rows,
                cols=puzzle_config.cols,
                hidden_rate=puzzle_config.hidden_rate,
                obstacle_count=puzzle_config.obstacle_count,
            )
        return self.create_puzzle(instance)

    # create puzzle
    def create_puzzle(self, instance: PuzzleInstance) -> models.Puzzle:
        """Insert a generated puzzle to DB table puzzles"""
        puzzle = models.Puzzle(
            id=uuid4(),
            level=instance.level,
            rows=instance.rows,
            cols=instance.cols,
            topology=instance.topology.value,
            hidden_rate=instance.hidden_rate,
            obstacles=sorted([list(pos) for pos in instance.obstacles]),
            hints=sorted([[pos.row, pos.col, step] for pos, step in instance.hints.items()],
                         key=lambda hint: hint[2]),
            full_path=[list(pos) for pos in instance.full_path],
        )
        self.db.add(puzzle)
        self.db.commit()
        self.db.refresh(puzzle)
        logger.info(f"Stored puzzle {puzzle.id}")
        return puzzle

    # get one puzzle by id
    def get_puzzle_by_id(self, puzzle_id) -> models.Puzzle:
        """Fetch puzzle by id"""
        puzzle = self.db.query(models.Puzzle).filter(models.Puzzle.id == puzzle_id).first()
        if not puzzle:
            raise HTTPException(status_code=404, detail="Puzzle not found")
        return puzzle

    @staticmethod
    def to_instance(puzzle: models.Puzzle) -> PuzzleInstance:
        """Rebuild the engine view of a stored puzzle"""
        return PuzzleInstance(
            rows=puzzle.rows,
            cols=puzzle.cols,
            topology=Topology(puzzle.topology),
            obstacles=frozenset(Position(r, c) for r, c in puzzle.obstacles),
            hints={Position(r, c): step for r, c, step in puzzle.hints},
            full_path=tuple(Position(r, c) for r, c in puzzle.full_path),
            hidden_rate=puzzle.hidden_rate,
            level=puzzle.level,
        )

    # Serialize puzzle data to JSON
    @staticmethod
    def serialize_puzzle(puzzle: models.Puzzle) -> dict:
        return {
            "id": puzzle.id,
            "level": puzzle.level,
            "rows": puzzle.rows,
            "cols": puzzle.cols,
            "topology": puzzle.topology,
            "hidden_rate": puzzle.hidden_rate,
            "obstacles": puzzle.obstacles,
            "hints": [{"row": r, "col": c, "step": step} for r, c, step in puzzle.hints],
            "full_path": puzzle.full_path,
        }
