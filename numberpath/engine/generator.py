import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

from numberpath.engine.errors import ObstaclePlacementFailed, PuzzleGenerationError
from numberpath.engine.grid import Position
from numberpath.engine.hamiltonian import find_hamiltonian_path
from numberpath.engine.levels import level_config
from numberpath.engine.masking import mask_puzzle
from numberpath.engine.obstacles import place_obstacles
from numberpath.engine.random_source import RandomSource, resolve_rng
from numberpath.engine.topology import Topology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleInstance:
    rows: int
    cols: int
    topology: Topology
    obstacles: FrozenSet[Position]
    hints: Dict[Position, int] = field(hash=False)
    full_path: Tuple[Position, ...]
    hidden_rate: float = 0.0
    level: Optional[int] = None

    @property
    def total_steps(self) -> int:
        return len(self.full_path)

    @property
    def free_cells(self) -> int:
        return self.rows * self.cols - len(self.obstacles)

    def hint_at(self, pos) -> Optional[int]:
        return self.hints.get(Position(*pos))


def generate_puzzle(
        rows: int,
        cols: int,
        hidden_rate: float,
        obstacle_count: int = 0,
        topology=Topology.ORTHOGONAL,
        rng: Optional[RandomSource] = None,
        retries: int = 10,
        obstacle_attempts: int = 50,
        max_steps: Optional[int] = None,
        start_limit: Optional[int] = None,
        level: Optional[int] = None,
) -> PuzzleInstance:
    """ Obstacles -> path -> hints, retried up to `retries` times """
    topology = Topology(topology)
    rng = resolve_rng(rng)

    for attempt in range(1, retries + 1):
        obstacles = place_obstacles(rows, cols, obstacle_count, max_attempts=obstacle_attempts,
                                    topology=topology, rng=rng, max_steps=max_steps,
                                    start_limit=start_limit)
        if obstacles is None:
            error = ObstaclePlacementFailed(rows, cols, obstacle_count, obstacle_attempts)
            logger.warning(f"Attempt {attempt}/{retries}: {error}")
            continue

        path = find_hamiltonian_path(rows, cols, obstacles, topology=topology, rng=rng,
                                     max_steps=max_steps, start_limit=start_limit)
        if path is None:
            logger.warning(f"Attempt {attempt}/{retries}: no path for the placed obstacles")
            continue

        hints = mask_puzzle(path, hidden_rate, rng=rng)
        logger.info(f"Generated {rows}x{cols} {topology.value} puzzle with "
                    f"{len(hints)}/{len(path)} hints on attempt {attempt}")
        return PuzzleInstance(
            rows=rows,
            cols=cols,
            topology=topology,
            obstacles=obstacles,
            hints=hints,
            full_path=path,
            hidden_rate=hidden_rate,
            level=level,
        )

    label = f"Level {level}" if level is not None else f"{rows}x{cols} puzzle"
    raise PuzzleGenerationError(f"{label} could not be generated, please try again")


def generate_level(level: int, topology=Topology.ORTHOGONAL, rng: Optional[RandomSource] = None,
                   **kwargs) -> PuzzleInstance:
    config = level_config(level, rng=rng)
    return generate_puzzle(
        config.rows,
        config.cols,
        config.hidden_rate,
        obstacle_count=config.obstacle_count,
        topology=topology,
        rng=rng,
        level=config.level,
        **kwargs,
    )
