import logging
from typing import FrozenSet, Optional

from numberpath.engine.grid import Position
from numberpath.engine.hamiltonian import find_hamiltonian_path
from numberpath.engine.random_source import RandomSource, resolve_rng
from numberpath.engine.topology import Topology

logger = logging.getLogger(__name__)


def place_obstacles(
        rows: int,
        cols: int,
        count: int,
        max_attempts: int = 50,
        topology=Topology.ORTHOGONAL,
        rng: Optional[RandomSource] = None,
        max_steps: Optional[int] = None,
        start_limit: Optional[int] = None,
) -> Optional[FrozenSet[Position]]:
    """
    Pick `count` obstacle cells that still leave a path through every free cell.
    Each candidate layout is validated with a path search under `topology`.
    Returns None if no layout validates within `max_attempts`.
    """
    if count <= 0:
        return frozenset()

    total_cells = rows * cols
    if count >= total_cells:
        logger.warning(f"Obstacle count {count} leaves no free cell on a {rows}x{cols} grid")
        return None

    rng = resolve_rng(rng)
    all_positions = [Position(r, c) for r in range(rows) for c in range(cols)]

    for attempt in range(max_attempts):
        shuffled = list(all_positions)
        rng.shuffle(shuffled)
        obstacles = frozenset(shuffled[:count])

        path = find_hamiltonian_path(rows, cols, obstacles, topology=topology, rng=rng,
                                     max_steps=max_steps, start_limit=start_limit)
        if path:
            logger.info(f"Placed {count} obstacles after {attempt + 1} attempt(s)")
            return obstacles

    logger.warning(f"No valid layout for {count} obstacles after {max_attempts} attempts")
    return None
