"""
Hamiltonian path search.

Randomized depth-first backtracking over a grid with obstacles. The search
keeps an explicit stack of neighbour iterators instead of recursing; every
frame on the stack corresponds to one cell of the path in progress, so popping
a frame is the undo step (the cell goes back to FREE and leaves the path).
A branch is cut as soon as the unvisited cells stop being reachable from
the head of the path. The drawn segments are kept as a set of edges so the
diagonal crossing test is a single lookup.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from numberpath.engine.errors import InvalidStartError
from numberpath.engine.grid import Grid, Position
from numberpath.engine.random_source import RandomSource, resolve_rng
from numberpath.engine.topology import Topology, TopologyStrategy, edge, get_topology, path_crosses_itself

logger = logging.getLogger(__name__)

Path = Tuple[Position, ...]


def find_hamiltonian_path(
        rows: int,
        cols: int,
        obstacles: Iterable = (),
        topology=Topology.ORTHOGONAL,
        start=None,
        rng: Optional[RandomSource] = None,
        max_steps: Optional[int] = None,
        start_limit: Optional[int] = None,
) -> Optional[Path]:
    """
    Find a path visiting every free cell exactly once.
    max_steps caps the cells entered per start candidate, defaulting to the
    topology's step budget.
    Returns the path as a tuple of positions, an empty tuple when there are no free cells,
    or None when no path was found. Raises InvalidStartError if start is an obstacle.
    """
    strategy = get_topology(topology)
    rng = resolve_rng(rng)
    if max_steps is None:
        max_steps = strategy.step_budget
    grid = Grid(rows, cols, obstacles)
    target_length = grid.free_count
    logger.debug(f"Start search: {rows}x{cols}, obstacles: {grid.obstacle_count}, "
                 f"topology: {strategy.topology.value}, target length: {target_length}")

    if target_length == 0:
        return ()

    if start is not None:
        start = Position(*start)
        if not grid.in_bounds(start):
            raise ValueError(f"Start position {tuple(start)} is outside the {rows}x{cols} grid")
        if grid.is_obstacle(start):
            raise InvalidStartError(start)

    if not strategy.is_feasible(grid):
        logger.debug("Free cells cannot be covered by a single path, skipping search")
        return None

    # start candidates
    if start is not None:
        candidates = [start] if strategy.viable_start(grid, start) else []
    else:
        candidates = grid.free_cells()
        rng.shuffle(candidates)
        limit = strategy.start_limit if start_limit is None else start_limit
        candidates = [pos for pos in candidates if strategy.viable_start(grid, pos)][:limit]

    for candidate in candidates:
        logger.debug(f"Trying start: {tuple(candidate)}")
        path = _search_from(grid, strategy, candidate, target_length, rng, max_steps)
        if path is not None:
            return tuple(path)
        logger.debug(f"Start {tuple(candidate)} failed, trying next")

    logger.warning(f"No path found on {rows}x{cols} grid after {len(candidates)} start(s)")
    return None


def _expand(grid: Grid, strategy: TopologyStrategy, path: List[Position], edges: Set, rng: RandomSource):
    """Shuffled iterator over the cells the path may move to next"""
    options = [pos for pos in strategy.neighbors(grid, path[-1])
               if strategy.accepts_step(path, pos, edges)]
    rng.shuffle(options)
    return iter(options)


def _undo(grid: Grid, path: List[Position], edges: Set) -> None:
    cell = path.pop()
    grid.release(cell)
    if path:
        edges.discard(edge(path[-1], cell))


def _search_from(
        grid: Grid,
        strategy: TopologyStrategy,
        start: Position,
        target_length: int,
        rng: RandomSource,
        max_steps: int,
) -> Optional[List[Position]]:
    """Backtracking search from one start. Leaves the grid clean when it fails"""
    path = [start]
    edges = set()
    grid.visit(start)
    steps = 1
    if target_length == 1:
        return path

    stack = [_expand(grid, strategy, path, edges, rng)]
    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            # dead end, undo the last cell
            stack.pop()
            _undo(grid, path, edges)
            continue

        steps += 1
        if steps > max_steps:
            logger.debug(f"Step budget of {max_steps} exhausted from {tuple(start)}")
            for pos in path:
                grid.release(pos)
            return None

        grid.visit(nxt)
        edges.add(edge(path[-1], nxt))
        path.append(nxt)
        if len(path) == target_length:
            logger.info(f"Path found in {steps} steps")
            return path
        if not strategy.reaches_all_free(grid, nxt):
            # some free cells are cut off, nothing below this cell can finish
            _undo(grid, path, edges)
            continue
        stack.append(_expand(grid, strategy, path, edges, rng))

    return None


def is_hamiltonian_path(path: Sequence, rows: int, cols: int, obstacles: Iterable = (),
                        topology=Topology.ORTHOGONAL) -> bool:
    """Check coverage, uniqueness, adjacency and (diagonal) non-crossing of a finished path"""
    strategy = get_topology(topology)
    grid = Grid(rows, cols, obstacles)
    cells = [Position(*pos) for pos in path]

    if len(cells) != grid.free_count or len(set(cells)) != len(cells):
        return False
    if any(not grid.is_free(pos) for pos in cells):
        return False
    if any(not strategy.is_adjacent(a, b) for a, b in zip(cells, cells[1:])):
        return False
    if strategy.topology is Topology.DIAGONAL and path_crosses_itself(cells):
        return False
    return True
