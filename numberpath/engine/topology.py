from collections import deque
from enum import Enum
from typing import Iterable, Optional, Sequence, Set, Tuple, Union

from numberpath.engine.grid import Grid, Position


class Topology(str, Enum):
    ORTHOGONAL = "orthogonal"
    DIAGONAL = "diagonal"


# geometry (points are (row, col) treated as Euclidean coordinates)
def orientation(p, q, r) -> int:
    """0 collinear, 1 clockwise, -1 counter-clockwise"""
    value = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if value == 0:
        return 0
    return 1 if value > 0 else -1


def _on_segment(p, q, r) -> bool:
    """q lies on segment p-r, given the three points are collinear"""
    return (min(p[0], r[0]) <= q[0] <= max(p[0], r[0])
            and min(p[1], r[1]) <= q[1] <= max(p[1], r[1]))


def segments_intersect(a, b, c, d) -> bool:
    """Standard orientation test for segments a-b and c-d"""
    o1 = orientation(a, b, c)
    o2 = orientation(a, b, d)
    o3 = orientation(c, d, a)
    o4 = orientation(c, d, b)

    if o1 != o2 and o3 != o4:
        return True

    # collinear special cases
    if o1 == 0 and _on_segment(a, c, b):
        return True
    if o2 == 0 and _on_segment(a, d, b):
        return True
    if o3 == 0 and _on_segment(c, a, d):
        return True
    if o4 == 0 and _on_segment(c, b, d):
        return True
    return False


def segment_crosses_path(path: Sequence, start, end) -> bool:
    """True if segment start-end crosses a segment of path it shares no endpoint with"""
    endpoints = {tuple(start), tuple(end)}
    for i in range(len(path) - 1):
        p, q = path[i], path[i + 1]
        if tuple(p) in endpoints or tuple(q) in endpoints:
            continue
        if segments_intersect(start, end, p, q):
            return True
    return False


def path_crosses_itself(path: Sequence) -> bool:
    """True if any two non-adjacent segments of path intersect"""
    for i in range(2, len(path)):
        if segment_crosses_path(path[:i - 1], path[i - 1], path[i]):
            return True
    return False


Edge = frozenset


def edge(a, b) -> Edge:
    return frozenset((Position(*a), Position(*b)))


def path_edges(path: Sequence) -> Set[Edge]:
    return {edge(a, b) for a, b in zip(path, path[1:])}


def crossing_edge(start, end) -> Optional[Edge]:
    """
    The one unit segment a single grid step could cross: the other diagonal of
    the square a diagonal step cuts through. None for straight steps.
    """
    dr, dc = end[0] - start[0], end[1] - start[1]
    if dr == 0 or dc == 0:
        return None
    return edge((start[0], start[1] + dc), (start[0] + dr, start[1]))


class TopologyStrategy:
    """ Movement rule used by the path search: neighbours, edge validity and feasibility """

    topology: Topology
    offsets: Tuple[Tuple[int, int], ...] = ()
    start_limit: int = 10
    step_budget: int = 500_000

    def is_adjacent(self, a, b) -> bool:
        return (a[0] - b[0], a[1] - b[1]) in self.offsets

    def neighbors(self, grid: Grid, pos) -> list:
        """In-bounds free neighbours of pos"""
        result = []
        for dr, dc in self.offsets:
            candidate = Position(pos[0] + dr, pos[1] + dc)
            if grid.is_free(candidate):
                result.append(candidate)
        return result

    def accepts_step(self, path: Sequence, candidate, edges: Optional[Iterable[Edge]] = None) -> bool:
        return True

    def is_connected(self, grid: Grid) -> bool:
        cells = grid.open_cells()
        if not cells:
            return True
        open_set = set(cells)
        seen = {cells[0]}
        queue = deque([cells[0]])
        while queue:
            row, col = queue.popleft()
            for dr, dc in self.offsets:
                nxt = Position(row + dr, col + dc)
                if nxt in open_set and nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == len(open_set)

    def reaches_all_free(self, grid: Grid, head) -> bool:
        """Every free cell is still reachable from the path head"""
        remaining = grid.unvisited
        seen = set()
        queue = deque([head])
        while queue:
            row, col = queue.popleft()
            for dr, dc in self.offsets:
                nxt = Position(row + dr, col + dc)
                if nxt not in seen and grid.is_free(nxt):
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == remaining

    def is_feasible(self, grid: Grid) -> bool:
        return self.is_connected(grid)

    def viable_start(self, grid: Grid, pos) -> bool:
        return True


class OrthogonalTopology(TopologyStrategy):
    """ 4-directional moves: up, right, down, left """

    topology = Topology.ORTHOGONAL
    offsets = ((-1, 0), (0, 1), (1, 0), (0, -1))
    start_limit = 10
    step_budget = 500_000

    @staticmethod
    def _colour_counts(grid: Grid) -> Tuple[int, int]:
        even = odd = 0
        for row, col in grid.open_cells():
            if (row + col) % 2 == 0:
                even += 1
            else:
                odd += 1
        return even, odd

    def is_feasible(self, grid: Grid) -> bool:
        # every orthogonal step flips the checkerboard colour
        even, odd = self._colour_counts(grid)
        if abs(even - odd) > 1:
            return False
        return self.is_connected(grid)

    def viable_start(self, grid: Grid, pos) -> bool:
        even, odd = self._colour_counts(grid)
        if even == odd:
            return True
        majority = 0 if even > odd else 1
        return (pos[0] + pos[1]) % 2 == majority


class DiagonalTopology(TopologyStrategy):
    """ 8-directional moves, the drawn line may not cross itself """

    topology = Topology.DIAGONAL
    offsets = ((-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1))
    start_limit = 20
    step_budget = 5_000

    def accepts_step(self, path: Sequence, candidate, edges: Optional[Iterable[Edge]] = None) -> bool:
        """
        Steps between adjacent cells can only cross the opposite diagonal of
        the same square, so that single edge is looked up in `edges` (the drawn
        segments, built from path when not given).
        """
        if len(path) < 3:
            return True
        head = path[-1]
        other = crossing_edge(head, candidate)
        if other is None:
            return True
        if edges is None:
            edges = path_edges(path)
        if other not in edges:
            return True
        p, q = tuple(other)
        return not segments_intersect(head, candidate, p, q)


_STRATEGIES = {
    Topology.ORTHOGONAL: OrthogonalTopology(),
    Topology.DIAGONAL: DiagonalTopology(),
}


def get_topology(topology: Union[Topology, str, TopologyStrategy]) -> TopologyStrategy:
    """Resolve an enum member, its value, or a strategy to a strategy"""
    if isinstance(topology, TopologyStrategy):
        return topology
    return _STRATEGIES[Topology(topology)]
