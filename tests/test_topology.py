from itertools import permutations

import pytest

from numberpath.engine import Grid, Position, Topology, get_topology
from numberpath.engine.topology import (
    DiagonalTopology,
    OrthogonalTopology,
    crossing_edge,
    edge,
    path_crosses_itself,
    path_edges,
    segment_crosses_path,
    segments_intersect,
)


def test_get_topology_accepts_enum_and_value():
    assert isinstance(get_topology(Topology.ORTHOGONAL), OrthogonalTopology)
    assert isinstance(get_topology("diagonal"), DiagonalTopology)
    strategy = DiagonalTopology()
    assert get_topology(strategy) is strategy
    with pytest.raises(ValueError):
        get_topology("hexagonal")


def test_orthogonal_adjacency():
    strategy = get_topology(Topology.ORTHOGONAL)
    assert strategy.is_adjacent((1, 1), (0, 1))
    assert strategy.is_adjacent((1, 1), (1, 2))
    assert not strategy.is_adjacent((1, 1), (2, 2))
    assert not strategy.is_adjacent((1, 1), (1, 1))
    assert not strategy.is_adjacent((1, 1), (1, 3))


def test_diagonal_adjacency():
    strategy = get_topology(Topology.DIAGONAL)
    assert strategy.is_adjacent((1, 1), (2, 2))
    assert strategy.is_adjacent((1, 1), (0, 1))
    assert not strategy.is_adjacent((1, 1), (1, 1))
    assert not strategy.is_adjacent((0, 0), (2, 1))


def test_neighbors_skip_obstacles_and_edges():
    grid = Grid(3, 3, [(0, 1)])
    orthogonal = get_topology(Topology.ORTHOGONAL)
    assert set(orthogonal.neighbors(grid, (0, 0))) == {Position(1, 0)}
    diagonal = get_topology(Topology.DIAGONAL)
    assert set(diagonal.neighbors(grid, (0, 0))) == {Position(1, 0), Position(1, 1)}


def test_crossing_diagonals_intersect():
    assert segments_intersect((0, 0), (1, 1), (0, 1), (1, 0))


def test_parallel_segments_do_not_intersect():
    assert not segments_intersect((0, 0), (1, 1), (0, 1), (1, 2))
    assert not segments_intersect((0, 0), (0, 1), (1, 0), (1, 1))


def test_collinear_overlap_intersects():
    assert segments_intersect((0, 0), (0, 2), (0, 1), (0, 3))


def test_shared_endpoint_is_not_a_crossing():
    path = [(0, 0), (1, 1)]
    assert not segment_crosses_path(path, (1, 1), (0, 2))


def test_diagonal_rejects_crossing_step():
    strategy = get_topology(Topology.DIAGONAL)
    path = [Position(0, 0), Position(1, 1), Position(1, 0)]
    assert not strategy.accepts_step(path, Position(0, 1))
    assert strategy.accepts_step(path, Position(2, 0))
    assert strategy.accepts_step(path, Position(2, 1))


def test_orthogonal_accepts_any_step():
    strategy = get_topology(Topology.ORTHOGONAL)
    assert strategy.accepts_step([Position(0, 0), Position(1, 1), Position(1, 0)], Position(0, 1))


def test_path_crosses_itself():
    assert path_crosses_itself([(0, 0), (1, 1), (1, 0), (0, 1)])
    assert not path_crosses_itself([(0, 0), (0, 1), (1, 0), (1, 1)])


def test_orthogonal_colour_balance():
    strategy = get_topology(Topology.ORTHOGONAL)
    # removing an odd cell from 3x3 leaves 5 even vs 3 odd
    assert not strategy.is_feasible(Grid(3, 3, [(0, 1)]))
    assert strategy.is_feasible(Grid(3, 3, [(0, 0)]))


def test_disconnected_grid_is_infeasible():
    grid = Grid(1, 3, [(0, 1)])
    assert not get_topology(Topology.ORTHOGONAL).is_feasible(grid)
    assert not get_topology(Topology.DIAGONAL).is_feasible(grid)


def test_diagonal_connects_through_corners():
    grid = Grid(2, 2, [(0, 1), (1, 0)])
    assert not get_topology(Topology.ORTHOGONAL).is_feasible(grid)
    assert get_topology(Topology.DIAGONAL).is_feasible(grid)


def test_orthogonal_start_must_be_on_majority_colour():
    strategy = get_topology(Topology.ORTHOGONAL)
    grid = Grid(3, 3)
    assert strategy.viable_start(grid, (0, 0))
    assert strategy.viable_start(grid, (1, 1))
    assert not strategy.viable_start(grid, (0, 1))
    # balanced colours allow any start
    assert strategy.viable_start(Grid(2, 2), (0, 1))


def test_reaches_all_free_detects_cut_off_cells():
    strategy = get_topology(Topology.ORTHOGONAL)
    grid = Grid(3, 3)
    # the left column is walled off from the head
    for pos in [(0, 1), (1, 1), (2, 1), (2, 2)]:
        grid.visit(pos)
    assert not strategy.reaches_all_free(grid, Position(2, 2))

    grid = Grid(3, 3)
    for pos in [(0, 0), (0, 1), (0, 2)]:
        grid.visit(pos)
    assert strategy.reaches_all_free(grid, Position(0, 2))


def test_crossing_edge_is_the_other_diagonal():
    assert crossing_edge((1, 1), (2, 2)) == edge((1, 2), (2, 1))
    assert crossing_edge((1, 1), (0, 2)) == edge((1, 2), (0, 1))
    assert crossing_edge((1, 1), (1, 2)) is None
    assert crossing_edge((1, 1), (0, 1)) is None


def test_edge_lookup_matches_full_scan():
    strategy = get_topology(Topology.DIAGONAL)
    cells = [Position(r, c) for r in range(2) for c in range(3)]
    for order in permutations(cells):
        if any(not strategy.is_adjacent(a, b) for a, b in zip(order, order[1:])):
            continue
        for length in range(3, len(order)):
            path = list(order[:length])
            edges = path_edges(path)
            for candidate in cells:
                if candidate in path or not strategy.is_adjacent(path[-1], candidate):
                    continue
                expected = not segment_crosses_path(path, path[-1], candidate)
                assert strategy.accepts_step(path, candidate, edges) is expected
                assert strategy.accepts_step(path, candidate) is expected


def test_reaches_all_free_ignores_visited_cells():
    strategy = get_topology(Topology.DIAGONAL)
    grid = Grid(1, 4)
    grid.visit((0, 0))
    grid.visit((0, 1))
    assert strategy.reaches_all_free(grid, Position(0, 1))
    grid.release((0, 0))
    grid.visit((0, 2))
    # (0, 0) is free again but the drawn cells sit between it and the head
    assert not strategy.reaches_all_free(grid, Position(0, 2))
