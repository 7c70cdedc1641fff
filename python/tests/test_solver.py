"""IDA* solver tests.

Every solution is replayed move by move on a fresh copy of the initial
grid to check it really reaches the goal.  Each test is hard-killed by
``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import random

import pytest

from slidecore.engine.gamesolver import (
    IDAStar,
    ManhattanDistance,
    SearchTimeout,
    Solution,
    State,
    ZeroHeuristic,
)
from slidecore.models import Grid, Position

# Start positions of a 13-step walk away from the solved 3×3 grid.  The
# result has a Manhattan distance of 9.
_WALK_3x3 = (
    Position(0, 2), Position(0, 0), Position(2, 0), Position(2, 2),
    Position(1, 2), Position(1, 0), Position(0, 0), Position(0, 1),
)


# -- helpers ------------------------------------------------------------------


def _walked(width: int, height: int, starts: tuple[Position, ...]) -> Grid:
    grid = Grid(width, height)
    for start in starts:
        assert grid.move_from(start), f"illegal start {start}"
    return grid


def _scrambled(width: int, height: int, magnitude: float, seed: int) -> Grid:
    grid = Grid(width, height)
    grid.scramble(magnitude, random.Random(seed))
    return grid


def _solve(grid: Grid, solver: IDAStar) -> Solution:
    return solver.solve(State(grid.clone()), State(Grid(grid.width, grid.height)))


def _assert_replays_to_goal(initial: Grid, solution: Solution) -> None:
    goal = Grid(initial.width, initial.height)
    path = solution.path

    assert path.nodes[-1].state == State(goal)
    assert path.nodes[0].move is None
    assert len(path) == path.nodes[-1].cost + 1

    grid = initial.clone()
    for i, move in enumerate(path.moves):
        assert grid.get_move_count_from(move.origin) == 1, f"move {i} is not adjacent"
        assert grid.move_from(move.origin), f"move {i} from {move.origin} was illegal"
        assert grid == path.nodes[i + 1].state.grid
    assert grid == goal
    assert grid.is_solved


# -- arguments ----------------------------------------------------------------


def test_solve_rejects_missing_states() -> None:
    solver = IDAStar()
    state = State(Grid(3, 3))
    with pytest.raises(ValueError):
        solver.solve(None, state)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        solver.solve(state, None)  # type: ignore[arg-type]


def test_default_heuristic_and_timeout() -> None:
    solver = IDAStar()
    assert isinstance(solver.heuristic, ManhattanDistance)
    assert solver.timeout == 0

    solver.heuristic = ZeroHeuristic()
    assert isinstance(solver.heuristic, ZeroHeuristic)
    solver.heuristic = None
    assert isinstance(solver.heuristic, ManhattanDistance)

    with pytest.raises(ValueError):
        IDAStar(timeout=-1)


# -- solving ------------------------------------------------------------------


def test_already_solved() -> None:
    solution = IDAStar().solve(State(Grid(3, 3)), State(Grid(3, 3)))
    assert len(solution.path) == 1
    assert solution.path.moves == []
    assert solution.expanded_node_count == 0
    assert solution.elapsed_time >= 0.0


def test_one_move_away() -> None:
    grid = _walked(3, 3, (Position(1, 2),))
    solution = _solve(grid, IDAStar())

    assert len(solution.path) == 2
    assert solution.path.moves[0].origin == Position(2, 2)
    assert solution.path.moves[0].destination == Position(1, 2)
    assert solution.expanded_node_count == 1
    _assert_replays_to_goal(grid, solution)


def test_line_slide_costs_one_per_cell_for_the_solver() -> None:
    # One two-cell slide away, but the solver only moves adjacent cells.
    grid = _walked(3, 3, (Position(0, 2),))
    solution = _solve(grid, IDAStar())
    assert len(solution.path) == 3
    _assert_replays_to_goal(grid, solution)


def test_walked_grid_is_solved_within_walk_length() -> None:
    grid = _walked(3, 3, _WALK_3x3)
    solution = _solve(grid, IDAStar())
    moves = len(solution.path) - 1
    assert 9 <= moves <= 13
    assert moves % 2 == 1
    _assert_replays_to_goal(grid, solution)


@pytest.mark.parametrize("seed", range(3))
def test_scrambled_3x3(seed: int) -> None:
    grid = _scrambled(3, 3, 10.0, seed)
    solution = _solve(grid, IDAStar(ManhattanDistance(1.5)))
    assert solution.expanded_node_count > 0
    _assert_replays_to_goal(grid, solution)


@pytest.mark.parametrize("width,height", [(4, 4), (3, 5), (5, 3)])
def test_lightly_scrambled_larger_grids(width: int, height: int) -> None:
    grid = _scrambled(width, height, 1.0, 11)
    solution = _solve(grid, IDAStar(ManhattanDistance(2.0)))
    _assert_replays_to_goal(grid, solution)


def test_zero_heuristic_still_solves() -> None:
    grid = _walked(3, 3, (Position(1, 2), Position(1, 1)))
    informed = _solve(grid, IDAStar())
    blind = _solve(grid, IDAStar(ZeroHeuristic()))

    assert len(blind.path) == len(informed.path) == 3
    assert blind.expanded_node_count > informed.expanded_node_count
    _assert_replays_to_goal(grid, blind)


def test_hint() -> None:
    solver = IDAStar()
    grid = _walked(3, 3, (Position(2, 1),))
    move = solver.hint(State(grid), State(Grid(3, 3)))
    assert move is not None
    assert move.origin == Position(2, 2)
    assert solver.hint(State(Grid(3, 3)), State(Grid(3, 3))) is None


# -- divert factor ------------------------------------------------------------


@pytest.mark.parametrize(
    "grid",
    [
        _walked(3, 3, _WALK_3x3),
        _scrambled(3, 3, 1.0, 0),
        _scrambled(3, 3, 1.0, 1),
        _scrambled(3, 3, 1.0, 2),
    ],
    ids=["walk", "seed0", "seed1", "seed2"],
)
def test_admissible_path_is_never_longer(grid: Grid) -> None:
    optimal = _solve(grid, IDAStar(ManhattanDistance(1.0)))
    inflated = _solve(grid, IDAStar(ManhattanDistance(4.0)))

    assert len(optimal.path) <= len(inflated.path)
    _assert_replays_to_goal(grid, optimal)
    _assert_replays_to_goal(grid, inflated)


# -- timeout ------------------------------------------------------------------


def test_timeout_on_large_grid() -> None:
    grid = _scrambled(8, 8, 10.0, 4)
    solver = IDAStar(ManhattanDistance(4.0), timeout=1)

    with pytest.raises(SearchTimeout) as excinfo:
        _solve(grid, solver)

    assert isinstance(excinfo.value, TimeoutError)
    assert excinfo.value.timeout == 1
    assert excinfo.value.elapsed_time * 1000.0 > 1
    assert excinfo.value.expanded_node_count >= 1


def test_solver_is_reusable_after_timeout() -> None:
    solver = IDAStar(ManhattanDistance(4.0), timeout=1)
    with pytest.raises(SearchTimeout):
        _solve(_scrambled(8, 8, 10.0, 5), solver)

    solver.timeout = 0
    solution = solver.solve(State(Grid(3, 3)), State(Grid(3, 3)))
    assert solution.expanded_node_count == 0
