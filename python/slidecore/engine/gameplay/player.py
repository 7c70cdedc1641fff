"""Computer-controlled player built on the IDA* solver."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import StrEnum

from slidecore.engine.gamesolver import IDAStar, ManhattanDistance, SearchTimeout, State
from slidecore.models.grid import Grid
from slidecore.models.position import Position

logger = logging.getLogger(__name__)


class Skill(StrEnum):
    NOVICE = "novice"
    AVERAGE = "average"
    EXPERT = "expert"


@dataclass(frozen=True)
class IQProfile:
    """How well and how fast a computer player solves.

    All times are in milliseconds.
    """

    divert_factor: float
    max_solve_time: int
    min_think_time: int
    max_think_time: int

    @classmethod
    def for_skill(cls, skill: Skill) -> IQProfile:
        return _PROFILES[Skill(skill)]


_PROFILES: dict[Skill, IQProfile] = {
    Skill.NOVICE: IQProfile(divert_factor=4.0, max_solve_time=250, min_think_time=800, max_think_time=2000),
    Skill.AVERAGE: IQProfile(divert_factor=2.0, max_solve_time=1000, min_think_time=400, max_think_time=1200),
    Skill.EXPERT: IQProfile(divert_factor=1.0, max_solve_time=5000, min_think_time=150, max_think_time=500),
}


class ArtificialPlayer:
    """Plays a grid one move at a time.

    A full solution is computed when no moves are queued.  If the solver
    runs out of time the player makes a random move next to the blank.
    """

    def __init__(self, profile: IQProfile, rng: random.Random | None = None) -> None:
        self._solver = IDAStar(ManhattanDistance())
        self._moves: deque[Position] = deque()
        self._rng = rng or random.Random()
        self.profile = profile

    @property
    def profile(self) -> IQProfile:
        return self._profile

    @profile.setter
    def profile(self, value: IQProfile) -> None:
        self._profile = value
        self._solver.timeout = value.max_solve_time
        heuristic = self._solver.heuristic
        if isinstance(heuristic, ManhattanDistance):
            heuristic.divert_factor = value.divert_factor

    @property
    def solver(self) -> IDAStar:
        return self._solver

    @property
    def queued_moves(self) -> int:
        return len(self._moves)

    def reset(self) -> None:
        self._moves.clear()

    def think_time(self) -> int:
        """Draw how long to wait before the next move, in milliseconds."""
        return self._rng.randint(self._profile.min_think_time, self._profile.max_think_time)

    def next_move(self, grid: Grid) -> Position | None:
        """Return where the next move on *grid* starts, ``None`` once solved."""
        if grid.is_solved:
            self._moves.clear()
            return None

        # Drop a plan that no longer fits a grid changed behind our back.
        if self._moves and grid.get_move_count_from(self._moves[0]) != 1:
            logger.debug("Discarding %d stale queued moves", len(self._moves))
            self._moves.clear()

        if not self._moves:
            goal = grid.clone()
            goal.reset()
            try:
                solution = self._solver.solve(State(grid.clone()), State(goal))
            except SearchTimeout as exc:
                logger.warning("Falling back to a random move: %s", exc)
                return self._rng.choice(grid.get_possible_start_positions(True))
            self._moves.extend(move.origin for move in solution.path.moves)

        return self._moves.popleft()
