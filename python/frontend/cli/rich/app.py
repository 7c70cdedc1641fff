"""Rich terminal frontend — scrambles a grid and shows it being solved.

Uses the ``rich`` library for styled output.  Either the IDA* solver is
run directly and its solution replayed, or a computer player with a given
skill plays the grid move by move.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.engine.gameplay import ArtificialPlayer, IQProfile, Skill
from slidecore.engine.gamesolver import IDAStar, ManhattanDistance, SearchTimeout, Solution, State
from slidecore.models import Grid, Position

console = Console()

# A computer player that keeps timing out could wander forever.
MAX_PLAYER_MOVES = 10_000


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:05.2f}"


# -- grid rendering -----------------------------------------------------------


def _render_grid(grid: Grid) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.width * grid.height - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.width):
        table.add_column(width=width + 1, justify="center")

    for y in range(grid.height):
        cells: list[str] = []
        for x in range(grid.width):
            position = Position(x, y)
            label = grid.get_order(position) + 1
            if position == grid.blank_position:
                cells.append("[dim]·[/dim]")
            elif grid.is_cell_correct(position):
                cells.append(f"[bold green]{label:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{label:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _grid_panel(grid: Grid, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(_render_grid(grid)),
        title=f"[bold]{title}  {grid.width}×{grid.height}[/bold]",
        border_style=style,
        padding=(1, 2),
    )


def _render_stats(solution: Solution) -> Table:
    table = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")
    table.add_row("Moves", str(len(solution.path) - 1))
    table.add_row("Expanded nodes", f"{solution.expanded_node_count:,}")
    table.add_row("Search time", _format_time(solution.elapsed_time))
    return table


def _show_step(grid: Grid, title: str, progress: Text, animate: bool) -> None:
    if not animate:
        return
    console.clear()
    console.print()
    console.print(Align.center(_grid_panel(grid, title, "cyan")))
    console.print(Align.center(progress))
    sys.stdout.flush()
    time.sleep(0.05)


# -- runs ---------------------------------------------------------------------


def _replay(grid: Grid, solution: Solution, animate: bool) -> None:
    moves = solution.path.moves
    for i, move in enumerate(moves):
        grid.move_from(move.origin)

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"(from {move.origin})", style="dim")
        _show_step(grid, "Auto-Solve", progress, animate)


def _solve(grid: Grid, solver: IDAStar, animate: bool) -> int:
    goal = grid.clone()
    goal.reset()
    try:
        with console.status("[cyan]Searching…[/cyan]"):
            solution = solver.solve(State(grid.clone()), State(goal))
    except SearchTimeout as exc:
        console.print(f"[red]Gave up:[/red] {exc}")
        return 1

    _replay(grid, solution, animate)
    console.print(Align.center(_grid_panel(grid, "Solved", "bold green")))
    console.print(Align.center(_render_stats(solution)))
    return 0


def _play(grid: Grid, skill: Skill, rng: random.Random, animate: bool) -> int:
    player = ArtificialPlayer(IQProfile.for_skill(skill), rng)
    moves = 0
    while not grid.is_solved and moves < MAX_PLAYER_MOVES:
        start = player.next_move(grid)
        if start is None:
            break
        grid.move_from(start)
        moves += 1

        progress = Text()
        progress.append(f"  {skill.value.title()} player, move {moves} ", style="bold cyan")
        progress.append(f"(from {start})", style="dim")
        _show_step(grid, "Computer Player", progress, animate)

    if not grid.is_solved:
        console.print(f"[red]The {skill.value} player gave up after {moves} moves.[/red]")
        return 1
    console.print(Align.center(_grid_panel(grid, "Solved", "bold green")))
    console.print(
        Align.center(Text(f"{skill.value.title()} player solved it in {moves} moves.", style="bold green"))
    )
    return 0


# -- public entry point -------------------------------------------------------


def run(
    width: int,
    height: int,
    magnitude: float,
    divert_factor: float = 1.0,
    timeout: int = 0,
    skill: Skill | None = None,
    seed: int | None = None,
    animate: bool = False,
) -> int:
    """Scramble a grid, solve it, and return a process exit code."""
    rng = random.Random(seed)
    grid = Grid(width, height)
    grid.scramble(magnitude, rng)

    console.print()
    console.print(Align.center(_grid_panel(grid, "Scrambled")))

    if skill is not None:
        return _play(grid, skill, rng, animate)
    solver = IDAStar(ManhattanDistance(divert_factor), timeout)
    return _solve(grid, solver, animate)
