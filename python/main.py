#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py                     # scramble and solve a 3×3 grid
    python main.py -W 4 -H 4 -d 2.0    # 4×4, inflated heuristic
    python main.py -s novice --animate # watch a novice computer player
    python main.py -t 500 -v           # 500 ms budget, debug logging
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidecore.engine.gameplay import Skill  # noqa: E402
from slidecore.models import (  # noqa: E402
    DEFAULT_SCRAMBLING_MAGNITUDE,
    MAX_DIMENSION_LENGTH,
    MIN_DIMENSION_LENGTH,
)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    width: int = typer.Option(
        3, "-W", "--width",
        min=MIN_DIMENSION_LENGTH, max=MAX_DIMENSION_LENGTH,
        help="Grid width (3-8).",
    ),
    height: int = typer.Option(
        3, "-H", "--height",
        min=MIN_DIMENSION_LENGTH, max=MAX_DIMENSION_LENGTH,
        help="Grid height (3-8).",
    ),
    magnitude: float = typer.Option(
        DEFAULT_SCRAMBLING_MAGNITUDE, "-m", "--magnitude",
        min=1.0,
        help="How hard to scramble the grid.",
    ),
    divert_factor: float = typer.Option(
        1.0, "-d", "--divert-factor",
        min=1.0,
        help="Heuristic multiplier; above 1.0 trades optimality for speed.",
    ),
    timeout: int = typer.Option(
        10_000, "-t", "--timeout",
        min=0,
        help="Search budget in milliseconds (0 = unbounded).",
    ),
    skill: Optional[Skill] = typer.Option(
        None, "-s", "--skill",
        help="Let a computer player of this skill play instead of solving directly.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
    animate: bool = typer.Option(
        False, "--animate/--no-animate",
        help="Redraw the grid after every move.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Show solver debug logging.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    from frontend.cli.rich.app import run

    _configure_logging(verbose)
    code = run(
        width=width,
        height=height,
        magnitude=magnitude,
        divert_factor=divert_factor,
        timeout=timeout,
        skill=skill,
        seed=seed,
        animate=animate,
    )
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
