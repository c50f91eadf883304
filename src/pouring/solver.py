"""Solver facade: solve on construction, render on request."""

from __future__ import annotations

from typing import Iterable

from .report import render_text
from .search import SolveResult, solve


class Solver:
    """Solve a pouring puzzle for ``goal`` over containers of ``capacities``.

    The search runs eagerly in the constructor; invalid requests raise
    :class:`contracts.errors.InvalidValue` before any search starts.
    """

    def __init__(self, goal: int, capacities: Iterable[int]) -> None:
        self.outcome: SolveResult = solve(goal, capacities)

    @property
    def moves(self) -> int:
        """Number of moves in the solution, ``-1`` when there is none."""

        moves = self.outcome.moves
        return -1 if moves is None else moves

    def result(self) -> str:
        return render_text(self.outcome)


__all__ = ["Solver"]
