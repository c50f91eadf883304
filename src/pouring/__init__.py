"""Shortest-sequence solver for the water pouring puzzle."""

from __future__ import annotations

from .configuration import Configuration
from .container import Container, empty, fill, pour
from .moves import Move, MoveOp
from .report import NO_SOLUTION, render_json, render_text, report_digest, to_payload
from .search import (
    Outcome,
    SearchNode,
    SolveResult,
    SolveStep,
    is_probably_solvable,
    next_states,
    search,
    solve,
)
from .solver import Solver

__all__ = [
    "Configuration",
    "Container",
    "Move",
    "MoveOp",
    "NO_SOLUTION",
    "Outcome",
    "SearchNode",
    "SolveResult",
    "SolveStep",
    "Solver",
    "empty",
    "fill",
    "is_probably_solvable",
    "next_states",
    "pour",
    "render_json",
    "render_text",
    "report_digest",
    "search",
    "solve",
    "to_payload",
]
