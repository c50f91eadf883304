"""Text and structured renderings of a :class:`SolveResult`."""

from __future__ import annotations

from typing import Any, Dict, List

from contracts.jsoncanon import jcs_dump, jcs_sha256
from contracts.schema_validator import validate_report

from .configuration import Configuration
from .search import SolveResult

NO_SOLUTION = "No solution possible."


def render_text(result: SolveResult) -> str:
    """Render ``result`` as the human-readable move listing."""

    if not result.solved:
        return NO_SOLUTION

    lines = [f"# moves: {result.moves}\n"]
    for step in result.path:
        lines.append(f"Step {step.index}:\n")
        lines.append(f"{step.configuration}\n")
    return "".join(lines)


def _containers_payload(configuration: Configuration) -> List[Dict[str, int]]:
    return [{"capacity": glass.capacity, "level": glass.level} for glass in configuration]


def to_payload(result: SolveResult) -> Dict[str, Any]:
    """Return the structured report for ``result``.

    Unsolved puzzles produce ``solved: false`` with no moves and no steps,
    whatever the reason the search gave up.
    """

    return {
        "goal": result.goal,
        "capacities": list(result.capacities),
        "solved": result.solved,
        "moves": result.moves,
        "steps": [
            {
                "step": step.index,
                "move": None if step.move is None else step.move.to_payload(),
                "containers": _containers_payload(step.configuration),
            }
            for step in result.path
        ],
    }


def render_json(result: SolveResult) -> str:
    payload = to_payload(result)
    validate_report(payload)
    return jcs_dump(payload).decode("utf-8")


def report_digest(result: SolveResult) -> str:
    return jcs_sha256(to_payload(result))


__all__ = ["NO_SOLUTION", "render_json", "render_text", "report_digest", "to_payload"]
