"""Breadth-first search over pouring configurations."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Dict, Iterable, List, Optional, Set, Tuple

from contracts.errors import InvalidValue, require_int

from .configuration import Configuration
from .container import Container, empty, fill, pour
from .moves import Move, MoveOp

_LOGGER = logging.getLogger(__name__)


class Outcome(str, Enum):
    """How a search ended."""

    SOLVED = "solved"
    PRECHECK = "precheck"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, eq=False)
class SearchNode:
    """Queue entry linking a configuration to the node it was reached from."""

    configuration: Configuration
    parent: Optional["SearchNode"] = None
    move: Optional[Move] = None

    def lineage(self) -> List["SearchNode"]:
        """Return the nodes from the root down to this one."""

        chain: List[SearchNode] = []
        node: Optional[SearchNode] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain


@dataclass(frozen=True)
class SolveStep:
    """One configuration on the solution path and the move that produced it."""

    index: int
    configuration: Configuration
    move: Optional[Move] = None


@dataclass(frozen=True)
class SolveResult:
    """Outcome of solving one puzzle.

    ``path`` runs from the all-empty start to the first configuration holding
    ``goal``; it is empty when no solution exists.  ``explored`` counts the
    configurations taken off the queue and expanded.
    """

    goal: int
    capacities: Tuple[int, ...]
    reason: Outcome
    path: Tuple[SolveStep, ...] = ()
    explored: int = 0

    @property
    def solved(self) -> bool:
        return self.reason is Outcome.SOLVED

    @property
    def moves(self) -> Optional[int]:
        if not self.solved:
            return None
        return len(self.path) - 1


def validate_request(goal: int, capacities: Iterable[int]) -> Tuple[int, ...]:
    """Check the puzzle request and return the capacities as a tuple."""

    goal = require_int(goal, "goal")
    if goal < 0:
        raise InvalidValue("invalid-goal", f"goal must be >= 0, got {goal}")
    if isinstance(capacities, (str, bytes)):
        raise InvalidValue("invalid-capacities", "capacities must be a sequence of integers")
    declared = tuple(capacities)
    if not declared:
        raise InvalidValue("invalid-capacities", "at least one capacity is required")
    for index, capacity in enumerate(declared):
        if require_int(capacity, f"capacities[{index}]") <= 0:
            raise InvalidValue("invalid-capacity", f"capacities[{index}] must be > 0, got {capacity}")
    return declared


def is_probably_solvable(goal: int, capacities: Iterable[int]) -> bool:
    """Return ``True`` when some capacity strictly exceeds ``goal``.

    Only rules out goals that cannot sit below any container's rim; goals that
    are unreachable for number-theoretic reasons still need the search.
    """

    return any(goal < capacity for capacity in capacities)


def initial_configuration(capacities: Iterable[int]) -> Configuration:
    return Configuration(Container(capacity) for capacity in capacities)


def is_solution(configuration: Configuration, goal: int) -> bool:
    return configuration.has_level(goal)


def next_states(configuration: Configuration) -> Dict[Configuration, Move]:
    """Return every configuration one move away, keyed to the move reaching it.

    Empties are generated first, then fills, then pours over ordered pairs.
    When several moves lead to the same configuration the first one is kept.
    """

    successors: Dict[Configuration, Move] = {}
    containers = tuple(configuration)

    def _add(old: Tuple[Container, ...], new: Tuple[Container, ...], move: Move) -> None:
        successors.setdefault(configuration.replace(old, new), move)

    for glass in containers:
        if not glass.is_empty:
            _add((glass,), (empty(glass),), Move(MoveOp.EMPTY, glass))

    for glass in containers:
        if not glass.is_full:
            _add((glass,), (fill(glass),), Move(MoveOp.FILL, glass))

    for source in containers:
        for dest in containers:
            if source != dest and not source.is_empty and not dest.is_full:
                _add((source, dest), pour(source, dest), Move(MoveOp.POUR, source, dest))

    return successors


def search(start: Configuration, goal: int) -> Tuple[Optional[SearchNode], int]:
    """Run the breadth-first search from ``start``.

    Returns the node holding the first solution found (``None`` when the
    reachable space is exhausted) and the number of expanded configurations.
    """

    visited: Set[Configuration] = {start}
    queue: Deque[SearchNode] = deque([SearchNode(start)])
    explored = 0

    while queue and not is_solution(queue[0].configuration, goal):
        node = queue.popleft()
        explored += 1
        for configuration, move in next_states(node.configuration).items():
            if configuration not in visited:
                visited.add(configuration)
                queue.append(SearchNode(configuration, node, move))

    _LOGGER.debug("search finished: explored=%d visited=%d", explored, len(visited))
    if not queue:
        return None, explored
    return queue[0], explored


def solve(goal: int, capacities: Iterable[int]) -> SolveResult:
    """Find a shortest move sequence reaching ``goal`` in some container."""

    declared = validate_request(goal, capacities)

    if not is_probably_solvable(goal, declared):
        _LOGGER.info("goal %d does not fit below the rim of any of %s", goal, list(declared))
        return SolveResult(goal=goal, capacities=declared, reason=Outcome.PRECHECK)

    end, explored = search(initial_configuration(declared), goal)
    if end is None:
        _LOGGER.info("goal %d unreachable with %s after %d states", goal, list(declared), explored)
        return SolveResult(goal=goal, capacities=declared, reason=Outcome.EXHAUSTED, explored=explored)

    path = tuple(
        SolveStep(index=index, configuration=node.configuration, move=node.move)
        for index, node in enumerate(end.lineage())
    )
    _LOGGER.info("goal %d solved in %d moves (%d states expanded)", goal, len(path) - 1, explored)
    return SolveResult(
        goal=goal,
        capacities=declared,
        reason=Outcome.SOLVED,
        path=path,
        explored=explored,
    )


__all__ = [
    "Outcome",
    "SearchNode",
    "SolveResult",
    "SolveStep",
    "initial_configuration",
    "is_probably_solvable",
    "is_solution",
    "next_states",
    "search",
    "solve",
    "validate_request",
]
