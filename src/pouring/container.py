"""Container value object for the pouring puzzle."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from contracts.errors import InvalidValue, require_int


@dataclass(frozen=True, slots=True)
class Container:
    """Immutable vessel with a fixed ``capacity`` and a current ``level``.

    Two containers are equal when both fields match.  Transformations never
    mutate the receiver; they return a container describing the new level.
    """

    capacity: int
    level: int = 0

    def __post_init__(self) -> None:
        capacity = require_int(self.capacity, "capacity")
        level = require_int(self.level, "level")
        if capacity <= 0:
            raise InvalidValue("invalid-capacity", f"capacity must be > 0, got {capacity}")
        if not 0 <= level <= capacity:
            raise InvalidValue("invalid-level", f"level must be in [0, {capacity}], got {level}")

    @property
    def is_empty(self) -> bool:
        return self.level == 0

    @property
    def is_full(self) -> bool:
        return self.level == self.capacity

    @property
    def free(self) -> int:
        """Room left below the rim."""

        return self.capacity - self.level

    def sort_key(self) -> Tuple[int, int]:
        return (self.capacity, self.level)

    def __str__(self) -> str:
        return f"Capacity: {self.capacity}, content: {self.level}"


def empty(container: Container) -> Container:
    """Return ``container`` with level 0."""

    if container.is_empty:
        return container
    return replace(container, level=0)


def fill(container: Container) -> Container:
    """Return ``container`` filled to its capacity."""

    if container.is_full:
        return container
    return replace(container, level=container.capacity)


def pour(source: Container, dest: Container) -> Tuple[Container, Container]:
    """Pour from ``source`` into ``dest`` until one is empty or the other full.

    Returns ``(new_source, new_dest)``.  The total quantity is conserved, and
    the inputs come back unchanged when ``dest`` is full or ``source`` empty.
    """

    if dest.is_full or source.is_empty:
        return source, dest

    amount = min(source.level, dest.free)
    return (
        replace(source, level=source.level - amount),
        replace(dest, level=dest.level + amount),
    )


__all__ = ["Container", "empty", "fill", "pour"]
