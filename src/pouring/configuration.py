"""Order-independent puzzle state built from containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

from contracts.errors import InvalidValue

from .container import Container


@dataclass(frozen=True)
class Configuration:
    """Immutable set of :class:`Container` values describing one puzzle state.

    Identity is set identity: the order containers are supplied in does not
    matter, and structurally identical containers collapse into one member.
    Iteration yields members sorted by capacity then level so reports read
    the same way from run to run.
    """

    containers: Iterable[Container]
    _ordered: Tuple[Container, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        supplied = tuple(self.containers)
        for member in supplied:
            if not isinstance(member, Container):
                raise InvalidValue("not-a-container", repr(member))
        members = frozenset(supplied)
        if not members:
            raise InvalidValue("empty-configuration", "a configuration needs at least one container")
        object.__setattr__(self, "containers", members)
        object.__setattr__(self, "_ordered", tuple(sorted(members, key=Container.sort_key)))

    def __iter__(self) -> Iterator[Container]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, item: object) -> bool:
        return item in self.containers

    def has_level(self, quantity: int) -> bool:
        """Return ``True`` when some container holds exactly ``quantity``."""

        return any(container.level == quantity for container in self._ordered)

    def replace(self, old: Iterable[Container], new: Iterable[Container]) -> "Configuration":
        """Return a configuration with ``old`` members swapped for ``new`` ones."""

        members = set(self.containers)
        members.difference_update(old)
        members.update(new)
        return Configuration(members)

    def __str__(self) -> str:
        return "".join(f"{container}\n" for container in self._ordered)


__all__ = ["Configuration"]
