"""Move descriptors recording how one configuration was derived from another."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from contracts.errors import InvalidValue

from .container import Container


class MoveOp(str, Enum):
    """Supported move kinds."""

    EMPTY = "EMPTY"
    FILL = "FILL"
    POUR = "POUR"

    @classmethod
    def from_value(cls, value: str) -> "MoveOp":
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidValue("unsupported-move", repr(value)) from exc


@dataclass(frozen=True, slots=True)
class Move:
    """A single move, naming the containers it acted on before the move.

    ``target`` is only set for ``POUR`` and is the receiving container.
    """

    op: MoveOp
    source: Container
    target: Optional[Container] = None

    def __post_init__(self) -> None:
        if not isinstance(self.op, MoveOp):
            object.__setattr__(self, "op", MoveOp.from_value(str(self.op)))
        if (self.op is MoveOp.POUR) != (self.target is not None):
            raise InvalidValue("invalid-move", "only POUR moves name a target container")

    def describe(self) -> str:
        if self.target is None:
            return f"{self.op.value.lower()} {self.source.capacity}"
        return f"pour {self.source.capacity} -> {self.target.capacity}"

    def to_payload(self) -> dict:
        return {
            "op": self.op.value,
            "source": self.source.capacity,
            "target": None if self.target is None else self.target.capacity,
        }


__all__ = ["Move", "MoveOp"]
