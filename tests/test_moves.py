from __future__ import annotations

import pytest

from contracts.errors import InvalidValue
from pouring.container import Container
from pouring.moves import Move, MoveOp


def test_op_is_normalised_from_string() -> None:
    move = Move("FILL", Container(5))  # type: ignore[arg-type]
    assert move.op is MoveOp.FILL


def test_unknown_op_is_rejected() -> None:
    with pytest.raises(InvalidValue):
        Move("SPILL", Container(5))  # type: ignore[arg-type]


def test_only_pour_names_a_target() -> None:
    with pytest.raises(InvalidValue):
        Move(MoveOp.POUR, Container(5, 5))
    with pytest.raises(InvalidValue):
        Move(MoveOp.FILL, Container(5), Container(3))


def test_describe_and_payload() -> None:
    pour = Move(MoveOp.POUR, Container(5, 5), Container(3, 0))
    assert pour.describe() == "pour 5 -> 3"
    assert pour.to_payload() == {"op": "POUR", "source": 5, "target": 3}

    fill = Move(MoveOp.FILL, Container(5))
    assert fill.describe() == "fill 5"
    assert fill.to_payload() == {"op": "FILL", "source": 5, "target": None}

    assert Move(MoveOp.EMPTY, Container(3, 3)).describe() == "empty 3"
