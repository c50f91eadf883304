from __future__ import annotations

from itertools import permutations

import pytest

from contracts.errors import InvalidValue
from pouring.configuration import Configuration
from pouring.container import Container


def test_insertion_order_does_not_matter() -> None:
    first = Configuration([Container(5, 3), Container(9, 0)])
    second = Configuration([Container(9, 0), Container(5, 3)])
    assert first == second
    assert hash(first) == hash(second)


def test_all_permutations_are_equal() -> None:
    members = [Container(3, 1), Container(5, 5), Container(8, 0), Container(13, 7)]
    variants = {Configuration(order) for order in permutations(members)}
    assert len(variants) == 1


def test_empty_configuration_is_rejected() -> None:
    with pytest.raises(InvalidValue) as excinfo:
        Configuration([])
    assert excinfo.value.code == "empty-configuration"


def test_non_container_members_are_rejected() -> None:
    with pytest.raises(InvalidValue):
        Configuration([Container(3), (3, 0)])  # type: ignore[list-item]


def test_identical_containers_collapse() -> None:
    configuration = Configuration([Container(5), Container(5), Container(3)])
    assert len(configuration) == 2


def test_iteration_is_restartable_and_sorted() -> None:
    configuration = Configuration([Container(9, 4), Container(5, 5), Container(5, 1)])
    first = list(configuration)
    second = list(configuration)
    assert first == second
    assert first == [Container(5, 1), Container(5, 5), Container(9, 4)]


def test_membership_and_levels() -> None:
    configuration = Configuration([Container(3, 2), Container(7, 0)])
    assert Container(3, 2) in configuration
    assert Container(3, 0) not in configuration
    assert configuration.has_level(2)
    assert configuration.has_level(0)
    assert not configuration.has_level(7)


def test_replace_returns_new_configuration() -> None:
    original = Configuration([Container(3, 3), Container(5, 0)])
    updated = original.replace([Container(3, 3), Container(5, 0)], [Container(3, 0), Container(5, 3)])
    assert updated == Configuration([Container(3, 0), Container(5, 3)])
    assert original == Configuration([Container(3, 3), Container(5, 0)])


def test_replace_can_merge_members() -> None:
    original = Configuration([Container(4, 4), Container(4, 0)])
    merged = original.replace([Container(4, 4)], [Container(4, 0)])
    assert list(merged) == [Container(4, 0)]


def test_str_lists_every_container() -> None:
    configuration = Configuration([Container(9, 0), Container(5, 3)])
    assert str(configuration) == "Capacity: 5, content: 3\nCapacity: 9, content: 0\n"
