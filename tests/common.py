"""Provide common functionality across different tests."""
from typing import List, Sequence, TypeVar

from non_empty_sequence import NonEmptySequence, seed

T = TypeVar("T")

# pylint: disable=missing-function-docstring

#: Non-empty inputs of different lengths and element types
NON_EMPTY_INPUTS = [
    [1],
    [1, 2, 3],
    ["a", "b", "c"],
    [None],
    [0, 0, 0, 0],
    [(1, "one"), (2, "two")],
    list(range(100)),
]  # type: List[List[object]]


def build_by_appending(elements: Sequence[T]) -> NonEmptySequence[T]:
    """Seed with the first element and append the remainder one by one."""
    assert len(elements) > 0

    result = seed(elements[0])
    for element in elements[1:]:
        result.append(element)

    return result


def letters() -> NonEmptySequence[str]:
    """Build the sequence ``["a", "b", "c"]`` by seeding and appending."""
    return build_by_appending(["a", "b", "c"])
