"""Provide the sequence which always holds at least one element."""
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
    overload,
)

from icontract import DBC, ensure, invariant, require, snapshot

from non_empty_sequence.common import T, U

# pylint: disable=protected-access


def _offset_within_limit(i: int, distance: int, limit: int) -> Optional[int]:
    """
    Offset ``i`` by ``distance`` unless the result lies beyond ``limit``.

    The ``limit`` only applies in the direction of the movement. A limit which lies
    behind ``i`` has no effect.

    >>> _offset_within_limit(0, 4, 5)
    4
    >>> _offset_within_limit(0, 6, 5) is None
    True
    >>> _offset_within_limit(3, 1, 0)
    4
    """
    if distance > 0 and limit >= i and i + distance > limit:
        return None

    if distance < 0 and limit <= i and i + distance < limit:
        return None

    return i + distance


def _limited_offset_within_bounds(
    that: "NonEmptySequence[Any]", i: int, distance: int, limit: int
) -> bool:
    """Check that the limited offset, if any, is a valid index of ``that``."""
    offset = _offset_within_limit(i, distance, limit)
    return offset is None or that.start_index <= offset <= that.end_index


# fmt: off
@invariant(
    lambda self: len(self._storage) > 0,
    "The sequence is never empty"
)
# fmt: on
class NonEmptySequence(DBC, Sequence[T]):
    """
    Represent an ordered sequence with at least one element.

    The sequence can only grow. The elements are appended in place and there are
    no operations to remove them, so the sequence can not become empty once it has
    been constructed.

    Use :py:func:`try_create` if you do not know whether your input is empty, and
    :py:func:`seed` if you start with a single element.

    Indices are zero-based and ranges are half-open as for :py:class:`list`.
    """

    @require(
        lambda elements: len(elements) > 0,
        "A non-empty sequence can not be constructed from empty elements; "
        "use try_create if the elements might be empty",
    )
    def __init__(self, elements: Sequence[T]) -> None:
        """Initialize with a copy of the given ``elements``."""
        self._storage = list(elements)  # type: List[T]

    # region Mutation

    @snapshot(lambda self: len(self._storage), name="len")
    @ensure(lambda self, OLD: len(self._storage) == OLD.len + 1)
    @ensure(lambda self, element: self._storage[-1] is element)
    def append(self, element: T) -> None:
        """Add the ``element`` at the end."""
        self._storage.append(element)

    @snapshot(lambda self: self._storage[:], name="storage")
    @ensure(
        lambda self, OLD: self._storage[: len(OLD.storage)] == OLD.storage,
        "The prior elements are kept in order",
    )
    def extend(self, elements: Iterable[T]) -> None:
        """
        Add the ``elements`` at the end in the given order.

        Extending with an empty iterable leaves the sequence as-is. You can also
        extend the sequence with itself.
        """
        # NOTE: Materialize the elements first since they might be iterated from
        # the very storage which we are about to grow.
        additional = list(elements)
        self._storage.extend(additional)

    def copy(self) -> "NonEmptySequence[T]":
        """Make a shallow copy which does not share the storage with this one."""
        return NonEmptySequence(self._storage)

    # endregion

    # region Read access

    @property
    def elements(self) -> List[T]:
        """
        Return the elements as a plain list.

        The list is a copy. Modifying it does not affect the sequence.
        """
        return list(self._storage)

    @property
    def first(self) -> T:
        """Return the first element."""
        return self._storage[0]

    @property
    def last(self) -> T:
        """Return the last element."""
        return self._storage[-1]

    @property
    def is_empty(self) -> bool:
        """
        Return ``False``, always.

        The property is only there so that the sequence can stand in for
        collections which are queried for emptiness.
        """
        return False

    # pylint: disable=function-redefined

    @overload
    def __getitem__(self, index: int) -> T:
        raise NotImplementedError("Only for type annotations")

    @overload
    def __getitem__(self, index: slice) -> List[T]:
        raise NotImplementedError("Only for type annotations")

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        """
        Get the element at the ``index``, or a plain list of elements for a slice.

        A valid index lies in ``[start_index, end_index)``. Negative indices do not
        count from the end; they are out of range like any other invalid index.

        The start and the stop of a slice, where given, must lie in
        ``[start_index, end_index]`` and the start must not come after the stop.
        A slice with equal start and stop gives an empty list.

        :raise: :py:class:`IndexError` if the index or the slice is out of range
        :raise: :py:class:`ValueError` if the step of the slice is not positive
        """
        if isinstance(index, slice):
            start = 0 if index.start is None else index.start
            stop = len(self._storage) if index.stop is None else index.stop

            if not (0 <= start <= stop <= len(self._storage)):
                raise IndexError(
                    f"Slice [{start}:{stop}] out of range [0, {len(self._storage)}]"
                )

            if index.step is not None and index.step <= 0:
                raise ValueError(f"Slice step must be positive, got: {index.step}")

            return self._storage[index]

        if not (0 <= index < len(self._storage)):
            raise IndexError(f"Index {index} out of range [0, {len(self._storage)})")

        return self._storage[index]

    # pylint: enable=function-redefined

    def __len__(self) -> int:
        """Return the number of the elements, which is at least one."""
        return len(self._storage)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in order without consuming them."""
        return iter(self._storage)

    def __reversed__(self) -> Iterator[T]:
        """Iterate over the elements in reverse order without consuming them."""
        return reversed(self._storage)

    def map(self, function: Callable[[T], U]) -> "NonEmptySequence[U]":
        """
        Apply ``function`` on each element in order and collect the results.

        The result is again non-empty as every element maps to exactly one result.
        """
        return NonEmptySequence([function(element) for element in self._storage])

    # endregion

    # region Indices

    @property
    def start_index(self) -> int:
        """Return the position of the first element, which is always zero."""
        return 0

    @property
    def end_index(self) -> int:
        """
        Return the "past the end" position.

        This is one greater than the last valid index, *i.e.*, the number of
        elements.
        """
        return len(self._storage)

    @property
    def indices(self) -> range:
        """Return the valid indices in ascending order."""
        return range(0, len(self._storage))

    @require(
        lambda self, i: self.start_index <= i < self.end_index,
        "Index must be valid and can not be the end index",
    )
    def index_after(self, i: int) -> int:
        """Return the index immediately after ``i``."""
        return i + 1

    @require(
        lambda self, i: self.start_index < i <= self.end_index,
        "Index must be valid and can not be the start index",
    )
    def index_before(self, i: int) -> int:
        """Return the index immediately before ``i``."""
        return i - 1

    # fmt: off
    @require(
        lambda self, start, end:
        self.start_index <= start <= self.end_index
        and self.start_index <= end <= self.end_index,
        "Both indices must be within the bounds"
    )
    # fmt: on
    def distance_between(self, start: int, end: int) -> int:
        """
        Return the distance from ``start`` to ``end``.

        The distance is negative if ``end`` precedes ``start``.
        """
        return end - start

    # fmt: off
    @require(
        lambda self, i, distance:
        self.start_index <= i <= self.end_index
        and self.start_index <= i + distance <= self.end_index,
        "Both the index and the offset index must be within the bounds"
    )
    # fmt: on
    def index_offset_by(self, i: int, distance: int) -> int:
        """Return the index which is ``distance`` positions away from ``i``."""
        return i + distance

    # fmt: off
    @require(
        lambda self, i: self.start_index <= i <= self.end_index,
        "Index must be within the bounds"
    )
    @require(
        lambda self, limit: self.start_index <= limit <= self.end_index,
        "Limit must be within the bounds"
    )
    @require(
        lambda self, i, distance, limit:
        _limited_offset_within_bounds(self, i, distance, limit),
        "The limit must prevent offsetting beyond the bounds"
    )
    # fmt: on
    def index_offset_by_limited(
        self, i: int, distance: int, limit: int
    ) -> Optional[int]:
        """
        Return the index ``distance`` positions away from ``i`` within ``limit``.

        If the offset index lies beyond ``limit`` in the direction of movement,
        return ``None``. If ``limit`` lies behind ``i``, it has no effect.

        For example, in a sequence of five elements offsetting the start by four
        positions, limited by the end, gives ``4``, while offsetting it by six
        positions gives ``None``.
        """
        return _offset_within_limit(i, distance, limit)

    # endregion

    def __eq__(self, other: object) -> bool:
        """Compare the elements in order, if ``other`` is a non-empty sequence."""
        if not isinstance(other, NonEmptySequence):
            return NotImplemented

        return self._storage == other._storage

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._storage!r})"


def try_create(elements: Iterable[T]) -> Optional[NonEmptySequence[T]]:
    """
    Create a non-empty sequence from ``elements``, or ``None`` if they are empty.

    The ``elements`` are iterated exactly once and copied, so any finite iterable
    works including generators.

    >>> try_create([1, 2, 3])
    NonEmptySequence([1, 2, 3])
    >>> try_create([]) is None
    True
    """
    storage = list(elements)
    if len(storage) == 0:
        return None

    return NonEmptySequence(storage)


@ensure(lambda result: len(result) == 1)
@ensure(lambda element, result: result[0] is element)
def seed(element: T) -> NonEmptySequence[T]:
    """Create a non-empty sequence holding only the ``element``."""
    return NonEmptySequence([element])


#: Create a non-empty sequence holding only the given element; same as :py:func:`seed`
append = seed
