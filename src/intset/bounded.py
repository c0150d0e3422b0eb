"""Fixed-capacity set of distinct integers that remembers insertion order.

Members live in a list allocated once at construction (`capacity` slots) and
only the first `size()` slots are meaningful. Slot `i` holds the member added
strictly before the one in slot `i + 1`; removing a member closes the hole by
shifting the tail left, so the relative order of the rest never changes.

Union, intersection and difference are built from three primitives only:
`contains`, `add` and `remove`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from intset.errors import IntSetCapacityError

logger = logging.getLogger("intset.bounded")

MAX_SIZE = 256

DUMP_SEPARATOR = "  "


def _is_member_type(value: object) -> bool:
    # bool is an int subclass but never a member.
    return isinstance(value, int) and not isinstance(value, bool)


def _check_capacity(capacity: Any) -> int:
    if not isinstance(capacity, int) or isinstance(capacity, bool):
        raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}")
    return capacity


class BoundedIntSet:
    """Set of distinct ints with a fixed upper bound on membership.

    Instances behave as values: `copy()` (and `copy.copy`/`copy.deepcopy`)
    duplicate the storage, and the set-algebra methods return new instances
    without touching either operand.
    """

    __slots__ = ("_data", "_used", "_capacity")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[int] | None = None, *, capacity: int = MAX_SIZE) -> None:
        self._capacity = _check_capacity(capacity)
        self._data: list[int] = [0] * self._capacity
        self._used = 0
        if values is not None:
            for v in values:
                self.add(v)

    @property
    def capacity(self) -> int:
        return self._capacity

    # ---- primitives ----

    def size(self) -> int:
        return self._used

    def is_empty(self) -> bool:
        return self._used == 0

    def contains(self, value: object) -> bool:
        if not _is_member_type(value):
            return False
        data = self._data
        for i in range(self._used):
            if data[i] == value:
                return True
        return False

    def add(self, value: int) -> bool:
        """Append `value` unless already present.

        Returns True if the set changed. Raises `IntSetCapacityError` (leaving
        the set untouched) when `value` is new and the set is full.
        """

        if not _is_member_type(value):
            raise TypeError(f"BoundedIntSet members must be int, got {type(value).__name__}")
        if self.contains(value):
            return False
        if self._used >= self._capacity:
            logger.debug("Rejected add(%d): set is full (%d members)", value, self._used)
            raise IntSetCapacityError(
                f"cannot add {value}: set is at capacity ({self._capacity})",
                capacity=self._capacity,
                requested=self._used + 1,
            )
        self._data[self._used] = value
        self._used += 1
        return True

    def remove(self, value: object) -> bool:
        """Remove `value` if present, keeping the order of the remaining members.

        Returns False (and leaves the set unchanged) when `value` is absent.
        """

        if not _is_member_type(value):
            return False
        data = self._data
        used = self._used
        for i in range(used):
            if data[i] == value:
                for j in range(i + 1, used):
                    data[j - 1] = data[j]
                self._used = used - 1
                return True
        return False

    def reset(self) -> None:
        # Stale slots are left in place; `_used` alone marks what is valid.
        self._used = 0

    # ---- set algebra ----

    def is_subset_of(self, other: BoundedIntSet) -> bool:
        if self.is_empty():
            return True
        for i in range(self._used):
            if not other.contains(self._data[i]):
                return False
        return True

    def union_with(self, other: BoundedIntSet) -> BoundedIntSet:
        """Return `self` followed by the members of `other` it lacks.

        New members keep `other`'s order. The result has `self`'s capacity;
        `IntSetCapacityError` is raised up front if the union would not fit.
        """

        missing = 0
        for v in other:
            if not self.contains(v):
                missing += 1
        needed = self._used + missing
        if needed > self._capacity:
            logger.debug(
                "Rejected union: %d members needed, capacity is %d", needed, self._capacity
            )
            raise IntSetCapacityError(
                f"union needs {needed} members but capacity is {self._capacity}",
                capacity=self._capacity,
                requested=needed,
            )

        result = self.copy()
        for v in other:
            if not result.contains(v):
                result.add(v)
        return result

    def intersect(self, other: BoundedIntSet) -> BoundedIntSet:
        result = self.copy()
        for v in self:
            if not other.contains(v):
                result.remove(v)
        return result

    def subtract(self, other: BoundedIntSet) -> BoundedIntSet:
        result = self.copy()
        for v in other:
            if result.contains(v):
                result.remove(v)
        return result

    # ---- copying / output ----

    def copy(self) -> BoundedIntSet:
        clone = BoundedIntSet(capacity=self._capacity)
        clone._data = self._data[:]
        clone._used = self._used
        return clone

    def __copy__(self) -> BoundedIntSet:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> BoundedIntSet:
        # Members are ints, so a shallow copy of the storage is already deep.
        return self.copy()

    def to_list(self) -> list[int]:
        return self._data[: self._used]

    def debug_dump(self, out: TextIO) -> None:
        """Write the members to `out` in storage order.

        Members are separated by two spaces; there is no trailing separator or
        newline, and nothing at all is written for an empty set.
        """

        if self._used > 0:
            out.write(str(self._data[0]))
            for i in range(1, self._used):
                out.write(DUMP_SEPARATOR + str(self._data[i]))

    # ---- Python protocols ----

    def __len__(self) -> int:
        return self._used

    def __bool__(self) -> bool:
        return self._used > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[int]:
        # Iterate over a snapshot so callers may mutate the set mid-loop.
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedIntSet):
            return NotImplemented
        return equal(self, other)

    def __str__(self) -> str:
        return DUMP_SEPARATOR.join(str(v) for v in self.to_list())

    def __repr__(self) -> str:
        return f"BoundedIntSet({self.to_list()!r}, capacity={self._capacity})"


def equal(a: BoundedIntSet, b: BoundedIntSet) -> bool:
    """Membership equality: True iff each set is a subset of the other."""

    if a.size() != b.size():
        return False
    return a.is_subset_of(b) and b.is_subset_of(a)
