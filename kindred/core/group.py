"""
kindred.core.group
==================

An in-memory, self-ordering collection of members.

A :class:`Group` keeps its members sorted by a *key function*.  The key
defines both the iteration order **and** membership identity: two members
whose keys are equal occupy the same slot, so the second ``join`` is
refused even when the members are not ``==``.

Queries (:meth:`Group.find_by`, :meth:`Group.count`, set algebra) are
linear scans.  Traversal is fail-fast: structurally modifying a group while
iterating over it raises
:class:`~kindred.errors.ConcurrentModificationError`.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from kindred.errors import ConcurrentModificationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def natural_key(member: Any) -> Any:
    """Order members by their own ``<`` (natural ordering)."""
    return member


def _require_predicate(predicate: Optional[Callable[[T], bool]]) -> Callable[[T], bool]:
    if predicate is None:
        raise ValueError("Predicate is required")
    return predicate


class Group(Generic[T]):
    """
    Sorted, de-duplicated collection of members.

    Example
    -------
    >>> g = Group.of(3, 1, 2, 3)
    >>> list(g), len(g)
    ([1, 2, 3], 3)
    >>> g.join(2)
    False
    """

    def __init__(self, members: Optional[Iterable[T]] = None,
                 key: Optional[Callable[[T], Any]] = None) -> None:
        self._key: Callable[[T], Any] = key or natural_key
        self._members: List[T] = []
        self._modifications = 0
        for member in members or ():
            self.join(member)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def of(cls, *members: T):
        """Group of the given members; ``None`` members are skipped."""
        return cls(members)

    @classmethod
    def from_iterable(cls, members: Optional[Iterable[T]]):
        """Group of the members of *members*; ``None`` yields an empty group."""
        return cls(members)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _locate(self, member: T) -> Tuple[int, bool]:
        """Insertion point of *member* and whether its slot is taken."""
        key = self._key(member)
        index = bisect_left(self._members, key, key=self._key)
        return index, index < len(self._members) and self._key(self._members[index]) == key

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def join(self, member: Optional[T]) -> bool:
        """Add *member* unless it is ``None`` or its slot is already taken."""
        if member is None:
            return False
        index, taken = self._locate(member)
        if taken:
            return False
        self._members.insert(index, member)
        self._modifications += 1
        logger.debug(f"{member!r} joined {type(self).__name__} (size {len(self._members)})")
        return True

    def leave(self, member: Optional[T]) -> bool:
        """Remove the member occupying *member*'s slot, if any."""
        if member is None:
            return False
        index, taken = self._locate(member)
        if not taken:
            return False
        del self._members[index]
        self._modifications += 1
        logger.debug(f"{member!r} left {type(self).__name__} (size {len(self._members)})")
        return True

    def leave_if(self, predicate: Callable[[T], bool]) -> bool:
        """
        Remove every member matching *predicate*.

        Returns ``True`` if any member was removed.  Removal is not atomic;
        a predicate that modifies the group aborts the scan with
        :class:`~kindred.errors.ConcurrentModificationError`.
        """
        predicate = _require_predicate(predicate)
        matches = [member for member in self if predicate(member)]
        for member in matches:
            self.leave(member)
        if matches:
            logger.debug(f"{len(matches)} member(s) left {type(self).__name__} by predicate")
        return bool(matches)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_by(self, predicate: Callable[[T], bool]) -> Set[T]:
        predicate = _require_predicate(predicate)
        return {member for member in self if predicate(member)}

    def find_one(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First member, in group order, matching *predicate*."""
        predicate = _require_predicate(predicate)
        return next((member for member in self if predicate(member)), None)

    def count(self, predicate: Callable[[T], bool]) -> int:
        predicate = _require_predicate(predicate)
        return sum(1 for member in self if predicate(member))

    def size(self) -> int:
        return len(self._members)

    def is_empty(self) -> bool:
        return self.size() == 0

    def accept(self, visitor: Callable[[T], object]) -> None:
        """Call *visitor* once per member in group order."""
        for member in self:
            visitor(member)

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------
    def union(self, other: Optional[Iterable[T]]) -> Set[T]:
        """Members of this group or *other*; ``None`` counts as empty."""
        return set(self).union(other or ())

    def intersection(self, other: Iterable[T]) -> Set[T]:
        """Members of this group that are also members of *other*."""
        if other is None:
            raise ValueError("Group to intersect with is required")
        return {member for member in self if member in other}

    def difference(self, other: Iterable[T]) -> Set[T]:
        """Members of this group that are not members of *other*."""
        if other is None:
            raise ValueError("Group to subtract is required")
        return {member for member in self if member not in other}

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __contains__(self, member: object) -> bool:
        if member is None:
            return False
        try:
            return self._locate(member)[1]
        except (AttributeError, TypeError):
            return False

    def __iter__(self) -> Iterator[T]:
        expected = self._modifications
        for member in list(self._members):
            if self._modifications != expected:
                raise ConcurrentModificationError(f"{type(self).__name__} was modified during iteration")
            yield member
        if self._modifications != expected:
            raise ConcurrentModificationError(f"{type(self).__name__} was modified during iteration")

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._members!r})"
