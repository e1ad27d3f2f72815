"""
tests/test_group.py
===================

Unit tests for kindred.core.group.Group
"""

import pytest

from kindred.core import Group
from kindred.errors import ConcurrentModificationError


def _evens(n):
    return Group.of(*range(0, n, 2))


def test_empty_group():
    group = Group.empty()
    assert group.is_empty() and group.size() == 0 and list(group) == []


def test_of_sorts_and_drops_duplicates_and_none():
    group = Group.of(3, None, 1, 2, 3)
    assert list(group) == [1, 2, 3]
    assert len(group) == 3


def test_from_iterable_accepts_none():
    assert Group.from_iterable(None).is_empty()
    assert list(Group.from_iterable(iter([2, 1]))) == [1, 2]


def test_join_and_leave():
    group = Group.empty()
    assert group.join(5) is True
    assert group.join(5) is False
    assert group.join(None) is False
    assert 5 in group
    assert group.leave(5) is True
    assert group.leave(5) is False
    assert group.leave(None) is False
    assert group.is_empty()


def test_key_defines_order_and_identity():
    group = Group(["apple", "Avocado", "banana"], key=lambda word: word[0].lower())
    assert list(group) == ["apple", "banana"]
    assert group.join("Blueberry") is False
    assert "Almond" in group


def test_leave_if_removes_every_match():
    group = _evens(10)
    assert group.leave_if(lambda n: n > 4) is True
    assert list(group) == [0, 2, 4]
    assert group.leave_if(lambda n: n > 100) is False


def test_leave_if_detects_modification_by_the_predicate():
    """A predicate that joins members aborts the scan."""
    group = _evens(10)

    def meddle(n):
        group.join(n + 1)
        return False

    with pytest.raises(ConcurrentModificationError):
        group.leave_if(meddle)


def test_iteration_is_fail_fast():
    group = _evens(6)
    with pytest.raises(ConcurrentModificationError):
        for n in group:
            group.leave(n)


def test_find_by_find_one_and_count():
    group = _evens(10)
    assert group.find_by(lambda n: n % 4 == 0) == {0, 4, 8}
    assert group.find_one(lambda n: n > 3) == 4
    assert group.find_one(lambda n: n > 100) is None
    assert group.count(lambda n: n >= 6) == 2


@pytest.mark.parametrize("query", ["find_by", "find_one", "count", "leave_if"])
def test_predicate_is_required(query):
    with pytest.raises(ValueError, match="Predicate is required"):
        getattr(_evens(4), query)(None)


def test_accept_visits_in_order():
    seen = []
    Group.of(3, 1, 2).accept(seen.append)
    assert seen == [1, 2, 3]


def test_set_algebra():
    a = Group.of(1, 2, 3, 4)
    b = Group.of(3, 4, 5)
    assert a.union(b) == {1, 2, 3, 4, 5}
    assert len(a.union(b)) >= max(a.size(), b.size())
    assert a.intersection(b) == {3, 4}
    assert a.intersection(b) <= set(a) and a.intersection(b) <= set(b)
    assert a.difference(b) == {1, 2}
    assert not a.difference(b) & set(b)


def test_union_with_none_is_the_group():
    group = Group.of(1, 2)
    assert group.union(None) == {1, 2}


def test_intersection_and_difference_require_a_group():
    group = Group.of(1, 2)
    with pytest.raises(ValueError):
        group.intersection(None)
    with pytest.raises(ValueError):
        group.difference(None)


def test_membership_of_an_incomparable_value_is_false():
    assert "one" not in Group.of(1, 2)
