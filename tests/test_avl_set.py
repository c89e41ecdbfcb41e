import pytest
from hypothesis import given, strategies as st

from engrus.avl_set import AvlTreeSet

SOURCE_INSERTS = [15, 15, 23, 23, 13, 13, 14, 14, 25, 25, 18, 18, 16, 16, 17, 17]


def _filled():
    s = AvlTreeSet()
    for value in SOURCE_INSERTS:
        s.add(value)
    return s


def test_empty_set():
    s = AvlTreeSet()
    assert list(s) == []
    assert len(s) == 0
    assert 15 not in s


def test_insert_sequence_stays_sorted_and_balanced():
    s = AvlTreeSet()
    seen = set()
    for value in SOURCE_INSERTS:
        added = s.add(value)
        assert added == (value not in seen)
        seen.add(value)
        assert list(s) == sorted(seen)
        assert s._tree.is_balanced()
    assert len(s) == len(seen)


def test_copy_is_independent():
    original = _filled()
    duplicate = original.copy()
    duplicate.add(50000)
    duplicate.add(1000000)
    original.add(30)
    assert 50000 in duplicate and 50000 not in original
    assert 30 in original and 30 not in duplicate
    assert duplicate._tree.is_balanced()
    assert list(duplicate)[-2:] == [50000, 1000000]


def test_remove_sequence():
    s = _filled()
    s.add(30)
    for value in [15, 13, 25, 18, 16, 17, 23, 14, 30]:
        s.remove(value)
        assert value not in s
        assert s._tree.is_balanced()
        with pytest.raises(KeyError):
            s.remove(value)
        assert s.discard(value) is False
    assert list(s) == []


def test_repeated_remove_and_insert():
    s = AvlTreeSet([15, 23, 13, 14, 25, 18, 16, 17])
    for _ in range(5):
        s.remove(17)
        assert 17 not in s
        assert s.add(17) is True
        assert s._tree.is_balanced()
    assert list(s) == sorted([15, 23, 13, 14, 25, 18, 16, 17])
    for value in [15, 16, 17, 18, 23, 25, 13, 14]:
        assert s.discard(value) is True
        assert s._tree.is_balanced()
    assert s.discard(25) is False
    assert len(s) == 0


def test_descending_inserts_balanced():
    s = AvlTreeSet()
    for value in [17, 16, 15, 14, 13, 12, 11, 10]:
        s.add(value)
        assert s._tree.is_balanced()
    assert list(reversed(s)) == [17, 16, 15, 14, 13, 12, 11, 10]


def test_ascending_inserts_height():
    s = AvlTreeSet(range(17, 25))
    assert s._tree.is_balanced()
    assert s._tree.height() == 4


def test_double_rotation_case():
    s = AvlTreeSet()
    for value in [15, 12, 20, 21, 18, 22, 19]:
        s.add(value)
        assert s._tree.is_balanced()
    assert list(s) == sorted([15, 12, 20, 21, 18, 22, 19])


def test_init_from_iterable():
    items = [7, 2, 9, 10, 28, 65, 37]
    s = AvlTreeSet(items)
    assert list(s) == sorted(items)
    assert list(reversed(s)) == sorted(items, reverse=True)


def test_strings():
    words = ["хороший", "товар", "плохой", "good"]
    s = AvlTreeSet(words)
    assert list(s) == sorted(words)
    assert "товар" in s


def test_equality():
    a = AvlTreeSet([3, 1, 2])
    b = AvlTreeSet([2, 3, 1])
    assert a == b
    assert a == {1, 2, 3}
    assert a == frozenset({1, 2, 3})
    assert not (a == AvlTreeSet([1, 2]))
    assert not (a == [1, 2, 3])


def test_repr():
    assert repr(AvlTreeSet([2, 1])) == "AvlTreeSet([1, 2])"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(AvlTreeSet())


@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50))))
def test_matches_builtin_set(operations):
    s = AvlTreeSet()
    reference = set()
    for is_add, value in operations:
        if is_add:
            assert s.add(value) == (value not in reference)
            reference.add(value)
        else:
            assert s.discard(value) == (value in reference)
            reference.discard(value)
        assert s._tree.is_balanced()
    assert list(s) == sorted(reference)
    assert list(reversed(s)) == sorted(reference, reverse=True)
    assert len(s) == len(reference)