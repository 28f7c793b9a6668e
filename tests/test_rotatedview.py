import random

from seqrotate import rotate, rotated_view, Capability, InvalidMiddleError
from seqrotate.types import (ArrayCollection, BidirectionalArray,
                             ForwardArray, SinglyLinkedList,
                             DoublyLinkedList, ChainedRotation,
                             BidirectionalRotation, IndexedRotation,
                             ViewPosition)

import pytest

def pos(coll, i):
    return coll.advance(coll.start, i)

makers = [ArrayCollection, BidirectionalArray, ForwardArray,
          DoublyLinkedList, SinglyLinkedList]

idfn = lambda v: v.__name__


@pytest.mark.parametrize("maker, view_type",
                         [(ArrayCollection, IndexedRotation),
                          (BidirectionalArray, BidirectionalRotation),
                          (DoublyLinkedList, BidirectionalRotation),
                          (ForwardArray, ChainedRotation),
                          (SinglyLinkedList, ChainedRotation)],
                         ids=idfn)
def test_view_keeps_capability(maker, view_type):
    c = maker([1, 2, 3, 4])

    view, _ = rotated_view(c, pos(c, 1))

    assert type(view) is view_type
    assert view.capability == c.capability


@pytest.mark.parametrize("maker", makers, ids=idfn)
def test_view_does_not_mutate(maker):
    c = maker([10, 20, 30, 40, 50, 60, 70])

    view, new_first = rotated_view(c, pos(c, 2))

    assert list(view) == [30, 40, 50, 60, 70, 10, 20]
    assert list(c) == [10, 20, 30, 40, 50, 60, 70]
    assert view[new_first] == 10
    assert view.distance(view.start, new_first) == 5


@pytest.mark.parametrize("maker", makers, ids=idfn)
def test_view_matches_rotate(maker):
    rng = random.Random(4)

    for _ in range(40):
        n = rng.randint(0, 20)
        f = rng.randint(0, n)
        l = rng.randint(f, n)
        m = rng.randint(f, l)
        original = list(range(n))

        source = maker(list(original))
        view, new_first = rotated_view(source, pos(source, m),
                                       pos(source, f), pos(source, l))
        materialized = list(view)

        target = maker(list(original))
        result = rotate(target, pos(target, m), pos(target, f),
                        pos(target, l))

        assert materialized == list(target)[f:l]
        # same distance from the start of the rotated range
        assert (view.distance(view.start, new_first)
                == target.distance(pos(target, f), result))


@pytest.mark.parametrize("maker", makers, ids=idfn)
def test_view_is_restartable(maker):
    c = maker("abcdef")
    view, _ = rotated_view(c, pos(c, 4))

    assert "".join(view) == "efabcd"
    assert "".join(view) == "efabcd"

    # two cursors advancing independently
    it1, it2 = iter(view), iter(view)
    assert next(it1) == "e"
    assert next(it1) == "f"
    assert next(it2) == "e"
    assert "".join(it1) == "abcd"
    assert "".join(it2) == "fabcd"


@pytest.mark.parametrize("maker", makers, ids=idfn)
def test_view_boundaries(maker):
    c = maker("abc")

    view, new_first = rotated_view(c, c.start)
    assert "".join(view) == "abc"
    assert new_first == view.end

    view, new_first = rotated_view(c, c.end)
    assert "".join(view) == "abc"
    assert new_first == view.start

    empty = maker([])
    view, new_first = rotated_view(empty, empty.start)
    assert list(view) == []
    assert view.start == view.end == new_first


@pytest.mark.parametrize("maker", makers, ids=idfn)
def test_view_is_read_only(maker):
    c = maker([1, 2, 3])
    view, new_first = rotated_view(c, pos(c, 1))

    with pytest.raises(TypeError):
        view[new_first] = 5

    with pytest.raises(TypeError):
        rotate(view, new_first)

    assert list(c) == [1, 2, 3]


def test_view_end_not_dereferenceable():
    c = SinglyLinkedList([1, 2, 3])
    view, _ = rotated_view(c, pos(c, 1))

    with pytest.raises(IndexError):
        view[view.end]

    with pytest.raises(IndexError):
        view.successor(view.end)


@pytest.mark.parametrize("maker", [BidirectionalArray, DoublyLinkedList],
                         ids=idfn)
def test_bidirectional_view_walks_backwards(maker):
    c = maker([1, 2, 3, 4, 5])
    view, _ = rotated_view(c, pos(c, 3))

    values = []
    p = view.end
    while p != view.start:
        p = view.predecessor(p)
        values.append(view[p])

    assert values == [3, 2, 1, 5, 4]

    with pytest.raises(IndexError):
        view.predecessor(view.start)


def test_bidirectional_view_positions():
    c = BidirectionalArray([1, 2, 3, 4, 5])
    view, new_first = rotated_view(c, 3)

    assert view.start == ViewPosition(0, 3)
    assert new_first == ViewPosition(1, 0)
    assert view.end == ViewPosition(1, 3)
    assert view.successor(ViewPosition(0, 4)) == new_first
    assert view.predecessor(new_first) == ViewPosition(0, 4)


def test_indexed_view_translation():
    s = [2, 4, 6, 8, 10, 3, 5, 7, 9]
    view, new_first = rotated_view(s, 5, 2, 7)

    assert len(view) == 5
    assert new_first == 2
    assert [view.source_position(i) for i in range(5)] == [5, 6, 2, 3, 4]
    assert view[0] == 3 and view[4] == 10
    assert list(view) == [3, 5, 6, 8, 10]

    with pytest.raises(IndexError):
        view[5]

    assert view.offset(new_first, -2) == 0
    assert s == [2, 4, 6, 8, 10, 3, 5, 7, 9]


def test_view_follows_source_values():
    s = [1, 2, 3, 4]
    view, _ = rotated_view(s, 2)

    s[0] = 100
    assert list(view) == [3, 4, 100, 2]


def test_view_invalid_middle():
    with pytest.raises(InvalidMiddleError):
        rotated_view([1, 2, 3], 4)

    c = SinglyLinkedList([1, 2, 3, 4])
    with pytest.raises(InvalidMiddleError):
        rotated_view(c, pos(c, 0), pos(c, 1), pos(c, 3))


def test_capability_order():
    assert (Capability.FORWARD < Capability.BIDIRECTIONAL
            < Capability.RANDOM_ACCESS)
    assert ForwardArray.capability is Capability.FORWARD
    assert SinglyLinkedList.capability is Capability.FORWARD
    assert DoublyLinkedList.capability is Capability.BIDIRECTIONAL
    assert ArrayCollection.capability is Capability.RANDOM_ACCESS
