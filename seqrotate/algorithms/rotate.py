"""
In-place rotation of ``[first, last)`` around `middle`, one algorithm
per capability tier.

All three leave the element previously at `middle` at `first`, keep
the relative order within ``[first, middle)`` and ``[middle, last)``,
and return the new position of the element previously at `first`.
Rotating again around that returned position restores the original
order (and returns the original `middle`).

None of these validate `middle`; see :func:`seqrotate.dispatch.rotate`.
"""
from math import gcd

from seqrotate.algorithms.swap import swap_ranges
from seqrotate.algorithms.reverse import reverse_range, reverse_until

__all__ = ["forward_rotate", "bidirectional_rotate", "random_access_rotate"]


def forward_rotate(collection, first, middle, last):
    """
    Rotate using only successor navigation, by repeatedly swapping the
    shorter prefix of the two halves into place.

    :param ForwardCollection collection:
    """
    if first == middle:
        return last
    if middle == last:
        return first

    while True:
        p, q = swap_ranges(collection, first, middle, middle, last)

        if q == last:
            # The second half ran out. Everything before p is final
            # and p is where the old first element now lives; the
            # remainder [p, middle, last) still needs rotating.
            if p != middle:
                _forward_rotate_unguarded(collection, p, middle, last)
            return p

        # The first half ran out: [first, middle) is final and the
        # old first half now sits in [middle, q).
        first, middle = middle, q


def _forward_rotate_unguarded(collection, first, middle, last):
    """forward_rotate() for two non-empty halves, without computing
    a return value"""
    while True:
        p, q = swap_ranges(collection, first, middle, middle, last)

        if p == middle:
            if q == last:
                return
            first, middle = middle, q
        else:
            first = p


def bidirectional_rotate(collection, first, middle, last):
    """
    Rotate by reversals: reverse each half, then reverse the whole
    range. The final reversal is split at the old middle so that no
    pair is swapped twice.

    :param BidirectionalCollection collection:
    """
    if first == middle:
        return last
    if middle == last:
        return first

    reverse_range(collection, first, middle)
    reverse_range(collection, middle, last)

    p, q = reverse_until(collection, first, last, middle)
    reverse_range(collection, p, q)

    return q if p == middle else p


def random_access_rotate(collection, first, middle, last):
    """
    Rotate by cycle decomposition ("juggling").

    Rotating ``n = len_a + len_b`` elements left by ``len_a`` splits the
    offsets ``0..n-1`` into ``gcd(len_a, len_b)`` disjoint cycles
    ``i -> (i + len_a) % n``. Each cycle of length L is settled with
    L - 1 swaps, so every element is moved into its final slot exactly
    once and the whole rotation costs ``n - gcd(len_a, len_b)`` swaps.

    :param RandomAccessCollection collection:
    """
    if first == middle:
        return last
    if middle == last:
        return first

    len_a = collection.distance(first, middle)
    len_b = collection.distance(middle, last)
    n = len_a + len_b

    for start in range(gcd(len_a, len_b)):
        hole = start
        while True:
            nxt = hole + len_a
            if nxt >= n:
                nxt -= n
            if nxt == start:
                break
            collection.swap(collection.offset(first, hole),
                            collection.offset(first, nxt))
            hole = nxt

    return collection.offset(first, len_b)
