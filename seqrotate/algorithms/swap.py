def swap_ranges(collection, first1, last1, first2, last2):
    """
    Exchange elements pairwise between ``[first1, last1)`` and
    ``[first2, last2)``, stopping when the shorter range is exhausted.

    The ranges must not overlap (``last1 == first2`` is fine).

    :return: tuple ``(p1, p2)`` of the positions reached in each range;
        at least one of them equals its own upper bound.
    """
    while first1 != last1 and first2 != last2:
        collection.swap(first1, first2)
        first1 = collection.successor(first1)
        first2 = collection.successor(first2)

    return first1, first2
