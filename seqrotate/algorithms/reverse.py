def reverse_range(collection, first, last):
    """
    Reverse the elements of ``[first, last)`` in place.

    A leading cursor moves up from `first` and a trailing cursor down
    from `last`, swapping as they go, until they meet or cross. For an
    odd length the middle element is left where it is.

    :param BidirectionalCollection collection:
    """
    while first != last:
        last = collection.predecessor(last)
        if first == last:
            break
        collection.swap(first, last)
        first = collection.successor(first)


def reverse_until(collection, first, last, limit):
    """
    Like :func:`reverse_range`, but stop as soon as either cursor
    reaches `limit`.

    :return: tuple ``(f, l)`` of the positions where the leading and
        trailing cursors stopped; one of them equals `limit`.
    """
    while first != limit and last != limit:
        last = collection.predecessor(last)
        collection.swap(first, last)
        first = collection.successor(first)

    return first, last
