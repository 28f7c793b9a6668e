"""
Read-only views presenting ``[middle, last) + [first, middle)`` of a
source collection without moving or copying anything.

Constructing a view only records positions. Every traversal starts
over from the source, so a view can be iterated any number of times
and by any number of independent cursors, as long as the source is not
structurally modified in the meantime.
"""
from collections import namedtuple

from seqrotate.types.collection import (ForwardCollection,
                                        BidirectionalCollection,
                                        RandomAccessCollection)

__all__ = ["ChainedRotation", "BidirectionalRotation", "IndexedRotation"]

# segment 0 walks [middle, last) of the source, segment 1 walks
# [first, middle); base is the source position
ViewPosition = namedtuple("ViewPosition", "segment base")


class ChainedRotation(ForwardCollection):
    """
    Forward view chaining the two halves of a source range.

    Positions are :class:`ViewPosition` pairs. They are kept
    normalized: the end of segment 0 is always represented as the
    start of segment 1, so each element has exactly one position and
    ``end`` is ``ViewPosition(1, middle)``.
    """

    def __init__(self, source, first, middle, last):
        """
        :param ForwardCollection source:
        :param first: start of the source range
        :param middle: source position that becomes the view's start
        :param last: end of the source range
        """
        self.source = source
        self._first = first
        self._middle = middle
        self._last = last

    def _normalize(self, position):
        if position.segment == 0 and position.base == self._last:
            return ViewPosition(1, self._first)
        return position

    @property
    def start(self):
        return self._normalize(ViewPosition(0, self._middle))

    @property
    def end(self):
        return ViewPosition(1, self._middle)

    @property
    def new_first(self):
        """Position, in this view, of the source element at `first`.
        This is `end` when ``[first, middle)`` is empty."""
        return ViewPosition(1, self._first)

    def successor(self, position):
        if position == self.end:
            raise IndexError("Cannot advance past end")
        return self._normalize(
            position._replace(base=self.source.successor(position.base)))

    def __getitem__(self, position):
        if position == self.end:
            raise IndexError("The end position cannot be dereferenced")
        return self.source[position.base]

    def __repr__(self):
        return "{}([{}])".format(self.__class__.__name__,
                                 ", ".join(repr(v) for v in self))


class BidirectionalRotation(ChainedRotation, BidirectionalCollection):
    """Chained view over a bidirectional source; can step backwards."""

    def predecessor(self, position):
        if position == self.start:
            raise IndexError("Cannot step back before start")

        if position.segment == 1 and position.base == self._first:
            # step back from the head of [first, middle) to the
            # tail of [middle, last)
            return ViewPosition(0, self.source.predecessor(self._last))

        return position._replace(base=self.source.predecessor(position.base))


class IndexedRotation(RandomAccessCollection):
    """
    Random-access view. Positions are ints ``0..n``; view position `i`
    maps straight to a source position, with no chained iteration:

        i < len_b   ->  middle + i
        otherwise   ->  first + (i - len_b)
    """

    def __init__(self, source, first, middle, last):
        """
        :param RandomAccessCollection source:
        """
        self.source = source
        self._first = first
        self._middle = middle
        self._len_a = source.distance(first, middle)
        self._len_b = source.distance(middle, last)

    @property
    def start(self):
        return 0

    @property
    def end(self):
        return self._len_a + self._len_b

    @property
    def new_first(self):
        """Position, in this view, of the source element at `first`"""
        return self._len_b

    def offset(self, position, n):
        p = position + n
        if not 0 <= p <= self.end:
            raise IndexError(p, "Position out of range")
        return p

    def distance(self, first, last):
        return last - first

    def source_position(self, position):
        """Translate a view position into a position of the source"""
        if not 0 <= position < self.end:
            raise IndexError(position, "Position out of range")

        if position < self._len_b:
            return self.source.offset(self._middle, position)
        return self.source.offset(self._first, position - self._len_b)

    def __getitem__(self, position):
        return self.source[self.source_position(position)]

    def __iter__(self):
        # avoid re-deriving positions through successor()
        for i in range(self.end):
            yield self[i]

    def __repr__(self):
        return "{}([{}])".format(self.__class__.__name__,
                                 ", ".join(repr(v) for v in self))
