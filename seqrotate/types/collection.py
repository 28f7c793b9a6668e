"""
Position-based collections, in three capability tiers.

A collection hands out opaque *positions*. ``start`` is the position of
the first element and ``end`` is one past the last; ``end`` is never
dereferenced. Each tier is a strict superset of the one before:

    ForwardCollection        successor(), equality of positions
    BidirectionalCollection  + predecessor()
    RandomAccessCollection   + O(1) offset() and signed distance()

Subclasses implement the abstract navigation and read methods; a
collection that also implements ``__setitem__`` can be rotated and
reversed in place.
"""
from abc import ABC, abstractmethod
from collections import abc

from seqrotate.constants import Capability

__all__ = ["ForwardCollection", "BidirectionalCollection",
           "RandomAccessCollection",
           "ForwardArray", "BidirectionalArray", "ArrayCollection"]


class ForwardCollection(ABC):
    """Collection offering only successor navigation."""

    capability = Capability.FORWARD

    ##=============================================
    ## Abstract methods
    ##=============================================

    @property
    @abstractmethod
    def start(self):
        """Position of the first element (equals `end` when empty)"""

    @property
    @abstractmethod
    def end(self):
        """Position one past the last element"""

    @abstractmethod
    def successor(self, position):
        """Return the position following `position`.

        Raises IndexError when `position` is `end`."""

    @abstractmethod
    def __getitem__(self, position):
        """Return the element stored at `position`"""

    ##=============================================
    ## Derived operations
    ##=============================================

    def swap(self, p, q):
        """
        Exchange the elements at positions `p` and `q`. If the second
        write fails, the first is undone before the error propagates,
        so no element is ever lost or duplicated.
        """
        a, b = self[p], self[q]
        self[p] = b
        try:
            self[q] = a
        except BaseException:
            self[p] = a
            raise

    def positions(self, first=None, last=None):
        """
        Yield each position in ``[first, last)``.

        :param first: defaults to `start`
        :param last: defaults to `end`
        """
        p = self.start if first is None else first
        last = self.end if last is None else last

        while p != last:
            yield p
            p = self.successor(p)

    def advance(self, position, n):
        """Return the position `n` (>= 0) steps after `position`"""
        for _ in range(n):
            position = self.successor(position)
        return position

    def distance(self, first, last):
        """Number of successor steps from `first` to `last`"""
        return sum(1 for _ in self.positions(first, last))

    def is_within(self, position, first, last):
        """
        True if `position` lies in the closed range ``[first, last]``.
        Walks the range once.
        """
        if position == last:
            return True
        return any(p == position for p in self.positions(first, last))

    def __iter__(self):
        for p in self.positions():
            yield self[p]


class BidirectionalCollection(ForwardCollection):
    """Collection that can also step backwards."""

    capability = Capability.BIDIRECTIONAL

    @abstractmethod
    def predecessor(self, position):
        """Return the position preceding `position`.

        Raises IndexError when `position` is `start`."""


class RandomAccessCollection(BidirectionalCollection):
    """Collection with constant-time offset arithmetic.

    `distance` is signed, so ``distance(p, q) >= 0`` doubles as the
    ordering comparison ``p <= q``.
    """

    capability = Capability.RANDOM_ACCESS

    @abstractmethod
    def offset(self, position, n):
        """Return the position `n` steps (possibly negative) from
        `position`."""

    @abstractmethod
    def distance(self, first, last):
        """Signed number of steps from `first` to `last`"""

    # bidirectional navigation falls out of offset()
    def successor(self, position):
        return self.offset(position, 1)

    def predecessor(self, position):
        return self.offset(position, -1)

    def advance(self, position, n):
        return self.offset(position, n)

    def is_within(self, position, first, last):
        return (self.distance(first, position) >= 0
                and self.distance(position, last) >= 0)

    def __len__(self):
        return self.distance(self.start, self.end)


##=============================================
## Array-backed collections
##=============================================

class _ArrayStorage:
    """
    Shared storage for the array-backed collections: wraps a mutable
    sequence (without copying it) and uses plain ints ``0..len`` as
    positions. The length of the wrapped sequence must not change
    while positions obtained from this wrapper are in use.
    """

    def __init__(self, data=None):
        if data is None:
            data = []
        elif not isinstance(data, abc.MutableSequence):
            # take a private copy of anything that can't be written
            # in place (tuples, generators, ...)
            data = list(data)

        self.data = data # type: abc.MutableSequence

    @property
    def start(self):
        return 0

    @property
    def end(self):
        return len(self.data)

    def _check(self, position):
        if not 0 <= position < len(self.data):
            raise IndexError(position, "Position out of range")

    def successor(self, position):
        if not 0 <= position < len(self.data):
            raise IndexError(position, "Cannot advance past end")
        return position + 1

    def __getitem__(self, position):
        self._check(position)
        return self.data[position]

    def __setitem__(self, position, value):
        self._check(position)
        self.data[position] = value

    def swap(self, p, q):
        # same all-or-nothing exchange as ForwardCollection.swap, minus
        # the bounds checks
        data = self.data
        a, b = data[p], data[q]
        data[p] = b
        try:
            data[q] = a
        except BaseException:
            data[p] = a
            raise

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.data!r})"


class ForwardArray(_ArrayStorage, ForwardCollection):
    """An array that only admits forward traversal"""


class BidirectionalArray(_ArrayStorage, BidirectionalCollection):
    """An array that admits forward and backward traversal"""

    def predecessor(self, position):
        if not 0 < position <= len(self.data):
            raise IndexError(position, "Cannot step back before start")
        return position - 1


class ArrayCollection(_ArrayStorage, RandomAccessCollection):
    """
    Random-access view of a mutable sequence; ``ArrayCollection(lst)``
    rotates `lst` itself.
    """

    def offset(self, position, n):
        p = position + n
        if not 0 <= p <= len(self.data):
            raise IndexError(p, "Position out of range")
        return p

    def distance(self, first, last):
        return last - first
