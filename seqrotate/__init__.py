"""
In-place rotation of sequences around a middle position, using the
cheapest algorithm the sequence's traversal capability allows.

    >>> from seqrotate import rotate
    >>> s = [10, 20, 30, 40, 50, 60, 70]
    >>> rotate(s, 2)
    5
    >>> s
    [30, 40, 50, 60, 70, 10, 20]
"""
from seqrotate.constants import Capability
from seqrotate.exceptions import Error, InvalidMiddleError, CapabilityError
from seqrotate.types import (ForwardCollection, BidirectionalCollection,
                             RandomAccessCollection, ForwardArray,
                             BidirectionalArray, ArrayCollection,
                             SinglyLinkedList, DoublyLinkedList)
from seqrotate.dispatch import (rotate, reverse, rotated_view,
                                as_collection, algorithm_for)
from seqrotate.shifter import BlockShift

__version__ = "0.1.0"
