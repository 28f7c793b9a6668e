"""
Public entry points. Each picks the implementation matching the
strongest capability tier a collection's type declares.

Selection goes through :func:`functools.singledispatch` on the tier
base classes, so it is settled once per collection type (and cached)
rather than re-examined on every call. Promoting a collection to a
stronger tier changes how many elements get moved, never the result.
"""
from collections import abc
from functools import singledispatch

from seqrotate import rotlog
from seqrotate.config import get_config
from seqrotate.constants import Capability
from seqrotate.exceptions import CapabilityError, InvalidMiddleError
from seqrotate.algorithms import (forward_rotate, bidirectional_rotate,
                                  random_access_rotate, reverse_range)
from seqrotate.types.collection import (ForwardCollection,
                                        BidirectionalCollection,
                                        RandomAccessCollection,
                                        ArrayCollection)
from seqrotate.types.rotatedview import (ChainedRotation,
                                         BidirectionalRotation,
                                         IndexedRotation)

__all__ = ["rotate", "reverse", "rotated_view", "as_collection",
           "algorithm_for"]

_logger = rotlog.newLogger(__name__)

##=============================================
## Adapting
##=============================================

@singledispatch
def as_collection(obj):
    """
    Return `obj` as a tier collection: collections are returned
    unchanged and mutable sequences (lists, etc.) are wrapped, without
    copying, in an :class:`ArrayCollection`.

    :raises CapabilityError: for anything else
    """
    raise CapabilityError(obj)

@as_collection.register(ForwardCollection)
def _(obj):
    return obj

@as_collection.register(abc.MutableSequence)
def _(obj):
    return ArrayCollection(obj)

##=============================================
## Algorithm selection
##=============================================

@singledispatch
def algorithm_for(collection):
    """Return the rotate implementation suited to `collection`"""
    raise CapabilityError(collection)

@algorithm_for.register(ForwardCollection)
def _(collection):
    return forward_rotate

@algorithm_for.register(BidirectionalCollection)
def _(collection):
    return bidirectional_rotate

@algorithm_for.register(RandomAccessCollection)
def _(collection):
    return random_access_rotate


@singledispatch
def _view_type_for(collection):
    raise CapabilityError(collection)

@_view_type_for.register(ForwardCollection)
def _(collection):
    return ChainedRotation

@_view_type_for.register(BidirectionalCollection)
def _(collection):
    return BidirectionalRotation

@_view_type_for.register(RandomAccessCollection)
def _(collection):
    return IndexedRotation


@singledispatch
def _reverse_impl(collection, first, last):
    raise CapabilityError(collection, Capability.BIDIRECTIONAL)

@_reverse_impl.register(BidirectionalCollection)
def _(collection, first, last):
    reverse_range(collection, first, last)

##=============================================
## Helpers
##=============================================

def _resolve(sequence, first, last):
    """
    Adapt `sequence` and fill in the default bounds.

    :return: tuple (collection, first, last)
    """
    collection = as_collection(sequence)

    if first is None:
        first = collection.start
    if last is None:
        last = collection.end

    return collection, first, last

def _check_middle(collection, first, middle, last):
    """
    Raise InvalidMiddleError unless `middle` lies in ``[first, last]``.

    The random-access check is O(1) and always runs; the walk the
    lower tiers need is skipped when ``check_middle`` is disabled.
    """
    if (isinstance(collection, RandomAccessCollection)
            or get_config().check_middle):
        if not collection.is_within(middle, first, last):
            raise InvalidMiddleError(middle, first, last)

##=============================================
## Public API
##=============================================

def rotate(sequence, middle, first=None, last=None):
    """
    Rotate ``[first, last)`` of `sequence` in place so that the element
    at `middle` comes first, keeping the order within each half.

    :param sequence: a tier collection or a mutable sequence
    :param middle: position within ``[first, last]``
    :param first: defaults to the start of `sequence`
    :param last: defaults to the end of `sequence`
    :return: the new position of the element that was at `first`.
        ``rotate(sequence, result, first, last)`` undoes the rotation
        (and returns the original `middle`).
    :raises InvalidMiddleError: if `middle` is outside ``[first, last]``
    """
    collection, first, last = _resolve(sequence, first, last)
    _check_middle(collection, first, middle, last)

    algorithm = algorithm_for(collection)
    _logger.debug("rotate %s via %s", type(collection).__name__,
                  algorithm.__name__)

    return algorithm(collection, first, middle, last)


def reverse(sequence, first=None, last=None):
    """
    Reverse ``[first, last)`` of `sequence` in place.

    :raises CapabilityError: if `sequence` cannot step backwards
    """
    collection, first, last = _resolve(sequence, first, last)
    _reverse_impl(collection, first, last)


def rotated_view(sequence, middle, first=None, last=None):
    """
    Present ``[first, last)`` of `sequence` rotated around `middle`
    without modifying it.

    The view has the same capability tier as `sequence`;
    ``list(view)`` is what :func:`rotate` would leave in place.

    :return: tuple (view, new_first), where `new_first` is the view
        position of the element at `first`
    :raises InvalidMiddleError: if `middle` is outside ``[first, last]``
    """
    collection, first, last = _resolve(sequence, first, last)
    _check_middle(collection, first, middle, last)

    view = _view_type_for(collection)(collection, first, middle, last)
    return view, view.new_first
