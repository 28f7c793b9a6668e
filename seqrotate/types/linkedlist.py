"""
Node-based lists whose natural traversal is forward-only (singly
linked) or bidirectional (doubly linked). Positions are the node
objects themselves and compare by identity. Rotation and reversal only
exchange the values held by nodes, so positions stay valid across
those operations.
"""
from seqrotate.types.collection import ForwardCollection, BidirectionalCollection

__all__ = ["SinglyLinkedList", "DoublyLinkedList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value=None, next_=None):
        self.value = value
        self.next = next_

    def __repr__(self):
        return f"<node {self.value!r}>"


class _DNode(_Node):
    __slots__ = ("prev",)

    def __init__(self, value=None, next_=None, prev=None):
        super().__init__(value, next_)
        self.prev = prev


class _LinkedBase:
    """Element access and bookkeeping shared by both list types"""

    def __init__(self):
        self._length = 0

    @property
    def end(self):
        return self._end

    def _check(self, node):
        if node is self._end:
            raise IndexError("The end position cannot be dereferenced")

    def __getitem__(self, node):
        self._check(node)
        return node.value

    def __setitem__(self, node, value):
        self._check(node)
        node.value = value

    def swap(self, p, q):
        p.value, q.value = q.value, p.value

    def successor(self, node):
        if node is self._end:
            raise IndexError("Cannot advance past end")
        return node.next

    def extend(self, values):
        for v in values:
            self.append(v)

    def __len__(self):
        return self._length

    def __repr__(self):
        return "{}([{}])".format(self.__class__.__name__,
                                 ", ".join(repr(v) for v in self))


class SinglyLinkedList(_LinkedBase, ForwardCollection):
    """
    A singly linked list. `end` is a sentinel node that is never part
    of the data; the last real node links to it.
    """

    def __init__(self, iterable=None):
        super().__init__()
        self._end = _Node()
        self._head = self._end
        self._tail = None # type: _Node

        if iterable is not None:
            self.extend(iterable)

    @property
    def start(self):
        return self._head

    def append(self, value):
        """Add `value` at the end of the list and return its node"""
        node = _Node(value, self._end)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1
        return node


class DoublyLinkedList(_LinkedBase, BidirectionalCollection):
    """
    A circular doubly linked list around a sentinel: the sentinel is
    `end`, its ``next`` is the first node and its ``prev`` the last.
    """

    def __init__(self, iterable=None):
        super().__init__()
        self._end = _DNode()
        self._end.next = self._end.prev = self._end

        if iterable is not None:
            self.extend(iterable)

    @property
    def start(self):
        return self._end.next

    def predecessor(self, node):
        if node is self._end.next:
            raise IndexError("Cannot step back before start")
        return node.prev

    def append(self, value):
        """Add `value` at the end of the list and return its node"""
        last = self._end.prev
        node = _DNode(value, self._end, last)
        last.next = node
        self._end.prev = node
        self._length += 1
        return node
