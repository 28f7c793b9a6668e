from .collection import (ForwardCollection, BidirectionalCollection,
                         RandomAccessCollection, ForwardArray,
                         BidirectionalArray, ArrayCollection)
from .linkedlist import SinglyLinkedList, DoublyLinkedList
from .rotatedview import (ChainedRotation, BidirectionalRotation,
                          IndexedRotation, ViewPosition)
