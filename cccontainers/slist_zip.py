"""An iterator over two SLists in lockstep that can change both as it walks."""

from __future__ import annotations

from typing import Any, Optional

from .slist import SList, _Node


class _Cursor:
    """Position of a zip iterator within one of its lists."""

    __slots__ = ("slist", "current", "prev", "last", "next")

    def __init__(self, slist: SList) -> None:
        self.slist = slist
        self.current: Optional[_Node] = None
        # Node before ``current`` in the list, used to unlink it.
        self.prev: Optional[_Node] = None
        # Node directly before ``next`` in the list.
        self.last: Optional[_Node] = None
        self.next: Optional[_Node] = slist._head

    def advance(self) -> Any:
        node = self.next
        assert node is not None
        self.prev = self.last
        self.current = node
        self.last = node
        self.next = node.next
        return node.data

    def remove(self) -> Any:
        assert self.current is not None
        data = self.slist._unlink(self.current, self.prev)
        self.last = self.prev
        self.current = None
        return data

    def add(self, element: Any) -> None:
        assert self.current is not None
        new = _Node(element, self.next)
        self.current.next = new
        if new.next is None:
            self.slist._tail = new
        self.last = new
        self.slist._size += 1

    def replace(self, element: Any) -> Any:
        assert self.current is not None
        old = self.current.data
        self.current.data = element
        return old


class SListZipIter:
    """Walks two :class:`SList` objects side by side, yielding pairs.

    Iteration stops when either list runs out. Between steps the iterator
    can remove or replace the pair it last returned, or insert a new pair
    right after it, without being invalidated.
    """

    def __init__(self, first: SList, second: SList) -> None:
        self._first = _Cursor(first)
        self._second = _Cursor(second)
        self._index = 0

    def __iter__(self) -> "SListZipIter":
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._first.next is None or self._second.next is None:
            raise StopIteration
        pair = (self._first.advance(), self._second.advance())
        self._index += 1
        return pair

    def _require_current(self) -> None:
        if self._first.current is None or self._second.current is None:
            raise ValueError("no pair was returned since the last change")

    def add(self, first_element: Any, second_element: Any) -> None:
        """Insert a pair right after the pair last returned.

        The new pair is not returned by later steps of this iterator.
        """
        self._require_current()
        self._first.add(first_element)
        self._second.add(second_element)
        self._index += 1

    def remove(self) -> tuple[Any, Any]:
        """Remove the pair last returned and return it."""
        self._require_current()
        pair = (self._first.remove(), self._second.remove())
        self._index -= 1
        return pair

    def replace(self, first_element: Any, second_element: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair."""
        self._require_current()
        return (
            self._first.replace(first_element),
            self._second.replace(second_element),
        )

    def index(self) -> int:
        """Index of the pair last returned."""
        return self._index - 1