"""An iterator over an SList that can change the list as it walks it."""

from __future__ import annotations

from typing import Any, Optional

from .slist import SList, _Node


class SListIter:
    """Walks an :class:`SList` front to back.

    Between steps the iterator can remove or replace the element it last
    returned, or insert a new element right after it. None of these
    invalidate the iterator.
    """

    def __init__(self, slist: SList) -> None:
        self._list = slist
        self._index = 0
        self._current: Optional[_Node] = None
        # Node before ``_current`` in the list, used to unlink it.
        self._prev: Optional[_Node] = None
        # Node directly before ``_next`` in the list.
        self._last: Optional[_Node] = None
        self._next: Optional[_Node] = slist._head

    def __iter__(self) -> "SListIter":
        return self

    def __next__(self) -> Any:
        node = self._next
        if node is None:
            raise StopIteration
        self._prev = self._last
        self._current = node
        self._last = node
        self._next = node.next
        self._index += 1
        return node.data

    def _require_current(self) -> _Node:
        if self._current is None:
            raise ValueError("no element was returned since the last change")
        return self._current

    def remove(self) -> Any:
        """Remove the element last returned and return it."""
        node = self._require_current()
        data = self._list._unlink(node, self._prev)
        self._last = self._prev
        self._current = None
        self._index -= 1
        return data

    def add(self, element: Any) -> None:
        """Insert ``element`` right after the element last returned.

        The new element is not returned by later steps of this iterator.
        """
        anchor = self._require_current()
        new = _Node(element, self._next)
        anchor.next = new
        if new.next is None:
            self._list._tail = new
        self._last = new
        self._list._size += 1
        self._index += 1

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        node = self._require_current()
        old = node.data
        node.data = element
        return old

    def index(self) -> int:
        """Index of the element last returned."""
        return self._index - 1