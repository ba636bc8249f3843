"""A singly linked list with head and tail references."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional["_Node"] = None) -> None:
        self.data = data
        self.next = next


def _link_chain(items: Iterable[Any]) -> tuple[Optional[_Node], Optional[_Node], int]:
    """Build a detached chain of nodes; return its head, tail and length."""
    head: Optional[_Node] = None
    tail: Optional[_Node] = None
    count = 0
    for item in items:
        node = _Node(item)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
        count += 1
    return head, tail, count


class SList:
    """Singly linked list.

    Membership, lookup and removal by element (``contains``, ``index_of``,
    ``remove``) compare by identity; ``contains_value`` compares by value.
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if iterable is not None:
            for item in iterable:
                self.add_last(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"SList({self.to_list()!r})"

    # internal helpers -------------------------------------------------

    def _pairs(self) -> Iterator[tuple[Optional[_Node], _Node]]:
        prev = None
        node = self._head
        while node is not None:
            yield prev, node
            prev, node = node, node.next

    def _node_at(self, index: int) -> tuple[_Node, Optional[_Node]]:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        for position, (prev, node) in enumerate(self._pairs()):
            if position == index:
                return node, prev
        raise IndexError(f"index {index} out of range")

    def _node_of(self, element: Any) -> tuple[_Node, Optional[_Node]]:
        for prev, node in self._pairs():
            if node.data is element:
                return node, prev
        raise ValueError("element not in list")

    def _unlink(self, node: _Node, prev: Optional[_Node]) -> Any:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node.next is None:
            self._tail = prev
        self._size -= 1
        return node.data

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("list is empty")

    # adding -----------------------------------------------------------

    def add(self, element: Any) -> None:
        """Append an element to the end of the list."""
        self.add_last(element)

    def add_first(self, element: Any) -> None:
        node = _Node(element, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_last(self, element: Any) -> None:
        node = _Node(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at(self, element: Any, index: int) -> None:
        """Insert before the element at ``index``, which must already exist."""
        node, prev = self._node_at(index)
        new = _Node(element, node)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        self._size += 1

    def add_all(self, other: Iterable[Any]) -> None:
        """Append copies of the references held by ``other``."""
        head, tail, count = _link_chain(list(other))
        if head is None:
            return
        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._size += count

    def add_all_at(self, other: Iterable[Any], index: int) -> None:
        """Insert the elements of ``other`` before the element at ``index``."""
        items = list(other)
        if not items:
            return
        node, prev = self._node_at(index)
        head, tail, count = _link_chain(items)
        assert tail is not None
        tail.next = node
        if prev is None:
            self._head = head
        else:
            prev.next = head
        self._size += count

    def splice(self, other: "SList") -> None:
        """Move every node of ``other`` to the end of this list."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other._size == 0:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        self._size += other._size
        other._clear_links()

    def splice_at(self, other: "SList", index: int) -> None:
        """Move every node of ``other`` before the element at ``index``."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if other._size == 0:
            return
        node, prev = self._node_at(index)
        assert other._tail is not None
        other._tail.next = node
        if prev is None:
            self._head = other._head
        else:
            prev.next = other._head
        self._size += other._size
        other._clear_links()

    def _clear_links(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    # removing ---------------------------------------------------------

    def remove(self, element: Any) -> Any:
        """Remove the first occurrence of ``element`` (by identity) and return it."""
        node, prev = self._node_of(element)
        return self._unlink(node, prev)

    def remove_at(self, index: int) -> Any:
        node, prev = self._node_at(index)
        return self._unlink(node, prev)

    def remove_first(self) -> Any:
        self._require_items()
        assert self._head is not None
        return self._unlink(self._head, None)

    def remove_last(self) -> Any:
        self._require_items()
        node, prev = self._node_at(self._size - 1)
        return self._unlink(node, prev)

    def remove_all(self, callback: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each to ``callback`` if given."""
        self._require_items()
        if callback is not None:
            for item in self:
                callback(item)
        self._clear_links()

    def replace_at(self, element: Any, index: int) -> Any:
        """Replace the element at ``index`` and return the old one."""
        node, _ = self._node_at(index)
        old = node.data
        node.data = element
        return old

    # access -----------------------------------------------------------

    def get_first(self) -> Any:
        self._require_items()
        assert self._head is not None
        return self._head.data

    def get_last(self) -> Any:
        self._require_items()
        assert self._tail is not None
        return self._tail.data

    def get_at(self, index: int) -> Any:
        node, _ = self._node_at(index)
        return node.data

    # whole-list operations --------------------------------------------

    def reverse(self) -> None:
        if self._size < 2:
            return
        prev = None
        node = self._head
        self._tail = self._head
        while node is not None:
            following = node.next
            node.next = prev
            prev, node = node, following
        self._head = prev

    def sublist(self, start: int, end: int) -> "SList":
        """Return a new list of the elements from ``start`` to ``end`` inclusive."""
        if start < 0 or start > end or end >= self._size:
            raise ValueError(f"invalid range {start}..{end}")
        return SList(self.to_list()[start:end + 1])

    def copy_shallow(self) -> "SList":
        return SList(self)

    def copy_deep(self, copier: Callable[[Any], Any]) -> "SList":
        return SList(copier(item) for item in self)

    def contains(self, element: Any) -> int:
        """Count the occurrences of ``element`` by identity."""
        return sum(1 for item in self if item is element)

    def contains_value(
        self, element: Any, cmp: Optional[Callable[[Any, Any], int]] = None
    ) -> int:
        """Count the elements equal to ``element``.

        ``cmp`` returns 0 for equal values; without it ``==`` is used.
        """
        if cmp is None:
            return sum(1 for item in self if item == element)
        return sum(1 for item in self if cmp(item, element) == 0)

    def index_of(self, element: Any) -> int:
        """Return the index of the first occurrence of ``element`` by identity."""
        for position, item in enumerate(self):
            if item is element:
                return position
        raise ValueError("element not in list")

    def to_list(self) -> list[Any]:
        return list(self)

    def sort(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        """Sort the elements in place, keeping the existing nodes."""
        ordered = sorted(self, key=key)
        node = self._head
        for item in ordered:
            assert node is not None
            node.data = item
            node = node.next

    def foreach(self, op: Callable[[Any], Any]) -> None:
        for item in self:
            op(item)

    def filter(self, predicate: Callable[[Any], bool]) -> "SList":
        """Return a new list of the elements for which ``predicate`` holds."""
        self._require_items()
        return SList(item for item in self if predicate(item))

    def filter_mut(self, predicate: Callable[[Any], bool]) -> None:
        """Remove the elements for which ``predicate`` does not hold."""
        self._require_items()
        prev = None
        node = self._head
        while node is not None:
            following = node.next
            if predicate(node.data):
                prev = node
            else:
                self._unlink(node, prev)
            node = following