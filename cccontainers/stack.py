"""A last-in first-out stack with in-place iterators."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional


class Stack:
    """Stack of elements; iteration runs from the bottom to the top."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(iterable) if iterable is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, element: Any) -> None:
        self._items.append(element)

    def peek(self) -> Any:
        """Return the top element; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError if empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def map(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on each element from bottom to top."""
        for item in self._items:
            fn(item)

    def filter_mut(self, predicate: Callable[[Any], bool]) -> None:
        """Drop the elements for which ``predicate`` does not hold."""
        if not self._items:
            raise IndexError("stack is empty")
        self._items = [item for item in self._items if predicate(item)]

    def filter(self, predicate: Callable[[Any], bool]) -> "Stack":
        """Return a new stack of the elements for which ``predicate`` holds."""
        if not self._items:
            raise IndexError("stack is empty")
        return Stack(item for item in self._items if predicate(item))

    def iter(self) -> "StackIter":
        return StackIter(self)

    def zip_iter(self, other: "Stack") -> "StackZipIter":
        return StackZipIter(self, other)


class StackIter:
    """Walks a :class:`Stack` from bottom to top; can replace what it returned."""

    def __init__(self, stack: Stack) -> None:
        self._stack = stack
        self._index = 0

    def __iter__(self) -> "StackIter":
        return self

    def __next__(self) -> Any:
        items = self._stack._items
        if self._index >= len(items):
            raise StopIteration
        element = items[self._index]
        self._index += 1
        return element

    def replace(self, element: Any) -> Any:
        """Replace the element last returned and return the old one."""
        if self._index == 0:
            raise IndexError("no element has been returned yet")
        items = self._stack._items
        old = items[self._index - 1]
        items[self._index - 1] = element
        return old


class StackZipIter:
    """Walks two stacks side by side from the bottom, yielding pairs.

    Iteration stops when either stack runs out.
    """

    def __init__(self, first: Stack, second: Stack) -> None:
        self._first = first
        self._second = second
        self._index = 0

    def __iter__(self) -> "StackZipIter":
        return self

    def __next__(self) -> tuple[Any, Any]:
        first, second = self._first._items, self._second._items
        if self._index >= len(first) or self._index >= len(second):
            raise StopIteration
        pair = (first[self._index], second[self._index])
        self._index += 1
        return pair

    def replace(self, first_element: Any, second_element: Any) -> tuple[Any, Any]:
        """Replace the pair last returned and return the old pair."""
        if self._index == 0:
            raise IndexError("no pair has been returned yet")
        position = self._index - 1
        first, second = self._first._items, self._second._items
        old = (first[position], second[position])
        first[position] = first_element
        second[position] = second_element
        return old