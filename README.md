# cccontainers

Plain-Python container types with explicit iterators that can change the
container while they walk it:

- `cccontainers.slist.SList`: a singly linked list with positional inserts,
  splicing, sublists, filtering and sorting.
- `cccontainers.slist_iter.SListIter`: walks one `SList` and can add, remove
  or replace the element it last returned without being invalidated.
- `cccontainers.slist_zip.SListZipIter`: walks two `SList` objects side by
  side, yielding pairs. It can add, remove or replace the pair it last
  returned.
- `cccontainers.rbtree.RBTree`: the red-black tree underneath the ordered
  containers. Its `check()` method verifies key order and the red-black rules
  and returns an `RBError` value.
- `cccontainers.treetable.TreeTable`: an ordered key/value table, with
  `TreeTableIter` for removing entries during iteration.
- `cccontainers.treeset.TreeSet`: an ordered set built on `TreeTable`, with
  `TreeSetIter`.
- `cccontainers.stack.Stack`: a LIFO stack, with `StackIter` and
  `StackZipIter`, both of which can replace what they last returned.

Failed lookups raise the usual Python exceptions (`IndexError`, `KeyError`,
`ValueError`). They do not return status codes.

`SList.contains`, `SList.index_of` and `SList.remove` compare elements by
identity (`is`). `SList.contains_value` compares by value. It uses `==`, or a
comparator that returns 0 for equal values.

## Installation

```
pip install cccontainers
```

To run the tests:

```
pip install "cccontainers[test]"
pytest
```

## Examples

```python
from cccontainers.slist import SList
from cccontainers.slist_iter import SListIter

items = SList([1, 2, 3, 4])
items.add_at(90, 2)             # [1, 2, 90, 3, 4]
items.get_at(2)                 # 90

it = SListIter(items)
for value in it:
    if value == 3:
        it.add(32)              # inserted right after 3
```

Ordered containers take an optional comparator. It returns a negative number,
zero or a positive number. Without a comparator, the keys' own ordering is used:

```python
from cccontainers.treetable import TreeTable

def compare(a, b):
    return (a > b) - (a < b)

table = TreeTable(compare)
table.add(5, "five")
table.add(1, "one")
table.get_first_key()           # 1
table.get_greater_than(1)       # 5
table.assert_rb_rules()         # RBError.OK
```

A tree set works the same way:

```python
from cccontainers.treeset import TreeSet

tree_set = TreeSet(compare)
for n in (7, 3, 9):
    tree_set.add(n)
list(tree_set)                  # [3, 7, 9]
```

A stack works like this:

```python
from cccontainers.stack import Stack

stack = Stack()
stack.push("a")
stack.push("b")
stack.peek()                    # "b"
stack.pop()                     # "b"
```

## Limits

The containers are not thread-safe. Changing a container through anything
other than the iterator that is walking it leaves that iterator in an
undefined state.