# calgkit

A small collection of classic data structures for Python, each driven by
explicit, pluggable hashing and comparison functions:

- `calgkit.hash_table.HashTable`: a chained hash table that grows through a
  fixed series of prime table sizes once it is a third full, and can run
  callbacks when keys or values are discarded.
- `calgkit.linked_list.LinkedList`: a doubly-linked list with entry-level
  access (`ListEntry`), quicksort by a comparison function, and an iterator
  (`ListIterator`) that can remove the current entry safely.
- `calgkit.queue.Queue`: a double-ended queue.
- `calgkit.rb_tree.RBTree`: a red-black balanced binary tree keyed by a
  comparison function, with `RBTreeNode`, `NodeColor`, `NodeSide` and
  `subtree_height`.
- `calgkit.hashing`: `int_hash`, `pointer_hash` (by object identity),
  `string_hash` (djb2 over UTF-8 bytes) and `string_nocase_hash`
  (ASCII letters folded to lower case). All return unsigned 32-bit values.
- `calgkit.compare`: `string_equal`, `string_compare`, `string_nocase_equal`
  and `string_nocase_compare`. Comparisons return -1, 0 or 1; the
  case-insensitive versions fold ASCII letters only. `str` and `bytes` are
  accepted, but not mixed.

## Installation

```
pip install calgkit
```

## Examples

### Hash table

```python
from calgkit.hash_table import HashTable
from calgkit.hashing import string_hash
from calgkit.compare import string_equal

table = HashTable(string_hash, string_equal)
table.insert("apple", 1)
table.insert("pear", 2)

table.lookup("apple")      # 1
table.lookup("plum")       # None
"pear" in table            # True
len(table)                 # 2
table.table_size           # 193
table.remove("pear")       # True

for pair in table:         # HashTablePair(key, value)
    print(pair.key, pair.value)
```

Inserting an existing key replaces its entry. Callbacks registered with
`register_free_functions(key_free_func, value_free_func)` are called on the
old key and value whenever an entry is removed, overwritten or cleared
with `clear()`. Removing the entry most recently produced while iterating
is safe.

### Doubly-linked list

```python
from calgkit.linked_list import LinkedList
from calgkit.compare import string_compare, string_equal

items = LinkedList(["pear", "apple", "fig"])
items.append("kiwi")
items.prepend("plum")
items.sort(string_compare)
items.to_list()            # ['apple', 'fig', 'kiwi', 'pear', 'plum']

items.remove_data(string_equal, "fig")   # 1
items.nth_data(0)                        # 'apple'
entry = items.find_data(string_equal, "kiwi")
items.remove_entry(entry)                # True

it = items.iterator()
for value in it:
    if value.startswith("p"):
        it.remove()
items.to_list()            # ['apple']
```

`nth_entry` and `nth_data` return `None` for an index out of range;
`remove_entry` returns `False` for an entry that is not in the list.

### Double-ended queue

```python
from calgkit.queue import Queue

queue = Queue()
queue.push_tail(1)
queue.push_head(0)
queue.peek_tail()          # 1
queue.pop_head()           # 0
queue.is_empty()           # False
list(queue)                # [1]
```

Popping or peeking at an empty queue raises `IndexError`.

### Red-black tree

```python
from calgkit.rb_tree import RBTree, subtree_height

def compare(a, b):
    return (a > b) - (a < b)

tree = RBTree(compare)
for n in (5, 2, 8, 1):
    tree.insert(n, str(n))

tree.lookup(8)             # '8'
tree.lookup(7)             # None
len(tree)                  # 4
tree.to_list()             # [1, 2, 5, 8]
subtree_height(tree.root_node)
tree.remove(2)             # True
```

`root_node` is a property. Equal keys may be inserted more than once.
`remove_node` raises `ValueError` for a node that does not belong to the
tree.

## What the package does not do

It is a library only: it provides no command-line program, and it does not
save its structures to disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```