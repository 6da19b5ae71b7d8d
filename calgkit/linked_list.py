"""Doubly-linked list with stable entries and a removal-safe iterator."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Union

CompareFunc = Callable[[Any, Any], int]
EqualFunc = Callable[[Any, Any], Any]


class ListEntry:
    """One entry of a :class:`LinkedList`, holding a value and its neighbours."""

    __slots__ = ("data", "prev", "next", "_owner")

    def __init__(self, data: Any, owner: LinkedList) -> None:
        self.data = data
        self.prev: Optional[ListEntry] = None
        self.next: Optional[ListEntry] = None
        self._owner: Optional[LinkedList] = owner

    def __repr__(self) -> str:
        return f"ListEntry({self.data!r})"


class ListIterator:
    """Iterator over a list's values whose current entry may be removed."""

    def __init__(self, linked_list: LinkedList) -> None:
        self._list = linked_list
        # The entry whose ``next`` link leads to the current position,
        # or None when the position is the head of the list.
        self._prev: Optional[ListEntry] = None
        self._current: Optional[ListEntry] = None

    def _slot(self) -> Optional[ListEntry]:
        if self._prev is None:
            return self._list._head
        return self._prev.next

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is self._slot()

    def has_more(self) -> bool:
        """Return True if another value remains to be read."""
        if not self._current_is_live():
            return self._slot() is not None
        assert self._current is not None
        return self._current.next is not None

    def next(self) -> Any:
        """Advance and return the next value, or None at the end of the list."""
        if not self._current_is_live():
            self._current = self._slot()
        else:
            assert self._current is not None
            self._prev = self._current
            self._current = self._current.next
        return None if self._current is None else self._current.data

    def remove(self) -> None:
        """Remove the entry last returned by :meth:`next`; otherwise do nothing."""
        if not self._current_is_live():
            return
        assert self._current is not None
        self._list._unlink(self._current)
        self._current = None

    def __iter__(self) -> ListIterator:
        return self

    def __next__(self) -> Any:
        if not self.has_more():
            raise StopIteration
        return self.next()


class LinkedList:
    """A doubly-linked list of arbitrary values."""

    def __init__(self, iterable: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[ListEntry] = None
        self._tail: Optional[ListEntry] = None
        self._length = 0
        if iterable is not None:
            for item in iterable:
                self.append(item)

    @property
    def head(self) -> Optional[ListEntry]:
        """The first entry, or None if the list is empty."""
        return self._head

    def _entries(self) -> Iterator[ListEntry]:
        entry = self._head
        while entry is not None:
            following = entry.next
            yield entry
            entry = following

    def _unlink(self, entry: ListEntry) -> None:
        if entry.prev is None:
            self._head = entry.next
        else:
            entry.prev.next = entry.next
        if entry.next is None:
            self._tail = entry.prev
        else:
            entry.next.prev = entry.prev
        entry.prev = None
        entry.next = None
        entry._owner = None
        self._length -= 1

    def _relink(self, entries: Iterable[ListEntry]) -> None:
        previous: Optional[ListEntry] = None
        self._head = None
        for entry in entries:
            entry.prev = previous
            entry.next = None
            if previous is None:
                self._head = entry
            else:
                previous.next = entry
            previous = entry
        self._tail = previous

    def prepend(self, data: Any) -> ListEntry:
        """Add a value at the start of the list and return its entry."""
        entry = ListEntry(data, self)
        entry.next = self._head
        if self._head is None:
            self._tail = entry
        else:
            self._head.prev = entry
        self._head = entry
        self._length += 1
        return entry

    def append(self, data: Any) -> ListEntry:
        """Add a value at the end of the list and return its entry."""
        entry = ListEntry(data, self)
        entry.prev = self._tail
        if self._tail is None:
            self._head = entry
        else:
            self._tail.next = entry
        self._tail = entry
        self._length += 1
        return entry

    def nth_entry(self, n: int) -> Optional[ListEntry]:
        """Return the entry at index n, or None if n is out of range."""
        if n < 0:
            return None
        for index, entry in enumerate(self._entries()):
            if index == n:
                return entry
        return None

    def nth_data(self, n: int) -> Any:
        """Return the value at index n, or None if n is out of range."""
        entry = self.nth_entry(n)
        return None if entry is None else entry.data

    def __len__(self) -> int:
        return self._length

    def to_list(self) -> list[Any]:
        """Return the values of the list, in order, as a Python list."""
        return [entry.data for entry in self._entries()]

    def remove_entry(self, entry: Optional[ListEntry]) -> bool:
        """Remove an entry of this list; return False if it is not one."""
        if self._head is None or entry is None or entry._owner is not self:
            return False
        self._unlink(entry)
        return True

    def remove_data(self, equal_func: EqualFunc, data: Any) -> int:
        """Remove every value equal to data; return how many were removed."""
        removed = 0
        for entry in self._entries():
            if equal_func(entry.data, data):
                self._unlink(entry)
                removed += 1
        return removed

    def sort(self, compare_func: CompareFunc) -> None:
        """Sort the list in place by a three-way comparison function.

        Quicksort with the first entry as pivot; entries keep their identity.
        """
        ordered: list[ListEntry] = []
        stack: list[Union[ListEntry, list[ListEntry]]] = [list(self._entries())]
        while stack:
            item = stack.pop()
            if isinstance(item, ListEntry):
                ordered.append(item)
                continue
            if len(item) < 2:
                ordered.extend(item)
                continue
            pivot, *rest = item
            less: list[ListEntry] = []
            more: list[ListEntry] = []
            for entry in rest:
                target = less if compare_func(entry.data, pivot.data) < 0 else more
                target.append(entry)
            # Partitions are built by prepending, so their order is reversed.
            less.reverse()
            more.reverse()
            stack.append(more)
            stack.append(pivot)
            stack.append(less)
        self._relink(ordered)

    def find_data(self, equal_func: EqualFunc, data: Any) -> Optional[ListEntry]:
        """Return the first entry whose value equals data, or None."""
        for entry in self._entries():
            if equal_func(entry.data, data):
                return entry
        return None

    def iterator(self) -> ListIterator:
        """Return an iterator that allows removing the current entry."""
        return ListIterator(self)

    def __iter__(self) -> ListIterator:
        return ListIterator(self)

    def clear(self) -> None:
        """Remove every entry from the list."""
        for entry in self._entries():
            entry.prev = None
            entry.next = None
            entry._owner = None
        self._head = None
        self._tail = None
        self._length = 0

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"