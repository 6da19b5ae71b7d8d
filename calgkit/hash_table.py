"""Hash table with separate chaining and caller-supplied hash and equality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], Any]
FreeFunc = Callable[[Any], None]

# Each prime is roughly double the previous one and as far as possible
# from the nearest powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611,
    402653189, 805306457, 1610612741,
)


@dataclass(frozen=True)
class HashTablePair:
    """A key and its value, as produced when iterating over a table."""

    key: Any
    value: Any


class _Entry:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: Any, value: Any, next_entry: Optional[_Entry]) -> None:
        self.key = key
        self.value = value
        self.next = next_entry


class HashTable:
    """A mapping from keys to values using the given hash and equality functions.

    The table grows to the next prime size once it is a third full.
    Removing the entry most recently produced by an iterator is safe.
    """

    def __init__(self, hash_func: HashFunc, equal_func: EqualFunc) -> None:
        self._hash_func = hash_func
        self._equal_func = equal_func
        self._key_free_func: Optional[FreeFunc] = None
        self._value_free_func: Optional[FreeFunc] = None
        self._entries = 0
        self._prime_index = 0
        self._table: list[Optional[_Entry]] = self._new_table()

    def _new_table(self) -> list[Optional[_Entry]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._entries * 10
        return [None] * size

    def _index(self, key: Any) -> int:
        return self._hash_func(key) % len(self._table)

    def _free(self, key: Any, value: Any) -> None:
        if self._key_free_func is not None:
            self._key_free_func(key)
        if self._value_free_func is not None:
            self._value_free_func(value)

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._new_table()
        for head in old_table:
            entry = head
            while entry is not None:
                following = entry.next
                index = self._index(entry.key)
                entry.next = self._table[index]
                self._table[index] = entry
                entry = following

    @property
    def table_size(self) -> int:
        """Number of chains currently allocated."""
        return len(self._table)

    def register_free_functions(
        self, key_free_func: Optional[FreeFunc], value_free_func: Optional[FreeFunc]
    ) -> None:
        """Set callbacks invoked on keys and values as entries are discarded."""
        self._key_free_func = key_free_func
        self._value_free_func = value_free_func

    def insert(self, key: Any, value: Any) -> None:
        """Insert a value, replacing any existing entry with an equal key."""
        if (self._entries * 3) // len(self._table) > 0:
            self._enlarge()

        index = self._index(key)
        entry = self._table[index]
        while entry is not None:
            if self._equal_func(entry.key, key):
                if self._value_free_func is not None:
                    self._value_free_func(entry.value)
                if self._key_free_func is not None:
                    self._key_free_func(entry.key)
                entry.key = key
                entry.value = value
                return
            entry = entry.next

        self._table[index] = _Entry(key, value, self._table[index])
        self._entries += 1

    def _find(self, key: Any) -> Optional[_Entry]:
        entry = self._table[self._index(key)]
        while entry is not None:
            if self._equal_func(key, entry.key):
                return entry
            entry = entry.next
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored under key, or None if there is none."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def remove(self, key: Any) -> bool:
        """Remove the entry with the given key; return whether one was found."""
        index = self._index(key)
        previous: Optional[_Entry] = None
        entry = self._table[index]
        while entry is not None:
            if self._equal_func(key, entry.key):
                if previous is None:
                    self._table[index] = entry.next
                else:
                    previous.next = entry.next
                self._free(entry.key, entry.value)
                self._entries -= 1
                return True
            previous = entry
            entry = entry.next
        return False

    def clear(self) -> None:
        """Discard every entry, calling the registered free functions."""
        for head in self._table:
            entry = head
            while entry is not None:
                self._free(entry.key, entry.value)
                entry = entry.next
        self._entries = 0
        self._prime_index = 0
        self._table = self._new_table()

    def __len__(self) -> int:
        return self._entries

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[HashTablePair]:
        chain = 0
        while chain < len(self._table):
            entry = self._table[chain]
            while entry is not None:
                following = entry.next
                yield HashTablePair(entry.key, entry.value)
                entry = following
            chain += 1