import pytest

from calgkit.linked_list import LinkedList, ListEntry


def int_equal(a, b):
    return a == b


def int_compare(a, b):
    return (a > b) - (a < b)


def check_links(lst):
    """Walk the list forward, checking prev links and the length."""
    entries = []
    entry = lst.head
    previous = None
    while entry is not None:
        assert entry.prev is previous
        entries.append(entry)
        previous = entry
        entry = entry.next
    assert len(entries) == len(lst)
    return [e.data for e in entries]


def make_list():
    lst = LinkedList()
    lst.append(1)
    lst.append(2)
    lst.append(3)
    lst.append(4)
    lst.prepend(0)
    return lst


def test_append_and_prepend_order():
    lst = make_list()
    assert lst.to_list() == [0, 1, 2, 3, 4]
    assert check_links(lst) == [0, 1, 2, 3, 4]
    assert len(lst) == 5


def test_append_returns_entry():
    lst = LinkedList()
    entry = lst.append("a")
    assert isinstance(entry, ListEntry)
    assert entry.data == "a"
    assert lst.head is entry
    first = lst.prepend("b")
    assert lst.head is first
    assert first.next is entry
    assert entry.prev is first


def test_constructor_from_iterable():
    lst = LinkedList(range(10))
    assert lst.to_list() == list(range(10))
    assert check_links(lst) == list(range(10))


def test_empty_list():
    lst = LinkedList()
    assert lst.head is None
    assert len(lst) == 0
    assert lst.to_list() == []
    assert lst.nth_entry(0) is None


def test_nth_entry_and_data():
    lst = make_list()
    for i in range(5):
        assert lst.nth_entry(i).data == i
        assert lst.nth_data(i) == i
    assert lst.nth_entry(5) is None
    assert lst.nth_data(5) is None
    assert lst.nth_entry(400) is None
    assert lst.nth_data(-1) is None


def test_remove_entry():
    lst = make_list()
    entry = lst.nth_entry(2)
    assert lst.remove_entry(entry) is True
    assert lst.to_list() == [0, 1, 3, 4]
    assert check_links(lst) == [0, 1, 3, 4]
    # Removing the head and the tail.
    assert lst.remove_entry(lst.head) is True
    assert lst.remove_entry(lst.nth_entry(len(lst) - 1)) is True
    assert lst.to_list() == [1, 3]
    # Appending after removing the tail links correctly.
    lst.append(9)
    assert check_links(lst) == [1, 3, 9]


def test_remove_entry_invalid():
    lst = make_list()
    assert lst.remove_entry(None) is False
    other = LinkedList([1])
    assert lst.remove_entry(other.head) is False
    entry = lst.head
    assert lst.remove_entry(entry) is True
    assert lst.remove_entry(entry) is False
    assert LinkedList().remove_entry(entry) is False
    assert len(lst) == 4


def test_remove_data():
    lst = LinkedList([4, 2, 4, 1, 4, 4, 3])
    assert lst.remove_data(int_equal, 4) == 4
    assert lst.to_list() == [2, 1, 3]
    assert check_links(lst) == [2, 1, 3]
    assert lst.remove_data(int_equal, 99) == 0
    assert len(lst) == 3


def test_sort_matches_sorted():
    values = [89, 23, 42, 4, 16, 15, 8, 99, 50, 30, 4, 42]
    lst = LinkedList(values)
    lst.sort(int_compare)
    assert lst.to_list() == sorted(values)
    assert check_links(lst) == sorted(values)
    lst.append(1)
    assert lst.to_list()[-1] == 1


def test_sort_keeps_entries():
    lst = LinkedList([3, 1, 2])
    entries = {e.data: e for e in [lst.nth_entry(i) for i in range(3)]}
    lst.sort(int_compare)
    assert [lst.nth_entry(i) for i in range(3)] == [entries[1], entries[2], entries[3]]


def test_sort_small_and_large():
    empty = LinkedList()
    empty.sort(int_compare)
    assert empty.to_list() == []
    single = LinkedList([7])
    single.sort(int_compare)
    assert single.to_list() == [7]
    # Already sorted input is the worst case for the first-entry pivot.
    big = LinkedList(range(3000))
    big.sort(int_compare)
    assert big.to_list() == list(range(3000))
    reverse = LinkedList(range(3000, 0, -1))
    reverse.sort(int_compare)
    assert reverse.to_list() == list(range(1, 3001))


def test_find_data():
    lst = make_list()
    entry = lst.find_data(int_equal, 3)
    assert entry is lst.nth_entry(3)
    assert entry.data == 3
    assert lst.find_data(int_equal, 100) is None


def test_iterator_reads_all():
    lst = make_list()
    it = lst.iterator()
    seen = []
    while it.has_more():
        seen.append(it.next())
    assert seen == lst.to_list()
    assert it.next() is None
    assert it.has_more() is False


def test_iterator_empty():
    it = LinkedList().iterator()
    assert it.has_more() is False
    assert it.next() is None


def test_iterator_remove():
    lst = LinkedList(range(20))
    it = lst.iterator()
    count = 0
    while it.has_more():
        value = it.next()
        if value % 2 == 0:
            it.remove()
        count += 1
    assert count == 20
    assert lst.to_list() == list(range(1, 20, 2))
    assert check_links(lst) == list(range(1, 20, 2))


def test_iterator_remove_all():
    lst = LinkedList(range(5))
    it = lst.iterator()
    while it.has_more():
        it.next()
        it.remove()
    assert len(lst) == 0
    assert lst.head is None
    lst.append(1)
    assert check_links(lst) == [1]


def test_iterator_remove_noop_cases():
    lst = make_list()
    it = lst.iterator()
    it.remove()
    assert len(lst) == 5
    assert it.next() == 0
    it.remove()
    it.remove()
    assert lst.to_list() == [1, 2, 3, 4]
    assert it.next() == 1


def test_python_iteration():
    lst = make_list()
    assert list(lst) == [0, 1, 2, 3, 4]
    it = iter(lst)
    for value in it:
        if value == 2:
            it.remove()
    assert lst.to_list() == [0, 1, 3, 4]


def test_clear():
    lst = make_list()
    entry = lst.head
    lst.clear()
    assert len(lst) == 0
    assert lst.head is None
    assert lst.to_list() == []
    assert lst.remove_entry(entry) is False
    lst.append(5)
    assert check_links(lst) == [5]


@pytest.mark.parametrize("n", [0, 1, 2, 10])
def test_length_tracks_operations(n):
    lst = LinkedList()
    for i in range(n):
        lst.append(i)
        lst.prepend(i)
    assert len(lst) == 2 * n
    assert lst.remove_data(int_equal, 0) == (2 if n else 0)
    assert len(lst) == len(lst.to_list())