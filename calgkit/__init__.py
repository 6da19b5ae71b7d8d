"""Hash table, doubly-linked list, double-ended queue and red-black tree, with hash and string comparison helpers."""

__version__ = "0.1.0"
__all__ = ["compare", "hashing", "hash_table", "linked_list", "queue", "rb_tree"]