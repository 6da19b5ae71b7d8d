"""Red-black balanced binary tree keyed by a caller-supplied comparison."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Callable, Iterator, Optional

CompareFunc = Callable[[Any, Any], int]


class NodeColor(Enum):
    """Colour of a red-black tree node."""

    RED = 0
    BLACK = 1


class NodeSide(IntEnum):
    """Which child of its parent a node is."""

    LEFT = 0
    RIGHT = 1


class RBTreeNode:
    """A node of an :class:`RBTree`, holding a key and a value."""

    __slots__ = ("key", "value", "color", "parent", "children", "_tree")

    def __init__(self, key: Any, value: Any, tree: RBTree) -> None:
        self.key = key
        self.value = value
        self.color = NodeColor.RED
        self.parent: Optional[RBTreeNode] = None
        self.children: list[Optional[RBTreeNode]] = [None, None]
        self._tree: Optional[RBTree] = tree

    def child(self, side: Any) -> Optional[RBTreeNode]:
        """Return the child on the given side, or None for an invalid side."""
        try:
            index = NodeSide(side)
        except ValueError:
            return None
        return self.children[index]

    @property
    def left(self) -> Optional[RBTreeNode]:
        return self.children[NodeSide.LEFT]

    @property
    def right(self) -> Optional[RBTreeNode]:
        return self.children[NodeSide.RIGHT]

    def _side(self) -> NodeSide:
        assert self.parent is not None
        if self.parent.children[NodeSide.LEFT] is self:
            return NodeSide.LEFT
        return NodeSide.RIGHT

    def _sibling(self) -> Optional[RBTreeNode]:
        assert self.parent is not None
        return self.parent.children[1 - self._side()]

    def uncle(self) -> Optional[RBTreeNode]:
        """Return the sibling of this node's parent, or None if there is none."""
        if self.parent is None or self.parent.parent is None:
            return None
        return self.parent._sibling()

    def __repr__(self) -> str:
        return f"RBTreeNode({self.key!r}, {self.value!r}, {self.color.name})"


def _color(node: Optional[RBTreeNode]) -> NodeColor:
    return NodeColor.BLACK if node is None else node.color


def subtree_height(node: Optional[RBTreeNode]) -> int:
    """Return the height of the subtree rooted at node (0 for None)."""
    if node is None:
        return 0
    return 1 + max(subtree_height(node.left), subtree_height(node.right))


class RBTree:
    """A red-black tree mapping keys to values, ordered by compare_func.

    Equal keys may be inserted more than once; later ones go to the right.
    """

    def __init__(self, compare_func: CompareFunc) -> None:
        self._compare = compare_func
        self._root: Optional[RBTreeNode] = None
        self._count = 0

    @property
    def root_node(self) -> Optional[RBTreeNode]:
        """The root node, or None if the tree is empty."""
        return self._root

    def _replace(self, old: RBTreeNode, new: Optional[RBTreeNode]) -> None:
        if new is not None:
            new.parent = old.parent
        if old.parent is None:
            self._root = new
        else:
            old.parent.children[old._side()] = new

    def _rotate(self, node: RBTreeNode, direction: int) -> RBTreeNode:
        new_root = node.children[1 - direction]
        assert new_root is not None
        self._replace(node, new_root)
        node.children[1 - direction] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        moved = node.children[1 - direction]
        if moved is not None:
            moved.parent = node
        return new_root

    def _insert_fixup(self, node: RBTreeNode) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = NodeColor.BLACK
                return
            if parent.color is NodeColor.BLACK:
                return
            grandparent = parent.parent
            assert grandparent is not None
            uncle = node.uncle()
            if uncle is not None and uncle.color is NodeColor.RED:
                parent.color = NodeColor.BLACK
                uncle.color = NodeColor.BLACK
                grandparent.color = NodeColor.RED
                node = grandparent
                continue
            side = node._side()
            if side != parent._side():
                self._rotate(parent, 1 - side)
                node = parent
            parent = node.parent
            assert parent is not None and parent.parent is not None
            grandparent = parent.parent
            self._rotate(grandparent, 1 - node._side())
            parent.color = NodeColor.BLACK
            grandparent.color = NodeColor.RED
            return

    def insert(self, key: Any, value: Any) -> RBTreeNode:
        """Insert a key-value pair and return the new node."""
        node = RBTreeNode(key, value, self)
        parent: Optional[RBTreeNode] = None
        rover = self._root
        side = NodeSide.LEFT
        while rover is not None:
            parent = rover
            side = NodeSide.LEFT if self._compare(key, rover.key) < 0 else NodeSide.RIGHT
            rover = rover.children[side]
        node.parent = parent
        if parent is None:
            self._root = node
        else:
            parent.children[side] = node
        self._insert_fixup(node)
        self._count += 1
        return node

    def lookup_node(self, key: Any) -> Optional[RBTreeNode]:
        """Return the node holding key, or None if there is none."""
        node = self._root
        while node is not None:
            diff = self._compare(key, node.key)
            if diff == 0:
                return node
            node = node.children[NodeSide.LEFT if diff < 0 else NodeSide.RIGHT]
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored under key, or None if there is none."""
        node = self.lookup_node(key)
        return None if node is None else node.value

    def _remove_fixup(
        self, node: Optional[RBTreeNode], parent: Optional[RBTreeNode]
    ) -> None:
        while node is not self._root and _color(node) is NodeColor.BLACK:
            assert parent is not None
            side = (
                NodeSide.LEFT
                if parent.children[NodeSide.LEFT] is node
                else NodeSide.RIGHT
            )
            other = 1 - side
            sibling = parent.children[other]
            assert sibling is not None
            if sibling.color is NodeColor.RED:
                sibling.color = NodeColor.BLACK
                parent.color = NodeColor.RED
                self._rotate(parent, side)
                sibling = parent.children[other]
                assert sibling is not None
            if (
                _color(sibling.children[side]) is NodeColor.BLACK
                and _color(sibling.children[other]) is NodeColor.BLACK
            ):
                sibling.color = NodeColor.RED
                node = parent
                parent = node.parent
                continue
            if _color(sibling.children[other]) is NodeColor.BLACK:
                near = sibling.children[side]
                assert near is not None
                near.color = NodeColor.BLACK
                sibling.color = NodeColor.RED
                self._rotate(sibling, other)
                sibling = parent.children[other]
                assert sibling is not None
            sibling.color = parent.color
            parent.color = NodeColor.BLACK
            far = sibling.children[other]
            assert far is not None
            far.color = NodeColor.BLACK
            self._rotate(parent, side)
            node = self._root
            break
        if node is not None:
            node.color = NodeColor.BLACK

    def remove_node(self, node: RBTreeNode) -> None:
        """Remove a node of this tree; raise ValueError if it is not one."""
        if node._tree is not self:
            raise ValueError("node does not belong to this tree")
        removed_color = node.color
        if node.left is None or node.right is None:
            child = node.right if node.left is None else node.left
            child_parent = node.parent
            self._replace(node, child)
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            removed_color = successor.color
            child = successor.right
            if successor.parent is node:
                child_parent = successor
            else:
                child_parent = successor.parent
                self._replace(successor, child)
                successor.children[NodeSide.RIGHT] = node.right
                node.right.parent = successor
            self._replace(node, successor)
            successor.children[NodeSide.LEFT] = node.left
            node.left.parent = successor
            successor.color = node.color
        if removed_color is NodeColor.BLACK:
            self._remove_fixup(child, child_parent)
        node.parent = None
        node.children = [None, None]
        node._tree = None
        self._count -= 1

    def remove(self, key: Any) -> bool:
        """Remove the node with the given key; return whether one was found."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def _nodes(self) -> Iterator[RBTreeNode]:
        stack: list[RBTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def to_list(self) -> list[Any]:
        """Return the keys of the tree in order."""
        return [node.key for node in self._nodes()]

    def clear(self) -> None:
        """Remove every node from the tree."""
        for node in list(self._nodes()):
            node._tree = None
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in order."""
        return (node.key for node in self._nodes())