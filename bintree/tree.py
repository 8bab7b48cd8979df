"""Binary tree nodes with parent links, plus measurements and traversals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node that knows its parent and its two children.

    Creating a node with a parent does not attach it to that parent;
    use :meth:`insert_left` or :meth:`insert_right` for that.
    """

    value: Any
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, value: Any) -> Node:
        """Insert a new left child; any former left child moves below it."""
        new_node = Node(value, parent=self)
        if self.left is not None:
            new_node.left = self.left
            new_node.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: Any) -> Node:
        """Insert a new right child; any former right child moves below it."""
        new_node = Node(value, parent=self)
        if self.right is not None:
            new_node.right = self.right
            new_node.right.parent = new_node
        self.right = new_node
        return new_node

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def is_leaf(node: Optional[Node]) -> bool:
    """True if the node exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """True if the node exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Optional[Node]) -> Iterator[Any]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[Any]:
    """Yield values in in-order: left subtree, node, right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[Any]:
    """Yield values in post-order: left subtree, right subtree, node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def height(tree: Optional[Node]) -> int:
    """Number of edges on the longest downward path; 0 for a leaf or None."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def depth(tree: Optional[Node]) -> int:
    """Number of edges from the node up to the root of its tree."""
    count = 0
    current = tree
    while current is not None and current.parent is not None:
        count += 1
        current = current.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Number of nodes without children."""
    if tree is None:
        return 0
    if tree.left is None and tree.right is None:
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    if tree is None or (tree.left is None and tree.right is None):
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Height of the left subtree minus height of the right subtree, counted in nodes."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return True
    return is_full(tree.left) and is_full(tree.right)


def _all_leaves_at(tree: Optional[Node], level: int) -> bool:
    if tree is None:
        return False
    if tree.left is None and tree.right is None:
        return depth(tree) == level
    if tree.left is None or tree.right is None:
        return False
    return _all_leaves_at(tree.left, level) and _all_leaves_at(tree.right, level)


def is_perfect(tree: Optional[Node]) -> bool:
    """True if every inner node has two children and all leaves share one depth.

    Leaf depth is measured to the root of the whole tree, so the check is
    meant for a tree's root node.
    """
    if tree is None:
        return False
    return _all_leaves_at(tree, _levels(tree) - 1)