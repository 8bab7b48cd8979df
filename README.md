# bintree

A small linked binary tree. Every node holds a value and knows its parent
and its left and right children. Module-level functions in `bintree.tree`
traverse a tree and measure its shape.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.tree import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node` is a dataclass with the fields `value`, `parent`, `left` and `right`.
Passing `parent=` to the constructor only records the parent; it does not
attach the new node to it. Use `insert_left` or `insert_right` for that.

`insert_left(value)` and `insert_right(value)` return the new node. If the
parent already has a child on that side, the old child moves down and
becomes the new node's child on the same side.

`sibling()` returns the other child of the node's parent. `uncle()` returns
the sibling of the node's parent. Each returns `None` when there is no such
node.

`delete()` detaches the node from its parent and clears the `parent`,
`left` and `right` links of every node in its subtree.

Nodes compare by identity, not by value.

## Traversals

```python
from bintree.tree import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402, 128]
list(inorder(root))    # [12, 54, 98, 128, 402]
list(postorder(root))  # [54, 12, 128, 402, 98]
```

Each traversal is a generator of the values stored in the nodes. An empty
tree (`None`) yields nothing.

## Measurements

| Function               | Result                                                           |
|------------------------|------------------------------------------------------------------|
| `height(tree)`         | edges on the longest downward path; 0 for a leaf or `None`       |
| `depth(tree)`          | edges from the node up to the root; 0 for a root or `None`       |
| `size(tree)`           | number of nodes; 0 for `None`                                    |
| `leaves(tree)`         | number of nodes without children                                 |
| `internal_nodes(tree)` | number of nodes with at least one child                          |
| `balance(tree)`        | left subtree height minus right subtree height, counted in nodes; 0 for `None` |
| `is_full(tree)`        | every node has either zero or two children                       |
| `is_perfect(tree)`     | every inner node has two children and all leaves share one depth |
| `is_leaf(node)`        | the node has no children                                         |
| `is_root(node)`        | the node has no parent                                           |

The predicates `is_full`, `is_perfect`, `is_leaf` and `is_root` return
`False` for `None`.

`is_perfect` measures leaf depth up to the root of the whole tree, so call it
on a tree's root node.

## Running the tests

```
pip install ".[test]"
pytest
```