"""AVL tree nodes and the height, balance and rotation operations on subtrees.

Each operation that can change the root of a subtree returns the new root,
which the caller stores back into the parent's child slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


class AVLInvariantError(RuntimeError):
    """Raised when a subtree is found in a state the AVL algorithms never produce."""


@dataclass(eq=False)
class TreeNode:
    """A node of an AVL tree; a new node is a leaf of height 0."""

    key: Any
    data: Any
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    height: int = 0


def height_of(node: Optional[TreeNode]) -> int:
    """Return the recorded height of node, or -1 for a missing node."""
    return -1 if node is None else node.height


def balance_factor(node: Optional[TreeNode]) -> int:
    """Return right height minus left height, or 0 for a missing node."""
    if node is None:
        return 0
    return height_of(node.right) - height_of(node.left)


def update_height(node: Optional[TreeNode]) -> None:
    """Recompute node's height from its children's recorded heights."""
    if node is None:
        return
    node.height = 1 + max(height_of(node.left), height_of(node.right))


def rotate_left(node: Optional[TreeNode]) -> TreeNode:
    """Rotate the subtree rooted at node to the left and return the new root."""
    if node is None:
        raise AVLInvariantError("ERROR: _rotateLeft called on nullptr")
    pivot = node.right
    if pivot is None:
        raise AVLInvariantError("ERROR: _rotateLeft: right child is nullptr")
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right(node: Optional[TreeNode]) -> TreeNode:
    """Rotate the subtree rooted at node to the right and return the new root."""
    if node is None:
        raise AVLInvariantError("ERROR: _rotateRight called on nullptr")
    pivot = node.left
    if pivot is None:
        raise AVLInvariantError("ERROR: _rotateRight: left child is nullptr")
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right_left(node: Optional[TreeNode]) -> TreeNode:
    """Rotate the right child right, then node left; return the new root."""
    if node is None:
        raise AVLInvariantError("ERROR: _rotateRightLeft called on nullptr")
    node.right = rotate_right(node.right)
    return rotate_left(node)


def rotate_left_right(node: Optional[TreeNode]) -> TreeNode:
    """Rotate the left child left, then node right; return the new root."""
    if node is None:
        raise AVLInvariantError("ERROR: _rotateLeftRight called on nullptr")
    node.left = rotate_left(node.left)
    return rotate_right(node)


def ensure_balance(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Rebalance the subtree at node, update its height and return its root.

    The children are assumed to be balanced with correct heights already.
    """
    if node is None:
        return None

    initial = balance_factor(node)
    if not -2 <= initial <= 2:
        raise AVLInvariantError(
            f"ERROR: Detected invalid initial balance factor: {initial}"
            " ; This should never happen here."
        )

    if initial == -2:
        l_balance = balance_factor(node.left)
        if l_balance in (-1, 0):
            node = rotate_right(node)
        elif l_balance == 1:
            node = rotate_left_right(node)
        else:
            raise AVLInvariantError(
                f"ERROR: l_balance has unexpected value: {l_balance}"
                " ; This should never happen here."
            )
    elif initial == 2:
        r_balance = balance_factor(node.right)
        if r_balance in (1, 0):
            node = rotate_left(node)
        elif r_balance == -1:
            node = rotate_right_left(node)
        else:
            raise AVLInvariantError(
                f"ERROR: r_balance has unexpected value: {r_balance}"
                " ; This should never happen here."
            )

    update_height(node)

    final = balance_factor(node)
    if not -1 <= final <= 1:
        raise AVLInvariantError(
            f"ERROR: Invalid balance factor after _ensureBalance: {final}"
            " ; Something went wrong."
        )
    return node