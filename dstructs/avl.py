"""A self-balancing AVL binary search tree mapping keys to data items."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from dstructs.avl_checks import (
    check_balance,
    check_heights,
    check_order,
    in_order_text as _in_order_text,
    vertical_text as _vertical_text,
)
from dstructs.avl_node import (
    AVLInvariantError,
    TreeNode,
    ensure_balance,
    height_of,
)


class AVL:
    """An AVL tree with unique keys.

    When check_invariants is true, the height, balance and ordering of the
    whole tree are verified after every insertion and removal.
    """

    def __init__(self, check_invariants: bool = True) -> None:
        self._root: Optional[TreeNode] = None
        self._size = 0
        self.check_invariants = check_invariants

    def find(self, key: Any) -> Any:
        """Return the data stored under key; raise KeyError if it is absent."""
        node = self._find(key)
        if node is None:
            raise KeyError("error in find(): key not found")
        return node.data

    def _find(self, key: Any) -> Optional[TreeNode]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def insert(self, key: Any, data: Any) -> None:
        """Insert key with its data; raise ValueError if the key already exists."""
        self._root = self._insert(self._root, key, data)
        self._size += 1
        if self.check_invariants:
            self.run_debugging_checks()

    def _insert(self, node: Optional[TreeNode], key: Any, data: Any) -> TreeNode:
        if node is None:
            return TreeNode(key, data)
        if key == node.key:
            raise ValueError("error in insert(): key already exists")
        if key < node.key:
            node.left = self._insert(node.left, key, data)
        else:
            node.right = self._insert(node.right, key, data)
        balanced = ensure_balance(node)
        assert balanced is not None
        return balanced

    def remove(self, key: Any) -> Any:
        """Remove key and return its data; raise KeyError if it is absent."""
        self._root, data = self._remove_key(self._root, key)
        self._size -= 1
        if self.check_invariants:
            self.run_debugging_checks()
        return data

    def _remove_key(
        self, node: Optional[TreeNode], key: Any
    ) -> tuple[Optional[TreeNode], Any]:
        if node is None:
            raise KeyError("error in remove(): key not found")
        if key == node.key:
            return self._remove_node(node)
        if key < node.key:
            node.left, data = self._remove_key(node.left, key)
        else:
            node.right, data = self._remove_key(node.right, key)
        return ensure_balance(node), data

    def _remove_node(self, node: TreeNode) -> tuple[Optional[TreeNode], Any]:
        data = node.data
        if node.left is None:
            return node.right, data
        if node.right is None:
            return node.left, data
        # Two children: replace with the in-order predecessor.
        node.left, predecessor = self._remove_max(node.left)
        node.key, node.data = predecessor.key, predecessor.data
        return ensure_balance(node), data

    def _remove_max(self, node: TreeNode) -> tuple[Optional[TreeNode], TreeNode]:
        if node.right is None:
            return node.left, node
        node.right, removed = self._remove_max(node.right)
        return ensure_balance(node), removed

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[TreeNode]:
        stack: list[TreeNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._nodes())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, data) pairs in increasing key order."""
        return ((node.key, node.data) for node in self._nodes())

    def is_empty(self) -> bool:
        """Return True when the tree holds no keys."""
        return self._root is None

    def clear(self) -> None:
        """Remove every key from the tree."""
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Return the height of the tree, -1 when it is empty."""
        return height_of(self._root)

    def in_order_text(self) -> str:
        """Render the tree contents in key order."""
        return _in_order_text(self._root)

    def vertical_text(self) -> str:
        """Render the tree as an indented outline with balance and height."""
        return _vertical_text(self._root)

    def run_debugging_checks(self) -> bool:
        """Verify heights, balance and key order; raise AVLInvariantError on failure."""
        if not check_heights(self._root):
            raise AVLInvariantError("ERROR: _debugHeightCheck failed")
        if not check_balance(self._root):
            raise AVLInvariantError("ERROR: _debugBalanceCheck failed")
        if not check_order(self._root):
            raise AVLInvariantError("ERROR: _debugOrderCheck failed")
        return True