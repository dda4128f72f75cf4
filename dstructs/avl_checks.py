"""Consistency checks and text renderings for AVL subtrees."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

from dstructs.avl_node import TreeNode, balance_factor, height_of


def check_heights(node: Optional[TreeNode]) -> bool:
    """Return True if every recorded height is one more than its taller child's."""
    if node is None:
        return True
    if not check_heights(node.left) or not check_heights(node.right):
        return False
    here = height_of(node)
    left = height_of(node.left)
    right = height_of(node.right)
    if here - max(left, right) != 1:
        print(
            "_debugHeightCheck internals:\n"
            f"here: {here}\nleft: {left}\nright: {right}",
            file=sys.stderr,
        )
        return False
    return True


def check_balance(node: Optional[TreeNode]) -> bool:
    """Return True if every balance factor in the subtree lies within -1..1."""
    if node is None:
        return True
    if not check_balance(node.left) or not check_balance(node.right):
        return False
    return -1 <= balance_factor(node) <= 1


def _in_order_nodes(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def check_order(node: Optional[TreeNode]) -> bool:
    """Return True if the in-order keys are strictly increasing."""
    previous: Any = None
    first = True
    for current in _in_order_nodes(node):
        if not first and previous >= current.key:
            print(
                "ERROR: These keys should be in strictly increasing order:\n"
                f"{previous} followed by {current.key}",
                file=sys.stderr,
            )
            return False
        previous = current.key
        first = False
    return True


def in_order_text(node: Optional[TreeNode]) -> str:
    """Render the subtree in order; each missing child shows as a space."""
    parts: list[str] = []

    def visit(current: Optional[TreeNode]) -> None:
        if current is None:
            parts.append(" ")
            return
        visit(current.left)
        parts.append(f"[{current.key} : {current.data}]")
        visit(current.right)

    visit(node)
    return "".join(parts)


def vertical_text(node: Optional[TreeNode]) -> str:
    """Render the subtree as an indented outline, one node per line.

    Children are listed under their parent, left before right; a node with
    exactly one child shows the missing one as "[]".
    """
    lines: list[str] = []
    stack: list[tuple[Optional[TreeNode], int]] = [(node, 0)]
    while stack:
        current, margin = stack.pop()
        prefix = " " * margin + ("|- " if margin > 0 else ". ")
        if current is None:
            lines.append(prefix + "[]")
            continue
        if current.left is not None or current.right is not None:
            stack.append((current.right, margin + 1))
            stack.append((current.left, margin + 1))
        lines.append(
            f'{prefix}[{current.key}: "{current.data}"] '
            f"Bal: {balance_factor(current)} Ht: {height_of(current)}"
        )
    return "".join(line + "\n" for line in lines)