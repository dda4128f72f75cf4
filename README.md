# dstructs

A small collection of classic data structures written in plain Python:

- `dstructs.cube`: a `Cube` value with `volume()` and `surface_area()`.
- `dstructs.linked_list`: a doubly-linked `LinkedList` with O(1) pushes and
  pops at both ends, insertion in front of a given node, and self-checks
  for its size and back links.
- `dstructs.avl_node`: AVL tree nodes (`TreeNode`) and the functions that
  work on subtrees: `height_of`, `balance_factor`, `update_height`,
  `rotate_left`, `rotate_right`, `rotate_right_left`, `rotate_left_right`
  and `ensure_balance`.
- `dstructs.avl_checks`: `check_heights`, `check_balance`, `check_order`,
  and the text renderings `in_order_text` and `vertical_text`.
- `dstructs.avl`: an `AVL` tree map that rebalances on every insert and
  remove and can verify its own height, balance and ordering invariants.

It has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cube

```python
from dstructs.cube import Cube

cube = Cube(3)
print(cube.volume())        # 27
print(cube.surface_area())  # 54
print(Cube(3) == Cube(3))   # True
```

## Linked lists

```python
from dstructs.linked_list import LinkedList

lst = LinkedList([5, 6, 8, 9])
print(lst)                  # [(5)(6)(8)(9)]
print(len(lst))             # 4

lst.push_front(1)
lst.push_back(10)
print(lst.front(), lst.back())  # 1 10

lst.pop_front()
lst.pop_back()
print(list(lst))            # [5, 6, 8, 9]

# Link a new node in front of an existing one; existing nodes are untouched.
lst.insert_before(lst.tail, 7)
print(lst)                  # [(5)(6)(8)(7)(9)]

print(lst.copy() == lst)    # True
print(lst.assert_correct_size(), lst.assert_prev_links())  # True True
```

`front()` and `back()` on an empty list raise `IndexError`; `pop_front()` and
`pop_back()` on an empty list do nothing. `insert_before(None, data)` appends
at the back. `assert_correct_size()` and `assert_prev_links()` raise
`LinkedListError` if the list's links or stored size are inconsistent.

## AVL tree

```python
from dstructs.avl import AVL

tree = AVL()
for key in (37, 19, 51, 55, 4, 11, 20, 2, 3, 5, 6, 7):
    tree.insert(key, str(key))

print(tree.find(51))        # 51
print(tree.remove(11))      # 11
print(19 in tree)           # True
print(len(tree), tree.height())
print(list(tree.items())[:3])   # [(2, '2'), (3, '3'), (4, '4')]
print(tree.in_order_text())
print(tree.vertical_text())
```

`find` and `remove` raise `KeyError` for a missing key, and `insert` raises
`ValueError` for a key that is already present. By default the tree runs
`run_debugging_checks()` after every change, raising `AVLInvariantError` if
heights, balance or key order are wrong. Pass `check_invariants=False` to
turn that off when speed matters.

## What it does not do

The linked list has no sorting or merging operations of its own: there is no
ordered insertion, insertion sort, merge or merge sort for `LinkedList`.
Those can be built on `push_back`, iteration and `insert_before`. The package
also installs no command-line program; it is a library only.