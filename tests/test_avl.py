import math

import pytest

from dstructs.avl import AVL

MAIN_KEYS = [37, 19, 51, 55, 4, 11, 20, 2, 3, 5, 6, 7]


def _build(keys, check_invariants=True):
    tree = AVL(check_invariants=check_invariants)
    for key in keys:
        tree.insert(key, str(key))
    return tree


def test_empty_at_beginning():
    tree = AVL()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height() == -1


def test_not_empty_after_insertions():
    tree = _build(MAIN_KEYS)
    assert not tree.is_empty()
    assert len(tree) == len(MAIN_KEYS)
    assert list(tree) == sorted(MAIN_KEYS)


def test_find_returns_data():
    tree = _build(MAIN_KEYS)
    assert tree.find(51) == "51"


def test_remove_returns_data_and_keeps_order():
    tree = _build(MAIN_KEYS)
    assert tree.remove(11) == "11"
    assert tree.remove(51) == "51"
    assert tree.remove(19) == "19"
    assert tree.remove(6) == "6"
    assert list(tree) == [2, 3, 4, 5, 7, 20, 37, 55]
    assert dict(tree.items()) == {k: str(k) for k in [2, 3, 4, 5, 7, 20, 37, 55]}
    assert tree.run_debugging_checks()


def test_find_missing_raises():
    tree = _build(MAIN_KEYS)
    tree.remove(51)
    with pytest.raises(KeyError, match="key not found"):
        tree.find(51)


def test_remove_missing_raises():
    tree = _build(MAIN_KEYS)
    with pytest.raises(KeyError, match="key not found"):
        tree.remove(99)
    assert len(tree) == len(MAIN_KEYS)


def test_duplicate_insert_raises():
    tree = _build([1, 2, 3])
    with pytest.raises(ValueError, match="key already exists"):
        tree.insert(2, "again")
    assert tree.find(2) == "2"
    assert len(tree) == 3


def test_contains():
    tree = _build(MAIN_KEYS)
    assert 20 in tree
    assert 21 not in tree


def test_clear():
    tree = _build(MAIN_KEYS)
    tree.clear()
    assert tree.is_empty()
    assert list(tree) == []
    tree.insert(5, "5")
    assert tree.find(5) == "5"


def test_single_node_renderings():
    tree = AVL()
    tree.insert(1, "a")
    assert tree.in_order_text() == " [1 : a] "
    assert tree.vertical_text() == '. [1: "a"] Bal: 0 Ht: 0\n'


def test_ascending_inserts_rotate():
    tree = _build([1, 2, 3])
    assert tree.height() == 1
    assert tree.vertical_text().splitlines()[0].startswith(". [2:")


def test_in_order_text_lists_all_pairs_in_order():
    tree = _build(MAIN_KEYS)
    text = tree.in_order_text()
    positions = [text.index(f"[{k} : {k}]") for k in sorted(MAIN_KEYS)]
    assert positions == sorted(positions)


def _height_bound(n):
    return 1.45 * math.log2(n + 2)


def test_extended_sequence_matches_model():
    tree = AVL()
    model = {}
    for i in range(10, 901):
        tree.insert(i, str(i))
        model[i] = str(i)
    assert list(tree) == sorted(model)
    assert tree.height() <= _height_bound(len(tree))

    for i in range(10, 901, 7):
        assert tree.remove(i) == model.pop(i)
    for i in range(900, 9, -3):
        if i in tree:
            assert tree.remove(i) == model.pop(i)
    assert list(tree.items()) == sorted(model.items())

    for i in range(10, 900, 2):
        for k in (i, i + 1, 900 - i + 10):
            if k not in tree:
                tree.insert(k, str(k))
                model[k] = str(k)
    for i in range(10, 901, 7):
        for k in (i, 900 - i + 10):
            if k in tree:
                assert tree.remove(k) == model.pop(k)

    assert len(tree) == len(model)
    assert list(tree.items()) == sorted(model.items())
    assert tree.run_debugging_checks()
    assert tree.height() <= _height_bound(len(tree))


def test_unchecked_tree_behaves_the_same():
    checked = _build(range(50))
    unchecked = _build(range(50), check_invariants=False)
    for k in range(0, 50, 3):
        assert checked.remove(k) == unchecked.remove(k)
    assert list(checked.items()) == list(unchecked.items())
    assert unchecked.run_debugging_checks()


def test_remove_everything_empties_tree():
    keys = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    tree = _build(keys)
    for k in keys:
        assert tree.remove(k) == str(k)
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.in_order_text() == " "