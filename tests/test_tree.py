import pytest

from huffpack.tree import INTERNAL, HuffmanNode, MinPriorityQueue, build_tree


def _leaves(node):
    if node.is_leaf():
        return [node]
    found = []
    for child in (node.left, node.right):
        if child is not None:
            found.extend(_leaves(child))
    return found


def test_leaf_and_internal_node():
    leaf = HuffmanNode(97, 3)
    parent = HuffmanNode(INTERNAL, 3, leaf, None)
    assert leaf.is_leaf() is True
    assert parent.is_leaf() is False


def test_queue_pops_in_nondecreasing_order():
    queue = MinPriorityQueue()
    values = [7, 3, 9, 1, 4, 4, 8, 2, 6, 5, 1]
    for index, value in enumerate(values):
        queue.push(HuffmanNode(index, value))
    assert len(queue) == len(values)
    popped = [queue.pop().frequency for _ in range(len(values))]
    assert popped == sorted(values)
    assert len(queue) == 0


def test_queue_pop_empty_raises():
    queue = MinPriorityQueue()
    with pytest.raises(IndexError):
        queue.pop()


def test_queue_single_element():
    queue = MinPriorityQueue()
    node = HuffmanNode(65, 10)
    queue.push(node)
    assert queue.pop() is node
    assert len(queue) == 0


def test_build_tree_empty_returns_none():
    assert build_tree({}) is None
    assert build_tree({65: 0, 66: 0}) is None


def test_build_tree_single_symbol_is_leaf():
    root = build_tree({120: 5})
    assert root.is_leaf()
    assert root.ch == 120
    assert root.frequency == 5


def test_build_tree_root_frequency_is_total():
    freqs = {97: 5, 98: 9, 99: 12, 100: 13, 101: 16, 102: 45}
    root = build_tree(freqs)
    assert root.frequency == sum(freqs.values())
    assert root.ch == INTERNAL


def test_build_tree_leaves_match_symbols():
    freqs = {10: 2, 32: 7, 65: 1, 66: 1, 67: 3}
    root = build_tree(freqs)
    leaves = _leaves(root)
    assert {leaf.ch: leaf.frequency for leaf in leaves} == freqs


def test_build_tree_internal_nodes_sum_children():
    root = build_tree({1: 4, 2: 1, 3: 1, 4: 2, 5: 8})
    stack = [root]
    while stack:
        node = stack.pop()
        if not node.is_leaf():
            assert node.left is not None and node.right is not None
            assert node.frequency == node.left.frequency + node.right.frequency
            stack.extend([node.left, node.right])


def test_build_tree_two_symbols_lower_on_left():
    root = build_tree({98: 2, 97: 1})
    assert root.left.ch == 97
    assert root.right.ch == 98


def test_build_tree_rejects_negative_frequency():
    with pytest.raises(ValueError):
        build_tree({65: -1})