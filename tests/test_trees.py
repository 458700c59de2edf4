from hypothesis import given
from hypothesis import strategies as st

from algokit.trees import TreeNode, vertical_traversal


def _from_level_order(values):
    """Build a tree from a level-order list where None marks a missing child."""
    if not values or values[0] is None:
        return None
    nodes = iter(values)
    root = TreeNode(next(nodes))
    frontier = [root]
    for parent in frontier:
        left = next(nodes, None)
        if left is not None:
            parent.left = TreeNode(left)
            frontier.append(parent.left)
        right = next(nodes, None)
        if right is not None:
            parent.right = TreeNode(right)
            frontier.append(parent.right)
    return root


def _all_values(node):
    if node is None:
        return []
    return [node.val] + _all_values(node.left) + _all_values(node.right)


def test_empty_tree():
    assert vertical_traversal(None) == []


def test_single_node():
    assert vertical_traversal(TreeNode(42)) == [[42]]


def test_example_tree():
    root = _from_level_order([3, 9, 20, None, None, 15, 7])
    assert vertical_traversal(root) == [[9], [3, 15], [20], [7]]


def test_ties_at_same_position_are_sorted():
    root = _from_level_order([1, 2, 3, 4, 6, 5, 7])
    columns = vertical_traversal(root)
    assert columns[2] == [1, 5, 6]


def test_left_chain_gives_one_column_per_node():
    root = TreeNode(1, left=TreeNode(2, left=TreeNode(3)))
    assert vertical_traversal(root) == [[3], [2], [1]]


@given(st.lists(st.one_of(st.none(), st.integers(-50, 50)), max_size=40))
def test_every_value_appears_once(values):
    root = _from_level_order(values)
    result = vertical_traversal(root)
    flattened = [v for column in result for v in column]
    assert sorted(flattened) == sorted(_all_values(root))
    assert all(column for column in result)