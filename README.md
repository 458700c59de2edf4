# algokit

A small collection of classic algorithms and data structures, written as
plain Python functions and classes. It has no dependencies beyond the
standard library.

## Installation

```
pip install algokit
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_lists` | `ListNode`, `build_list`, `get_intersection_node`, `get_middle`, `is_palindrome` |
| `algokit.conversions` | `binary_to_decimal`, `decimal_to_binary`, and an interactive converter (`main`) |
| `algokit.strings` | `smallest_string`, `number_search`, `reverse_words`, `reverse_each_word`, `distinct_subsequences`, `longest_common_subsequence` |
| `algokit.arrays` | `boolean_matrix`, `min_size_subarray`, `unique_elements`, `binary_search`, `min_max`, `count_good_pairs` |
| `algokit.graphs` | `Graph` with `add_edge` and breadth-first `bfs`, `articulation_points` |
| `algokit.trees` | `TreeNode`, `vertical_traversal` |

Functions raise `ValueError` on input they cannot handle: an empty list for
`get_middle` or `min_max`, a target missing from `binary_search`, a vertex
out of range in `Graph` or `articulation_points`, and so on.

## Examples

```python
from algokit.arrays import binary_search, min_size_subarray, unique_elements
from algokit.graphs import Graph, articulation_points
from algokit.linked_lists import build_list, get_middle, is_palindrome
from algokit.strings import longest_common_subsequence, number_search
from algokit.trees import TreeNode, vertical_traversal

binary_search([2, 3, 4, 10, 40], 10)             # 3
min_size_subarray([1, 2, 3], 5)                  # 2
unique_elements(["apple", "banana", "apple"])    # ['apple', 'banana']

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                                         # [2, 0, 3, 1]

articulation_points(5, [(1, 2), (1, 3), (3, 2), (1, 4), (4, 5)])  # [1, 4]

get_middle(build_list([1, 2, 3, 4, 5]))          # 3
is_palindrome(build_list([1, 2, 3, 2, 1]))       # True

longest_common_subsequence("abcde", "ace")       # 3
number_search("Hello6 9World 2, Nic8e D7ay!")    # 2

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
vertical_traversal(root)                         # [[9], [3, 15], [20], [7]]
```

`is_palindrome` reverses the second half of the list while it compares and
restores it before returning, so the list is left as it was.

## Command line

An interactive binary/decimal converter is installed as a command:

```
algokit-convert
```

It asks you to pick a conversion (1 for binary to decimal, 2 for decimal
to binary) and then reads the number to convert from standard input. Any
other choice prints "Enter a valid option!". A number that is not a whole
number, or is negative, is reported on standard error and the command
exits with status 1.

## Running the tests

```
pip install "algokit[test]"
pytest
```