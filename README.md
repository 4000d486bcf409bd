# algonotes

A collection of compact implementations of classic algorithms and data
structures: linked lists, string and array problems, a binary/decimal
converter, graph traversal, a B+ tree and a binary-tree traversal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.linked_lists` | `ListNode`, `build_list`, `to_list`, `get_intersection_node`, `get_middle`, `is_palindrome` |
| `algonotes.conversions` | `binary_to_decimal`, `decimal_to_binary`, and the interactive `main` |
| `algonotes.strings` | `smallest_string`, `distinct_subsequences`, `number_search`, `longest_common_subsequence`, `reverse_words` |
| `algonotes.arrays` | `boolean_matrix`, `shortest_subarray_with_sum`, `min_size_subarray`, `move_negatives_to_end`, `unique_elements`, `binary_search`, `num_identical_pairs` |
| `algonotes.graphs` | `Graph` (with `add_edge` and `bfs`), `articulation_points` |
| `algonotes.bplus_tree` | `BPlusTree` (with `insert`, `search`, `preorder_keys`, `in` and ascending iteration) |
| `algonotes.trees` | `TreeNode`, `vertical_traversal` |

Functions return new values rather than changing their arguments; for
example `boolean_matrix` and `move_negatives_to_end` return new lists, and
`is_palindrome` leaves the linked list as it found it.

## Examples

Linked lists are built from ordinary Python sequences:

```python
from algonotes.linked_lists import build_list, get_middle, is_palindrome, to_list

head = build_list([1, 2, 3, 2, 1])
is_palindrome(head)                       # True
to_list(head)                             # [1, 2, 3, 2, 1]
get_middle(build_list([1, 2, 3, 4, 5]))   # 3
```

Binary and decimal conversion works on numbers whose decimal digits spell
out the binary form:

```python
from algonotes.conversions import binary_to_decimal, decimal_to_binary

binary_to_decimal(101)   # 5
decimal_to_binary(5)     # 101
```

String problems:

```python
from algonotes.strings import longest_common_subsequence, number_search, reverse_words

longest_common_subsequence("abcde", "ace")          # 3
number_search("Hello6 9World 2, Nic8e D7ay!")       # 2
reverse_words("Let's take it")                      # "s'teL ekat ti"
```

Searching a sorted sequence gives an index, or `None` when the value is
absent:

```python
from algonotes.arrays import binary_search

binary_search([2, 3, 4, 10, 40], 10)   # 3
binary_search([2, 3, 4, 10, 40], 7)    # None
```

A small B+ tree (nodes split once they hold more than `order` keys, 3 by
default):

```python
from algonotes.bplus_tree import BPlusTree

tree = BPlusTree()
for key in (5, 3, 8, 1, 9):
    tree.insert(key)
tree.search(5)   # True
7 in tree        # False
list(tree)       # [1, 3, 5, 8, 9]
```

Breadth-first order in a directed graph, and articulation points of an
undirected graph with vertices numbered from 1:

```python
from algonotes.graphs import Graph, articulation_points

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)   # [2, 0, 3, 1]

articulation_points(5, [(1, 2), (1, 3), (3, 2), (1, 4), (4, 5)])   # [1, 4]
```

## Command line

The converter can be run interactively; it asks which direction to convert
(1 for binary to decimal, 2 for decimal to binary) and then for the number.
Answers may also be given as arguments:

```
algonotes-convert
algonotes-convert 1 101
```

It exits with status 1 on an unknown choice or an invalid number.

## Not included

The package has no sorting routines; use Python's built-in `sorted` and
`list.sort`.