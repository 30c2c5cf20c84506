# algokit

A collection of classic algorithms in plain Python: sorting, array
techniques, binary search, backtracking, dynamic programming, graph
and grid traversal, and binary and binary-search trees. It needs
Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite, install with the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | counting sort, merge sort (with a comparison count in `MergeSortResult`), quicksort with first-element and last-element pivots, insertion sort, `build_max_heap` and heap sort; inversion counting |
| `algokit.arrays` | two and three sum, zeroing rows and columns, transpose and clockwise rotation, longest consecutive run, Kadane's maximum subarray, next permutation and ordered permutations, left rotation, second smallest, longest subarray with a given sum, subarray XOR counts, palindromes, sorting pairs |
| `algokit.stack` | `LinkedStack`, a stack built from linked nodes, with `push`, `pop`, `peek`, `len()` and iteration from the top |
| `algokit.searching` | lower bound, search in rotated arrays, minimum of a rotated array, integer square and k-th roots, median of two sorted sequences, and "binary search on the answer" problems (aggressive cows, book allocation, heaters, banana eating speed, bouquets, smallest divisor, duplicate number, k-th missing positive) |
| `algokit.backtracking` | knight's tour, balanced parentheses |
| `algokit.binary_tree` | `TreeNode`, building a tree from level order, recursive and iterative traversals, level order and levels |
| `algokit.dp_sequences` | 0/1 knapsack, circular house robber, frog jump, maximum non-adjacent sum, coin change, minimum partition difference, ninja training, subset sum and subset counting |
| `algokit.dp_grids` | unique grid paths (with and without obstacles), minimum path sum, minimum falling path, triangle, cherry pickup with two robots |
| `algokit.graphs` | BFS and DFS orders, provinces, bipartiteness, cycle detection in undirected and directed graphs, topological sort (Kahn and DFS), eventual safe nodes, alien dictionary, shortest paths in a weighted DAG |
| `algokit.grids` | flood fill, island counting (eight-way), distinct island shapes, rotting oranges |
| `algokit.tree_properties` | height, balance, same tree, symmetry, maximum depth and path sum, node count of a complete tree, lowest common ancestor, root-to-node paths, nodes at distance k, maximum width |
| `algokit.tree_views` | boundary, right, top and vertical views; Morris inorder and preorder; flattening to a right-going chain |
| `algokit.tree_codec` | building trees from preorder/inorder and inorder/postorder, recovering a tree from a dashed preorder string, level-order serialisation and deserialisation |
| `algokit.bst` | building from preorder, insertion, deletion, minimum, floor and ceil, predecessor and successor, largest BST subtree, lowest common ancestor, recovering two swapped nodes, `BSTBidirectionalIterator` and two-sum, validation |

## Conventions

- Functions over lists and matrices take any iterable or sequence and
  return new lists; the input is left unchanged.
- Tree functions work on `algokit.binary_tree.TreeNode`. Nodes compare
  and hash by identity. `flatten`, `flatten_in_place`, `recover_bst`,
  `bst_insert` and `bst_delete` change the tree they are given.
- Invalid input (an empty sequence where a value is needed, negative
  sizes, vertices out of range, malformed encoded trees) raises
  `ValueError`. Where a problem conventionally has "no answer" as a
  result, the function returns `-1`, `None`, `False` or an empty
  string, as its docstring says.

## Examples

Sorting:

```python
from algokit.sorting import merge_sort, counting_sort, count_inversions

result = merge_sort([4, 7, 3, 2, 9, 4, 5])
result.values        # [2, 3, 4, 4, 5, 7, 9]
result.comparisons   # number of element comparisons made
counting_sort([3, 1, 9, 7, 1, 2, 4])   # [1, 1, 2, 3, 4, 7, 9]
count_inversions([2, 3, 7, 1, 3, 5])
```

Binary search on the answer:

```python
from algokit.searching import min_eating_speed, integer_sqrt

min_eating_speed([3, 6, 7, 11], 8)   # 4
integer_sqrt(35)                     # 5
```

Dynamic programming:

```python
from algokit.dp_sequences import knapsack, min_coins
from algokit.dp_grids import unique_paths

knapsack(4, [6, 3, 8, 6], [2, 1, 3, 1])
min_coins([1, 2, 5], 11)   # 3
unique_paths(3, 7)         # 28
```

Graphs:

```python
from algokit.graphs import topo_sort_kahn, is_bipartite_bfs

topo_sort_kahn(4, [[0, 1], [1, 2], [2, 3]])           # [0, 1, 2, 3]
is_bipartite_bfs([[1, 3], [0, 2], [1, 3], [0, 2]])   # True
```

Trees:

```python
from algokit.binary_tree import from_level_order, inorder, levels
from algokit.tree_codec import serialize, deserialize
from algokit.bst import bst_insert, is_valid_bst

root = from_level_order([1, 2, 3, 4, 5, 6, 7])
inorder(root)   # [4, 2, 5, 1, 6, 3, 7]
levels(root)    # [[1], [2, 3], [4, 5, 6, 7]]
copy = deserialize(serialize(root))

bst = None
for key in [8, 3, 10, 1, 6, 14]:
    bst = bst_insert(bst, key)
is_valid_bst(bst)   # True
```

A stack:

```python
from algokit.stack import LinkedStack

stack = LinkedStack()
stack.push(3)
stack.peek()   # 3
stack.pop()    # 3
```

## What it does not do

algokit is a library only: it has no command-line program and reads no
input from files or the terminal. Call its functions from your own code.