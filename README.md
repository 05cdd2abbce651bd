# algodrills

Classic data-structure and algorithm exercises as small, self-contained Python
modules. Several problems come with more than one solution so the approaches
can be compared. There are no third-party runtime dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.bintree` | `BTNode` (value, `left`, `right`, `parent`), `create_bst` (balanced tree from sorted values), `node_count`, `height` (edges; a leaf has height 0), `in_order` (yields values), `rightmost`, `find_node`, `format_levels` |
| `algodrills.balance` | `is_balanced_naive` and the single-pass `is_balanced` |
| `algodrills.sequences` | `bst_sequences` (every insertion order that builds a tree), `weaves` (order-preserving interleavings), `swap_sequences` (subtree swapping only, not exhaustive) |
| `algodrills.subtree` | `is_subtree`, `is_subtree_by_string`, `pre_order_signature` (values in left, node, right order with `X` for empty children), `trees_match` (compares values along left links only) |
| `algodrills.ancestor` | `common_ancestor` via parent links, `depth`, `move_up` (raises `ValueError` past the root), `contains` |
| `algodrills.depths` | `depth_lists_bfs`, `depth_lists_preorder`, `pre_order_with_depth` |
| `algodrills.avl` | `AVLNode` with `in_order()`, `insert(root, value, compare=None)` returning the new subtree root, `subtree_height` (counts nodes) |
| `algodrills.heap` | `Heap(items, capacity, compare)`, a bounded max-heap with `build`, `heapify`, `pop_root`, `insert` (raises `OverflowError` when full), `remove` (raises `ValueError` when absent) and `sort` |
| `algodrills.huffman` | `BitList` (bits packed into bytes, with `append`, `extend`, `pop`, `clear`, indexing, `num_bytes`), `compress`, `decompress` (raises `ValueError` on leftover bits) |
| `algodrills.boolean_eval` | `count_ways`, `count_ways_memo`: count parenthesisations of expressions like `"1^0|0|1"` as `(ways_true, ways_false)` |
| `algodrills.linked_list` | `ListNode` and `from_values`, `values`, `length`, `insert_front`, `insert_after`, `insert_last`, `nth_from_end`, `reverse`, `sort` (merge sort) |
| `algodrills.build_order` | `build_order(projects, dependencies)`, with `Status` and `CycleError` |
| `algodrills.coins` | `coin_combinations(total, coins)` as lists of `(coin, count)` pairs |
| `algodrills.fibonacci` | `fib_recursive`, `fib_memo`, `fib_iterative` |
| `algodrills.magic_index` | `magic_index_linear`, `magic_index_divide`, `magic_index_pruned` |
| `algodrills.subarray` | `max_subarray_brute`, `max_subarray_windowed`, `max_subarray_kadane` |
| `algodrills.numeric` | `lerp`, `Interpolator`, `derivative` (forward difference), `gradient_descent` (fixed steps until the direction reverses) |
| `algodrills.cube_table` | `num_digits`, `cube_rows`, `format_table`: cubes with first, second and third differences |
| `algodrills.philosophers` | `DiningTable`, a threaded dining-philosophers simulation using non-blocking fork locks |

Functions that take a `compare` callable expect `compare(a, b)` to return a
negative number, zero or a positive number; without one, natural ordering is
used.

## Examples

```python
from algodrills.bintree import create_bst, in_order
from algodrills.balance import is_balanced
from algodrills.fibonacci import fib_iterative
from algodrills.subarray import max_subarray_kadane

tree = create_bst(sorted([100, 2, 3, 4, 0, 45, 32]))
print(list(in_order(tree)))                   # [0, 2, 3, 4, 32, 45, 100]
print(is_balanced(tree))                      # True

print(fib_iterative(10))                      # 55
print(max_subarray_kadane([-1, 2, 4, -3, 5, 2, -5, 2]))  # 10
```

Huffman coding round trip:

```python
from algodrills.huffman import compress, decompress

bits, table = compress("abracadabra")
assert decompress(bits, table) == "abracadabra"
```

Build order:

```python
from algodrills.build_order import build_order, CycleError

order = build_order("abcdef", [("a", "d"), ("f", "b"), ("b", "d"), ("f", "a"), ("d", "c")])
# every project appears after the projects it depends on

try:
    build_order("ab", [("a", "b"), ("b", "a")])
except CycleError:
    print("no build order")
```

## Commands

Print the table of cubes and their differences (100 rows by default, or the
number given):

    algodrills-cube-table
    algodrills-cube-table 20

Run the dining-philosophers simulation, printing what each philosopher does:

    algodrills-philosophers
    algodrills-philosophers --seats 5 --seed 42

## Installing for tests

    pip install -e ".[test]"
    pytest