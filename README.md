# algolab

A collection of classic algorithms and data structures in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `algolab.divide_conquer` | `find_max`, `binary_search`, `array_sum` |
| `algolab.merge_sort` | `merge`, `merge_sort`, `is_sorted` |
| `algolab.btree` | `BTree` (insert, search, levels, stats, iteration), `BTreeNode`, `BTreeStats` |
| `algolab.trie` | `Trie` with `insert`, `search`, `count_prefix`, `autocomplete` |
| `algolab.red_black` | `RedBlackTree` (insert, iteration, `black_height`, `validate`, `render`), `RBNode`, `Color` |
| `algolab.knapsack` | `solve_knapsack`, `Item`, `KnapsackResult` |
| `algolab.avl` | `AVLTree` (insert, delete, membership, iteration, `height`, `render`), `AVLNode` |
| `algolab.kruskal` | `kruskal`, `Edge`, `DisjointSet`, `SpanningTree` |
| `algolab.bellman_ford` | `bellman_ford`, `BellmanFordResult`, `NegativeCycleError` |
| `algolab.nqueens` | `solve_n_queens`, `count_solutions`, `is_safe`, `render_board`, `mirror_horizontal`, `mirror_vertical` |
| `algolab.maze` | `Maze`, solved by depth-first backtracking |
| `algolab.coin_change` | `make_change`, `ChangeResult`, `KRW_DENOMINATIONS` |
| `algolab.floyd_warshall` | `floyd_warshall`, `AllPairsPaths` |
| `algolab.dijkstra` | `dijkstra`, `Graph`, `ShortestPaths` |
| `algolab.huffman` | `char_frequencies`, `build_huffman_tree`, `huffman_codes`, `compression_stats`, `HuffmanNode`, `CompressionStats` |
| `algolab.advanced_divide` | `closest_pair`, `strassen_multiply`, `power_mod`, `distance`, `Point`, `PointPair` |
| `algolab.advanced_dp` | `edit_distance`, `edit_script`, `matrix_chain_cost`, `matrix_chain_parenthesization`, `optimal_bst_cost`, `EditOperation` |

## Examples

```python
from algolab.merge_sort import merge_sort
from algolab.trie import Trie
from algolab.advanced_dp import edit_distance
from algolab.coin_change import make_change
from algolab.dijkstra import Graph, dijkstra
from algolab.nqueens import count_solutions

merge_sort([5, 2, 9, 1])            # [1, 2, 5, 9]

trie = Trie()
for word in ("car", "cart", "cat"):
    trie.insert(word)
trie.count_prefix("ca")             # 3
trie.autocomplete("car")            # ["car", "cart"]

edit_distance("kitten", "sitting")  # 3

change = make_change(6, (4, 3, 1))
change.counts                       # (1, 0, 2)
change.total_coins()                # 3

g = Graph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
paths = dijkstra(g, 0)
paths.distances                     # (0, 4, 5)
paths.path_to(2)                    # [0, 1, 2]

count_solutions(8)                  # 92
```

## Tracing

`merge_sort`, `bellman_ford`, `floyd_warshall`, `Maze.solve`, and the
`AVLTree` and `RedBlackTree` constructors take an optional `trace`
callable. When it is given, it is called with one line of text for each
step of the computation, for example `trace=print`.

## What the package does not do

algolab is a library only. It has no command-line program, no interactive
menus and no timing or performance comparisons; call the functions and
classes from your own code.