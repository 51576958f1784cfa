# algokit

A small collection of classic algorithms and data structures in pure Python. It has no runtime dependencies.

## Contents

| Module                    | What it provides                                                                                  |
|---------------------------|---------------------------------------------------------------------------------------------------|
| `algokit.bktree`          | `BKTree` for finding words within a given edit distance, and `edit_distance`                      |
| `algokit.trie`            | `Trie` for storing and looking up words made of the letters `a` to `z`                            |
| `algokit.priority_queue`  | `PriorityQueue`, a binary heap ordered by a comparison function                                   |
| `algokit.euler`           | `MultiGraph` and `find_euler_path` for undirected multigraphs                                     |
| `algokit.hungarian`       | `BipartiteGraph` and `max_matching` (augmenting paths)                                            |
| `algokit.shortest_path`   | `WeightedGraph`, `bellman_ford`, `dijkstra`, `johnson` and `NegativeCycleError`                   |
| `algokit.number_theory`   | `PrimeSieve`, `gcd`, `extended_gcd`, `mod_pow`, `is_prime`, `pollard_rho`, `factorize`, `count_triples` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Fuzzy word lookup

```python
from algokit.bktree import BKTree, edit_distance

edit_distance("kitten", "sitting")   # 3

tree = BKTree()
for word in ["book", "books", "cake", "boo", "cape"]:
    tree.insert(word)              # inserting a word twice has no effect
len(tree)                          # 5

close = tree.find("bock", 1)       # stored words within edit distance 1 of "bock"
```

`find` raises `ValueError` for a negative distance.

### Tries

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("apple")
"apple" in trie      # True
"app" in trie        # False: a prefix is not a stored word
trie.find("apple")   # True
```

`insert` and `find` raise `ValueError` for any character outside `a`–`z`.

### Priority queues

The queue is ordered by a comparison function `cmp(a, b)`, which returns true when `a` may sit above `b` in the heap. Without one it is a min-heap.

```python
from algokit.priority_queue import PriorityQueue

heap = PriorityQueue()                      # min-heap
heap.extend([5, 1, 4, 2])
heap.push(3)
heap.top()   # 1
heap.pop()   # 1 (removed and returned)
len(heap)    # 4

max_heap = PriorityQueue(lambda a, b: a >= b)
```

`top` and `pop` raise `IndexError` on an empty queue; `clear` empties it.

### Graphs

Vertices are numbered from 1.

```python
from algokit.euler import MultiGraph, find_euler_path
from algokit.hungarian import BipartiteGraph, max_matching
from algokit.shortest_path import (
    NegativeCycleError, WeightedGraph, bellman_ford, dijkstra, johnson,
)

g = MultiGraph(3)
g.add_edge(1, 2)
g.add_edge(2, 3)
path = find_euler_path(g)    # a list of vertices, or None if no Euler trail exists

b = BipartiteGraph(2, 2)
b.add_edge(1, 1)
b.add_edge(2, 1)
b.add_edge(2, 2)
matching = max_matching(b)   # {left: right}, here {1: 1, 2: 2}

w = WeightedGraph(3)
w.add_edge(1, 2, 4)
w.add_edge(2, 3, -1)
w.add_edge(1, 3, 5)
distances = bellman_ford(w, 1)   # {1: 0, 2: 4, 3: 3}
try:
    all_pairs = johnson(w)       # {u: {v: distance}}
except NegativeCycleError:
    ...
```

- `find_euler_path` judges connectivity from vertex 1 and does not change the graph.
- `dijkstra` expects non-negative weights.
- `bellman_ford` and `johnson` accept negative weights and raise `NegativeCycleError` on a negative cycle.
- Unreachable vertices get a distance of `math.inf`.

### Number theory

```python
from algokit.number_theory import (
    PrimeSieve, extended_gcd, factorize, gcd, is_prime, mod_pow, pollard_rho,
)

gcd(25, 18)             # 1
extended_gcd(25, 18)    # (1, -5, 7), because 25 * -5 + 18 * 7 == 1
mod_pow(3, 200, 1_000_000_007)

sieve = PrimeSieve(1000)
sieve.is_prime(997)        # True
sieve.smallest_factor(91)  # 7
factorize(360, sieve)      # {2: 3, 3: 2, 5: 1}
is_prime(1_000_000_007)    # True
pollard_rho(8051)          # a non-trivial factor: 83 or 97
```

`is_prime` is a deterministic Miller–Rabin test for 64-bit numbers. It uses the sieve when the sieve covers the number. `factorize` splits numbers beyond the sieve with Pollard's rho method.

`count_triples(numbers, z, sieve)` counts the triples of distinct positions in `numbers` whose product is a perfect `z`-th power.

## Command-line tools

Each tool reads from standard input and writes its results to standard output.

```
algokit-euler < input.txt
```

The first number gives the count of test cases. Each case starts with `n m`, the number of vertices and the number of edges, followed by `m` edges `u v`. For each case the tool prints `Yes`, the length of an Euler trail and its vertices. If the graph has no Euler trail it prints `No`.

```
algokit-matching < input.txt
```

The first number gives the count of test cases. Each case starts with `nl nr e`: the number of left vertices, the number of right vertices and the number of edges. Then come `e` edges `l r`. For each case the tool prints the size of a maximum matching and then one line `l r'` per matched pair. Here `r'` is the right vertex numbered after the left ones, that is `nl + r`.

```
algokit-shortest-path < input.txt
algokit-shortest-path --single < input.txt
```

By default the input is `n` followed by an `n × n` matrix of edge weights. The tool prints the matrix of all-pairs shortest distances, computed with Johnson's algorithm. With `--single` the input is `n m s` followed by `m` undirected edges `u v w`. The tool then prints the distances from `s`, computed with Bellman–Ford. Unreachable vertices print as `inf`. A negative cycle is reported on standard error with exit status 1.

```
algokit-number-theory < input.txt
algokit-number-theory --sieve-limit 100000 < input.txt
```

The input is `n z` followed by `n` positive integers. The tool prints the number of triples whose product is a perfect `z`-th power. The prime sieve covers numbers up to `--sieve-limit` (default 2,000,000).