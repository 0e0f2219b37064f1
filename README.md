# avlcourse

A self-balancing AVL tree with an in-order cursor, together with a handful of
small command-line exercises: counting how often numbers occur, merge sort,
Fibonacci numbers and two timing workloads. It needs nothing beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The AVL tree

`avlcourse.avl.AVLTree` maps ordered keys to items and rebalances itself by
rotations on every insertion and removal.

```python
from avlcourse.avl import AVLTree

tree = AVLTree()
for key in range(20):
    tree.insert(key, key + 1)

3 in tree             # True
tree[3]               # 4, same as tree.find(3)
tree.get(99, None)    # None
len(tree)             # 20
tree.depth()          # recorded depth of the root, 0 when empty

for key, item in tree.items():
    print(key, item)  # ascending key order

list(tree)            # the keys, ascending

tree.remove(4)
```

- Inserting a key that is already present leaves the stored item unchanged.
- Removing a key that is absent does nothing.
- `find` and `tree[key]` raise `KeyError` for a missing key; `get` returns the
  default instead.

## The cursor

`avlcourse.cursor.AVLCursor` walks a tree with an explicit traversal stack. It
starts on the first entry. `first`, `next`, `find` and `current` each return
the `(key, item)` pair under the cursor, or `None` when the tree is empty, the
key is absent or the walk has ended. `copy` gives an independent cursor at the
same position, and iterating over a cursor restarts from the first entry.

```python
from avlcourse.cursor import AVLCursor

cursor = AVLCursor(tree)
for key, item in cursor:
    print(key, item)

cursor.find(7)   # (7, 8)
cursor.next()
```

After `find`, the cursor holds only the nodes on the search path, so stepping
on with `next` follows that path rather than a complete in-order walk.

## Other modules

- `avlcourse.counting`: `read_numbers(stream)` yields signed 16-bit integers
  until the first token that is not an integer or is out of range;
  `count_with_avl(numbers)` and `count_with_dict(numbers)` return
  `(number, count)` pairs in ascending order, with counts wrapping as signed
  16-bit values; `demo_lines()` returns the lines of the tree demonstration.
- `avlcourse.sorting`: `merge_sort(values)` returns a new, stably sorted list;
  `random_data(size, rng=None)` returns `size` random integers in
  `range(size)` and raises `ValueError` for a negative size.
- `avlcourse.fibonacci`: `fib_iterative(n)` and `fib_recursive(n)` return the
  n-th Fibonacci number modulo 2**32 and raise `ValueError` for negative `n`.
- `avlcourse.workloads`: `fun(x, y)` computes `log(sin(sin(cos(x*y))))` in
  single precision; `linear_workload(n, path="blah.txt")` rewrites `path` with
  `fun(1.23, 4.56)` `n` times and returns the last value (or `None` when
  `n` is 0); `quadratic_workload(n)` runs an empty nested loop and returns the
  number of inner steps.

## Commands

Count occurrences of whitespace-separated integers read from standard input,
using the AVL tree or a dictionary. Each prints a timing line (processor time)
followed by one line per distinct number in ascending order, `n: count` for
`avl-ops` and `n : count` for `map-ops`:

```
echo "3 1 3 2 3" | avl-ops
echo "3 1 3 2 3" | map-ops
```

Show a tree of 20 entries being searched, listed and emptied in two passes:

```
avl-demo
```

Sort a given number of random values with merge sort and print them one per
line (with no argument it prints nothing):

```
mergesort-demo 10
```

Print the n-th Fibonacci number, iteratively or recursively:

```
fib-iter 30
fib-rec 30
```

Run the linear and quadratic timing workloads for a given size. `lin-workload`
writes `blah.txt` in the current directory; neither prints anything:

```
lin-workload 1000
quad-workload 1000
```

## Limits

The tree lives in memory only; nothing is saved to disk. The commands report
no timings of their own beyond the counting commands' summary line, so timing
the workloads is left to an outside tool such as `time`.