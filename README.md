# algonotes

Classic algorithms written as small, plain Python functions. The package
depends only on the standard library.

## Installation

```
pip install algonotes
```

## Modules

### `algonotes.sorting`

`bucket_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort`,
`heap_sort` and `exchange_sort` each take any iterable and return a new list
in ascending order. The input is left untouched.

`bucket_sort` accepts only numbers in the half-open range `[0, 1)` and raises
`ValueError` for any other value.

### `algonotes.searching`

- `binary_search(values, target)` searches an ascending sequence. It returns
  an index of `target`, or `None` when the value is absent.
- `linear_search(values, target)` returns the index of the first occurrence
  of `target` in any sequence, or `None`.
- `max_window_sum(values, k)` returns the largest sum of `k` consecutive
  values. It raises `ValueError` unless `1 <= k <= len(values)`.

### `algonotes.arithmetic`

- `is_armstrong(n)` checks whether `n` equals the sum of the cubes of its
  digits.
- `divide(dividend, divisor)` returns `(quotient, remainder)`. The quotient is
  truncated toward zero and the remainder takes the sign of the dividend.
- `add(first, second)` returns the sum of its arguments, and `swap(first, second)`
  returns them in reverse order.
- `reverse_number(n)` reverses the digits and keeps the sign.
- `power(base, exponent)` takes a non-negative integer exponent.
- `is_prime(n)` takes a non-negative integer.
- `standard_deviation(data)` returns the population standard deviation.
- `frequencies(values)` returns `(value, count)` pairs in order of first
  occurrence.
- `matrix_multiply(a, b)` returns the product of two matrices given as lists
  of rows.

Invalid input raises `ValueError`. `divide` raises `ZeroDivisionError` when
the divisor is zero.

### `algonotes.graphs`

- `dijkstra(vertex_count, edges)` returns the shortest distance from vertex 0
  to every vertex of an undirected graph. `edges` holds
  `(start, end, weight)` triples, and a weight of zero means there is no edge.
  Unreachable vertices get `math.inf`. Negative weights and vertices out of
  range raise `ValueError`.
- `Graph(vertex_count)` is a directed graph. Add edges with `add_edge(v, w)`
  and call `topological_sort()` to get the vertices as a list ordered along
  the edges.

### `algonotes.patterns`

Each function returns its picture as a list of strings. Every line is padded
with spaces to the full width of the pattern.

- Star patterns: `right_triangle`, `triangle`, `inverted_triangle`,
  `right_arrow`, `left_arrow`, and the spaced variants `spaced_triangle`,
  `spaced_inverted_triangle`, `spaced_right_arrow` and `spaced_left_arrow`.
- `palindromic_pyramid()` returns a fixed five-line pyramid of digits.
- `zigzag(width)` returns three lines tracing a zigzag.
- `pascal_rows(rows)` returns the rows of Pascal's triangle as lists of
  integers. `pascal_triangle(rows)` returns the same rows as strings.

## Example

```python
from algonotes.sorting import merge_sort
from algonotes.searching import binary_search
from algonotes.graphs import Graph, dijkstra

merge_sort([5, 4, 3, 2, 1])                  # [1, 2, 3, 4, 5]
binary_search([2, 3, 4, 10, 40], 10)         # 3
binary_search([2, 3, 4, 10, 40], 7)          # None

g = Graph(6)
for v, w in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(v, w)
g.topological_sort()                         # [5, 4, 2, 3, 1, 0]

dijkstra(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])  # [0, 4, 5]
```

## What it does not do

This package is a library only. It has no command-line program and does not
prompt for input or print results. Callers pass values to the functions and
receive the results as return values.

## Running the tests

```
pip install -e ".[test]"
pytest
```