# containerkit

Container types built from first principles, for study and for use where
their exact behaviour (capacity growth, tree shape, bucket layout) matters.

| Class | Module | What it is |
|-------|--------|------------|
| `Vector` | `containerkit.vector` | growable array with an explicit capacity |
| `Stack` | `containerkit.stack` | last-in, first-out stack |
| `LinkedList` | `containerkit.linked_list` | doubly linked list |
| `Queue` | `containerkit.fifo` | first-in, first-out queue, plus `merge` |
| `TreeMap` | `containerkit.treemap` | ordered map on an unbalanced binary search tree |
| `HashMap` | `containerkit.hashmap` | separate-chaining hash map that rehashes as it grows |

## Installing

```
pip install .
```

Running the tests:

```
pip install ".[test]"
pytest
```

## Vector

A new vector has capacity `2 * size + 1`. When `append` finds it full, the
capacity grows to `2 * size + 1`. `resize(n)` sets the capacity and drops any
elements past `n`; `clear()` empties it but keeps the capacity. Indices must
be in range: negative indices raise `IndexError`. `insert(pos, value)` puts
the value before the existing element at `pos`, and `info()` returns a
`"Size: ... , Capacity: ..."` line.

```python
from containerkit.vector import Vector

v = Vector([0.0, 1.0, 2.0])
v.append(3.14)
v.insert(1, 7.62)
v.erase(0)          # returns 0.0
print(len(v), v.capacity())

Vector(size=3, fill=0)   # Vector([0, 0, 0])
```

## Stack

`top()` and `pop()` raise `IndexError` on an empty stack. Iterating runs from
bottom to top; `swap` exchanges contents with another stack, and `copy`
returns an independent one.

```python
from containerkit.stack import Stack

s = Stack([1, 2, 3, 4, 5])
s.top()     # 5
s.pop()     # 5
```

## LinkedList

Positions are zero-based and non-negative. `append`/`appendleft` and
`pop`/`popleft` work at either end; `insert(index, value)` places the value
before the element at `index`; `erase(index)` removes and returns one element
and `erase_range(start, stop)` removes a half-open range. `str()` joins the
values with spaces, and `reversed()` walks from the tail.
`LinkedList.filled(count, fill)` builds a list of `count` copies of `fill`.

```python
from containerkit.linked_list import LinkedList

items = LinkedList([1, 2, 3, 4, 5])
items.erase_range(1, 3)
print(items)        # 1 4 5
```

## Queue and merge

`front()`, `back()` and `pop()` raise `IndexError` on an empty queue.
`merge(first, second)` drains both queues into a new one, taking from each in
turn; the two arguments are left empty.

```python
from containerkit.fifo import Queue, merge

merged = merge(Queue([1, 2, 3]), Queue([4, 5, 6, 7, 8]))
list(merged)        # [1, 4, 2, 5, 3, 6, 7, 8]
```

## TreeMap

Keys are kept in order; iterating and `items()` run in key order.
`lower_bound(key)` returns the first `(key, value)` pair whose key is not less
than `key`, or `None`. `erase(key)` returns whether the key was present, while
`del m[key]` raises `KeyError` for a missing key. The tree is not rebalanced.

```python
from containerkit.treemap import TreeMap

m = TreeMap(str)
m["b"] = "second key"
m["a"] = "first key"
m["f"] = "third key"
m.lower_bound("c")  # ("f", "third key")
```

## HashMap

Starts with 7 buckets by default and doubles the bucket count once it holds
four entries per bucket. `find(key)` returns the `(key, value)` pair or
`None`; `insert(key, value)` adds only a new key and reports whether it did;
`erase(key)` reports whether the key was present. `clear()` keeps the bucket
count, shown by `bucket_count()`. Iteration follows bucket order.

```python
from containerkit.hashmap import HashMap

h = HashMap(default_factory=int)
h["first"] += 1
h.insert("second", 2)   # True
h.insert("second", 3)   # False: key already present
```

Both maps create a default value on reading a missing key when they were given
a `default_factory`; without one, reading a missing key raises `KeyError`.

## What it does not do

containerkit is a library only: it has no command-line program, and its
containers live in memory with no persistence. None of the types is
thread-safe.