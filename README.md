# dsaconcepts

Small, readable implementations of classic data structures and algorithms,
meant for learning and experimenting.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsaconcepts.arrays` | `insert_element`, `delete_element`, `format_array` |
| `dsaconcepts.queues` | `CircularQueue`, `LinearQueue`, `ShiftingQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsaconcepts.stack` | `Stack`, `StackOverflowError`, `StackUnderflowError` |
| `dsaconcepts.recursion` | `fib`, `fibonacci_terms`, `tower_of_hanoi`, `Move` |
| `dsaconcepts.searching` | `binary_search`, `linear_search` |
| `dsaconcepts.sorting` | `selection_sort`, `bubble_sort`, `insertion_sort` |

### Arrays

`insert_element(items, element, position)` and `delete_element(items, position)`
return a new list and leave their input unchanged. `format_array(items)` renders
every element followed by a single space.

### Queues

- `CircularQueue(size)` is a ring buffer that keeps one slot free, so it holds
  at most `size - 1` items.
- `LinearQueue(size)` never wraps its rear: slots freed at the front are only
  reused once the queue has been emptied completely.
- `ShiftingQueue(capacity)` holds up to `capacity` items and also offers
  `front()` to look at the first item without removing it.

All three support `enqueue`, `dequeue` (which returns the removed item),
`len()`, iteration from front to rear, and `display()`, which returns a string
of the items or `"Queue is empty"`.

### Stack

`Stack(capacity)` is a bounded stack whose unused slots hold `0`. Besides
`push`, `pop`, `is_empty`, `is_full`, `len()` and iteration from bottom to top,
`peek(position)` and `change(position, value)` read and overwrite any slot
within the capacity (position 0 is the bottom). `display()` returns the items
one per line.

### Recursion

`fib(n)` returns the n-th Fibonacci number (`fib(0) == 0`, `fib(1) == 1`);
`fibonacci_terms(count)` returns the first `count` of them as a list.
`tower_of_hanoi(n, from_rod, aux_rod, to_rod)` yields `Move` objects whose
string form reads like `Move disk 1 from rod A to rod C`.

### Searching and sorting

`binary_search` (on an ascending sequence) and `linear_search` return an index,
or `-1` when the value is absent. The three sort functions each return a new
ascending list.

## Examples

```python
from dsaconcepts.sorting import insertion_sort
from dsaconcepts.searching import binary_search
from dsaconcepts.recursion import fibonacci_terms, tower_of_hanoi
from dsaconcepts.stack import Stack
from dsaconcepts.queues import CircularQueue

data = [-10, 100, 12, 0, 12, 2, 1]
print(insertion_sort(data))       # [-10, 0, 1, 2, 12, 12, 100]

print(binary_search([2, 4, 6, 8, 10, 12, 14], 10))   # 4

print(fibonacci_terms(7))         # [0, 1, 1, 2, 3, 5, 8]

for move in tower_of_hanoi(2, "A", "B", "C"):
    print(move)
# Move disk 1 from rod A to rod B
# Move disk 2 from rod A to rod C
# Move disk 1 from rod B to rod C

stack = Stack(10)
stack.push(1)
stack.push(11)
print(stack.pop(), len(stack))    # 11 1

queue = CircularQueue(5)
queue.enqueue(111)
queue.enqueue(110)
print(list(queue))                # [111, 110]
```

## Errors

Bounded containers raise an exception when they are full or empty
(`QueueFullError`, `QueueEmptyError`, `StackOverflowError`,
`StackUnderflowError`); the array helpers and `Stack.peek`/`Stack.change`
raise `IndexError` for a position outside the valid range. Negative sizes,
capacities or counts raise `ValueError`.

## What it does not do

This is a library only. It has no command-line program and does not prompt
for or read input; call the functions and classes from your own code.