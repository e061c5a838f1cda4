# snekobj

This package is a small dynamic object model for a toy interpreter. It has two modules.

## `snekobj.objects`

- `Kind` is an enum with the members `INTEGER`, `FLOAT`, `STRING`, `VECTOR3` and `ARRAY`.
- `SnekObject` is the base class. Every object has a `kind` and a `refcount`, which starts at 1. It also has a `released` flag.
- There is one concrete class for each kind:
  - `SnekInteger(value)`
  - `SnekFloat(value)`: the value is rounded to single precision.
  - `SnekString(value)`
  - `SnekVector3(x, y, z)`: each component must be a `SnekObject`, and each one gains a reference.
  - `SnekArray(size)`: a fixed number of slots, all `None` at first.
- Addition works with `+` or `snek_add(a, b)`:
  - An integer plus an integer gives an integer.
  - Any other mix of integers and floats gives a float.
  - Strings are concatenated.
  - Vectors are added component by component.
  - Arrays are concatenated into a new array.
  - Any other pair of kinds raises `TypeError`.
- Length works with `len()` or `snek_length(obj)`:
  - 1 for integers and floats.
  - The number of characters for strings.
  - 3 for vectors.
  - The number of slots for arrays.
- Array slots are read and written with `arr[i]` and `arr[i] = value`.
  - An index outside `0 <= i < len(arr)` raises `IndexError`.
  - Storing anything that is not a `SnekObject` raises `TypeError`.
- Reference counts are managed by hand:
  - `incref()` adds a reference.
  - `decref()` drops a reference and releases the object when the count reaches 0.
  - `release()` releases the object at once.
  - Releasing a vector calls `decref()` on each of its components.
  - Releasing an array empties its slots.
  - Any of these three calls on an object that has already been released raises `RuntimeError`.

## `snekobj.stack`

`Stack(capacity)` is a last-in, first-out stack that holds any kind of value.

- `push(obj)` doubles `capacity` when the stack is full. A capacity of 0 grows to 1.
- `pop()` removes and returns the top item. It raises `IndexError` when the stack is empty.
- `len(stack)` gives the number of items.
- Iterating over a stack goes from the top to the bottom.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from snekobj.objects import SnekInteger, SnekFloat, SnekString, SnekVector3, SnekArray, snek_length
from snekobj.stack import Stack

total = SnekInteger(2) + SnekFloat(0.5)      # SnekFloat(2.5)
greeting = SnekString("hello, ") + SnekString("world")
print(len(greeting))                          # 12

v = SnekVector3(SnekInteger(1), SnekInteger(2), SnekInteger(3))
w = v + v                                     # component-wise addition

arr = SnekArray(2)
arr[0] = SnekInteger(7)
arr[1] = greeting
both = arr + arr                              # concatenation
print(snek_length(both))                      # 4

stack = Stack(1)
stack.push(total)
stack.push(greeting)                          # capacity doubles to 2
print(stack.pop() is greeting)                # True
```

## What it does not do

The package provides only the object model and the stack.

- It has no language parser or evaluator, and no command-line program.
- It has no garbage collector: objects are released only through `decref()` or `release()`.
- Arrays do not take references to the objects stored in their slots.