# algoplay

A small collection of classic algorithms, written to be read and played with.

## Contents

- `algoplay.sorting`: `sorted_copy`, `bubble_sort`, `selection_sort`,
  `insertion_sort` and `quick_sort`. Each takes an iterable of comparable
  values and returns a new list in ascending order. The input is left as it was.
- `algoplay.search`:
  - `linear_search(items, target)` returns whether `target` occurs in `items`.
  - `binary_search(items, target)` and `binary_search_recursive(items, target)`
    do the same for an ascending sequence.
  - `find_nickname(users, user_id)` returns the nickname for `user_id` from an
    iterable of `(id, nickname)` pairs, or `None` if there is none.
- `algoplay.ranking`: `emergency_order(people)` gives every position its
  1-based rank by descending value, so the largest value is ranked 1. Equal
  values keep their original order.
- `algoplay.tree`:
  - `Node` is a dataclass with `value`, `left` and `right`.
  - The generators `pre_order`, `in_order` and `post_order` yield the values
    of a tree.
  - `BST` is a binary search tree that ignores duplicates. It has `insert`,
    `delete` and `in_order`, which returns a list. It supports `in` and
    iteration in ascending order. Deleting a node with two children puts its
    in-order predecessor in its place. Deleting a missing value does nothing.
- `algoplay.maze`:
  - `render_maze(maze)` draws walls (`1`) as `■` and floor (`0`) as two spaces.
  - `Direction` is an enum: `UP`, `DOWN`, `LEFT`, `RIGHT`. A horizontal step
    moves two screen columns.
  - `Monster` walks a path one step at a time with `advance()`, which returns a
    `Move`. It raises `IndexError` once `finished()` is true.
  - `simulate_monsters(path, start, monster_count, interval)` yields every
    `Move`, tick by tick. A new monster appears every `interval` ticks until
    there are `monster_count` of them. An `interval` that is not positive
    raises `ValueError`.

## Installation

```
pip install .
```

## Example

```python
from algoplay.sorting import quick_sort
from algoplay.tree import BST

print(quick_sort([4, 3, 6, 5, 8, 10, 9, 7, 1, 2]))

bst = BST()
for value in (4, 2, 6, 9, 7, 1, 5, 8):
    bst.insert(value)
bst.delete(6)
print(bst.in_order())
print(7 in bst)
```

## Command line

Start the maze animation with:

```
algoplay-maze [--monsters N] [--interval TICKS] [--delay SECONDS]
```

The command clears the terminal and draws the built-in maze. It then sends the
monsters along the built-in path.

| Option       | Default | Meaning                           |
|--------------|---------|-----------------------------------|
| `--monsters` | 5       | number of monsters                |
| `--interval` | 2       | ticks between spawns; must be > 0 |
| `--delay`    | 0.5     | seconds to wait after each move   |

The animation places the cursor with ANSI escape sequences, so it needs a
terminal that understands them. The maze and the path are fixed: the command
cannot load other mazes, and the monsters do not find their own way.

## Tests

```
pip install .[test]
pytest
```