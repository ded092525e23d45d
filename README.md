# dsworkbench

A small collection of classic data structures and text utilities in plain
Python, with no runtime dependencies.

## What is inside

| Module | What it provides |
| --- | --- |
| `dsworkbench.streamops` | `StreamOperation`, which copies a text stream line by line, optionally dropping (and counting) blank lines, numbering lines and replacing a substring, while counting ASCII letters; helpers `replace_all`, `count_alpha` and `process_file` |
| `dsworkbench.tree` | `BinarySearchTree`: `insert`, `delete`, `in`, `len`, `in_order`, `pre_order`, `post_order`, `load` (whitespace-separated integers) and `render` |
| `dsworkbench.tree_report` | `build_report`, `format_divider` and `format_count`, which produce a text report of a tree loaded from integers |
| `dsworkbench.primes` | `primes_trial_division` and `primes_sieve` (Sieve of Eratosthenes) |
| `dsworkbench.cards` | `new_deck`, `shuffled_deck` and `display` for a deck of cards numbered 1 to 52 |
| `dsworkbench.deque` | `LinkedDeque`, a doubly linked deque with `push_front`/`push_back`, `pop_front`/`pop_back`, `front`/`back`, indexing (negative indices allowed) and `remove_at` |
| `dsworkbench.priority_queue` | `PriorityQueue`, created with a first element, with `maximum`, `minimum`, `insert`, `delete`, `search` and `display` |
| `dsworkbench.linked_list` | `IntList`, a list of integers that grows at the head, with `remove`, `show`, `extract_largest`, `split_odd_even` and `split_big_small` |
| `dsworkbench.template_list` | `DoublyLinkedList` (`add_to_front`, `add_to_back`, `get_first`, `get_rest`, `show`) and `reverse` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsworkbench.tree import BinarySearchTree
from dsworkbench.primes import primes_sieve
from dsworkbench.template_list import DoublyLinkedList, reverse

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
print(list(tree.in_order()))      # [20, 30, 40, 50, 70]
tree.delete(30)
print(30 in tree, len(tree))      # False 4

print(primes_sieve(30))           # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

items = DoublyLinkedList()
items.add_to_back("one(1)")
items.add_to_front("nine(9)")
items.add_to_back("eight(8)")
print(list(reverse(items)))       # ['eight(8)', 'one(1)', 'nine(9)']
```

Some behaviours worth knowing:

- `BinarySearchTree` puts values equal to an existing one in its right
  subtree; deleting a node with two children replaces it with the largest
  value of its left subtree. `render()` right-aligns each value in three
  columns, or returns `"Tree is empty\n"`.
- `PriorityQueue.delete` raises `ValueError` when only one element is left,
  and returns `False` when the value is absent.
- `LinkedDeque.pop_front`, `pop_back`, `front` and `back` raise `IndexError`
  on an empty deque; `IntList.remove` and `IntList.extract_largest` return
  `None` on an empty list.
- `replace_all` raises `ValueError` for an empty search string, or when the
  replacement would keep matching forever.

## Command-line tools

Installing the package provides these commands:

- `dsworkbench-streamops [INPUT OUTPUT]` copies a text file, removing blank
  lines, numbering the remaining ones and replacing every `;` with
  `SEMI-COLON`, then appends `Lines Removed: N` and
  `Alphabetic Characters: M`. With no arguments it uses the default file
  names set in the module (`DEFAULT_INPUT`, `DEFAULT_OUTPUT`) in the current
  directory; with any other number of arguments it prints a usage line.
- `dsworkbench-tree-report [INPUT OUTPUT]` loads the integers in `INPUT`
  (default `tree.txt`) into a binary search tree and writes a report of the
  empty tree, the loaded tree in order and its node count to `OUTPUT`
  (default `treeOut.txt`).
- `dsworkbench-primes [LIMIT]` prints every prime up to `LIMIT`; without an
  argument it asks for the limit on standard input.
- `dsworkbench-cards [--seed N]` prints the cards 1 to 52, then prints them
  again shuffled; `--seed` makes the shuffle repeatable, and `-h` shows help.
- `dsworkbench-reverse` builds a short list of strings, shows it, and shows
  its reversed copy.

## What it does not do

The structures are kept in memory only; nothing is stored between runs. The
binary search tree is not self-balancing, and the priority queue finds its
maximum and minimum by a linear scan rather than keeping a heap. The commands
are simple file and console tools with no interactive menus.