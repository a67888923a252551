# drills

A collection of small, self-contained programming exercises: string
puzzles, grid simulations, linked-list manipulation, a fixed-slot hash
table, a tiny recursive-descent recogniser, number tricks and a few
terminal toys. Every exercise is a plain Python function or class you
can import and call. The package has no dependencies beyond the
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

## What is inside

| Module | What it does |
| --- | --- |
| `drills.grid` | `solution(cards, moves, query)`: moves cards between columns on a 2-D board and returns `[row, column]` of the queried card (empty list if it is not on the board) |
| `drills.atoi` | `my_atoi(s)`: leading signed integer of a string, clamped to the 32-bit range |
| `drills.window` | `min_window(s, t)`: shortest (leftmost) substring of `s` holding every character of `t`, or `""` |
| `drills.substrings` | `find_substring(s, words)`: start indices where `s` holds every word once, in any order |
| `drills.sudoku` | `is_valid_sudoku(board)` checks rows, columns and 3x3 boxes; `transpose(board)` transposes in place |
| `drills.hashtable` | `HashTable`, `HashTableBuilder`, `Parser`, `OpToken`, `OpType`: a 26-slot open-addressing table with tombstones, driven by `A<key>` / `D<key>` commands |
| `drills.regex_ha` | `RegexHa`: recogniser for the pattern `(ha+)+` that explains why a string fails |
| `drills.linkedlist` | `LinkedList` and `Node`: append, insert after a position, look up, remove, push front, reverse, clear |
| `drills.listops` | `ListNode`, `reverse_k_group`, `rotate_right`, `from_values`, `to_values` |
| `drills.vector` | `Vector`: a growable array with an explicit `capacity` (8 slots, doubling), `reserve`, `push_back`, `insert_at`, `front`, `back` |
| `drills.numbers` | `survivor`, `next_power_of_two`, `is_power_of_two`, `binary`, `two_egg_drop`, `monkey_steps`, `new_number_system`, `balanced_248`, `random_bytes` |
| `drills.sequences` | `sort_descending`, `frequencies`, `count_special`, `search_sorted_matrix`, `trilogy`, `has_increasing_triplet`, `count_unique_windows` |
| `drills.document` | `parse_document` into `Document`, `Paragraph` and `Sentence`, with 1-based `paragraph`, `sentence` and `word` lookups |
| `drills.values` | `CommonDataType`: holds a 64-bit integer, float, string or boolean (its `Kind`) and prints each its own way |
| `drills.animals` | `Animal`, `Human`, `Duck`, `ForbiddenDuck` (whose `factory()` returns `None`), and `trigger(animal)` returning the animal's two remarks |
| `drills.points` | `Pair`: a frozen two-component value supporting `+` |
| `drills.progress` | `render_bar`, `percent_line`, `spinner_frame` for terminal progress output |

Invalid input raises: for example `rotate_right` on an empty list,
`reverse_k_group` with `k < 1`, `random_bytes` with a length above 64, or
an out-of-range lookup in a `Document` all raise `ValueError` or
`IndexError`.

## Examples

```python
from drills.atoi import my_atoi
from drills.window import min_window
from drills.substrings import find_substring
from drills.regex_ha import RegexHa
from drills.hashtable import HashTableBuilder

my_atoi(" -042")                                      # -42
min_window("ADOBECODEBANC", "ABC")                    # "BANC"
sorted(find_substring("barfoothefoobarman", ["foo", "bar"]))  # [0, 9]

RegexHa().parse("hahaha")                             # True

table = (
    HashTableBuilder()
    .with_initial_data("Aapple Agrape Dapple Astrawberry Aorange")
    .execute_tokenized_data(True)
    .build()
)
print("\n".join(table.log))   # one "Add: apple true" style line per command
print(table)                  # parsed commands and the state of all 26 slots
```

Linked lists are built from and turned back into plain lists:

```python
from drills.listops import from_values, to_values, reverse_k_group

to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]
```

## Commands

Four exercises can also be run from the shell:

```
drills-hashtable [COMMAND ...]   # run A<key>/D<key> commands (or a sample set) and print the table
drills-regex-ha [TEXT ...]       # check strings (or a sample set) against (ha+)+
drills-document [FILE]           # read a document and queries from FILE or standard input
drills-progress [--delay SECONDS] [--columns N]   # animate a progress bar, a percentage and a spinner
```

`drills-document` expects the paragraph count, then the paragraphs one per
line, then the number of queries, each query being `1 k` (paragraph `k`),
`2 k m` (sentence `k` of paragraph `m`) or `3 k m n` (word `k` of
sentence `m` of paragraph `n`). It prints one answer per query.

`drills-progress` waits `--delay` seconds per frame (0.1 by default) and
takes the width from the terminal unless `--columns` is given.

## Limits

`random_bytes` uses Python's `random` module seeded from the current
time (or the given seed); it is not suitable for anything
security-related. The hash table holds only lowercase keys of at most ten
letters and never grows beyond its 26 slots.