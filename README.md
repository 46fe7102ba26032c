# algodrills

A collection of small, self-contained practice problems of the kind that turn
up in coding interviews and aptitude rounds. Each one is a plain function
(or a small class) that uses only the standard library.

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

| Module | Contents |
| --- | --- |
| `algodrills.strings` | `is_anagram`, `is_rotation`, `parity_matches`, `is_isomorphic`, `largest_odd_substring`, `largest_odd_prefix`, `reverse_words`, `remove_outer_parentheses`, `longest_common_prefix`, `sort_by_frequency` |
| `algodrills.accenture` | `operations_binary_string`, `difference_of_sums`, `large_small_sum`, `spiral_order`, `count_case`, `correct_format`, `cake_pieces`, `count_superiors` |
| `algodrills.basic_maths` | `count_digits`, `divisors`, `hcf`, `is_palindrome_number`, `is_prime`, `reverse_bits`, `reverse_digits`, `sum_of_divisors_up_to`, `is_armstrong` |
| `algodrills.daily` | `count_senior_citizens`, `same_elements` |
| `algodrills.techmahindra` | `total_tax`, `unique_sorted`, `shift_encrypt` |
| `algodrills.linked_list` | `Node`, `from_values`, `to_values`, `insert_at_end`, `delete_at_end`, `delete_at_position`, `insert_at_position`, `middle_node`, `reverse`, `has_cycle`, `cycle_start`, `main` |
| `algodrills.patterns` | `pattern10` to `pattern22`: star, number and letter shapes, each returned as a string of newline-terminated rows |
| `algodrills.trie` | `Trie` with `insert`, `search`, `starts_with` and `longest_common_prefix` |

Malformed input raises `ValueError`: for example `reverse_words` on text with
no words, `longest_common_prefix` on an empty collection,
`operations_binary_string` on an expression that does not alternate binary
digits and operators, `reverse_bits` on a value outside 32 unsigned bits, and
`count_senior_citizens` on a record without a two-digit age field.

## Examples

```python
from algodrills.strings import is_anagram, reverse_words
from algodrills.accenture import spiral_order
from algodrills.basic_maths import hcf
from algodrills.patterns import pattern21
from algodrills.trie import Trie

is_anagram("silent", "listen")            # True
reverse_words("the   sky   is   blue")    # "blue is sky the"
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
hcf(15, 6)                                # 3
print(pattern21(3), end="")
# ***
# * *
# ***

trie = Trie()
for word in ("striver", "striving", "string", "strike"):
    trie.insert(word)
trie.search("strike")        # True
trie.search("strawberry")    # False
trie.starts_with("stri")     # True
```

Linked lists are built from and turned back into plain Python lists, and a
`Node` can be iterated to get the values from it onwards:

```python
from algodrills.linked_list import from_values, to_values, reverse, insert_at_position

head = from_values([2, 3, 4, 1, 6, 5])
head = reverse(head)
to_values(head)                          # [5, 6, 1, 4, 3, 2]
head = insert_at_position(head, 1, 9)
list(head)                               # [9, 5, 6, 1, 4, 3, 2]
```

Positions are 1-based; `insert_at_position` and `delete_at_position` leave
the list unchanged when the position is out of range.

## Command line

The linked-list operations can be tried interactively:

```
algodrills-linked-list
```

It reads from standard input: first the number of test cases, then for each
case a line of elements, a value to append, a position to delete, a position
and value to insert. It prints the list after insertion at the end, deletion
at the position, insertion at the position and finally deletion at the end.
No other module has a command; the rest of the package is used from Python.