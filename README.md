# algodrills

A collection of small, well-known algorithms on lists, strings, integers and
singly linked lists. It needs nothing outside the standard library and runs on
Python 3.10 and later.

## Installation

```
pip install .
```

Use `pip install .[test]` to get the test requirements as well.

## Modules

### `algodrills.arrays`

`two_sum`, `contains_duplicate`, `product_except_self`, `max_area`, `trap`,
`set_zeroes`, `sort_colors`, `max_profit`, `longest_consecutive`,
`two_sum_sorted`, `majority_element`, `rotate`, `subarray_sum`,
`longest_ones`, `rearrange_array`, `sort_even_odd`.

- `two_sum` and `two_sum_sorted` return an empty list when no pair exists;
  `two_sum_sorted` gives 1-based indices.
- `majority_element` returns `-1` when no value occurs more than half the time.
- `rearrange_array` raises `ValueError` unless there are as many negative
  values as non-negative ones.
- `set_zeroes`, `sort_colors` and `rotate` change the list they are given and
  return `None`; `sort_even_odd` sorts in place and returns the same list.

### `algodrills.searching`

- `search_range(nums, target)`: first and last index of `target` in a sorted
  list, or `[-1, -1]`.
- `search_insert(nums, target)`: index of `target`, or where it would be
  inserted.
- `search(nums, target)`: sorts `nums` in place, then returns an index of
  `target` in it, or `-1`.

### `algodrills.strings`

`is_anagram`, `group_anagrams`, `length_of_longest_substring`,
`roman_to_int`, `is_valid_parentheses`, `is_palindrome`, `reverse_words`,
`is_isomorphic`, `character_replacement`, `frequency_sort`, `rotate_string`,
`number_of_substrings`, `max_depth`, `largest_odd_number`.

- `roman_to_int` raises `ValueError` on a character that is not a Roman
  numeral symbol.
- `group_anagrams` returns groups in order of first appearance.
- `frequency_sort` breaks ties in frequency by putting the larger character
  first.

### `algodrills.numbers`

- `reverse_integer(x)`: reverses the decimal digits, keeping the sign;
  returns `0` if the result does not fit a signed 32-bit integer.
- `smallest_number(num)`: rearranges the digits into the smallest value with
  no leading zero, keeping the sign.
- `count_operations(num1, num2)`: counts subtractions of the smaller from the
  larger until one reaches zero; raises `ValueError` for negative arguments.

### `algodrills.linked_list`

`ListNode` (with `val` and `next`), plus `build_list` and `list_values` for
moving between Python iterables and linked lists, and `add_two_numbers`,
`remove_nth_from_end`, `has_cycle`, `detect_cycle`, `sort_list`,
`get_intersection_node`, `reverse_list`, `is_palindrome_list`,
`delete_node`, `odd_even_list`, `middle_node`, `delete_middle`.

- `remove_nth_from_end` raises `ValueError` if `n` is below 1 or larger than
  the list; `delete_node` raises `ValueError` when given the last node.
- `sort_list`, `reverse_list`, `odd_even_list`, `delete_node`,
  `remove_nth_from_end` and `delete_middle` rearrange the nodes they are
  given rather than building new ones.
- `middle_node` returns the second of two middles.

### `algodrills.stack`

`QueueStack`: a LIFO stack kept in a single queue, with `push`, `pop`, `top`,
`empty` and `len()`. `pop` and `top` raise `IndexError` on an empty stack.

## Examples

```python
from algodrills.arrays import two_sum, trap
from algodrills.strings import roman_to_int
from algodrills.linked_list import build_list, list_values, reverse_list
from algodrills.stack import QueueStack

two_sum([2, 7, 11, 15], 9)                   # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
roman_to_int("MCMXCIV")                      # 1994

head = build_list([1, 2, 3])
list_values(reverse_list(head))              # [3, 2, 1]

stack = QueueStack()
stack.push(1)
stack.push(2)
stack.pop()                                  # 2
```

## What it does not do

This is a library only: there is no command-line program, and nothing reads
input or prints results. Call the functions from your own code.

## Running the tests

```
pytest
```