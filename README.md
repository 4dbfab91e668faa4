# rankpuzzles

Small, self-contained solutions to well-known programming-practice puzzles.
Each puzzle is a plain Python function. It takes ordinary values, such as
lists, strings and integers, and returns its answer. No function reads
standard input, and only `print_linked_list` writes output.

## Modules

- `rankpuzzles.arrays`
  - `hourglass_max`: largest hourglass sum in a grid.
  - `array_manipulation`: maximum value after range additions.
  - `reverse_array`, `rotate_left`, `circular_rotation_queries`: reversal and rotation.
  - `matching_strings`: counts of query strings.
  - `dynamic_array`: the XOR-indexed sequences puzzle.
  - `variable_sized_lookup`: indexing into jagged arrays.
  - `larrys_array`: whether the array can be sorted by three-element rotations.
  - `divisible_sum_pairs`: count of pairs whose sum is divisible by k.
  - `equalize_array`: fewest deletions that leave equal elements.
  - `mini_max_sum`: smallest and largest sums of all elements but one.
  - `minimum_distance`: smallest gap between equal elements, or `-1`.
  - `plus_minus`: fractions of positive, negative and zero elements.
  - `diagonal_difference`: difference between the two diagonal sums.
  - `cut_the_sticks`: number of sticks left before each cut.
  - `max_element_queries`: a stack that answers maximum queries.
  - `jesse_cookies`: number of mixes needed, or `-1`.
- `rankpuzzles.strings`
  - `camel_case_words`, `strings_summary`, `is_balanced`.
  - `can_form_palindrome`, `contains_hackerrank`, `anagram_deletions`.
  - `is_pangram`, `count_a_in_repeated`, `to_24_hour`.
  - `share_substring`, `digit_frequencies`.
- `rankpuzzles.mathematics`
  - `army_game_packages`, `reverse_digits`, `beautiful_days`.
  - `extended_euclid`, `mod_inverse`, `handshakes`, `chocolate_feast`.
  - `find_digits`, `kangaroo`, `minimum_triangle_height`, `save_the_prisoner`.
  - `squares_in_range`, `utopian_tree_height`, `day_of_programmer`.
  - `library_fine`, `manasa_stones`.
- `rankpuzzles.simulation`
  - `first_primes`: primes found by trial division.
  - `waiter`: the stacks of plates.
  - `count_fruit_landings`, `cat_and_mouse`, `counting_valleys`.
  - `fair_rations`: returns `None` when the loaves cannot be shared out fairly.
  - `flatland_max_distance`, `jumping_on_clouds`, `special_problems` (Lisa's workbook).
  - `service_lane`, `round_grade`, `grade_students`, `cavity_map`.
- `rankpuzzles.patterns`
  - `staircase`: returns the rows of the staircase as strings.
  - `concentric_pattern`: returns the number square as lists of ints.
- `rankpuzzles.linkedlist`
  - `Node` and `SinglyLinkedList`. The list can be built from an iterable, extended with `insert_node`, and iterated.
  - `iter_values`, `format_list`, `print_linked_list`.
  - `compare_lists`, `delete_node`, `reverse_list`, `get_node_from_tail`.
  - `insert_at_head`, `insert_at_position`, `insert_at_tail`.

Invalid input raises `ValueError` or `IndexError`. Examples are an empty
sequence where one is needed, a non-square matrix, or a position outside a
list.

## Example

```python
from rankpuzzles.strings import is_balanced, to_24_hour
from rankpuzzles.mathematics import day_of_programmer
from rankpuzzles.linkedlist import SinglyLinkedList, format_list, get_node_from_tail

is_balanced("{[()]}")        # True
to_24_hour("07:05:45PM")     # "19:05:45"
day_of_programmer(2017)      # "13.09.2017"

lst = SinglyLinkedList([1, 2, 3])
get_node_from_tail(lst.head, 0)  # 3
format_list(lst.head, " ")       # "1 2 3"
```

## What it does not do

The package has no command-line program. It does not parse puzzle input
from standard input or from files, and it does not print answers in a
judge's output format. Callers pass the values to the functions and
format the results themselves.

## Running the tests

```
pip install .[test]
pytest
```